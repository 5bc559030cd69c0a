"""
Lorentz tensor and Dirac algebra used to assemble exclusive amplitudes.

    from lorentz import four_vector, contract, GAMMA_5, helicity_spinor
"""

from __future__ import annotations

from .kinds import ElementKind, kind_of
from .dirac import (
    GAMMA,
    GAMMA_0,
    GAMMA_1,
    GAMMA_2,
    GAMMA_3,
    GAMMA_5,
    IDENTITY,
    ZERO_MATRIX,
    DiracMatrix,
    DiracSpinor,
    helicity_spinor,
    two_component_spinor,
)
from .tensor import (
    LORENTZ_INDICES,
    LorentzIndex,
    LorentzTensor,
    four_vector,
    gamma_vector,
    metric,
    metric_tensor,
    outer,
    permutations,
    scalar,
)
from .contract import contract, slash

__all__ = [
    # kinds
    "ElementKind",
    "kind_of",
    # dirac algebra
    "DiracMatrix",
    "DiracSpinor",
    "GAMMA",
    "GAMMA_0",
    "GAMMA_1",
    "GAMMA_2",
    "GAMMA_3",
    "GAMMA_5",
    "IDENTITY",
    "ZERO_MATRIX",
    "helicity_spinor",
    "two_component_spinor",
    # tensors
    "LorentzIndex",
    "LORENTZ_INDICES",
    "LorentzTensor",
    "metric",
    "permutations",
    "scalar",
    "four_vector",
    "outer",
    "metric_tensor",
    "gamma_vector",
    # contraction
    "contract",
    "slash",
]

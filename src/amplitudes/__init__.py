"""
Public entrypoint for exclusive amplitudes and their building blocks.

This package lives inside `src/`, which is added to `sys.path` by the scripts
and tests:

    from amplitudes import PseudoscalarExchange, regge_propagator, ...
"""

from __future__ import annotations

from .quantum_numbers import (
    AXIAL_VECTOR,
    HALF_MINUS,
    HALF_PLUS,
    PSEUDOSCALAR,
    SCALAR,
    THREEHALF_MINUS,
    THREEHALF_PLUS,
    VECTOR,
    check_JP,
    resonance_quantum_numbers,
)
from .propagators import (
    cgamma,
    exponential_form_factor,
    fixed_spin_propagator,
    regge_propagator,
    signature_factor,
)
from .covariants import cm_momenta, conjugate, polarization_vector, recoil_spinor, target_spinor
from .base import Amplitude
from .pseudoscalar_exchange import PseudoscalarExchange
from .defaults import B_PION, G_B1, G_NN, b1_kinematics, b1_pion_exchange, pion_trajectory

__all__ = [
    # quantum numbers
    "PSEUDOSCALAR",
    "SCALAR",
    "VECTOR",
    "AXIAL_VECTOR",
    "HALF_PLUS",
    "HALF_MINUS",
    "THREEHALF_PLUS",
    "THREEHALF_MINUS",
    "check_JP",
    "resonance_quantum_numbers",
    # propagators
    "cgamma",
    "signature_factor",
    "regge_propagator",
    "fixed_spin_propagator",
    "exponential_form_factor",
    # covariants
    "cm_momenta",
    "conjugate",
    "polarization_vector",
    "target_spinor",
    "recoil_spinor",
    # amplitudes
    "Amplitude",
    "PseudoscalarExchange",
    # defaults
    "G_B1",
    "G_NN",
    "B_PION",
    "pion_trajectory",
    "b1_kinematics",
    "b1_pion_exchange",
]

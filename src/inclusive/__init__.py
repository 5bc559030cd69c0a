"""
Public entrypoint for inclusive (one particle detected) cross-sections.

    from inclusive import TripleRegge, SigmaOption, parallel_xsection_grid
"""

from __future__ import annotations

from .sigma_total import (
    PIMP_PDG_PARAMS,
    PIPP_PDG_PARAMS,
    PDGParameterization,
    ReggePoleParameterization,
    SigmaOption,
    SigmaTotal,
    TabulatedXSection,
    ZeroXSection,
    make_sigma_total,
)
from .triple_regge import TripleRegge
from .grid import OBSERVABLES, parallel_xsection_grid

__all__ = [
    "SigmaTotal",
    "ZeroXSection",
    "PDGParameterization",
    "ReggePoleParameterization",
    "TabulatedXSection",
    "PIPP_PDG_PARAMS",
    "PIMP_PDG_PARAMS",
    "SigmaOption",
    "make_sigma_total",
    "TripleRegge",
    "OBSERVABLES",
    "parallel_xsection_grid",
]

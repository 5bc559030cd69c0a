"""
Total hadronic cross-sections used at the bottom vertex of the triple-Regge
interaction. Every sub-model returns millibarn as a function of the invariant
mass squared of the scattering pair.
"""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod

import numpy as np

from model import PDG


class SigmaTotal(ABC):
    """Sub-model interface: a single `eval(s)` returning sigma_tot in mb."""

    @abstractmethod
    def eval(self, s):
        ...

    def __call__(self, s):
        return self.eval(s)


class ZeroXSection(SigmaTotal):
    def eval(self, s):
        return 0.0


class PDGParameterization(SigmaTotal):
    """
    Universal high-energy fit of the Review of Particle Physics,

        sigma = delta (H log^2(s/s_ab) + P) + R1 (s_ab/s)^eta1 - iso R2 (s_ab/s)^eta2

    with s_ab = (m1 + m2 + M)^2. `params` is (iso, delta, R1, R2, P); iso = +1
    for the particle-particle channel and -1 for the antiparticle one.
    """

    M = 2.1206
    H = 0.2720
    eta1 = 0.4473
    eta2 = 0.5486

    def __init__(self, m1, m2, params):
        if len(params) != 5:
            raise ValueError(f"PDG parameterization takes 5 parameters, got {len(params)}")
        self.m1, self.m2 = float(m1), float(m2)
        self.iso, self.delta, self.R1, self.R2, self.P = (float(p) for p in params)
        self.sth = (self.m1 + self.m2) ** 2
        self.sab = (self.m1 + self.m2 + self.M) ** 2

    def eval(self, s):
        if s <= self.sth:
            return 0.0
        ratio = self.sab / s
        pomeron = self.delta * (self.H * np.log(s / self.sab) ** 2 + self.P)
        reggeons = self.R1 * ratio**self.eta1 - self.iso * self.R2 * ratio**self.eta2
        return float(pomeron + reggeons)


class ReggePoleParameterization(SigmaTotal):
    """Donnachie-Landshoff pomeron plus reggeon fit to pi p total cross-sections."""

    epsilon = 0.0808
    eta = 0.4525
    pomeron = 13.63
    reggeon = {+1: 27.56, -1: 36.02}

    def __init__(self, iso, m1=PDG.pion, m2=PDG.proton):
        if iso not in self.reggeon:
            raise ValueError(f"iso must be +1 or -1, got {iso}")
        self.iso = iso
        self.sth = (m1 + m2) ** 2

    def eval(self, s):
        if s <= self.sth:
            return 0.0
        return float(self.pomeron * s**self.epsilon + self.reggeon[self.iso] * s ** (-self.eta))


class TabulatedXSection(SigmaTotal):
    """
    Linear interpolation of measured values in sqrt(s). Outside the table the
    `fallback` model takes over.
    """

    def __init__(self, sqrt_s, sigma, fallback=None):
        sqrt_s = np.asarray(sqrt_s, dtype=float)
        sigma = np.asarray(sigma, dtype=float)
        if sqrt_s.shape != sigma.shape or sqrt_s.ndim != 1 or sqrt_s.size < 2:
            raise ValueError("Tabulated cross-section needs two matching 1D arrays of length >= 2")
        order = np.argsort(sqrt_s)
        self.sqrt_s = sqrt_s[order]
        self.sigma = sigma[order]
        self.fallback = fallback if fallback is not None else ZeroXSection()

    def eval(self, s):
        w = np.sqrt(s)
        if w < self.sqrt_s[0] or w > self.sqrt_s[-1]:
            return self.fallback.eval(s)
        return float(np.interp(w, self.sqrt_s, self.sigma))


# pi p fit parameters (iso, delta, R1, R2, P)
PIPP_PDG_PARAMS = (+1.0, 1.0, 9.56, 1.767, 18.75)
PIMP_PDG_PARAMS = (-1.0, 1.0, 9.56, 1.767, 18.75)


class SigmaOption(enum.Enum):
    ZERO = "zero"
    PDG_PIPP_ONLY_REGGE = "pdg_pipp_only_regge"
    PDG_PIMP_ONLY_REGGE = "pdg_pimp_only_regge"
    DL_PIPP_ONLY_REGGE = "dl_pipp_only_regge"
    DL_PIMP_ONLY_REGGE = "dl_pimp_only_regge"


def make_sigma_total(option, constants=PDG):
    """Build the sub-model named by a `SigmaOption` (or its value string)."""
    try:
        option = SigmaOption(option)
    except ValueError:
        raise ValueError(f"Unknown total cross-section option {option!r}") from None

    if option is SigmaOption.PDG_PIPP_ONLY_REGGE:
        return PDGParameterization(constants.pion, constants.proton, PIPP_PDG_PARAMS)
    if option is SigmaOption.PDG_PIMP_ONLY_REGGE:
        return PDGParameterization(constants.pion, constants.proton, PIMP_PDG_PARAMS)
    if option is SigmaOption.DL_PIPP_ONLY_REGGE:
        return ReggePoleParameterization(+1, constants.pion, constants.proton)
    if option is SigmaOption.DL_PIMP_ONLY_REGGE:
        return ReggePoleParameterization(-1, constants.pion, constants.proton)
    return ZeroXSection()


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
]

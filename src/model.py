"""
Physical constants, reaction kinematics and Regge trajectories.

Everything here is a plain function table for the amplitude code: nothing in
this module knows about helicity amplitudes or cross-sections. Units are GeV
throughout; baryon spins and helicities are stored doubled (2J, 2*lambda) so
that they stay integers.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from scipy.optimize import brentq


@dataclass(frozen=True)
class PhysicalConstants:
    """Immutable table of masses and couplings shared by the amplitudes."""

    proton: float = 0.938272
    pion: float = 0.13957
    b1: float = 1.2295
    rho: float = 0.77526
    omega: float = 0.78265
    d_meson: float = 1.86965
    d_star: float = 2.01026
    lambda_c: float = 2.28646
    jpsi: float = 3.0969
    alpha_em: float = 1.0 / 137.035999
    # hbar^2 c^2 in nb GeV^2
    gev2_to_nb: float = 0.389379e6

    @property
    def e(self):
        return math.sqrt(4.0 * math.pi * self.alpha_em)


PDG = PhysicalConstants()


def kallen(a, b, c):
    """Källén triangle function lambda(a, b, c)."""
    return a * a + b * b + c * c - 2.0 * (a * b + b * c + c * a)


def csqrt(x):
    """Square root continued to the upper half plane for negative arguments."""
    return np.sqrt(np.asarray(x, dtype=np.complex128))


class LinearTrajectory:
    """Real linear Regge trajectory alpha(t) = alpha_0 + alpha' t."""

    def __init__(self, signature, intercept, slope, min_J=0, name="trajectory"):
        if signature not in (-1, 1):
            raise ValueError(f"signature must be +1 or -1, got {signature}")
        self.signature = signature
        self.intercept = float(intercept)
        self._slope = float(slope)
        self.min_J = int(min_J)
        self.name = name

    def eval(self, t):
        return self.intercept + self._slope * t

    def slope(self, t=None):
        return self._slope

    def set_minJ(self, J):
        self.min_J = int(J)

    def __repr__(self):
        return (
            f"LinearTrajectory(signature={self.signature:+d}, "
            f"intercept={self.intercept}, slope={self._slope}, min_J={self.min_J})"
        )


class ReactionKinematics:
    """
    Two-body kinematics for beam + target -> meson + baryon.

    The beam defaults to a real photon and the target and recoil to protons.
    Momenta are returned as complex numbers so that sub-threshold values
    continue analytically instead of raising.
    """

    def __init__(
        self,
        meson_mass,
        baryon_mass=None,
        beam_mass=0.0,
        target_mass=None,
        constants=PDG,
    ):
        self.constants = constants
        self.mX = float(meson_mass)
        self.mR = float(constants.proton if baryon_mass is None else baryon_mass)
        self.mB = float(beam_mass)
        self.mT = float(constants.proton if target_mass is None else target_mass)

        self.mX2 = self.mX**2
        self.mR2 = self.mR**2
        self.mB2 = self.mB**2
        self.mT2 = self.mT**2

        self.sth = (self.mX + self.mR) ** 2
        self.Wth = self.mX + self.mR

        # vector meson + spin-1/2 baryon unless told otherwise
        self.meson_JP = (1, -1)
        self.baryon_JP = (1, +1)
        self._helicities = self._build_helicities()

    # ------------------------------------------------------------------
    # Quantum numbers

    def set_meson_JP(self, J, P):
        if P not in (-1, 1):
            raise ValueError(f"Invalid meson parity {P}")
        if J < 0:
            raise ValueError(f"Invalid meson spin {J}")
        self.meson_JP = (int(J), int(P))
        self._helicities = self._build_helicities()

    def set_baryon_JP(self, J2, P):
        if P not in (-1, 1):
            raise ValueError(f"Invalid baryon parity {P}")
        if J2 < 1 or J2 % 2 != 1:
            raise ValueError(f"Baryon spin must be half-integer, got 2J = {J2}")
        self.baryon_JP = (int(J2), int(P))
        self._helicities = self._build_helicities()

    def _build_helicities(self):
        beam = (1, -1) if self.mB == 0.0 else (1, 0, -1)
        target = (1, -1)
        J = self.meson_JP[0]
        meson = tuple(range(J, -J - 1, -1))
        J2 = self.baryon_JP[0]
        recoil = tuple(range(J2, -J2 - 1, -2))
        return [
            (lb, lt, lm, lr)
            for lb in beam
            for lt in target
            for lm in meson
            for lr in recoil
        ]

    def helicities(self, index=None):
        if index is None:
            return list(self._helicities)
        return self._helicities[index]

    @property
    def n_amps(self):
        return len(self._helicities)

    # ------------------------------------------------------------------
    # Energies and momenta in the center-of-mass frame

    def initial_momentum(self, s):
        return complex(csqrt(kallen(s, self.mB2, self.mT2)) / csqrt(4.0 * s))

    def final_momentum(self, s):
        return complex(csqrt(kallen(s, self.mX2, self.mR2)) / csqrt(4.0 * s))

    def beam_energy(self, s):
        return (s + self.mB2 - self.mT2) / (2.0 * math.sqrt(s))

    def target_energy(self, s):
        return (s - self.mB2 + self.mT2) / (2.0 * math.sqrt(s))

    def meson_energy(self, s):
        return (s + self.mX2 - self.mR2) / (2.0 * math.sqrt(s))

    def baryon_energy(self, s):
        return (s - self.mX2 + self.mR2) / (2.0 * math.sqrt(s))

    # ------------------------------------------------------------------
    # Invariants

    def t_man(self, s, theta):
        qi = self.initial_momentum(s).real
        qf = self.final_momentum(s).real
        return self.mX2 + self.mB2 - 2.0 * (
            self.beam_energy(s) * self.meson_energy(s) - qi * qf * math.cos(theta)
        )

    def z_s(self, s, t):
        qi = self.initial_momentum(s).real
        qf = self.final_momentum(s).real
        return (t - self.mX2 - self.mB2 + 2.0 * self.beam_energy(s) * self.meson_energy(s)) / (
            2.0 * qi * qf
        )

    def theta_s(self, s, t):
        return math.acos(min(1.0, max(-1.0, self.z_s(s, t))))

    def t_min(self, s):
        return self.t_man(s, 0.0)

    def t_max(self, s):
        return self.t_man(s, math.pi)


class InclusiveKinematics:
    """
    Kinematics of beam + target -> X + (anything of invariant mass M).

    Only the produced particle X is detected; the recoiling system is
    integrated over through its missing mass squared M2.
    """

    def __init__(self, produced_mass, target_mass=None, beam_mass=0.0, minimal_M2=None, constants=PDG):
        self.constants = constants
        self.mX = float(produced_mass)
        self.mT = float(constants.proton if target_mass is None else target_mass)
        self.mB = float(beam_mass)
        self.mX2 = self.mX**2
        self.mT2 = self.mT**2
        self.mB2 = self.mB**2
        if minimal_M2 is None:
            minimal_M2 = (constants.proton + constants.pion) ** 2
        self.minimal_M2 = float(minimal_M2)

    def beam_momentum(self, s):
        return math.sqrt(kallen(s, self.mB2, self.mT2)) / (2.0 * math.sqrt(s))

    def beam_energy(self, s):
        return (s + self.mB2 - self.mT2) / (2.0 * math.sqrt(s))

    def produced_energy(self, s, M2):
        return (s + self.mX2 - M2) / (2.0 * math.sqrt(s))

    def produced_momentum(self, s, M2):
        # clamp rounding noise at the kinematic endpoint M2 = (sqrt(s) - mX)^2
        return math.sqrt(max(kallen(s, self.mX2, M2), 0.0)) / (2.0 * math.sqrt(s))

    def M2max(self, s):
        return (math.sqrt(s) - self.mX) ** 2

    def _t(self, s, M2, cos_theta):
        q = self.beam_momentum(s)
        E = self.produced_energy(s, M2)
        p = self.produced_momentum(s, M2)
        return self.mX2 + self.mB2 - 2.0 * (self.beam_energy(s) * E - q * p * cos_theta)

    def t_min_from_M2(self, s, M2):
        """Forward limit: the largest (least negative) t at fixed M2."""
        return self._t(s, M2, 1.0)

    def t_max_from_M2(self, s, M2):
        """Backward limit: the most negative t at fixed M2."""
        return self._t(s, M2, -1.0)

    def t_bounds(self, s, M2):
        return self.t_max_from_M2(s, M2), self.t_min_from_M2(s, M2)

    def M2_max_from_t(self, s, t):
        """Largest M2 for which t is still inside the physical region."""
        M2_lo, M2_hi = self.minimal_M2, self.M2max(s)
        t_lo, t_hi = self.t_bounds(s, M2_lo)
        if t < t_lo or t > t_hi:
            return M2_lo

        t_end = self.t_min_from_M2(s, M2_hi)
        if t >= t_end:
            f = lambda M2: self.t_min_from_M2(s, M2) - t  # noqa: E731
        else:
            f = lambda M2: t - self.t_max_from_M2(s, M2)  # noqa: E731

        if f(M2_hi) >= 0.0:
            return M2_hi
        return brentq(f, M2_lo, M2_hi, xtol=1e-12, rtol=1e-10)

    # ------------------------------------------------------------------
    # Alternative variables

    @staticmethod
    def x_from_M2(s, M2):
        return 1.0 - M2 / s

    @staticmethod
    def M2_from_x(s, x):
        return s * (1.0 - x)

    def longitudinal_momentum(self, s, t, M2):
        q = self.beam_momentum(s)
        E = self.produced_energy(s, M2)
        return (t - self.mX2 - self.mB2 + 2.0 * self.beam_energy(s) * E) / (2.0 * q)

    def transverse_momentum2(self, s, t, M2):
        p = self.produced_momentum(s, M2)
        pL = self.longitudinal_momentum(s, t, M2)
        return p * p - pL * pL

    def t_from_pT2(self, s, M2, pT2):
        """Forward and backward t values with the given transverse momentum."""
        p = self.produced_momentum(s, M2)
        if pT2 > p * p:
            return ()
        pL = math.sqrt(p * p - pT2)
        q = self.beam_momentum(s)
        E = self.produced_energy(s, M2)
        base = self.mX2 + self.mB2 - 2.0 * self.beam_energy(s) * E
        return (base + 2.0 * q * pL, base - 2.0 * q * pL)


__all__ = [
    "PhysicalConstants",
    "PDG",
    "kallen",
    "csqrt",
    "LinearTrajectory",
    "ReactionKinematics",
    "InclusiveKinematics",
]

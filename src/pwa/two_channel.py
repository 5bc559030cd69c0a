"""Two coupled channels in the scattering-length approximation of the K-matrix."""

from __future__ import annotations

from typing import NamedTuple

import numpy as np
from scipy.special import eval_legendre

from amplitudes import AXIAL_VECTOR, HALF_MINUS, HALF_PLUS, PSEUDOSCALAR, VECTOR, Amplitude
from model import csqrt, kallen

from .chew_mandelstam import chew_mandelstam, chew_mandelstam_grid


class KMatrixState(NamedTuple):
    """Everything derived at one value of s. Built fresh on every call."""

    q: tuple
    G: tuple
    B: tuple
    K00: complex
    K01: complex
    K11: complex
    D: complex
    detK: complex
    A00: complex
    A01: complex

    @property
    def amplitude(self):
        return self.B[0] * (1 + self.G[0] * self.A00) + self.B[1] * self.G[1] * self.A01


class TwoChannelKMatrix(Amplitude):
    """
    Unitarized partial wave of orbital angular momentum J.

    Channel 0 is the production final state of `kinematics` and channel 1 a
    rescattering channel with masses `masses`. The five parameters are the
    K-matrix scattering lengths a00, a01, a11 and the production
    normalizations b0, b1. Every K-matrix element and production piece is
    scaled by a single momentum product raised to the power J.
    """

    name = "scattering_length"
    n_params = 5

    def __init__(self, kinematics, J, masses, identifier=None):
        super().__init__(kinematics, identifier)
        if J < 0:
            raise ValueError(f"Partial wave must be non-negative, got J = {J}")
        self.J = int(J)
        self.m1, self.m2 = (float(m) for m in masses)

        self.a00 = self.a01 = self.a11 = 0.0
        self.b0 = self.b1 = 0.0

    def allowed_meson_JP(self):
        return [PSEUDOSCALAR, VECTOR, AXIAL_VECTOR]

    def allowed_baryon_JP(self):
        return [HALF_PLUS, HALF_MINUS]

    def parameter_labels(self):
        J = str(self.J)
        return [f"a00[{J}]", f"a01[{J}]", f"a11[{J}]", f"b0[{J}]", f"b1[{J}]"]

    def _allocate_parameters(self, params):
        self.a00, self.a01, self.a11, self.b0, self.b1 = params

    # ------------------------------------------------------------------

    def state(self, s):
        kin = self.kinematics
        J = self.J

        q0 = kin.final_momentum(s)
        q1 = complex(csqrt(kallen(s, self.m1**2, self.m2**2)) / csqrt(4.0 * s))
        p = kin.initial_momentum(s)

        G0 = chew_mandelstam(s, kin.mX, kin.mR)
        G1 = chew_mandelstam(s, self.m1, self.m2)

        B0 = (p * q0) ** J * self.b0
        B1 = (p * q1) ** J * self.b1

        K00 = (q0 * q0) ** J * self.a00
        K01 = (q0 * q1) ** J * self.a01
        K11 = (q1 * q1) ** J * self.a11

        D = (1 - G0 * K00) * (1 - G1 * K11) - G0 * G1 * K01 * K01
        detK = K00 * K11 - K01 * K01

        A00 = (K00 - G1 * detK) / D
        A01 = K01 / D

        return KMatrixState((q0, q1), (G0, G1), (B0, B1), K00, K01, K11, D, detK, A00, A01)

    def evaluate(self, s):
        return self.state(s).amplitude

    def evaluate_grid(self, s_values):
        """Vectorized `evaluate` over an array of s values."""
        kin = self.kinematics
        J = self.J
        s = np.asarray(s_values, dtype=np.float64)

        root_4s = csqrt(4.0 * s)
        q0 = csqrt(kallen(s, kin.mX2, kin.mR2)) / root_4s
        q1 = csqrt(kallen(s, self.m1**2, self.m2**2)) / root_4s
        p = csqrt(kallen(s, kin.mB2, kin.mT2)) / root_4s

        G0 = chew_mandelstam_grid(s, kin.mX, kin.mR)
        G1 = chew_mandelstam_grid(s, self.m1, self.m2)

        B0 = (p * q0) ** J * self.b0
        B1 = (p * q1) ** J * self.b1
        K00 = (q0 * q0) ** J * self.a00
        K01 = (q0 * q1) ** J * self.a01
        K11 = (q1 * q1) ** J * self.a11

        D = (1 - G0 * K00) * (1 - G1 * K11) - G0 * G1 * K01 * K01
        detK = K00 * K11 - K01 * K01
        A00 = (K00 - G1 * detK) / D
        A01 = K01 / D
        return B0 * (1 + G0 * A00) + B1 * G1 * A01

    def helicity_amplitude(self, helicities, s, t):
        # the projection is helicity independent; keep a single combination
        if tuple(helicities) != self.kinematics.helicities(0):
            return 0j
        z = self.kinematics.z_s(s, t)
        return np.sqrt(2.0) * (2 * self.J + 1) * eval_legendre(self.J, z) * self.evaluate(s)


__all__ = ["KMatrixState", "TwoChannelKMatrix"]

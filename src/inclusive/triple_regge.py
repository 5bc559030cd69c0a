"""
Inclusive production beam + p -> X + anything in the triple-Regge limit.

The t dependence comes from a properly normalized exchange propagator squared
and the missing-mass dependence from the total cross-section of the exchanged
particle on the target, evaluated at the bottom vertex.
"""

from __future__ import annotations

import math

import numpy as np
from scipy.optimize import brentq

from amplitudes import cgamma, signature_factor
from model import InclusiveKinematics, kallen

from .backends import _integrate_nquad, _integrate_quad, _integrate_vegas
from .sigma_total import SigmaOption, SigmaTotal, make_sigma_total

FOUR_PI_CUBED = (4.0 * math.pi) ** 3


def _zero_coupling(t):
    return 0.0


class TripleRegge:
    """
    Invariant cross-section E d^3sigma/d^3p built from an exclusive amplitude.

    The exclusive amplitude supplies its template `name`, the top coupling,
    the exchange (trajectory or fixed mass) and the form-factor slope. The
    third variable `m` of `invariant_cross_section` is Feynman x when
    `use_tx` is set and the missing mass squared M2 otherwise.
    """

    def __init__(self, amplitude, use_tx=False):
        self.name = amplitude.name
        self.identifier = getattr(amplitude, "identifier", amplitude.name)

        kin = amplitude.kinematics
        self.kinematics = InclusiveKinematics(
            kin.mX, target_mass=kin.mT, beam_mass=kin.mB, constants=kin.constants
        )

        self._g = float(getattr(amplitude, "g_top", 0.0))
        self.reggeized = bool(getattr(amplitude, "reggeized", False))
        self.trajectory = getattr(amplitude, "trajectory", None)
        self.exchange_mass2 = getattr(amplitude, "exchange_mass2", None) or 0.0
        self.exchange_spin = int(getattr(amplitude, "exchange_spin", 0))
        if getattr(amplitude, "use_formfactor", False):
            self.slope = float(amplitude.formfactor_slope)
        else:
            self.slope = 0.0

        self.use_tx = bool(use_tx)
        self._coupling = _zero_coupling
        self._sigma_tot = None
        self.initialize(self.name)

    # ------------------------------------------------------------------
    # Configuration

    def initialize(self, name):
        """Install the coupling and default sub-model for an amplitude template."""
        if name == "pseudoscalar_exchange":
            self._coupling = self._pseudoscalar_coupling
            self.set_sigma_total(SigmaOption.PDG_PIMP_ONLY_REGGE)
        else:
            self._coupling = _zero_coupling
            self.set_sigma_total(SigmaOption.ZERO)

    def _pseudoscalar_coupling(self, t):
        kin = self.kinematics
        return (self._g / kin.mX) * (t - kin.mX2)

    def set_coupling(self, coupling):
        if not callable(coupling):
            raise TypeError(f"coupling must be callable, got {type(coupling).__name__}")
        self._coupling = coupling

    def coupling(self, t):
        return self._coupling(t)

    @property
    def sigma_total(self):
        return self._sigma_tot

    def set_sigma_total(self, option):
        """Replace the owned total cross-section by an option or a ready sub-model."""
        if isinstance(option, SigmaTotal):
            new = option
        else:
            new = make_sigma_total(option, self.kinematics.constants)
        self._sigma_tot = None
        self._sigma_tot = new

    set_total_cross_section = set_sigma_total

    def set_TX(self, use_tx):
        self.use_tx = bool(use_tx)

    # x = 1 - M2/s is the high-energy identification of Feynman x
    set_high_energy_approximation = set_TX

    # ------------------------------------------------------------------
    # Invariant cross-section

    def exchange_propagator2(self, t, s_piece):
        if self.reggeized:
            traj = self.trajectory
            alpha = float(np.real(traj.eval(t)))
            alpha_prime = float(np.real(traj.slope()))

            # Gamma(J - alpha) outgrows the form factor at large |t|
            if alpha_prime * t < 0 and self.slope + alpha_prime - alpha_prime * math.log(-alpha_prime * t) < 0:
                return 0.0

            xi = signature_factor(traj.signature, alpha)
            t_piece = abs(alpha_prime * xi * cgamma(traj.min_J - alpha)) ** 2
            return t_piece * s_piece ** (-2.0 * alpha)

        pole = 1.0 / (self.exchange_mass2 - t)
        return pole * pole * s_piece ** (-2.0 * self.exchange_spin)

    def invariant_cross_section(self, s, t, m):
        if self.use_tx and abs(m - 1.0) < 0.001:
            return 0.0

        kin = self.kinematics
        coupling2 = self._coupling(t) ** 2
        formfactor2 = math.exp(2.0 * self.slope * (t - kin.t_min_from_M2(s, kin.minimal_M2)))
        s_piece = (1.0 - m) if self.use_tx else m / s
        propagator2 = self.exchange_propagator2(t, s_piece)
        if propagator2 == 0.0:
            return 0.0

        sigma_tot = self._sigma_tot.eval(s * (1.0 - m) if self.use_tx else m)
        return sigma_tot * coupling2 * formfactor2 * propagator2 * s_piece / FOUR_PI_CUBED

    d3sigma_d3p = invariant_cross_section

    # ------------------------------------------------------------------
    # Differential and integrated cross-sections

    def _phase_space(self, s):
        kin = self.kinematics
        return math.pi / math.sqrt(kallen(s, kin.mB2, kin.mT2))

    def _d2sigma_dtdM2(self, s, t, M2):
        m = self.kinematics.x_from_M2(s, M2) if self.use_tx else M2
        return self._phase_space(s) * self.invariant_cross_section(s, t, m)

    def _M2_range(self, s):
        kin = self.kinematics
        if math.sqrt(s) <= kin.mX + math.sqrt(kin.minimal_M2):
            return kin.minimal_M2, kin.minimal_M2
        return kin.minimal_M2, kin.M2max(s)

    def dsigma_dt(self, s, t):
        """Integrated over M2 from the minimal missing mass to the edge of phase space at this t."""
        M2_lo, _ = self._M2_range(s)
        M2_hi = self.kinematics.M2_max_from_t(s, t)
        return _integrate_quad(
            lambda M2: self._d2sigma_dtdM2(s, t, M2), M2_lo, M2_hi, label=f"{self.identifier} dsigma_dt"
        )

    def dsigma_dM2(self, s, M2):
        """Integrated over the full t range at fixed M2."""
        M2_lo, M2_hi = self._M2_range(s)
        if M2 < M2_lo or M2 > M2_hi:
            return 0.0
        t_lo, t_hi = self.kinematics.t_bounds(s, M2)
        return _integrate_quad(
            lambda t: self._d2sigma_dtdM2(s, t, M2), t_lo, t_hi, label=f"{self.identifier} dsigma_dM2"
        )

    def dsigma_dx(self, s, x):
        return s * self.dsigma_dM2(s, self.kinematics.M2_from_x(s, x))

    def dsigma_dy2(self, s, y2):
        """
        Integrated over x at fixed transverse momentum squared y2.

        Both t solutions (forward and backward) contribute with Jacobian
        |dt/dy2| = q/p_L. Substituting M2 = M2_y - u^2, with p_L = 0 at M2_y,
        removes the inverse square root at the upper end of the x range.
        """
        kin = self.kinematics
        M2_lo, M2_hi = self._M2_range(s)
        if M2_hi <= M2_lo:
            return 0.0

        p_lo = kin.produced_momentum(s, M2_lo)
        if y2 >= p_lo * p_lo:
            return 0.0
        if y2 <= 0.0:
            M2_y = M2_hi
        else:
            M2_y = brentq(lambda M2: kin.produced_momentum(s, M2) ** 2 - y2, M2_lo, M2_hi)

        q = kin.beam_momentum(s)

        def integrand(u):
            M2 = M2_y - u * u
            p = kin.produced_momentum(s, M2)
            pL2 = p * p - y2
            if pL2 <= 0.0:
                return 0.0
            jacobian = 2.0 * u * q / math.sqrt(pL2)
            return jacobian * sum(self._d2sigma_dtdM2(s, t, M2) for t in kin.t_from_pT2(s, M2, y2))

        return _integrate_quad(
            integrand, 0.0, math.sqrt(M2_y - M2_lo), label=f"{self.identifier} dsigma_dy2"
        )

    def integrated_xsection(self, s, method="nquad", **kwargs):
        """Integrate over t and M2 with adaptive quadrature or Vegas."""
        kin = self.kinematics
        M2_range = self._M2_range(s)

        def integrand(t, M2):
            return self._d2sigma_dtdM2(s, t, M2)

        def t_bounds(M2):
            return list(kin.t_bounds(s, M2))

        label = f"{self.identifier} integrated_xsection"
        if method == "nquad":
            return _integrate_nquad(integrand, t_bounds, M2_range, label=label, **kwargs)
        if method == "vegas":
            return _integrate_vegas(integrand, t_bounds, M2_range, label=label, **kwargs)
        raise ValueError(f"Unknown integration method {method!r}; use 'nquad' or 'vegas'.")


__all__ = ["TripleRegge"]

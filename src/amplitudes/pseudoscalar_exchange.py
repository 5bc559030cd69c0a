"""Axial-vector meson photoproduction through pseudoscalar (pion) exchange."""

from __future__ import annotations

from lorentz import GAMMA_5, contract

from model import LinearTrajectory

from .base import Amplitude
from .covariants import (
    cm_momenta,
    conjugate,
    polarization_vector,
    recoil_spinor,
    target_spinor,
)
from .propagators import exponential_form_factor, fixed_spin_propagator, regge_propagator
from .quantum_numbers import AXIAL_VECTOR, HALF_PLUS


class PseudoscalarExchange(Amplitude):
    """
    gamma p -> A n via t-channel pseudoscalar exchange.

    `exchange` is either the mass of a fixed spin-0 exchange or a
    `LinearTrajectory`, in which case the propagator is Reggeized.
    Parameters are the photon-axial-pseudoscalar coupling and the
    pseudoscalar-nucleon coupling.
    """

    name = "pseudoscalar_exchange"
    n_params = 2

    def __init__(self, kinematics, exchange, identifier=None):
        super().__init__(kinematics, identifier)
        if isinstance(exchange, LinearTrajectory):
            self.reggeized = True
            self.trajectory = exchange
            self.exchange_mass2 = None
            self.exchange_spin = exchange.min_J
        else:
            self.reggeized = False
            self.trajectory = None
            self.exchange_mass2 = float(exchange) ** 2
            self.exchange_spin = 0

        self.g_top = 0.0
        self.g_bottom = 0.0
        self.use_formfactor = False
        self.formfactor_slope = 0.0

    def allowed_meson_JP(self):
        return [AXIAL_VECTOR]

    def allowed_baryon_JP(self):
        return [HALF_PLUS]

    def parameter_labels(self):
        return ["g_top", "g_bottom"]

    def _allocate_parameters(self, params):
        self.g_top, self.g_bottom = params

    def set_formfactor(self, use, slope=0.0):
        self.use_formfactor = bool(use)
        self.formfactor_slope = float(slope)

    def propagator(self, s, t):
        if self.reggeized:
            return regge_propagator(self.trajectory, s, t)
        return fixed_spin_propagator(self.exchange_mass2, t)

    def top_vertex(self, s, theta, lam_gam, lam_meson):
        kin = self.kinematics
        k, _, q, _ = cm_momenta(kin, s, theta)
        qf = kin.final_momentum(s).real
        eps_gam = polarization_vector(0.0, kin.beam_energy(s), kin.initial_momentum(s).real, 0.0, lam_gam)
        eps_meson = conjugate(polarization_vector(kin.mX, kin.meson_energy(s), qf, theta, lam_meson))
        exchanged = k - q
        return (self.g_top / kin.mX) * (
            contract(eps_gam, eps_meson) * contract(k, exchanged)
            - contract(eps_gam, exchanged) * contract(eps_meson, k)
        )

    def bottom_vertex(self, s, theta, lam_target, lam_recoil):
        u_in = target_spinor(self.kinematics, s, lam_target)
        u_out = recoil_spinor(self.kinematics, s, theta, lam_recoil)
        return self.g_bottom * contract(u_out, GAMMA_5 * u_in)

    def helicity_amplitude(self, helicities, s, t):
        lam_gam, lam_target, lam_meson, lam_recoil = helicities
        theta = self.kinematics.theta_s(s, t)

        result = (
            self.top_vertex(s, theta, lam_gam, lam_meson)
            * self.propagator(s, t)
            * self.bottom_vertex(s, theta, lam_target, lam_recoil)
        )
        if self.use_formfactor:
            result *= exponential_form_factor(
                self.formfactor_slope, t, self.kinematics.t_min(s)
            )
        return complex(result)


__all__ = ["PseudoscalarExchange"]

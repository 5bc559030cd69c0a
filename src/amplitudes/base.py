"""Common interface and observables of exclusive helicity amplitudes."""

from __future__ import annotations

import warnings
from abc import ABC, abstractmethod

import numpy as np
from scipy import integrate

from .quantum_numbers import check_JP


class Amplitude(ABC):
    """
    Base class for beam + target -> meson + baryon helicity amplitudes.

    Subclasses set `name` (the template name other components key on) and
    `n_params`, and implement `helicity_amplitude` and `_allocate_parameters`.
    Quantum numbers are validated on construction.
    """

    name: str = "amplitude"
    n_params: int = 0

    def __init__(self, kinematics, identifier=None):
        self.kinematics = kinematics
        self.identifier = identifier if identifier is not None else self.name
        check_JP(kinematics, self.allowed_meson_JP(), self.allowed_baryon_JP(), self.identifier)
        self._params = [0.0] * self.n_params

    def allowed_meson_JP(self):
        return []

    def allowed_baryon_JP(self):
        return []

    def parameter_labels(self):
        return [f"par[{i}]" for i in range(self.n_params)]

    def set_params(self, params):
        params = [float(p) for p in params]
        if len(params) != self.n_params:
            raise ValueError(
                f"{self.identifier}: expected {self.n_params} parameters, got {len(params)}"
            )
        self._allocate_parameters(params)
        self._params = params

    def get_params(self):
        return list(self._params)

    @abstractmethod
    def _allocate_parameters(self, params):
        """Distribute a validated parameter list onto named attributes."""

    @abstractmethod
    def helicity_amplitude(self, helicities, s, t):
        """Return the complex amplitude for helicities (beam, target, meson, recoil)."""

    # ------------------------------------------------------------------
    # Observables

    def probability_distribution(self, s, t):
        """Sum of |A|^2 over all helicity combinations."""
        return sum(
            abs(self.helicity_amplitude(h, s, t)) ** 2 for h in self.kinematics.helicities()
        )

    def _spin_average(self):
        beam = 2 if self.kinematics.mB == 0.0 else 3
        return 1.0 / (beam * 2)

    def differential_xsection(self, s, t):
        """dsigma/dt in nb GeV^-2."""
        qi = self.kinematics.initial_momentum(s).real
        norm = 64.0 * np.pi * s * qi * qi
        sigma = self._spin_average() * self.probability_distribution(s, t) / norm
        return sigma * self.kinematics.constants.gev2_to_nb

    def integrated_xsection(self, s, epsrel=1e-4):
        """sigma in nb."""
        if s <= self.kinematics.sth:
            return 0.0
        t_lo, t_hi = self.kinematics.t_max(s), self.kinematics.t_min(s)
        result, error = integrate.quad(
            lambda t: self.differential_xsection(s, t), t_lo, t_hi, epsrel=epsrel, limit=100
        )
        if abs(error) > max(1e-12, 10 * epsrel * abs(result)):
            warnings.warn(
                f"{self.identifier}: t-integration at s={s} has error {error:.2e} "
                f"for result {result:.4e}.",
                RuntimeWarning,
            )
        return result


__all__ = ["Amplitude"]

"""Exchange propagators and form factors shared by exclusive and inclusive amplitudes."""

from __future__ import annotations

import numpy as np
import mpmath as mp


def cgamma(z):
    """Gamma function of a (possibly complex) argument."""
    return complex(mp.gamma(mp.mpc(z)))


def signature_factor(signature, alpha):
    return (1.0 + signature * np.exp(-1j * np.pi * alpha)) / 2.0


def regge_propagator(trajectory, s, t):
    """
    Reggeized exchange normalized so that it reduces to 1/(m^2 - t) near the
    lowest pole of the trajectory:

        alpha' * xi(alpha) * Gamma(J_min - alpha) * (alpha' s)^(alpha - J_min)
    """
    alpha = trajectory.eval(t)
    alpha_prime = trajectory.slope()
    J = trajectory.min_J
    xi = signature_factor(trajectory.signature, alpha)
    return alpha_prime * xi * cgamma(J - alpha) * (alpha_prime * s) ** (alpha - J)


def fixed_spin_propagator(mass2, t):
    return 1.0 / (mass2 - t)


def exponential_form_factor(slope, t, t_min):
    return np.exp(slope * (t - t_min))


__all__ = [
    "cgamma",
    "signature_factor",
    "regge_propagator",
    "fixed_spin_propagator",
    "exponential_form_factor",
]

"""Numerical backends for the inclusive cross-sections (quad, nquad, Vegas)."""

from __future__ import annotations

import warnings

import numpy as np
import scipy.integrate as integrate
import vegas


def _check_error(result, error, epsrel, label):
    if abs(error) > max(1e-12, 10 * epsrel * abs(result)):
        warnings.warn(
            f"{label}: quadrature error {error:.2e} exceeds tolerance for result {result:.4e}.",
            RuntimeWarning,
        )


def _integrate_quad(func, lo, hi, epsrel=1e-5, limit=200, label="quad"):
    """One-dimensional adaptive quadrature of func over [lo, hi]."""
    if hi <= lo:
        return 0.0
    result, error = integrate.quad(func, lo, hi, epsabs=0.0, epsrel=epsrel, limit=limit)
    _check_error(result, error, epsrel, label)
    return result


def _integrate_nquad(func, inner_bounds, outer_bounds, epsrel=1e-5, limit=100, label="nquad"):
    """
    Two-dimensional quadrature of func(inner, outer).

    `inner_bounds(outer)` returns the range of the inner variable, so the
    region need not be rectangular.
    """
    lo, hi = outer_bounds
    if hi <= lo:
        return 0.0
    result, error = integrate.nquad(
        func,
        [inner_bounds, [lo, hi]],
        opts={"epsabs": 0.0, "epsrel": epsrel, "limit": limit},
    )
    _check_error(result, error, epsrel, label)
    return result


def _integrate_vegas(func, inner_bounds, outer_bounds, nitn1=10, nitn2=10, neval=2000, label="vegas"):
    """
    Same region as `_integrate_nquad`, sampled by Vegas on the unit square.

    u1 maps linearly onto the outer range and u2 onto the inner range at that
    outer value; the Jacobian of both maps multiplies the integrand.
    """
    lo, hi = outer_bounds
    if hi <= lo:
        return 0.0

    @vegas.lbatchintegrand
    def vegas_integrand(xbatch):
        outer = lo + xbatch[:, 0] * (hi - lo)
        out = np.zeros(len(outer))
        for i, (y, u2) in enumerate(zip(outer, xbatch[:, 1])):
            y_lo, y_hi = inner_bounds(y)
            if y_hi <= y_lo:
                continue
            x = y_lo + u2 * (y_hi - y_lo)
            out[i] = func(x, y) * (y_hi - y_lo) * (hi - lo)
        return out

    integ = vegas.Integrator([[0, 1], [0, 1]])
    integ(vegas_integrand, nitn=nitn1, neval=neval)
    result = integ(vegas_integrand, nitn=nitn2, neval=neval)
    iters = nitn1 + nitn2
    while result.Q <= 0.1 and iters <= 40:
        result = integ(vegas_integrand, nitn=nitn2, neval=neval)
        iters += nitn2
    if result.Q <= 0.1:
        warnings.warn(
            f"{label}: VEGAS Q stayed <= 0.1 after {iters} iterations (Q={result.Q}).",
            RuntimeWarning,
        )
    return result.mean


__all__ = ["_integrate_quad", "_integrate_nquad", "_integrate_vegas"]

"""
Chew-Mandelstam two-body loop function.

    G(m1, m2) = -[rho log((xi + rho)/(xi - rho)) - xi (m2 - m1)/(m2 + m1) log(m2/m1)] / pi

with rho = sqrt(lambda(s, m1^2, m2^2)) / s and xi = 1 - (m1 + m2)^2 / s.
rho is imaginary below threshold, so the square root and logarithm are
always taken on complex numbers (principal branch of the ratio's logarithm).
"""

from __future__ import annotations

import numpy as np
from numba import njit

from model import csqrt, kallen


def chew_mandelstam(s, m1, m2):
    """Scalar or array evaluation with numpy complex arithmetic."""
    s_arr = np.asarray(s, dtype=np.float64)
    rho = csqrt(kallen(s_arr, m1 * m1, m2 * m2)) / s_arr
    xi = 1.0 - (m1 + m2) ** 2 / s_arr
    threshold_term = (m2 - m1) / (m2 + m1) * np.log(m2 / m1)
    result = -(rho * np.log((xi + rho) / (xi - rho)) - xi * threshold_term) / np.pi
    if result.ndim == 0:
        return complex(result)
    return result


@njit(cache=True)
def _chew_mandelstam_kernel(s_values, m1, m2):
    n = s_values.shape[0]
    out = np.empty(n, dtype=np.complex128)
    threshold_term = (m2 - m1) / (m2 + m1) * np.log(m2 / m1)
    m1sq = m1 * m1
    m2sq = m2 * m2

    for idx in range(n):
        s = s_values[idx]
        lam = s * s + m1sq * m1sq + m2sq * m2sq - 2.0 * (s * m1sq + m1sq * m2sq + m2sq * s)
        rho = np.sqrt(lam + 0j) / s
        xi = 1.0 - (m1 + m2) * (m1 + m2) / s
        out[idx] = -(rho * np.log((xi + rho) / (xi - rho)) - xi * threshold_term) / np.pi

    return out


def chew_mandelstam_grid(s_values, m1, m2):
    """Batched evaluation on a grid of s values through the compiled kernel."""
    s_arr = np.asarray(s_values, dtype=np.float64)
    flat = np.ascontiguousarray(s_arr.reshape(-1))
    out = _chew_mandelstam_kernel(flat, float(m1), float(m2))
    return out.reshape(s_arr.shape)


__all__ = ["chew_mandelstam", "chew_mandelstam_grid"]

"""
Spin-parity bookkeeping.

Meson quantum numbers are (J, P); baryon quantum numbers are (2J, P).
"""

from __future__ import annotations

PSEUDOSCALAR = (0, -1)
SCALAR = (0, +1)
VECTOR = (1, -1)
AXIAL_VECTOR = (1, +1)

HALF_PLUS = (1, +1)
HALF_MINUS = (1, -1)
THREEHALF_PLUS = (3, +1)
THREEHALF_MINUS = (3, -1)

# (2J, P) of an s-channel baryon resonance coupling to a vector meson + spin-1/2
# baryon -> (lowest relative angular momentum, transverse-polarization factor)
_RESONANCE_TABLE = {
    (1, +1): (0, 2.0 / 3.0),
    (1, -1): (1, 3.0 / 5.0),
    (3, +1): (1, 3.0 / 5.0),
    (3, -1): (0, 2.0 / 3.0),
    (5, +1): (1, 3.0 / 5.0),
    (5, -1): (2, 1.0 / 3.0),
}


def resonance_quantum_numbers(j2, parity):
    """Return (l_min, transverse factor) for a resonance with spin j2/2 and parity."""
    if parity not in (-1, 1):
        raise ValueError(f"Invalid parity {parity}")
    try:
        return _RESONANCE_TABLE[(j2, parity)]
    except KeyError:
        raise ValueError(
            f"Spin-parity combination J = {j2}/2, P = {parity:+d} not available"
        ) from None


def check_JP(kinematics, allowed_meson, allowed_baryon, name):
    if tuple(kinematics.meson_JP) not in allowed_meson:
        raise ValueError(
            f"{name}: meson J^P = {kinematics.meson_JP} not allowed, expected one of {allowed_meson}"
        )
    if tuple(kinematics.baryon_JP) not in allowed_baryon:
        raise ValueError(
            f"{name}: baryon 2J^P = {kinematics.baryon_JP} not allowed, expected one of {allowed_baryon}"
        )


__all__ = [
    "PSEUDOSCALAR",
    "SCALAR",
    "VECTOR",
    "AXIAL_VECTOR",
    "HALF_PLUS",
    "HALF_MINUS",
    "THREEHALF_PLUS",
    "THREEHALF_MINUS",
    "resonance_quantum_numbers",
    "check_JP",
]

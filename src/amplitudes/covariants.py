"""
Four-momenta, polarization vectors and spinors in the s-channel center-of-mass frame.

The beam travels along +z, the meson is produced at polar angle theta in the
x-z plane and the target and recoil move opposite to them.
"""

from __future__ import annotations

import numpy as np

from lorentz import four_vector, helicity_spinor


def cm_momenta(kinematics, s, theta):
    """Return (beam, target, meson, recoil) four-vectors."""
    qi = kinematics.initial_momentum(s).real
    qf = kinematics.final_momentum(s).real
    sin, cos = np.sin(theta), np.cos(theta)

    k = four_vector([kinematics.beam_energy(s), 0.0, 0.0, qi])
    p = four_vector([kinematics.target_energy(s), 0.0, 0.0, -qi])
    q = four_vector([kinematics.meson_energy(s), qf * sin, 0.0, qf * cos])
    p_rec = four_vector([kinematics.baryon_energy(s), -qf * sin, 0.0, -qf * cos])
    return k, p, q, p_rec


def polarization_vector(mass, energy, momentum, theta, lam):
    """Spin-1 polarization vector for helicity lam along direction (theta, phi=0)."""
    sin, cos = np.sin(theta), np.cos(theta)
    if lam == 0:
        if mass == 0:
            raise ValueError("Massless spin-1 particles have no longitudinal polarization.")
        return four_vector([momentum, energy * sin, 0.0, energy * cos]) / mass
    if lam not in (-1, 1):
        raise ValueError(f"Invalid spin-1 helicity {lam}")
    return four_vector([0.0, -lam * cos, -1j, lam * sin]) / np.sqrt(2.0)


def conjugate(vector):
    return four_vector(np.conj(vector.components))


def target_spinor(kinematics, s, lam2):
    return helicity_spinor(kinematics.mT, kinematics.target_energy(s), np.pi, lam2)


def recoil_spinor(kinematics, s, theta, lam2):
    return helicity_spinor(kinematics.mR, kinematics.baryon_energy(s), theta + np.pi, lam2)


__all__ = [
    "cm_momenta",
    "polarization_vector",
    "conjugate",
    "target_spinor",
    "recoil_spinor",
]

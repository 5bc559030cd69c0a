"""
Dirac spinors and 4x4 Dirac matrices.

Both are fixed-size value objects wrapping a read-only complex numpy array.
Products follow the usual conventions:

    DiracMatrix * DiracMatrix -> DiracMatrix
    DiracMatrix * DiracSpinor -> DiracSpinor        (column spinor)
    DiracSpinor * DiracMatrix -> DiracSpinor        (adjoint / row spinor)

The Dirac representation is used for the gamma matrices.
"""

from __future__ import annotations

import numpy as np

from .kinds import ElementKind, kind_of


def _frozen(components, shape, name):
    arr = np.array(components, dtype=np.complex128)
    if arr.shape != shape:
        raise ValueError(f"{name} must have shape {shape}, got {arr.shape}")
    arr.setflags(write=False)
    return arr


class DiracMatrix:
    kind = ElementKind.MATRIX
    # keep numpy scalars from broadcasting over the object
    __array_ufunc__ = None

    __slots__ = ("_m",)

    def __init__(self, components):
        self._m = _frozen(components, (4, 4), "DiracMatrix")

    @property
    def components(self):
        return self._m

    def dagger(self):
        return DiracMatrix(self._m.conj().T)

    def trace(self):
        return complex(np.trace(self._m))

    def __add__(self, other):
        if kind_of(other) is not ElementKind.MATRIX:
            return NotImplemented
        return DiracMatrix(self._m + other._m)

    def __sub__(self, other):
        if kind_of(other) is not ElementKind.MATRIX:
            return NotImplemented
        return DiracMatrix(self._m - other._m)

    def __neg__(self):
        return DiracMatrix(-self._m)

    def __mul__(self, other):
        kind = kind_of(other)
        if kind is ElementKind.MATRIX:
            return DiracMatrix(self._m @ other._m)
        if kind is ElementKind.SPINOR:
            if other.adjoint:
                raise ValueError("Cannot multiply a matrix onto an adjoint spinor from the left.")
            return DiracSpinor(self._m @ other.components)
        if kind is ElementKind.SCALAR and np.ndim(other) == 0:
            return DiracMatrix(self._m * other)
        return NotImplemented

    def __rmul__(self, other):
        if np.ndim(other) == 0 and kind_of(other) is ElementKind.SCALAR:
            return DiracMatrix(other * self._m)
        return NotImplemented

    def __truediv__(self, other):
        return DiracMatrix(self._m / other)

    def __repr__(self):
        return f"DiracMatrix({self._m!r})"


class DiracSpinor:
    kind = ElementKind.SPINOR
    __array_ufunc__ = None

    __slots__ = ("_u", "adjoint")

    def __init__(self, components, adjoint=False):
        self._u = _frozen(components, (4,), "DiracSpinor")
        self.adjoint = bool(adjoint)

    @property
    def components(self):
        return self._u

    def bar(self):
        """Dirac adjoint u^dagger gamma^0."""
        if self.adjoint:
            raise ValueError("Spinor is already an adjoint spinor.")
        return DiracSpinor(self._u.conj() @ GAMMA_0.components, adjoint=True)

    def _check_same(self, other):
        if kind_of(other) is not ElementKind.SPINOR:
            return False
        if other.adjoint != self.adjoint:
            raise ValueError("Cannot combine a spinor with an adjoint spinor.")
        return True

    def __add__(self, other):
        if not self._check_same(other):
            return NotImplemented
        return DiracSpinor(self._u + other._u, self.adjoint)

    def __sub__(self, other):
        if not self._check_same(other):
            return NotImplemented
        return DiracSpinor(self._u - other._u, self.adjoint)

    def __neg__(self):
        return DiracSpinor(-self._u, self.adjoint)

    def __mul__(self, other):
        if kind_of(other) is ElementKind.MATRIX:
            if not self.adjoint:
                raise ValueError("Only adjoint spinors multiply a matrix from the left.")
            return DiracSpinor(self._u @ other.components, adjoint=True)
        if np.ndim(other) == 0 and kind_of(other) is ElementKind.SCALAR:
            return DiracSpinor(self._u * other, self.adjoint)
        return NotImplemented

    def __rmul__(self, other):
        if np.ndim(other) == 0 and kind_of(other) is ElementKind.SCALAR:
            return DiracSpinor(other * self._u, self.adjoint)
        return NotImplemented

    def __repr__(self):
        return f"DiracSpinor({self._u!r}, adjoint={self.adjoint})"


_I2 = np.identity(2)
_Z2 = np.zeros((2, 2))
_PAULI = (
    np.array([[0, 1], [1, 0]], dtype=complex),
    np.array([[0, -1j], [1j, 0]], dtype=complex),
    np.array([[1, 0], [0, -1]], dtype=complex),
)

IDENTITY = DiracMatrix(np.identity(4))
ZERO_MATRIX = DiracMatrix(np.zeros((4, 4)))
GAMMA_0 = DiracMatrix(np.block([[_I2, _Z2], [_Z2, -_I2]]))
GAMMA_1, GAMMA_2, GAMMA_3 = (
    DiracMatrix(np.block([[_Z2, sigma], [-sigma, _Z2]])) for sigma in _PAULI
)
GAMMA_5 = DiracMatrix(np.block([[_Z2, _I2], [_I2, _Z2]]))
GAMMA = (GAMMA_0, GAMMA_1, GAMMA_2, GAMMA_3)


def two_component_spinor(theta, lam2):
    """Helicity eigenstate along the direction (theta, phi=0), 2*lambda = +-1."""
    if lam2 == 1:
        return np.array([np.cos(theta / 2), np.sin(theta / 2)])
    if lam2 == -1:
        return np.array([-np.sin(theta / 2), np.cos(theta / 2)])
    raise ValueError(f"2*lambda must be +1 or -1 for spin-1/2, got {lam2}")


def helicity_spinor(mass, energy, theta, lam2):
    """Positive-energy helicity spinor normalized to u-bar u = 2m."""
    chi = two_component_spinor(theta, lam2)
    upper = np.sqrt(energy + mass) * chi
    lower = lam2 * np.sqrt(energy - mass) * chi
    return DiracSpinor(np.concatenate([upper, lower]))


__all__ = [
    "DiracMatrix",
    "DiracSpinor",
    "IDENTITY",
    "ZERO_MATRIX",
    "GAMMA_0",
    "GAMMA_1",
    "GAMMA_2",
    "GAMMA_3",
    "GAMMA_5",
    "GAMMA",
    "two_component_spinor",
    "helicity_spinor",
]

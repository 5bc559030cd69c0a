"""
Lorentz tensors of rank 0-2 with complex, spinor or matrix valued components.

A tensor stores all 4**rank components at once (upper indices) in a read-only
numpy array whose trailing axes hold the element: () for complex numbers,
(4,) for Dirac spinors and (4, 4) for Dirac matrices. The element kind is fixed
when the tensor is built, so the contraction rule can be chosen once per
tensor pair instead of once per component.
"""

from __future__ import annotations

import itertools
from enum import IntEnum
from functools import lru_cache

import numpy as np

from .dirac import GAMMA, DiracMatrix, DiracSpinor
from .kinds import ElementKind, kind_of

MAX_RANK = 2

_ELEMENT_SHAPES = {
    ElementKind.SCALAR: (),
    ElementKind.SPINOR: (4,),
    ElementKind.MATRIX: (4, 4),
}


class LorentzIndex(IntEnum):
    T = 0
    X = 1
    Y = 2
    Z = 3


LORENTZ_INDICES = tuple(LorentzIndex)


def metric(mu):
    """Diagonal Minkowski metric (+,-,-,-), or its product over a sequence of indices."""
    if isinstance(mu, (int, np.integer)):
        return 1 if mu == LorentzIndex.T else -1
    sign = 1
    for nu in mu:
        sign *= metric(nu)
    return sign


@lru_cache(maxsize=None)
def permutations(rank):
    """Every index sequence of length `rank`, 4**rank in total."""
    if rank < 0 or rank > MAX_RANK:
        raise ValueError(f"Only ranks 0..{MAX_RANK} are supported, got {rank}")
    return tuple(itertools.product(LORENTZ_INDICES, repeat=rank))


class LorentzTensor:
    kind = ElementKind.TENSOR
    __array_ufunc__ = None

    def __init__(self, components, rank, element_kind=ElementKind.SCALAR, adjoint=False):
        if rank < 0 or rank > MAX_RANK:
            raise ValueError(f"Only ranks 0..{MAX_RANK} are supported, got {rank}")
        if element_kind not in _ELEMENT_SHAPES:
            raise ValueError(f"Unsupported element kind {element_kind}")
        arr = np.array(components, dtype=np.complex128)
        expected = (4,) * rank + _ELEMENT_SHAPES[element_kind]
        if arr.shape != expected:
            raise ValueError(
                f"Rank-{rank} {element_kind.value} tensor needs shape {expected}, got {arr.shape}"
            )
        arr.setflags(write=False)
        self._components = arr
        self.rank = rank
        self.element_kind = element_kind
        self.adjoint = bool(adjoint) and element_kind is ElementKind.SPINOR

    @property
    def components(self):
        return self._components

    def __call__(self, *indices):
        if len(indices) == 1 and not isinstance(indices[0], (int, np.integer)):
            indices = tuple(indices[0])
        if len(indices) != self.rank:
            raise ValueError(f"Rank-{self.rank} tensor indexed with {len(indices)} indices")
        comp = self._components[tuple(int(i) for i in indices)]
        if self.element_kind is ElementKind.SCALAR:
            return complex(comp)
        if self.element_kind is ElementKind.SPINOR:
            return DiracSpinor(comp, adjoint=self.adjoint)
        return DiracMatrix(comp)

    def _like(self, components):
        return LorentzTensor(components, self.rank, self.element_kind, self.adjoint)

    def _check_compatible(self, other):
        if kind_of(other) is not ElementKind.TENSOR:
            return False
        if other.rank != self.rank or other.element_kind is not self.element_kind:
            raise ValueError("Only tensors of equal rank and element kind can be added.")
        return True

    def __add__(self, other):
        if not self._check_compatible(other):
            return NotImplemented
        return self._like(self._components + other._components)

    def __sub__(self, other):
        if not self._check_compatible(other):
            return NotImplemented
        return self._like(self._components - other._components)

    def __neg__(self):
        return self._like(-self._components)

    def __mul__(self, other):
        if kind_of(other) is ElementKind.SCALAR and np.ndim(other) == 0:
            return self._like(self._components * other)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other):
        return self._like(self._components / other)

    def __repr__(self):
        return f"LorentzTensor(rank={self.rank}, kind={self.element_kind.value})"


def scalar(value):
    return LorentzTensor(value, 0)


def four_vector(components):
    return LorentzTensor(components, 1)


def outer(left, right):
    """Rank-2 tensor from two complex four-vectors, T^{mu nu} = a^mu b^nu."""
    if left.rank != 1 or right.rank != 1:
        raise ValueError("outer() takes two rank-1 tensors")
    if left.element_kind is not ElementKind.SCALAR or right.element_kind is not ElementKind.SCALAR:
        raise ValueError("outer() is only defined for complex-valued vectors")
    return LorentzTensor(np.multiply.outer(left.components, right.components), 2)


def metric_tensor():
    return LorentzTensor(np.diag([1.0, -1.0, -1.0, -1.0]), 2)


def gamma_vector():
    """gamma^mu as a rank-1 tensor of Dirac matrices."""
    return LorentzTensor(
        np.stack([g.components for g in GAMMA]), 1, element_kind=ElementKind.MATRIX
    )


__all__ = [
    "MAX_RANK",
    "LorentzIndex",
    "LORENTZ_INDICES",
    "metric",
    "permutations",
    "LorentzTensor",
    "scalar",
    "four_vector",
    "outer",
    "metric_tensor",
    "gamma_vector",
]

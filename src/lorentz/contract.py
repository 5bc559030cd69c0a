"""
Single `contract` entry point for scalars, Dirac objects and Lorentz tensors.

The rule applied to a pair of operands is looked up from their kind tags in a
closed table. Tensor pairs resolve the element rule once and then run the
Einstein sum over the diagonal metric:

    contract(A, B) = sum_{mu...} g(mu...) contract(A(mu...), B(mu...))
"""

from __future__ import annotations

import numpy as np

from .dirac import ZERO_MATRIX
from .kinds import ElementKind, kind_of
from .tensor import gamma_vector, metric, permutations


def _product(left, right):
    return left * right


def _spinor_bilinear(left, right):
    """u-bar v. A column spinor on the left is barred first."""
    if right.adjoint:
        raise ValueError("The right-hand spinor of a bilinear must be a column spinor.")
    row = left if left.adjoint else left.bar()
    return complex(np.dot(row.components, right.components))


_S, _P, _M = ElementKind.SCALAR, ElementKind.SPINOR, ElementKind.MATRIX

# (left kind, right kind) -> (rule, kind of the result)
_RULES = {
    (_S, _S): (_product, _S),
    (_S, _M): (_product, _M),
    (_M, _S): (_product, _M),
    (_M, _M): (_product, _M),
    (_P, _P): (_spinor_bilinear, _S),
}

_ZEROS = {
    _S: 0j,
    _M: ZERO_MATRIX,
}


def _rule_for(left_kind, right_kind):
    try:
        return _RULES[(left_kind, right_kind)]
    except KeyError:
        raise TypeError(
            f"No contraction rule between {left_kind.value} and {right_kind.value}"
        ) from None


def _contract_tensors(left, right):
    if left.rank != right.rank:
        raise ValueError(
            f"Cannot contract a rank-{left.rank} tensor with a rank-{right.rank} tensor"
        )
    rule, result_kind = _rule_for(left.element_kind, right.element_kind)

    if left.rank == 0:
        return rule(left(), right())

    total = _ZEROS[result_kind]
    for perm in permutations(left.rank):
        total = total + metric(perm) * rule(left(perm), right(perm))
    return total


def contract(left, right):
    left_kind, right_kind = kind_of(left), kind_of(right)
    if left_kind is ElementKind.TENSOR and right_kind is ElementKind.TENSOR:
        return _contract_tensors(left, right)
    rule, _ = _rule_for(left_kind, right_kind)
    return rule(left, right)


def slash(p):
    """Feynman slash p-slash = gamma^mu p_mu of a complex four-vector."""
    return contract(gamma_vector(), p)


__all__ = ["contract", "slash"]

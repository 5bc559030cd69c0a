"""Kind tags carried by every object the contraction dispatcher accepts."""

from __future__ import annotations

from enum import Enum


class ElementKind(Enum):
    SCALAR = "scalar"
    SPINOR = "spinor"
    MATRIX = "matrix"
    TENSOR = "tensor"


def kind_of(obj):
    """Plain numbers carry no tag and count as scalars."""
    return getattr(obj, "kind", ElementKind.SCALAR)


__all__ = ["ElementKind", "kind_of"]

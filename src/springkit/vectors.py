from __future__ import annotations

from typing import Union

from panda3d.core import LVecBase2f, LVecBase3f, LVector2f, LVector3f

# Values a spring can animate. Anything else that supports `+`, `-` and
# multiplication by a float also works, but is copied via `value * 1.0`.
Nlerpable = Union[float, LVector2f, LVector3f]


def copy_value(value: Nlerpable) -> Nlerpable:
    """Detached copy of a spring value; Panda3D vectors are mutable and shared by reference."""

    if isinstance(value, LVecBase3f):
        return LVector3f(value)
    if isinstance(value, LVecBase2f):
        return LVector2f(value)
    if isinstance(value, (int, float)):
        return float(value)
    return value * 1.0


def zero_like(value: Nlerpable) -> Nlerpable:
    if isinstance(value, LVecBase3f):
        return LVector3f(0.0, 0.0, 0.0)
    if isinstance(value, LVecBase2f):
        return LVector2f(0.0, 0.0)
    if isinstance(value, (int, float)):
        return 0.0
    return value * 0.0

"""Quaternions for rotations, with conversion to 4x4 matrices."""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass
from numbers import Real
from typing import Any, Iterable, Iterator

from .matrix import Matrix

_NAMES = ("x", "y", "z", "w")


@dataclass
class Quaternion:
    """A quaternion stored as x, y, z (vector part) and w (scalar part)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    __hash__ = None  # type: ignore[assignment]

    def _name(self, index: int) -> str:
        index = operator.index(index)
        if not 0 <= index < 4:
            raise IndexError(f"quaternion component {index} out of range")
        return _NAMES[index]

    def __getitem__(self, index: int) -> float:
        return getattr(self, self._name(index))

    def __setitem__(self, index: int, value: float) -> None:
        setattr(self, self._name(index), value)

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z, self.w))

    def _componentwise(self, other: Any, op) -> Quaternion:
        if isinstance(other, Quaternion):
            return Quaternion(*(op(a, b) for a, b in zip(self, other)))
        if isinstance(other, Real):
            return Quaternion(*(op(a, other) for a in self))
        return NotImplemented

    def _hamilton(self, other: Quaternion) -> Quaternion:
        p, q = self, other
        return Quaternion(
            p.w * q.x + p.x * q.w + p.y * q.z - p.z * q.y,
            p.w * q.y + p.y * q.w + p.z * q.x - p.x * q.z,
            p.w * q.z + p.z * q.w + p.x * q.y - p.y * q.x,
            p.w * q.w - p.x * q.x - p.y * q.y - p.z * q.z,
        )

    def _inverse(self) -> Quaternion:
        norm_squared = self.x**2 + self.y**2 + self.z**2 + self.w**2
        if norm_squared == 0:
            raise ZeroDivisionError("cannot invert a zero quaternion")
        return Quaternion(-self.x / norm_squared, -self.y / norm_squared, -self.z / norm_squared, self.w / norm_squared)

    def __add__(self, other):
        return self._componentwise(other, operator.add)

    def __sub__(self, other):
        return self._componentwise(other, operator.sub)

    def __mul__(self, other):
        if isinstance(other, Quaternion):
            return self._hamilton(other)
        return self._componentwise(other, operator.mul)

    def __rmul__(self, other):
        if isinstance(other, Real):
            return self._componentwise(other, operator.mul)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Quaternion):
            return self._hamilton(other._inverse())
        if isinstance(other, Real) and other == 0:
            raise ZeroDivisionError("quaternion division by zero")
        return self._componentwise(other, operator.truediv)

    def to_matrix(self) -> Matrix:
        """Return the 4x4 rotation matrix this quaternion describes."""
        x, y, z, w = self
        xx, yy, zz = x * x, y * y, z * z
        xy, xz, yz = x * y, x * z, y * z
        wx, wy, wz = w * x, w * y, w * z
        return Matrix.from_columns(
            (1 - 2 * (yy + zz), 2 * (xy + wz), 2 * (xz - wy), 0.0),
            (2 * (xy - wz), 1 - 2 * (xx + zz), 2 * (yz + wx), 0.0),
            (2 * (xz + wy), 2 * (yz - wx), 1 - 2 * (xx + yy), 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )

    @classmethod
    def from_angle_axis(cls, radians: float, axis: Iterable) -> Quaternion:
        """Rotation of ``radians`` about ``axis`` (the axis is used as given)."""
        components = [float(value) for value in axis]
        if len(components) != 3:
            raise ValueError("rotation axis needs 3 components")
        s = math.sin(radians / 2)
        return cls(components[0] * s, components[1] * s, components[2] * s, math.cos(radians / 2))
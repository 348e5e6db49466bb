"""Small fixed-length vectors with component-wise arithmetic."""

from __future__ import annotations

import math
import operator
from numbers import Real
from typing import Any, Callable, Iterable, Iterator

MIN_LENGTH = 2
MAX_LENGTH = 4
_NAMES = "xyzw"


def radians(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return math.radians(degrees)


def _is_scalar(value: Any) -> bool:
    return isinstance(value, Real)


def _check_length(length: int) -> None:
    if not MIN_LENGTH <= length <= MAX_LENGTH:
        raise ValueError(f"a vector has {MIN_LENGTH} to {MAX_LENGTH} components, not {length}")


def _components_of(source: Any) -> list:
    if isinstance(source, Vector):
        return list(source._data)
    try:
        values = list(source)
    except TypeError:
        raise TypeError(f"cannot build a vector from {type(source).__name__}") from None
    if not all(_is_scalar(value) for value in values):
        raise TypeError("vector components must be numbers")
    return values


def _component_property(index: int) -> property:
    name = _NAMES[index]

    def getter(self: Vector):
        if index >= len(self._data):
            raise AttributeError(f"a {len(self._data)}-component vector has no {name}")
        return self._data[index]

    def setter(self: Vector, value) -> None:
        if index >= len(self._data):
            raise AttributeError(f"a {len(self._data)}-component vector has no {name}")
        self._data[index] = value

    return property(getter, setter, doc=f"The {name} component.")


class Vector:
    """A mutable vector of two to four numeric components.

    Built from components (``Vector(1, 2, 3)``), from another vector or
    sequence (``Vector(other)``), or from a shorter vector and one extra
    component (``Vector(xyz, w)``).
    """

    __slots__ = ("_data",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, *args: Any) -> None:
        if len(args) == 2 and not _is_scalar(args[0]) and _is_scalar(args[1]):
            components = _components_of(args[0]) + [args[1]]
        elif len(args) == 1 and not _is_scalar(args[0]):
            components = _components_of(args[0])
        elif args and all(_is_scalar(arg) for arg in args):
            if len(args) == 1:
                raise TypeError("a single scalar does not give the vector's length")
            components = list(args)
        else:
            raise TypeError("a vector needs components, a vector, or a vector and one component")
        _check_length(len(components))
        self._data = components

    x = _component_property(0)
    y = _component_property(1)
    z = _component_property(2)
    w = _component_property(3)

    def _check_index(self, index: int) -> int:
        index = operator.index(index)
        if not 0 <= index < len(self._data):
            raise IndexError(f"component {index} out of range for a {len(self._data)}-component vector")
        return index

    def __getitem__(self, index: int):
        return self._data[self._check_index(index)]

    def __setitem__(self, index: int, value) -> None:
        self._data[self._check_index(index)] = value

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator:
        return iter(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Vector):
            return self._data == other._data
        return NotImplemented

    def __repr__(self) -> str:
        return f"Vector({', '.join(repr(value) for value in self._data)})"

    def _combine(self, other: Any, op: Callable[[Any, Any], Any], reflected: bool = False):
        if isinstance(other, Vector):
            if len(other) != len(self):
                raise ValueError(f"vector lengths differ: {len(self)} and {len(other)}")
            pairs: Iterable = zip(self._data, other._data)
        elif _is_scalar(other):
            pairs = ((value, other) for value in self._data)
        else:
            return NotImplemented
        if reflected:
            return Vector([op(b, a) for a, b in pairs])
        return Vector([op(a, b) for a, b in pairs])

    def _update(self, result) -> Vector:
        if result is NotImplemented:
            return result
        self._data = result._data
        return self

    def __add__(self, other):
        return self._combine(other, operator.add)

    def __radd__(self, other):
        return self._combine(other, operator.add, reflected=True)

    def __sub__(self, other):
        return self._combine(other, operator.sub)

    def __rsub__(self, other):
        return self._combine(other, operator.sub, reflected=True)

    def __mul__(self, other):
        return self._combine(other, operator.mul)

    def __rmul__(self, other):
        return self._combine(other, operator.mul, reflected=True)

    def __truediv__(self, other):
        return self._combine(other, operator.truediv)

    def __iadd__(self, other):
        return self._update(self + other)

    def __isub__(self, other):
        return self._update(self - other)

    def __imul__(self, other):
        return self._update(self * other)

    def __itruediv__(self, other):
        return self._update(self / other)

    def __neg__(self) -> Vector:
        return Vector([-value for value in self._data])

    def resized(self, length: int, fill=0) -> Vector:
        """Return a copy truncated or padded with ``fill`` to ``length`` components."""
        _check_length(length)
        data = self._data[:length] + [fill] * (length - len(self._data))
        return Vector(data)

    def normalize(self) -> Vector:
        """Scale this vector to unit length in place and return it."""
        norm = math.hypot(*self._data)
        if norm == 0:
            raise ValueError("cannot normalize a zero vector")
        self._data = [value / norm for value in self._data]
        return self

    def normalized(self) -> Vector:
        """Return a unit-length copy of this vector."""
        return Vector(self).normalize()
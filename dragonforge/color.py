"""RGBA colours with component-wise arithmetic."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

Operand = Union["Color", float, int]


@dataclass
class Color:
    """An RGBA colour whose components are floats."""

    r: float
    g: float
    b: float
    a: float

    def _combine(self, other: Operand, op) -> Color:
        if isinstance(other, Color):
            return Color(op(self.r, other.r), op(self.g, other.g), op(self.b, other.b), op(self.a, other.a))
        if isinstance(other, (int, float)):
            return Color(op(self.r, other), op(self.g, other), op(self.b, other), op(self.a, other))
        return NotImplemented

    def __add__(self, other: Operand) -> Color:
        return self._combine(other, lambda x, y: x + y)

    def __sub__(self, other: Operand) -> Color:
        return self._combine(other, lambda x, y: x - y)

    def __mul__(self, other: Operand) -> Color:
        return self._combine(other, lambda x, y: x * y)

    def __truediv__(self, other: Operand) -> Color:
        return self._combine(other, lambda x, y: x / y)

    def __iter__(self):
        return iter((self.r, self.g, self.b, self.a))


RED = Color(1.0, 0.0, 0.0, 1.0)
GREEN = Color(0.0, 1.0, 0.0, 1.0)
BLUE = Color(0.0, 0.0, 1.0, 1.0)
BLACK = Color(0.0, 0.0, 0.0, 1.0)
WHITE = Color(1.0, 1.0, 1.0, 1.0)
YELLOW = Color(1.0, 1.0, 0.0, 1.0)
MAGENTA = Color(1.0, 0.0, 1.0, 1.0)
CYAN = Color(0.0, 1.0, 1.0, 1.0)
ORANGE = Color(1.0, 0.6, 0.0, 1.0)
PURPLE = Color(0.5, 0.0, 0.5, 1.0)
PINK = Color(1.0, 0.8, 0.8, 1.0)
BROWN = Color(0.6, 0.2, 0.2, 1.0)
TEAL = Color(0.0, 0.5, 0.5, 1.0)
GRAY = Color(0.5, 0.5, 0.5, 1.0)
"""Column-major matrices with column proxies and projection helpers."""

from __future__ import annotations

import math
import operator
from numbers import Real
from typing import Any, Iterable, Iterator

import numpy as np

from .vector import Vector

MIN_SIZE = 2
MAX_SIZE = 4
_NAMES = "xyzw"


def _check_size(size: int, what: str) -> None:
    if not MIN_SIZE <= size <= MAX_SIZE:
        raise ValueError(f"a matrix has {MIN_SIZE} to {MAX_SIZE} {what}, not {size}")


def _values_of(source: Iterable) -> list[float]:
    try:
        values = list(source)
    except TypeError:
        raise TypeError(f"expected a vector or a sequence of numbers, got {type(source).__name__}") from None
    if not all(isinstance(value, Real) for value in values):
        raise TypeError("components must be numbers")
    return [float(value) for value in values]


def _proxy_component(index: int) -> property:
    name = _NAMES[index]

    def getter(self: ColumnProxy) -> float:
        if index >= len(self):
            raise AttributeError(f"a {len(self)}-row column has no {name}")
        return self[index]

    def setter(self: ColumnProxy, value: float) -> None:
        if index >= len(self):
            raise AttributeError(f"a {len(self)}-row column has no {name}")
        self[index] = value

    return property(getter, setter, doc=f"The {name} component of the column.")


class ColumnProxy:
    """A live view of one column of a matrix."""

    __slots__ = ("_matrix", "_column")

    def __init__(self, matrix: Matrix, column: int) -> None:
        self._matrix = matrix
        self._column = matrix._check_column(column)

    def _check_row(self, index: int) -> int:
        index = operator.index(index)
        if not 0 <= index < self._matrix.rows:
            raise IndexError(f"row {index} out of range for a {self._matrix.rows}-row column")
        return index

    def __len__(self) -> int:
        return self._matrix.rows

    def __iter__(self) -> Iterator[float]:
        return (float(value) for value in self._matrix._m[:, self._column])

    def __getitem__(self, index: int) -> float:
        return float(self._matrix._m[self._check_row(index), self._column])

    def __setitem__(self, index: int, value: float) -> None:
        self._matrix._m[self._check_row(index), self._column] = value

    x = _proxy_component(0)
    y = _proxy_component(1)
    z = _proxy_component(2)
    w = _proxy_component(3)

    def assign(self, vector: Iterable) -> ColumnProxy:
        """Replace the whole column with the given vector's components."""
        values = _values_of(vector)
        if len(values) != self._matrix.rows:
            raise ValueError(f"column needs {self._matrix.rows} components, got {len(values)}")
        self._matrix._m[:, self._column] = values
        return self

    def to_vector(self) -> Vector:
        """Return a copy of the column as a vector."""
        return Vector(list(self))

    def __repr__(self) -> str:
        return f"ColumnProxy({self._column}, {list(self)!r})"


class Matrix:
    """A matrix of ``columns`` by ``rows`` floats, indexed by column."""

    __slots__ = ("_m",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, columns: int = 4, rows: int = 4, scalar: float = 1.0) -> None:
        _check_size(columns, "columns")
        _check_size(rows, "rows")
        self._m = np.eye(rows, columns, dtype=float) * float(scalar)

    @classmethod
    def _wrap(cls, array: Any) -> Matrix:
        matrix = cls.__new__(cls)
        matrix._m = np.array(array, dtype=float)
        return matrix

    @classmethod
    def from_columns(cls, *args: Iterable) -> Matrix:
        """Build a matrix whose columns are the given vectors, in order."""
        _check_size(len(args), "columns")
        columns = [_values_of(column) for column in args]
        rows = len(columns[0])
        _check_size(rows, "rows")
        if any(len(column) != rows for column in columns):
            raise ValueError("all columns must have the same length")
        return cls._wrap(np.array(columns, dtype=float).T)

    @property
    def columns(self) -> int:
        return self._m.shape[1]

    @property
    def rows(self) -> int:
        return self._m.shape[0]

    def _check_column(self, index: int) -> int:
        index = operator.index(index)
        if not 0 <= index < self.columns:
            raise IndexError(f"column {index} out of range for a {self.columns}-column matrix")
        return index

    def __getitem__(self, index: int) -> ColumnProxy:
        return ColumnProxy(self, index)

    def __setitem__(self, index: int, vector: Iterable) -> None:
        ColumnProxy(self, index).assign(vector)

    def __len__(self) -> int:
        return self.columns

    def __iter__(self) -> Iterator[ColumnProxy]:
        return (ColumnProxy(self, column) for column in range(self.columns))

    def _square_axis(self, column: int) -> ColumnProxy:
        if self.columns != self.rows or self.columns not in (3, 4):
            raise ValueError("axis columns exist only on 3x3 and 4x4 matrices")
        return ColumnProxy(self, column)

    @property
    def right(self) -> ColumnProxy:
        return self._square_axis(0)

    @property
    def up(self) -> ColumnProxy:
        return self._square_axis(1)

    @property
    def backward(self) -> ColumnProxy:
        return self._square_axis(2)

    @property
    def position(self) -> ColumnProxy:
        self._require_4x4("position")
        return ColumnProxy(self, 3)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Matrix):
            return self._m.shape == other._m.shape and bool(np.array_equal(self._m, other._m))
        return NotImplemented

    def __repr__(self) -> str:
        columns = ", ".join(repr(list(column)) for column in self)
        return f"Matrix.from_columns({columns})"

    def __copy__(self) -> Matrix:
        return Matrix._wrap(self._m)

    def _elementwise(self, other: Any, op) -> Matrix:
        if isinstance(other, Matrix):
            if other._m.shape != self._m.shape:
                raise ValueError("matrix shapes differ")
            return Matrix._wrap(op(self._m, other._m))
        if isinstance(other, Real):
            return Matrix._wrap(op(self._m, float(other)))
        return NotImplemented

    def _update(self, result) -> Matrix:
        if result is NotImplemented:
            return result
        self._m = result._m
        return self

    def __add__(self, other):
        return self._elementwise(other, np.add)

    def __radd__(self, other):
        return self._elementwise(other, np.add)

    def __sub__(self, other):
        return self._elementwise(other, np.subtract)

    def __mul__(self, other):
        if isinstance(other, Matrix):
            if self.columns != other.rows:
                raise ValueError(
                    f"cannot multiply a {self.columns}x{self.rows} matrix by a {other.columns}x{other.rows} one"
                )
            return Matrix._wrap(self._m @ other._m)
        if isinstance(other, Real):
            return Matrix._wrap(self._m * float(other))
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return Matrix._wrap(self._m * float(other))
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Matrix):
            return self * other.inversed()
        if isinstance(other, Real):
            if other == 0:
                raise ZeroDivisionError("matrix division by zero")
            return Matrix._wrap(self._m / float(other))
        return NotImplemented

    def __iadd__(self, other):
        return self._update(self + other)

    def __isub__(self, other):
        return self._update(self - other)

    def __imul__(self, other):
        return self._update(self * other)

    def __itruediv__(self, other):
        return self._update(self / other)

    def data(self) -> list[float]:
        """Return the elements flattened in column-major order."""
        return [float(value) for value in self._m.T.ravel()]

    def _require_4x4(self, operation: str) -> None:
        if self._m.shape != (4, 4):
            raise ValueError(f"{operation} needs a 4x4 matrix")

    def translate(self, vector: Iterable) -> None:
        """Post-multiply by a translation by the given 3-component vector."""
        self._require_4x4("translate")
        offset = _values_of(vector)
        if len(offset) != 3:
            raise ValueError("translation needs 3 components")
        self._m[:, 3] = self._m[:, :3] @ np.array(offset) + self._m[:, 3]

    def translated(self, vector: Iterable) -> Matrix:
        result = Matrix._wrap(self._m)
        result.translate(vector)
        return result

    def rotate(self, radians: float, axis: Iterable) -> None:
        """Post-multiply by a rotation of ``radians`` about ``axis``."""
        self._require_4x4("rotate")
        direction = np.array(_values_of(axis))
        if direction.shape != (3,):
            raise ValueError("rotation axis needs 3 components")
        norm = np.linalg.norm(direction)
        if norm == 0:
            raise ValueError("rotation axis must not be zero")
        a = direction / norm
        c, s = math.cos(radians), math.sin(radians)
        cross = np.array([[0.0, -a[2], a[1]], [a[2], 0.0, -a[0]], [-a[1], a[0], 0.0]])
        rotation = np.eye(4)
        rotation[:3, :3] = c * np.eye(3) + s * cross + (1.0 - c) * np.outer(a, a)
        self._m = self._m @ rotation

    def rotated(self, radians: float, axis: Iterable) -> Matrix:
        result = Matrix._wrap(self._m)
        result.rotate(radians, axis)
        return result

    def inverse(self) -> None:
        """Invert this matrix in place."""
        if self.columns != self.rows:
            raise ValueError("only square matrices can be inverted")
        try:
            self._m = np.linalg.inv(self._m)
        except np.linalg.LinAlgError as error:
            raise ValueError("matrix is singular") from error

    def inversed(self) -> Matrix:
        result = Matrix._wrap(self._m)
        result.inverse()
        return result

    @classmethod
    def perspective(cls, radians: float, aspect_ratio: float, near_clip: float, far_clip: float) -> Matrix:
        """Right-handed perspective projection with depth mapped to [-1, 1]."""
        if aspect_ratio == 0:
            raise ValueError("aspect ratio must not be zero")
        if far_clip == near_clip:
            raise ValueError("near and far clip planes must differ")
        tan_half = math.tan(radians / 2)
        if tan_half == 0:
            raise ValueError("field of view must not be zero")
        m = np.zeros((4, 4))
        m[0, 0] = 1.0 / (aspect_ratio * tan_half)
        m[1, 1] = 1.0 / tan_half
        m[2, 2] = -(far_clip + near_clip) / (far_clip - near_clip)
        m[3, 2] = -1.0
        m[2, 3] = -(2.0 * far_clip * near_clip) / (far_clip - near_clip)
        return cls._wrap(m)

    @classmethod
    def ortho(
        cls, left: float, right: float, bottom: float, top: float, near_clip: float, far_clip: float
    ) -> Matrix:
        """Right-handed orthographic projection with depth mapped to [-1, 1]."""
        if right == left or top == bottom or far_clip == near_clip:
            raise ValueError("opposite clip planes must differ")
        m = np.eye(4)
        m[0, 0] = 2.0 / (right - left)
        m[1, 1] = 2.0 / (top - bottom)
        m[2, 2] = -2.0 / (far_clip - near_clip)
        m[0, 3] = -(right + left) / (right - left)
        m[1, 3] = -(top + bottom) / (top - bottom)
        m[2, 3] = -(far_clip + near_clip) / (far_clip - near_clip)
        return cls._wrap(m)
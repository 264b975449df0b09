"""Small fixed-size vector and matrix types for rendering."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterable, Iterator

# Machine epsilon of a single-precision float; vectors shorter than this
# are left untouched by ``normalized``.
FLOAT_EPSILON = 1.1920928955078125e-07

# Determinants smaller than this make a matrix count as singular.
SINGULAR_THRESHOLD = 1e-6


def _index(vector, index: int) -> float:
    values = tuple(vector)
    if not isinstance(index, int) or not 0 <= index < len(values):
        raise IndexError(f"vector index {index!r} out of range")
    return values[index]


def _combine(a, b, op):
    if type(a) is not type(b):
        return NotImplemented
    return type(a)(*(op(x, y) for x, y in zip(a, b)))


def _scale(vector, scalar):
    if not isinstance(scalar, Real):
        return NotImplemented
    return type(vector)(*(c * scalar for c in vector))


def _multiply(vector, other):
    if type(other) is type(vector):
        return sum(x * y for x, y in zip(vector, other))
    return _scale(vector, other)


def _divide(vector, scalar):
    if not isinstance(scalar, Real):
        return NotImplemented
    return type(vector)(*(c / scalar for c in vector))


@dataclass(frozen=True)
class Vec2:
    """A two-component vector."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __getitem__(self, index):
        return _index(self, index)

    def __add__(self, other):
        return _combine(self, other, lambda a, b: a + b)

    def __sub__(self, other):
        return _combine(self, other, lambda a, b: a - b)

    def __mul__(self, other):
        """Dot product with a vector, or scaling by a number."""
        return _multiply(self, other)

    def __rmul__(self, other):
        return _scale(self, other)

    def __truediv__(self, scalar):
        return _divide(self, scalar)


@dataclass(frozen=True)
class Vec3:
    """A three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index):
        return _index(self, index)

    def __add__(self, other):
        return _combine(self, other, lambda a, b: a + b)

    def __sub__(self, other):
        return _combine(self, other, lambda a, b: a - b)

    def __mul__(self, other):
        """Dot product with a vector, or scaling by a number."""
        return _multiply(self, other)

    def __rmul__(self, other):
        return _scale(self, other)

    def __truediv__(self, scalar):
        return _divide(self, scalar)

    def xy(self) -> Vec2:
        return Vec2(self.x, self.y)


@dataclass(frozen=True)
class Vec4:
    """A four-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __getitem__(self, index):
        return _index(self, index)

    def __add__(self, other):
        return _combine(self, other, lambda a, b: a + b)

    def __sub__(self, other):
        return _combine(self, other, lambda a, b: a - b)

    def __mul__(self, other):
        """Dot product with a vector, or scaling by a number."""
        return _multiply(self, other)

    def __rmul__(self, other):
        return _scale(self, other)

    def __truediv__(self, scalar):
        return _divide(self, scalar)

    def xy(self) -> Vec2:
        return Vec2(self.x, self.y)

    def xyz(self) -> Vec3:
        return Vec3(self.x, self.y, self.z)


def squared_norm(v) -> float:
    return v * v


def norm(v) -> float:
    return math.sqrt(v * v)


def normalized(v):
    """Return ``v`` scaled to unit length; near-zero vectors are returned as is."""
    length = norm(v)
    return v / length if length > FLOAT_EPSILON else v


def cwise_product(a, b):
    """Component-wise product of two vectors of the same kind."""
    result = _combine(a, b, lambda x, y: x * y)
    if result is NotImplemented:
        raise TypeError("cwise_product needs two vectors of the same kind")
    return result


def cross(a: Vec3, b: Vec3) -> Vec3:
    return Vec3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def _parse_rows(rows, size: int) -> tuple[tuple[float, ...], ...]:
    if rows is None:
        return tuple((0.0,) * size for _ in range(size))
    parsed = tuple(tuple(float(value) for value in row) for row in rows)
    if len(parsed) != size or any(len(row) != size for row in parsed):
        raise ValueError(f"expected a {size}x{size} matrix")
    return parsed


def _identity_rows(size: int) -> list[list[float]]:
    return [[1.0 if r == c else 0.0 for c in range(size)] for r in range(size)]


def _matmul(a, b) -> list[list[float]]:
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, col)) for col in columns] for row in a]


def _apply(rows, vector: Iterable[float]) -> list[float]:
    values = tuple(vector)
    return [sum(row[k] * values[k] for k in range(len(values))) for row in rows]


def _det3(m) -> float:
    return (
        m[0][0] * (m[1][1] * m[2][2] - m[1][2] * m[2][1])
        - m[0][1] * (m[1][0] * m[2][2] - m[1][2] * m[2][0])
        + m[0][2] * (m[1][0] * m[2][1] - m[1][1] * m[2][0])
    )


class Matrix3:
    """A 3x3 matrix of floats stored row by row."""

    def __init__(self, rows=None):
        self._rows = _parse_rows(rows, 3)

    @classmethod
    def identity(cls) -> Matrix3:
        return cls(_identity_rows(3))

    def __getitem__(self, index) -> tuple[float, ...]:
        return self._rows[index]

    def __iter__(self):
        return iter(self._rows)

    def __eq__(self, other):
        if not isinstance(other, Matrix3):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self) -> str:
        return f"Matrix3({[list(row) for row in self._rows]!r})"

    def __mul__(self, other):
        if isinstance(other, Matrix3):
            return Matrix3(_matmul(self._rows, other._rows))
        if isinstance(other, Vec3):
            return Vec3(*_apply(self._rows, other))
        return NotImplemented


class Matrix4:
    """A 4x4 matrix of floats stored row by row."""

    def __init__(self, rows=None):
        self._rows = _parse_rows(rows, 4)

    @classmethod
    def identity(cls) -> Matrix4:
        return cls(_identity_rows(4))

    def __getitem__(self, index) -> tuple[float, ...]:
        return self._rows[index]

    def __iter__(self):
        return iter(self._rows)

    def __eq__(self, other):
        if not isinstance(other, Matrix4):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self) -> str:
        return f"Matrix4({[list(row) for row in self._rows]!r})"

    def __mul__(self, other):
        """Multiply by a matrix, a Vec4, or a Vec3 (using the upper-left 3x3 block)."""
        if isinstance(other, Matrix4):
            return Matrix4(_matmul(self._rows, other._rows))
        if isinstance(other, Vec4):
            return Vec4(*_apply(self._rows, other))
        if isinstance(other, Vec3):
            return Vec3(*_apply([row[:3] for row in self._rows[:3]], other))
        return NotImplemented

    def transpose(self) -> Matrix4:
        return Matrix4(zip(*self._rows))

    def _cofactor(self, row: int, col: int) -> float:
        minor = [
            [value for c, value in enumerate(r_values) if c != col]
            for r, r_values in enumerate(self._rows)
            if r != row
        ]
        sign = -1.0 if (row + col) % 2 else 1.0
        return sign * _det3(minor)

    def inverse(self) -> Matrix4:
        """Return the inverse, or the identity when the matrix is singular."""
        cofactors = [[self._cofactor(r, c) for c in range(4)] for r in range(4)]
        det = sum(value * cof for value, cof in zip(self._rows[0], cofactors[0]))
        if abs(det) < SINGULAR_THRESHOLD:
            return Matrix4.identity()
        inv_det = 1.0 / det
        return Matrix4(
            [[cofactors[c][r] * inv_det for c in range(4)] for r in range(4)]
        )
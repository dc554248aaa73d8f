"""2D vector over any signed numeric coordinate type."""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Number
from typing import Any, Generic

from . import config
from .meta import CoordT, divide, identities


@dataclass(frozen=True)
class Vector2(Generic[CoordT]):
    """Immutable (x, y) pair; every operation returns a new vector."""

    x: CoordT
    y: CoordT

    @classmethod
    def with_coords(cls, x: CoordT, y: CoordT) -> "Vector2[CoordT]":
        return cls(x, y)

    @classmethod
    def zero(cls, coord_type: type = config.DEFAULT_COORD_TYPE) -> "Vector2[Any]":
        zero, _ = identities(coord_type)
        return cls(zero, zero)

    default = zero

    @classmethod
    def i_hat(cls, coord_type: type = config.DEFAULT_COORD_TYPE) -> "Vector2[Any]":
        """Unit vector along the horizontal axis."""
        zero, one = identities(coord_type)
        return cls(one, zero)

    @classmethod
    def j_hat(cls, coord_type: type = config.DEFAULT_COORD_TYPE) -> "Vector2[Any]":
        """Unit vector along the vertical axis."""
        zero, one = identities(coord_type)
        return cls(zero, one)

    def __str__(self) -> str:
        return config.DISPLAY_TEMPLATE.format(x=self.x, y=self.y)

    def __neg__(self) -> "Vector2[CoordT]":
        return Vector2(-self.x, -self.y)

    def __add__(self, other: "Vector2[CoordT]") -> "Vector2[CoordT]":
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2[CoordT]") -> "Vector2[CoordT]":
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: CoordT) -> "Vector2[CoordT]":
        if not isinstance(scalar, Number):
            return NotImplemented
        return Vector2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: CoordT) -> "Vector2[CoordT]":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: CoordT) -> "Vector2[CoordT]":
        # Integral coordinates truncate toward zero; zero divisors are not trapped.
        if not isinstance(scalar, Number):
            return NotImplemented
        return Vector2(divide(self.x, scalar), divide(self.y, scalar))

    def dot(self, other: "Vector2[CoordT]") -> CoordT:
        _require_vector(other, "dot")
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Vector2[CoordT]") -> CoordT:
        """2D cross product returning a scalar (z-component)."""
        _require_vector(other, "cross")
        return self.x * other.y - other.x * self.y

    def as_tuple(self) -> tuple[CoordT, CoordT]:
        return (self.x, self.y)


def _require_vector(other: Any, operation: str) -> None:
    if not isinstance(other, Vector2):
        raise TypeError(f"{operation} expects a Vector2, got {type(other).__name__}")

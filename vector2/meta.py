"""Coordinate capability contract shared by the vector types."""

from __future__ import annotations

import logging
from functools import lru_cache
from numbers import Integral, Number
from typing import Any, Protocol, TypeVar

import numpy as np

logger = logging.getLogger(__name__)


class Coord(Protocol):
    """Signed numeric coordinate: negation, +, -, *, / and equality."""

    def __neg__(self) -> Any: ...

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...

    def __truediv__(self, other: Any) -> Any: ...

    def __eq__(self, other: object) -> bool: ...


CoordT = TypeVar("CoordT", bound=Coord)


def check_coord_type(coord_type: Any) -> type:
    """Return coord_type if it can serve as a signed numeric coordinate type."""
    if not isinstance(coord_type, type) or not issubclass(coord_type, Number):
        logger.debug("Rejected coordinate type %r: not a numeric type", coord_type)
        raise TypeError(f"{coord_type!r} is not a numeric coordinate type")
    if issubclass(coord_type, (bool, np.unsignedinteger)):
        logger.debug("Rejected coordinate type %r: unsigned", coord_type)
        raise TypeError(f"{coord_type.__name__} is not a signed coordinate type")
    if issubclass(coord_type, (complex, np.complexfloating)):
        logger.debug("Rejected coordinate type %r: complex", coord_type)
        raise TypeError(f"{coord_type.__name__} has no sign and is not a coordinate type")
    return coord_type


@lru_cache(maxsize=None)
def identities(coord_type: type) -> tuple[Any, Any]:
    """Return the (zero, one) identities of coord_type."""
    check_coord_type(coord_type)
    zero, one = coord_type(0), coord_type(1)
    logger.debug("Resolved identities for %s: zero=%r one=%r", coord_type.__name__, zero, one)
    return zero, one


def divide(value: Any, scalar: Any) -> Any:
    """Divide with the coordinate type's native semantics.

    Integral operands truncate toward zero; everything else uses ``/`` as-is.
    Division by zero is left to the operands.
    """
    if isinstance(value, Integral) and isinstance(scalar, Integral):
        quotient = value // scalar
        if quotient < 0 and value % scalar != 0:
            quotient += 1
        return quotient
    return value / scalar

"""Generic 2D vectors over signed numeric coordinate types."""

import logging

from .meta import Coord, CoordT, check_coord_type, divide, identities
from .vectors import Vector2

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Coord",
    "CoordT",
    "Vector2",
    "check_coord_type",
    "divide",
    "identities",
]

"""Default configuration values for vector2."""

from __future__ import annotations

DEFAULT_COORD_TYPE = int
DISPLAY_TEMPLATE = "[{x}, {y}]"

# lettercli/colors.py
"""
Color parsing and RGB interpolation.

Public API
----------
- parse_color(spec): hex / rgb() / named color -> (R, G, B) or None.
- lerp_rgb(c1, c2, t): per-channel linear interpolation.
- color_at(colors, t): piecewise interpolation across an ordered stop list.
- rotate_colors(colors, steps): circular left rotation of a stop list.
- round_half_up(x): rounding used for channels and rotation steps.

Notes
-----
- `parse_color` never raises; callers fall back when it returns None.
- Rounding is half-up rather than Python's round-half-even so that a channel
  at exactly .5 always moves toward the next stop.
"""

from __future__ import annotations

import math
import re
from types import MappingProxyType
from typing import List, Mapping, Optional, Sequence, Tuple, TypeVar

RGB = Tuple[int, int, int]
T = TypeVar("T")

__all__ = [
    "RGB",
    "NAMED_RGB",
    "parse_color",
    "lerp_rgb",
    "color_at",
    "rotate_colors",
    "round_half_up",
]

# =============================================================================
# Lookup tables
# =============================================================================

NAMED_RGB: Mapping[str, RGB] = MappingProxyType(
    {
        "black": (0, 0, 0),
        "white": (255, 255, 255),
        "gray": (128, 128, 128),
        "grey": (128, 128, 128),
        "red": (255, 0, 0),
        "green": (0, 255, 0),
        "blue": (0, 0, 255),
        "cyan": (0, 255, 255),
        "magenta": (255, 0, 255),
        "purple": (128, 0, 128),
        "pink": (255, 105, 180),
        "yellow": (255, 255, 0),
        "orange": (255, 165, 0),
    }
)

_HEX_RE = re.compile(r"^#?([0-9a-f]{3}|[0-9a-f]{6})$", re.IGNORECASE)
_RGB_RE = re.compile(
    r"^rgb\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*\)$", re.IGNORECASE
)


# =============================================================================
# Parsing
# =============================================================================

def _parse_hex(value: str) -> Optional[RGB]:
    m = _HEX_RE.match(value)
    if not m:
        return None
    digits = m.group(1).lower()
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def _parse_rgb_function(value: str) -> Optional[RGB]:
    m = _RGB_RE.match(value)
    if not m:
        return None
    r, g, b = (int(part) for part in m.groups())
    if not all(0 <= channel <= 255 for channel in (r, g, b)):
        return None
    return (r, g, b)


def parse_color(spec: object) -> Optional[RGB]:
    """Parse a color specification into an RGB triple.

    Accepts ``#rgb`` / ``#rrggbb`` (the ``#`` is optional), ``rgb(r, g, b)``
    with channels in 0..255, or one of the names in :data:`NAMED_RGB`.

    Returns
    -------
    tuple[int, int, int] | None
        The parsed color, or None when the spec is not understood.
    """
    if spec is None:
        return None
    value = str(spec).strip()
    if not value:
        return None
    return _parse_hex(value) or _parse_rgb_function(value) or NAMED_RGB.get(value.lower())


# =============================================================================
# Interpolation
# =============================================================================

def round_half_up(x: float) -> int:
    """Round to the nearest integer, with .5 going up."""
    return int(math.floor(x + 0.5))


def lerp_rgb(c1: RGB, c2: RGB, t: float) -> RGB:
    """Linearly interpolate two colors; each channel is rounded on its own."""
    return (
        round_half_up(c1[0] + (c2[0] - c1[0]) * t),
        round_half_up(c1[1] + (c2[1] - c1[1]) * t),
        round_half_up(c1[2] + (c2[2] - c1[2]) * t),
    )


def color_at(colors: Sequence[RGB], t: float) -> RGB:
    """Return the color at position ``t`` (0..1) along an ordered stop list.

    A single stop is returned unchanged for every ``t``. With ``n`` stops,
    ``t`` is scaled across the ``n - 1`` segments; the segment index is
    clamped to ``[0, n - 2]`` and the fractional remainder drives
    :func:`lerp_rgb` within that segment.
    """
    if not colors:
        raise ValueError("color_at() needs at least one color.")
    if len(colors) == 1:
        return colors[0]
    scaled = t * (len(colors) - 1)
    i = min(len(colors) - 2, max(0, int(math.floor(scaled))))
    return lerp_rgb(colors[i], colors[i + 1], scaled - i)


def rotate_colors(colors: Sequence[T], steps: int) -> List[T]:
    """Rotate ``colors`` left by ``steps`` positions (wraps, negatives allowed)."""
    items = list(colors)
    if not items:
        return items
    k = steps % len(items)
    return items[k:] + items[:k]

# lettercli/shadow.py
"""
Drop-shadow compositing for line blocks.

The shadow is a copy of the glyph silhouette, shifted right/down and drawn
with a filler glyph underneath the original characters. With two levels a
second copy is shifted one more cell diagonally; overlapping shadow cells
keep the first glyph written, and the foreground always wins.
"""

from __future__ import annotations

import math
from typing import List, Sequence

from .constants import DEFAULT_SHADOW_CHAR, DEFAULT_SHADOW_X, DEFAULT_SHADOW_Y, MAX_SHADOW_OFFSET
from .layout import rtrim

__all__ = ["composite_shadow", "clamp_levels", "coerce_offset", "resolve_shadow_char"]


def clamp_levels(levels: object) -> int:
    """Clamp a shadow level count to 1 or 2 (junk becomes 1)."""
    try:
        value = float(levels)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 1
    if not math.isfinite(value) or value < 1:
        return 1
    return min(2, int(value))


def coerce_offset(value: object, default: int) -> int:
    """Coerce a shadow offset into ``[0, MAX_SHADOW_OFFSET]``; junk becomes ``default``."""
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError, OverflowError):
        return default
    if not math.isfinite(number):
        return default
    return min(MAX_SHADOW_OFFSET, max(0, int(number)))


def resolve_shadow_char(shadow_char: object) -> str:
    """Return ``shadow_char`` if it is one non-space character, else the default."""
    if isinstance(shadow_char, str) and len(shadow_char) == 1 and not shadow_char.isspace():
        return shadow_char
    return DEFAULT_SHADOW_CHAR


def composite_shadow(
    lines: Sequence[str],
    offset_x: int = DEFAULT_SHADOW_X,
    offset_y: int = DEFAULT_SHADOW_Y,
    levels: int = 1,
    shadow_char: str = DEFAULT_SHADOW_CHAR,
) -> List[str]:
    """Composite a drop shadow beneath ``lines``.

    Parameters
    ----------
    lines : Sequence[str]
        Plain rows of the glyph block.
    offset_x, offset_y : int
        Shadow shift in columns/rows.
    levels : int
        1 or 2 shadow layers (clamped).
    shadow_char : str
        Single display character used for shadow cells; anything else
        falls back to the default glyph.

    Returns
    -------
    list[str]
        A taller/wider block, each row right-trimmed.
    """
    dx0 = coerce_offset(offset_x, DEFAULT_SHADOW_X)
    dy0 = coerce_offset(offset_y, DEFAULT_SHADOW_Y)
    n_levels = clamp_levels(levels)
    glyph = resolve_shadow_char(shadow_char)

    height = len(lines)
    width = max((len(line) for line in lines), default=0)
    out_height = height + dy0 + (n_levels - 1)
    out_width = width + dx0 + (n_levels - 1)

    grid = [[" "] * out_width for _ in range(out_height)]

    for level in range(n_levels):
        dx = dx0 + level
        dy = dy0 + level
        for r, line in enumerate(lines):
            for c, ch in enumerate(line):
                if ch == " ":
                    continue
                tr, tc = r + dy, c + dx
                if tr >= out_height or tc >= out_width:
                    continue
                if grid[tr][tc] == " ":
                    grid[tr][tc] = glyph

    for r, line in enumerate(lines):
        for c, ch in enumerate(line):
            grid[r][c] = ch

    return [rtrim("".join(row)) for row in grid]

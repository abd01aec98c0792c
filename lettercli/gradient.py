# lettercli/gradient.py
"""
Gradient painting for rendered line blocks.

Public API
----------
- apply_gradient(lines, colors, mode, shadow_char): per-character gradient
  with manual RGB interpolation; returns None when a color cannot be parsed.
- apply_vertical_colorizer(lines, colorizer, shadow_char): per-row rotated
  colorizer, the vertical fallback when manual stops are unusable.
- shade_shadow(lines, shadow_char): dim only the shadow glyphs.
- style_shadow_glyph(ch, shadow_char): dim a single glyph if it is a shadow.
- MultilineColorizer: column-aligned gradient over a whole multi-line block.

Design notes
------------
- Output is plain ``str`` with embedded ANSI SGR codes, produced through
  ``rich.style.Style.render`` so escape sequences come from Rich rather than
  hand-written codes.
- Foreground colors are emitted as truecolor; the shadow tone is the
  standard bright-black with the dim attribute.
- Spaces are never styled, so right-trimming a painted row is still safe.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from rich.color import Color, ColorSystem
from rich.style import Style

from .colors import RGB, color_at, parse_color, rotate_colors, round_half_up
from .constants import DEFAULT_SHADOW_CHAR
from .layout import rtrim

__all__ = [
    "MultilineColorizer",
    "apply_gradient",
    "apply_vertical_colorizer",
    "shade_shadow",
    "style_shadow_glyph",
    "paint",
]

_SHADOW_STYLE = Style(color="bright_black", dim=True)


# =============================================================================
# Styling primitives
# =============================================================================

def paint(ch: str, rgb: RGB) -> str:
    """Return ``ch`` wrapped in a truecolor foreground escape."""
    style = Style(color=Color.from_rgb(*rgb))
    return style.render(ch, color_system=ColorSystem.TRUECOLOR)


def style_shadow_glyph(ch: str, shadow_char: Optional[str] = DEFAULT_SHADOW_CHAR) -> str:
    """Dim ``ch`` if it is the shadow glyph; other characters pass through."""
    if shadow_char and ch == shadow_char:
        return _SHADOW_STYLE.render(ch, color_system=ColorSystem.STANDARD)
    return ch


def shade_shadow(lines: Sequence[str], shadow_char: str = DEFAULT_SHADOW_CHAR) -> List[str]:
    """Style the shadow glyphs of every line and leave everything else alone."""
    return ["".join(style_shadow_glyph(ch, shadow_char) for ch in line) for line in lines]


def _row_steps(row: int, total: int, n_stops: int) -> int:
    row_t = 0.0 if total <= 1 else row / (total - 1)
    return round_half_up(row_t * (n_stops - 1))


def _paint_row(
    line: str,
    palette: Sequence[RGB],
    width: int,
    shadow_char: Optional[str],
) -> str:
    out: List[str] = []
    for col in range(width):
        ch = line[col] if col < len(line) else " "
        if ch == " ":
            out.append(ch)
            continue
        if shadow_char and ch == shadow_char:
            out.append(style_shadow_glyph(ch, shadow_char))
            continue
        t = 0.0 if width <= 1 else col / (width - 1)
        out.append(paint(ch, color_at(palette, t)))
    return rtrim("".join(out))


# =============================================================================
# Opaque colorizer
# =============================================================================

class MultilineColorizer:
    """Column-aligned left-to-right gradient over a multi-line block.

    Every line is painted with the same gradient, computed across the widest
    line, so columns line up vertically. This is the coarse fallback used
    when a descriptor's color specs cannot go through :func:`apply_gradient`.

    Parameters
    ----------
    stops : Sequence[tuple[int, int, int]]
        Ordered RGB stops; at least one.
    """

    __slots__ = ("stops",)

    def __init__(self, stops: Sequence[RGB]) -> None:
        if not stops:
            raise ValueError("MultilineColorizer needs at least one stop.")
        self.stops = tuple(stops)

    def __repr__(self) -> str:
        return f"MultilineColorizer(stops={self.stops!r})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, MultilineColorizer) and other.stops == self.stops

    def __hash__(self) -> int:
        return hash(self.stops)

    def rotated(self, steps: int) -> "MultilineColorizer":
        """Return a colorizer over the stop list rotated left by ``steps``."""
        return MultilineColorizer(rotate_colors(self.stops, steps))

    def colorize(self, text: str, shadow_char: Optional[str] = None) -> str:
        """Paint ``text``; shadow glyphs are dimmed when ``shadow_char`` is set."""
        lines = text.split("\n")
        width = max((len(line) for line in lines), default=0)
        return "\n".join(_paint_row(line, self.stops, width, shadow_char) for line in lines)


# =============================================================================
# Manual gradient
# =============================================================================

def apply_gradient(
    lines: Sequence[str],
    colors: Sequence[str],
    mode: str = "horizontal",
    shadow_char: str = DEFAULT_SHADOW_CHAR,
) -> Optional[List[str]]:
    """Paint ``lines`` with a per-character gradient.

    Parameters
    ----------
    lines : Sequence[str]
        Plain (uncolored) rows.
    colors : Sequence[str]
        Color specs understood by :func:`lettercli.colors.parse_color`.
    mode : str
        ``"vertical"`` rotates the palette row by row so the hue sweeps
        diagonally; anything else paints every row with the same palette.
    shadow_char : str
        Glyph painted with the dim shadow tone instead of a gradient color.

    Returns
    -------
    list[str] | None
        Painted rows, or None if any color spec is unparsable.
    """
    stops: List[RGB] = []
    for spec in colors:
        rgb = parse_color(spec)
        if rgb is None:
            return None
        stops.append(rgb)
    if not stops:
        return None

    vertical = str(mode or "horizontal").lower() == "vertical"
    width = max((len(line) for line in lines), default=0)
    total = len(lines)

    painted: List[str] = []
    for row, line in enumerate(lines):
        palette = rotate_colors(stops, _row_steps(row, total, len(stops))) if vertical else stops
        painted.append(_paint_row(line, palette, width, shadow_char))
    return painted


def apply_vertical_colorizer(
    lines: Sequence[str],
    colorizer: MultilineColorizer,
    shadow_char: Optional[str] = None,
) -> List[str]:
    """Color each row with ``colorizer`` rotated by that row's step count.

    Each row is painted on its own, so the gradient spans that row's width.
    """
    total = len(lines)
    if total <= 1:
        return [colorizer.colorize(line, shadow_char) for line in lines]
    n_stops = len(colorizer.stops)
    return [
        colorizer.rotated(_row_steps(row, total, n_stops)).colorize(line, shadow_char)
        for row, line in enumerate(lines)
    ]

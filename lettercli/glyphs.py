# lettercli/glyphs.py
"""
Big-letter glyph generation backed by pyfiglet.

Public API
----------
- GlyphEngine: protocol the renderer depends on.
- FigletGlyphEngine: pyfiglet implementation.
- HORIZONTAL_LAYOUTS / VERTICAL_LAYOUTS: accepted layout names.
- list_fonts(): installed pyfiglet font names.

Notes
-----
- Layout names follow the FIGlet vocabulary. Horizontal layouts override the
  loaded font's smush mode; pyfiglet has no vertical smushing, so vertical
  layouts are validated but all render rows unchanged.
- Errors (unknown font, bad layout) propagate; the renderer owns the
  fallback to verbatim text.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Dict, List, Protocol, Tuple

import pyfiglet

from .constants import DEFAULT_COLUMNS, DEFAULT_FONT, DEFAULT_LAYOUT

__all__ = [
    "GlyphEngine",
    "FigletGlyphEngine",
    "HORIZONTAL_LAYOUTS",
    "VERTICAL_LAYOUTS",
    "list_fonts",
    "resolve_font_name",
]

# FIGlet smush-mode bits (see the FIGfont 2.0 standard).
_SM_KERN = 64
_SM_SMUSH = 128
_SM_RULES = 63

HORIZONTAL_LAYOUTS: Tuple[str, ...] = (
    "default",
    "full",
    "fitted",
    "controlled smushing",
    "universal smushing",
)
VERTICAL_LAYOUTS: Tuple[str, ...] = HORIZONTAL_LAYOUTS


class GlyphEngine(Protocol):
    """Anything that turns text into a multi-line glyph block."""

    def render(
        self,
        text: str,
        font: str = DEFAULT_FONT,
        horizontal_layout: str = DEFAULT_LAYOUT,
        vertical_layout: str = DEFAULT_LAYOUT,
        width: int = DEFAULT_COLUMNS,
    ) -> str:
        ...


@lru_cache(maxsize=1)
def _font_index() -> Dict[str, str]:
    return {name.lower(): name for name in pyfiglet.FigletFont.getFonts()}


def list_fonts() -> List[str]:
    """Return installed pyfiglet font names, sorted."""
    return sorted(_font_index().values())


def resolve_font_name(font: str) -> str:
    """Map ``font`` to an installed font name, ignoring case.

    Raises
    ------
    pyfiglet.FontNotFound
        If no installed font matches.
    """
    key = str(font or DEFAULT_FONT).strip().lower()
    try:
        return _font_index()[key]
    except KeyError:
        raise pyfiglet.FontNotFound(f"font {font!r} is not installed") from None


def _normalize_layout(layout: str, allowed: Tuple[str, ...], axis: str) -> str:
    value = " ".join(str(layout or DEFAULT_LAYOUT).strip().lower().split())
    if value not in allowed:
        raise ValueError(f"unknown {axis} layout {layout!r}; expected one of {', '.join(allowed)}")
    return value


def _smush_mode(layout: str, font_mode: int) -> int:
    if layout == "full":
        return 0
    if layout == "fitted":
        return _SM_KERN
    if layout == "controlled smushing":
        return _SM_SMUSH | (font_mode & _SM_RULES)
    if layout == "universal smushing":
        return _SM_SMUSH
    return font_mode


class FigletGlyphEngine:
    """Render big letters with pyfiglet."""

    def render(
        self,
        text: str,
        font: str = DEFAULT_FONT,
        horizontal_layout: str = DEFAULT_LAYOUT,
        vertical_layout: str = DEFAULT_LAYOUT,
        width: int = DEFAULT_COLUMNS,
    ) -> str:
        h_layout = _normalize_layout(horizontal_layout, HORIZONTAL_LAYOUTS, "horizontal")
        _normalize_layout(vertical_layout, VERTICAL_LAYOUTS, "vertical")

        fig = pyfiglet.Figlet(font=resolve_font_name(font), width=max(1, int(width)))
        fig.Font.smushMode = _smush_mode(h_layout, fig.Font.smushMode)
        return fig.renderText(text)

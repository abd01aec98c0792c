# lettercli/render.py
"""
Rendering pipeline: text in, styled and positioned banner string out.

Stages
------
1. Glyph block: big letters from the glyph engine for ASCII input, the raw
   text otherwise (or when the engine fails).
2. Split into rows and drop trailing blank rows.
3. Optional drop shadow.
4. Optional gradient (manual per-character painting, falling back to the
   descriptor's colorizer), or shadow-only dimming.
5. Optional centering, measured on the plain rows before coloring.
6. Join with newlines.

Every stage is a pure function of its inputs; bad option values degrade the
output instead of raising.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, List, Optional

from .constants import DEFAULT_COLUMNS
from .glyphs import FigletGlyphEngine, GlyphEngine
from .gradient import apply_gradient, apply_vertical_colorizer, shade_shadow
from .layout import center_pad, measure_width, trim_trailing_blank_lines
from .presets import GradientDescriptor, resolve_gradient
from .shadow import composite_shadow, resolve_shadow_char
from .state import StyleState, coerce_int, normalize_gradient_mode

__all__ = ["render", "build_output", "glyph_block", "colorize_block"]

logger = logging.getLogger("lettercli")

_DEFAULT_ENGINE: GlyphEngine = FigletGlyphEngine()


def glyph_block(text: str, style: StyleState, engine: Optional[GlyphEngine] = None) -> str:
    """Return the big-letter block for ``text``, or ``text`` itself on failure."""
    if not style.figlet_enabled or not text.isascii():
        return text
    engine = engine or _DEFAULT_ENGINE
    try:
        return engine.render(
            text,
            font=style.font,
            horizontal_layout=style.horizontal_layout,
            vertical_layout=style.vertical_layout,
            width=_columns(style),
        )
    except Exception as exc:  # noqa: BLE001
        logger.debug("glyph rendering failed (%s); using plain text", exc)
        return text


def colorize_block(lines: List[str], style: StyleState) -> List[str]:
    """Apply the style's gradient (or shadow dimming) to composed rows."""
    descriptor = resolve_gradient(style.gradient)
    if descriptor is None:
        return shade_shadow(lines, style.shadow_char) if style.shadow else list(lines)
    return _apply_descriptor(lines, descriptor, style)


def _apply_descriptor(lines: List[str], descriptor: GradientDescriptor, style: StyleState) -> List[str]:
    mode = normalize_gradient_mode(style.gradient_mode)
    shadow_char = style.shadow_char if style.shadow else None

    if descriptor.stops:
        painted = apply_gradient(lines, descriptor.stops, mode, style.shadow_char)
        if painted is not None:
            return painted
        if descriptor.colorizer is None:
            logger.warning("gradient %r has colors that cannot be rendered; skipping it", style.gradient)
            return shade_shadow(lines, style.shadow_char) if style.shadow else list(lines)
        if mode == "vertical":
            return apply_vertical_colorizer(lines, descriptor.colorizer, shadow_char)

    if descriptor.colorizer is None:
        return list(lines)
    colored = descriptor.colorizer.colorize("\n".join(lines), shadow_char)
    return trim_trailing_blank_lines(colored.split("\n"))


def _columns(style: StyleState) -> int:
    columns = coerce_int(style.columns, DEFAULT_COLUMNS)
    return columns if columns > 0 else DEFAULT_COLUMNS


def render(
    text: Any,
    style: Optional[StyleState] = None,
    *,
    glyph_engine: Optional[GlyphEngine] = None,
    **overrides: Any,
) -> str:
    """Render ``text`` as a styled banner.

    Parameters
    ----------
    text : Any
        Input text; ``None`` is treated as empty.
    style : StyleState | None
        Style snapshot; defaults to ``StyleState()``.
    glyph_engine : GlyphEngine | None
        Engine for big letters; defaults to pyfiglet.
    **overrides
        Field overrides applied on top of ``style`` (e.g. ``shadow=True``).

    Returns
    -------
    str
        Rows joined by ``\\n`` without a trailing newline; ``""`` for blank
        input.
    """
    style = replace(style or StyleState(), **overrides) if overrides else (style or StyleState())
    shadow_char = resolve_shadow_char(style.shadow_char)
    if shadow_char != style.shadow_char:
        style = replace(style, shadow_char=shadow_char)

    input_text = ("" if text is None else str(text)).rstrip()
    if not input_text:
        return ""

    base_lines = trim_trailing_blank_lines(glyph_block(input_text, style, glyph_engine).split("\n"))

    if style.shadow:
        composed = composite_shadow(
            base_lines,
            offset_x=style.shadow_x,
            offset_y=style.shadow_y,
            levels=style.shadow_levels,
            shadow_char=style.shadow_char,
        )
    else:
        composed = base_lines

    main_lines = colorize_block(composed, style)

    width = measure_width(composed)
    out_lines = center_pad(main_lines, _columns(style), width, center=style.center)
    return "\n".join(out_lines)


def build_output(text: Any, style: Optional[StyleState] = None, **kwargs: Any) -> str:
    """Alias of :func:`render`."""
    return render(text, style, **kwargs)

# lettercli/presets.py
"""
Gradient presets and gradient-spec resolution.

Public API
----------
- PRESET_COLORS: preset name -> ordered stop list (color-spec strings).
- GradientDescriptor: resolved gradient (explicit stops + fallback colorizer).
- resolve_gradient(spec): preset name | "c1,c2,..." | none -> descriptor/None.
- build_colorizer(specs): fallback colorizer for a list of color specs.
- list_preset_names(): sorted preset names.

Notes
-----
- The preset catalog is a read-only mapping built once at import.
- Stops are kept as strings; :func:`lettercli.gradient.apply_gradient` parses
  them when painting. The fallback colorizer is broader: it also accepts any
  color name Rich knows (``dark_orange``, ``navy_blue``, ``deep_pink3`` ...).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Optional, Sequence, Tuple

from rich.color import Color, ColorParseError

from .colors import RGB, parse_color
from .constants import DISABLED_GRADIENT_SPECS
from .gradient import MultilineColorizer

__all__ = [
    "PRESET_COLORS",
    "GradientDescriptor",
    "resolve_gradient",
    "build_colorizer",
    "parse_color_list",
    "list_preset_names",
]

logger = logging.getLogger("lettercli")

# =============================================================================
# Preset catalog
# =============================================================================

PRESET_COLORS: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "atlas": ("#FEAC5E", "#C779D0", "#4BC0C8"),
        "cristal": ("#bdfff3", "#4ac29a"),
        "fruit": ("#ff4e50", "#f9d423"),
        "instagram": ("#833ab4", "#fd1d1d", "#fcb045"),
        "mind": ("#473B7B", "#3584A7", "#30D2BE"),
        "morning": ("#FF5F6D", "#FFC371"),
        "pastel": ("#74ebd5", "#acb6e5"),
        "passion": ("#f43b47", "#453a94"),
        "rainbow": ("#ff0000", "#ffff00", "#00ff00", "#00ffff", "#0000ff", "#ff00ff"),
        "retro": ("#F7971E", "#FFD200"),
        "summer": ("#22c1c3", "#fdbb2d"),
        "teen": ("#77A1D3", "#79CBCA", "#E684AE"),
        "vice": ("#5EE7DF", "#B490CA"),
    }
)


@dataclass(frozen=True)
class GradientDescriptor:
    """A resolved gradient.

    Attributes
    ----------
    kind : str
        ``"preset"`` or ``"custom"``.
    name : str
        Preset name, or ``"custom"``.
    stops : tuple[str, ...] | None
        Ordered color specs for manual interpolation.
    colorizer : MultilineColorizer | None
        Fallback colorizer; None when the specs could not be turned into one.
    """

    kind: str
    name: str
    stops: Optional[Tuple[str, ...]]
    colorizer: Optional[MultilineColorizer]


# =============================================================================
# Helpers
# =============================================================================

def _to_rgb(spec: str) -> Optional[RGB]:
    rgb = parse_color(spec)
    if rgb is not None:
        return rgb
    try:
        triplet = Color.parse(spec.strip().lower()).get_truecolor()
    except ColorParseError:
        return None
    return (triplet.red, triplet.green, triplet.blue)


def build_colorizer(specs: Sequence[str]) -> Optional[MultilineColorizer]:
    """Build a fallback colorizer, or None if any spec is not a color."""
    stops: List[RGB] = []
    for spec in specs:
        rgb = _to_rgb(spec)
        if rgb is None:
            logger.debug("gradient color %r is not recognised", spec)
            return None
        stops.append(rgb)
    return MultilineColorizer(stops) if stops else None


def parse_color_list(spec: str) -> Optional[List[str]]:
    """Split ``"c1, c2, ..."`` into tokens; None unless at least two remain."""
    parts = [part.strip() for part in spec.split(",")]
    parts = [part for part in parts if part]
    return parts if len(parts) >= 2 else None


# =============================================================================
# Public API
# =============================================================================

def resolve_gradient(spec: Optional[str]) -> Optional[GradientDescriptor]:
    """Resolve a gradient spec into a descriptor.

    ``None``, ``""``, ``none``/``off``/``false`` and anything that is neither a
    preset nor a list of two or more colors resolve to None (no gradient).
    """
    if not spec:
        return None
    raw = str(spec).strip()
    lower = raw.lower()
    if not raw or lower in DISABLED_GRADIENT_SPECS:
        return None

    if lower in PRESET_COLORS:
        stops = PRESET_COLORS[lower]
        return GradientDescriptor("preset", lower, stops, build_colorizer(stops))

    custom = parse_color_list(raw)
    if custom:
        return GradientDescriptor("custom", "custom", tuple(custom), build_colorizer(custom))

    logger.debug("gradient spec %r disables the gradient", raw)
    return None


def list_preset_names() -> List[str]:
    """Return preset names in sorted order."""
    return sorted(PRESET_COLORS)

# lettercli/state.py
"""
Style state shared by the CLI, the interactive driver and the renderer.

`StyleState` is a frozen dataclass: the renderer receives one snapshot per
call, and the interactive driver derives new snapshots with
:func:`dataclasses.replace` instead of mutating a shared record.

Public API
----------
- StyleState: the style snapshot.
- normalize_gradient_mode(mode): "h"/"v" shorthands -> full mode names.
- to_bool(value, default): lenient truthy/falsy parsing for CLI and env values.
- coerce_int(value, default): int coercion that never raises.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from .constants import (
    DEFAULT_ANIMATE_MODE,
    DEFAULT_COLUMNS,
    DEFAULT_FONT,
    DEFAULT_GRADIENT_MODE,
    DEFAULT_LAYOUT,
    DEFAULT_SHADOW_CHAR,
    DEFAULT_SHADOW_LEVELS,
    DEFAULT_SHADOW_X,
    DEFAULT_SHADOW_Y,
    DEFAULT_SPEED,
)

__all__ = ["StyleState", "normalize_gradient_mode", "to_bool", "coerce_int"]

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def normalize_gradient_mode(mode: Optional[str]) -> str:
    """Expand ``h``/``v`` shorthands; empty means horizontal.

    Unknown values are returned lowered so they can be shown back to the user;
    the painter treats anything but ``vertical`` as horizontal.
    """
    if not mode:
        return DEFAULT_GRADIENT_MODE
    raw = str(mode).strip().lower()
    if raw in {"h", "horizontal"}:
        return "horizontal"
    if raw in {"v", "vertical"}:
        return "vertical"
    return raw


def to_bool(value: Any, default: bool) -> bool:
    """Parse ``value`` as a boolean, falling back to ``default``."""
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    raw = str(value).strip().lower()
    if raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    return default


def coerce_int(value: Any, default: int) -> int:
    """Convert ``value`` to int; non-numeric or non-finite input gives ``default``."""
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return default
    if not math.isfinite(number):
        return default
    return int(number)


@dataclass(frozen=True)
class StyleState:
    """One immutable snapshot of every rendering option."""

    font: str = DEFAULT_FONT
    horizontal_layout: str = DEFAULT_LAYOUT
    vertical_layout: str = DEFAULT_LAYOUT
    gradient: Optional[str] = None
    gradient_mode: str = DEFAULT_GRADIENT_MODE
    shadow: bool = False
    shadow_x: int = DEFAULT_SHADOW_X
    shadow_y: int = DEFAULT_SHADOW_Y
    shadow_levels: int = DEFAULT_SHADOW_LEVELS
    shadow_char: str = DEFAULT_SHADOW_CHAR
    center: bool = False
    columns: int = DEFAULT_COLUMNS
    figlet_enabled: bool = True
    animate_mode: str = DEFAULT_ANIMATE_MODE
    speed: str = DEFAULT_SPEED

    def to_dict(self) -> Dict[str, Any]:
        """Return the snapshot as a plain dict."""
        return asdict(self)

# lettercli/constants.py
"""
Shared constants and defaults for lettercli (Python 3.9+).

This module centralizes default style values, mode vocabularies and the
animation speed table so the CLI, the interactive driver and the renderer
agree on them.

Public API
----------
- DEFAULT_*: Default style values used by `StyleState`.
- MAX_SHADOW_OFFSET: Upper bound for shadow offsets, in cells.
- SPEED_PRESETS_MS: Named animation speeds in milliseconds.
- ANIMATE_MODES / GRADIENT_MODES: Accepted mode names.
- DISABLED_GRADIENT_SPECS: Gradient specs meaning "no gradient".
- PROMPT_HTML: Prompt markup for prompt_toolkit.
- HEADER_GRADIENT: Stops for the interactive header title.
"""

from __future__ import annotations

from typing import Dict, Final, FrozenSet, Tuple

__all__ = [
    "APP_NAME",
    "DEFAULT_FONT",
    "DEFAULT_LAYOUT",
    "DEFAULT_GRADIENT_MODE",
    "DEFAULT_SHADOW_X",
    "DEFAULT_SHADOW_Y",
    "DEFAULT_SHADOW_LEVELS",
    "DEFAULT_SHADOW_CHAR",
    "MAX_SHADOW_OFFSET",
    "DEFAULT_COLUMNS",
    "DEFAULT_ANIMATE_MODE",
    "DEFAULT_SPEED",
    "SPEED_PRESETS_MS",
    "ANIMATE_MODES",
    "GRADIENT_MODES",
    "DISABLED_GRADIENT_SPECS",
    "PROMPT_HTML",
    "HEADER_GRADIENT",
    "CLEAR_SCREEN",
]

APP_NAME: Final[str] = "lettercli"

# ---------------------------------------------------------------------------
# Style defaults
# ---------------------------------------------------------------------------
DEFAULT_FONT: Final[str] = "Slant"
DEFAULT_LAYOUT: Final[str] = "default"
DEFAULT_GRADIENT_MODE: Final[str] = "horizontal"
DEFAULT_SHADOW_X: Final[int] = 3
DEFAULT_SHADOW_Y: Final[int] = 1
DEFAULT_SHADOW_LEVELS: Final[int] = 1
DEFAULT_SHADOW_CHAR: Final[str] = "░"
MAX_SHADOW_OFFSET: Final[int] = 200
DEFAULT_COLUMNS: Final[int] = 80
DEFAULT_ANIMATE_MODE: Final[str] = "none"
DEFAULT_SPEED: Final[str] = "medium"

# ---------------------------------------------------------------------------
# Vocabularies
# ---------------------------------------------------------------------------
SPEED_PRESETS_MS: Final[Dict[str, int]] = {
    "fast": 15,
    "medium": 50,
    "slow": 120,
}

ANIMATE_MODES: Final[Tuple[str, ...]] = ("none", "line", "char")
GRADIENT_MODES: Final[Tuple[str, ...]] = ("horizontal", "vertical")
DISABLED_GRADIENT_SPECS: Final[FrozenSet[str]] = frozenset({"none", "off", "false"})

# ---------------------------------------------------------------------------
# Interactive look
# ---------------------------------------------------------------------------
PROMPT_HTML: Final[str] = "<ansicyan>lettercli</ansicyan> <ansibrightblack>›</ansibrightblack> "
HEADER_GRADIENT: Final[Tuple[str, ...]] = ("#7F7FD5", "#86A8E7", "#91EAE4")
CLEAR_SCREEN: Final[str] = "\x1b[2J\x1b[H"

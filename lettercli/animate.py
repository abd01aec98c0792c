# lettercli/animate.py
"""
Timed playback of a rendered banner.

Modes
-----
- ``none``: write everything at once.
- ``line``: one row at a time, pausing between rows.
- ``char``: one character at a time; text carrying ANSI styling falls back
  to ``line`` so escape sequences are never split.

Output goes through ``click.echo``, which strips styling when the target is
not a terminal unless ``color=True`` is passed.
"""

from __future__ import annotations

import math
import re
import time
from typing import Callable, Optional, TextIO, Union

import click

from .constants import DEFAULT_ANIMATE_MODE, DEFAULT_SPEED, SPEED_PRESETS_MS

__all__ = ["normalize_speed_ms", "has_ansi_codes", "print_animated"]

_ANSI_SGR_RE = re.compile(r"\x1b\[[0-9;]*m")
_DIGITS_RE = re.compile(r"^\d+$")

Speed = Union[int, float, str, None]


def has_ansi_codes(text: str) -> bool:
    """True if ``text`` holds any SGR escape sequence."""
    return bool(_ANSI_SGR_RE.search(text))


def normalize_speed_ms(speed: Speed) -> int:
    """Turn a speed name or millisecond value into a delay in milliseconds.

    ``fast``/``medium``/``slow`` map to the preset table, digit strings and
    numbers are taken as milliseconds (negative clamps to 0), anything else
    disables the delay.
    """
    if isinstance(speed, bool):
        return 0
    if isinstance(speed, (int, float)):
        return max(0, int(speed)) if math.isfinite(speed) else 0
    if not speed:
        return 0
    raw = str(speed).strip().lower()
    if _DIGITS_RE.match(raw):
        return int(raw)
    return SPEED_PRESETS_MS.get(raw, 0)


def print_animated(
    text: str,
    mode: Optional[str] = DEFAULT_ANIMATE_MODE,
    speed: Speed = DEFAULT_SPEED,
    *,
    stream: Optional[TextIO] = None,
    color: Optional[bool] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Write ``text`` to ``stream`` (stdout by default) with optional pacing.

    The output always ends with exactly one newline added if ``text`` does not
    already end with one.
    """
    resolved = (mode or DEFAULT_ANIMATE_MODE).strip().lower()
    delay_ms = normalize_speed_ms(speed)

    def emit(chunk: str) -> None:
        click.echo(chunk, file=stream, nl=False, color=color)

    if resolved == "none" or delay_ms <= 0:
        emit(text if text.endswith("\n") else text + "\n")
        return

    if resolved == "char" and not has_ansi_codes(text):
        for ch in text:
            emit(ch)
            sleep(delay_ms / 1000.0)
        if not text.endswith("\n"):
            emit("\n")
        return

    lines = text.split("\n")
    for index, line in enumerate(lines):
        emit(line + "\n")
        if index != len(lines) - 1:
            sleep(delay_ms / 1000.0)

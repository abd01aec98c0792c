# lettercli/layout.py
"""
Width measurement, centering and trimming for line blocks.

Widths are display widths: ANSI styling is stripped first and wide
characters (CJK, most emoji) count as two terminal cells.
"""

from __future__ import annotations

from typing import List, Sequence

from rich.cells import cell_len
from rich.text import Text

__all__ = [
    "strip_ansi",
    "measure_width",
    "center_offset",
    "center_pad",
    "rtrim",
    "trim_trailing_blank_lines",
]


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from ``text``."""
    if "\x1b" not in text:
        return text
    return Text.from_ansi(text).plain


def measure_width(lines: Sequence[str]) -> int:
    """Return the widest display width across ``lines`` (0 if empty)."""
    return max((cell_len(strip_ansi(line)) for line in lines), default=0)


def center_offset(columns: int, width: int) -> int:
    """Left padding that centers a block of ``width`` in ``columns``."""
    return max(0, (columns - width) // 2)


def center_pad(lines: Sequence[str], columns: int, width: int, center: bool = True) -> List[str]:
    """Left-pad every non-empty line so the block sits centered.

    Empty lines stay empty so blank rows never carry trailing spaces.
    ``width`` should be the plain width measured before coloring.
    """
    spaces = center_offset(columns, width) if center else 0
    if spaces <= 0:
        return list(lines)
    pad = " " * spaces
    return [pad + line if line else "" for line in lines]


def rtrim(line: str) -> str:
    """Strip trailing spaces and tabs only."""
    return line.rstrip(" \t")


def trim_trailing_blank_lines(lines: Sequence[str]) -> List[str]:
    """Drop trailing lines that hold nothing but whitespace."""
    end = len(lines)
    while end > 0 and not strip_ansi(lines[end - 1]).strip():
        end -= 1
    return list(lines[:end])

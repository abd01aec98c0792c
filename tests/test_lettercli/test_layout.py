# tests/test_lettercli/test_layout.py
from __future__ import annotations

from lettercli import layout as sut


def test_measure_width_ignores_ansi_codes():
    assert sut.measure_width(["abc", "\x1b[31mabcdef\x1b[0m"]) == 6


def test_measure_width_counts_wide_characters_double():
    assert sut.measure_width(["你好"]) == 4
    assert sut.measure_width([]) == 0


def test_center_pad_uses_plain_width():
    lines = ["x" * 10, "", "y"]
    out = sut.center_pad(lines, columns=80, width=10)
    assert out == [" " * 35 + "x" * 10, "", " " * 35 + "y"]


def test_center_pad_disabled_or_too_wide_is_noop():
    lines = ["abc", ""]
    assert sut.center_pad(lines, columns=80, width=3, center=False) == lines
    assert sut.center_pad(lines, columns=2, width=3) == lines
    assert sut.center_offset(10, 20) == 0
    assert sut.center_offset(81, 10) == 35


def test_trim_trailing_blank_lines_keeps_inner_blanks():
    assert sut.trim_trailing_blank_lines(["a", "", "b", "  ", ""]) == ["a", "", "b"]
    assert sut.trim_trailing_blank_lines(["", " "]) == []


def test_strip_ansi_and_rtrim():
    assert sut.strip_ansi("\x1b[1;31mhi\x1b[0m") == "hi"
    assert sut.strip_ansi("plain") == "plain"
    assert sut.rtrim("ab \t ") == "ab"
    assert sut.rtrim(" ab") == " ab"

# tests/test_lettercli/test_animate.py
from __future__ import annotations

import io

import pytest

from lettercli.animate import has_ansi_codes, normalize_speed_ms, print_animated
from lettercli.gradient import paint


@pytest.mark.parametrize(
    "speed, expected",
    [
        ("fast", 15),
        ("MEDIUM", 50),
        (" slow ", 120),
        ("40", 40),
        (25, 25),
        (12.9, 12),
        (-5, 0),
        (float("nan"), 0),
        (True, 0),
        (None, 0),
        ("", 0),
        ("warp", 0),
        ("-10", 0),
    ],
)
def test_normalize_speed_ms(speed, expected):
    assert normalize_speed_ms(speed) == expected


def test_has_ansi_codes():
    assert has_ansi_codes(paint("A", (1, 2, 3)))
    assert not has_ansi_codes("plain")


class _Recorder:
    def __init__(self):
        self.delays = []

    def __call__(self, seconds):
        self.delays.append(seconds)


def test_none_mode_writes_at_once():
    out, sleep = io.StringIO(), _Recorder()
    print_animated("ab\ncd", "none", "fast", stream=out, sleep=sleep)
    assert out.getvalue() == "ab\ncd\n"
    assert sleep.delays == []


def test_zero_delay_behaves_like_none():
    out, sleep = io.StringIO(), _Recorder()
    print_animated("ab\ncd", "line", 0, stream=out, sleep=sleep)
    assert out.getvalue() == "ab\ncd\n"
    assert sleep.delays == []


def test_existing_trailing_newline_is_not_doubled():
    out = io.StringIO()
    print_animated("ab\n", None, stream=out)
    assert out.getvalue() == "ab\n"


def test_line_mode_pauses_between_rows():
    out, sleep = io.StringIO(), _Recorder()
    print_animated("a\nb\nc", "line", "medium", stream=out, sleep=sleep)
    assert out.getvalue() == "a\nb\nc\n"
    assert sleep.delays == [0.05, 0.05]


def test_char_mode_pauses_per_character():
    out, sleep = io.StringIO(), _Recorder()
    print_animated("ab", "char", 10, stream=out, sleep=sleep)
    assert out.getvalue() == "ab\n"
    assert sleep.delays == [0.01, 0.01]


def test_char_mode_with_styling_falls_back_to_lines():
    text = paint("A", (255, 0, 0)) + "\n" + paint("B", (0, 0, 255))
    out, sleep = io.StringIO(), _Recorder()
    print_animated(text, "char", 10, stream=out, color=True, sleep=sleep)
    assert out.getvalue() == text + "\n"
    assert sleep.delays == [0.01]


def test_unknown_mode_animates_by_line():
    out, sleep = io.StringIO(), _Recorder()
    print_animated("a\nb", "zigzag", "fast", stream=out, sleep=sleep)
    assert out.getvalue() == "a\nb\n"
    assert sleep.delays == [0.015]


def test_styling_is_stripped_for_non_terminals():
    out = io.StringIO()
    print_animated(paint("A", (255, 0, 0)), stream=out)
    assert out.getvalue() == "A\n"


def test_color_true_keeps_styling():
    text = paint("A", (255, 0, 0))
    out = io.StringIO()
    print_animated(text, stream=out, color=True)
    assert out.getvalue() == text + "\n"

# tests/test_lettercli/test_render.py
from __future__ import annotations

import pytest

from lettercli.gradient import paint, style_shadow_glyph
from lettercli.layout import strip_ansi
from lettercli.state import StyleState

PLAIN = dict(gradient="none", shadow=False, center=False, figlet_enabled=False)


def test_plain_text_passes_through(render_mod):
    assert render_mod.render("AB", **PLAIN) == "AB"


@pytest.mark.parametrize("text", ["", "   \n  ", None])
def test_blank_input_renders_empty(render_mod, text):
    assert render_mod.render(text, shadow=True, gradient="mind", center=True) == ""


def test_trailing_whitespace_is_dropped(render_mod):
    assert render_mod.render("AB  \n\n", **PLAIN) == "AB"


def test_glyph_engine_block_is_used_and_trimmed(render_mod, make_engine):
    engine = make_engine(block="##\n##\n\n   \n")
    out = render_mod.render("AB", glyph_engine=engine, gradient=None, center=False)
    assert out == "##\n##"
    assert engine.calls == [
        {
            "text": "AB",
            "font": "Slant",
            "horizontal_layout": "default",
            "vertical_layout": "default",
            "width": 80,
        }
    ]


def test_engine_receives_style_options(render_mod, make_engine):
    engine = make_engine()
    style = StyleState(font="standard", horizontal_layout="full", columns=120)
    render_mod.render("hi", style, glyph_engine=engine)
    call = engine.calls[0]
    assert (call["font"], call["horizontal_layout"], call["width"]) == ("standard", "full", 120)


def test_non_ascii_input_skips_engine(render_mod, make_engine):
    engine = make_engine(block="BIG")
    assert render_mod.render("你好", glyph_engine=engine, center=False) == "你好"
    assert engine.calls == []


def test_engine_failure_falls_back_to_text(render_mod, make_engine):
    engine = make_engine(error=RuntimeError("no such font"))
    assert render_mod.render("AB", glyph_engine=engine, center=False) == "AB"
    assert len(engine.calls) == 1


def test_disabled_engine_is_not_called(render_mod, make_engine):
    engine = make_engine(block="BIG")
    assert render_mod.render("AB", glyph_engine=engine, figlet_enabled=False) == "AB"
    assert engine.calls == []


def test_shadow_without_gradient_dims_only_shadow(render_mod):
    out = render_mod.render("X", shadow=True, gradient=None, center=False, figlet_enabled=False)
    assert out == "X\n   " + style_shadow_glyph("░", "░")


def test_manual_gradient_colors_each_character(render_mod):
    out = render_mod.render("AB", gradient="red,blue", center=False, figlet_enabled=False)
    assert out == paint("A", (255, 0, 0)) + paint("B", (0, 0, 255))


def test_centering_uses_pre_gradient_width(render_mod):
    out = render_mod.render("AB", gradient="mind", center=True, columns=12, figlet_enabled=False)
    assert out.startswith(" " * 5 + "\x1b[")
    assert strip_ansi(out) == "     AB"


def test_centering_leaves_blank_rows_empty(render_mod, make_engine):
    engine = make_engine(block="ab\n\ncd")
    out = render_mod.render("x", glyph_engine=engine, center=True, columns=10)
    assert out.split("\n") == ["    ab", "", "    cd"]


def test_invalid_columns_fall_back_to_default(render_mod):
    out = render_mod.render("AB", center=True, columns=0, figlet_enabled=False)
    assert out == " " * 39 + "AB"


def test_fallback_colorizer_handles_rich_color_names(render_mod):
    out = render_mod.render("AB", gradient="dark_orange,navy_blue", center=False, figlet_enabled=False)
    assert "\x1b[38;2;" in out
    assert strip_ansi(out) == "AB"


def test_vertical_fallback_colorizer_rotates_rows(render_mod, make_engine):
    engine = make_engine(block="AA\nBB")
    out = render_mod.render(
        "x", glyph_engine=engine, gradient="dark_orange,navy_blue", gradient_mode="v", center=False
    )
    rows = out.split("\n")
    assert [strip_ansi(r) for r in rows] == ["AA", "BB"]
    assert rows[0].replace("A", "B") != rows[1]


def test_unrenderable_gradient_degrades_to_plain(render_mod):
    out = render_mod.render("AB", gradient="foo,bar", center=False, figlet_enabled=False)
    assert out == "AB"


def test_unrenderable_gradient_still_dims_shadow(render_mod):
    out = render_mod.render("X", gradient="foo,bar", shadow=True, center=False, figlet_enabled=False)
    assert out == "X\n   " + style_shadow_glyph("░", "░")


def test_gradient_never_paints_shadow(render_mod):
    out = render_mod.render("X", gradient="red,blue", shadow=True, center=False, figlet_enabled=False)
    assert out.split("\n")[1] == "   " + style_shadow_glyph("░", "░")


def test_overrides_do_not_touch_the_snapshot(render_mod):
    style = StyleState(figlet_enabled=False, center=False)
    render_mod.render("AB", style, shadow=True)
    assert style.shadow is False


def test_build_output_alias(render_mod):
    assert render_mod.build_output("AB", **PLAIN) == "AB"


@pytest.mark.parametrize("bad", [" ", "##"])
def test_invalid_shadow_char_renders_default_glyph(render_mod, bad):
    out = render_mod.render(
        "X", shadow=True, shadow_char=bad, gradient="red,blue", center=False, figlet_enabled=False
    )
    assert out == paint("X", (255, 0, 0)) + "\n   " + style_shadow_glyph("░", "░")


def test_huge_shadow_offset_stays_bounded(render_mod):
    out = render_mod.render("X", shadow=True, shadow_x=10**10, shadow_y=0, figlet_enabled=False)
    assert strip_ansi(out) == "X" + " " * 199 + "░"

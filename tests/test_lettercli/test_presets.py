# tests/test_lettercli/test_presets.py
from __future__ import annotations

import pytest

from lettercli import presets as sut
from lettercli.gradient import MultilineColorizer


def test_custom_list_resolves_with_two_stops():
    desc = sut.resolve_gradient("blue,purple")
    assert desc is not None
    assert desc.kind == "custom"
    assert desc.stops == ("blue", "purple")
    assert desc.colorizer == MultilineColorizer([(0, 0, 255), (128, 0, 128)])


def test_preset_resolves_case_insensitively_to_fixed_stops():
    desc = sut.resolve_gradient("MIND")
    assert desc is not None
    assert desc.kind == "preset"
    assert desc.name == "mind"
    assert desc.stops == ("#473B7B", "#3584A7", "#30D2BE")
    assert desc.colorizer is not None
    assert desc.colorizer.stops[0] == (0x47, 0x3B, 0x7B)


@pytest.mark.parametrize("spec", [None, "", "none", "OFF", "False", "x", "red", " , ,"])
def test_disabled_or_single_color_specs_resolve_to_none(spec):
    assert sut.resolve_gradient(spec) is None


def test_custom_list_trims_and_drops_empty_tokens():
    desc = sut.resolve_gradient(" red , , blue ")
    assert desc is not None
    assert desc.stops == ("red", "blue")


def test_rich_color_names_still_get_a_colorizer():
    desc = sut.resolve_gradient("dark_orange,navy_blue")
    assert desc is not None
    assert desc.colorizer is not None
    assert len(desc.colorizer.stops) == 2


def test_unknown_colors_keep_descriptor_without_colorizer():
    desc = sut.resolve_gradient("foo,bar")
    assert desc is not None
    assert desc.stops == ("foo", "bar")
    assert desc.colorizer is None


def test_preset_catalog_is_complete_and_sorted():
    names = sut.list_preset_names()
    assert names == sorted(names)
    assert names == [
        "atlas", "cristal", "fruit", "instagram", "mind", "morning", "passion",
        "pastel", "rainbow", "retro", "summer", "teen", "vice",
    ]
    assert len(sut.PRESET_COLORS["rainbow"]) == 6
    assert all(len(stops) >= 2 for stops in sut.PRESET_COLORS.values())


def test_preset_catalog_is_read_only():
    with pytest.raises(TypeError):
        sut.PRESET_COLORS["new"] = ("#000", "#fff")  # type: ignore[index]

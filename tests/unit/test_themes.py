"""Tests for theme records, presets and snapshots."""

from dataclasses import FrozenInstanceError, replace

import pytest
from textual.theme import Theme

from themepaint.expr.colors import OPAQUE_BLACK, RGBA
from themepaint.themes import (
    DARK_THEME,
    DEFAULT_THEME_NAME,
    LIGHT_THEME,
    REGISTERED_THEMES,
    TEXTUAL_THEME_PREFIX,
    THEME_LABELS,
    THEME_PRESETS,
    VARIABLE_FIELDS,
    ThemeColor,
    ThemeRecord,
    ThemeSnapshot,
    ThemeVariable,
    get_preset,
    select_theme,
    to_textual_theme,
)


class TestThemeColor:
    """Tests for ThemeColor."""

    def test_from_hex(self) -> None:
        color = ThemeColor.from_hex("#FD7771FF")
        assert color.rgba == RGBA.from_bytes(0xFD, 0x77, 0x71, 0xFF)

    def test_hex_rgb(self) -> None:
        assert ThemeColor.from_hex("#FD7771FF").hex_rgb == "#fd7771"

    def test_from_resolved_replaces_infinity(self) -> None:
        color = ThemeColor.from_resolved(float("inf"), 0.5, float("-inf"), 0.25)
        assert color == ThemeColor(1.0, 0.5, 1.0, 0.25)

    def test_from_resolved_keeps_finite_values(self) -> None:
        assert ThemeColor.from_resolved(0.1, 0.2, 0.3, 1.0) == ThemeColor(0.1, 0.2, 0.3, 1.0)


class TestThemeRecord:
    """Tests for ThemeRecord and the presets."""

    def test_default_record(self) -> None:
        record = ThemeRecord()
        assert record.top_bar == ThemeColor.from_hex("#FFFFFFAA")
        assert record.follow_system_appearance is False

    def test_presets_registered(self) -> None:
        assert THEME_PRESETS == {"light": LIGHT_THEME, "dark": DARK_THEME}
        assert set(THEME_LABELS) == set(THEME_PRESETS)
        assert DEFAULT_THEME_NAME in THEME_PRESETS

    def test_dark_preset_values(self) -> None:
        assert DARK_THEME.background == ThemeColor.from_hex("#191919FF")
        assert DARK_THEME.foreground == ThemeColor.from_hex("#FFFFFFFF")
        assert DARK_THEME.message_box == ThemeColor.from_hex("#363636FF")

    def test_is_dark(self) -> None:
        assert DARK_THEME.is_dark
        assert not LIGHT_THEME.is_dark

    def test_records_are_frozen(self) -> None:
        with pytest.raises(FrozenInstanceError):
            LIGHT_THEME.accent = ThemeColor(0, 0, 0)  # type: ignore[misc]


class TestThemeSnapshot:
    """Tests for ThemeSnapshot."""

    def test_every_variable_maps_to_a_field(self) -> None:
        assert set(VARIABLE_FIELDS) == set(ThemeVariable)
        for field_name in VARIABLE_FIELDS.values():
            assert hasattr(LIGHT_THEME, field_name)

    def test_snapshot_values(self, dark_snapshot: ThemeSnapshot) -> None:
        assert dark_snapshot.name == "dark"
        assert dark_snapshot[ThemeVariable.ACCENT] == DARK_THEME.accent.rgba
        assert dark_snapshot[ThemeVariable.BACKGROUND_SECONDARY] == DARK_THEME.background2.rgba
        assert dark_snapshot[ThemeVariable.MESSAGE_BOX_BORDER] == DARK_THEME.message_box_border.rgba

    def test_get_by_name(self, light_snapshot: ThemeSnapshot) -> None:
        assert light_snapshot.get("--top-bar", OPAQUE_BLACK) == LIGHT_THEME.top_bar.rgba

    def test_get_unknown_returns_default(self, light_snapshot: ThemeSnapshot) -> None:
        marker = RGBA(0.1, 0.2, 0.3, 0.4)
        assert light_snapshot.get("--unknown", marker) is marker

    def test_values_are_read_only(self, light_snapshot: ThemeSnapshot) -> None:
        with pytest.raises(TypeError):
            light_snapshot.values[ThemeVariable.ACCENT] = OPAQUE_BLACK  # type: ignore[index]

    def test_snapshot_unaffected_by_source_mapping(self) -> None:
        values = {variable: OPAQUE_BLACK for variable in ThemeVariable}
        snapshot = ThemeSnapshot("custom", values)
        values[ThemeVariable.ACCENT] = RGBA(1.0, 1.0, 1.0, 1.0)
        assert snapshot[ThemeVariable.ACCENT] == OPAQUE_BLACK

    def test_missing_variables_rejected(self) -> None:
        with pytest.raises(ValueError, match="--accent"):
            ThemeSnapshot("partial", {ThemeVariable.BACKGROUND: OPAQUE_BLACK})

    def test_snapshots_compare_by_value(self) -> None:
        assert LIGHT_THEME.snapshot("light") == LIGHT_THEME.snapshot("light")
        assert LIGHT_THEME.snapshot("light") != DARK_THEME.snapshot("light")


class TestThemeSelection:
    """Tests for preset lookup and system appearance."""

    def test_get_preset(self) -> None:
        assert get_preset("dark") is DARK_THEME

    def test_get_preset_unknown_uses_default(self) -> None:
        assert get_preset("solarized") is THEME_PRESETS[DEFAULT_THEME_NAME]

    def test_select_theme_without_follow(self) -> None:
        custom = replace(LIGHT_THEME, accent=ThemeColor(0, 0, 1))
        assert select_theme(custom, system_dark=True) is custom

    def test_select_theme_following_system(self) -> None:
        following = replace(LIGHT_THEME, follow_system_appearance=True)
        assert select_theme(following, system_dark=True) is DARK_THEME
        assert select_theme(following, system_dark=False) is LIGHT_THEME


class TestTextualThemes:
    """Tests for the Textual theme bridge."""

    def test_registered_themes(self) -> None:
        names = {theme.name for theme in REGISTERED_THEMES}
        assert names == {f"{TEXTUAL_THEME_PREFIX}light", f"{TEXTUAL_THEME_PREFIX}dark"}

    def test_to_textual_theme(self) -> None:
        theme = to_textual_theme("dark", DARK_THEME)
        assert isinstance(theme, Theme)
        assert theme.dark is True
        assert theme.primary == "#fd7771"
        assert theme.background == "#191919"
        assert theme.variables["border"] == "#ffffff"

    def test_light_textual_theme(self) -> None:
        theme = to_textual_theme("light", LIGHT_THEME)
        assert theme.dark is False
        assert theme.surface == "#f5f5f5"

"""Tests for color decoding and variable lookup."""

import pytest

from themepaint.expr.colors import (
    NAMED_COLORS,
    OPAQUE_BLACK,
    RGBA,
    TRANSPARENT_WHITE,
    ColorName,
    parse_hex,
    resolve_color,
    resolve_variable,
)
from themepaint.expr.models import HexColor, NamedColor, RgbaColor
from themepaint.themes import ThemeSnapshot, ThemeVariable


class TestParseHex:
    """Tests for parse_hex."""

    @pytest.mark.parametrize("digits", ["abc", "123", "f0a", "FFF", "000"])
    def test_three_digits_expand_nibbles(self, digits: str) -> None:
        """Test that each nibble of a short hex color is scaled by 17."""
        red, green, blue, alpha = parse_hex(f"#{digits}")
        expected = [int(nibble, 16) * 17 for nibble in digits]
        assert [round(channel * 255) for channel in (red, green, blue)] == expected
        assert alpha == 1.0

    def test_six_digits_white(self) -> None:
        """Test that six digits decode as opaque RGB."""
        assert parse_hex("#FFFFFF") == (1.0, 1.0, 1.0, 1.0)

    def test_eight_digits_black(self) -> None:
        """Test that eight digits carry their own alpha."""
        assert parse_hex("#000000FF") == (0.0, 0.0, 0.0, 1.0)

    def test_eight_digits_all_channels(self) -> None:
        """Test that every byte of an eight digit color lands in its channel."""
        assert parse_hex("#12345678") == (0x12 / 255, 0x34 / 255, 0x56 / 255, 0x78 / 255)

    def test_without_hash(self) -> None:
        """Test that the hash sign is optional."""
        assert parse_hex("FD7771FF") == parse_hex("#FD7771FF")

    @pytest.mark.parametrize("value", ["#abcd", "#abcde", "#1234567", "#", "", "#123456789"])
    def test_other_lengths_are_transparent_white(self, value: str) -> None:
        """Test that unsupported lengths decode to transparent white."""
        assert parse_hex(value) == (1.0, 1.0, 1.0, 0.0)

    def test_non_hex_letters_read_as_zero(self) -> None:
        """Only the leading hex digits count towards the value."""
        assert parse_hex("zzz") == (0.0, 0.0, 0.0, 1.0)


class TestResolveColor:
    """Tests for resolve_color."""

    def test_red(self) -> None:
        """Test that red resolves to pure red."""
        assert resolve_color(NamedColor("red")) == RGBA(1.0, 0.0, 0.0, 1.0)

    def test_every_named_color_resolves(self) -> None:
        """Test that every table entry is reachable by name."""
        for name in ColorName:
            assert resolve_color(NamedColor(name.value)) == NAMED_COLORS[name]

    def test_purple_and_orange(self) -> None:
        """Test the byte-valued named colors."""
        assert resolve_color(NamedColor("purple")) == RGBA(128 / 255, 0.0, 128 / 255, 1.0)
        assert resolve_color(NamedColor("orange")) == RGBA(1.0, 165 / 255, 0.0, 1.0)

    def test_unknown_name_is_opaque_black(self) -> None:
        """Test that unknown names resolve to opaque black."""
        assert resolve_color(NamedColor("mauve")) == OPAQUE_BLACK

    def test_names_are_case_sensitive(self) -> None:
        """Test that name lookup is case sensitive."""
        assert resolve_color(NamedColor("Red")) == OPAQUE_BLACK

    def test_hex(self) -> None:
        """Test that hex colors decode through parse_hex."""
        assert resolve_color(HexColor("FFFFFF")) == RGBA(1.0, 1.0, 1.0, 1.0)

    def test_malformed_hex_is_transparent_white(self) -> None:
        """Test that a four digit hex color is transparent white."""
        assert resolve_color(HexColor("abcd")) == TRANSPARENT_WHITE

    def test_rgb(self) -> None:
        """Test that rgb channels are divided by 255."""
        assert resolve_color(RgbaColor(255, 0, 0, 255)) == RGBA(1.0, 0.0, 0.0, 1.0)

    def test_rgb_out_of_range_not_clamped(self) -> None:
        """Test that out-of-range rgb channels are kept as is."""
        color = resolve_color(RgbaColor(510, -255, 0, 255))
        assert color.red == 2.0
        assert color.green == -1.0

    def test_unsupported_value(self) -> None:
        """Test that non-color values are rejected."""
        with pytest.raises(TypeError):
            resolve_color("red")  # type: ignore[arg-type]


class TestRGBA:
    """Tests for the RGBA helpers."""

    def test_hex_property(self) -> None:
        """Test the hex display string."""
        assert RGBA(1.0, 0.0, 0.0, 1.0).hex == "#FF0000FF"

    def test_hex_clamps_for_display(self) -> None:
        """Test that the hex string clamps out-of-range channels."""
        assert RGBA(2.0, -1.0, 0.5, 1.0).hex == "#FF0080FF"

    def test_from_bytes(self) -> None:
        """Test building a color from byte channels."""
        assert RGBA.from_bytes(255, 0, 255) == RGBA(1.0, 0.0, 1.0, 1.0)


class TestResolveVariable:
    """Tests for resolve_variable."""

    def test_accent(self, light_snapshot: ThemeSnapshot) -> None:
        """Test that --accent reads the snapshot."""
        assert resolve_variable(light_snapshot, "--accent") == light_snapshot[ThemeVariable.ACCENT]

    def test_every_variable(self, dark_snapshot: ThemeSnapshot) -> None:
        """Test that every theme variable resolves by name."""
        for variable in ThemeVariable:
            assert resolve_variable(dark_snapshot, variable.value) == dark_snapshot[variable]

    def test_unknown_is_opaque_black(self, light_snapshot: ThemeSnapshot) -> None:
        """Test that unknown variables resolve to opaque black."""
        assert resolve_variable(light_snapshot, "--sidebar") == OPAQUE_BLACK

    def test_name_without_dashes_is_unknown(self, light_snapshot: ThemeSnapshot) -> None:
        """Test that names must match exactly, dashes included."""
        assert resolve_variable(light_snapshot, "accent") == OPAQUE_BLACK

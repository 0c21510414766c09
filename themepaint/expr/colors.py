"""Color decoding and variable lookup for theme expressions."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from themepaint.expr.models import ColorValue, HexColor, NamedColor, RgbaColor

if TYPE_CHECKING:
    from themepaint.themes import ThemeSnapshot

_NON_ALPHANUMERIC_RE = re.compile(r"[^0-9A-Za-z]")
_HEX_PREFIX_RE = re.compile(r"[0-9A-Fa-f]*")

# Hex digit counts and what they decode to
_SHORT_RGB = 3
_RGB = 6
_RGBA = 8


@dataclass(frozen=True)
class RGBA:
    """Color channels as floats.

    The canonical range is [0, 1] but values are never clamped here, so
    out-of-range input produces out-of-range channels.
    """

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    @classmethod
    def from_bytes(cls, red: float, green: float, blue: float, alpha: float = 255) -> RGBA:
        """Build a color from 0-255 channel values."""
        return cls(red / 255, green / 255, blue / 255, alpha / 255)

    def to_bytes(self) -> tuple[int, int, int, int]:
        """Channels scaled to 0-255 and clamped into that range."""
        return tuple(max(0, min(255, round(channel * 255))) for channel in self.as_tuple())  # type: ignore[return-value]

    def as_tuple(self) -> tuple[float, float, float, float]:
        """Channels as a plain tuple."""
        return (self.red, self.green, self.blue, self.alpha)

    @property
    def hex(self) -> str:
        """Color as ``#RRGGBBAA`` (display only, channels clamped)."""
        return "#{:02X}{:02X}{:02X}{:02X}".format(*self.to_bytes())


OPAQUE_BLACK = RGBA(0.0, 0.0, 0.0, 1.0)
TRANSPARENT_WHITE = RGBA(1.0, 1.0, 1.0, 0.0)


class ColorName(Enum):
    """The closed set of named colors."""

    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    PURPLE = "purple"
    ORANGE = "orange"


NAMED_COLORS: dict[ColorName, RGBA] = {
    ColorName.RED: RGBA(1.0, 0.0, 0.0),
    ColorName.GREEN: RGBA(0.0, 1.0, 0.0),
    ColorName.BLUE: RGBA(0.0, 0.0, 1.0),
    ColorName.PURPLE: RGBA.from_bytes(128, 0, 128),
    ColorName.ORANGE: RGBA.from_bytes(255, 165, 0),
}


def parse_hex(value: str) -> tuple[float, float, float, float]:
    """Decode a hex color string into normalized channels.

    Non-alphanumeric characters (such as a leading ``#``) are removed first.
    The digit count decides the layout:

    - 3 digits: ``RGB`` nibbles, each scaled by 17, opaque.
    - 6 digits: ``RRGGBB``, opaque.
    - 8 digits: ``RRGGBBAA``.
    - Anything else: transparent white ``(1, 1, 1, 0)``.

    Args:
        value: Hex color such as ``"#FD7771FF"`` or ``"abc"``.

    Returns:
        Tuple of (red, green, blue, alpha) floats.
    """
    cleaned = _NON_ALPHANUMERIC_RE.sub("", value)
    if len(cleaned) not in (_SHORT_RGB, _RGB, _RGBA):
        return TRANSPARENT_WHITE.as_tuple()

    prefix = _HEX_PREFIX_RE.match(cleaned)
    number = int(prefix.group(), 16) if prefix and prefix.group() else 0

    if len(cleaned) == _SHORT_RGB:
        red, green, blue, alpha = (number >> 8) * 17, (number >> 4 & 0xF) * 17, (number & 0xF) * 17, 255
    elif len(cleaned) == _RGB:
        red, green, blue, alpha = number >> 16, number >> 8 & 0xFF, number & 0xFF, 255
    else:
        red, green, blue, alpha = number >> 24, number >> 16 & 0xFF, number >> 8 & 0xFF, number & 0xFF

    return (red / 255, green / 255, blue / 255, alpha / 255)


def resolve_color(color: ColorValue) -> RGBA:
    """Turn a parsed color into channels.

    Unknown names resolve to opaque black, malformed hex lengths to
    transparent white.
    """
    if isinstance(color, NamedColor):
        try:
            return NAMED_COLORS[ColorName(color.name)]
        except ValueError:
            return OPAQUE_BLACK
    if isinstance(color, HexColor):
        return RGBA(*parse_hex(color.digits))
    if isinstance(color, RgbaColor):
        return RGBA.from_bytes(color.red, color.green, color.blue, color.alpha)
    msg = f"Unsupported color value: {color!r}"
    raise TypeError(msg)


def resolve_variable(snapshot: ThemeSnapshot, name: str) -> RGBA:
    """Look up a ``var(...)`` name in a theme snapshot.

    Args:
        snapshot: Active theme values.
        name: Variable name including leading dashes, e.g. ``"--accent"``.

    Returns:
        The snapshot's value, or opaque black for unknown names.
    """
    return snapshot.get(name, OPAQUE_BLACK)

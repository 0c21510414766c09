"""Theme records, built-in presets and the snapshots expressions resolve against."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from textual.theme import Theme

from themepaint.expr.colors import RGBA, parse_hex
from themepaint.logger import get_logger

logger = get_logger(__name__)

LIGHT_THEME_NAME = "light"
DARK_THEME_NAME = "dark"

DEFAULT_THEME_NAME = LIGHT_THEME_NAME

TEXTUAL_THEME_PREFIX = "themepaint-"

# Backgrounds darker than this relative luminance count as dark themes
_DARK_LUMINANCE = 0.5


@dataclass(frozen=True)
class ThemeColor:
    """A stored theme color slot with float channels."""

    r: float
    g: float
    b: float
    a: float = 1.0

    @classmethod
    def from_hex(cls, value: str) -> ThemeColor:
        """Build a color from a hex string such as ``"#FD7771FF"``.

        Args:
            value: Hex color; see :func:`themepaint.expr.colors.parse_hex`.

        Returns:
            The decoded color.
        """
        return cls(*parse_hex(value))

    @classmethod
    def from_resolved(cls, r: float, g: float, b: float, a: float) -> ThemeColor:
        """Build a color from channels reported by a color picker.

        Pickers may report infinite channels for extended-range colors;
        those are stored as 1.0.
        """
        return cls(*(1.0 if math.isinf(channel) else channel for channel in (r, g, b, a)))

    @property
    def rgba(self) -> RGBA:
        """Channels as an RGBA value."""
        return RGBA(self.r, self.g, self.b, self.a)

    @property
    def hex_rgb(self) -> str:
        """Color as ``#rrggbb`` without alpha (clamped for display)."""
        return self.rgba.hex[:7].lower()


WHITE = ThemeColor.from_hex("#FFFFFFFF")
BLACK = ThemeColor.from_hex("#000000FF")


@dataclass(frozen=True)
class ThemeRecord:
    """A complete set of theme colors as stored in user configuration."""

    accent: ThemeColor = ThemeColor.from_hex("#FD7771FF")
    background: ThemeColor = WHITE
    background2: ThemeColor = WHITE
    foreground: ThemeColor = BLACK
    foreground2: ThemeColor = ThemeColor.from_hex("#3A3A3AFF")
    foreground3: ThemeColor = ThemeColor.from_hex("#1F1F1FFF")
    message_box: ThemeColor = WHITE
    message_box_background: ThemeColor = WHITE
    top_bar: ThemeColor = ThemeColor.from_hex("#FFFFFFAA")
    message_box_border: ThemeColor = BLACK
    follow_system_appearance: bool = False

    def snapshot(self, name: str = "custom") -> ThemeSnapshot:
        """Capture this record's colors for expression resolution.

        Args:
            name: Label for the snapshot (used in logs only).

        Returns:
            An immutable snapshot keyed by theme variable.
        """
        return ThemeSnapshot(
            name=name,
            values={variable: getattr(self, field_name).rgba for variable, field_name in VARIABLE_FIELDS.items()},
        )

    @property
    def is_dark(self) -> bool:
        """Whether the background is dark."""
        red, green, blue = self.background.r, self.background.g, self.background.b
        return 0.2126 * red + 0.7152 * green + 0.0722 * blue < _DARK_LUMINANCE


LIGHT_THEME = ThemeRecord(
    accent=ThemeColor.from_hex("#FD7771FF"),
    background=WHITE,
    background2=ThemeColor.from_hex("#F5F5F5FF"),
    foreground=BLACK,
    foreground2=ThemeColor.from_hex("#1F1F1FFF"),
    foreground3=ThemeColor.from_hex("#3A3A3AFF"),
    message_box=WHITE,
    message_box_background=WHITE,
    top_bar=ThemeColor.from_hex("#FFFFFFEE"),
    message_box_border=BLACK,
    follow_system_appearance=False,
)

DARK_THEME = ThemeRecord(
    accent=ThemeColor.from_hex("#FD7771FF"),
    background=ThemeColor.from_hex("#191919FF"),
    background2=ThemeColor.from_hex("#242424FF"),
    foreground=WHITE,
    foreground2=ThemeColor.from_hex("#C8C8C8FF"),
    foreground3=ThemeColor.from_hex("#848484FF"),
    message_box=ThemeColor.from_hex("#363636FF"),
    message_box_background=ThemeColor.from_hex("#363636FF"),
    top_bar=ThemeColor.from_hex("#191919EE"),
    message_box_border=WHITE,
    follow_system_appearance=False,
)

THEME_PRESETS: dict[str, ThemeRecord] = {
    LIGHT_THEME_NAME: LIGHT_THEME,
    DARK_THEME_NAME: DARK_THEME,
}

THEME_LABELS: dict[str, str] = {
    LIGHT_THEME_NAME: "Light",
    DARK_THEME_NAME: "Dark",
}


class ThemeVariable(Enum):
    """Variable names accepted inside ``var(...)``."""

    ACCENT = "--accent"
    BACKGROUND = "--background"
    BACKGROUND_SECONDARY = "--background-secondary"
    FOREGROUND = "--foreground"
    FOREGROUND_SECONDARY = "--foreground-secondary"
    FOREGROUND_TERTIARY = "--foreground-tertiary"
    MESSAGE_BOX = "--message-box"
    MESSAGE_BOX_BACKGROUND = "--message-box-background"
    TOP_BAR = "--top-bar"
    MESSAGE_BOX_BORDER = "--message-box-border"


# One entry per ThemeVariable; adding a variable means adding a record field
VARIABLE_FIELDS: dict[ThemeVariable, str] = {
    ThemeVariable.ACCENT: "accent",
    ThemeVariable.BACKGROUND: "background",
    ThemeVariable.BACKGROUND_SECONDARY: "background2",
    ThemeVariable.FOREGROUND: "foreground",
    ThemeVariable.FOREGROUND_SECONDARY: "foreground2",
    ThemeVariable.FOREGROUND_TERTIARY: "foreground3",
    ThemeVariable.MESSAGE_BOX: "message_box",
    ThemeVariable.MESSAGE_BOX_BACKGROUND: "message_box_background",
    ThemeVariable.TOP_BAR: "top_bar",
    ThemeVariable.MESSAGE_BOX_BORDER: "message_box_border",
}


@dataclass(frozen=True)
class ThemeSnapshot:
    """Read-only view of one theme's variable values.

    Snapshots are replaced wholesale when the theme changes; they are never
    mutated, so a snapshot can be shared freely between resolve calls.
    """

    name: str
    values: Mapping[ThemeVariable, RGBA]

    def __post_init__(self) -> None:
        """Freeze the value mapping and check it covers every variable."""
        missing = [variable.value for variable in ThemeVariable if variable not in self.values]
        if missing:
            msg = f"Theme snapshot {self.name!r} is missing variables: {', '.join(missing)}"
            raise ValueError(msg)
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    def __getitem__(self, variable: ThemeVariable) -> RGBA:
        """Get the value of a known variable."""
        return self.values[variable]

    def get(self, name: str, default: RGBA) -> RGBA:
        """Look up a variable by its ``var(...)`` spelling.

        Args:
            name: Variable name such as ``"--accent"``.
            default: Value returned for names outside the closed set.

        Returns:
            The variable's color, or ``default``.
        """
        try:
            variable = ThemeVariable(name)
        except ValueError:
            logger.debug(f"Unknown theme variable {name!r} in theme {self.name!r}")
            return default
        return self.values[variable]


def get_preset(name: str) -> ThemeRecord:
    """Get a built-in theme by name.

    Args:
        name: Preset name (``"light"`` or ``"dark"``).

    Returns:
        The preset, or the default preset for unknown names.
    """
    record = THEME_PRESETS.get(name)
    if record is None:
        logger.warning(f"Unknown theme {name!r}, using {DEFAULT_THEME_NAME!r}")
        return THEME_PRESETS[DEFAULT_THEME_NAME]
    return record


def select_theme(record: ThemeRecord, *, system_dark: bool) -> ThemeRecord:
    """Apply the "follow system appearance" flag.

    Args:
        record: The user's configured theme.
        system_dark: Whether the operating system is in dark mode.

    Returns:
        The dark or light preset when the record follows the system,
        otherwise the record itself.
    """
    if not record.follow_system_appearance:
        return record
    return DARK_THEME if system_dark else LIGHT_THEME


def to_textual_theme(name: str, record: ThemeRecord) -> Theme:
    """Build a Textual Theme from a theme record.

    Args:
        name: Theme name; prefixed to avoid clashing with Textual's built-ins.
        record: Theme colors.

    Returns:
        A Textual Theme instance.
    """
    return Theme(
        name=f"{TEXTUAL_THEME_PREFIX}{name}",
        primary=record.accent.hex_rgb,
        accent=record.accent.hex_rgb,
        foreground=record.foreground.hex_rgb,
        background=record.background.hex_rgb,
        surface=record.background2.hex_rgb,
        panel=record.message_box.hex_rgb,
        dark=record.is_dark,
        variables={
            "border": record.message_box_border.hex_rgb,
            "text-muted": record.foreground2.hex_rgb,
            "text-subtle": record.foreground3.hex_rgb,
        },
    )


REGISTERED_THEMES = tuple(to_textual_theme(name, record) for name, record in THEME_PRESETS.items())

"""Syntax tree for theme expressions.

Every node is an immutable value. Unions are expressed as plain type aliases
over the concrete node classes so callers can dispatch with ``isinstance``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

MIN_GRADIENT_STOPS = 2


@dataclass(frozen=True)
class NamedColor:
    """A color written as a bare word, e.g. ``red``."""

    name: str


@dataclass(frozen=True)
class HexColor:
    """A color written as ``#`` followed by hex digits (digits stored without ``#``)."""

    digits: str


@dataclass(frozen=True)
class RgbaColor:
    """A color given as byte channels. Values are not range checked."""

    red: int
    green: int
    blue: int
    alpha: int = 255


ColorValue = NamedColor | HexColor | RgbaColor


class LengthUnit(Enum):
    """Supported length units."""

    PX = "px"


@dataclass(frozen=True)
class Length:
    """An integer length with a unit."""

    amount: int
    unit: LengthUnit = LengthUnit.PX


@dataclass(frozen=True)
class Percent:
    """An integer percentage."""

    value: int


PercentageValue = Length | Percent


@dataclass(frozen=True)
class ColorStop:
    """A gradient color with an optional stop position."""

    color: ColorValue
    stop: PercentageValue | None = None


class Direction(Enum):
    """Side keywords accepted after ``to``."""

    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"


class AngleUnit(Enum):
    """Units accepted on a numeric gradient angle."""

    DEG = "deg"
    GRAD = "grad"
    RAD = "rad"
    TURN = "turn"


@dataclass(frozen=True)
class ConstantAngle:
    """A numeric angle such as ``45deg`` or ``0.25turn``."""

    value: float
    unit: AngleUnit


@dataclass(frozen=True)
class DirectionPair:
    """A ``to <side> [<side>]`` clause."""

    primary: Direction
    secondary: Direction | None = None


AngleSpec = ConstantAngle | DirectionPair


@dataclass(frozen=True)
class LinearGradientSpec:
    """Parsed ``linear-gradient(...)`` arguments."""

    angle: AngleSpec | None
    stops: tuple[ColorStop, ...]

    def __post_init__(self) -> None:
        """Reject gradients with too few stops."""
        if len(self.stops) < MIN_GRADIENT_STOPS:
            msg = f"A linear gradient needs at least {MIN_GRADIENT_STOPS} color stops, got {len(self.stops)}"
            raise ValueError(msg)


@dataclass(frozen=True)
class GradientExpression:
    """Top-level gradient expression."""

    gradient: LinearGradientSpec


@dataclass(frozen=True)
class SolidExpression:
    """Top-level single color expression."""

    color: ColorValue


@dataclass(frozen=True)
class VariableExpression:
    """Top-level ``var(...)`` reference. ``name`` keeps any leading dashes."""

    name: str


ThemeExpression = GradientExpression | SolidExpression | VariableExpression

"""Resolve theme expressions into renderer-ready paints.

Usage:
    from themepaint.paint import resolve
    from themepaint.themes import DARK_THEME

    paint = resolve("linear-gradient(to right, var(--accent), #242424)", DARK_THEME.snapshot("dark"))
"""

from __future__ import annotations

from dataclasses import dataclass

from themepaint.expr.colors import OPAQUE_BLACK, RGBA, resolve_color, resolve_variable
from themepaint.expr.geometry import Point, angle_to_points
from themepaint.expr.models import GradientExpression, SolidExpression, ThemeExpression, VariableExpression
from themepaint.expr.parser import ThemeExpressionError, parse_theme_expression
from themepaint.logger import get_logger
from themepaint.themes import ThemeSnapshot

logger = get_logger(__name__)


@dataclass(frozen=True)
class SolidPaint:
    """A flat fill."""

    color: RGBA

    def describe(self) -> str:
        """Short human-readable summary."""
        return f"solid {self.color.hex}"


@dataclass(frozen=True)
class GradientPaint:
    """A two-point linear gradient with evenly spread colors."""

    start: Point
    end: Point
    colors: tuple[RGBA, ...]

    def describe(self) -> str:
        """Short human-readable summary."""
        stops = ", ".join(color.hex for color in self.colors)
        return (
            f"linear gradient ({self.start.x:g}, {self.start.y:g}) -> "
            f"({self.end.x:g}, {self.end.y:g}): {stops}"
        )


Paint = SolidPaint | GradientPaint

FALLBACK_PAINT = SolidPaint(OPAQUE_BLACK)


def resolve_expression(expression: ThemeExpression, theme: ThemeSnapshot) -> Paint:
    """Resolve an already parsed expression.

    Stop positions on gradient color stops are ignored; colors are spread
    evenly by the renderer.

    Args:
        expression: Parsed theme expression.
        theme: Snapshot supplying ``var(...)`` values.

    Returns:
        The resolved paint.
    """
    if isinstance(expression, SolidExpression):
        return SolidPaint(resolve_color(expression.color))
    if isinstance(expression, VariableExpression):
        return SolidPaint(resolve_variable(theme, expression.name))
    if isinstance(expression, GradientExpression):
        gradient = expression.gradient
        start, end = angle_to_points(gradient.angle)
        colors = tuple(resolve_color(stop.color) for stop in gradient.stops)
        return GradientPaint(start, end, colors)
    msg = f"Unsupported theme expression: {expression!r}"
    raise TypeError(msg)


def resolve_strict(text: str, theme: ThemeSnapshot) -> Paint:
    """Parse and resolve, letting parse errors propagate.

    Raises:
        ThemeExpressionError: If ``text`` is not a valid theme expression.
    """
    return resolve_expression(parse_theme_expression(text), theme)


def resolve(text: str, theme: ThemeSnapshot) -> Paint:
    """Parse and resolve a theme expression, never failing.

    Any parse failure (empty input, malformed gradient, unknown syntax)
    yields an opaque black solid paint.

    Args:
        text: Theme expression source.
        theme: Snapshot supplying ``var(...)`` values.

    Returns:
        The resolved paint, or opaque black.
    """
    try:
        return resolve_strict(text, theme)
    except ThemeExpressionError as exc:
        logger.debug(f"Falling back to black for theme {theme.name!r}: {exc}")
        return FALLBACK_PAINT

"""themepaint - resolve theme color and gradient expressions into paints."""

from themepaint.expr.parser import ThemeExpressionError, parse_theme_expression
from themepaint.paint import FALLBACK_PAINT, GradientPaint, Paint, SolidPaint, resolve, resolve_expression, resolve_strict
from themepaint.themes import DARK_THEME, LIGHT_THEME, ThemeRecord, ThemeSnapshot, ThemeVariable

__all__ = [
    "DARK_THEME",
    "FALLBACK_PAINT",
    "LIGHT_THEME",
    "GradientPaint",
    "Paint",
    "SolidPaint",
    "ThemeExpressionError",
    "ThemeRecord",
    "ThemeSnapshot",
    "ThemeVariable",
    "parse_theme_expression",
    "resolve",
    "resolve_expression",
    "resolve_strict",
]

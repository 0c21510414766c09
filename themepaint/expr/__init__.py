"""Theme expression language: syntax tree, parser and resolvers."""

from themepaint.expr.colors import OPAQUE_BLACK, RGBA, TRANSPARENT_WHITE, parse_hex, resolve_color, resolve_variable
from themepaint.expr.geometry import Point, angle_to_points, boundary_point, direction_to_points, to_degrees
from themepaint.expr.parser import ThemeExpressionError, parse_theme_expression

__all__ = [
    "OPAQUE_BLACK",
    "RGBA",
    "TRANSPARENT_WHITE",
    "Point",
    "ThemeExpressionError",
    "angle_to_points",
    "boundary_point",
    "direction_to_points",
    "parse_hex",
    "parse_theme_expression",
    "resolve_color",
    "resolve_variable",
    "to_degrees",
]

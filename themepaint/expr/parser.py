"""Entry point for parsing theme expressions."""

from __future__ import annotations

from themepaint.expr.grammar import THEME_EXPRESSION_ALTERNATIVES
from themepaint.expr.models import ThemeExpression
from themepaint.expr.scanner import at_end
from themepaint.logger import get_logger

logger = get_logger(__name__)


class ThemeExpressionError(ValueError):
    """Raised when a string is not a valid theme expression.

    Attributes:
        text: The input that failed to parse.
        position: Furthest offset any alternative reached before failing.
    """

    def __init__(self, text: str, position: int = 0) -> None:
        """Initialize the error.

        Args:
            text: The input that failed to parse.
            position: Furthest offset reached while parsing.
        """
        self.text = text
        self.position = position
        super().__init__(f"Invalid theme expression {text!r} (stopped at offset {position})")


def parse_theme_expression(text: str) -> ThemeExpression:
    """Parse a complete theme expression.

    Alternatives are tried in order (gradient, color, variable); the first
    one that consumes the entire input wins.

    Args:
        text: Source text, e.g. ``"linear-gradient(to right, red, blue)"``.

    Returns:
        The parsed expression.

    Raises:
        ThemeExpressionError: If no alternative consumes the whole input.
    """
    furthest = 0
    for alternative in THEME_EXPRESSION_ALTERNATIVES:
        result = alternative(text, 0)
        if result is None:
            continue
        expression, end = result
        if at_end(text, end):
            return expression
        furthest = max(furthest, end)

    logger.debug(f"Failed to parse theme expression {text!r} at offset {furthest}")
    raise ThemeExpressionError(text, furthest)

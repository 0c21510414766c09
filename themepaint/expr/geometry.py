"""Gradient endpoint geometry on the unit square.

Coordinates follow screen conventions: x grows to the right, y grows
downwards, and both span [0, 1].
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from themepaint.expr.models import AngleSpec, AngleUnit, ConstantAngle, Direction, DirectionPair


@dataclass(frozen=True)
class Point:
    """A point in the unit square."""

    x: float
    y: float


TOP_LEADING = Point(0.0, 0.0)
TOP = Point(0.5, 0.0)
TOP_TRAILING = Point(1.0, 0.0)
LEADING = Point(0.0, 0.5)
TRAILING = Point(1.0, 0.5)
BOTTOM_LEADING = Point(0.0, 1.0)
BOTTOM = Point(0.5, 1.0)
BOTTOM_TRAILING = Point(1.0, 1.0)

DEFAULT_GRADIENT_POINTS = (TOP, BOTTOM)

_FULL_TURN = 360.0
_QUARTER_TURN = 90.0

_DEGREE_FACTORS: dict[AngleUnit, float] = {
    AngleUnit.DEG: 1.0,
    AngleUnit.GRAD: 0.9,
    AngleUnit.RAD: 180 / math.pi,
    AngleUnit.TURN: 360.0,
}

_CORNER_PAIRS: dict[frozenset[Direction], tuple[Point, Point]] = {
    frozenset((Direction.LEFT, Direction.TOP)): (TOP_LEADING, BOTTOM_TRAILING),
    frozenset((Direction.LEFT, Direction.BOTTOM)): (BOTTOM_LEADING, TOP_TRAILING),
    frozenset((Direction.RIGHT, Direction.TOP)): (TOP_TRAILING, BOTTOM_LEADING),
    frozenset((Direction.RIGHT, Direction.BOTTOM)): (BOTTOM_TRAILING, TOP_LEADING),
}

_SIDES: dict[Direction, tuple[Point, Point]] = {
    Direction.LEFT: (LEADING, TRAILING),
    Direction.RIGHT: (TRAILING, LEADING),
    Direction.TOP: (TOP, BOTTOM),
    Direction.BOTTOM: (BOTTOM, TOP),
}


def direction_to_points(primary: Direction, secondary: Direction | None = None) -> tuple[Point, Point]:
    """Map a ``to <side> [<side>]`` clause to gradient start and end points.

    The start lies on the named side or corner; :func:`angle_to_points`
    reverses the pair for ``to <side>`` clauses. Two perpendicular sides
    run corner to corner regardless of their order.
    Any other pair (for example two equal sides) falls back to ``primary`` alone.

    Args:
        primary: First side keyword.
        secondary: Optional second side keyword.

    Returns:
        Tuple of (start, end) points.
    """
    if secondary is not None:
        corners = _CORNER_PAIRS.get(frozenset((primary, secondary)))
        if corners is not None:
            return corners
    return _SIDES[primary]


def to_degrees(value: float, unit: AngleUnit) -> float:
    """Convert an angle in any supported unit to degrees."""
    return value * _DEGREE_FACTORS[unit]


def boundary_point(angle: float) -> Point:
    """Find where a ray at ``angle`` degrees crosses the unit square's edge.

    The boundary is walked in four 90 degree arcs, each linearly
    interpolated, so the result is continuous and defined for every angle.

    Args:
        angle: Angle in degrees; any finite value is accepted.

    Returns:
        A point on the square's boundary.
    """
    # Normalize into [0, 360)
    angle = math.fmod(angle, _FULL_TURN)
    if angle < 0.0:
        angle += _FULL_TURN

    if angle < 45.0 or angle >= 315.0:
        adjusted = angle + _FULL_TURN if angle < 45.0 else angle
        proportion = (adjusted - 315.0) / _QUARTER_TURN
        return Point(1.0, 1.0 - proportion)
    if angle < 135.0:
        proportion = (angle - 45.0) / _QUARTER_TURN
        return Point(1.0 - proportion, 0.0)
    if angle < 225.0:
        proportion = (angle - 135.0) / _QUARTER_TURN
        return Point(0.0, proportion)
    proportion = (angle - 225.0) / _QUARTER_TURN
    return Point(proportion, 1.0)


def angle_to_points(angle: AngleSpec | None) -> tuple[Point, Point]:
    """Compute gradient start and end points for an angle clause.

    A numeric angle places the endpoints a quarter turn to either side.
    A ``to <side>`` clause ends on the named side or corner.
    :func:`direction_to_points` starts on the named side, so its pair is
    used reversed here. A missing angle runs top to bottom.

    Args:
        angle: Parsed angle clause, or None.

    Returns:
        Tuple of (start, end) points.
    """
    if angle is None:
        return DEFAULT_GRADIENT_POINTS
    if isinstance(angle, DirectionPair):
        # "to <side>" heads towards the side, so the table start becomes the end
        end, start = direction_to_points(angle.primary, angle.secondary)
        return start, end
    if isinstance(angle, ConstantAngle):
        degrees = to_degrees(angle.value, angle.unit)
        return boundary_point(degrees + _QUARTER_TURN), boundary_point(degrees - _QUARTER_TURN)
    msg = f"Unsupported angle: {angle!r}"
    raise TypeError(msg)

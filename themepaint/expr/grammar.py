"""Grammar productions for theme expressions.

Each production takes ``(text, pos)`` and returns ``(node, new_pos)`` or
``None``. Alternatives are tried in order and the first that matches wins;
a failed production never consumes input.

Grammar::

    hex-color      := '#' hex-digit{3,8}
    rgb-color      := 'rgb(' int ws? ',' ws? int ws? ',' ws? int ')'
    name-color     := alphanumeric+
    color          := hex-color | rgb-color | name-color
    length         := digits 'px'
    percentage     := digits '%'
    length-or-pct  := length | percentage
    color-stop     := color ws? length-or-pct?
    angle-constant := float ('deg'|'grad'|'rad'|'turn')
    direction      := 'left'|'right'|'top'|'bottom'
    angle          := angle-constant | ('to' ws direction (ws direction)?)
    gradient       := 'linear-gradient(' angle? ws?,ws? color-stop (ws?,ws? color-stop){1,} ')'
    variable-ref   := 'var(' name ')'
    theme-expr     := gradient | color | variable-ref
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from themepaint.expr.models import (
    MIN_GRADIENT_STOPS,
    AngleSpec,
    AngleUnit,
    ColorStop,
    ColorValue,
    ConstantAngle,
    Direction,
    DirectionPair,
    GradientExpression,
    HexColor,
    Length,
    LengthUnit,
    LinearGradientSpec,
    NamedColor,
    Percent,
    PercentageValue,
    RgbaColor,
    SolidExpression,
    ThemeExpression,
    VariableExpression,
)
from themepaint.expr.scanner import (
    Scan,
    alphanumerics,
    decimal,
    digits,
    hex_digits,
    identifier,
    literal,
    require_whitespace,
    signed_int,
    skip_whitespace,
)

T = TypeVar("T")

Production = Callable[[str, int], Scan[T]]

HEX_MIN_DIGITS = 3
HEX_MAX_DIGITS = 8
RGB_COMPONENTS = 3

_ANGLE_UNITS: tuple[tuple[str, AngleUnit], ...] = (
    ("deg", AngleUnit.DEG),
    ("grad", AngleUnit.GRAD),
    ("rad", AngleUnit.RAD),
    ("turn", AngleUnit.TURN),
)

_DIRECTIONS: tuple[tuple[str, Direction], ...] = (
    ("left", Direction.LEFT),
    ("right", Direction.RIGHT),
    ("top", Direction.TOP),
    ("bottom", Direction.BOTTOM),
)


def first_of(text: str, pos: int, *productions: Production[T]) -> Scan[T]:
    """Return the result of the first production that matches at ``pos``."""
    for production in productions:
        result = production(text, pos)
        if result is not None:
            return result
    return None


def _list_separator(text: str, pos: int) -> int | None:
    """Match ``ws? ',' ws?``."""
    comma = literal(text, skip_whitespace(text, pos), ",")
    if comma is None:
        return None
    return skip_whitespace(text, comma[1])


# Colors


def parse_hex_color(text: str, pos: int) -> Scan[ColorValue]:
    """hex-color := '#' hex-digit{3,8}"""
    hash_sign = literal(text, pos, "#")
    if hash_sign is None:
        return None
    run = hex_digits(text, hash_sign[1], HEX_MIN_DIGITS, HEX_MAX_DIGITS)
    if run is None:
        return None
    value, end = run
    return HexColor(value), end


def parse_rgb_color(text: str, pos: int) -> Scan[ColorValue]:
    """rgb-color := 'rgb(' int , int , int ')'

    Exactly three components are accepted; alpha is always opaque.
    """
    opening = literal(text, pos, "rgb(")
    if opening is None:
        return None
    cursor = opening[1]
    components: list[int] = []
    for index in range(RGB_COMPONENTS):
        if index > 0:
            separator = _list_separator(text, cursor)
            if separator is None:
                return None
            cursor = separator
        component = signed_int(text, cursor)
        if component is None:
            return None
        value, cursor = component
        components.append(value)
    closing = literal(text, cursor, ")")
    if closing is None:
        return None
    red, green, blue = components
    return RgbaColor(red, green, blue, 255), closing[1]


def parse_name_color(text: str, pos: int) -> Scan[ColorValue]:
    """name-color := alphanumeric+"""
    word = alphanumerics(text, pos)
    if word is None:
        return None
    value, end = word
    return NamedColor(value), end


def parse_color(text: str, pos: int) -> Scan[ColorValue]:
    """color := hex-color | rgb-color | name-color"""
    return first_of(text, pos, parse_hex_color, parse_rgb_color, parse_name_color)


# Stop positions


def parse_length(text: str, pos: int) -> Scan[PercentageValue]:
    """length := digits 'px'"""
    amount = digits(text, pos)
    if amount is None:
        return None
    unit = literal(text, amount[1], LengthUnit.PX.value)
    if unit is None:
        return None
    return Length(amount[0], LengthUnit.PX), unit[1]


def parse_percentage(text: str, pos: int) -> Scan[PercentageValue]:
    """percentage := digits '%'"""
    amount = digits(text, pos)
    if amount is None:
        return None
    sign = literal(text, amount[1], "%")
    if sign is None:
        return None
    return Percent(amount[0]), sign[1]


def parse_length_or_percentage(text: str, pos: int) -> Scan[PercentageValue]:
    """length-or-pct := length | percentage"""
    return first_of(text, pos, parse_length, parse_percentage)


def parse_color_stop(text: str, pos: int) -> Scan[ColorStop]:
    """color-stop := color ws? length-or-pct?"""
    color = parse_color(text, pos)
    if color is None:
        return None
    value, cursor = color
    cursor = skip_whitespace(text, cursor)
    stop = parse_length_or_percentage(text, cursor)
    if stop is None:
        return ColorStop(value), cursor
    return ColorStop(value, stop[0]), stop[1]


# Angles


def parse_angle_constant(text: str, pos: int) -> Scan[AngleSpec]:
    """angle-constant := float ('deg'|'grad'|'rad'|'turn')"""
    number = decimal(text, pos)
    if number is None:
        return None
    value, cursor = number
    for keyword, unit in _ANGLE_UNITS:
        suffix = literal(text, cursor, keyword)
        if suffix is not None:
            return ConstantAngle(value, unit), suffix[1]
    return None


def parse_direction(text: str, pos: int) -> Scan[Direction]:
    """direction := 'left' | 'right' | 'top' | 'bottom'"""
    for keyword, direction in _DIRECTIONS:
        word = literal(text, pos, keyword)
        if word is not None:
            return direction, word[1]
    return None


def parse_direction_pair(text: str, pos: int) -> Scan[AngleSpec]:
    """'to' ws direction (ws direction)?"""
    keyword = literal(text, pos, "to")
    if keyword is None:
        return None
    cursor = require_whitespace(text, keyword[1])
    if cursor is None:
        return None
    primary = parse_direction(text, cursor)
    if primary is None:
        return None
    first, cursor = primary

    gap = require_whitespace(text, cursor)
    if gap is not None:
        secondary = parse_direction(text, gap)
        if secondary is not None:
            return DirectionPair(first, secondary[0]), secondary[1]
    return DirectionPair(first), cursor


def parse_angle(text: str, pos: int) -> Scan[AngleSpec]:
    """angle := angle-constant | direction-pair"""
    return first_of(text, pos, parse_angle_constant, parse_direction_pair)


# Gradients and top level


def parse_linear_gradient(text: str, pos: int) -> Scan[LinearGradientSpec]:
    """gradient := 'linear-gradient(' [angle ','] color-stop (',' color-stop)+ ')'"""
    opening = literal(text, pos, "linear-gradient(")
    if opening is None:
        return None
    cursor = opening[1]

    angle: AngleSpec | None = None
    angle_result = parse_angle(text, cursor)
    if angle_result is not None:
        # Once an angle is read, the comma after it is mandatory
        separator = _list_separator(text, angle_result[1])
        if separator is None:
            return None
        angle, cursor = angle_result[0], separator

    first_stop = parse_color_stop(text, cursor)
    if first_stop is None:
        return None
    stops = [first_stop[0]]
    cursor = first_stop[1]

    while True:
        separator = _list_separator(text, cursor)
        if separator is None:
            break
        stop = parse_color_stop(text, separator)
        if stop is None:
            break
        stops.append(stop[0])
        cursor = stop[1]

    if len(stops) < MIN_GRADIENT_STOPS:
        return None
    closing = literal(text, cursor, ")")
    if closing is None:
        return None
    return LinearGradientSpec(angle, tuple(stops)), closing[1]


def parse_variable_ref(text: str, pos: int) -> Scan[str]:
    """variable-ref := 'var(' name ')'"""
    opening = literal(text, pos, "var(")
    if opening is None:
        return None
    name = identifier(text, opening[1])
    if name is None:
        return None
    closing = literal(text, name[1], ")")
    if closing is None:
        return None
    return name[0], closing[1]


def _gradient_expression(text: str, pos: int) -> Scan[ThemeExpression]:
    result = parse_linear_gradient(text, pos)
    return None if result is None else (GradientExpression(result[0]), result[1])


def _solid_expression(text: str, pos: int) -> Scan[ThemeExpression]:
    result = parse_color(text, pos)
    return None if result is None else (SolidExpression(result[0]), result[1])


def _variable_expression(text: str, pos: int) -> Scan[ThemeExpression]:
    result = parse_variable_ref(text, pos)
    return None if result is None else (VariableExpression(result[0]), result[1])


THEME_EXPRESSION_ALTERNATIVES: tuple[Production[ThemeExpression], ...] = (
    _gradient_expression,
    _solid_expression,
    _variable_expression,
)

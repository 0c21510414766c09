"""Lexical primitives for the theme expression grammar.

Every scanner is a pure function of ``(text, pos)``. On success it returns a
``(value, new_pos)`` tuple, on failure ``None``; the input is never modified.
"""

from __future__ import annotations

import math
import re
from typing import Optional, TypeVar

T = TypeVar("T")

Scan = Optional[tuple[T, int]]

WHITESPACE = " \t\r\n"
HEX_DIGITS = "0123456789abcdefABCDEF"

_DIGITS_RE = re.compile(r"[0-9]+")
_SIGNED_INT_RE = re.compile(r"[+-]?[0-9]+")
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def literal(text: str, pos: int, token: str) -> Scan[str]:
    """Match an exact token.

    Args:
        text: Full input text.
        pos: Position to start matching at.
        token: Literal to match.

    Returns:
        The token and the position after it, or None.
    """
    if text.startswith(token, pos):
        return token, pos + len(token)
    return None


def skip_whitespace(text: str, pos: int) -> int:
    """Advance past any whitespace. Always succeeds."""
    while pos < len(text) and text[pos] in WHITESPACE:
        pos += 1
    return pos


def require_whitespace(text: str, pos: int) -> int | None:
    """Advance past at least one whitespace character."""
    end = skip_whitespace(text, pos)
    return end if end > pos else None


def digits(text: str, pos: int) -> Scan[int]:
    """Match one or more ASCII digits as an unsigned integer."""
    match = _DIGITS_RE.match(text, pos)
    if match is None:
        return None
    return _to_int(match.group(), match.end())


def signed_int(text: str, pos: int) -> Scan[int]:
    """Match an integer with an optional leading sign."""
    match = _SIGNED_INT_RE.match(text, pos)
    if match is None:
        return None
    return _to_int(match.group(), match.end())


def _to_int(token: str, end: int) -> Scan[int]:
    try:
        return int(token), end
    except ValueError:
        # Beyond the interpreter's integer string conversion limit
        return None


def decimal(text: str, pos: int) -> Scan[float]:
    """Match a finite floating point number (sign, fraction and exponent optional)."""
    match = _DECIMAL_RE.match(text, pos)
    if match is None:
        return None
    value = float(match.group())
    if not math.isfinite(value):
        return None
    return value, match.end()


def hex_digits(text: str, pos: int, minimum: int = 1, maximum: int | None = None) -> Scan[str]:
    """Match a bounded run of hex digits, greedily.

    Args:
        text: Full input text.
        pos: Position to start matching at.
        minimum: Fewest digits accepted.
        maximum: Most digits consumed, or None for no limit.

    Returns:
        The digits and the position after them, or None if fewer than
        ``minimum`` digits are present.
    """
    end = pos
    while end < len(text) and text[end] in HEX_DIGITS and (maximum is None or end - pos < maximum):
        end += 1
    if end - pos < minimum:
        return None
    return text[pos:end], end


def alphanumerics(text: str, pos: int) -> Scan[str]:
    """Match one or more alphanumeric characters (Unicode aware)."""
    end = pos
    while end < len(text) and text[end].isalnum():
        end += 1
    if end == pos:
        return None
    return text[pos:end], end


def identifier(text: str, pos: int) -> Scan[str]:
    """Match a variable name: alphanumerics plus ``-`` and ``_``."""
    end = pos
    while end < len(text) and (text[end].isalnum() or text[end] in "-_"):
        end += 1
    if end == pos:
        return None
    return text[pos:end], end


def at_end(text: str, pos: int) -> bool:
    """Check whether the whole input has been consumed."""
    return pos >= len(text)

"""Normalize specification strings and parse their numeric tokens."""

import math
from typing import Optional

from ..config.settings import DEFAULT_PATTERN_TIMEOUT
from ..errors import EmptySpecError, InvalidSectionError
from ..patterns import compile_pattern, timed_match


# Multiplication-sign and bracket variants mapped to their canonical form
_SEPARATOR_TABLE = str.maketrans({
    "×": "x",
    "*": "x",
    "X": "x",
    "（": "(",
    "）": ")",
})

# Non-negative decimal with '.' as the decimal point and an optional exponent
_DECIMAL_PATTERN = compile_pattern(r"^\+?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$")


def ensure_spec(raw: Optional[str]) -> str:
    """Return the spec string, raising EmptySpecError if it is None or blank."""
    if raw is None or not raw.strip():
        raise EmptySpecError(raw)
    return raw


def normalize_spec(raw: Optional[str]) -> str:
    """
    Canonicalize separators and brackets, then trim.

    - '×', '*' and 'X' become 'x'
    - full-width '（' '）' become '(' ')'
    - leading/trailing whitespace is removed

    Raises EmptySpecError for None or blank input.
    """
    return ensure_spec(raw).translate(_SEPARATOR_TABLE).strip()


def strip_whitespace(normalized: str) -> str:
    """Remove all embedded whitespace (applied to non-bundle grammars only)."""
    return "".join(normalized.split())


def parse_count(token: str) -> int:
    """Parse an integer count token already validated by a grammar."""
    return int(token)


def parse_section(token: str, timeout: float = DEFAULT_PATTERN_TIMEOUT) -> float:
    """
    Parse a conductor section token ('2.5', '120', '0.75').

    The decimal point is always '.', independent of locale.

    Raises InvalidSectionError if the token is not a non-negative finite number.
    """
    text = token.strip()
    if not timed_match(_DECIMAL_PATTERN, text, timeout):
        raise InvalidSectionError(token)

    value = float(text)
    if not math.isfinite(value):
        raise InvalidSectionError(token)
    return value

"""Compiled patterns whose matching is bounded by a timeout."""

from typing import Optional

import regex

from .errors import PatternTimeoutError


def compile_pattern(
    pattern: str, flags: int = regex.IGNORECASE | regex.ASCII
) -> "regex.Pattern":
    """Compile a case-insensitive pattern (VERSION0 semantics, like re).

    ASCII mode keeps \\d and \\s to ASCII digits and whitespace, so
    full-width digits are not read as numbers.
    """
    return regex.compile(pattern, flags | regex.VERSION0)


def timed_match(
    pattern: "regex.Pattern", text: str, timeout: float
) -> Optional["regex.Match"]:
    """Anchored match; raises PatternTimeoutError instead of hanging."""
    try:
        return pattern.match(text, timeout=timeout)
    except TimeoutError:
        raise PatternTimeoutError(pattern.pattern, timeout) from None


def timed_search(
    pattern: "regex.Pattern", text: str, timeout: float
) -> Optional["regex.Match"]:
    """Unanchored search; raises PatternTimeoutError instead of hanging."""
    try:
        return pattern.search(text, timeout=timeout)
    except TimeoutError:
        raise PatternTimeoutError(pattern.pattern, timeout) from None

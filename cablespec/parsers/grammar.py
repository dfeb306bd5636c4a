"""Specification grammars, tried in a fixed priority order.

Each grammar is a function ``(text, timeout) -> Optional[match]`` that
returns a typed match result or None when the text does not have its
shape. Once a grammar has matched, numeric and bundle count problems are
raised as errors; the remaining grammars are not tried.

Supported forms (after normalization):

1. Bundle wrapper:            2(3x25+1x16)
2. Twisted pair with bundle:  8x6x2x2.5
3. Twisted pair:              6x2x2.5
4. Plus form:                 3x120+1x70
5. Simple form:               4x25
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple, Union

from ..errors import InvalidBundleCountError, UnsupportedFormatError
from ..patterns import compile_pattern, timed_match
from .normalizer import parse_count, parse_section, strip_whitespace

logger = logging.getLogger(__name__)


# Integer + ( + core expression + ), spaces allowed around the parts
BUNDLE_PATTERN = compile_pattern(r"^\s*(-?\d+)\s*\((.+)\)\s*$")

# Bundle x pairs x 2 x section (8x6x2x2.5)
TWISTED_PAIR_BUNDLE_PATTERN = compile_pattern(r"^(-?\d+)x(\d+)x(2)x(\d+(?:\.\d+)?)$")

# Pairs x 2 x section (6x2x2.5)
TWISTED_PAIR_PATTERN = compile_pattern(r"^(\d+)x(2)x(\d+(?:\.\d+)?)$")

# A x S1 + B x S2; sections are captured loosely so bad tokens get reported
PLUS_PATTERN = compile_pattern(r"^(\d+)x([^+]+)\+(\d+)x([^+]+)$")

# A x S
SIMPLE_PATTERN = compile_pattern(r"^(\d+)x(.+)$")


@dataclass(frozen=True)
class BundleMatch:
    """N(expr): the inner expression is parsed on its own."""
    bundle_count: int
    inner: str


@dataclass(frozen=True)
class TwistedPairMatch:
    """[B x] P x 2 x S."""
    pair_count: int
    cores_per_pair: int
    section: float
    bundle_count: int = 1


@dataclass(frozen=True)
class PlusMatch:
    """A x S1 + B x S2."""
    count1: int
    section1: float
    count2: int
    section2: float

    @property
    def counts(self) -> Tuple[int, int]:
        return self.count1, self.count2


@dataclass(frozen=True)
class SimpleMatch:
    """A x S."""
    count: int
    section: float


GrammarMatch = Union[BundleMatch, TwistedPairMatch, PlusMatch, SimpleMatch]
Grammar = Callable[[str, float], Optional[GrammarMatch]]


def _bundle_count(token: str, text: str) -> int:
    bundle_count = parse_count(token)
    if bundle_count <= 0:
        raise InvalidBundleCountError(bundle_count, text)
    return bundle_count


def match_bundle(text: str, timeout: float) -> Optional[BundleMatch]:
    m = timed_match(BUNDLE_PATTERN, text, timeout)
    if not m:
        return None
    return BundleMatch(bundle_count=_bundle_count(m.group(1), text), inner=m.group(2))


def match_twisted_pair_bundle(text: str, timeout: float) -> Optional[TwistedPairMatch]:
    m = timed_match(TWISTED_PAIR_BUNDLE_PATTERN, text, timeout)
    if not m:
        return None
    return TwistedPairMatch(
        bundle_count=_bundle_count(m.group(1), text),
        pair_count=parse_count(m.group(2)),
        cores_per_pair=parse_count(m.group(3)),
        section=parse_section(m.group(4), timeout),
    )


def match_twisted_pair(text: str, timeout: float) -> Optional[TwistedPairMatch]:
    m = timed_match(TWISTED_PAIR_PATTERN, text, timeout)
    if not m:
        return None
    return TwistedPairMatch(
        pair_count=parse_count(m.group(1)),
        cores_per_pair=parse_count(m.group(2)),
        section=parse_section(m.group(3), timeout),
    )


def match_plus(text: str, timeout: float) -> Optional[PlusMatch]:
    m = timed_match(PLUS_PATTERN, text, timeout)
    if not m:
        return None
    return PlusMatch(
        count1=parse_count(m.group(1)),
        section1=parse_section(m.group(2), timeout),
        count2=parse_count(m.group(3)),
        section2=parse_section(m.group(4), timeout),
    )


def match_simple(text: str, timeout: float) -> Optional[SimpleMatch]:
    m = timed_match(SIMPLE_PATTERN, text, timeout)
    if not m:
        return None
    return SimpleMatch(
        count=parse_count(m.group(1)),
        section=parse_section(m.group(2), timeout),
    )


# Grammars applied after whitespace removal, highest priority first
CORE_GRAMMARS: List[Grammar] = [
    match_twisted_pair_bundle,
    match_twisted_pair,
    match_plus,
    match_simple,
]


def match_spec(normalized: str, original: str, timeout: float) -> GrammarMatch:
    """
    Match a normalized spec against the grammars in priority order.

    Args:
        normalized: Output of normalize_spec
        original: The caller's spec string, used in error messages
        timeout: Time budget per pattern match, in seconds

    Returns:
        The first grammar match

    Raises:
        UnsupportedFormatError: If no grammar matches
        InvalidBundleCountError: If a matched bundle count is <= 0
        InvalidSectionError: If a matched section is not a number
        PatternTimeoutError: If a pattern match times out
    """
    bundle = match_bundle(normalized, timeout)
    if bundle is not None:
        logger.debug("Spec %r matched bundle grammar", original)
        return bundle

    compact = strip_whitespace(normalized)
    for grammar in CORE_GRAMMARS:
        result = grammar(compact, timeout)
        if result is not None:
            logger.debug("Spec %r matched %s", original, grammar.__name__)
            return result

    raise UnsupportedFormatError(original)

"""Parsers for cable specification strings."""

from .normalizer import (
    ensure_spec,
    normalize_spec,
    strip_whitespace,
    parse_count,
    parse_section,
)

from .grammar import (
    BundleMatch,
    TwistedPairMatch,
    PlusMatch,
    SimpleMatch,
    GrammarMatch,
    CORE_GRAMMARS,
    match_bundle,
    match_twisted_pair_bundle,
    match_twisted_pair,
    match_plus,
    match_simple,
    match_spec,
)

from .spec_parser import (
    CableParser,
    allocate_cores,
    allocate_plus,
    allocate_simple,
    allocate_twisted_pair,
    create_parser,
    get_default_parser,
    parse_cable,
)

__all__ = [
    # Normalizer
    "ensure_spec",
    "normalize_spec",
    "strip_whitespace",
    "parse_count",
    "parse_section",
    # Grammar
    "BundleMatch",
    "TwistedPairMatch",
    "PlusMatch",
    "SimpleMatch",
    "GrammarMatch",
    "CORE_GRAMMARS",
    "match_bundle",
    "match_twisted_pair_bundle",
    "match_twisted_pair",
    "match_plus",
    "match_simple",
    "match_spec",
    # Parser
    "CableParser",
    "allocate_cores",
    "allocate_plus",
    "allocate_simple",
    "allocate_twisted_pair",
    "create_parser",
    "get_default_parser",
    "parse_cable",
]

"""Keyword sources and parser configuration."""

from .keywords import (
    KeywordSet,
    KeywordDocument,
    KeywordSource,
    BuiltInKeywordSource,
    StaticKeywordSource,
    FileKeywordSource,
    CompositeKeywordSource,
    DEFAULT_POWER_KEYWORDS,
    DEFAULT_CONTROL_KEYWORDS,
)

from .settings import (
    CableParserConfig,
    DEFAULT_PATTERN_TIMEOUT,
    load_config,
    build_keyword_source,
)

__all__ = [
    # Keywords
    "KeywordSet",
    "KeywordDocument",
    "KeywordSource",
    "BuiltInKeywordSource",
    "StaticKeywordSource",
    "FileKeywordSource",
    "CompositeKeywordSource",
    "DEFAULT_POWER_KEYWORDS",
    "DEFAULT_CONTROL_KEYWORDS",
    # Settings
    "CableParserConfig",
    "DEFAULT_PATTERN_TIMEOUT",
    "load_config",
    "build_keyword_source",
]

"""Cable specification parser, classifier and sorter.

Turns free-form cable size designations such as ``3x120+1x70``,
``KVV 4x1.5`` or ``2(3x50+3x25)`` into structured CableSpec records and
orders collections of them for reporting.
"""

__version__ = "1.0.0"

from .errors import (
    ErrorKind,
    CableSpecError,
    EmptySpecError,
    AmbiguousCategoryError,
    InvalidBundleCountError,
    InvalidSectionError,
    UnsupportedFormatError,
    PatternTimeoutError,
    ConfigurationError,
)

from .models import (
    CableSpec,
    CableCategory,
)

from .config import (
    KeywordSet,
    KeywordSource,
    BuiltInKeywordSource,
    StaticKeywordSource,
    FileKeywordSource,
    CompositeKeywordSource,
    CableParserConfig,
    load_config,
    build_keyword_source,
)

from .engine import (
    CategoryClassifier,
    classify_model,
    group_cables_by_category,
    sort_cables,
)

from .parsers import (
    CableParser,
    create_parser,
    parse_cable,
    normalize_spec,
)

from .reporting import (
    build_cable_table,
    print_cable_report,
)

__all__ = [
    # Version
    "__version__",
    # Errors
    "ErrorKind",
    "CableSpecError",
    "EmptySpecError",
    "AmbiguousCategoryError",
    "InvalidBundleCountError",
    "InvalidSectionError",
    "UnsupportedFormatError",
    "PatternTimeoutError",
    "ConfigurationError",
    # Models
    "CableSpec",
    "CableCategory",
    # Config
    "KeywordSet",
    "KeywordSource",
    "BuiltInKeywordSource",
    "StaticKeywordSource",
    "FileKeywordSource",
    "CompositeKeywordSource",
    "CableParserConfig",
    "load_config",
    "build_keyword_source",
    # Engine
    "CategoryClassifier",
    "classify_model",
    "group_cables_by_category",
    "sort_cables",
    # Parsers
    "CableParser",
    "create_parser",
    "parse_cable",
    "normalize_spec",
    # Reporting
    "build_cable_table",
    "print_cable_report",
]

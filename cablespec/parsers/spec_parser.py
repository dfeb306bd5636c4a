"""Cable specification parser: model + spec string -> CableSpec."""

import logging
import threading
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..config import CableParserConfig, KeywordSource, build_keyword_source
from ..config.settings import DEFAULT_PATTERN_TIMEOUT
from ..engine.classifier import CategoryClassifier
from ..models import CATEGORY_LABELS, CableCategory, CableSpec, CORES_PER_PAIR
from .grammar import (
    BundleMatch,
    GrammarMatch,
    PlusMatch,
    SimpleMatch,
    TwistedPairMatch,
    match_spec,
)
from .normalizer import normalize_spec

logger = logging.getLogger(__name__)


def allocate_twisted_pair(match: TwistedPairMatch) -> Dict[str, Any]:
    """Twisted pair fields; the conductor section is kept as the control section."""
    return {
        "bundle_count": match.bundle_count,
        "is_twisted_pair": True,
        "twisted_pair_count": match.pair_count,
        "cores_per_pair": CORES_PER_PAIR,
        "control_core_section": match.section,
    }


def allocate_plus(match: PlusMatch, category: CableCategory) -> Dict[str, Any]:
    """
    Map A x S1 + B x S2 onto conductor roles.

    - 3+3 is a variable-frequency cable whatever the category
    - control cables keep the first group only
    - 3+1: 3 phase + 1 neutral
    - 3+2: 3 phase + 1 neutral + 1 PE, both on the second section
    - 4+1: 3 phase + 1 neutral on the first section, 1 PE on the second
    - otherwise A phase + B neutral
    """
    s1, s2 = match.section1, match.section2

    if match.counts == (3, 3):
        return {
            "is_variable_frequency": True,
            "phase_core_count": 3,
            "phase_core_section": s1,
            "vf_shield_core_count": 3,
            "vf_shield_core_section": s2,
        }

    if category == CableCategory.CONTROL:
        # Second group is dropped
        return {"control_core_count": match.count1, "control_core_section": s1}

    if match.counts == (3, 1):
        return {
            "phase_core_count": 3, "phase_core_section": s1,
            "neutral_core_count": 1, "neutral_core_section": s2,
        }
    if match.counts == (3, 2):
        return {
            "phase_core_count": 3, "phase_core_section": s1,
            "neutral_core_count": 1, "neutral_core_section": s2,
            "protect_core_count": 1, "protect_core_section": s2,
        }
    if match.counts == (4, 1):
        return {
            "phase_core_count": 3, "phase_core_section": s1,
            "neutral_core_count": 1, "neutral_core_section": s1,
            "protect_core_count": 1, "protect_core_section": s2,
        }

    return {
        "phase_core_count": match.count1, "phase_core_section": s1,
        "neutral_core_count": match.count2, "neutral_core_section": s2,
    }


def allocate_simple(match: SimpleMatch, category: CableCategory) -> Dict[str, Any]:
    """
    Map A x S onto conductor roles.

    Control cables take all A cores. Otherwise 4 cores are 3 phase +
    1 neutral, 5 cores are 3 phase + 1 neutral + 1 PE, anything else is
    A phase cores, all on the same section.
    """
    count, section = match.count, match.section

    if category == CableCategory.CONTROL:
        return {"control_core_count": count, "control_core_section": section}

    if count == 4:
        return {
            "phase_core_count": 3, "phase_core_section": section,
            "neutral_core_count": 1, "neutral_core_section": section,
        }
    if count == 5:
        return {
            "phase_core_count": 3, "phase_core_section": section,
            "neutral_core_count": 1, "neutral_core_section": section,
            "protect_core_count": 1, "protect_core_section": section,
        }
    return {"phase_core_count": count, "phase_core_section": section}


def allocate_cores(match: GrammarMatch, category: CableCategory) -> Dict[str, Any]:
    """Turn a non-bundle grammar match into CableSpec field values."""
    if isinstance(match, TwistedPairMatch):
        return allocate_twisted_pair(match)
    if isinstance(match, PlusMatch):
        return allocate_plus(match, category)
    if isinstance(match, SimpleMatch):
        return allocate_simple(match, category)
    raise TypeError(f"Cannot allocate cores for {type(match).__name__}")


class CableParser:
    """
    Parse free-form cable specifications into CableSpec records.

    Supported formats:
        3x25+1x16        standard plus form
        2(3x25+1x16)     two bundled core groups
        4x25 / 5x10      3 phase + 1 neutral (+ 1 PE) on one section
        3x50+3x25        variable-frequency cable
        6x2x2.5          twisted pairs, 8x6x2x2.5 with a bundle count

    The parser holds no mutable state after construction and may be
    shared between threads.
    """

    def __init__(
        self,
        keyword_source: Optional[KeywordSource] = None,
        pattern_timeout: float = DEFAULT_PATTERN_TIMEOUT,
    ):
        """
        Initialize the parser.

        Args:
            keyword_source: Source of power/control keywords; built-in
                keywords when None
            pattern_timeout: Time budget per pattern match, in seconds
        """
        self.pattern_timeout = pattern_timeout
        self.classifier = CategoryClassifier(keyword_source, pattern_timeout)

    @classmethod
    def from_config(cls, config: Optional[CableParserConfig] = None) -> "CableParser":
        """Build a parser from a configuration (defaults when None)."""
        if config is None:
            config = CableParserConfig()
        return cls(build_keyword_source(config), config.pattern_timeout)

    def classify(self, model: Optional[str]) -> CableCategory:
        """Classify a model designator; see CategoryClassifier.classify."""
        return self.classifier.classify(model)

    def parse(self, model: Optional[str], spec_string: Optional[str]) -> CableSpec:
        """
        Parse a cable specification.

        Args:
            model: Cable model (e.g., "YJV", "KVV"); may be None, and is
                stored on the result as given
            spec_string: Specification (e.g., "3x120+1x70", "2(3x25+1x16)")

        Returns:
            CableSpec with conductor roles populated

        Raises:
            AmbiguousCategoryError: If the model has power and control keywords
            EmptySpecError: If spec_string is None or blank
            InvalidBundleCountError: If a bundle count is <= 0
            InvalidSectionError: If a section is not a number
            UnsupportedFormatError: If no format matches
            PatternTimeoutError: If a pattern match times out
        """
        category = self.classify(model)
        return self._parse_spec(model, category, spec_string)

    def parse_many(
        self, items: Iterable[Tuple[Optional[str], Optional[str]]]
    ) -> List[CableSpec]:
        """Parse (model, spec_string) pairs in order; the first error propagates."""
        return [self.parse(model, spec_string) for model, spec_string in items]

    def _parse_spec(
        self,
        model: Optional[str],
        category: CableCategory,
        spec_string: Optional[str],
        original: Optional[str] = None,
    ) -> CableSpec:
        normalized = normalize_spec(spec_string)
        if original is None:
            original = spec_string
        match = match_spec(normalized, original, self.pattern_timeout)

        if isinstance(match, BundleMatch):
            inner = self._parse_spec(model, category, match.inner, original)
            return inner.with_bundle_count(match.bundle_count)

        fields = allocate_cores(match, category)
        return CableSpec(
            model=model,
            category=category,
            cable_type=CATEGORY_LABELS[category],
            **fields,
        )


def create_parser(config: Optional[CableParserConfig] = None) -> CableParser:
    """Create a parser from a configuration; defaults when None."""
    return CableParser.from_config(config)


_default_parser: Optional[CableParser] = None
_default_parser_lock = threading.Lock()


def get_default_parser() -> CableParser:
    """Return the shared parser using built-in keywords."""
    global _default_parser
    if _default_parser is None:
        with _default_parser_lock:
            if _default_parser is None:
                _default_parser = CableParser()
    return _default_parser


def parse_cable(model: Optional[str], spec_string: Optional[str]) -> CableSpec:
    """Parse with the default parser; see CableParser.parse."""
    return get_default_parser().parse(model, spec_string)

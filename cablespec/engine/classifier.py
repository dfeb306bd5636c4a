"""Power/control category classifier for cable model designators."""

from typing import Iterable, Optional, Tuple

import regex

from ..config import BuiltInKeywordSource, KeywordSet, KeywordSource
from ..config.settings import DEFAULT_PATTERN_TIMEOUT
from ..errors import AmbiguousCategoryError
from ..models import CableCategory
from ..patterns import compile_pattern, timed_search


# Model prefixes that always denote a control cable (checked case-insensitively)
CONTROL_PREFIXES = ("K", "ZR-K", "NH-K", "WDZ-K")


def _power_pattern(keywords: Iterable[str]) -> Optional["regex.Pattern"]:
    """
    Build one pattern matching any power keyword not preceded by 'K'.

    KYJV and KVV are control cables; without the look-behind they would
    match the power keywords YJV and VV.
    """
    alternatives = "|".join(regex.escape(kw) for kw in keywords)
    if not alternatives:
        return None
    return compile_pattern(f"(?<!K)(?:{alternatives})")


class CategoryClassifier:
    """
    Classify a model designator as a power cable, a control cable or neither.

    Keywords are resolved from the source once, at construction.
    """

    def __init__(
        self,
        keyword_source: Optional[KeywordSource] = None,
        pattern_timeout: float = DEFAULT_PATTERN_TIMEOUT,
    ):
        if keyword_source is None:
            keyword_source = BuiltInKeywordSource()

        self.keywords: KeywordSet = keyword_source.get_keywords()
        self.pattern_timeout = pattern_timeout
        self._power_pattern = _power_pattern(self.keywords.power)
        self._control_keywords: Tuple[str, ...] = tuple(
            kw.casefold() for kw in self.keywords.control
        )

    def is_power(self, model: str) -> bool:
        """Check if the model carries a power keyword (K-prefixed ones excluded)."""
        if self._power_pattern is None:
            return False
        return timed_search(self._power_pattern, model, self.pattern_timeout) is not None

    def is_control(self, model: str) -> bool:
        """Check if the model starts with a control prefix or carries a control keyword."""
        folded = model.casefold()
        if folded.startswith(tuple(p.casefold() for p in CONTROL_PREFIXES)):
            return True
        return any(kw in folded for kw in self._control_keywords)

    def classify(self, model: Optional[str]) -> CableCategory:
        """
        Classify a cable model.

        Args:
            model: Model designator (e.g., "YJV22", "KVVP"); None or blank
                models are unclassified

        Returns:
            CableCategory enum value

        Raises:
            AmbiguousCategoryError: If the model matches both categories
        """
        if model is None or not model.strip():
            return CableCategory.UNCLASSIFIED

        is_power = self.is_power(model)
        is_control = self.is_control(model)

        if is_power and is_control:
            raise AmbiguousCategoryError(model)
        elif is_power:
            return CableCategory.POWER
        elif is_control:
            return CableCategory.CONTROL
        else:
            return CableCategory.UNCLASSIFIED


def classify_model(model: Optional[str], keyword_source: Optional[KeywordSource] = None) -> CableCategory:
    """Classify a model with a one-off classifier (built-in keywords by default)."""
    return CategoryClassifier(keyword_source).classify(model)

"""Keyword sources used to classify cable models as power or control cables.

A source yields a KeywordSet: two ordered, de-duplicated tuples of match
strings. Sources compose by set union (see CompositeKeywordSource).
External keyword files hold a document of the form::

    {"PowerKeywords": ["YJV", ...], "ControlKeywords": ["KVV", ...]}

and are read as JSON, or as YAML when the suffix is .yaml/.yml.
"""

import json
import logging
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)


DEFAULT_POWER_KEYWORDS = (
    "YJV", "VV", "YJLV", "VLV",
    "YJV22", "VV22", "YJLV22", "VLV22",
    "电力",                               # "power"
    "ZR-YJV", "NH-YJV", "WDZ-YJV",
)

DEFAULT_CONTROL_KEYWORDS = (
    "KVV", "KVVP", "KYJV", "KYJVP",
    "KVV22", "KVVP2",
    "控制",                               # "control"
    "ZR-KVV", "NH-KVV",
)

YAML_SUFFIXES = (".yaml", ".yml")


def _dedupe(keywords: Iterable[str]) -> Tuple[str, ...]:
    """Drop blanks and duplicates, keeping first-seen order."""
    seen = []
    for keyword in keywords:
        keyword = keyword.strip()
        if keyword and keyword not in seen:
            seen.append(keyword)
    return tuple(seen)


@dataclass(frozen=True)
class KeywordSet:
    """Immutable pair of power and control keyword tuples."""

    power: Tuple[str, ...] = ()
    control: Tuple[str, ...] = ()

    @classmethod
    def of(cls, power: Iterable[str] = (), control: Iterable[str] = ()) -> "KeywordSet":
        return cls(power=_dedupe(power), control=_dedupe(control))

    @classmethod
    def empty(cls) -> "KeywordSet":
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self.power and not self.control

    def union(self, other: "KeywordSet") -> "KeywordSet":
        """Combine with another set; this set's keywords come first."""
        return KeywordSet.of(self.power + other.power, self.control + other.control)


class KeywordDocument(BaseModel):
    """Schema of an external keyword file."""

    model_config = ConfigDict(populate_by_name=True)

    power_keywords: List[str] = Field(default_factory=list, alias="PowerKeywords")
    control_keywords: List[str] = Field(default_factory=list, alias="ControlKeywords")

    def to_keyword_set(self) -> KeywordSet:
        return KeywordSet.of(self.power_keywords, self.control_keywords)


class KeywordSource(ABC):
    """Supplies power and control keywords for category classification."""

    @abstractmethod
    def get_keywords(self) -> KeywordSet:
        """Return the keywords this source provides."""

    def power_keywords(self) -> Tuple[str, ...]:
        return self.get_keywords().power

    def control_keywords(self) -> Tuple[str, ...]:
        return self.get_keywords().control


class BuiltInKeywordSource(KeywordSource):
    """The static default keyword tables."""

    _KEYWORDS = KeywordSet.of(DEFAULT_POWER_KEYWORDS, DEFAULT_CONTROL_KEYWORDS)

    def get_keywords(self) -> KeywordSet:
        return self._KEYWORDS


class StaticKeywordSource(KeywordSource):
    """Caller-supplied in-memory keywords."""

    def __init__(self, power: Iterable[str] = (), control: Iterable[str] = ()) -> None:
        self._keywords = KeywordSet.of(power, control)

    def get_keywords(self) -> KeywordSet:
        return self._keywords


class FileKeywordSource(KeywordSource):
    """
    Keywords loaded from a JSON or YAML file on first use.

    The file is read at most once per instance, even under concurrent
    first access. A missing or unreadable file, or one that does not
    match KeywordDocument, yields an empty KeywordSet so that models
    simply stay unclassified.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()
        self._keywords: Optional[KeywordSet] = None

    @property
    def is_loaded(self) -> bool:
        return self._keywords is not None

    def get_keywords(self) -> KeywordSet:
        keywords = self._keywords
        if keywords is not None:
            return keywords

        with self._lock:
            if self._keywords is None:
                self._keywords = self._load()
            return self._keywords

    def _load(self) -> KeywordSet:
        if not self.path.is_file():
            logger.warning("Keyword file not found, using no keywords: %s", self.path)
            return KeywordSet.empty()

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                if self.path.suffix.lower() in YAML_SUFFIXES:
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
            document = KeywordDocument.model_validate(data or {})
        except (OSError, ValueError, yaml.YAMLError, ValidationError) as e:
            logger.warning("Failed to load keyword file %s: %s", self.path, e)
            return KeywordSet.empty()

        keywords = document.to_keyword_set()
        logger.debug(
            "Loaded %d power and %d control keywords from %s",
            len(keywords.power), len(keywords.control), self.path,
        )
        return keywords


class CompositeKeywordSource(KeywordSource):
    """Union of several sources, in the order given."""

    def __init__(self, *sources: KeywordSource) -> None:
        self.sources: List[KeywordSource] = list(sources)

    def get_keywords(self) -> KeywordSet:
        combined = KeywordSet.empty()
        for source in self.sources:
            combined = combined.union(source.get_keywords())
        return combined

"""Parser configuration: which keyword sources feed the classifier."""

from pathlib import Path
from typing import List, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..errors import ConfigurationError
from .keywords import (
    BuiltInKeywordSource,
    CompositeKeywordSource,
    FileKeywordSource,
    KeywordSource,
)


DEFAULT_PATTERN_TIMEOUT = 1.0  # seconds


class CableParserConfig(BaseModel):
    """
    Configuration options for keyword sources.

    Example YAML:

        enableBuiltInKeywords: true
        externalSources:
          - keywords/site.json
          - keywords/vendor.yaml
        patternTimeout: 1.0
    """

    model_config = ConfigDict(populate_by_name=True)

    enable_built_in_keywords: bool = Field(default=True, alias="enableBuiltInKeywords")
    external_sources: List[Path] = Field(default_factory=list, alias="externalSources")
    pattern_timeout: float = Field(
        default=DEFAULT_PATTERN_TIMEOUT, gt=0, alias="patternTimeout"
    )


def load_config(path: Union[str, Path]) -> CableParserConfig:
    """
    Load a parser configuration from a YAML or JSON file.

    Relative external source paths are resolved against the directory
    holding the configuration file.

    Args:
        path: Path to the configuration file

    Returns:
        CableParserConfig instance

    Raises:
        ConfigurationError: If the file is missing or its content is invalid
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise ConfigurationError(f"Configuration file not found: {path}", str(path)) from None
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Cannot read configuration file {path}: {e}", str(path)) from e

    try:
        config = CableParserConfig.model_validate(data or {})
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration in {path}: {e}", str(path)) from e

    resolved = [
        source if source.is_absolute() else path.parent / source
        for source in config.external_sources
    ]
    return config.model_copy(update={"external_sources": resolved})


def build_keyword_source(config: Optional[CableParserConfig] = None) -> KeywordSource:
    """
    Compose the keyword source described by a configuration.

    Built-in keywords (if enabled) come first, followed by each external
    source in listed order.
    """
    if config is None:
        config = CableParserConfig()

    sources: List[KeywordSource] = []
    if config.enable_built_in_keywords:
        sources.append(BuiltInKeywordSource())
    for source_path in config.external_sources:
        sources.append(FileKeywordSource(source_path))

    return CompositeKeywordSource(*sources)

"""Tests for keyword sources and parser configuration."""

import logging
import threading

import pytest
from pydantic import ValidationError

from cablespec.config import (
    BuiltInKeywordSource,
    CableParserConfig,
    CompositeKeywordSource,
    DEFAULT_CONTROL_KEYWORDS,
    DEFAULT_POWER_KEYWORDS,
    FileKeywordSource,
    KeywordSet,
    StaticKeywordSource,
    build_keyword_source,
    load_config,
)
from cablespec.errors import ConfigurationError, ErrorKind
from cablespec.models import CableCategory
from cablespec.parsers import create_parser


class TestKeywordSet:
    """Tests for KeywordSet."""

    def test_of_dedupes_in_order(self):
        """Test duplicates and blanks are dropped, first occurrence wins."""
        keywords = KeywordSet.of(["YJV", "VV", "YJV", "  ", ""], ["KVV", "KVV"])
        assert keywords.power == ("YJV", "VV")
        assert keywords.control == ("KVV",)

    def test_dedupe_is_case_sensitive(self):
        """Test keywords differing only in case are both kept."""
        assert KeywordSet.of(["yjv", "YJV"]).power == ("yjv", "YJV")

    def test_union(self):
        """Test union keeps this set's keywords first."""
        left = KeywordSet.of(["YJV"], ["KVV"])
        right = KeywordSet.of(["VV", "YJV"], ["KYJV"])
        combined = left.union(right)
        assert combined.power == ("YJV", "VV")
        assert combined.control == ("KVV", "KYJV")

    def test_empty(self):
        """Test the empty set."""
        assert KeywordSet.empty().is_empty
        assert not KeywordSet.of(["YJV"]).is_empty


class TestKeywordSources:
    """Tests for built-in, static and composite sources."""

    def test_built_in(self):
        """Test built-in tables."""
        source = BuiltInKeywordSource()
        assert source.power_keywords() == DEFAULT_POWER_KEYWORDS
        assert source.control_keywords() == DEFAULT_CONTROL_KEYWORDS

    def test_static(self):
        """Test caller-supplied keywords."""
        source = StaticKeywordSource(power=["P1"], control=["C1"])
        assert source.get_keywords() == KeywordSet(power=("P1",), control=("C1",))

    def test_composite_order(self):
        """Test composite merges sources in the order given."""
        source = CompositeKeywordSource(
            StaticKeywordSource(power=["A", "B"]),
            StaticKeywordSource(power=["C", "A"], control=["K1"]),
        )
        assert source.power_keywords() == ("A", "B", "C")
        assert source.control_keywords() == ("K1",)

    def test_composite_of_nothing_is_empty(self):
        """Test a composite with no sources."""
        assert CompositeKeywordSource().get_keywords().is_empty


class TestFileKeywordSource:
    """Tests for file-backed keyword sources."""

    @pytest.fixture
    def load_calls(self, monkeypatch):
        """Record every call to FileKeywordSource._load."""
        calls = []
        original = FileKeywordSource._load

        def counting_load(source):
            calls.append(source)
            return original(source)

        monkeypatch.setattr(FileKeywordSource, "_load", counting_load)
        return calls

    def test_json_file(self, keyword_file):
        """Test loading a JSON keyword document."""
        path = keyword_file(power=["TEST-POWER"], control=["TEST-CONTROL"])
        source = FileKeywordSource(path)
        assert source.power_keywords() == ("TEST-POWER",)
        assert source.control_keywords() == ("TEST-CONTROL",)

    def test_yaml_file(self, tmp_path):
        """Test loading a YAML keyword document."""
        path = tmp_path / "keywords.yaml"
        path.write_text(
            "PowerKeywords:\n  - YJY\nControlKeywords:\n  - KYY\n",
            encoding="utf-8",
        )
        keywords = FileKeywordSource(path).get_keywords()
        assert keywords == KeywordSet(power=("YJY",), control=("KYY",))

    def test_missing_section_defaults_to_empty(self, tmp_path):
        """Test a document with only one list."""
        path = tmp_path / "keywords.json"
        path.write_text('{"PowerKeywords": ["YJY"]}', encoding="utf-8")
        keywords = FileKeywordSource(path).get_keywords()
        assert keywords.power == ("YJY",)
        assert keywords.control == ()

    def test_missing_file_is_empty(self, tmp_path, caplog):
        """Test a missing file yields no keywords and logs a warning."""
        source = FileKeywordSource(tmp_path / "absent.json")
        with caplog.at_level(logging.WARNING, logger="cablespec.config.keywords"):
            assert source.get_keywords().is_empty
        assert "not found" in caplog.text

    def test_corrupt_json_is_empty(self, tmp_path, caplog):
        """Test a malformed file yields no keywords."""
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with caplog.at_level(logging.WARNING, logger="cablespec.config.keywords"):
            assert FileKeywordSource(path).get_keywords().is_empty
        assert "Failed to load" in caplog.text

    def test_corrupt_yaml_is_empty(self, tmp_path):
        """Test a malformed YAML file yields no keywords."""
        path = tmp_path / "broken.yml"
        path.write_text("PowerKeywords: [YJV\n", encoding="utf-8")
        assert FileKeywordSource(path).get_keywords().is_empty

    def test_wrong_shape_is_empty(self, tmp_path):
        """Test a document of the wrong shape yields no keywords."""
        path = tmp_path / "wrong.json"
        path.write_text('{"PowerKeywords": "YJV"}', encoding="utf-8")
        assert FileKeywordSource(path).get_keywords().is_empty

    def test_loaded_once(self, keyword_file, load_calls):
        """Test the file is read only on first use."""
        source = FileKeywordSource(keyword_file(power=["YJY"]))
        assert not source.is_loaded
        for _ in range(3):
            source.get_keywords()
        assert source.is_loaded
        assert len(load_calls) == 1

    def test_failed_load_is_not_retried(self, tmp_path, load_calls):
        """Test a missing file is also only checked once."""
        source = FileKeywordSource(tmp_path / "absent.json")
        source.get_keywords()
        source.get_keywords()
        assert len(load_calls) == 1

    def test_loaded_once_under_concurrency(self, keyword_file, load_calls):
        """Test concurrent first access loads the file exactly once."""
        source = FileKeywordSource(keyword_file(power=["YJY"]))
        barrier = threading.Barrier(8)
        results = []

        def worker():
            barrier.wait()
            results.append(source.get_keywords())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(load_calls) == 1
        assert len(results) == 8
        assert all(r.power == ("YJY",) for r in results)


class TestCableParserConfig:
    """Tests for parser configuration."""

    def test_defaults(self):
        """Test default configuration."""
        config = CableParserConfig()
        assert config.enable_built_in_keywords is True
        assert config.external_sources == []
        assert config.pattern_timeout == 1.0

    def test_aliases_and_field_names(self):
        """Test both camelCase aliases and field names are accepted."""
        by_alias = CableParserConfig.model_validate(
            {"enableBuiltInKeywords": False, "externalSources": ["a.json"], "patternTimeout": 0.5}
        )
        by_name = CableParserConfig(
            enable_built_in_keywords=False, external_sources=["a.json"], pattern_timeout=0.5
        )
        assert by_alias.model_dump() == by_name.model_dump()
        assert by_alias.external_sources[0].name == "a.json"

    @pytest.mark.parametrize("timeout", [0, -1])
    def test_timeout_must_be_positive(self, timeout):
        """Test a non-positive timeout is rejected."""
        with pytest.raises(ValidationError):
            CableParserConfig(pattern_timeout=timeout)

    def test_load_config_resolves_relative_sources(self, tmp_path):
        """Test relative source paths are resolved next to the config file."""
        config_path = tmp_path / "cablespec.yaml"
        config_path.write_text(
            "enableBuiltInKeywords: false\n"
            "externalSources:\n"
            "  - keywords/site.json\n"
            "patternTimeout: 2\n",
            encoding="utf-8",
        )
        config = load_config(config_path)
        assert config.enable_built_in_keywords is False
        assert config.external_sources == [tmp_path / "keywords" / "site.json"]
        assert config.pattern_timeout == 2.0

    def test_load_config_keeps_absolute_sources(self, tmp_path):
        """Test absolute source paths are kept."""
        source = tmp_path / "abs.json"
        config_path = tmp_path / "cablespec.json"
        config_path.write_text(
            '{"externalSources": ["%s"]}' % source.as_posix(), encoding="utf-8"
        )
        assert load_config(config_path).external_sources == [source]

    def test_load_empty_config(self, tmp_path):
        """Test an empty file gives the defaults."""
        config_path = tmp_path / "empty.yaml"
        config_path.write_text("", encoding="utf-8")
        assert load_config(config_path).model_dump() == CableParserConfig().model_dump()

    def test_load_missing_config(self, tmp_path):
        """Test a missing configuration file."""
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(tmp_path / "absent.yaml")
        assert exc_info.value.kind == ErrorKind.CONFIGURATION

    def test_load_invalid_config(self, tmp_path):
        """Test a configuration that fails validation."""
        config_path = tmp_path / "bad.yaml"
        config_path.write_text("patternTimeout: -3\n", encoding="utf-8")
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(config_path)
        assert exc_info.value.path == str(config_path)

    def test_load_malformed_config(self, tmp_path):
        """Test a configuration that is not valid YAML."""
        config_path = tmp_path / "bad.yaml"
        config_path.write_text("externalSources: [a.json\n", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_config(config_path)


class TestBuildKeywordSource:
    """Tests for composing sources from configuration."""

    def test_default_is_built_in(self):
        """Test the default configuration yields the built-in keywords."""
        keywords = build_keyword_source().get_keywords()
        assert keywords.power == DEFAULT_POWER_KEYWORDS
        assert keywords.control == DEFAULT_CONTROL_KEYWORDS

    def test_built_in_then_external(self, keyword_file):
        """Test external keywords follow the built-in ones."""
        path = keyword_file(power=["TEST-POWER", "YJV"], control=["TEST-CONTROL"])
        keywords = build_keyword_source(CableParserConfig(external_sources=[path])).get_keywords()
        assert keywords.power[: len(DEFAULT_POWER_KEYWORDS)] == DEFAULT_POWER_KEYWORDS
        assert keywords.power[-1] == "TEST-POWER"
        assert keywords.control[-1] == "TEST-CONTROL"

    def test_built_in_disabled(self):
        """Test disabling the built-in keywords."""
        config = CableParserConfig(enable_built_in_keywords=False)
        assert build_keyword_source(config).get_keywords().is_empty


class TestCreateParser:
    """Tests for configuring a parser."""

    def test_default_parser(self):
        """Test a default parser classifies with built-in keywords."""
        parser = create_parser()
        assert parser.classify("YJV") == CableCategory.POWER
        assert parser.classify("KVV") == CableCategory.CONTROL

    def test_external_keywords(self, keyword_file):
        """Test a parser picks up keywords from an external file."""
        path = keyword_file(power=["TEST-POWER"], control=["TEST-CONTROL"])
        parser = create_parser(CableParserConfig(external_sources=[path]))
        assert parser.parse("TEST-POWER", "4x25").category == CableCategory.POWER
        assert parser.parse("TEST-CONTROL", "4x1.5").control_core_count == 4
        assert parser.classify("YJV") == CableCategory.POWER

    def test_only_external_keywords(self, keyword_file):
        """Test built-in keywords can be switched off."""
        path = keyword_file(power=["TEST-POWER"])
        parser = create_parser(
            CableParserConfig(enable_built_in_keywords=False, external_sources=[path])
        )
        assert parser.classify("TEST-POWER") == CableCategory.POWER
        assert parser.classify("YJV") == CableCategory.UNCLASSIFIED

    def test_pattern_timeout_is_applied(self):
        """Test the configured timeout reaches the parser."""
        parser = create_parser(CableParserConfig(pattern_timeout=0.25))
        assert parser.pattern_timeout == 0.25

    def test_missing_external_file_leaves_unclassified(self, tmp_path):
        """Test a missing keyword file does not fail parsing."""
        config = CableParserConfig(
            enable_built_in_keywords=False, external_sources=[tmp_path / "absent.json"]
        )
        spec = create_parser(config).parse("YJV", "3x16")
        assert spec.category == CableCategory.UNCLASSIFIED

"""Shared fixtures for cablespec tests."""

import json

import pytest

from cablespec import CableParser


@pytest.fixture
def parser():
    """Parser using the built-in keyword tables."""
    return CableParser()


@pytest.fixture
def keyword_file(tmp_path):
    """Factory writing a keyword document to a JSON file and returning its path."""

    def _write(power=(), control=(), name="keywords.json"):
        path = tmp_path / name
        path.write_text(
            json.dumps({"PowerKeywords": list(power), "ControlKeywords": list(control)}),
            encoding="utf-8",
        )
        return path

    return _write

import json
from pathlib import Path

import pytest

from cardslug.models.slug import ClassificationDictionaries
from cardslug.services.dictionaries import get_default_dictionaries


@pytest.fixture
def default_dictionaries() -> ClassificationDictionaries:
    """Built-in classification tables."""
    return get_default_dictionaries()


@pytest.fixture
def empty_dictionaries() -> ClassificationDictionaries:
    """Tables with no entries, leaving only the structural rules."""
    return ClassificationDictionaries()


@pytest.fixture
def dictionary_file(tmp_path: Path):
    """Write a dictionary JSON file and return its path."""

    def _write(data: object) -> Path:
        path = tmp_path / "dictionaries.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write

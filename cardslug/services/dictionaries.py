"""
Classification dictionary service.

Builds and caches the lookup tables used to classify card slug tokens.
Tables are constructed once and passed into the decomposer; nothing in
this module is mutated after construction.
"""

import json
import logging
from collections.abc import Iterable
from functools import lru_cache
from pathlib import Path
from typing import Any

from cardslug.models.slug import ClassificationDictionaries

logger = logging.getLogger(__name__)

# Team codes that show up inside card numbers (e.g. "C90A-ARI")
DEFAULT_TEAM_ABBREVIATIONS = frozenset(
    [
        "ari", "atl", "bal", "bos", "chc", "chw", "cin", "cle", "col", "det",
        "hou", "kc", "laa", "lad", "mia", "mil", "min", "nym", "nyy", "oak",
        "phi", "pit", "sd", "sea", "sf", "stl", "tb", "tex", "tor", "was",
        "az", "la", "ny", "wsh", "aru",
    ]
)  # fmt: skip

# Curated given names; a match is the strongest signal a player name starts
DEFAULT_FIRST_NAMES = frozenset(
    [
        "aaron", "adam", "adrian", "albert", "alex", "andrew", "anthony", "austin",
        "ben", "brandon", "brian", "carlos", "chris", "daniel", "david", "derek",
        "eric", "fernando", "frank", "gary", "george", "harold", "jacob", "james",
        "jason", "jean", "jeffrey", "john", "jose", "josh", "justin", "kevin", "kyle",
        "luis", "marcus", "mark", "martin", "matthew", "max", "michael", "mike",
        "nelson", "paul", "pedro", "peter", "rafael", "ramon", "ricardo", "richard",
        "robert", "ronald", "ryan", "salvador", "scott", "sergio", "stephen", "steve",
        "thomas", "tim", "tony", "trevor", "tyler", "victor", "vladimir", "william",
    ]
)  # fmt: skip

# Rarity and finish words that belong to the card number
DEFAULT_CARD_TERMS = frozenset(
    ["rc", "sp", "auto", "relic", "gold", "silver", "black", "red", "blue", "green"]
)

DICTIONARY_KEYS = ("team_abbreviations", "first_names", "card_terms")


class DictionaryLoadError(Exception):
    """Raised when a dictionary file cannot be read or has the wrong shape."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load dictionaries from {path}: {reason}")


def _normalize(entries: Iterable[str]) -> frozenset[str]:
    return frozenset(e.strip().lower() for e in entries if e and e.strip())


def _merge(
    default: frozenset[str],
    entries: Iterable[str] | None,
    extend: bool,
) -> frozenset[str]:
    if entries is None:
        return default
    normalized = _normalize(entries)
    return default | normalized if extend else normalized


def build_dictionaries(
    team_abbreviations: Iterable[str] | None = None,
    first_names: Iterable[str] | None = None,
    card_terms: Iterable[str] | None = None,
    *,
    extend: bool = True,
) -> ClassificationDictionaries:
    """
    Build classification dictionaries from the defaults plus overrides.

    Args:
        team_abbreviations: Extra (or replacement) team codes
        first_names: Extra (or replacement) given names
        card_terms: Extra (or replacement) card terms
        extend: Add entries to the defaults when True, replace them when False.
            A None argument always keeps that table's defaults.

    Returns:
        Frozen ClassificationDictionaries with lowercase entries.
    """
    return ClassificationDictionaries(
        team_abbreviations=_merge(DEFAULT_TEAM_ABBREVIATIONS, team_abbreviations, extend),
        first_names=_merge(DEFAULT_FIRST_NAMES, first_names, extend),
        card_terms=_merge(DEFAULT_CARD_TERMS, card_terms, extend),
    )


@lru_cache(maxsize=1)
def get_default_dictionaries() -> ClassificationDictionaries:
    """Get the cached built-in dictionaries."""
    return build_dictionaries()


def _read_entries(data: dict[str, Any], key: str, path: Path) -> list[str] | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise DictionaryLoadError(path, f"'{key}' must be a list of strings")
    return value


def load_dictionaries(path: Path) -> ClassificationDictionaries:
    """
    Load classification dictionaries from a JSON file.

    The file holds an object with optional ``team_abbreviations``,
    ``first_names`` and ``card_terms`` lists, and an optional boolean
    ``extend`` (default true) choosing between extending and replacing
    the built-in tables.

    Raises:
        DictionaryLoadError: If the file is missing, malformed or mistyped
    """
    path = Path(path)
    if not path.exists():
        raise DictionaryLoadError(path, "file not found")

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise DictionaryLoadError(path, f"invalid JSON ({e.msg})") from e
    except UnicodeDecodeError as e:
        raise DictionaryLoadError(path, "file is not valid UTF-8") from e
    except OSError as e:
        raise DictionaryLoadError(path, f"cannot read file ({e.strerror})") from e

    if not isinstance(data, dict):
        raise DictionaryLoadError(path, "top-level value must be an object")

    extend = data.get("extend", True)
    if not isinstance(extend, bool):
        raise DictionaryLoadError(path, "'extend' must be a boolean")

    entries = {key: _read_entries(data, key, path) for key in DICTIONARY_KEYS}
    dictionaries = build_dictionaries(**entries, extend=extend)

    logger.info(
        "DICTIONARIES_LOADED: path=%s, extend=%s, sizes=%s",
        path,
        extend,
        dictionaries.sizes(),
    )
    return dictionaries

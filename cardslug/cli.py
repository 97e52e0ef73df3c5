"""
Decompose card slugs from the command line.

Usage:
    cardslug c90a-ari-austin-riley 102-freddie-freeman
    cat slugs.txt | cardslug --json
"""

import argparse
import json
import logging
import sys
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import TextIO

from cardslug.config import settings
from cardslug.models.slug import ClassificationDictionaries
from cardslug.parsers.card_slug import SlugDecomposer
from cardslug.services.dictionaries import (
    DictionaryLoadError,
    get_default_dictionaries,
    load_dictionaries,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_BAD_DICTIONARIES = 2


def _read_slugs(stream: TextIO) -> Iterator[str]:
    for line in stream:
        line = line.strip()
        if line:
            yield line


def _resolve_dictionaries(path: Path | None) -> ClassificationDictionaries:
    if path is None:
        path = settings.dictionaries_path
    if path is None:
        return get_default_dictionaries()
    return load_dictionaries(path)


def run(
    slugs: Iterable[str],
    dictionaries: ClassificationDictionaries,
    output: TextIO,
    as_json: bool = False,
) -> int:
    """
    Decompose each slug and write one line per slug to output.

    Returns:
        Number of slugs processed
    """
    decomposer = SlugDecomposer(dictionaries)
    count = 0
    for slug in slugs:
        result = decomposer.decompose(slug)
        if as_json:
            line = json.dumps({"slug": slug, **result.as_dict()})
        else:
            line = f"{result.card_number}\t{result.player_slug}"
        output.write(line + "\n")
        count += 1
    return count


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Split card slugs into card number and player slug"
    )
    parser.add_argument(
        "slugs",
        nargs="*",
        help="Card slugs to decompose (read from stdin, one per line, when omitted)",
    )
    parser.add_argument(
        "--dictionaries",
        type=Path,
        help="Path to a JSON file extending or replacing the built-in tables",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print one JSON object per slug instead of tab-separated fields",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        dictionaries = _resolve_dictionaries(args.dictionaries)
    except DictionaryLoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_BAD_DICTIONARIES

    slugs = args.slugs or _read_slugs(sys.stdin)
    count = run(slugs, dictionaries, sys.stdout, as_json=args.json)
    logger.debug("Decomposed %d slugs", count)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())

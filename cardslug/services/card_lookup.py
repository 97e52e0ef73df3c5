"""
Card lookup parameters.

Turns the path segments of a card detail URL
(``/{year}/{set_slug}/{series_slug}/{card_slug}``) into the filter values
the card data-access layer queries with. The query itself lives with the
data-access layer.
"""

import logging
import re

from cardslug.models.slug import CardLookup, ClassificationDictionaries
from cardslug.parsers.card_slug import decompose

logger = logging.getLogger(__name__)

_ASCII_DIGITS = re.compile(r"[0-9]+")


class InvalidLookupError(Exception):
    """Raised when a URL segment cannot be used as a lookup value."""

    def __init__(self, field: str, value: str, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field}: {reason}")


def parse_year(value: str | int) -> int:
    """
    Parse a year path segment.

    Raises:
        InvalidLookupError: If the value is not a non-negative integer
    """
    text = str(value).strip()
    if not _ASCII_DIGITS.fullmatch(text):
        raise InvalidLookupError("year", str(value), "must be a positive integer")
    return int(text)


def series_name_pattern(series_slug: str) -> str:
    """Series slug as a name fragment: "topps-chrome" -> "topps chrome"."""
    return series_slug.replace("-", " ")


def build_card_lookup(
    year: str | int,
    set_slug: str,
    series_slug: str,
    card_slug: str,
    dictionaries: ClassificationDictionaries | None = None,
) -> CardLookup:
    """
    Build lookup parameters for one card detail request.

    Args:
        year: Year segment of the URL
        set_slug: Set segment
        series_slug: Series segment
        card_slug: Card segment, decomposed into card number and player slug
        dictionaries: Substitute dictionaries for the decomposition

    Returns:
        CardLookup with the decomposed card number and player slug

    Raises:
        InvalidLookupError: If the year is not a non-negative integer
    """
    parsed_year = parse_year(year)
    decomposition = decompose(card_slug, dictionaries)

    lookup = CardLookup(
        year=parsed_year,
        set_slug=set_slug,
        series_slug=series_slug,
        series_name_pattern=series_name_pattern(series_slug),
        card_slug=card_slug,
        card_number=decomposition.card_number,
        player_slug=decomposition.player_slug,
    )
    logger.debug(
        "CARD_LOOKUP: year=%d, series='%s', card_number='%s', player='%s'",
        lookup.year,
        lookup.series_name_pattern,
        lookup.card_number,
        lookup.player_slug,
    )
    return lookup

"""
Slug generation for card URLs.

The inverse of card slug decomposition: turns set, series, card number and
player names into the hyphenated segments used in card detail URLs.

Example:
    build_card_slug("C90A-ARI", ["Austin Riley"])  ->  "c90a-ari-austin-riley"
"""

import re
from collections.abc import Iterable

UNKNOWN_SLUG = "unknown"

_APOSTROPHES = re.compile(r"'")
_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")


def generate_slug(name: str | None) -> str:
    """
    Generate a URL slug from a display name.

    Apostrophes are dropped ("O'Neil" -> "oneil"), every other run of
    non-alphanumeric characters becomes one hyphen, and leading/trailing
    hyphens are trimmed. Empty input gives "unknown".
    """
    if not name:
        return UNKNOWN_SLUG

    slug = _APOSTROPHES.sub("", name.lower())
    slug = _NON_SLUG_CHARS.sub("-", slug)
    return slug.strip("-")


def build_card_slug(card_number: str, player_names: Iterable[str] = ()) -> str:
    """
    Build the card segment of a card detail URL.

    Args:
        card_number: Card number as stored (e.g. "C90A-ARI")
        player_names: Player display names, in card order

    Returns:
        Card number slug followed by the player slug; the card number slug
        alone when there are no player names.
    """
    number_slug = generate_slug(card_number)
    names = [n for n in player_names if n and n.strip()]
    if not names:
        return number_slug
    return f"{number_slug}-{generate_slug(', '.join(names))}"

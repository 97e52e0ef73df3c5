"""
Card slug decomposition.

Splits a hyphenated card slug taken from a URL into its card number and
player name parts:

    c90a-ari-austin-riley    ->  C90A-ARI  /  austin-riley
    sp-rc-101-bobby-witt-jr  ->  SP-RC-101 /  bobby-witt-jr
    cl-5                     ->  CL-5      /  (empty)

There is no separator between the two parts, so the split point is chosen
by an ordered list of strategies. Each strategy inspects the tokens and
returns a split index or None; the first index returned wins. When no
strategy matches, the whole slug is the card number.

INVARIANTS:
- Never raises; every input gets a best-effort decomposition
- Earliest qualifying token wins within each strategy
- Card number is uppercase, player slug is lowercase
- Rejoining card number tokens and player tokens gives back the input tokens
"""

import logging
import re
from collections.abc import Callable, Sequence
from functools import lru_cache

from cardslug.models.slug import (
    FALLBACK_STRATEGY,
    ClassificationDictionaries,
    SlugDecomposition,
)
from cardslug.services.dictionaries import get_default_dictionaries

logger = logging.getLogger(__name__)

TOKEN_SEPARATOR = "-"

# Strict ASCII digits-only check; "007" counts, "c90a" and "5\n" do not
_ALL_DIGITS = re.compile(r"[0-9]+")

SplitStrategy = Callable[[Sequence[str], ClassificationDictionaries], int | None]


def tokenize(slug: str) -> tuple[str, ...]:
    """Split a slug on hyphens, keeping order. "" gives ("",)."""
    return tuple(slug.split(TOKEN_SEPARATOR))


def first_name_split(
    tokens: Sequence[str],
    dictionaries: ClassificationDictionaries,
) -> int | None:
    """
    Split at the first token that is a known given name.

    Checked from index 0, so a name in the very first position is reported
    as index 0 and handled by the decomposer.
    """
    for i, token in enumerate(tokens):
        if dictionaries.is_first_name(token):
            return i
    return None


def _could_start_name(token: str, dictionaries: ClassificationDictionaries) -> bool:
    return (
        not dictionaries.is_team_abbreviation(token)
        and not _ALL_DIGITS.fullmatch(token)
        and len(token) > 1
        and not dictionaries.is_card_term(token)
    )


def structural_split(
    tokens: Sequence[str],
    dictionaries: ClassificationDictionaries,
) -> int | None:
    """
    Split at the first token after index 0 that looks like a word.

    A token qualifies when it is not a team code, not all digits, longer
    than one character and not a card term. Token 0 always stays in the
    card number.
    """
    for i in range(1, len(tokens)):
        if _could_start_name(tokens[i], dictionaries):
            return i
    return None


DEFAULT_STRATEGIES: tuple[tuple[str, SplitStrategy], ...] = (
    ("first_name", first_name_split),
    ("structural", structural_split),
)


class SlugDecomposer:
    """
    Applies split strategies in order and builds the decomposition.

    Stateless apart from the injected dictionaries and strategy list,
    both read-only, so one instance can serve concurrent callers.
    """

    def __init__(
        self,
        dictionaries: ClassificationDictionaries | None = None,
        strategies: Sequence[tuple[str, SplitStrategy]] = DEFAULT_STRATEGIES,
    ) -> None:
        if dictionaries is None:
            dictionaries = get_default_dictionaries()
        self._dictionaries = dictionaries
        self._strategies = tuple(strategies)

    @property
    def dictionaries(self) -> ClassificationDictionaries:
        return self._dictionaries

    @property
    def strategy_names(self) -> tuple[str, ...]:
        return tuple(name for name, _ in self._strategies)

    def decompose(self, slug: str) -> SlugDecomposition:
        """
        Decompose a card slug into card number and player slug.

        Args:
            slug: Lowercase hyphenated slug (one URL path segment)

        Returns:
            SlugDecomposition. Falls back to the whole slug as the card
            number with an empty player slug when no strategy matches.
        """
        tokens = tokenize(slug)

        for name, strategy in self._strategies:
            index = strategy(tokens, self._dictionaries)
            if index is None:
                continue

            result = _split_at(tokens, index, name)
            logger.debug(
                "SLUG_SPLIT: slug='%s', strategy=%s, index=%d, card_number='%s'",
                slug,
                name,
                result.split_index,
                result.card_number,
            )
            return result

        logger.debug("SLUG_SPLIT: slug='%s', strategy=%s", slug, FALLBACK_STRATEGY)
        return SlugDecomposition(card_number=slug.upper(), player_slug="")


def _split_at(tokens: Sequence[str], index: int, strategy: str) -> SlugDecomposition:
    # A player name at token 0 should not happen for real slugs; keep token 0
    # as the card number and the rest as the player.
    if index <= 0:
        index = 1

    card_number = TOKEN_SEPARATOR.join(tokens[:index]).upper()
    player_slug = TOKEN_SEPARATOR.join(tokens[index:]).lower()
    return SlugDecomposition(
        card_number=card_number,
        player_slug=player_slug,
        split_index=index,
        strategy=strategy,
    )


@lru_cache(maxsize=1)
def get_default_decomposer() -> SlugDecomposer:
    """Decomposer over the built-in dictionaries, created on first use."""
    return SlugDecomposer()


def decompose(
    slug: str,
    dictionaries: ClassificationDictionaries | None = None,
) -> SlugDecomposition:
    """
    Convenience function: decompose one slug.

    Args:
        slug: Lowercase hyphenated card slug
        dictionaries: Substitute dictionaries; built-in ones when omitted

    Returns:
        SlugDecomposition for the slug
    """
    if dictionaries is None:
        return get_default_decomposer().decompose(slug)
    return SlugDecomposer(dictionaries).decompose(slug)

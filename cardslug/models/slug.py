"""
Card Slug Models.

Value types shared by the slug decomposition engine, the lookup builder
and the HTTP layer.

INVARIANTS:
- All models are frozen (immutable after construction)
- Dictionary entries are stored lowercase; lookups are case-insensitive
- A SlugDecomposition always reproduces its source tokens (case-insensitively)
"""

from dataclasses import dataclass, field

FALLBACK_STRATEGY = "fallback"


@dataclass(frozen=True, slots=True)
class ClassificationDictionaries:
    """
    Read-only lookup tables used to classify slug tokens.

    Built once (see ``cardslug.services.dictionaries``) and shared by every
    decomposition. Safe to use from any number of threads.

    Attributes:
        team_abbreviations: Short team codes that may appear inside a card number
        first_names: Given names that mark the start of a player name
        card_terms: Rarity/finish words that never start a player name
    """

    team_abbreviations: frozenset[str] = field(default_factory=frozenset)
    first_names: frozenset[str] = field(default_factory=frozenset)
    card_terms: frozenset[str] = field(default_factory=frozenset)

    def is_team_abbreviation(self, token: str) -> bool:
        return token.lower() in self.team_abbreviations

    def is_first_name(self, token: str) -> bool:
        return token.lower() in self.first_names

    def is_card_term(self, token: str) -> bool:
        return token.lower() in self.card_terms

    def sizes(self) -> dict[str, int]:
        """Entry count per table (for logging and health output)."""
        return {
            "team_abbreviations": len(self.team_abbreviations),
            "first_names": len(self.first_names),
            "card_terms": len(self.card_terms),
        }


@dataclass(frozen=True, slots=True)
class SlugDecomposition:
    """
    Result of splitting a card slug into card number and player slug.

    Attributes:
        card_number: Uppercase, hyphen-joined prefix tokens
        player_slug: Lowercase, hyphen-joined suffix tokens (may be empty)
        split_index: Token index where the player slug begins, None for fallback
        strategy: Name of the strategy that chose the split
    """

    card_number: str
    player_slug: str
    split_index: int | None = None
    strategy: str = FALLBACK_STRATEGY

    @property
    def has_player(self) -> bool:
        return bool(self.player_slug)

    @property
    def tokens(self) -> tuple[str, ...]:
        """Lowercased card number tokens followed by player tokens."""
        number_tokens = tuple(self.card_number.lower().split("-"))
        if not self.player_slug:
            return number_tokens
        return number_tokens + tuple(self.player_slug.split("-"))

    def as_dict(self) -> dict[str, str]:
        """Result keyed the way the card-detail route reports it."""
        return {"cardNumber": self.card_number, "playerSlug": self.player_slug}


@dataclass(frozen=True, slots=True)
class CardLookup:
    """
    Parameters handed to the card data-access layer.

    Attributes:
        year: Set year parsed from the URL
        set_slug: Set slug as received
        series_slug: Series slug as received
        series_name_pattern: Series slug with hyphens turned into spaces
        card_slug: Card slug as received
        card_number: Decomposed card number (equality filter)
        player_slug: Decomposed player slug (secondary filter, may be empty)
    """

    year: int
    set_slug: str
    series_slug: str
    series_name_pattern: str
    card_slug: str
    card_number: str
    player_slug: str

    def search_params(self) -> dict[str, str | int]:
        """Echo of the request, reported back when no card matches."""
        return {
            "year": self.year,
            "setSlug": self.set_slug,
            "seriesSlug": self.series_slug,
            "cardSlug": self.card_slug,
            "cardNumber": self.card_number,
            "playerSlug": self.player_slug,
        }

from cardslug.parsers.card_slug import (
    DEFAULT_STRATEGIES,
    SlugDecomposer,
    decompose,
    first_name_split,
    get_default_decomposer,
    structural_split,
    tokenize,
)
from cardslug.parsers.slugify import build_card_slug, generate_slug

__all__ = [
    "DEFAULT_STRATEGIES",
    "SlugDecomposer",
    "build_card_slug",
    "decompose",
    "first_name_split",
    "generate_slug",
    "get_default_decomposer",
    "structural_split",
    "tokenize",
]

from cardslug.models.slug import (
    FALLBACK_STRATEGY,
    CardLookup,
    ClassificationDictionaries,
    SlugDecomposition,
)

__all__ = [
    "CardLookup",
    "ClassificationDictionaries",
    "FALLBACK_STRATEGY",
    "SlugDecomposition",
]

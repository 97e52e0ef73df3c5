from fastapi import Request

from cardslug.models.slug import ClassificationDictionaries
from cardslug.services.dictionaries import get_default_dictionaries


def get_dictionaries(request: Request) -> ClassificationDictionaries:
    """Dictionaries loaded at startup, or the built-in ones before startup ran."""
    dictionaries = getattr(request.app.state, "dictionaries", None)
    if dictionaries is None:
        return get_default_dictionaries()
    return dictionaries

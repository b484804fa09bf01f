"""Domain layer - Pure state and catalog objects for the translator panel."""

from .language_catalog import DEFAULT_LANGUAGES, LanguageCatalog
from .translator_state import SelectorRole, TranslationRequest, TranslatorState

__all__ = [
    "DEFAULT_LANGUAGES",
    "LanguageCatalog",
    "SelectorRole",
    "TranslationRequest",
    "TranslatorState",
]

"""
Translator Panel - A small desktop text translator.

Pick a source and target language, type up to 200 characters and send
the text to the MyMemory translation API.
"""

__version__ = "0.1.0"

# Make key components available at package level
from translator_panel.core import DEFAULT_LANGUAGES, LanguageCatalog, TranslatorState

__all__ = [
    "DEFAULT_LANGUAGES",
    "LanguageCatalog",
    "TranslatorState",
]

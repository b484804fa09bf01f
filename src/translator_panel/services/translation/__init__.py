"""Translation services - abstract interface and MyMemory implementation."""

from translator_panel.services.translation.translation_service import TranslationService, TranslationResult
from translator_panel.services.translation.mymemory_translation_service import MyMemoryTranslationService

__all__ = [
    "TranslationService",
    "TranslationResult",
    "MyMemoryTranslationService",
]

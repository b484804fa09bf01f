"""Translation Service - Interface for text translation providers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass
class TranslationResult:
    """Result of a translation request."""

    text: str
    provider: str
    error: Optional[str] = None

    @property
    def is_error(self) -> bool:
        """True if translation failed."""
        return self.error is not None


class TranslationService(ABC):
    """
    Abstract service for translating text between two languages.

    Implementations handle the HTTP call and must report failures through
    TranslationResult.error rather than raising.
    """

    @abstractmethod
    def translate(self, text: str, source_language: str, target_language: str) -> TranslationResult:
        """
        Translate text from source_language to target_language.

        Args:
            text: Text to translate, passed through untrimmed.
            source_language: Source language display name (e.g. "English").
            target_language: Target language display name (e.g. "Turkish").

        Returns:
            TranslationResult with text or error message.
        """
        pass

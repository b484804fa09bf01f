"""Translator state - selection, overlay, input buffer and result fields."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class SelectorRole(Enum):
    """Which language a pending catalog pick applies to."""

    SOURCE = "source"
    TARGET = "target"

    @classmethod
    def parse(cls, value) -> "SelectorRole":
        """Accept a role or one of "source"/"from"/"target"/"to"."""
        if isinstance(value, cls):
            return value
        aliases = {"source": cls.SOURCE, "from": cls.SOURCE, "target": cls.TARGET, "to": cls.TARGET}
        try:
            return aliases[str(value).lower()]
        except KeyError:
            raise ValueError(f"Unknown selector role: {value!r}") from None


@dataclass(frozen=True)
class TranslationRequest:
    """Snapshot of everything one outbound translation needs.

    Attributes:
        text: Raw input text, untrimmed.
        source_language: Source display name at the moment of issue.
        target_language: Target display name at the moment of issue.
        sequence: Monotonic request number used to discard stale responses.
    """

    text: str
    source_language: str
    target_language: str
    sequence: int

    @property
    def langpair(self) -> str:
        return f"{self.source_language}|{self.target_language}"


class TranslatorState:
    """
    All mutable state of one translator panel.

    Only user-driven operations mutate the language selection and the input
    buffer; the translation result is written by the coordinator once per
    successful round trip.
    """

    MAX_CHARACTERS = 200
    DEFAULT_SOURCE_LANGUAGE = "English"
    DEFAULT_TARGET_LANGUAGE = "Turkish"

    def __init__(
        self,
        source_language: str = DEFAULT_SOURCE_LANGUAGE,
        target_language: str = DEFAULT_TARGET_LANGUAGE,
    ):
        self.source_language = source_language or self.DEFAULT_SOURCE_LANGUAGE
        self.target_language = target_language or self.DEFAULT_TARGET_LANGUAGE
        self.active_role: Optional[SelectorRole] = None
        self.overlay_visible = False
        self.input_text = ""
        self.translated_text = ""

    @property
    def character_count(self) -> int:
        return len(self.input_text)

    def begin_selection(self, role) -> None:
        """Open the overlay for picking the source or target language."""
        self.active_role = SelectorRole.parse(role)
        self.overlay_visible = True

    def pick(self, language_name: str) -> None:
        """Apply a catalog pick to the active role and close the overlay."""
        if self.active_role is SelectorRole.SOURCE:
            self.source_language = language_name
        else:
            self.target_language = language_name
        self.active_role = None
        self.overlay_visible = False

    def dismiss_overlay(self) -> None:
        self.active_role = None
        self.overlay_visible = False

    def swap(self) -> None:
        self.source_language, self.target_language = self.target_language, self.source_language

    def set_text(self, candidate: str) -> bool:
        """
        Store candidate as the new input buffer if it fits.

        Returns:
            True if accepted, False if the candidate exceeds MAX_CHARACTERS
            (the buffer is left unchanged).
        """
        if len(candidate) > self.MAX_CHARACTERS:
            return False
        self.input_text = candidate
        return True

    def has_translatable_text(self) -> bool:
        return bool(self.input_text.strip())

    def snapshot(self, sequence: int) -> TranslationRequest:
        """Capture the request parameters as they are right now."""
        return TranslationRequest(
            text=self.input_text,
            source_language=self.source_language,
            target_language=self.target_language,
            sequence=sequence,
        )

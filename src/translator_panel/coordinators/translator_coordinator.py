"""Translator Coordinator - Owns panel state and the translate workflow."""

import logging
from typing import Dict, Optional

from PySide6.QtCore import QObject, QThreadPool, Signal, Slot

from translator_panel.core import DEFAULT_LANGUAGES, LanguageCatalog, TranslationRequest, TranslatorState
from translator_panel.services import TranslationService, TranslationWorker

logger = logging.getLogger(__name__)


class _TranslationRequest(QObject):
    """Helper class to hold translation request context and handle results safely."""

    def __init__(self, request: TranslationRequest, parent: "TranslatorCoordinator"):
        super().__init__()
        self.request = request
        self.parent_ref = parent

    @Slot(object)
    def on_translation_result(self, result):
        """Handle translation result safely."""
        coordinator = self.parent_ref
        if coordinator:
            try:
                coordinator._handle_translation_result(result, self.request.sequence)
            except RuntimeError as e:
                # Coordinator might be destroyed
                logger.debug("Dropping result for request %d: %s", self.request.sequence, e)

    @Slot(str)
    def on_translation_error(self, error: str):
        """Handle translation error safely."""
        coordinator = self.parent_ref
        if coordinator:
            try:
                coordinator._handle_translation_error(error, self.request.sequence)
            except RuntimeError as e:
                logger.debug("Dropping error for request %d: %s", self.request.sequence, e)


class TranslatorCoordinator(QObject):
    """
    Orchestrates the translator panel.

    Responsibilities:
    - Apply language selection, swap and text edits to TranslatorState.
    - Show and hide the language overlay as the selector role changes.
    - Run translations on the thread pool, one worker per request.
    - Tag every request with a sequence number so only the newest
      response updates the result.
    - Report provider failures inline without touching the last result.
    """

    state_changed = Signal()
    translation_started = Signal()
    translation_completed = Signal(str)
    translation_failed = Signal(str)
    panel_closed = Signal()

    def __init__(
        self,
        panel,
        translation_service: TranslationService,
        catalog: LanguageCatalog = DEFAULT_LANGUAGES,
        thread_pool: Optional[QThreadPool] = None,
        state: Optional[TranslatorState] = None,
    ):
        super().__init__()

        self.panel = panel
        self.translation_service = translation_service
        self.catalog = catalog
        self.state = state or TranslatorState()

        self.thread_pool = thread_pool or QThreadPool.globalInstance()

        # Only the response for this sequence may update the result
        self._active_request_sequence: Optional[int] = None
        self._request_counter = 0
        # Helpers must outlive their workers or their slots get disconnected
        self._pending_requests: Dict[int, _TranslationRequest] = {}

        self._bind_panel()
        self._render()

    def _bind_panel(self) -> None:
        self.panel.language_button_clicked.connect(self.begin_selection)
        self.panel.language_chosen.connect(self.pick)
        self.panel.overlay_dismissed.connect(self.dismiss_overlay)
        self.panel.swap_clicked.connect(self.swap)
        self.panel.text_edited.connect(self.set_text)
        self.panel.translate_clicked.connect(self.translate)
        self.panel.close_clicked.connect(self.close)

    def _render(self) -> None:
        self.panel.set_languages(self.state.source_language, self.state.target_language)
        self.panel.set_character_count(self.state.character_count)

    @property
    def is_translating(self) -> bool:
        return self._active_request_sequence is not None

    def begin_selection(self, role) -> None:
        """Open the language overlay for the "source" or "target" selector."""
        self.state.begin_selection(role)
        self.panel.show_overlay()
        self.state_changed.emit()

    def pick(self, language_name: str) -> None:
        """Apply a picked language to the active selector and close the overlay."""
        if not self.catalog.has_name(language_name):
            logger.debug("Picked language %r is not in the catalog", language_name)
        self.state.pick(language_name)
        self.panel.hide_overlay()
        self._render()
        self.state_changed.emit()

    def dismiss_overlay(self) -> None:
        self.state.dismiss_overlay()
        self.panel.hide_overlay()
        self.state_changed.emit()

    def swap(self) -> None:
        self.state.swap()
        self._render()
        self.state_changed.emit()

    def set_text(self, candidate: str) -> bool:
        """
        Accept an edit to the input buffer if it fits the character limit.

        Rejected edits restore the panel's editor to the last accepted text.
        """
        if not self.state.set_text(candidate):
            self.panel.set_input_text(self.state.input_text)
            return False
        self.panel.set_character_count(self.state.character_count)
        self.state_changed.emit()
        return True

    def translate(self) -> None:
        """Translate the current buffer with the currently selected languages."""
        if not self.state.has_translatable_text():
            self._active_request_sequence = None
            self.state.translated_text = ""
            self.panel.clear_translation()
            self.state_changed.emit()
            return

        self._request_counter += 1
        request = self.state.snapshot(self._request_counter)
        self._active_request_sequence = request.sequence

        logger.info("Translating %d characters (%s), request %d",
                    len(request.text), request.langpair, request.sequence)
        self.panel.show_translation_loading()
        self.translation_started.emit()

        worker = TranslationWorker(translation_service=self.translation_service, request=request)

        request_helper = _TranslationRequest(request, self)
        self._pending_requests[request.sequence] = request_helper

        worker.signals.translation_result.connect(request_helper.on_translation_result)
        worker.signals.error.connect(request_helper.on_translation_error)

        self.thread_pool.start(worker)

    def _handle_translation_result(self, result, sequence: int) -> None:
        """Apply a worker result on the main thread unless it is stale."""
        self._pending_requests.pop(sequence, None)
        if sequence != self._active_request_sequence:
            logger.debug("Ignoring stale translation result (request %d, current %s)",
                         sequence, self._active_request_sequence)
            return

        self._active_request_sequence = None
        if result.is_error:
            self._fail(result.error or "Unknown error")
            return

        self.state.translated_text = result.text
        self.panel.show_translation_success(result.text)
        self.translation_completed.emit(result.text)
        self.state_changed.emit()

    def _handle_translation_error(self, error: str, sequence: int) -> None:
        self._pending_requests.pop(sequence, None)
        if sequence != self._active_request_sequence:
            logger.debug("Ignoring stale translation error (request %d, current %s)",
                         sequence, self._active_request_sequence)
            return

        self._active_request_sequence = None
        self._fail(error)

    def _fail(self, error: str) -> None:
        # The previous translation is kept as-is
        logger.warning("Translation failed: %s", error)
        self.panel.show_translation_error(error)
        self.translation_failed.emit(error)

    def close(self) -> None:
        """Called when the user dismisses the whole panel."""
        self.shutdown()
        self.panel_closed.emit()

    def shutdown(self) -> None:
        """Release the overlay subscription and drop any in-flight request."""
        self._active_request_sequence = None
        if self.state.overlay_visible:
            self.state.dismiss_overlay()
        self.panel.hide_overlay()

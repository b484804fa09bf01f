"""Async workers for non-blocking API calls using Qt threading."""

from PySide6.QtCore import QObject, QRunnable, Signal, Slot

from translator_panel.core import TranslationRequest
from translator_panel.services.translation import TranslationService


class WorkerSignals(QObject):
    """
    Signals for communicating results from worker threads.

    QRunnable doesn't inherit from QObject, so we need a separate
    QObject to hold the signals.
    """
    finished = Signal()
    error = Signal(str)
    translation_result = Signal(object)  # TranslationResult


class TranslationWorker(QRunnable):
    """
    Worker that runs one translation API call in a background thread.

    The request is a frozen snapshot, so language changes made while the
    call is in flight do not affect it.
    """

    def __init__(self, translation_service: TranslationService, request: TranslationRequest):
        super().__init__()
        self.translation_service = translation_service
        self.request = request
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        """Execute the translation API call in background thread."""
        try:
            result = self.translation_service.translate(
                text=self.request.text,
                source_language=self.request.source_language,
                target_language=self.request.target_language,
            )
            self.signals.translation_result.emit(result)
        except Exception as e:
            # Catch any unexpected exceptions not handled by service
            self.signals.error.emit(f"Unexpected translation error: {str(e)}")
        finally:
            self.signals.finished.emit()

"""Source text editor that submits on Enter."""

from typing_extensions import override

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QKeyEvent
from PySide6.QtWidgets import QPlainTextEdit


class SourceTextEdit(QPlainTextEdit):
    """Plain text input where Enter triggers translation instead of a newline."""

    submit_requested = Signal()

    @override
    def keyPressEvent(self, event: QKeyEvent):
        if event.key() in (Qt.Key.Key_Return, Qt.Key.Key_Enter):
            event.accept()
            self.submit_requested.emit()
            return
        super().keyPressEvent(event)

"""Translator Panel - Language bar, source input, and translation output."""

from typing_extensions import override

from PySide6.QtCore import Signal
from PySide6.QtGui import QResizeEvent, QTextCursor
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSizePolicy,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)

from translator_panel.core import LanguageCatalog, TranslatorState
from translator_panel.ui.language_dropdown import LanguageDropdown
from translator_panel.ui.text_input import SourceTextEdit


class TranslatorPanel(QWidget):
    """Widget with the language selectors, input buffer and translated output."""

    language_button_clicked = Signal(str)  # "source" or "target"
    swap_clicked = Signal()
    text_edited = Signal(str)
    translate_clicked = Signal()
    language_chosen = Signal(str)
    overlay_dismissed = Signal()
    close_clicked = Signal()

    OVERLAY_MARGIN = 32

    def __init__(self, catalog: LanguageCatalog, max_characters: int = TranslatorState.MAX_CHARACTERS):
        super().__init__()
        self._max_characters = max_characters

        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(24, 12, 24, 12)
        main_layout.setSpacing(12)

        header_layout = QHBoxLayout()
        header_layout.addStretch()
        close_btn = QPushButton("✕")
        close_btn.setFlat(True)
        close_btn.setFixedSize(28, 28)
        close_btn.clicked.connect(self.close_clicked.emit)
        header_layout.addWidget(close_btn)
        main_layout.addLayout(header_layout)

        self.language_bar = QWidget()
        self.language_bar.setMinimumHeight(64)
        self.language_bar.setStyleSheet(
            "background: qlineargradient(x1:0, y1:0, x2:1, y2:0, stop:0 #b6f492, stop:1 #338b93);"
            "border-radius: 8px; color: #374151;"
        )
        bar_layout = QHBoxLayout(self.language_bar)
        self.source_button = QPushButton(TranslatorState.DEFAULT_SOURCE_LANGUAGE)
        self.source_button.setFlat(True)
        self.source_button.clicked.connect(lambda: self.language_button_clicked.emit("source"))
        self.swap_button = QPushButton("⇄")
        self.swap_button.setFlat(True)
        self.swap_button.clicked.connect(self.swap_clicked.emit)
        self.target_button = QPushButton(TranslatorState.DEFAULT_TARGET_LANGUAGE)
        self.target_button.setFlat(True)
        self.target_button.clicked.connect(lambda: self.language_button_clicked.emit("target"))
        bar_layout.addStretch()
        bar_layout.addWidget(self.source_button)
        bar_layout.addSpacing(32)
        bar_layout.addWidget(self.swap_button)
        bar_layout.addSpacing(32)
        bar_layout.addWidget(self.target_button)
        bar_layout.addStretch()
        main_layout.addWidget(self.language_bar)

        self.input_text = SourceTextEdit()
        self.input_text.setPlaceholderText("Enter text to translate")
        self.input_text.setMinimumHeight(120)
        self.input_text.textChanged.connect(self._on_text_changed)
        self.input_text.submit_requested.connect(self.translate_clicked.emit)
        main_layout.addWidget(self.input_text)

        self.character_counter = QLabel()
        self.character_counter.setStyleSheet("color: gray;")
        counter_layout = QHBoxLayout()
        counter_layout.addStretch()
        counter_layout.addWidget(self.character_counter)
        main_layout.addLayout(counter_layout)
        self.set_character_count(0)

        self.translate_button = QPushButton("Translate")
        self.translate_button.clicked.connect(self.translate_clicked.emit)
        main_layout.addWidget(self.translate_button)

        self.translation_text = QTextEdit()
        self.translation_text.setReadOnly(True)
        self.translation_text.setPlaceholderText("(Not requested yet)")
        self.translation_text.setMinimumHeight(120)
        self.translation_text.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        main_layout.addWidget(self.translation_text, 1)

        self.status_label = QLabel("")
        self.status_label.setStyleSheet("color: gray;")
        main_layout.addWidget(self.status_label)

        # Overlay floats above the layout, so it is parented but not added to it
        self.dropdown = LanguageDropdown(catalog, parent=self)
        self.dropdown.language_chosen.connect(self.language_chosen.emit)
        self.dropdown.dismissed.connect(self.overlay_dismissed.emit)

    def set_languages(self, source: str, target: str) -> None:
        self.source_button.setText(source)
        self.target_button.setText(target)

    def set_input_text(self, text: str) -> None:
        """Replace the editor content without re-emitting text_edited."""
        self.input_text.blockSignals(True)
        self.input_text.setPlainText(text)
        self.input_text.moveCursor(QTextCursor.MoveOperation.End)
        self.input_text.blockSignals(False)
        self.set_character_count(len(text))

    def set_character_count(self, count: int) -> None:
        self.character_counter.setText(f"{count}/{self._max_characters}")

    def show_overlay(self) -> None:
        self._position_overlay()
        self.dropdown.open_overlay()

    def hide_overlay(self) -> None:
        self.dropdown.close_overlay()

    def set_translation_text(self, text: str) -> None:
        self.translation_text.setPlainText(text)

    def show_translation_loading(self) -> None:
        """Show loading state for translation."""
        self.translation_text.setPlaceholderText("Translating...")
        self.status_label.setText("Translating...")
        self.status_label.setStyleSheet("color: gray;")

    def show_translation_error(self, error: str) -> None:
        """Show error inline; the previous translation stays visible."""
        self.translate_button.setText("Retry")
        self.status_label.setText(f"Error: {error}")
        self.status_label.setStyleSheet("color: red;")

    def show_translation_success(self, text: str) -> None:
        """Show success state with translated text."""
        self.translation_text.setPlainText(text)
        self.translate_button.setText("Translate")
        self.status_label.setText("Ready")
        self.status_label.setStyleSheet("color: gray;")

    def clear_translation(self) -> None:
        self.translation_text.clear()
        self.translation_text.setPlaceholderText("(Not requested yet)")
        self.translate_button.setText("Translate")
        self.status_label.clear()
        self.status_label.setStyleSheet("color: gray;")

    @override
    def resizeEvent(self, event: QResizeEvent):
        super().resizeEvent(event)
        if not self.dropdown.isHidden():
            self._position_overlay()

    def _position_overlay(self) -> None:
        top = self.language_bar.geometry().bottom() + 8
        width = max(self.width() - 2 * self.OVERLAY_MARGIN, 120)
        height = max(self.height() - top - 16, 160)
        self.dropdown.setGeometry(self.OVERLAY_MARGIN, top, width, height)

    def _on_text_changed(self) -> None:
        self.text_edited.emit(self.input_text.toPlainText())

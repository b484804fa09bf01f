"""UI layer - PySide6 presentation components."""

from .language_dropdown import LanguageDropdown
from .main_window import MainWindow
from .text_input import SourceTextEdit
from .translator_panel import TranslatorPanel

__all__ = ["LanguageDropdown", "MainWindow", "SourceTextEdit", "TranslatorPanel"]

"""Main Window - Application shell hosting the translator panel."""

from typing_extensions import override

from PySide6.QtCore import Signal
from PySide6.QtGui import QAction, QCloseEvent
from PySide6.QtWidgets import QMainWindow, QVBoxLayout, QWidget


class MainWindow(QMainWindow):
    """Provides the application shell and menu bar."""

    # Emitted once when the window is closing, before it is destroyed
    closing = Signal()

    def __init__(self):
        super().__init__()
        self.setWindowTitle("Translator")
        self.setGeometry(100, 100, 520, 640)

        self._setup_ui()
        self._create_menu_bar()

    def _setup_ui(self):
        """Initialize the main UI layout."""
        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        self.main_layout = QVBoxLayout(central_widget)
        self.main_layout.setContentsMargins(0, 0, 0, 0)

    def _create_menu_bar(self):
        """Create the application menu bar."""
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu("&File")

        exit_action = QAction("E&xit", self)
        exit_action.setShortcut("Ctrl+Q")
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

    def set_panel(self, panel):
        """Set the translator panel widget in the main layout."""
        self.main_layout.addWidget(panel)

    @override
    def closeEvent(self, event: QCloseEvent):
        self.closing.emit()
        super().closeEvent(event)

"""Language Dropdown - Overlay list for picking a language from the catalog."""

from typing import Optional

from typing_extensions import override

from PySide6.QtCore import QEvent, QObject, QPoint, Qt, Signal
from PySide6.QtGui import QHideEvent
from PySide6.QtWidgets import QApplication, QFrame, QListWidget, QListWidgetItem, QVBoxLayout, QWidget

from translator_panel.core import LanguageCatalog


class _OutsideClickFilter(QObject):
    """Application-wide mouse press watcher, alive only while the dropdown is open.

    Parented to the dropdown so Qt deletes it, and drops it from the
    application's filter list, if the dropdown is destroyed while open.
    """

    def __init__(self, dropdown: "LanguageDropdown"):
        super().__init__(dropdown)
        self._dropdown = dropdown

    def eventFilter(self, watched, event) -> bool:
        if event.type() == QEvent.Type.MouseButtonPress:
            self._dropdown.handle_pointer_down(event.globalPosition().toPoint())
        # Never consume the event; the click still reaches its target
        return False


class LanguageDropdown(QFrame):
    """
    Overlay listing every catalog language.

    open_overlay() acquires an application-level outside-click subscription and
    close_overlay() releases it, so no global listener outlives the visible overlay.
    """

    language_chosen = Signal(str)
    dismissed = Signal()

    def __init__(self, catalog: LanguageCatalog, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setFrameShape(QFrame.Shape.StyledPanel)
        self.setStyleSheet(
            "LanguageDropdown { background: qlineargradient(x1:0, y1:0, x2:1, y2:0, "
            "stop:0 #b6f492, stop:1 #338b93); border-radius: 4px; }"
        )

        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)

        self.list_widget = QListWidget()
        self.list_widget.setStyleSheet(
            "QListWidget { background: transparent; border: none; color: #374151; }"
            "QListWidget::item { padding: 6px; border-radius: 4px; }"
            "QListWidget::item:hover { background: #10646b; color: white; }"
        )
        for code, name in catalog.items():
            item = QListWidgetItem(name)
            item.setData(Qt.ItemDataRole.UserRole, code)
            self.list_widget.addItem(item)
        self.list_widget.itemClicked.connect(self._on_item_clicked)
        layout.addWidget(self.list_widget)

        self._outside_click_filter: Optional[_OutsideClickFilter] = None
        self.hide()

    @property
    def is_listening(self) -> bool:
        """True while the outside-click subscription is installed."""
        return self._outside_click_filter is not None

    def open_overlay(self) -> None:
        """Show the overlay and start watching for outside clicks."""
        self.show()
        self.raise_()
        if self._outside_click_filter is None:
            self._outside_click_filter = _OutsideClickFilter(self)
            app = QApplication.instance()
            if app is not None:
                app.installEventFilter(self._outside_click_filter)

    def close_overlay(self) -> None:
        """Hide the overlay and stop watching for outside clicks."""
        self._release_outside_click_filter()
        self.hide()

    def contains_global_point(self, global_pos: QPoint) -> bool:
        return self.rect().contains(self.mapFromGlobal(global_pos))

    def handle_pointer_down(self, global_pos: QPoint) -> None:
        """Dismiss the overlay if a press lands outside its bounds."""
        if not self.is_listening:
            return
        if self.contains_global_point(global_pos):
            return
        self.close_overlay()
        self.dismissed.emit()

    @override
    def hideEvent(self, event: QHideEvent):
        super().hideEvent(event)
        # Hidden along with its host (window hidden or closed): end the subscription too
        if self.is_listening:
            self._release_outside_click_filter()
            self.dismissed.emit()

    def _on_item_clicked(self, item: QListWidgetItem) -> None:
        self.language_chosen.emit(item.text())

    def _release_outside_click_filter(self) -> None:
        if self._outside_click_filter is None:
            return
        app = QApplication.instance()
        if app is not None:
            app.removeEventFilter(self._outside_click_filter)
        self._outside_click_filter.deleteLater()
        self._outside_click_filter = None

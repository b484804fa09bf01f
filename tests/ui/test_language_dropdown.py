#!/usr/bin/env python3
"""
Tests for LanguageDropdown - catalog listing and outside-click dismissal.
"""

from unittest.mock import MagicMock

import shiboken6
from PySide6.QtCore import QPoint, Qt
from PySide6.QtTest import QTest
from PySide6.QtWidgets import QApplication, QPushButton, QWidget

from translator_panel.core import LanguageCatalog
from translator_panel.ui import LanguageDropdown


def ensure_qt_app():
    if QApplication.instance() is None:
        QApplication([])


def make_dropdown():
    ensure_qt_app()
    catalog = LanguageCatalog({"en-GB": "English", "fr-FR": "French", "tr-TR": "Turkish"})
    dropdown = LanguageDropdown(catalog)
    dropdown.resize(200, 300)
    return dropdown


def test_dropdown_lists_catalog_in_order():
    dropdown = make_dropdown()

    names = [dropdown.list_widget.item(i).text() for i in range(dropdown.list_widget.count())]
    assert names == ["English", "French", "Turkish"]


def test_dropdown_starts_hidden_without_listener():
    dropdown = make_dropdown()

    assert dropdown.isHidden()
    assert not dropdown.is_listening


def test_open_and_close_manage_listener():
    """The outside-click subscription only exists while the overlay is open."""
    dropdown = make_dropdown()

    dropdown.open_overlay()
    assert not dropdown.isHidden()
    assert dropdown.is_listening

    dropdown.close_overlay()
    assert dropdown.isHidden()
    assert not dropdown.is_listening


def test_opening_twice_keeps_single_listener():
    dropdown = make_dropdown()

    dropdown.open_overlay()
    first_filter = dropdown._outside_click_filter
    dropdown.open_overlay()
    assert dropdown._outside_click_filter is first_filter

    dropdown.close_overlay()


def test_press_outside_dismisses():
    dropdown = make_dropdown()
    dismissed_spy = MagicMock()
    dropdown.dismissed.connect(dismissed_spy)
    dropdown.open_overlay()

    dropdown.handle_pointer_down(dropdown.mapToGlobal(QPoint(500, 500)))

    assert dropdown.isHidden()
    assert not dropdown.is_listening
    dismissed_spy.assert_called_once()


def test_press_inside_keeps_overlay_open():
    dropdown = make_dropdown()
    dismissed_spy = MagicMock()
    dropdown.dismissed.connect(dismissed_spy)
    dropdown.open_overlay()

    dropdown.handle_pointer_down(dropdown.mapToGlobal(QPoint(10, 10)))

    assert not dropdown.isHidden()
    assert dropdown.is_listening
    dismissed_spy.assert_not_called()

    dropdown.close_overlay()


def test_press_while_closed_is_ignored():
    dropdown = make_dropdown()
    dismissed_spy = MagicMock()
    dropdown.dismissed.connect(dismissed_spy)

    dropdown.handle_pointer_down(dropdown.mapToGlobal(QPoint(500, 500)))

    dismissed_spy.assert_not_called()


def test_clicking_item_emits_language_name():
    dropdown = make_dropdown()
    chosen_spy = MagicMock()
    dropdown.language_chosen.connect(chosen_spy)

    dropdown.list_widget.itemClicked.emit(dropdown.list_widget.item(1))

    chosen_spy.assert_called_once_with("French")


def make_hosted_dropdown():
    """Dropdown floating over a host widget next to a sibling button, all shown."""
    ensure_qt_app()
    catalog = LanguageCatalog({"en-GB": "English", "fr-FR": "French", "tr-TR": "Turkish"})
    host = QWidget()
    host.resize(400, 400)
    sibling = QPushButton("Source", host)
    sibling.setGeometry(0, 0, 100, 30)
    dropdown = LanguageDropdown(catalog, parent=host)
    dropdown.setGeometry(150, 50, 200, 300)
    host.show()
    QApplication.processEvents()
    return host, sibling, dropdown


def test_real_press_on_sibling_dismisses():
    host, sibling, dropdown = make_hosted_dropdown()
    dismissed_spy = MagicMock()
    dropdown.dismissed.connect(dismissed_spy)
    dropdown.open_overlay()

    QTest.mousePress(sibling, Qt.MouseButton.LeftButton)
    QTest.mouseRelease(sibling, Qt.MouseButton.LeftButton)

    assert dropdown.isHidden()
    assert not dropdown.is_listening
    dismissed_spy.assert_called_once()
    host.close()


def test_real_press_on_list_item_keeps_overlay_open():
    host, sibling, dropdown = make_hosted_dropdown()
    dismissed_spy = MagicMock()
    dropdown.dismissed.connect(dismissed_spy)
    dropdown.open_overlay()
    QApplication.processEvents()

    item_center = dropdown.list_widget.visualItemRect(dropdown.list_widget.item(0)).center()
    viewport = dropdown.list_widget.viewport()
    QTest.mousePress(viewport, Qt.MouseButton.LeftButton, Qt.KeyboardModifier.NoModifier, item_center)

    assert not dropdown.isHidden()
    assert dropdown.is_listening
    dismissed_spy.assert_not_called()

    QTest.mouseRelease(viewport, Qt.MouseButton.LeftButton, Qt.KeyboardModifier.NoModifier, item_center)
    dropdown.close_overlay()
    host.close()


def test_hiding_host_releases_listener():
    host, sibling, dropdown = make_hosted_dropdown()
    dismissed_spy = MagicMock()
    dropdown.dismissed.connect(dismissed_spy)
    dropdown.open_overlay()

    host.hide()

    assert not dropdown.is_listening
    dismissed_spy.assert_called_once()


def test_destroying_host_with_open_overlay_removes_listener():
    """A later mouse press anywhere must not reach the deleted dropdown."""
    ensure_qt_app()
    catalog = LanguageCatalog({"en-GB": "English", "fr-FR": "French"})
    host = QWidget()
    dropdown = LanguageDropdown(catalog, parent=host)
    dropdown.open_overlay()
    assert dropdown.is_listening

    other_button = QPushButton("Other")
    other_button.show()
    pressed_spy = MagicMock()
    other_button.pressed.connect(pressed_spy)

    shiboken6.delete(host)
    QTest.mousePress(other_button, Qt.MouseButton.LeftButton)
    QTest.mouseRelease(other_button, Qt.MouseButton.LeftButton)

    pressed_spy.assert_called_once()
    other_button.close()

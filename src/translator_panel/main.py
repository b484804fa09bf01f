"""Main entry point for the translator application."""

import logging
import sys

from PySide6.QtWidgets import QApplication

from translator_panel.core import DEFAULT_LANGUAGES
from translator_panel.coordinators import TranslatorCoordinator
from translator_panel.services import MyMemoryTranslationService, SettingsManager
from translator_panel.ui import MainWindow, TranslatorPanel


def main():
    """
    Bootstrap the application following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # 1. Initialize Application
    app = QApplication(sys.argv)
    app.setApplicationName("Translator")
    app.setOrganizationName("TranslatorPanel")

    # 2. Initialize Infrastructure
    settings_manager = SettingsManager()
    translation_service = MyMemoryTranslationService(
        endpoint=settings_manager.get_api_url(),
        timeout=settings_manager.get_timeout_seconds(),
        contact_email=settings_manager.get_contact_email(),
    )

    # 3. Construct UI
    panel = TranslatorPanel(DEFAULT_LANGUAGES)
    main_window = MainWindow()
    main_window.set_panel(panel)

    # 4. Instantiate Coordinator (Dependency Injection)
    coordinator = TranslatorCoordinator(
        panel=panel,
        translation_service=translation_service,
        catalog=DEFAULT_LANGUAGES,
    )

    # 5. Signal Wiring: closing the panel closes the host window
    coordinator.panel_closed.connect(main_window.close)
    main_window.closing.connect(coordinator.shutdown)

    # 6. Show UI and start event loop
    main_window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())

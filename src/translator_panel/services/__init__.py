"""Services layer - configuration and external integrations."""

from translator_panel.services.settings_manager import SettingsManager

# Translation services
from translator_panel.services.translation import TranslationService, TranslationResult, MyMemoryTranslationService

from translator_panel.services.api_workers import TranslationWorker, WorkerSignals

__all__ = [
	"SettingsManager",
	"TranslationService",
	"TranslationResult",
	"MyMemoryTranslationService",
	"TranslationWorker",
	"WorkerSignals",
]

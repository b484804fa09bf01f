"""Settings Manager - Handles translation provider configuration."""

import logging
import math
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


class SettingsManager:
    """
    Manages provider settings.

    Reads values from a .env file in the project root, falling back to the
    process environment and then to built-in defaults.
    """

    DEFAULT_API_URL = "https://api.mymemory.translated.net/get"
    DEFAULT_TIMEOUT_SECONDS = 10.0

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, searches upward from current file.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        env_path = project_root / ".env"
        load_dotenv(dotenv_path=env_path)

        self._project_root = project_root

    def get_api_url(self) -> str:
        """Translation endpoint URL."""
        url = os.getenv("TRANSLATOR_API_URL")
        return url.strip() if url and url.strip() else self.DEFAULT_API_URL

    def get_contact_email(self) -> Optional[str]:
        """Contact e-mail sent to the provider, if configured."""
        email = os.getenv("TRANSLATOR_CONTACT_EMAIL")
        return email.strip() if email and email.strip() else None

    def get_timeout_seconds(self) -> float:
        """Request timeout; invalid, non-finite or non-positive values use the default."""
        raw = os.getenv("TRANSLATOR_TIMEOUT_SECONDS")
        if not raw or not raw.strip():
            return self.DEFAULT_TIMEOUT_SECONDS
        try:
            value = float(raw)
        except ValueError:
            logger.warning("Ignoring invalid TRANSLATOR_TIMEOUT_SECONDS=%r", raw)
            return self.DEFAULT_TIMEOUT_SECONDS
        if not math.isfinite(value) or value <= 0:
            logger.warning("Ignoring non-finite or non-positive TRANSLATOR_TIMEOUT_SECONDS=%r", raw)
            return self.DEFAULT_TIMEOUT_SECONDS
        return value

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        env_path = self._project_root / ".env"
        load_dotenv(dotenv_path=env_path, override=True)

"""MyMemory Translation Service - Implements translation via the MyMemory REST API."""

import logging
from typing import Optional

import requests

from translator_panel.services.translation.translation_service import TranslationResult, TranslationService

logger = logging.getLogger(__name__)


class MyMemoryTranslationService(TranslationService):
    """
    Translation service backed by api.mymemory.translated.net.

    Sends GET <endpoint>?q=<text>&langpair=<source>|<target> and reads
    responseData.translatedText from the JSON body. No API key is required;
    an optional contact e-mail raises the free daily quota.
    """

    PROVIDER_NAME = "mymemory"
    DEFAULT_ENDPOINT = "https://api.mymemory.translated.net/get"
    DEFAULT_TIMEOUT = 10.0

    def __init__(
        self,
        endpoint: str = DEFAULT_ENDPOINT,
        timeout: float = DEFAULT_TIMEOUT,
        contact_email: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ):
        self.endpoint = endpoint
        self.timeout = timeout
        self.contact_email = contact_email
        self._http = session or requests

    def build_params(self, text: str, source_language: str, target_language: str) -> dict:
        """Query parameters for one request; requests percent-encodes them."""
        params = {
            "q": text,
            "langpair": f"{source_language}|{target_language}",
        }
        if self.contact_email:
            params["de"] = self.contact_email
        return params

    def translate(self, text: str, source_language: str, target_language: str) -> TranslationResult:
        """
        Translate text using the MyMemory API.

        Returns:
            TranslationResult with translated text, or with error set when the
            request times out, fails, or the body does not carry a translation.
        """
        params = self.build_params(text, source_language, target_language)

        try:
            response = self._http.get(self.endpoint, params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.Timeout:
            return self._failure("Request timed out. Please check your connection.")
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else "unknown"
            return self._failure(f"Translation provider returned HTTP {status}")
        except requests.exceptions.RequestException as e:
            return self._failure(f"Network error: {e}")

        try:
            data = response.json()
        except ValueError:
            return self._failure("Malformed response from translation provider")

        return self._parse_payload(data)

    def _parse_payload(self, data) -> TranslationResult:
        if not isinstance(data, dict):
            return self._failure("Malformed response from translation provider")

        if data.get("quotaFinished"):
            return self._failure("Translation quota exceeded. Please try again later.")

        status = data.get("responseStatus", 200)
        if str(status) != "200":
            details = data.get("responseDetails") or f"status {status}"
            return self._failure(f"Translation failed: {details}")

        response_data = data.get("responseData")
        if not isinstance(response_data, dict):
            return self._failure("Response is missing translated text")

        translated = response_data.get("translatedText")
        if not isinstance(translated, str):
            return self._failure("Response is missing translated text")

        return TranslationResult(text=translated, provider=self.PROVIDER_NAME)

    def _failure(self, message: str) -> TranslationResult:
        logger.warning("MyMemory translation failed: %s", message)
        return TranslationResult(text="", provider=self.PROVIDER_NAME, error=message)

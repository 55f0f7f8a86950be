"""
Translation provider client (Google Cloud Translation v2 REST API).
"""

import logging
from typing import Optional

import httpx

from app.config.settings import get_settings
from app.core.exceptions import ProviderNotConfiguredError
from app.schemas.translation import TranslationRequest, TranslationResult
from app.services.upstream import UpstreamResult

logger = logging.getLogger(__name__)


class TranslationClient:
    """Calls the translation provider and classifies the outcome."""

    provider_name = "translation"

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        self._transport = transport

    async def translate(self, request: TranslationRequest) -> UpstreamResult:
        """
        Translate ``request.text`` from the configured source language.

        Returns:
            SUCCESS with a TranslationResult, PROVIDER_ERROR with the raw
            provider body when it lacks ``data.translations``, or
            TRANSPORT_FAILURE when the exchange did not complete.

        Raises:
            ProviderNotConfiguredError: no API key is configured.
        """
        # Credentials are resolved per call so rotated keys take effect.
        config = get_settings().translation
        if not config.key:
            raise ProviderNotConfiguredError(self.provider_name)

        params = {
            "key": config.key,
            "source": config.source_language,
            "target": request.target_language,
            "q": request.text,
        }

        try:
            async with httpx.AsyncClient(
                timeout=config.timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.post(config.url, params=params)
                response.raise_for_status()
                data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(
                f"Translation request failed: {type(e).__name__}",
                extra={"target_language": request.target_language},
            )
            return UpstreamResult.transport_failure(e, secrets=[config.key])

        translations = _extract_translations(data)
        if not translations:
            logger.warning("Translation provider returned an unexpected payload shape")
            return UpstreamResult.provider_error(data)

        translated = translations[0].get("translatedText")
        if not isinstance(translated, str):
            logger.warning("Translation provider returned no translatedText")
            return UpstreamResult.provider_error(data)

        return UpstreamResult.success(TranslationResult(translatedText=translated))


def _extract_translations(data) -> list:
    if not isinstance(data, dict):
        return []
    inner = data.get("data")
    if not isinstance(inner, dict):
        return []
    translations = inner.get("translations")
    if not isinstance(translations, list):
        return []
    return [t for t in translations if isinstance(t, dict)]


# Process-wide client; the HTTP connection is opened per call.
_client: Optional[TranslationClient] = None


def get_translation_client() -> TranslationClient:
    """Get the translation client singleton."""
    global _client
    if _client is None:
        _client = TranslationClient()
    return _client

# =============================================================================
# lib/translator.py - Translation Adapter
# =============================================================================
# Translates short text fields (department names, object titles, cultures,
# dynasties) from English to Spanish through the public Google Translate web
# endpoint.
#
# Failure policy: translation is best-effort. Any failure (network, quota,
# non-2xx, unexpected body) returns the original text unchanged. Callers
# cannot tell a failed translation from a no-op one, and a translation
# failure never fails the request that asked for it.
#
# Usage:
#   translator = Translator(http_client, settings.TRANSLATE_URL)
#   title = await translator.translate("The Harvesters")
# =============================================================================

from __future__ import annotations

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class TranslationError(Exception):
    """Raised internally when a translation response can't be used."""


class Translator:
    """
    Fail-open text translator.

    Example:
        translator = Translator(http_client, url, source="en", target="es")
        await translator.translate("Arms and Armor")  # "Armas y armaduras"
        # ...or "Arms and Armor" if the service is unavailable
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        url: str,
        source: str = "en",
        target: str = "es",
    ):
        self._http = http_client
        self._url = url
        self.source = source
        self.target = target

    async def translate(
        self,
        text: str,
        source: str | None = None,
        target: str | None = None,
    ) -> str:
        """
        Translate text, falling back to the original on any failure.

        Args:
            text: Text to translate
            source: Source language (defaults to the translator's)
            target: Target language (defaults to the translator's)

        Returns:
            The translation, or ``text`` unchanged
        """
        source = source or self.source
        target = target or self.target

        if not text or not text.strip() or source == target:
            return text

        try:
            return await self._request(text, source, target)
        except (httpx.HTTPError, TranslationError, ValueError) as e:
            logger.warning(f"Translation failed for {text!r}, keeping original: {e}")
            return text

    async def _request(self, text: str, source: str, target: str) -> str:
        params = {
            "client": "gtx",
            "sl": source,
            "tl": target,
            "dt": "t",
            "q": text,
        }
        response = await self._http.get(self._url, params=params)
        response.raise_for_status()
        return parse_translation(response.json())


def parse_translation(body: Any) -> str:
    """
    Extract the translated text from a translate_a/single response.

    The body is a nested array whose first element holds one segment per
    sentence: ``[[["Hola", "Hello", ...], ["mundo", "world", ...]], ...]``.
    The translation is the concatenation of every segment's first item.

    Raises:
        TranslationError: If the body doesn't have that shape
    """
    if not isinstance(body, list) or not body or not isinstance(body[0], list):
        raise TranslationError("Malformed translation response")

    parts = [
        segment[0]
        for segment in body[0]
        if isinstance(segment, list) and segment and isinstance(segment[0], str)
    ]

    if not parts:
        raise TranslationError("Translation response contained no text")

    return "".join(parts)

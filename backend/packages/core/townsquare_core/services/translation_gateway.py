"""
Translation gateway.

Wraps the Google Cloud Translation v2 REST API. Every operation performs
exactly one outbound request; retry policy belongs to the caller. Failures
are normalized into ``GatewayError`` with a ``GatewayErrorKind`` so callers
can log and branch on them without knowing about HTTP.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any

import httpx

from townsquare_core import get_logger
from townsquare_core.config import TranslationConfig
from townsquare_core.schemas.translation import LanguageDetectionResult, TranslationResult
from townsquare_core.services.text_direction import (
    classify,
    direction_for_language,
    is_rtl_language,
)

logger = get_logger(__name__)


class GatewayErrorKind(str, Enum):
    """Failure categories of a gateway call."""

    NETWORK = "network"
    RATE_LIMITED = "rate_limited"
    INVALID_RESPONSE = "invalid_response"
    UNAUTHORIZED = "unauthorized"


class GatewayError(Exception):
    """Raised when the translation API call fails or returns unusable data."""

    def __init__(self, kind: GatewayErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"


class TranslationGateway(ABC):
    """Base class for translation gateways."""

    @abstractmethod
    async def translate_text(
        self, text: str, target_lang: str, source_lang: str | None = None
    ) -> TranslationResult:
        """Translate a single text."""

    @abstractmethod
    async def translate_batch(
        self, texts: list[str], target_lang: str, source_lang: str | None = None
    ) -> list[TranslationResult]:
        """Translate several texts in one call, preserving order."""

    @abstractmethod
    async def detect_language(self, text: str) -> LanguageDetectionResult:
        """Detect the language of a text."""


class GoogleTranslateGateway(TranslationGateway):
    """Google Cloud Translation v2 over httpx."""

    def __init__(
        self,
        api_key: str,
        base_url: str,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize the gateway.

        Args:
            api_key: Google Cloud API key, sent as the ``key`` query parameter.
            base_url: Translate endpoint; detection uses ``{base_url}/detect``.
            timeout: Per-request timeout in seconds.
            client: Shared HTTP client. When None, one is opened per call.
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.client = client

    async def _post(self, url: str, payload: dict[str, Any]) -> Any:
        """POST ``payload`` and return the decoded JSON body."""
        try:
            if self.client is not None:
                response = await self.client.post(
                    url, params={"key": self.api_key}, json=payload, timeout=self.timeout
                )
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.post(url, params={"key": self.api_key}, json=payload)
        except httpx.TimeoutException as e:
            raise GatewayError(GatewayErrorKind.NETWORK, f"Request timed out: {e}") from e
        except httpx.HTTPError as e:
            raise GatewayError(GatewayErrorKind.NETWORK, f"Request failed: {e}") from e

        status = response.status_code
        if status == 429:
            raise GatewayError(GatewayErrorKind.RATE_LIMITED, "Translation API rate limit hit")
        if status in (401, 403):
            raise GatewayError(
                GatewayErrorKind.UNAUTHORIZED, f"Translation API rejected credentials ({status})"
            )
        if status >= 500:
            raise GatewayError(GatewayErrorKind.NETWORK, f"Translation API error ({status})")
        if not response.is_success:
            raise GatewayError(
                GatewayErrorKind.INVALID_RESPONSE, f"Unexpected status code {status}"
            )

        try:
            return response.json()
        except ValueError as e:
            raise GatewayError(
                GatewayErrorKind.INVALID_RESPONSE, "Response body is not valid JSON"
            ) from e

    @staticmethod
    def _extract_translations(data: Any) -> list[dict[str, Any]]:
        try:
            translations = data["data"]["translations"]
        except (KeyError, TypeError) as e:
            raise GatewayError(
                GatewayErrorKind.INVALID_RESPONSE, "Response has no data.translations"
            ) from e
        if not isinstance(translations, list) or not translations:
            raise GatewayError(GatewayErrorKind.INVALID_RESPONSE, "No translation returned")
        for item in translations:
            if not isinstance(item, dict) or not isinstance(item.get("translatedText"), str):
                raise GatewayError(
                    GatewayErrorKind.INVALID_RESPONSE, "Translation entry lacks translatedText"
                )
        return translations

    @staticmethod
    def _to_result(
        item: dict[str, Any], target_lang: str, source_lang: str | None
    ) -> TranslationResult:
        translated_text: str = item["translatedText"]
        source_language = item.get("detectedSourceLanguage") or source_lang or "unknown"
        return TranslationResult(
            translated_text=translated_text,
            source_language=source_language,
            target_language=target_lang,
            text_direction=classify(translated_text, target_lang),
            confidence=1.0,
        )

    def _translate_payload(
        self, texts: list[str], target_lang: str, source_lang: str | None
    ) -> dict[str, Any]:
        payload: dict[str, Any] = {"q": texts, "target": target_lang, "format": "text"}
        if source_lang:
            payload["source"] = source_lang
        return payload

    async def translate_text(
        self, text: str, target_lang: str, source_lang: str | None = None
    ) -> TranslationResult:
        """
        Translate a single text.

        Args:
            text: Text to translate.
            target_lang: Target language code.
            source_lang: Source language code, or None to let the API detect it.

        Returns:
            TranslationResult whose direction is classified on the translated text.

        Raises:
            GatewayError: If the call fails or the response is unusable.
        """
        payload = self._translate_payload([text], target_lang, source_lang)
        data = await self._post(self.base_url, payload)
        translations = self._extract_translations(data)
        return self._to_result(translations[0], target_lang, source_lang)

    async def translate_batch(
        self, texts: list[str], target_lang: str, source_lang: str | None = None
    ) -> list[TranslationResult]:
        """
        Translate several texts in a single request.

        Args:
            texts: Texts to translate.
            target_lang: Target language code.
            source_lang: Source language code, or None to let the API detect it.

        Returns:
            One TranslationResult per input text, in input order.

        Raises:
            GatewayError: If the call fails or the result count does not match.
        """
        if not texts:
            return []

        payload = self._translate_payload(texts, target_lang, source_lang)
        data = await self._post(self.base_url, payload)
        translations = self._extract_translations(data)
        if len(translations) != len(texts):
            raise GatewayError(
                GatewayErrorKind.INVALID_RESPONSE,
                f"Expected {len(texts)} translations, got {len(translations)}",
            )
        return [self._to_result(item, target_lang, source_lang) for item in translations]

    async def detect_language(self, text: str) -> LanguageDetectionResult:
        """
        Detect the language of a text.

        Args:
            text: Sample text.

        Returns:
            Detected language with its canonical direction.

        Raises:
            GatewayError: If the call fails or detection is inconclusive.
        """
        data = await self._post(f"{self.base_url}/detect", {"q": [text]})
        try:
            detection = data["data"]["detections"][0][0]
            language = detection["language"]
            confidence = float(detection.get("confidence", 0.0))
        except (KeyError, IndexError, TypeError, ValueError) as e:
            raise GatewayError(GatewayErrorKind.INVALID_RESPONSE, "No language detected") from e

        if not isinstance(language, str) or not language or language == "und":
            raise GatewayError(GatewayErrorKind.INVALID_RESPONSE, "No language detected")

        return LanguageDetectionResult(
            language=language,
            confidence=confidence,
            is_rtl=is_rtl_language(language),
            text_direction=direction_for_language(language),
        )


def create_translation_gateway(
    config: TranslationConfig, client: httpx.AsyncClient | None = None
) -> TranslationGateway | None:
    """
    Create the translation gateway from configuration.

    Args:
        config: Translation settings.
        client: Optional shared HTTP client.

    Returns:
        A gateway, or None when no API key is configured.
    """
    if not config.api_key:
        logger.warning("No translation API key configured; translations are disabled")
        return None

    logger.info("Using Google Translate gateway", extra={"base_url": config.base_url})
    return GoogleTranslateGateway(
        api_key=config.api_key,
        base_url=config.base_url,
        timeout=config.timeout_seconds,
        client=client,
    )

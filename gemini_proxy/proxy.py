from __future__ import annotations

from typing import Any, Tuple

import httpx

from gemini_proxy.config import Settings, logger
from gemini_proxy.errors import ConfigurationError, ExtractionError, MissingParameters, UpstreamError
from gemini_proxy.messages import sanitize_upstream_message
from gemini_proxy.models import GenerateContentRequest
from gemini_proxy.upstream import GeminiClient


def parse_generate_body(body: Any) -> Tuple[str, str]:
    """Return ``(base64Image, prompt)`` or raise MissingParameters."""
    if not isinstance(body, dict):
        raise MissingParameters()
    image = body.get("base64Image")
    prompt = body.get("prompt")
    if not (isinstance(image, str) and image and isinstance(prompt, str) and prompt):
        raise MissingParameters()
    return image, prompt


class ImageProxy:
    """Turns one validated inbound request into one upstream call.

    The API key is captured at construction and never changes afterwards.
    """

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._configured = bool(settings.GEMINI_API_KEY)
        self._default_locale = settings.PROXY_DEFAULT_LOCALE
        self._client = GeminiClient(settings, transport=transport)

    @property
    def default_locale(self) -> str:
        return self._default_locale

    @property
    def configured(self) -> bool:
        return self._configured

    def check_configured(self) -> None:
        if not self._configured:
            raise ConfigurationError()

    async def generate(self, *, base64_image: str, prompt: str, locale: str) -> str:
        """Return the base64 image produced by the upstream API.

        Callers check ``configured`` first.
        """
        payload = GenerateContentRequest.image_edit(prompt=prompt, base64_image=base64_image).to_json()

        result = await self._client.generate_content(payload)

        if not result.ok or result.error is not None:
            logger.error("upstream error: status=%s error=%s", result.status_code, result.error)
            raise UpstreamError(
                sanitize_upstream_message(result.error_message, locale),
                original_status=result.status_code,
            )

        data = result.first_inline_image()
        if data is None:
            logger.error("upstream response had no inline image part (status=%s)", result.status_code)
            raise ExtractionError()
        return data

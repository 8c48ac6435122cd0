from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from gemini_proxy.config import Settings


@dataclass(frozen=True)
class UpstreamResult:
    status_code: int
    body: Any

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def error(self) -> Optional[Dict[str, Any]]:
        err = self.body.get("error") if isinstance(self.body, dict) else None
        if err is None or err is False:
            return None
        return err if isinstance(err, dict) else {"message": str(err)}

    @property
    def error_message(self) -> Optional[str]:
        msg = (self.error or {}).get("message")
        return msg if isinstance(msg, str) else None

    def first_inline_image(self) -> Optional[str]:
        """Base64 data of the first candidate part that carries inline data."""
        body = self.body if isinstance(self.body, dict) else {}
        candidates = body.get("candidates")
        if not (isinstance(candidates, list) and candidates and isinstance(candidates[0], dict)):
            return None
        content = candidates[0].get("content") or {}
        parts = content.get("parts") if isinstance(content, dict) else None
        if not isinstance(parts, list):
            return None
        for part in parts:
            inline = part.get("inlineData") if isinstance(part, dict) else None
            if isinstance(inline, dict) and inline:
                data = inline.get("data")
                return data if isinstance(data, str) and data else None
        return None


class GeminiClient:
    """Issues the single generateContent call for one inbound request."""

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._api_key = settings.GEMINI_API_KEY
        self._url = (
            f"{settings.GEMINI_API_BASE_URL.rstrip('/')}/models/{settings.GEMINI_IMAGE_MODEL}:generateContent"
        )
        self._timeout = settings.GEMINI_HTTP_TIMEOUT_SEC
        self._transport = transport

    @property
    def url(self) -> str:
        return self._url

    async def generate_content(self, payload: Dict[str, Any]) -> UpstreamResult:
        # Transport errors (httpx.RequestError) propagate to the caller.
        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            r = await client.post(
                self._url,
                params={"key": self._api_key},
                json=payload,
                headers={"content-type": "application/json"},
            )

        if r.is_success:
            return UpstreamResult(status_code=r.status_code, body=r.json())

        # Error pages are not always JSON; keep the status either way.
        try:
            body = r.json()
        except ValueError:
            body = None
        return UpstreamResult(status_code=r.status_code, body=body)

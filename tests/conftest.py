import os

import httpx
import pytest


# Keep the import-time app from picking up a real key or locale override.
os.environ.setdefault("GEMINI_API_KEY", "")
os.environ.setdefault("PROXY_DEFAULT_LOCALE", "ko")


class FakeGemini:
    """Deterministic stand-in for the generateContent endpoint."""

    def __init__(self, status_code=200, json_body=None, content=None, exc=None):
        self.status_code = status_code
        self.json_body = json_body
        self.content = content
        self.exc = exc
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content, headers={"content-type": "text/html"})
        return httpx.Response(self.status_code, json=self.json_body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


def image_response(data="XYZ"):
    return {
        "candidates": [
            {
                "content": {
                    "role": "model",
                    "parts": [
                        {"text": "Here is your image."},
                        {"inlineData": {"mimeType": "image/png", "data": data}},
                    ],
                }
            }
        ]
    }


@pytest.fixture
def make_app():
    from gemini_proxy.config import Settings
    from gemini_proxy.main import create_app

    def _make(fake=None, api_key="test-key", **overrides):
        settings = Settings(GEMINI_API_KEY=api_key, **overrides)
        return create_app(settings, transport=fake.transport if fake is not None else None)

    return _make


def asgi_client(app) -> httpx.AsyncClient:
    transport = httpx.ASGITransport(app=app)
    return httpx.AsyncClient(transport=transport, base_url="http://test")


@pytest.fixture
def fake_gemini():
    return FakeGemini


@pytest.fixture
def image_body():
    return image_response


@pytest.fixture
def client_for():
    return asgi_client

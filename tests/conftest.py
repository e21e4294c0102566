"""Pytest fixtures: sahte HTTP taşıma, test istemcisi, webhook secret."""
import json
import os

import pytest

# Ortam değişkenleri tapsilat import edilmeden önce set edilmeli (settings modül seviyesinde okunur)
os.environ.setdefault("TAPSILAT_API_KEY", "test-api-key-1234567890")
os.environ.setdefault("TAPSILAT_BASE_URL", "https://api.test.tapsilat.local/v1")
os.environ.setdefault("TAPSILAT_WEBHOOK_SECRET", "whsec_test_secret")

from tapsilat import Settings, TapsilatClient
from tapsilat.core.transport import HttpResponse

WEBHOOK_SECRET = "whsec_test_secret"


class FakeTransport:
    """İstekleri kaydeder, sıradaki hazır yanıtı döner."""

    def __init__(self):
        self.requests: list[dict] = []
        self._responses: list[HttpResponse] = []

    def queue(self, status: int = 200, body=None, headers: dict | None = None) -> None:
        if body is None:
            raw = b""
        elif isinstance(body, bytes):
            raw = body
        elif isinstance(body, str):
            raw = body.encode()
        else:
            raw = json.dumps(body).encode()
        self._responses.append(HttpResponse(status, headers or {"Content-Type": "application/json"}, raw))

    def send(self, method, url, headers, body=None):
        self.requests.append(
            {
                "method": method,
                "url": url,
                "headers": headers,
                "json": json.loads(body) if body else None,
            }
        )
        assert self._responses, f"Beklenmeyen istek: {method} {url}"
        return self._responses.pop(0)

    @property
    def last(self) -> dict:
        return self.requests[-1]


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def client(transport: FakeTransport) -> TapsilatClient:
    settings = Settings(
        api_key="test-api-key-1234567890",
        base_url="https://api.test.tapsilat.local/v1/",
        webhook_secret=WEBHOOK_SECRET,
    )
    return TapsilatClient(settings=settings, transport=transport)


@pytest.fixture
def webhook_secret() -> str:
    return WEBHOOK_SECRET

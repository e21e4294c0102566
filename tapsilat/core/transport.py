"""HTTP taşıma katmanı: (metot, URL, başlıklar, gövde) -> (durum, başlıklar, gövde).

İstemci bu protokole bağımlıdır; testlerde sahte taşıma verilebilir.
"""
from __future__ import annotations

import logging
from typing import NamedTuple, Protocol
from urllib.error import HTTPError, URLError
from urllib.request import Request as UrlRequest
from urllib.request import urlopen

from .errors import TransportError

log = logging.getLogger("tapsilat.transport")


class HttpResponse(NamedTuple):
    status: int
    headers: dict[str, str]
    body: bytes


class Transport(Protocol):
    def send(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        body: bytes | None = None,
    ) -> HttpResponse: ...


class UrllibTransport:
    """Standart kütüphane urlopen ile taşıma. 4xx/5xx yanıt olarak döner, istisna olarak değil."""

    def __init__(self, timeout: float = 30.0) -> None:
        self.timeout = timeout

    def send(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        body: bytes | None = None,
    ) -> HttpResponse:
        req = UrlRequest(url, data=body, method=method, headers=headers)
        try:
            with urlopen(req, timeout=self.timeout) as resp:
                return HttpResponse(resp.status, dict(resp.headers.items()), resp.read())
        except HTTPError as e:
            # Hata gövdesi API mesajını taşır; istemci ApiError'a çevirir
            headers_out = dict(e.headers.items()) if e.headers else {}
            return HttpResponse(e.code, headers_out, e.read() or b"")
        except (URLError, TimeoutError, OSError) as e:
            log.warning("HTTP transport failed: method=%s url=%s error=%s", method, url, e)
            raise TransportError(f"HTTP error: {e}") from e

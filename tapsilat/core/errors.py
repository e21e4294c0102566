"""Tapsilat SDK hata tipleri: doğrulama, webhook, yapılandırma ve API hataları."""
from __future__ import annotations

from typing import Any


class TapsilatError(Exception):
    """Kütüphanenin fırlattığı tüm hataların tabanı."""


class ConfigError(TapsilatError):
    """Eksik/geçersiz yapılandırma (API anahtarı, base URL, HTTP metodu)."""


class TransportError(TapsilatError):
    """HTTP bağlantısı kurulamadı veya zaman aşımı."""


class InvalidResponse(TapsilatError):
    """API beklenmeyen biçimde yanıt verdi."""


class ApiError(TapsilatError):
    """API 4xx/5xx döndü."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(f"API error ({status_code}): {message}")
        self.status_code = status_code
        self.message = message


class ValidationError(TapsilatError):
    """İstek gönderilmeden önce yakalanan girdi hatası.

    `value` hatalı ham girdi, `reason` okunabilir açıklamadır. Çağıran girdiyi
    düzeltip tekrar deneyebilir.
    """

    def __init__(self, reason: str, value: Any = None) -> None:
        super().__init__(f"Validation error: {reason}")
        self.reason = reason
        self.value = value


class InvalidGsm(ValidationError):
    pass


class InvalidEmail(ValidationError):
    pass


class InvalidAmount(ValidationError):
    pass


class InvalidInstallmentCount(ValidationError):
    pass


class InvalidIdentityNumber(ValidationError):
    pass


class VerificationError(TapsilatError):
    """Webhook doğrulama girdisi yapısal olarak bozuk (boş secret, hatalı imza kodlaması).

    İmza uyuşmazlığı bu hatayı fırlatmaz; False döner.
    """


class ParseError(TapsilatError):
    """Webhook gövdesi JSON değil veya olay yapısına uymuyor."""

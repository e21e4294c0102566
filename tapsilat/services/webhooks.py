"""Webhook doğrulama ve ayrıştırma.

Akış: önce imza (ve istenirse zaman damgası) doğrulanır, is_valid True ise
parse_webhook çağrılır. parse_webhook imza kontrolü yapmaz.
"""
from __future__ import annotations

import json
import logging
import math
import time
from datetime import datetime, timezone

import pydantic

from tapsilat.core import security
from tapsilat.core.errors import ParseError, VerificationError
from tapsilat.schemas.webhook import (
    VerificationResult,
    WebhookEvent,
    WebhookVerificationConfig,
)

log = logging.getLogger("tapsilat.webhooks")


def create_verification_config(
    secret: str, tolerance_seconds: int | None = None
) -> WebhookVerificationConfig:
    return WebhookVerificationConfig(secret=secret, tolerance_seconds=tolerance_seconds)


def _parse_timestamp(raw) -> float:
    """Unix saniye (sayı veya metin) ya da ISO 8601 -> epoch saniye. Saat dilimi yoksa UTC."""
    if isinstance(raw, bool) or not isinstance(raw, (int, float, str)):
        raise ValueError(f"unsupported timestamp type: {type(raw).__name__}")
    try:
        if isinstance(raw, str):
            value = _parse_timestamp_text(raw.strip())
        else:
            value = float(raw)
    except (OverflowError, OSError) as e:
        # float'a sığmayan tamsayı veya platformun desteklemediği tarih
        raise ValueError("timestamp out of range") from e
    if not math.isfinite(value):
        raise ValueError("timestamp is not a finite number")
    return value


def _parse_timestamp_text(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        # Sayı değilse ISO 8601; Python 3.10 fromisoformat "Z" son ekini tanımıyor
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        dt = datetime.fromisoformat(text)
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return dt.timestamp()


def _embedded_timestamp(payload: bytes | str):
    """Gövde JSON nesnesiyse 'timestamp' alanını döner; yoksa None."""
    try:
        doc = json.loads(payload)
    except (ValueError, UnicodeDecodeError):
        return None
    if not isinstance(doc, dict):
        return None
    return doc.get("timestamp")


def verify_webhook_advanced(
    payload: bytes | str,
    signature: str,
    config: WebhookVerificationConfig,
    now: float | None = None,
) -> VerificationResult:
    """
    İmza + zaman damgası toleransı. Hiçbir durumda istisna fırlatmaz;
    sonuç is_valid ve reason ile döner.
    """
    try:
        is_valid = security.verify_webhook(payload, signature, config.secret)
    except VerificationError as e:
        log.warning("Webhook signature verification error: %s", e)
        return VerificationResult(False, f"Signature verification error: {e}")
    if not is_valid:
        log.warning("Webhook signature mismatch")
        return VerificationResult(False, "Invalid signature")

    if config.tolerance_seconds is None:
        return VerificationResult(True)

    raw_ts = _embedded_timestamp(payload)
    if raw_ts is None:
        return VerificationResult(True)
    try:
        webhook_time = _parse_timestamp(raw_ts)
    except ValueError as e:
        return VerificationResult(False, f"Timestamp validation failed: invalid timestamp format: {e}")

    current = time.time() if now is None else now
    diff = abs(current - webhook_time)
    if diff > config.tolerance_seconds:
        log.warning(
            "Webhook timestamp outside tolerance: diff=%.0fs tolerance=%ss",
            diff,
            config.tolerance_seconds,
        )
        return VerificationResult(
            False,
            "Timestamp validation failed: webhook timestamp too old or too far in future. "
            f"Difference: {diff:.0f}s, tolerance: {config.tolerance_seconds}s",
        )
    return VerificationResult(True)


def parse_webhook(payload: bytes | str) -> WebhookEvent:
    try:
        return WebhookEvent.model_validate_json(payload)
    except pydantic.ValidationError as e:
        raise ParseError(f"Failed to parse webhook payload: {e}") from e


class WebhookModule:
    """İstemci üzerinden erişim: client.webhooks.verify(...)"""

    sign = staticmethod(security.sign_payload)
    verify = staticmethod(security.verify_webhook)
    verify_advanced = staticmethod(verify_webhook_advanced)
    parse = staticmethod(parse_webhook)
    create_verification_config = staticmethod(create_verification_config)

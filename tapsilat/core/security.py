"""Webhook imzası: HMAC-SHA256 (hex), sabit zamanlı karşılaştırma."""
import hashlib
import hmac
import re

from .errors import VerificationError

SIGNATURE_PREFIX = "sha256="
DIGEST_SIZE = hashlib.sha256().digest_size  # 32 bayt / 64 hex karakter
HEX_RE = re.compile(r"^[0-9a-fA-F]+$")


def _as_bytes(value: bytes | str) -> bytes:
    if isinstance(value, bytes):
        return value
    return value.encode("utf-8")


def _require_secret(secret: bytes | str) -> bytes:
    if not secret:
        raise VerificationError("Webhook secret cannot be empty")
    return _as_bytes(secret)


def sign_payload(payload: bytes | str, secret: bytes | str) -> str:
    """Ham gövdenin HMAC-SHA256 imzası (küçük harf hex)."""
    key = _require_secret(secret)
    return hmac.new(key, _as_bytes(payload), hashlib.sha256).hexdigest()


def _decode_signature(signature: str) -> bytes:
    if not isinstance(signature, str):
        raise VerificationError("Signature must be a string")
    raw = signature.strip()
    if raw.startswith(SIGNATURE_PREFIX):
        raw = raw[len(SIGNATURE_PREFIX):]
    if not raw:
        raise VerificationError("Signature cannot be empty")
    if not HEX_RE.match(raw) or len(raw) % 2:
        raise VerificationError("Signature is not valid hex")
    digest = bytes.fromhex(raw)
    if len(digest) != DIGEST_SIZE:
        raise VerificationError(
            f"Signature must be {DIGEST_SIZE * 2} hex characters, got {len(raw)}"
        )
    return digest


def verify_webhook(payload: bytes | str, signature: str, secret: bytes | str) -> bool:
    """
    İmza eşleşiyorsa True, eşleşmiyorsa False döner.
    VerificationError yalnızca yapısal hata içindir (boş secret, bozuk hex).
    """
    key = _require_secret(secret)
    supplied = _decode_signature(signature)
    expected = hmac.new(key, _as_bytes(payload), hashlib.sha256).digest()
    return hmac.compare_digest(expected, supplied)

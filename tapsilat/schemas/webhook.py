from enum import Enum
from typing import Any, NamedTuple

from .common import TapsilatModel


class WebhookEventType(str, Enum):
    ORDER_COMPLETED = "order.completed"
    ORDER_FAILED = "order.failed"
    ORDER_CANCELLED = "order.cancelled"
    ORDER_REFUNDED = "order.refunded"
    PAYMENT_COMPLETED = "payment.completed"
    PAYMENT_FAILED = "payment.failed"
    INSTALLMENT_COMPLETED = "installment.completed"
    INSTALLMENT_FAILED = "installment.failed"


class WebhookData(TapsilatModel):
    order_id: str | None = None
    payment_id: str | None = None
    installment_id: str | None = None
    amount: float | None = None
    currency: str | None = None
    status: str | None = None
    metadata: dict[str, Any] | None = None


class WebhookEvent(TapsilatModel):
    """Doğrulanmış webhook gövdesi. Yalnızca imza kontrolünden sonra oluşturulmalı."""
    event_type: WebhookEventType
    data: WebhookData
    # Unix saniye (sayı/metin) veya ISO 8601
    timestamp: str | int | float | None = None
    signature: str | None = None


class WebhookVerificationConfig(NamedTuple):
    secret: str
    tolerance_seconds: int | None = None  # Zaman damgası kontrolü için


class VerificationResult(NamedTuple):
    is_valid: bool
    reason: str | None = None

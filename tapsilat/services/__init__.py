from .installments import InstallmentModule
from .orders import OrderModule
from .subscriptions import SubscriptionModule
from .webhooks import (
    WebhookModule,
    create_verification_config,
    parse_webhook,
    verify_webhook_advanced,
)

__all__ = [
    "InstallmentModule",
    "OrderModule",
    "SubscriptionModule",
    "WebhookModule",
    "create_verification_config",
    "parse_webhook",
    "verify_webhook_advanced",
]

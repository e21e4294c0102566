"""Tapsilat ödeme API'si için Python istemcisi."""
__version__ = "0.3.0"

from .client import TapsilatClient  # noqa: E402
from .core.config import Settings, settings  # noqa: E402
from .core.errors import (  # noqa: E402
    ApiError,
    ConfigError,
    InvalidAmount,
    InvalidEmail,
    InvalidGsm,
    InvalidIdentityNumber,
    InvalidInstallmentCount,
    InvalidResponse,
    ParseError,
    TapsilatError,
    TransportError,
    ValidationError,
    VerificationError,
)
from .core.security import sign_payload, verify_webhook  # noqa: E402
from .core.validators import (  # noqa: E402
    validate_amount,
    validate_email,
    validate_gsm,
    validate_gsm_number,
    validate_identity_number,
    validate_installments,
)
from .logging import setup_logging  # noqa: E402
from .services.webhooks import (  # noqa: E402
    create_verification_config,
    parse_webhook,
    verify_webhook_advanced,
)

__all__ = [
    "ApiError",
    "ConfigError",
    "InvalidAmount",
    "InvalidEmail",
    "InvalidGsm",
    "InvalidIdentityNumber",
    "InvalidInstallmentCount",
    "InvalidResponse",
    "ParseError",
    "Settings",
    "TapsilatClient",
    "TapsilatError",
    "TransportError",
    "ValidationError",
    "VerificationError",
    "create_verification_config",
    "parse_webhook",
    "settings",
    "setup_logging",
    "sign_payload",
    "validate_amount",
    "validate_email",
    "validate_gsm",
    "validate_gsm_number",
    "validate_identity_number",
    "validate_installments",
    "verify_webhook",
    "verify_webhook_advanced",
]

from .config import Settings, settings
from .security import sign_payload, verify_webhook
from .transport import HttpResponse, Transport, UrllibTransport

__all__ = [
    "HttpResponse",
    "Settings",
    "Transport",
    "UrllibTransport",
    "settings",
    "sign_payload",
    "verify_webhook",
]

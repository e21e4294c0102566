"""FastAPI entegrasyonu (opsiyonel: pip install tapsilat[fastapi])."""
from .webhook import SIGNATURE_HEADER, build_webhook_router

__all__ = ["SIGNATURE_HEADER", "build_webhook_router"]

"""FastAPI webhook alıcısı: ham gövde doğrulanır, sonra olaya çevrilip handler'a verilir."""
import inspect
import logging
from typing import Any, Callable

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from tapsilat.core.config import settings
from tapsilat.core.errors import ParseError
from tapsilat.schemas.webhook import WebhookEvent
from tapsilat.services.webhooks import (
    create_verification_config,
    parse_webhook,
    verify_webhook_advanced,
)

log = logging.getLogger("tapsilat.api.webhook")

SIGNATURE_HEADER = "X-Tapsilat-Signature"

# Senkron veya async olabilir
WebhookHandler = Callable[[WebhookEvent], Any]


def build_webhook_router(
    secret: str | None = None,
    handler: WebhookHandler | None = None,
    tolerance_seconds: int | None = None,
    path: str = "/webhook",
    signature_header: str = SIGNATURE_HEADER,
) -> APIRouter:
    """
    Tapsilat bildirim URL'si için router. secret/tolerance verilmezse
    TAPSILAT_WEBHOOK_SECRET / TAPSILAT_WEBHOOK_TOLERANCE_SECONDS kullanılır.
    """
    config = create_verification_config(
        secret if secret is not None else settings.webhook_secret,
        tolerance_seconds if tolerance_seconds is not None else settings.webhook_tolerance_seconds,
    )
    router = APIRouter(tags=["tapsilat-webhook"])

    @router.post(path)
    async def tapsilat_webhook(request: Request):
        """Tapsilat bildirimi: imza geçersizse 400, geçerliyse handler çağrılır ve OK döner."""
        payload = await request.body()
        signature = request.headers.get(signature_header, "")
        result = verify_webhook_advanced(payload, signature, config)
        if not result.is_valid:
            log.warning("Tapsilat webhook rejected: reason=%s", result.reason)
            return PlainTextResponse(f"Webhook rejected: {result.reason}", status_code=400)

        try:
            event = parse_webhook(payload)
        except ParseError as e:
            log.error("Tapsilat webhook parse failed: %s", e)
            return PlainTextResponse("Webhook rejected: malformed payload", status_code=400)

        log.info(
            "Tapsilat webhook accepted: event_type=%s order_id=%s",
            event.event_type.value,
            event.data.order_id,
        )
        if handler is not None:
            outcome = handler(event)
            if inspect.isawaitable(outcome):
                await outcome
        return PlainTextResponse("OK", status_code=200)

    return router

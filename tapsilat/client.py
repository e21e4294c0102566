"""Tapsilat API istemcisi.

İki yüzey aynı kod yolunu kullanır: client.create_order(...) doğrudan metotları
client.orders.create(...) modüllerine yönlendirir.
"""
from __future__ import annotations

import json
import logging
import time
from typing import Any

from pydantic import BaseModel

from tapsilat import __version__
from tapsilat.core.config import Settings
from tapsilat.core.config import settings as default_settings
from tapsilat.core.errors import ApiError, ConfigError, InvalidResponse
from tapsilat.core.transport import Transport, UrllibTransport
from tapsilat.schemas import (
    CreateOrderRequest,
    CreateOrderResponse,
    Order,
    OrderAccountingRequest,
    OrderPaymentTermCreate,
    OrderPaymentTermUpdate,
    OrderPostAuthRequest,
    OrderResponse,
    OrderTermRefundRequest,
    RefundOrderRequest,
    SubscriptionCancelRequest,
    SubscriptionCreateRequest,
    SubscriptionCreateResponse,
    SubscriptionDetail,
    SubscriptionGetRequest,
    SubscriptionRedirectRequest,
    SubscriptionRedirectResponse,
)
from tapsilat.services.installments import InstallmentModule
from tapsilat.services.orders import OrderModule
from tapsilat.services.subscriptions import SubscriptionModule
from tapsilat.services.webhooks import WebhookModule

log = logging.getLogger("tapsilat.client")

ALLOWED_METHODS = ("GET", "POST", "PUT", "DELETE")
USER_AGENT = f"tapsilat-python/{__version__}"


def _mask_key(api_key: str) -> str:
    if len(api_key) > 10:
        return f"{api_key[:4]}...{api_key[-4:]}"
    return "***"


def _encode_body(body: Any) -> bytes | None:
    if body is None:
        return None
    if isinstance(body, BaseModel):
        return body.model_dump_json(exclude_none=True).encode()
    return json.dumps(body).encode()


class TapsilatClient:
    def __init__(
        self,
        api_key: str | None = None,
        *,
        settings: Settings | None = None,
        transport: Transport | None = None,
    ) -> None:
        config = settings or default_settings
        if api_key is not None:
            config = config.model_copy(update={"api_key": api_key.strip()})
        config.validate_for_client()
        self.settings = config
        self.transport = transport or UrllibTransport(timeout=config.timeout)

    @classmethod
    def from_api_key(cls, api_key: str) -> TapsilatClient:
        return cls(api_key)

    # ---------- Modüller ----------
    @property
    def orders(self) -> OrderModule:
        return OrderModule(self)

    @property
    def installments(self) -> InstallmentModule:
        return InstallmentModule(self)

    @property
    def subscriptions(self) -> SubscriptionModule:
        return SubscriptionModule(self)

    @property
    def webhooks(self) -> WebhookModule:
        return WebhookModule()

    # ---------- HTTP ----------
    def make_request(self, method: str, endpoint: str, body: Any = None) -> Any:
        """
        JSON istek gönderir, çözümlenmiş JSON döner (boş gövde -> None).
        4xx/5xx -> ApiError, JSON olmayan gövde -> InvalidResponse.
        """
        method = method.upper()
        if method not in ALLOWED_METHODS:
            raise ConfigError(f"Unsupported HTTP method: {method}")
        url = f"{self.settings.base_url.rstrip('/')}/{endpoint.lstrip('/')}"
        headers = {
            "Authorization": f"Bearer {self.settings.api_key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": USER_AGENT,
        }
        data = _encode_body(body)
        log.debug(
            "HTTP request: method=%s url=%s auth=Bearer %s body=%s",
            method,
            url,
            _mask_key(self.settings.api_key),
            data.decode() if data else "(empty)",
        )

        start = time.perf_counter()
        resp = self.transport.send(method, url, headers, data)
        latency_ms = (time.perf_counter() - start) * 1000
        log.info("method=%s url=%s status=%s latency_ms=%.2f", method, url, resp.status, latency_ms)

        text = resp.body.decode("utf-8", errors="replace") if resp.body else ""
        if resp.status >= 400:
            log.warning("HTTP error response: status=%s body=%s", resp.status, text[:500])
            raise ApiError(resp.status, _error_message(text))

        if not text.strip():
            # cancel/terminate gibi uçlar boş 200 dönebiliyor
            return None
        try:
            return json.loads(text)
        except ValueError as e:
            raise InvalidResponse(f"Failed to parse response JSON: {e}. Response was: {text[:200]}") from e

    # ---------- Sipariş (doğrudan) ----------
    def create_order(self, request: CreateOrderRequest) -> CreateOrderResponse:
        return self.orders.create(request)

    def get_order(self, reference_id: str) -> Order:
        return self.orders.get(reference_id)

    def get_order_by_conversation_id(self, conversation_id: str) -> OrderResponse:
        return self.orders.get_by_conversation_id(conversation_id)

    def cancel_order(self, reference_id: str) -> Any:
        return self.orders.cancel(reference_id)

    def refund_order(self, request: RefundOrderRequest) -> Any:
        return self.orders.refund(request)

    def refund_all_order(self, reference_id: str) -> Any:
        return self.orders.refund_all(reference_id)

    def get_order_list(self, page: int = 1, per_page: int = 10, buyer_id: str | None = None) -> Any:
        return self.orders.list(page, per_page, buyer_id)

    def get_order_submerchants(self, page: int = 1, per_page: int = 10) -> Any:
        return self.orders.submerchants(page, per_page)

    def get_order_status(self, reference_id: str) -> Any:
        return self.orders.get_status(reference_id)

    def get_order_transactions(self, reference_id: str) -> Any:
        return self.orders.transactions(reference_id)

    def get_order_payment_details(self, reference_id: str, conversation_id: str | None = None) -> Any:
        return self.orders.payment_details(reference_id, conversation_id)

    def get_checkout_url(self, reference_id: str) -> str:
        return self.orders.get_checkout_url(reference_id)

    def order_manual_callback(self, reference_id: str, conversation_id: str | None = None) -> Any:
        return self.orders.manual_callback(reference_id, conversation_id)

    def order_terminate(self, reference_id: str) -> Any:
        return self.orders.terminate(reference_id)

    def order_accounting(self, request: OrderAccountingRequest) -> Any:
        return self.orders.accounting(request)

    def order_postauth(self, request: OrderPostAuthRequest) -> Any:
        return self.orders.postauth(request)

    def order_related_update(self, reference_id: str, related_reference_id: str) -> Any:
        return self.orders.related_update(reference_id, related_reference_id)

    # ---------- Vade (term) işlemleri ----------
    def create_order_term(self, request: OrderPaymentTermCreate) -> Any:
        return self.orders.create_term(request)

    def update_order_term(self, request: OrderPaymentTermUpdate) -> Any:
        return self.orders.update_term(request)

    def delete_order_term(self, order_id: str, term_reference_id: str) -> Any:
        return self.orders.delete_term(order_id, term_reference_id)

    def refund_order_term(self, request: OrderTermRefundRequest) -> Any:
        return self.orders.refund_term(request)

    def get_order_term(self, term_reference_id: str) -> Any:
        return self.orders.get_term(term_reference_id)

    def terminate_order_term(self, term_reference_id: str, reason: str | None = None) -> Any:
        return self.orders.terminate_term(term_reference_id, reason)

    # ---------- Sistem ----------
    def get_system_order_statuses(self) -> Any:
        return self.make_request("GET", "system/order-statuses")

    def get_organization_settings(self) -> Any:
        return self.make_request("GET", "organization/settings")

    def health_check(self) -> Any:
        return self.make_request("GET", "health")

    # ---------- Webhook ----------
    def verify_webhook(self, payload: bytes | str, signature: str, secret: str | None = None) -> bool:
        """secret verilmezse ayarlardaki TAPSILAT_WEBHOOK_SECRET kullanılır."""
        return self.webhooks.verify(payload, signature, secret or self.settings.webhook_secret)

    # ---------- Abonelik ----------
    def create_subscription(self, request: SubscriptionCreateRequest) -> SubscriptionCreateResponse:
        return self.subscriptions.create(request)

    def get_subscription(self, request: SubscriptionGetRequest) -> SubscriptionDetail:
        return self.subscriptions.get(request)

    def cancel_subscription(self, request: SubscriptionCancelRequest) -> Any:
        return self.subscriptions.cancel(request)

    def list_subscriptions(self, page: int = 1, per_page: int = 10) -> Any:
        return self.subscriptions.list(page, per_page)

    def redirect_subscription(self, request: SubscriptionRedirectRequest) -> SubscriptionRedirectResponse:
        return self.subscriptions.redirect(request)


def _error_message(text: str) -> str:
    try:
        doc = json.loads(text)
    except ValueError:
        return "Unknown API error"
    if isinstance(doc, dict) and isinstance(doc.get("message"), str):
        return doc["message"]
    return "Unknown API error"


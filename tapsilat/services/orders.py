"""Sipariş işlemleri: oluşturma, sorgulama, iptal, iade, vade (term) yönetimi."""
from __future__ import annotations

import logging
from typing import Any

from tapsilat.core import validators
from tapsilat.core.errors import InvalidResponse
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
)

from .base import BaseModule, parse_model, path_id, require_id, unwrap, with_query

log = logging.getLogger("tapsilat.orders")


def prepare_order_request(request: CreateOrderRequest) -> CreateOrderRequest:
    """
    Gönderim öncesi doğrulama. Alıcı GSM'i normalize edilmiş haliyle (90XXXXXXXXXX)
    yeni bir istek kopyasında döner; orijinal nesne değişmez.
    """
    validators.validate_amount(request.amount)
    for count in request.enabled_installments or []:
        validators.validate_installments(count)

    buyer = request.buyer
    updates: dict[str, Any] = {}
    if buyer.email:
        validators.validate_email(buyer.email)
    if buyer.identity_number:
        validators.validate_identity_number(buyer.identity_number)
    if buyer.gsm_number:
        updates["gsm_number"] = validators.validate_gsm(buyer.gsm_number)
    if not updates:
        return request
    return request.model_copy(update={"buyer": buyer.model_copy(update=updates)})


class OrderModule(BaseModule):
    def create(self, request: CreateOrderRequest) -> CreateOrderResponse:
        body = prepare_order_request(request)
        data = self._request("POST", "order/create", body)
        created = parse_model(CreateOrderResponse, data)
        log.info("Order created: reference_id=%s", created.reference_id)
        return created

    def get(self, reference_id: str) -> Order:
        ref = path_id(reference_id, "Reference ID")
        data = self._request("GET", f"order/{ref}")
        return unwrap(Order, data, "order")

    def get_status(self, reference_id: str) -> Any:
        ref = path_id(reference_id, "Reference ID")
        return self._request("GET", f"order/{ref}/status")

    def get_by_conversation_id(self, conversation_id: str) -> OrderResponse:
        conv = path_id(conversation_id, "Conversation ID")
        data = self._request("GET", f"order/conversation/{conv}")
        return parse_model(OrderResponse, data)

    def list(self, page: int = 1, per_page: int = 10, buyer_id: str | None = None) -> Any:
        return self._request(
            "GET", with_query("order/list", page=page, per_page=per_page, buyer_id=buyer_id or None)
        )

    def submerchants(self, page: int = 1, per_page: int = 10) -> Any:
        return self._request("GET", with_query("order/submerchants", page=page, per_page=per_page))

    def transactions(self, reference_id: str) -> Any:
        ref = path_id(reference_id, "Reference ID")
        return self._request("GET", f"order/{ref}/transactions")

    def payment_details(self, reference_id: str, conversation_id: str | None = None) -> Any:
        """conversation_id verilirse POST gövdesiyle, yoksa referans üzerinden GET."""
        if conversation_id:
            return self._request(
                "POST",
                "order/payment-details",
                {
                    "conversation_id": conversation_id,
                    "reference_id": require_id(reference_id, "Reference ID"),
                },
            )
        ref = path_id(reference_id, "Reference ID")
        return self._request("GET", f"order/{ref}/payment-details")

    def cancel(self, reference_id: str) -> Any:
        reference_id = require_id(reference_id, "Reference ID")
        return self._request("POST", "order/cancel", {"reference_id": reference_id})

    def refund(self, request: RefundOrderRequest) -> Any:
        validators.validate_amount(request.amount)
        require_id(request.reference_id, "Reference ID")
        data = self._request("POST", "order/refund", request)
        # Yanıt zarflı gelir; data yoksa None
        if isinstance(data, dict) and "data" in data:
            return data["data"]
        return data

    def refund_all(self, reference_id: str) -> Any:
        reference_id = require_id(reference_id, "Reference ID")
        return self._request("POST", "order/refund-all", {"reference_id": reference_id})

    def get_checkout_url(self, reference_id: str) -> str:
        order = self.get(reference_id)
        if not order.checkout_url:
            raise InvalidResponse("Checkout URL not found")
        return order.checkout_url

    def terminate(self, reference_id: str) -> Any:
        reference_id = require_id(reference_id, "Reference ID")
        return self._request("POST", "order/terminate", {"reference_id": reference_id})

    def manual_callback(self, reference_id: str, conversation_id: str | None = None) -> Any:
        payload = {"reference_id": require_id(reference_id, "Reference ID")}
        if conversation_id:
            payload["conversation_id"] = conversation_id
        return self._request("POST", "order/manual-callback", payload)

    def related_update(self, reference_id: str, related_reference_id: str) -> Any:
        return self._request(
            "POST",
            "order/related-update",
            {
                "reference_id": require_id(reference_id, "Reference ID"),
                "related_reference_id": require_id(related_reference_id, "Related reference ID"),
            },
        )

    def accounting(self, request: OrderAccountingRequest) -> Any:
        return self._request("POST", "order/accounting", request)

    def postauth(self, request: OrderPostAuthRequest) -> Any:
        validators.validate_amount(request.amount)
        return self._request("POST", "order/postauth", request)

    # ---------- Vade (term) ----------
    def create_term(self, request: OrderPaymentTermCreate) -> Any:
        validators.validate_amount(request.amount)
        return self._request("POST", "order/term", request)

    def update_term(self, request: OrderPaymentTermUpdate) -> Any:
        if request.amount is not None:
            validators.validate_amount(request.amount)
        return self._request("POST", "order/term/update", request)

    def delete_term(self, order_id: str, term_reference_id: str) -> Any:
        return self._request(
            "POST",
            "order/term/delete",
            {
                "order_id": require_id(order_id, "Order ID"),
                "term_reference_id": require_id(term_reference_id, "Term reference ID"),
            },
        )

    def get_term(self, term_reference_id: str) -> Any:
        term = path_id(term_reference_id, "Term reference ID")
        return self._request("GET", f"order/term/{term}")

    def refund_term(self, request: OrderTermRefundRequest) -> Any:
        validators.validate_amount(request.amount)
        return self._request("POST", "order/term/refund", request)

    def terminate_term(self, term_reference_id: str, reason: str | None = None) -> Any:
        payload = {"term_reference_id": require_id(term_reference_id, "Term reference ID")}
        if reason:
            payload["reason"] = reason
        return self._request("POST", "order/term/terminate", payload)

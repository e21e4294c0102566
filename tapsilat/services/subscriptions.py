from __future__ import annotations

from typing import Any

from tapsilat.schemas import (
    SubscriptionCancelRequest,
    SubscriptionCreateRequest,
    SubscriptionCreateResponse,
    SubscriptionDetail,
    SubscriptionGetRequest,
    SubscriptionRedirectRequest,
    SubscriptionRedirectResponse,
)

from .base import BaseModule, parse_model, with_query


class SubscriptionModule(BaseModule):
    def create(self, request: SubscriptionCreateRequest) -> SubscriptionCreateResponse:
        data = self._request("POST", "subscription/create", request)
        return parse_model(SubscriptionCreateResponse, data)

    def get(self, request: SubscriptionGetRequest) -> SubscriptionDetail:
        data = self._request("POST", "subscription", request)
        return parse_model(SubscriptionDetail, data)

    def cancel(self, request: SubscriptionCancelRequest) -> Any:
        return self._request("POST", "subscription/cancel", request)

    def list(self, page: int = 1, per_page: int = 10) -> Any:
        return self._request("GET", with_query("subscription/list", page=page, per_page=per_page))

    def redirect(self, request: SubscriptionRedirectRequest) -> SubscriptionRedirectResponse:
        data = self._request("POST", "subscription/redirect", request)
        return parse_model(SubscriptionRedirectResponse, data)

"""Taksit planları: oluşturma, sorgulama, güncelleme, iptal, iade."""
from __future__ import annotations

from datetime import date

from tapsilat.core import validators
from tapsilat.core.errors import ValidationError
from tapsilat.schemas import (
    CreateInstallmentPlanRequest,
    Installment,
    InstallmentPlan,
    PaginatedResponse,
    PaginationParams,
    RefundInstallmentRequest,
    UpdateInstallmentRequest,
)

from .base import BaseModule, path_id, require_id, unwrap


def _check_date(value: str, label: str) -> None:
    if not value or not value.strip():
        raise ValidationError(f"{label} cannot be empty", value)
    try:
        date.fromisoformat(value.strip()[:10])
    except ValueError:
        raise ValidationError(f"{label} must be an ISO 8601 date (YYYY-MM-DD)", value) from None


class InstallmentModule(BaseModule):
    def create_plan(self, request: CreateInstallmentPlanRequest) -> InstallmentPlan:
        require_id(request.order_id, "Order ID")
        validators.validate_installments(request.installment_count)
        _check_date(request.first_installment_date, "First installment date")
        data = self._request("POST", "installments/plans", request)
        return unwrap(InstallmentPlan, data, "installment plan")

    def get_plan(self, plan_id: str) -> InstallmentPlan:
        plan = path_id(plan_id, "Plan ID")
        data = self._request("GET", f"installments/plans/{plan}")
        return unwrap(InstallmentPlan, data, "installment plan")

    def get_plans_by_order(self, order_id: str) -> list[InstallmentPlan]:
        order = path_id(order_id, "Order ID")
        data = self._request("GET", f"orders/{order}/installments/plans")
        return unwrap(list[InstallmentPlan], data, "installment plans")

    def update_installment(self, installment_id: str, request: UpdateInstallmentRequest) -> Installment:
        installment = path_id(installment_id, "Installment ID")
        if request.amount is not None:
            validators.validate_amount(request.amount)
        if request.due_date is not None:
            _check_date(request.due_date, "Due date")
        data = self._request("PUT", f"installments/{installment}", request)
        return unwrap(Installment, data, "installment")

    def cancel_plan(self, plan_id: str) -> InstallmentPlan:
        plan = path_id(plan_id, "Plan ID")
        data = self._request("POST", f"installments/plans/{plan}/cancel")
        return unwrap(InstallmentPlan, data, "installment plan")

    def refund_installment(self, installment_id: str, request: RefundInstallmentRequest) -> Installment:
        installment = path_id(installment_id, "Installment ID")
        # amount None ise tam iade
        if request.amount is not None:
            validators.validate_amount(request.amount)
        data = self._request("POST", f"installments/{installment}/refund", request)
        return unwrap(Installment, data, "installment")

    def list_plans(self, pagination: PaginationParams | None = None) -> PaginatedResponse[InstallmentPlan]:
        endpoint = "installments/plans"
        query = pagination.as_query() if pagination else ""
        if query:
            endpoint = f"{endpoint}?{query}"
        data = self._request("GET", endpoint)
        return unwrap(PaginatedResponse[InstallmentPlan], data, "installment plans")

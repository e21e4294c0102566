from enum import Enum

from .common import TapsilatModel


class InstallmentStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    OVERDUE = "overdue"
    CANCELLED = "cancelled"
    REFUNDED = "refunded"


class Installment(TapsilatModel):
    id: str
    installment_number: int
    amount: float
    due_date: str
    paid_at: str | None = None
    status: InstallmentStatus


class InstallmentPlan(TapsilatModel):
    id: str
    order_id: str
    total_installments: int
    installment_amount: float
    currency: str
    status: InstallmentStatus
    installments: list[Installment] = []
    created_at: str | None = None
    updated_at: str | None = None


class CreateInstallmentPlanRequest(TapsilatModel):
    order_id: str
    installment_count: int
    first_installment_date: str  # ISO 8601 tarih (YYYY-MM-DD)


class UpdateInstallmentRequest(TapsilatModel):
    due_date: str | None = None
    amount: float | None = None


class RefundInstallmentRequest(TapsilatModel):
    amount: float | None = None  # None: tam iade
    reason: str | None = None

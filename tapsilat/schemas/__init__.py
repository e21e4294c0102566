from .buyer import Buyer, CreateBuyerRequest
from .common import (
    ApiResponse,
    Currency,
    PaginatedResponse,
    PaginationInfo,
    PaginationParams,
)
from .installment import (
    CreateInstallmentPlanRequest,
    Installment,
    InstallmentPlan,
    InstallmentStatus,
    RefundInstallmentRequest,
    UpdateInstallmentRequest,
)
from .order import (
    BasketItem,
    BasketItemPayer,
    BillingAddress,
    CheckoutDesign,
    CreateOrderRequest,
    CreateOrderResponse,
    Metadata,
    Order,
    OrderAccountingRequest,
    OrderCard,
    OrderPaymentTermCreate,
    OrderPaymentTermUpdate,
    OrderPostAuthRequest,
    OrderResponse,
    OrderStatus,
    OrderTermRefundRequest,
    PaymentTerm,
    RefundOrderRequest,
    ShippingAddress,
    Submerchant,
)
from .subscription import (
    SubscriptionBilling,
    SubscriptionCancelRequest,
    SubscriptionCreateRequest,
    SubscriptionCreateResponse,
    SubscriptionDetail,
    SubscriptionGetRequest,
    SubscriptionOrder,
    SubscriptionRedirectRequest,
    SubscriptionRedirectResponse,
    SubscriptionUser,
)
from .webhook import (
    VerificationResult,
    WebhookData,
    WebhookEvent,
    WebhookEventType,
    WebhookVerificationConfig,
)

__all__ = [
    "ApiResponse",
    "BasketItem",
    "BasketItemPayer",
    "BillingAddress",
    "Buyer",
    "CheckoutDesign",
    "CreateBuyerRequest",
    "CreateInstallmentPlanRequest",
    "CreateOrderRequest",
    "CreateOrderResponse",
    "Currency",
    "Installment",
    "InstallmentPlan",
    "InstallmentStatus",
    "Metadata",
    "Order",
    "OrderAccountingRequest",
    "OrderCard",
    "OrderPaymentTermCreate",
    "OrderPaymentTermUpdate",
    "OrderPostAuthRequest",
    "OrderResponse",
    "OrderStatus",
    "OrderTermRefundRequest",
    "PaginatedResponse",
    "PaginationInfo",
    "PaginationParams",
    "PaymentTerm",
    "RefundInstallmentRequest",
    "RefundOrderRequest",
    "ShippingAddress",
    "Submerchant",
    "SubscriptionBilling",
    "SubscriptionCancelRequest",
    "SubscriptionCreateRequest",
    "SubscriptionCreateResponse",
    "SubscriptionDetail",
    "SubscriptionGetRequest",
    "SubscriptionOrder",
    "SubscriptionRedirectRequest",
    "SubscriptionRedirectResponse",
    "SubscriptionUser",
    "UpdateInstallmentRequest",
    "VerificationResult",
    "WebhookData",
    "WebhookEvent",
    "WebhookEventType",
    "WebhookVerificationConfig",
]

from enum import Enum

from .buyer import Buyer, CreateBuyerRequest
from .common import TapsilatModel


class OrderStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"
    CANCELLED = "cancelled"
    REFUNDED = "refunded"
    PARTIALLY_REFUNDED = "partially_refunded"


class Metadata(TapsilatModel):
    key: str
    value: str


class BasketItemPayer(TapsilatModel):
    address: str | None = None
    reference_id: str | None = None
    tax_office: str | None = None
    title: str | None = None
    type: str | None = None
    vat: str | None = None


class BasketItem(TapsilatModel):
    id: str | None = None
    name: str | None = None
    price: float | None = None
    quantity: int | None = None
    quantity_float: float | None = None
    quantity_unit: str | None = None
    item_type: str | None = None
    category1: str | None = None
    category2: str | None = None
    commission_amount: float | None = None
    coupon: str | None = None
    coupon_discount: float | None = None
    data: str | None = None
    paid_amount: float | None = None
    payer: BasketItemPayer | None = None
    sub_merchant_key: str | None = None
    sub_merchant_price: str | None = None


class BillingAddress(TapsilatModel):
    address: str | None = None
    billing_type: str | None = None
    citizenship: str | None = None
    city: str | None = None
    contact_name: str | None = None
    contact_phone: str | None = None
    country: str | None = None
    district: str | None = None
    tax_office: str | None = None
    title: str | None = None
    vat_number: str | None = None
    zip_code: str | None = None


class ShippingAddress(TapsilatModel):
    address: str | None = None
    city: str | None = None
    contact_name: str | None = None
    country: str | None = None
    shipping_date: str | None = None
    tracking_code: str | None = None
    zip_code: str | None = None


class CheckoutDesign(TapsilatModel):
    input_background_color: str | None = None
    input_text_color: str | None = None
    label_text_color: str | None = None
    left_background_color: str | None = None
    logo: str | None = None
    order_detail_html: str | None = None
    pay_button_color: str | None = None
    redirect_url: str | None = None
    right_background_color: str | None = None
    text_color: str | None = None


class OrderCard(TapsilatModel):
    card_id: str
    card_sequence: int


class PaymentTerm(TapsilatModel):
    amount: float | None = None
    data: str | None = None
    due_date: str | None = None
    paid_date: str | None = None
    required: bool | None = None
    status: str | None = None
    term_reference_id: str | None = None
    term_sequence: int | None = None


class Submerchant(TapsilatModel):
    amount: float | None = None
    merchant_reference_id: str | None = None
    order_basket_item_id: str | None = None


class CreateOrderRequest(TapsilatModel):
    amount: float
    currency: str
    locale: str = "tr"
    buyer: CreateBuyerRequest
    basket_items: list[BasketItem] | None = None
    billing_address: BillingAddress | None = None
    shipping_address: ShippingAddress | None = None
    checkout_design: CheckoutDesign | None = None
    conversation_id: str | None = None
    enabled_installments: list[int] | None = None
    external_reference_id: str | None = None
    metadata: list[Metadata] | None = None
    order_cards: OrderCard | None = None
    paid_amount: float | None = None
    partial_payment: bool | None = None
    payment_failure_url: str | None = None
    payment_success_url: str | None = None
    payment_methods: bool | None = None
    payment_mode: str | None = None
    payment_options: list[str] | None = None
    payment_terms: list[PaymentTerm] | None = None
    redirect_failure_url: str | None = None
    redirect_success_url: str | None = None
    submerchants: list[Submerchant] | None = None
    tax_amount: float | None = None
    three_d_force: bool | None = None


class CreateOrderResponse(TapsilatModel):
    order_id: str | None = None
    reference_id: str | None = None
    checkout_url: str | None = None


class OrderResponse(CreateOrderResponse):
    pass


class Order(TapsilatModel):
    id: str | None = None
    reference_id: str | None = None
    # API tutarları string döndürüyor ("149.99")
    amount: str | float | None = None
    total: str | float | None = None
    paid_amount: str | float | None = None
    refunded_amount: str | float | None = None
    currency: str | None = None
    status: int | str | None = None
    status_enum: str | None = None
    description: str | None = None
    buyer: Buyer | None = None
    basket_items: list[BasketItem] | None = None
    callback_url: str | None = None
    checkout_url: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    metadata: list[Metadata] | None = None


class RefundOrderRequest(TapsilatModel):
    amount: float
    reference_id: str
    order_item_id: str | None = None
    order_item_payment_id: str | None = None


class OrderAccountingRequest(TapsilatModel):
    order_reference_id: str


class OrderPostAuthRequest(TapsilatModel):
    amount: float
    reference_id: str


class OrderPaymentTermCreate(TapsilatModel):
    order_id: str
    term_reference_id: str
    amount: float
    due_date: str
    term_sequence: int
    required: bool
    status: str
    data: str | None = None
    paid_date: str | None = None


class OrderPaymentTermUpdate(TapsilatModel):
    term_reference_id: str
    amount: float | None = None
    due_date: str | None = None
    paid_date: str | None = None
    required: bool | None = None
    status: str | None = None
    term_sequence: int | None = None


class OrderTermRefundRequest(TapsilatModel):
    term_id: str
    amount: float
    reference_id: str | None = None
    term_payment_id: str | None = None

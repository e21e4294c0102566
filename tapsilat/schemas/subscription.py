from .common import TapsilatModel


class SubscriptionBilling(TapsilatModel):
    address: str | None = None
    city: str | None = None
    contact_name: str | None = None
    country: str | None = None
    vat_number: str | None = None
    zip_code: str | None = None


class SubscriptionUser(TapsilatModel):
    id: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone: str | None = None
    identity_number: str | None = None
    address: str | None = None
    city: str | None = None
    country: str | None = None
    zip_code: str | None = None


class SubscriptionOrder(TapsilatModel):
    amount: str | None = None
    currency: str | None = None
    payment_date: str | None = None
    payment_url: str | None = None
    reference_id: str | None = None
    status: str | None = None


class SubscriptionDetail(TapsilatModel):
    amount: str | None = None
    currency: str | None = None
    due_date: str | None = None
    external_reference_id: str | None = None
    is_active: bool | None = None
    orders: list[SubscriptionOrder] | None = None
    payment_date: int | None = None
    payment_status: str | None = None
    period: int | None = None
    title: str | None = None
    user: SubscriptionUser | None = None


class SubscriptionCreateRequest(TapsilatModel):
    amount: float | None = None
    billing: SubscriptionBilling | None = None
    card_id: str | None = None
    currency: str | None = None
    cycle: int | None = None
    external_reference_id: str | None = None
    failure_url: str | None = None
    payment_date: int | None = None
    period: int | None = None
    success_url: str | None = None
    title: str | None = None
    user: SubscriptionUser | None = None


class SubscriptionCreateResponse(TapsilatModel):
    code: int | None = None
    message: str | None = None
    order_reference_id: str | None = None
    reference_id: str | None = None


class SubscriptionGetRequest(TapsilatModel):
    external_reference_id: str | None = None
    reference_id: str | None = None


class SubscriptionCancelRequest(SubscriptionGetRequest):
    pass


class SubscriptionRedirectRequest(TapsilatModel):
    subscription_id: str | None = None


class SubscriptionRedirectResponse(TapsilatModel):
    url: str | None = None

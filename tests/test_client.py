"""İstemci: URL/başlık kurulumu, hata eşleme, sipariş ve abonelik uçları."""
import pytest

from tapsilat import (
    ApiError,
    ConfigError,
    InvalidAmount,
    InvalidEmail,
    InvalidGsm,
    InvalidResponse,
    Settings,
    TapsilatClient,
    ValidationError,
)
from tapsilat.client import USER_AGENT
from tapsilat.schemas import (
    CreateBuyerRequest,
    CreateOrderRequest,
    RefundOrderRequest,
    SubscriptionGetRequest,
)

BASE = "https://api.test.tapsilat.local/v1"


def _order_request(**buyer_overrides) -> CreateOrderRequest:
    buyer = {"name": "Ayşe", "surname": "Yılmaz", "email": "ayse@example.com", "gsm_number": "0555 123 45 67"}
    buyer.update(buyer_overrides)
    return CreateOrderRequest(
        amount=149.99,
        currency="TRY",
        buyer=CreateBuyerRequest(**buyer),
        enabled_installments=[1, 3, 6],
    )


def test_url_and_headers(client, transport):
    transport.queue(200, {"status": "ok"})
    assert client.health_check() == {"status": "ok"}
    req = transport.last
    assert req["method"] == "GET"
    assert req["url"] == f"{BASE}/health"
    assert req["headers"]["Authorization"] == "Bearer test-api-key-1234567890"
    assert req["headers"]["Content-Type"] == "application/json"
    assert req["headers"]["User-Agent"] == USER_AGENT


def test_make_request_rejects_unknown_method(client, transport):
    with pytest.raises(ConfigError):
        client.make_request("PATCH", "order/list")
    assert transport.requests == []


def test_empty_body_returns_none(client, transport):
    transport.queue(200, None)
    assert client.cancel_order("ref-1") is None
    assert transport.last["json"] == {"reference_id": "ref-1"}


def test_invalid_json_raises(client, transport):
    transport.queue(200, "<html>bad gateway</html>")
    with pytest.raises(InvalidResponse):
        client.get_order_status("ref-1")


def test_api_error_carries_message(client, transport):
    transport.queue(404, {"message": "Order not found"})
    with pytest.raises(ApiError) as exc:
        client.get_order("missing")
    assert exc.value.status_code == 404
    assert exc.value.message == "Order not found"
    assert str(exc.value) == "API error (404): Order not found"


def test_api_error_without_message(client, transport):
    transport.queue(500, "Internal Server Error")
    with pytest.raises(ApiError) as exc:
        client.health_check()
    assert exc.value.message == "Unknown API error"


def test_empty_api_key_is_config_error():
    with pytest.raises(ConfigError):
        TapsilatClient(settings=Settings(api_key="   "))


def test_api_key_argument_overrides_settings(transport):
    c = TapsilatClient("  key-from-arg  ", settings=Settings(api_key="other"), transport=transport)
    assert c.settings.api_key == "key-from-arg"


def test_non_positive_timeout_is_config_error():
    with pytest.raises(ConfigError):
        TapsilatClient(settings=Settings(api_key="k", timeout=0))


def test_create_order_normalizes_gsm(client, transport):
    transport.queue(200, {"order_id": "o-1", "reference_id": "ref-1", "checkout_url": "https://pay/x"})
    request = _order_request()
    created = client.create_order(request)

    assert created.reference_id == "ref-1"
    body = transport.last["json"]
    assert transport.last["url"] == f"{BASE}/order/create"
    assert body["buyer"]["gsm_number"] == "905551234567"
    assert body["amount"] == 149.99
    assert body["enabled_installments"] == [1, 3, 6]
    # None alanlar gönderilmez
    assert "billing_address" not in body
    # Çağıranın nesnesi değişmez
    assert request.buyer.gsm_number == "0555 123 45 67"


@pytest.mark.parametrize(
    "overrides,error",
    [
        ({"gsm_number": "12345"}, InvalidGsm),
        ({"email": "not-an-email"}, InvalidEmail),
        ({"identity_number": "12345678901"}, ValidationError),
    ],
)
def test_create_order_validation_stops_request(client, transport, overrides, error):
    with pytest.raises(error):
        client.create_order(_order_request(**overrides))
    assert transport.requests == []


def test_create_order_rejects_bad_amount_and_installments(client, transport):
    req = _order_request()
    with pytest.raises(InvalidAmount):
        client.create_order(req.model_copy(update={"amount": 10.555}))
    with pytest.raises(ValidationError):
        client.create_order(req.model_copy(update={"enabled_installments": [1, 13]}))
    assert transport.requests == []


def test_get_order_unwraps_envelope(client, transport):
    transport.queue(
        200,
        {
            "success": True,
            "data": {"reference_id": "ref-1", "amount": "149.99", "status": 1, "checkout_url": "https://pay/x"},
        },
    )
    order = client.get_order("ref-1")
    assert order.reference_id == "ref-1"
    assert order.amount == "149.99"
    assert transport.last["url"] == f"{BASE}/order/ref-1"


def test_get_order_without_data_uses_message(client, transport):
    transport.queue(200, {"success": False, "message": "Order is archived"})
    with pytest.raises(InvalidResponse, match="Order is archived"):
        client.get_order("ref-1")


def test_get_order_empty_reference_id(client, transport):
    with pytest.raises(ValidationError):
        client.get_order("  ")
    assert transport.requests == []


def test_checkout_url(client, transport):
    transport.queue(200, {"success": True, "data": {"checkout_url": "https://pay/x"}})
    assert client.get_checkout_url("ref-1") == "https://pay/x"

    transport.queue(200, {"success": True, "data": {"reference_id": "ref-1"}})
    with pytest.raises(InvalidResponse, match="Checkout URL not found"):
        client.get_checkout_url("ref-1")


def test_order_list_query(client, transport):
    transport.queue(200, {"rows": []})
    client.get_order_list(page=2, per_page=25, buyer_id="b-9")
    assert transport.last["url"] == f"{BASE}/order/list?page=2&per_page=25&buyer_id=b-9"


def test_refund_validates_amount_and_returns_data(client, transport):
    with pytest.raises(InvalidAmount):
        client.refund_order(RefundOrderRequest(amount=-5, reference_id="ref-1"))
    assert transport.requests == []

    transport.queue(200, {"success": True, "data": {"refund_id": "r-1"}})
    assert client.refund_order(RefundOrderRequest(amount=50.5, reference_id="ref-1")) == {"refund_id": "r-1"}
    assert transport.last["json"] == {"amount": 50.5, "reference_id": "ref-1"}


def test_order_by_conversation_id(client, transport):
    transport.queue(200, {"reference_id": "ref-7", "checkout_url": "https://pay/7"})
    resp = client.get_order_by_conversation_id("conv-7")
    assert resp.reference_id == "ref-7"
    assert transport.last["url"] == f"{BASE}/order/conversation/conv-7"


def test_payment_details_switches_on_conversation_id(client, transport):
    transport.queue(200, {})
    transport.queue(200, {})
    client.get_order_payment_details("ref-1")
    assert transport.last["method"] == "GET"
    client.get_order_payment_details("ref-1", conversation_id="conv-1")
    assert transport.last["method"] == "POST"
    assert transport.last["json"] == {"conversation_id": "conv-1", "reference_id": "ref-1"}


@pytest.mark.parametrize(
    "call,expected_path",
    [
        (lambda c: c.get_order("abc/../../admin?x=1"), "order/abc%2F..%2F..%2Fadmin%3Fx%3D1"),
        (lambda c: c.get_order_status("a b#c"), "order/a%20b%23c/status"),
        (lambda c: c.get_order_transactions("x/y"), "order/x%2Fy/transactions"),
        (lambda c: c.get_order_payment_details("x/y"), "order/x%2Fy/payment-details"),
        (lambda c: c.get_order_term("t&1"), "order/term/t%261"),
        (lambda c: c.orders.get_by_conversation_id("c?d"), "order/conversation/c%3Fd"),
    ],
)
def test_ids_are_escaped_as_single_path_segment(client, transport, call, expected_path):
    transport.queue(200, {"success": True, "data": {"reference_id": "r"}})
    call(client)
    assert transport.last["url"] == f"{BASE}/{expected_path}"


def test_query_values_cannot_inject_parameters(client, transport):
    transport.queue(200, {})
    client.orders.list(1, 10, "b&per_page=9999")
    assert transport.last["url"] == f"{BASE}/order/list?page=1&per_page=10&buyer_id=b%26per_page%3D9999"


def test_list_queries_are_encoded(client, transport):
    transport.queue(200, {})
    transport.queue(200, {})
    client.get_order_submerchants(page=3, per_page=20)
    assert transport.last["url"] == f"{BASE}/order/submerchants?page=3&per_page=20"
    client.list_subscriptions(page=1, per_page=5)
    assert transport.last["url"] == f"{BASE}/subscription/list?page=1&per_page=5"


@pytest.mark.parametrize(
    "call",
    [
        lambda c: c.get_order_transactions(" "),
        lambda c: c.get_order_term(""),
        lambda c: c.get_order_by_conversation_id("  "),
        lambda c: c.get_order_payment_details("", conversation_id="conv-1"),
    ],
)
def test_direct_order_methods_require_ids(client, transport, call):
    with pytest.raises(ValidationError):
        call(client)
    assert transport.requests == []


def test_terminate_term_payload(client, transport):
    transport.queue(200, {"ok": True})
    client.terminate_order_term("term-1", reason="customer request")
    assert transport.last["url"] == f"{BASE}/order/term/terminate"
    assert transport.last["json"] == {"term_reference_id": "term-1", "reason": "customer request"}


def test_get_subscription(client, transport):
    transport.queue(200, {"title": "Gold", "is_active": True, "period": 30})
    detail = client.get_subscription(SubscriptionGetRequest(reference_id="sub-1"))
    assert detail.title == "Gold"
    assert transport.last["method"] == "POST"
    assert transport.last["url"] == f"{BASE}/subscription"
    assert transport.last["json"] == {"reference_id": "sub-1"}


def test_module_and_direct_surfaces_hit_same_endpoint(client, transport):
    transport.queue(200, {"a": 1})
    transport.queue(200, {"a": 1})
    assert client.get_order_status("ref-1") == client.orders.get_status("ref-1")
    assert transport.requests[0]["url"] == transport.requests[1]["url"] == f"{BASE}/order/ref-1/status"

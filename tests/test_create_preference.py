from fastapi.testclient import TestClient

from src.api.main import create_app
from src.integrations.clients.mocks.mercadopago import MockMercadoPagoClient
from src.integrations.policy.response_wrappers import PaymentProviderError


def _body(**overrides):
    body = {
        "items": [{"id": "1", "title": "Caderno", "quantity": "2", "unit_price": "29.90"}],
        "payer": {"name": "Ana", "email": "ana@example.com"},
    }
    body.update(overrides)
    return body


def test_empty_items_is_400_and_provider_not_called(client, payments):
    response = client.post("/create_preference", json=_body(items=[]))

    assert response.status_code == 400
    assert payments.requests == []


def test_missing_items_is_400(client, payments):
    response = client.post("/create_preference", json={"payer": {"name": "Ana"}})

    assert response.status_code == 400
    assert payments.requests == []


def test_malformed_body_is_400(client, payments):
    response = client.post("/create_preference", content=b"not json", headers={"Content-Type": "application/json"})

    assert response.status_code == 400
    assert payments.requests == []


def test_non_numeric_quantity_is_400(client, payments):
    body = _body(items=[{"id": "1", "title": "Caderno", "quantity": "dois", "unit_price": "10"}])

    response = client.post("/create_preference", json=body)

    assert response.status_code == 400
    assert payments.requests == []


def test_valid_cart_returns_provider_fields_verbatim(client, payments):
    response = client.post("/create_preference", json=_body())

    assert response.status_code == 201
    assert response.json() == {
        "id": "pref-1",
        "init_point": "https://www.mercadopago.com.br/checkout/v1/redirect?pref_id=pref-1",
        "sandbox_init_point": "https://sandbox.mercadopago.com.br/checkout/v1/redirect?pref_id=pref-1",
    }


def test_items_are_coerced_and_request_is_complete(client, payments, settings):
    client.post("/create_preference", json=_body())

    assert len(payments.requests) == 1
    sent = payments.requests[0]
    item = sent.items[0]
    assert item.id == "1"
    assert item.title == "Caderno"
    assert item.quantity == 2 and isinstance(item.quantity, int)
    assert item.unit_price == 29.90
    assert item.currency_id == "BRL"
    assert sent.payer.name == "Ana"
    assert sent.payer.email == "ana@example.com"
    assert sent.back_urls.success == settings.urls.success
    assert sent.back_urls.failure == settings.urls.failure
    assert sent.back_urls.pending == settings.urls.pending
    assert sent.auto_return == "approved"
    assert sent.notification_url == f"http://testserver/webhook_mp?secret={settings.mercado_pago.webhook_secret}"


def test_notification_url_follows_request_host(client, payments):
    client.post("/create_preference", json=_body(), headers={"Host": "api.loja.com.br"})

    assert payments.requests[0].notification_url.startswith("http://api.loja.com.br/webhook_mp?secret=")


def test_missing_payer_is_omitted(client, payments):
    body = _body()
    del body["payer"]

    response = client.post("/create_preference", json=body)

    assert response.status_code == 201
    assert payments.requests[0].payer is None


def test_provider_error_is_generic_500(settings, sheets):
    failing = MockMercadoPagoClient(error=PaymentProviderError("HTTP 401", payload={"message": "invalid access token"}))
    client = TestClient(create_app(settings, sheets_client=sheets, payments_client=failing))

    response = client.post("/create_preference", json=_body())

    assert response.status_code == 500
    assert response.json() == {"detail": "Falha ao comunicar com o Mercado Pago."}
    assert len(failing.requests) == 1


def test_non_string_title_is_forwarded_unchanged(client, payments):
    body = _body(items=[{"id": 7, "title": 123, "quantity": 1, "unit_price": 10}])

    response = client.post("/create_preference", json=body)

    assert response.status_code == 201
    item = payments.requests[0].items[0]
    assert item.title == 123
    assert item.id == 7

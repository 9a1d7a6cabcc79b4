from fastapi.testclient import TestClient

from src.api.main import create_app
from src.integrations.clients.mocks.google_sheets import MockSheetsClient
from src.integrations.contracts.product_catalogues import PLACEHOLDER_IMAGE_URL
from src.utils.config_loader import load_settings


def test_health_returns_fixed_status(client):
    response = client.get("/")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "online"
    assert body["mensagem"] == "Backend da Loja da Profe funcionando!"
    assert "versao" in body


def test_list_products_returns_every_row(client):
    response = client.get("/produtos")

    assert response.status_code == 200
    products = response.json()
    assert [p["ID"] for p in products] == ["1", "2"]
    assert products[0]["Imagens"] == [PLACEHOLDER_IMAGE_URL]
    assert products[1]["Imagens"] == ["https://img/2a.jpg"]
    assert products[1]["URL_Imagem"] == "https://img/2a.jpg"


def test_get_product_by_id(client):
    response = client.get("/produtos/1")

    assert response.status_code == 200
    assert response.json()["ID"] == "1"
    assert response.json()["Nome"] == "Caderno"


def test_get_product_by_numeric_equivalent_id(client):
    response = client.get("/produtos/1.0")

    assert response.status_code == 200
    assert response.json()["ID"] == "1"


def test_get_unknown_product_is_404(client):
    response = client.get("/produtos/99")

    assert response.status_code == 404
    assert response.json()["detail"] == "Produto não encontrado."


def test_spreadsheet_failure_is_generic_500(settings, payments):
    sheets = MockSheetsClient(error=RuntimeError("invalid_grant: secret token details"))
    client = TestClient(create_app(settings, sheets_client=sheets, payments_client=payments))

    list_response = client.get("/produtos")
    item_response = client.get("/produtos/1")

    assert list_response.status_code == 500
    assert item_response.status_code == 500
    assert "secret token" not in list_response.text
    assert "secret token" not in item_response.text


def test_mock_integrations_mode_serves_seed_catalogue(env):
    env["INTEGRATIONS_MODE"] = "mock"
    client = TestClient(create_app(load_settings(env)))

    response = client.get("/produtos")

    assert response.status_code == 200
    assert [p["ID"] for p in response.json()] == ["1", "2"]
    assert client.post("/create_preference", json={"items": [{"id": "1", "title": "x", "quantity": 1, "unit_price": 5}]}).status_code == 201


def test_exponent_ids_are_not_found(client):
    assert client.get("/produtos/1e5000").status_code == 404
    assert client.get("/produtos/1e1000000").status_code == 404

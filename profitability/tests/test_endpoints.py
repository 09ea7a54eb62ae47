"""
Testes de integração para endpoints de lucratividade.

Para executar:
    pytest profitability/tests/test_endpoints.py -v
"""
import pytest
from fastapi.testclient import TestClient
from app import app

client = TestClient(app)

PRODUCT = {"cost_item": 20.0, "pack_cost": 2.0, "tax_percent": 0.0}

FBA_CHANNEL = {
    "channel_type": "amazon_fba",
    "enabled": True,
    "sale_price": 80.0,
    "commission_pct": 15.0,
    "ads_pct": 5.0,
    "inbound_freight": 3.0,
    "prep_center": 1.0,
}


def test_calculate_success():
    """Testa endpoint POST /profitability/calculate com dados válidos"""
    response = client.post(
        "/profitability/calculate",
        json={"product": PRODUCT, "channel": FBA_CHANNEL}
    )

    assert response.status_code == 200
    data = response.json()

    assert data["channel_type"] == "amazon_fba"
    assert data["result"]["profit"] == 38.0
    assert data["result"]["margin"] == 47.5
    assert data["result"]["roi"] == 158.33
    assert data["status"] == "Excelente"
    assert "breakdown" in data["result"]


def test_calculate_rejects_inapplicable_field():
    """Testa se campo que não se aplica ao canal é recusado"""
    channel = {"channel_type": "shopee", "sale_price": 50.0, "prep_center": 2.0}

    response = client.post(
        "/profitability/calculate",
        json={"product": PRODUCT, "channel": channel}
    )

    assert response.status_code == 422


def test_calculate_unknown_channel_type():
    """Testa endpoint com canal inválido"""
    response = client.post(
        "/profitability/calculate",
        json={"product": PRODUCT, "channel": {"channel_type": "canal_inexistente"}}
    )

    assert response.status_code == 422


def test_calculate_all_omits_disabled_channels():
    """Testa endpoint POST /profitability/calculate-all"""
    product = {
        **PRODUCT,
        "channels": {
            "amazon_fba": FBA_CHANNEL,
            "shopee": {"channel_type": "shopee", "enabled": False, "sale_price": 50.0},
        },
    }

    response = client.post("/profitability/calculate-all", json={"product": product})

    assert response.status_code == 200
    data = response.json()

    assert list(data["results"].keys()) == ["amazon_fba"]
    assert data["results"]["amazon_fba"]["margin"] == 47.5
    assert data["analysis"]["active_channels"] == 1
    assert data["analysis"]["total_channels"] == 2
    assert data["analysis"]["best_channel"] == "amazon_fba"


def test_price_for_margin_success():
    """Testa endpoint POST /profitability/price-for-margin"""
    response = client.post(
        "/profitability/price-for-margin",
        json={"product": PRODUCT, "channel": FBA_CHANNEL, "target_margin": 30.0}
    )

    assert response.status_code == 200
    assert response.json()["price"] == 52.0


def test_price_for_margin_unreachable():
    """Testa se margem inatingível devolve 422 com a soma dos percentuais"""
    response = client.post(
        "/profitability/price-for-margin",
        json={"product": PRODUCT, "channel": FBA_CHANNEL, "target_margin": 80.0}
    )

    assert response.status_code == 422
    detail = response.json()["detail"]
    assert detail["percent_total"] == pytest.approx(20.0)
    assert detail["percent_sum"] == pytest.approx(100.0)


def test_suggest_prices():
    """Testa endpoint POST /profitability/suggest-prices"""
    response = client.post(
        "/profitability/suggest-prices",
        json={"product": PRODUCT, "channel": FBA_CHANNEL}
    )

    assert response.status_code == 200
    suggestions = response.json()["suggestions"]

    assert [s["target_margin"] for s in suggestions] == [20.0, 30.0, 40.0]
    assert suggestions[1]["price"] == 52.0


def test_channels_listing():
    """Testa endpoint GET /profitability/channels"""
    response = client.get("/profitability/channels")

    assert response.status_code == 200
    data = response.json()

    assert len(data["supported_channels"]) == 14
    assert data["channels"]["shopee"]["default_commission"] == 12.0
    assert "gateway_pct" in data["channels"]["site"]["fields"]


def test_channel_defaults():
    """Testa endpoint GET /profitability/channels/{channel_type}/defaults"""
    response = client.get("/profitability/channels/ml_full/defaults")

    assert response.status_code == 200
    data = response.json()
    assert data["channel_type"] == "ml_full"
    assert data["commission_pct"] == 14.0
    assert data["enabled"] is False


def test_channel_defaults_unsupported():
    """Testa defaults para canal não suportado"""
    response = client.get("/profitability/channels/canal_inexistente/defaults")

    assert response.status_code == 422
    assert "supported_channels" in response.json()["detail"]


def test_validate_success():
    """Testa endpoint POST /profitability/validate com dados válidos"""
    response = client.post(
        "/profitability/validate",
        json={"channel_type": "amazon_fbm", "price": 100.0, "cost_item": 40.0}
    )

    assert response.status_code == 200
    assert response.json()["valid"] is True


def test_validate_invalid():
    """Testa endpoint POST /profitability/validate com dados inválidos"""
    response = client.post(
        "/profitability/validate",
        json={"channel_type": "canal_invalido", "price": -5.0, "cost_item": 10.0, "tax_percent": 120.0}
    )

    assert response.status_code == 422
    data = response.json()
    assert "errors" in data["detail"]
    assert len(data["detail"]["errors"]) >= 3  # price, tax_percent E channel inválidos


def test_calculate_rejects_non_finite_values():
    """Testa se o cálculo rejeita valores não finitos"""
    response = client.post(
        "/profitability/calculate",
        json={"product": {"cost_item": "inf"}, "channel": FBA_CHANNEL}
    )

    assert response.status_code == 422


def test_validate_negative_channel_specific_field():
    """Testa se /validate verifica os campos específicos do canal"""
    response = client.post(
        "/profitability/validate",
        json={"channel_type": "ml_flex", "price": 100.0, "cost_item": 40.0, "flex_revenue": -4.0}
    )

    assert response.status_code == 422
    errors = response.json()["detail"]["errors"]
    assert any("flex_revenue" in error for error in errors)


def test_validate_inapplicable_channel_field():
    """Testa se /validate rejeita campo que não se aplica ao canal"""
    response = client.post(
        "/profitability/validate",
        json={"channel_type": "shopee", "price": 100.0, "cost_item": 40.0, "inbound_freight": 5.0}
    )

    assert response.status_code == 422
    errors = response.json()["detail"]["errors"]
    assert errors == ["inbound_freight não se aplica ao canal 'shopee'"]


def test_validate_applicable_channel_field():
    """Testa se /validate aceita os campos específicos do próprio canal"""
    response = client.post(
        "/profitability/validate",
        json={"channel_type": "ml_full", "price": 100.0, "cost_item": 40.0,
              "inbound_freight": 5.0, "prep_center": 1.0}
    )

    assert response.status_code == 200

from __future__ import annotations

import logging

import pytest
from fastapi.testclient import TestClient

from quote_app.main import app


client = TestClient(app)


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_effective_rate_with_default_regime():
    response = client.post(
        "/taxes/effective-rate",
        json={"regime_id": "presumido_padrao", "operation_type": "venda", "revenue": 1000},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["rate"] == pytest.approx(23.57)
    assert sum(item["amount"] for item in body["breakdown"]) == pytest.approx(235.7)


def test_effective_rate_with_incomplete_regime_is_rejected():
    response = client.post(
        "/taxes/effective-rate",
        json={
            "operation_type": "servicos",
            "regime": {"id": "x", "name": "X", "type": "simples", "rates": {"anexoI": 4.0}},
        },
    )
    assert response.status_code == 422
    assert response.json()["error"] == "ConfigurationError"


def test_unknown_regime_id():
    response = client.post("/taxes/effective-rate", json={"regime_id": "nope", "operation_type": "venda"})
    assert response.status_code == 422


def test_commission_with_default_table():
    response = client.post(
        "/commissions/resolve",
        json={"table_id": "channel_indicator", "contract_term_months": 12, "monthly_revenue": 500.01},
    )
    assert response.status_code == 200
    assert response.json() == {"table_id": "channel_indicator", "rate": 0.84}


def test_commission_with_inline_table():
    response = client.post(
        "/commissions/resolve",
        json={
            "contract_term_months": 24,
            "table": {"kind": "flat", "id": "custom", "name": "Custom", "rates": {"12": 1.0, "24": 1.5}},
        },
    )
    assert response.status_code == 200
    assert response.json()["rate"] == 1.5


def test_commission_lookup_failure():
    response = client.post("/commissions/resolve", json={"table_id": "channel_indicator", "contract_term_months": 12})
    assert response.status_code == 422
    assert response.json()["error"] == "CommissionLookupError"


def test_unknown_commission_table():
    response = client.post("/commissions/resolve", json={"table_id": "ghost", "contract_term_months": 12})
    assert response.status_code == 404


def test_payback():
    response = client.post(
        "/payback/validate",
        json={"installation_fee": 1000, "service_cost": 0, "monthly_revenue": 100, "contract_term_months": 36},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["result"] == {"actual_months": 10, "max_months": 18, "is_valid": True}


def test_dre_uses_configured_ratios_by_default():
    response = client.post("/dre", json={"monthly_revenue": 1000, "setup_revenue": 0, "contract_period_months": 12})
    assert response.status_code == 200
    assert response.json()["net_profit"] == pytest.approx(4800)


def test_first_month_validation_errors():
    response = client.post("/dre/first-month", json={"monthly_revenue": -10, "contract_period": 12})
    assert response.status_code == 422


def test_proposal_id_lifecycle():
    first = client.post("/proposals/next-id", json={"proposal_type": "FIBER", "existing": []})
    assert first.json() == {"proposal_id": "Prop_Inter_Fibra_001_v1"}

    bumped = client.post(
        "/proposals/new-version",
        json={"current_id": "Prop_Inter_Fibra_001_v1", "existing": ["Prop_Inter_Fibra_001_v1"]},
    )
    assert bumped.json() == {"proposal_id": "Prop_Inter_Fibra_001_v2"}

    parsed = client.get("/proposals/Prop_Inter_Fibra_001_v2/parse")
    assert parsed.json() == {"proposal_type": "FIBER", "prefix": "Prop_Inter_Fibra", "sequence": 1, "version": 2}


def test_invalid_proposal_id():
    assert client.get("/proposals/not-an-id/parse").status_code == 422
    response = client.post("/proposals/new-version", json={"current_id": "bad", "existing": []})
    assert response.status_code == 422
    assert response.json()["error"] == "InvalidIdentifierError"


def test_payback_with_infinite_fee_is_undefined():
    response = client.post(
        "/payback/validate",
        json={"installation_fee": "inf", "monthly_revenue": 100, "contract_term_months": 36},
    )
    assert response.status_code == 200
    assert response.json()["result"] == {"actual_months": None, "max_months": 18, "is_valid": False}


def test_requests_are_logged(caplog):
    caplog.set_level(logging.INFO, logger="quote_app.main")

    client.get("/health")

    messages = [record.getMessage() for record in caplog.records if record.name == "quote_app.main"]
    assert any(message.startswith("GET /health -> 200") for message in messages)


def test_proposal_endpoints_accept_records():
    response = client.post(
        "/proposals/next-id",
        json={"proposal_type": "VM", "existing": [{"base_id": "Prop_MV_004_v1"}, "Prop_MV_002_v1"]},
    )
    assert response.json() == {"proposal_id": "Prop_MV_005_v1"}

    bumped = client.post(
        "/proposals/new-version",
        json={"current_id": "Prop_Inter_Fibra_001_v1", "existing": [{"base_id": "Prop_Inter_Fibra_001_v1"}]},
    )
    assert bumped.json() == {"proposal_id": "Prop_Inter_Fibra_001_v2"}

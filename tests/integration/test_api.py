"""Integration tests for API endpoints"""

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def offer_payload():
    """Bank comparison rows as the website sends them"""
    return {
        "offers": [
            {
                "id": "icici",
                "bankName": "ICICI Bank",
                "annualRatePercent": 11.0,
                "maxPrincipal": 4000000,
                "processingFee": "1.5%",
                "approvalProbabilityPercent": 78,
                "processingTime": "48 hours",
            },
            {
                "id": "hdfc",
                "bankName": "HDFC Bank",
                "annualRatePercent": 10.5,
                "maxPrincipal": 5000000,
                "processingFee": "1%",
                "approvalProbabilityPercent": 92,
                "processingTime": "24 hours",
                "logo": "/banks/hdfc.svg",
            },
            {
                "id": "axis",
                "bankName": "Axis Bank",
                "annualRatePercent": 10.75,
                "maxPrincipal": 3500000,
                "processingFee": "₹4,999 flat",
                "approvalProbabilityPercent": 85,
            },
        ]
    }


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "pyrme-loans"}


def test_metrics_endpoint(client: TestClient):
    """Test Prometheus metrics endpoint"""
    client.post("/v1/emi", json={"principal": 500000, "annualRatePercent": 10.5, "termMonths": 36})

    response = client.get("/metrics")
    assert response.status_code == 200
    assert "pyrme_calculation_total" in response.text
    assert "http_request_duration_seconds" in response.text


def test_request_id_header(client: TestClient):
    """Generated when absent, echoed when supplied"""
    generated = client.get("/health")
    assert generated.headers["X-Request-ID"]

    echoed = client.get("/health", headers={"X-Request-ID": "trace-123"})
    assert echoed.headers["X-Request-ID"] == "trace-123"


def test_emi_endpoint(client: TestClient):
    """Test POST /v1/emi with the calculator defaults"""
    response = client.post(
        "/v1/emi",
        json={"principal": 500000, "annualRatePercent": 10.5, "termMonths": 36},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["monthlyInstallment"] == 16251
    assert data["totalPayment"] == 16251 * 36
    assert data["totalInterest"] == 16251 * 36 - 500000
    assert data["principalShare"] + data["interestShare"] == pytest.approx(100, abs=0.01)


def test_emi_endpoint_accepts_snake_case(client: TestClient):
    response = client.post(
        "/v1/emi",
        json={"principal": 120000, "annual_rate_percent": 0, "term_months": 12},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["monthlyInstallment"] == 10000
    assert data["totalInterest"] == 0


@pytest.mark.parametrize(
    "payload",
    [
        {"principal": 0, "annualRatePercent": 10.5, "termMonths": 36},
        {"principal": 500000, "annualRatePercent": -1, "termMonths": 36},
        {"principal": 500000, "annualRatePercent": 10.5, "termMonths": 0},
        {"principal": 500000, "annualRatePercent": 10.5, "termMonths": 10000},
        {"principal": 500000, "annualRatePercent": 10.5},
    ],
)
def test_emi_endpoint_rejects_invalid_input(client: TestClient, payload):
    response = client.post("/v1/emi", json=payload)
    assert response.status_code == 422


def test_emi_schedule_endpoint(client: TestClient):
    """Test POST /v1/emi/schedule"""
    response = client.post(
        "/v1/emi/schedule",
        json={"principal": 500000, "annualRatePercent": 10.5, "termMonths": 36},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["summary"]["monthlyInstallment"] == 16251
    assert len(data["schedule"]) == 36
    assert data["schedule"][0] == {
        "month": 1,
        "installment": 16251,
        "interestComponent": 4375,
        "principalComponent": 11876,
        "closingBalance": 488124,
    }
    assert data["schedule"][-1]["closingBalance"] == 0
    assert sum(row["principalComponent"] for row in data["schedule"]) == 500000


def test_eligibility_endpoint(client: TestClient):
    """Test POST /v1/eligibility"""
    response = client.post(
        "/v1/eligibility",
        json={"declaredCreditScore": 700, "monthlyIncome": 50000, "requestedPrincipal": 500000},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["score"] == 83
    assert data["band"] == "Excellent"
    assert data["description"] == "You have a high chance of approval with competitive rates."
    assert data["factors"] == [
        {"label": "CIBIL Score", "value": "700", "status": "fair"},
        {"label": "Income", "value": "₹50,000", "status": "good"},
        {"label": "Loan/Income Ratio", "value": "83.3%", "status": "good"},
    ]


def test_eligibility_endpoint_poor_band(client: TestClient):
    response = client.post(
        "/v1/eligibility",
        json={"declaredCreditScore": 300, "monthlyIncome": 15000, "requestedPrincipal": 5000000},
    )

    assert response.status_code == 200
    assert response.json()["band"] == "Poor"
    assert response.json()["score"] == 20


@pytest.mark.parametrize(
    "payload",
    [
        {"declaredCreditScore": 250, "monthlyIncome": 50000, "requestedPrincipal": 500000},
        {"declaredCreditScore": 950, "monthlyIncome": 50000, "requestedPrincipal": 500000},
        {"declaredCreditScore": 700, "monthlyIncome": 0, "requestedPrincipal": 500000},
        {"declaredCreditScore": 700, "monthlyIncome": 50000, "requestedPrincipal": 0},
    ],
)
def test_eligibility_endpoint_rejects_invalid_input(client: TestClient, payload):
    response = client.post("/v1/eligibility", json=payload)
    assert response.status_code == 422


def test_offer_rank_endpoint(client: TestClient, offer_payload):
    """Test POST /v1/offers/rank"""
    response = client.post("/v1/offers/rank", json=offer_payload)

    assert response.status_code == 200
    offers = response.json()["offers"]
    assert [o["id"] for o in offers] == ["hdfc", "axis", "icici"]
    assert [o["annualRatePercent"] for o in offers] == [10.5, 10.75, 11.0]
    assert [o["recommended"] for o in offers] == [True, False, False]

    hdfc = offers[0]
    assert hdfc["bankName"] == "HDFC Bank"
    assert hdfc["processingFee"] == "1%"
    assert hdfc["approvalProbabilityPercent"] == 92
    assert hdfc["logo"] == "/banks/hdfc.svg"  # unknown fields pass through


def test_offer_rank_endpoint_empty(client: TestClient):
    response = client.post("/v1/offers/rank", json={"offers": []})

    assert response.status_code == 200
    assert response.json() == {"offers": []}


def test_offer_rank_endpoint_rejects_negative_rate(client: TestClient):
    response = client.post(
        "/v1/offers/rank",
        json={"offers": [{"id": "x", "annualRatePercent": -1, "maxPrincipal": 100000}]},
    )
    assert response.status_code == 422


@pytest.mark.parametrize(
    "payload",
    [
        {"principal": 1e29, "annualRatePercent": 10.5, "termMonths": 36},
        {"principal": 1e13, "annualRatePercent": 10.5, "termMonths": 36},
        {"principal": 500000, "annualRatePercent": 150, "termMonths": 36},
    ],
)
def test_emi_endpoint_rejects_out_of_range_amounts(client: TestClient, payload):
    response = client.post("/v1/emi", json=payload)
    assert response.status_code == 422


def test_emi_endpoint_accepts_max_principal(client: TestClient):
    response = client.post("/v1/emi", json={"principal": 1e12, "annualRatePercent": 10.5, "termMonths": 36})
    assert response.status_code == 200


def test_eligibility_endpoint_rejects_huge_principal(client: TestClient):
    response = client.post(
        "/v1/eligibility",
        json={"declaredCreditScore": 700, "monthlyIncome": 1, "requestedPrincipal": 1e27},
    )
    assert response.status_code == 422


def test_eligibility_endpoint_unroundable_ratio_is_422(client: TestClient):
    """Tiny income passes the schema; the domain rejects the ratio"""
    response = client.post(
        "/v1/eligibility",
        json={"declaredCreditScore": 700, "monthlyIncome": 1e-20, "requestedPrincipal": 1e12},
    )
    assert response.status_code == 422


def test_offer_rank_endpoint_echoes_offers_unchanged(client: TestClient, offer_payload):
    """Only `recommended` is added; numbers, omissions and unknown fields stay as sent"""
    response = client.post("/v1/offers/rank", json=offer_payload)

    assert response.status_code == 200
    sent = {o["id"]: o for o in offer_payload["offers"]}
    for offer in response.json()["offers"]:
        recommended = offer.pop("recommended")
        assert isinstance(recommended, bool)
        assert offer == sent[offer["id"]]

    assert response.json()["offers"][0]["maxPrincipal"] == 5000000
    assert isinstance(response.json()["offers"][0]["maxPrincipal"], int)


def test_offer_rank_endpoint_minimal_offer(client: TestClient):
    response = client.post(
        "/v1/offers/rank",
        json={"offers": [{"id": "sbi", "annualRatePercent": 10, "maxPrincipal": 2000000}]},
    )

    assert response.status_code == 200
    assert response.json() == {
        "offers": [{"id": "sbi", "annualRatePercent": 10, "maxPrincipal": 2000000, "recommended": True}]
    }

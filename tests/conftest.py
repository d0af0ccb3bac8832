"""Pytest fixtures for testing"""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from pyrme_loans.api.main import create_app
from pyrme_loans.domain.models import ApplicantProfile, LoanOffer


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    return TestClient(create_app())


@pytest.fixture
def sample_profile() -> ApplicantProfile:
    """Salaried applicant: CIBIL 700, 50k/month, asking for 5 lakh"""
    return ApplicantProfile(
        declared_credit_score=700,
        monthly_income=Decimal("50000"),
        requested_principal=Decimal("500000"),
    )


@pytest.fixture
def sample_offers() -> list[LoanOffer]:
    """Partner bank offers in the order a bank feed returns them"""
    return [
        LoanOffer(
            identifier="icici",
            annual_rate_percent=Decimal("11.0"),
            max_principal=Decimal("4000000"),
            processing_fee_descriptor="1.5%",
            approval_probability_percent=78,
            bank_name="ICICI Bank",
        ),
        LoanOffer(
            identifier="hdfc",
            annual_rate_percent=Decimal("10.5"),
            max_principal=Decimal("5000000"),
            processing_fee_descriptor="1%",
            approval_probability_percent=92,
            bank_name="HDFC Bank",
        ),
        LoanOffer(
            identifier="axis",
            annual_rate_percent=Decimal("10.75"),
            max_principal=Decimal("3500000"),
            processing_fee_descriptor="₹4,999 flat",
            approval_probability_percent=85,
            bank_name="Axis Bank",
        ),
    ]

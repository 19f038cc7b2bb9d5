"""Pytest fixtures for testing"""

import pytest
from datetime import date
from decimal import Decimal
from fastapi.testclient import TestClient
from payoff_projector.api.main import create_app
from payoff_projector.domain.interest import RoundingPolicy
from payoff_projector.domain.models import Account


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    app = create_app()
    return TestClient(app)


@pytest.fixture
def rounding() -> RoundingPolicy:
    """Two-decimal currency rounding"""
    return RoundingPolicy()


@pytest.fixture
def start_date() -> date:
    return date(2024, 1, 15)


@pytest.fixture
def single_card() -> Account:
    """$1000 at 12% APR (1% monthly) with a $50 minimum"""
    return Account(
        name="Visa",
        balance=Decimal("1000.00"),
        apr=Decimal("0.12"),
        minimum_payment=Decimal("50.00"),
    )


@pytest.fixture
def small_and_large() -> list[Account]:
    """Small store card listed after a large loan"""
    return [
        Account(name="Car Loan", balance=Decimal("5000.00"), apr=Decimal("0.12"), minimum_payment=Decimal("80.00")),
        Account(name="Store Card", balance=Decimal("200.00"), apr=Decimal("0.12"), minimum_payment=Decimal("30.00")),
    ]


@pytest.fixture
def household_accounts() -> list[Account]:
    """Mixed portfolio of four accounts"""
    return [
        Account(
            name="Credit Card",
            balance=Decimal("10000.00"),
            apr=Decimal("0.1299"),
            minimum_payment=Decimal("200.00"),
            account_number="*7890",
        ),
        Account(name="Family Loan", balance=Decimal("1000.00"), apr=Decimal("0"), minimum_payment=Decimal("50.00")),
        Account(name="Line of Credit", balance=Decimal("4000.00"), apr=Decimal("0.0624"), minimum_payment=Decimal("150.00")),
        Account(name="Store Card", balance=Decimal("20000.00"), apr=Decimal("0.1999"), minimum_payment=Decimal("350.00")),
    ]

"""Pytest configuration and fixtures."""

from datetime import date, datetime

import pytest

from emprestai.config import LoanSettings
from emprestai.engine import calculate_loan
from emprestai.models import (
    ApplicantProfile,
    LoanReference,
    LoanSimulation,
    RequestLocation,
)


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def valid_cpf() -> str:
    """Known-valid reference CPF."""
    return "52998224725"


@pytest.fixture
def sample_user_id() -> str:
    """Sample user ID."""
    return "user-test-001"


@pytest.fixture
def created_at() -> datetime:
    """Fixed submission time."""
    return datetime(2024, 1, 31, 10, 0, 0)


@pytest.fixture
def disbursed_on() -> date:
    """Fixed disbursement date."""
    return date(2024, 1, 31)


@pytest.fixture
def settings() -> LoanSettings:
    """Default back-office settings."""
    return LoanSettings()


@pytest.fixture
def simulation() -> LoanSimulation:
    """R$ 10.000 over 12 months at 2.5% a.m."""
    return calculate_loan(10000, 12, 0.025)


@pytest.fixture
def references() -> list[LoanReference]:
    """Two complete references."""
    return [
        LoanReference(name="Maria Souza", phone="11987654321", relationship="Mãe"),
        LoanReference(name="João Lima", phone="2133445566", relationship="Amigo"),
    ]


@pytest.fixture
def location() -> RequestLocation:
    """Location in São Paulo."""
    return RequestLocation(
        latitude=-23.55052,
        longitude=-46.633308,
        accuracy=12.5,
        city="São Paulo",
        state="SP",
    )


@pytest.fixture
def sample_profile(sample_user_id: str, valid_cpf: str) -> ApplicantProfile:
    """Sample applicant."""
    return ApplicantProfile(
        user_id=sample_user_id,
        full_name="Ana Paula Ferreira",
        email="ana@example.com",
        cpf=valid_cpf,
        phone="11987654321",
        city="São Paulo",
        state="SP",
        monthly_income=5200.0,
    )

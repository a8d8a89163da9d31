"""Loan models: simulations, requests and scheduled payments."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from emprestai.models.enums import LoanStatus, PaymentStatus


@dataclass(frozen=True)
class AmortizationEntry:
    """One installment of a Price-table schedule."""

    installment: int  # 1-based
    payment: float
    principal: float
    interest: float
    balance: float  # Outstanding principal after this installment


@dataclass(frozen=True)
class LoanSimulation:
    """Result of a loan simulation.

    Amounts are BRL major units. ``interest_rate`` is the monthly rate
    as a decimal fraction (0.025 for 2.5% a.m.).
    """

    amount: float
    term_months: int
    interest_rate: float
    monthly_payment: float
    total_amount: float
    total_interest: float
    amortization_schedule: tuple[AmortizationEntry, ...] = ()


@dataclass(frozen=True)
class LoanReference:
    """Personal reference attached to a loan request."""

    name: str
    phone: str  # Digits only
    relationship: str


@dataclass(frozen=True)
class RequestLocation:
    """Where the borrower was when submitting the request."""

    latitude: float
    longitude: float
    accuracy: float | None = None
    city: str | None = None
    state: str | None = None


@dataclass(frozen=True)
class LoanRequest:
    """Loan request as persisted by the application flow."""

    request_id: str
    user_id: str
    amount: float
    term_months: int
    interest_rate: float
    monthly_payment: float
    total_amount: float
    status: LoanStatus
    created_at: datetime
    purpose: str | None = None
    request_location: RequestLocation | None = None
    references: tuple[LoanReference, ...] = ()
    admin_notes: str | None = None
    reviewed_by: str | None = None
    reviewed_at: datetime | None = None
    disbursed_at: datetime | None = None


@dataclass(frozen=True)
class LoanPayment:
    """Scheduled installment of a disbursed loan."""

    payment_id: str
    loan_request_id: str
    installment_number: int  # 1, 2, 3, ...
    due_date: date
    amount: Decimal
    status: PaymentStatus = PaymentStatus.PENDING
    paid_amount: Decimal | None = None
    paid_at: datetime | None = None
    late_fee: Decimal | None = None

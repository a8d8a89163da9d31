"""Domain models for loan origination."""

from emprestai.models.enums import LoanStatus, PaymentStatus
from emprestai.models.loan import (
    AmortizationEntry,
    LoanPayment,
    LoanReference,
    LoanRequest,
    LoanSimulation,
    RequestLocation,
)
from emprestai.models.profile import ApplicantProfile

__all__ = [
    "AmortizationEntry",
    "ApplicantProfile",
    "LoanPayment",
    "LoanReference",
    "LoanRequest",
    "LoanSimulation",
    "LoanStatus",
    "PaymentStatus",
    "RequestLocation",
]

"""Applicant profile model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ApplicantProfile:
    """Borrower profile.

    ``cpf`` and ``phone`` hold digits only; formatting is applied for
    display.
    """

    user_id: str
    full_name: str
    email: str
    cpf: str
    phone: str
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    occupation: str | None = None
    employer: str | None = None
    monthly_income: float | None = None

"""Applicant registration and profile display."""

from __future__ import annotations

import logging

from emprestai.cpf import format_cpf, validate_cpf
from emprestai.exceptions import InvalidCPFError
from emprestai.formatting import format_currency, format_phone, only_digits, parse_money_input
from emprestai.models import ApplicantProfile

logger = logging.getLogger(__name__)


def register_profile(
    user_id: str,
    full_name: str,
    email: str,
    cpf: str,
    phone: str,
    *,
    monthly_income: str | float | None = None,
    address: str | None = None,
    city: str | None = None,
    state: str | None = None,
    zip_code: str | None = None,
    occupation: str | None = None,
    employer: str | None = None,
) -> ApplicantProfile:
    """Build a profile from registration form input.

    CPF and phone are stored as digits. ``monthly_income`` accepts the
    masked form text (read as cents) or a number.

    Raises
    ------
    InvalidCPFError
        If ``cpf`` fails check-digit validation.
    """
    if not validate_cpf(cpf):
        raise InvalidCPFError(f"Invalid CPF: {cpf!r}")

    if isinstance(monthly_income, str):
        income = parse_money_input(monthly_income)
    else:
        income = monthly_income

    profile = ApplicantProfile(
        user_id=user_id,
        full_name=full_name.strip(),
        email=email.strip().lower(),
        cpf=only_digits(cpf),
        phone=only_digits(phone),
        address=address,
        city=city,
        state=state.upper() if state else state,
        zip_code=only_digits(zip_code) if zip_code else zip_code,
        occupation=occupation,
        employer=employer,
        monthly_income=income,
    )
    logger.debug("Registered profile for user %s", user_id)
    return profile


def display_profile(profile: ApplicantProfile) -> dict[str, str]:
    """Display strings for the profile screens."""
    return {
        "full_name": profile.full_name,
        "email": profile.email,
        "cpf": format_cpf(profile.cpf),
        "phone": format_phone(profile.phone),
        "monthly_income": (
            format_currency(profile.monthly_income) if profile.monthly_income else ""
        ),
        "location": ", ".join(p for p in (profile.city, profile.state) if p),
    }

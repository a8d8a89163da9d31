"""Loan application flow: from a shown simulation to a pending request."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime
from typing import Iterable, Mapping

from emprestai.config import LoanSettings, SimulatorConfig
from emprestai.exceptions import IncompleteApplicationError, InvalidLoanParametersError
from emprestai.formatting import only_digits
from emprestai.models import (
    LoanReference,
    LoanRequest,
    LoanSimulation,
    LoanStatus,
    RequestLocation,
)

logger = logging.getLogger(__name__)

MIN_REFERENCES = 2


def clamp_simulator_amount(raw: str, config: SimulatorConfig | None = None) -> float:
    """Turn the simulator's typed amount into a value inside the slider range.

    Only digits are read (``"10.000"`` is ten thousand); empty input
    counts as zero and is clamped up to the minimum.
    """
    config = config or SimulatorConfig()
    digits = only_digits(raw)
    value = float(digits) if digits else 0.0
    return min(max(value, config.min_amount), config.max_amount)


def check_loan_parameters(
    amount: float,
    term_months: int,
    settings: LoanSettings | None = None,
) -> None:
    """Reject amounts or terms outside the configured limits.

    Raises
    ------
    InvalidLoanParametersError
        If ``amount`` or ``term_months`` fall outside the settings range.
    """
    settings = settings or LoanSettings()
    min_amount, max_amount = settings.amount_range
    min_term, max_term = settings.term_range

    if not min_amount <= amount <= max_amount:
        raise InvalidLoanParametersError(
            f"Amount {amount:.2f} outside the accepted range {min_amount:.2f}-{max_amount:.2f}"
        )
    if not min_term <= term_months <= max_term:
        raise InvalidLoanParametersError(
            f"Term of {term_months} months outside the accepted range {min_term}-{max_term}"
        )


def collect_references(
    references: Iterable[Mapping[str, str] | LoanReference],
    minimum: int = MIN_REFERENCES,
) -> tuple[LoanReference, ...]:
    """Keep complete references, storing phones as digits.

    A reference is complete when name, phone and relationship are all
    filled in.

    Raises
    ------
    IncompleteApplicationError
        If fewer than ``minimum`` complete references remain.
    """
    collected = []
    for ref in references:
        if isinstance(ref, LoanReference):
            name, phone, relationship = ref.name, ref.phone, ref.relationship
        else:
            name = ref.get("name", "")
            phone = ref.get("phone", "")
            relationship = ref.get("relationship", "")

        if not (name and phone and relationship):
            continue
        collected.append(
            LoanReference(name=name.strip(), phone=only_digits(phone), relationship=relationship)
        )

    if len(collected) < minimum:
        raise IncompleteApplicationError(
            f"At least {minimum} complete references are required, got {len(collected)}"
        )
    return tuple(collected)


def build_loan_request(
    user_id: str,
    simulation: LoanSimulation,
    *,
    created_at: datetime,
    settings: LoanSettings | None = None,
    purpose: str | None = None,
    references: Iterable[Mapping[str, str] | LoanReference] = (),
    location: RequestLocation | None = None,
    request_id: str | None = None,
) -> LoanRequest:
    """Create a pending loan request from the simulation the borrower saw.

    The simulation figures are copied as-is and never recomputed, so the
    persisted request matches what was on screen.

    Parameters
    ----------
    user_id : str
        Borrower ID.
    simulation : LoanSimulation
        Simulation handed over from the simulator.
    created_at : datetime
        Submission time.
    settings : LoanSettings | None
        Limits and requirements; defaults when omitted.
    purpose : str | None
        Free-text loan purpose.
    references : Iterable
        Personal references, at least two complete ones.
    location : RequestLocation | None
        Borrower location, mandatory when the settings require it.
    request_id : str | None
        ID to use; a UUID is generated when omitted.

    Returns
    -------
    LoanRequest
        New request in ``pending`` status.
    """
    settings = settings or LoanSettings()
    check_loan_parameters(simulation.amount, simulation.term_months, settings)

    if settings.location_required and location is None:
        raise IncompleteApplicationError("Request location is required")

    collected = collect_references(references)

    request = LoanRequest(
        request_id=request_id or str(uuid.uuid4()),
        user_id=user_id,
        amount=simulation.amount,
        term_months=simulation.term_months,
        interest_rate=simulation.interest_rate,
        monthly_payment=simulation.monthly_payment,
        total_amount=simulation.total_amount,
        status=LoanStatus.PENDING,
        created_at=created_at,
        purpose=purpose or None,
        request_location=location,
        references=collected,
    )

    logger.info(
        "Loan request %s created for user %s: %.2f over %d months",
        request.request_id,
        user_id,
        request.amount,
        request.term_months,
        extra={"request_id": request.request_id, "user_id": user_id},
    )
    return request

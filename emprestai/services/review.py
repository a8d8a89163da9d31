"""Back-office review: status transitions and disbursement schedules."""

from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from datetime import date, datetime
from decimal import Decimal
from typing import Iterable

from dateutil.relativedelta import relativedelta

from emprestai.exceptions import InvalidLoanStateError
from emprestai.models import LoanPayment, LoanRequest, LoanStatus, PaymentStatus

logger = logging.getLogger(__name__)

ALLOWED_TRANSITIONS: dict[LoanStatus, frozenset[LoanStatus]] = {
    LoanStatus.PENDING: frozenset(
        {LoanStatus.UNDER_REVIEW, LoanStatus.APPROVED, LoanStatus.REJECTED}
    ),
    LoanStatus.UNDER_REVIEW: frozenset({LoanStatus.APPROVED, LoanStatus.REJECTED}),
    LoanStatus.APPROVED: frozenset({LoanStatus.DISBURSED, LoanStatus.REJECTED}),
    LoanStatus.DISBURSED: frozenset({LoanStatus.COMPLETED}),
    LoanStatus.REJECTED: frozenset(),
    LoanStatus.COMPLETED: frozenset(),
}


def can_transition(current: LoanStatus, target: LoanStatus) -> bool:
    return target in ALLOWED_TRANSITIONS[current]


def review_loan(
    request: LoanRequest,
    status: LoanStatus,
    *,
    reviewer_id: str,
    reviewed_at: datetime,
    notes: str | None = None,
) -> LoanRequest:
    """Move a request to ``status`` and record who reviewed it and when.

    Returns a new request; the original is left untouched. Moving to
    ``disbursed`` also stamps ``disbursed_at``.

    Raises
    ------
    InvalidLoanStateError
        If the transition is not allowed.
    """
    status = LoanStatus(status)
    if not can_transition(request.status, status):
        raise InvalidLoanStateError(
            f"Loan {request.request_id} cannot go from {request.status.value} to {status.value}"
        )

    updated = replace(
        request,
        status=status,
        admin_notes=notes if notes is not None else request.admin_notes,
        reviewed_by=reviewer_id,
        reviewed_at=reviewed_at,
        disbursed_at=reviewed_at if status == LoanStatus.DISBURSED else request.disbursed_at,
    )
    logger.info(
        "Loan %s moved from %s to %s by %s",
        request.request_id,
        request.status.value,
        status.value,
        reviewer_id,
        extra={
            "request_id": request.request_id,
            "reviewer_id": reviewer_id,
            "status": status.value,
        },
    )
    return updated


def build_payment_schedule(request: LoanRequest, disbursed_on: date) -> list[LoanPayment]:
    """One pending payment per installment, due monthly after disbursement.

    Due dates advance by calendar months from ``disbursed_on``, clamping
    to the last day of shorter months. Every installment is the fixed
    ``monthly_payment`` computed when the request was made.
    """
    amount = Decimal(str(request.monthly_payment))
    return [
        LoanPayment(
            payment_id=str(uuid.uuid4()),
            loan_request_id=request.request_id,
            installment_number=i,
            due_date=disbursed_on + relativedelta(months=i),
            amount=amount,
            status=PaymentStatus.PENDING,
        )
        for i in range(1, request.term_months + 1)
    ]


def disburse_loan(
    request: LoanRequest,
    *,
    reviewer_id: str,
    disbursed_at: datetime,
    notes: str | None = None,
) -> tuple[LoanRequest, list[LoanPayment]]:
    """Disburse an approved request and build its payment schedule."""
    disbursed = review_loan(
        request,
        LoanStatus.DISBURSED,
        reviewer_id=reviewer_id,
        reviewed_at=disbursed_at,
        notes=notes,
    )
    payments = build_payment_schedule(disbursed, disbursed_at.date())
    logger.info("Scheduled %d payments for loan %s", len(payments), request.request_id)
    return disbursed, payments


def mark_overdue(payments: Iterable[LoanPayment], as_of: date) -> list[LoanPayment]:
    """Flag pending payments due before ``as_of`` as overdue."""
    result = []
    for payment in payments:
        if payment.status == PaymentStatus.PENDING and payment.due_date < as_of:
            payment = replace(payment, status=PaymentStatus.OVERDUE)
        result.append(payment)
    return result

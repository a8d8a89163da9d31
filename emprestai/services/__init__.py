"""Application, review and profile services."""

from emprestai.services.application import (
    build_loan_request,
    check_loan_parameters,
    clamp_simulator_amount,
    collect_references,
)
from emprestai.services.profile import display_profile, register_profile
from emprestai.services.review import (
    build_payment_schedule,
    can_transition,
    disburse_loan,
    mark_overdue,
    review_loan,
)

__all__ = [
    "build_loan_request",
    "build_payment_schedule",
    "can_transition",
    "check_loan_parameters",
    "clamp_simulator_amount",
    "collect_references",
    "disburse_loan",
    "display_profile",
    "mark_overdue",
    "register_profile",
    "review_loan",
]

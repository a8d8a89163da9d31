"""Loan simulation engine."""

from emprestai.engine.amortization import calculate_loan, fixed_payment, round_cents

__all__ = ["calculate_loan", "fixed_payment", "round_cents"]

"""Price-table (French) amortization engine.

Fixed installments: the payment ``M`` that repays principal ``P`` over
``n`` months at monthly rate ``r`` is::

    M = P * r(1+r)^n / ((1+r)^n - 1)        (r > 0)
    M = P / n                               (r == 0)

``M`` is rounded to cents once and that value drives the whole schedule.
The running balance between periods is kept unrounded; rounding is
applied only to the values emitted in each entry, so schedules carry a
small and reproducible drift.
"""

import math

from emprestai.exceptions import InvalidLoanParametersError
from emprestai.models.loan import AmortizationEntry, LoanSimulation


def round_cents(value: float) -> float:
    """Round to 2 decimals, halves toward positive infinity.

    Python's ``round`` uses banker's rounding. Non-finite values are
    returned unchanged.
    """
    if not math.isfinite(value):
        return value
    return math.floor(value * 100 + 0.5) / 100


def fixed_payment(amount: float, term_months: int, monthly_interest_rate: float) -> float:
    """Unrounded PMT for a Price-table loan.

    When ``r * (1 + r) ** n`` overflows a float the payment is its limit,
    ``amount * r``: interest only, the balance never amortizes.
    """
    if monthly_interest_rate == 0:
        return amount / term_months
    try:
        factor = (1 + monthly_interest_rate) ** term_months
    except OverflowError:
        factor = math.inf
    growth = monthly_interest_rate * factor
    if math.isinf(growth):
        return amount * monthly_interest_rate
    return amount * growth / (factor - 1)


def calculate_loan(
    amount: float,
    term_months: int,
    monthly_interest_rate: float,
) -> LoanSimulation:
    """Simulate a fixed-installment loan.

    Parameters
    ----------
    amount : float
        Principal in BRL.
    term_months : int
        Number of monthly installments (>= 1).
    monthly_interest_rate : float
        Monthly rate as a decimal fraction (0.025 = 2.5% a.m.).

    Returns
    -------
    LoanSimulation
        Payment, totals and the full amortization schedule.

    Raises
    ------
    InvalidLoanParametersError
        If the term is below one month, amount or rate are negative,
        or any input is not a finite number.
    """
    _check_domain(amount, term_months, monthly_interest_rate)

    rate = monthly_interest_rate
    monthly_payment = round_cents(fixed_payment(amount, term_months, rate))

    schedule = []
    balance = amount
    for i in range(1, term_months + 1):
        interest = balance * rate
        principal = monthly_payment - interest
        balance = balance - principal

        schedule.append(
            AmortizationEntry(
                installment=i,
                payment=round_cents(monthly_payment),
                principal=round_cents(principal),
                interest=round_cents(interest),
                balance=max(0.0, round_cents(balance)),
            )
        )

    total_amount = monthly_payment * term_months
    total_interest = total_amount - amount

    return LoanSimulation(
        amount=amount,
        term_months=term_months,
        interest_rate=monthly_interest_rate,
        monthly_payment=monthly_payment,
        total_amount=round_cents(total_amount),
        total_interest=round_cents(total_interest),
        amortization_schedule=tuple(schedule),
    )


def _check_domain(amount: float, term_months: int, rate: float) -> None:
    if isinstance(term_months, bool) or not isinstance(term_months, int):
        raise InvalidLoanParametersError(f"term_months must be an integer, got {term_months!r}")
    if term_months < 1:
        raise InvalidLoanParametersError(f"term_months must be at least 1, got {term_months}")
    if not math.isfinite(amount) or amount < 0:
        raise InvalidLoanParametersError(f"amount must be a non-negative number, got {amount}")
    if not math.isfinite(rate) or rate < 0:
        raise InvalidLoanParametersError(f"interest rate must be a non-negative number, got {rate}")

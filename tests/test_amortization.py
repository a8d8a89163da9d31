"""Tests for the Price-table amortization engine."""

import math

import pytest

from emprestai.engine import calculate_loan, fixed_payment, round_cents
from emprestai.exceptions import EmprestAiError, InvalidLoanParametersError
from emprestai.models import LoanSimulation

# (amount, term_months, rate) with small rounding drift
TYPICAL_LOANS = [
    (10000, 12, 0.025),
    (1000, 3, 0.01),
    (5000, 6, 0.03),
    (12000, 12, 0),
]

# Short, default-settings maximum, 30-year and zero-rate loans
DRIFT_LOANS = [
    (10000, 12, 0.025),
    (50000, 48, 0.0499),
    (500000, 360, 0.03),
    (12001, 7, 0),
]


def _drift_bound(n: int, r: float) -> float:
    """Largest balance drift a half-cent error in the payment can build up."""
    accumulation = n if r == 0 else ((1 + r) ** n - 1) / r
    return 0.005 * accumulation


def _closed_form_payment(amount: float, n: int, r: float) -> float:
    factor = (1 + r) ** n
    return amount * r * factor / (factor - 1)


class TestRoundCents:
    """Tests for round_cents."""

    def test_plain_value(self) -> None:
        assert round_cents(974.871287) == 974.87

    def test_half_rounds_up(self) -> None:
        # round() would give 0.12 (banker's rounding)
        assert round_cents(0.125) == 0.13

    def test_negative_half_rounds_toward_positive(self) -> None:
        assert round_cents(-0.125) == -0.12

    def test_already_rounded(self) -> None:
        assert round_cents(1000.0) == 1000.0

    def test_tiny_negative_becomes_zero(self) -> None:
        assert round_cents(-1e-9) == 0

    def test_non_finite_unchanged(self) -> None:
        assert round_cents(math.inf) == math.inf
        assert math.isnan(round_cents(math.nan))


class TestFixedPayment:
    """Tests for the unrounded PMT."""

    def test_zero_rate_divides_evenly(self) -> None:
        assert fixed_payment(12000, 12, 0) == 1000

    def test_matches_closed_form(self) -> None:
        assert fixed_payment(10000, 12, 0.025) == pytest.approx(
            _closed_form_payment(10000, 12, 0.025)
        )

    def test_overflowing_factor_uses_interest_only_limit(self) -> None:
        # 2 ** 1200 does not fit in a float
        assert fixed_payment(10000, 1200, 1.0) == 10000.0


class TestCalculateLoan:
    """Tests for calculate_loan."""

    def test_returns_simulation(self, simulation: LoanSimulation) -> None:
        assert isinstance(simulation, LoanSimulation)
        assert simulation.amount == 10000
        assert simulation.term_months == 12
        assert simulation.interest_rate == 0.025

    def test_monthly_payment_matches_formula(self, simulation: LoanSimulation) -> None:
        expected = round_cents(_closed_form_payment(10000, 12, 0.025))
        assert simulation.monthly_payment == expected
        assert simulation.monthly_payment == 974.87

    def test_totals(self, simulation: LoanSimulation) -> None:
        assert simulation.total_amount == pytest.approx(11698.44)
        assert simulation.total_interest == pytest.approx(1698.44)

    def test_zero_rate(self) -> None:
        result = calculate_loan(12000, 12, 0)

        assert result.monthly_payment == 1000.0
        assert result.total_amount == 12000.0
        assert result.total_interest == 0.0
        assert all(entry.interest == 0 for entry in result.amortization_schedule)
        assert result.amortization_schedule[-1].balance == 0

    def test_first_installments(self, simulation: LoanSimulation) -> None:
        first, second = simulation.amortization_schedule[:2]

        assert first.installment == 1
        assert first.payment == 974.87
        assert first.interest == 250.0
        assert first.principal == 724.87
        assert first.balance == 9275.13

        assert second.installment == 2
        assert second.interest == 231.88
        assert second.principal == 742.99
        assert second.balance == 8532.14

    def test_single_installment(self) -> None:
        result = calculate_loan(1000, 1, 0.02)

        assert result.monthly_payment == 1020.0
        (entry,) = result.amortization_schedule
        assert entry.interest == 20.0
        assert entry.principal == 1000.0
        assert entry.balance == 0

    def test_interest_decreases_and_principal_increases(
        self, simulation: LoanSimulation
    ) -> None:
        schedule = simulation.amortization_schedule
        for previous, current in zip(schedule, schedule[1:]):
            assert current.interest <= previous.interest
            assert current.principal >= previous.principal

    def test_rate_echoed_unrounded(self) -> None:
        result = calculate_loan(10000, 12, 0.0499)
        assert result.interest_rate == 0.0499

    def test_zero_amount(self) -> None:
        result = calculate_loan(0, 6, 0.02)

        assert result.monthly_payment == 0
        assert len(result.amortization_schedule) == 6
        assert result.total_interest == 0

    def test_overflowing_term_does_not_raise(self) -> None:
        result = calculate_loan(10000, 1200, 1.0)

        assert result.monthly_payment == 10000.0
        assert len(result.amortization_schedule) == 1200
        assert all(e.balance == 10000.0 for e in result.amortization_schedule)
        assert result.total_amount == 12000000.0
        assert result.total_interest == 11990000.0

    def test_idempotent(self) -> None:
        assert calculate_loan(25000, 36, 0.0299) == calculate_loan(25000, 36, 0.0299)

    def test_result_is_immutable(self, simulation: LoanSimulation) -> None:
        with pytest.raises(AttributeError):
            simulation.monthly_payment = 1.0  # type: ignore[misc]


class TestScheduleInvariants:
    """Schedule properties that hold for typical loans."""

    @pytest.mark.parametrize("amount,term,rate", TYPICAL_LOANS)
    def test_length_matches_term(self, amount: float, term: int, rate: float) -> None:
        result = calculate_loan(amount, term, rate)
        assert len(result.amortization_schedule) == term
        assert [e.installment for e in result.amortization_schedule] == list(range(1, term + 1))

    @pytest.mark.parametrize("term", [1, 2, 24, 60, 120])
    def test_length_for_long_terms(self, term: int) -> None:
        result = calculate_loan(50000, term, 0.0499)
        assert len(result.amortization_schedule) == term

    @pytest.mark.parametrize("amount,term,rate", TYPICAL_LOANS)
    def test_payment_splits_into_principal_and_interest(
        self, amount: float, term: int, rate: float
    ) -> None:
        result = calculate_loan(amount, term, rate)
        for entry in result.amortization_schedule:
            assert entry.payment == result.monthly_payment
            assert abs(entry.principal + entry.interest - entry.payment) <= 0.01 + 1e-9

    @pytest.mark.parametrize("amount,term,rate", TYPICAL_LOANS)
    def test_balance_never_increases(self, amount: float, term: int, rate: float) -> None:
        balances = [e.balance for e in calculate_loan(amount, term, rate).amortization_schedule]
        assert balances == sorted(balances, reverse=True)
        assert all(b >= 0 for b in balances)

    @pytest.mark.parametrize("amount,term,rate", TYPICAL_LOANS)
    def test_final_balance_reaches_zero(self, amount: float, term: int, rate: float) -> None:
        result = calculate_loan(amount, term, rate)
        assert result.amortization_schedule[-1].balance <= 0.05

    @pytest.mark.parametrize("amount,term,rate", TYPICAL_LOANS)
    def test_principal_is_conserved(self, amount: float, term: int, rate: float) -> None:
        result = calculate_loan(amount, term, rate)
        total_principal = sum(e.principal for e in result.amortization_schedule)
        assert abs(total_principal - amount) <= 0.10

    def test_rounded_payment_drives_schedule(self) -> None:
        # The unrounded PMT would repay exactly; the cent-rounded one
        # leaves the drift that shows up in the last balance.
        result = calculate_loan(10000, 12, 0.025)
        assert 0.01 <= result.amortization_schedule[-1].balance <= 0.03


class TestRoundingDrift:
    """Drift from the cent-rounded payment grows with term and rate."""

    @pytest.mark.parametrize("amount,term,rate", DRIFT_LOANS)
    def test_final_balance_within_bound(self, amount: float, term: int, rate: float) -> None:
        result = calculate_loan(amount, term, rate)
        assert result.amortization_schedule[-1].balance <= _drift_bound(term, rate) + 0.005

    @pytest.mark.parametrize("amount,term,rate", DRIFT_LOANS)
    def test_principal_sum_within_bound(self, amount: float, term: int, rate: float) -> None:
        result = calculate_loan(amount, term, rate)
        total_principal = sum(e.principal for e in result.amortization_schedule)
        assert abs(total_principal - amount) <= _drift_bound(term, rate) + 0.005 * term

    def test_default_settings_largest_loan(self) -> None:
        # R$ 50.000 over 48 months at 4,99% a.m. overpays by about R$ 0,79
        result = calculate_loan(50000, 48, 0.0499)
        total_principal = sum(e.principal for e in result.amortization_schedule)

        assert 0.10 < total_principal - 50000 <= 1.00
        assert result.amortization_schedule[-1].balance == 0.0

    def test_long_loan_drift_is_large(self) -> None:
        result = calculate_loan(500000, 360, 0.03)
        total_principal = sum(e.principal for e in result.amortization_schedule)

        assert abs(total_principal - 500000) > 100


class TestInvalidParameters:
    """Degenerate inputs are rejected."""

    @pytest.mark.parametrize("term", [0, -1, -12])
    def test_term_below_one(self, term: int) -> None:
        with pytest.raises(InvalidLoanParametersError, match="term_months"):
            calculate_loan(10000, term, 0.025)

    def test_non_integer_term(self) -> None:
        with pytest.raises(InvalidLoanParametersError):
            calculate_loan(10000, 1.5, 0.025)  # type: ignore[arg-type]

    def test_negative_amount(self) -> None:
        with pytest.raises(InvalidLoanParametersError, match="amount"):
            calculate_loan(-100, 12, 0.025)

    def test_negative_rate(self) -> None:
        with pytest.raises(InvalidLoanParametersError, match="interest rate"):
            calculate_loan(10000, 12, -0.01)

    @pytest.mark.parametrize("amount,rate", [(math.nan, 0.02), (math.inf, 0.02), (1000, math.nan)])
    def test_non_finite(self, amount: float, rate: float) -> None:
        with pytest.raises(InvalidLoanParametersError):
            calculate_loan(amount, 12, rate)

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            calculate_loan(10000, 0, 0.025)

    def test_error_is_emprestai_error(self) -> None:
        with pytest.raises(EmprestAiError):
            calculate_loan(10000, 0, 0)

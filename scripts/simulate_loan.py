#!/usr/bin/env python3
"""Simulate a Price-table loan and print the amortization schedule.

Usage:
    python scripts/simulate_loan.py --amount "R$ 10.000,00" --term 12 --rate 0.025
    python scripts/simulate_loan.py --amount 5000 --term 6 --rate 0 --json
"""

import argparse
import json
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from emprestai.config import SimulatorConfig
from emprestai.engine import calculate_loan
from emprestai.exceptions import InvalidLoanParametersError
from emprestai.formatting import format_currency, format_percentage, parse_currency_input
from emprestai.logging import get_logger, setup_logging
from emprestai.models import LoanSimulation
from emprestai.sinks import simulation_to_dict

logger = get_logger(__name__)


def print_simulation(simulation: LoanSimulation) -> None:
    """Print summary and schedule as a plain-text table."""
    print(f"Valor solicitado:  {format_currency(simulation.amount)}")
    print(f"Prazo:             {simulation.term_months} meses")
    print(f"Taxa mensal:       {format_percentage(simulation.interest_rate)}")
    print(f"Parcela:           {format_currency(simulation.monthly_payment)}")
    print(f"Total a pagar:     {format_currency(simulation.total_amount)}")
    print(f"Total de juros:    {format_currency(simulation.total_interest)}")
    print()
    print(f"{'Nº':>4}  {'Parcela':>16}  {'Amortização':>16}  {'Juros':>16}  {'Saldo':>16}")
    for entry in simulation.amortization_schedule:
        print(
            f"{entry.installment:>4}  "
            f"{format_currency(entry.payment):>16}  "
            f"{format_currency(entry.principal):>16}  "
            f"{format_currency(entry.interest):>16}  "
            f"{format_currency(entry.balance):>16}"
        )


def main() -> None:
    """Main entry point."""
    defaults = SimulatorConfig()
    parser = argparse.ArgumentParser(description="Simulate a fixed-installment loan")
    parser.add_argument(
        "--amount",
        type=str,
        default=str(defaults.default_amount),
        help="Loan amount, plain or pt-BR formatted (default: 10000)",
    )
    parser.add_argument(
        "--term",
        type=int,
        default=defaults.default_term_months,
        help="Number of monthly installments (default: 12)",
    )
    parser.add_argument(
        "--rate",
        type=float,
        default=defaults.default_interest_rate,
        help="Monthly interest rate as a decimal fraction (default: 0.025)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the simulation as JSON instead of a table",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Log level (default: WARNING)",
    )
    args = parser.parse_args()

    setup_logging(level=args.log_level)

    amount = parse_currency_input(args.amount)
    try:
        simulation = calculate_loan(amount, args.term, args.rate)
    except InvalidLoanParametersError as exc:
        logger.error("Invalid loan parameters: %s", exc)
        sys.exit(2)

    if args.json:
        print(json.dumps(simulation_to_dict(simulation), indent=2, ensure_ascii=False))
    else:
        print_simulation(simulation)


if __name__ == "__main__":
    main()

"""EmprestAí loan core: Price-table simulation, Brazilian formatters and back-office services."""

from emprestai.cpf import format_cpf, validate_cpf
from emprestai.engine import calculate_loan
from emprestai.formatting import (
    format_currency,
    format_percentage,
    format_phone,
    parse_currency_input,
)
from emprestai.models import AmortizationEntry, LoanSimulation

__version__ = "0.1.0"

__all__ = [
    "AmortizationEntry",
    "LoanSimulation",
    "calculate_loan",
    "format_cpf",
    "format_currency",
    "format_percentage",
    "format_phone",
    "parse_currency_input",
    "validate_cpf",
]

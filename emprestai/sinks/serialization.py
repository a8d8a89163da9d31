"""Shared serialization utilities for sinks and the simulation hand-off."""

from dataclasses import fields, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Mapping

from emprestai.models import AmortizationEntry, LoanSimulation

# Field names used by the web client when it stores a simulation
_SIMULATION_KEYS = {
    "amount": "amount",
    "term_months": "termMonths",
    "interest_rate": "interestRate",
    "monthly_payment": "monthlyPayment",
    "total_amount": "totalAmount",
    "total_interest": "totalInterest",
}


def to_dict(obj: Any) -> dict:
    """Convert object to dictionary."""
    if is_dataclass(obj):
        return dataclass_to_dict(obj)
    elif isinstance(obj, dict):
        return obj
    else:
        return {"value": str(obj)}


def dataclass_to_dict(obj: Any) -> dict:
    """Convert dataclass to dict with proper serialization.

    Walks fields directly instead of ``asdict()`` so nested frozen
    dataclasses and tuples serialize the same way.
    """
    return {f.name: serialize_value(getattr(obj, f.name)) for f in fields(obj)}


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif is_dataclass(value) and not isinstance(value, type):
        return dataclass_to_dict(value)
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    return value


def simulation_to_dict(simulation: LoanSimulation) -> dict[str, Any]:
    """Serialize a simulation with the client's camelCase keys."""
    data: dict[str, Any] = {
        key: getattr(simulation, name) for name, key in _SIMULATION_KEYS.items()
    }
    data["amortizationSchedule"] = [
        dataclass_to_dict(entry) for entry in simulation.amortization_schedule
    ]
    return data


def simulation_from_dict(data: Mapping[str, Any]) -> LoanSimulation:
    """Rebuild a simulation serialized by ``simulation_to_dict``.

    Values are taken verbatim; nothing is recomputed.

    Raises
    ------
    KeyError
        If a mandatory field is missing.
    """
    values = {name: data[key] for name, key in _SIMULATION_KEYS.items()}
    values["term_months"] = int(values["term_months"])
    schedule = tuple(
        AmortizationEntry(
            installment=int(entry["installment"]),
            payment=entry["payment"],
            principal=entry["principal"],
            interest=entry["interest"],
            balance=entry["balance"],
        )
        for entry in data.get("amortizationSchedule", [])
    )
    return LoanSimulation(amortization_schedule=schedule, **values)

"""Output sinks and serialization helpers."""

from emprestai.sinks.json_file import JsonFileSink
from emprestai.sinks.serialization import (
    serialize_value,
    simulation_from_dict,
    simulation_to_dict,
    to_dict,
)

__all__ = [
    "JsonFileSink",
    "serialize_value",
    "simulation_from_dict",
    "simulation_to_dict",
    "to_dict",
]

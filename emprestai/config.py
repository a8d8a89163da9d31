"""Configuration management for emprestai."""

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Iterable, Mapping

from emprestai.exceptions import ConfigurationError

SETTING_DESCRIPTIONS = {
    "interest_rate": "Taxa de juros mensal padrão",
    "min_amount": "Valor mínimo de empréstimo",
    "max_amount": "Valor máximo de empréstimo",
    "min_term": "Prazo mínimo em meses",
    "max_term": "Prazo máximo em meses",
    "auto_approve_limit": "Limite para aprovação automática",
    "require_location": "Exigir localização na solicitação",
    "require_documents": "Exigir documentos na solicitação",
}


@dataclass
class LoanSettings:
    """Back-office system settings.

    Values are kept as the strings the settings table stores
    (``setting_key`` / ``setting_value`` rows); typed accessors parse
    them on demand. ``interest_rate`` is a monthly percentage
    (``"4.99"`` means 4.99% a.m.).
    """

    interest_rate: str = "4.99"
    min_amount: str = "500"
    max_amount: str = "50000"
    min_term: str = "3"
    max_term: str = "48"
    auto_approve_limit: str = "0"
    require_location: str = "true"
    require_documents: str = "true"

    @property
    def monthly_rate(self) -> float:
        """Monthly interest rate as a decimal fraction (0.0499)."""
        return self._number("interest_rate") / 100

    @property
    def amount_range(self) -> tuple[float, float]:
        """Accepted loan amount bounds, inclusive."""
        return self._number("min_amount"), self._number("max_amount")

    @property
    def term_range(self) -> tuple[int, int]:
        """Accepted term bounds in months, inclusive."""
        return int(self._number("min_term")), int(self._number("max_term"))

    @property
    def auto_approve_amount(self) -> float:
        return self._number("auto_approve_limit")

    @property
    def location_required(self) -> bool:
        return self.require_location.strip().lower() == "true"

    @property
    def documents_required(self) -> bool:
        return self.require_documents.strip().lower() == "true"

    def validate(self) -> None:
        """Parse every numeric setting, raising on the first bad value."""
        min_amount, max_amount = self.amount_range
        min_term, max_term = self.term_range
        self.monthly_rate
        self.auto_approve_amount
        if min_amount > max_amount:
            raise ConfigurationError(
                f"min_amount {min_amount} is greater than max_amount {max_amount}"
            )
        if min_term > max_term:
            raise ConfigurationError(f"min_term {min_term} is greater than max_term {max_term}")

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> "LoanSettings":
        """Merge ``setting_key``/``setting_value`` rows over the defaults.

        Unknown keys are ignored.
        """
        known = {f.name for f in fields(cls)}
        values = {}
        for record in records:
            key = record["setting_key"]
            if key in known:
                values[key] = str(record["setting_value"])
        settings = cls(**values)
        settings.validate()
        return settings

    def to_records(self) -> list[dict[str, str]]:
        """Rows for upserting into the settings table."""
        return [
            {
                "setting_key": f.name,
                "setting_value": getattr(self, f.name),
                "description": SETTING_DESCRIPTIONS.get(f.name, ""),
            }
            for f in fields(self)
        ]

    def _number(self, name: str) -> float:
        raw = getattr(self, name)
        try:
            return float(str(raw).replace(",", "."))
        except ValueError as exc:
            raise ConfigurationError(f"Setting {name} is not numeric: {raw!r}") from exc


@dataclass
class SimulatorConfig:
    """Borrower-facing simulator bounds and defaults."""

    min_amount: float = 1000.0
    max_amount: float = 500000.0
    amount_step: float = 1000.0
    default_amount: float = 10000.0
    default_term_months: int = 12
    default_interest_rate: float = 0.025


@dataclass
class EmprestAiConfig:
    """Main configuration for emprestai."""

    settings: LoanSettings = field(default_factory=LoanSettings)
    simulator: SimulatorConfig = field(default_factory=SimulatorConfig)
    output_dir: Path = field(default_factory=lambda: Path("output"))
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "EmprestAiConfig":
        """Create config from environment variables."""
        import os

        settings = LoanSettings(
            interest_rate=os.getenv("EMPRESTAI_INTEREST_RATE", LoanSettings.interest_rate),
        )
        settings.validate()

        seed = os.getenv("SEED")
        try:
            parsed_seed = int(seed) if seed else None
        except ValueError as exc:
            raise ConfigurationError(f"SEED must be an integer, got {seed!r}") from exc

        return cls(
            settings=settings,
            output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
            seed=parsed_seed,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )

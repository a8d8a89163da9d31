"""Loan request generator driven by the simulation engine."""

from __future__ import annotations

from datetime import datetime

from emprestai.config import LoanSettings
from emprestai.engine import calculate_loan
from emprestai.generators.base import BaseGenerator
from emprestai.models import ApplicantProfile, LoanReference, LoanRequest, RequestLocation
from emprestai.services.application import build_loan_request

# Terms offered by the simulator (months)
TERM_CHOICES = [3, 6, 12, 18, 24, 36, 48, 60]

RELATIONSHIPS = ["Pai", "Mãe", "Irmão", "Irmã", "Cônjuge", "Amigo", "Colega de trabalho"]


class LoanRequestGenerator(BaseGenerator):
    """Generate pending loan requests for applicants."""

    def __init__(
        self,
        seed: int | None = None,
        settings: LoanSettings | None = None,
    ) -> None:
        super().__init__(seed)
        self.settings = settings or LoanSettings()

    def generate_for(self, profile: ApplicantProfile, created_at: datetime) -> LoanRequest:
        """Simulate a loan inside the configured limits and submit it.

        Parameters
        ----------
        profile : ApplicantProfile
            Borrower.
        created_at : datetime
            Submission time.

        Returns
        -------
        LoanRequest
            Request in ``pending`` status.
        """
        min_amount, max_amount = self.settings.amount_range
        min_term, max_term = self.settings.term_range

        # Amounts in steps of R$ 500
        low = int(-(-min_amount // 500))
        high = max(low, int(max_amount // 500))
        amount = float(self.rng.randint(low, high) * 500)
        amount = min(max(amount, min_amount), max_amount)

        terms = [t for t in TERM_CHOICES if min_term <= t <= max_term] or [min_term]
        term_months = self.rng.choice(terms)

        simulation = calculate_loan(amount, term_months, self.settings.monthly_rate)

        return build_loan_request(
            profile.user_id,
            simulation,
            created_at=created_at,
            settings=self.settings,
            purpose=self.rng.choice([None, "Reforma", "Quitar dívidas", "Viagem", "Capital de giro"]),
            references=[self._reference() for _ in range(2)],
            location=self._location(profile),
            request_id=self.fake.uuid4(),
        )

    def _reference(self) -> LoanReference:
        return LoanReference(
            name=self.fake.name(),
            phone=f"{self.rng.randint(11, 99)}9{self.rng.randint(0, 99999999):08d}",
            relationship=self.rng.choice(RELATIONSHIPS),
        )

    def _location(self, profile: ApplicantProfile) -> RequestLocation:
        # Bounding box of mainland Brazil
        return RequestLocation(
            latitude=round(self.rng.uniform(-33.7, 5.2), 6),
            longitude=round(self.rng.uniform(-73.9, -34.8), 6),
            accuracy=round(self.rng.uniform(5, 100), 1),
            city=profile.city,
            state=profile.state,
        )

"""Applicant profile generator."""

from __future__ import annotations

from typing import Iterator

from emprestai.cpf import generate_cpf
from emprestai.generators.base import BaseGenerator
from emprestai.models import ApplicantProfile
from emprestai.services.profile import register_profile

# Area codes of the largest metro regions
AREA_CODES = ["11", "21", "31", "41", "47", "51", "61", "71", "81", "85", "91"]


class ApplicantGenerator(BaseGenerator):
    """Generate synthetic borrower profiles."""

    # Monthly income range (BRL)
    INCOME_RANGE = (1500, 30000)

    def generate(self) -> ApplicantProfile:
        """Generate a single applicant.

        Returns
        -------
        ApplicantProfile
            Profile with a valid CPF and a mobile phone.
        """
        income = self.rng.lognormvariate(mu=8.5, sigma=0.6)
        income = max(self.INCOME_RANGE[0], min(income, self.INCOME_RANGE[1]))

        return register_profile(
            user_id=self.fake.uuid4(),
            full_name=self.fake.name(),
            email=self.fake.email(),
            cpf=generate_cpf(self.rng),
            phone=self._mobile_number(),
            monthly_income=round(income, 2),
            address=self.fake.street_address(),
            city=self.fake.city(),
            state=self.fake.estado_sigla(),
            zip_code=self.fake.postcode(),
            occupation=self.fake.job(),
            employer=self.fake.company(),
        )

    def generate_batch(self, count: int) -> Iterator[ApplicantProfile]:
        """Generate multiple applicants.

        Parameters
        ----------
        count : int
            Number of applicants to generate.

        Yields
        ------
        ApplicantProfile
            Generated profiles.
        """
        for _ in range(count):
            yield self.generate()

    def _mobile_number(self) -> str:
        """11-digit mobile number: area code, leading 9, eight digits."""
        area = self.rng.choice(AREA_CODES)
        return f"{area}9{self.rng.randint(0, 99999999):08d}"

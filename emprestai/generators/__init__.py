"""Sample data generators."""

from emprestai.generators.applicant import ApplicantGenerator
from emprestai.generators.loan_request import LoanRequestGenerator

__all__ = ["ApplicantGenerator", "LoanRequestGenerator"]

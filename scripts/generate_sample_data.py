#!/usr/bin/env python3
"""Generate a sample back-office data set as JSON files.

Creates applicants and loan requests, walks part of them through
review and disbursement, and writes profiles, requests, payments and
the dashboard summary to the output folder.

Usage:
    python scripts/generate_sample_data.py --applicants 50 --output-dir output
"""

import argparse
import sys
from datetime import datetime, timedelta
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from emprestai.config import EmprestAiConfig
from emprestai.generators import ApplicantGenerator, LoanRequestGenerator
from emprestai.logging import get_logger, setup_logging
from emprestai.models import LoanStatus
from emprestai.services import disburse_loan, mark_overdue, review_loan
from emprestai.sinks import JsonFileSink
from emprestai.store import LoanStore

logger = get_logger(__name__)

REVIEWER_ID = "admin-sample"


def populate_store(
    store: LoanStore,
    config: EmprestAiConfig,
    num_applicants: int,
    reference_time: datetime,
) -> None:
    """Generate applicants and requests, then review a share of them."""
    applicant_gen = ApplicantGenerator(seed=config.seed)
    request_gen = LoanRequestGenerator(seed=config.seed, settings=config.settings)
    rng = request_gen.rng

    for profile in applicant_gen.generate_batch(num_applicants):
        store.add_profile(profile)
        created_at = reference_time - timedelta(days=rng.randint(1, 365))
        request = request_gen.generate_for(profile, created_at)
        store.add_request(request)

        outcome = rng.choices(
            ["pending", "rejected", "approved", "disbursed"],
            weights=[0.3, 0.2, 0.2, 0.3],
            k=1,
        )[0]
        if outcome == "pending":
            continue

        reviewed_at = created_at + timedelta(days=rng.randint(1, 5))
        if outcome == "rejected":
            store.replace_request(
                review_loan(
                    request,
                    LoanStatus.REJECTED,
                    reviewer_id=REVIEWER_ID,
                    reviewed_at=reviewed_at,
                    notes="Renda incompatível",
                )
            )
            continue

        approved = review_loan(
            request, LoanStatus.APPROVED, reviewer_id=REVIEWER_ID, reviewed_at=reviewed_at
        )
        if outcome == "approved":
            store.replace_request(approved)
            continue

        disbursed, payments = disburse_loan(
            approved,
            reviewer_id=REVIEWER_ID,
            disbursed_at=reviewed_at + timedelta(days=1),
        )
        store.replace_request(disbursed)
        store.add_payments(mark_overdue(payments, reference_time.date()))


def main() -> None:
    """Main entry point."""
    config = EmprestAiConfig.from_env()
    parser = argparse.ArgumentParser(description="Generate sample loan origination data")
    parser.add_argument(
        "--applicants",
        type=int,
        default=20,
        help="Number of applicants to generate (default: 20)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=config.seed if config.seed is not None else 42,
        help="Random seed for reproducibility (default: 42)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=config.output_dir,
        help="Directory for the JSON files (default: output)",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Pretty-print JSON output",
    )
    args = parser.parse_args()

    setup_logging(level=config.log_level, format_type=config.log_format)
    config.seed = args.seed

    store = LoanStore()
    populate_store(store, config, args.applicants, reference_time=datetime.now())

    sink = JsonFileSink(args.output_dir, pretty=args.pretty)
    sink.write_batch("profiles", list(store.profiles.values()))
    sink.write_batch("loan_requests", list(store.requests.values()))
    sink.write_batch("loan_payments", store.payments)
    sink.write_batch("dashboard", [store.summary()])
    sink.close()


if __name__ == "__main__":
    main()

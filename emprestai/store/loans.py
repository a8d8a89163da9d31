"""In-memory loan store with referential integrity and dashboard figures."""

from dataclasses import dataclass, field
from datetime import date

from emprestai.engine import round_cents
from emprestai.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    ReferentialIntegrityError,
)
from emprestai.models import (
    ApplicantProfile,
    LoanPayment,
    LoanRequest,
    LoanStatus,
    PaymentStatus,
)

_AWAITING_REVIEW = (LoanStatus.PENDING, LoanStatus.UNDER_REVIEW)
_DISBURSED = (LoanStatus.DISBURSED, LoanStatus.COMPLETED)


@dataclass(frozen=True)
class DashboardSummary:
    """Headline figures of the admin dashboard."""

    total_loans: int
    pending_loans: int  # pending + under review
    approved_loans: int
    rejected_loans: int
    disbursed_loans: int  # disbursed + completed
    total_disbursed: float
    total_clients: int
    overdue_payments: int


@dataclass
class LoanStore:
    """In-memory store for profiles, loan requests and payments."""

    profiles: dict[str, ApplicantProfile] = field(default_factory=dict)
    requests: dict[str, LoanRequest] = field(default_factory=dict)
    payments: list[LoanPayment] = field(default_factory=list)

    # Relationship indexes
    _user_requests: dict[str, list[str]] = field(default_factory=dict)
    _request_payments: dict[str, list[int]] = field(default_factory=dict)

    def add_profile(self, profile: ApplicantProfile) -> None:
        """Add or update a profile."""
        self.profiles[profile.user_id] = profile
        self._user_requests.setdefault(profile.user_id, [])

    def add_request(self, request: LoanRequest) -> None:
        """Add a loan request for a known user."""
        if request.user_id not in self.profiles:
            raise ReferentialIntegrityError(f"Profile {request.user_id} not found")
        if request.request_id in self.requests:
            raise DuplicateEntityError(
                f"Loan request {request.request_id} already exists; use replace_request"
            )

        self.requests[request.request_id] = request
        self._user_requests[request.user_id].append(request.request_id)
        self._request_payments[request.request_id] = []

    def replace_request(self, request: LoanRequest) -> None:
        """Store a new version of an existing request (after review)."""
        if request.request_id not in self.requests:
            raise EntityNotFoundError(f"Loan request {request.request_id} not found")
        self.requests[request.request_id] = request

    def add_payments(self, payments: list[LoanPayment]) -> None:
        """Add scheduled payments for existing requests."""
        for payment in payments:
            if payment.loan_request_id not in self.requests:
                raise ReferentialIntegrityError(
                    f"Loan request {payment.loan_request_id} not found"
                )
            idx = len(self.payments)
            self.payments.append(payment)
            self._request_payments[payment.loan_request_id].append(idx)

    # Query methods
    def get_request(self, request_id: str) -> LoanRequest:
        """Get a loan request by ID."""
        try:
            return self.requests[request_id]
        except KeyError:
            raise EntityNotFoundError(f"Loan request {request_id} not found") from None

    def get_user_requests(self, user_id: str) -> list[LoanRequest]:
        """Get all requests of a user, newest first."""
        request_ids = self._user_requests.get(user_id, [])
        requests = [self.requests[rid] for rid in request_ids]
        return sorted(requests, key=lambda r: r.created_at, reverse=True)

    def payments_for(self, request_id: str) -> list[LoanPayment]:
        """Get payments of a request ordered by installment."""
        indices = self._request_payments.get(request_id, [])
        return sorted((self.payments[i] for i in indices), key=lambda p: p.installment_number)

    def filter_requests(self, status: str = "all", search: str = "") -> list[LoanRequest]:
        """Requests matching a status and a borrower-name search, newest first.

        Parameters
        ----------
        status : str
            A ``LoanStatus`` value, or ``"all"``. Unknown values match
            nothing.
        search : str
            Case-insensitive substring of the borrower's full name.
        """
        needle = search.strip().lower()
        matched = []
        for request in self.requests.values():
            if status != "all" and request.status.value != status:
                continue
            if needle:
                profile = self.profiles.get(request.user_id)
                if profile is None or needle not in profile.full_name.lower():
                    continue
            matched.append(request)
        return sorted(matched, key=lambda r: r.created_at, reverse=True)

    def summary(self, as_of: date | None = None) -> DashboardSummary:
        """Dashboard aggregates.

        Payments count as overdue when flagged so, or, given ``as_of``,
        when still pending past their due date.
        """
        requests = list(self.requests.values())
        overdue = 0
        for payment in self.payments:
            if payment.status == PaymentStatus.OVERDUE:
                overdue += 1
            elif (
                as_of is not None
                and payment.status == PaymentStatus.PENDING
                and payment.due_date < as_of
            ):
                overdue += 1

        return DashboardSummary(
            total_loans=len(requests),
            pending_loans=sum(1 for r in requests if r.status in _AWAITING_REVIEW),
            approved_loans=sum(1 for r in requests if r.status == LoanStatus.APPROVED),
            rejected_loans=sum(1 for r in requests if r.status == LoanStatus.REJECTED),
            disbursed_loans=sum(1 for r in requests if r.status in _DISBURSED),
            total_disbursed=round_cents(
                sum(r.amount for r in requests if r.status in _DISBURSED)
            ),
            total_clients=len(self.profiles),
            overdue_payments=overdue,
        )

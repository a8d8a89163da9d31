"""Enumeration types for loan domain entities."""

from enum import Enum


class LoanStatus(str, Enum):
    PENDING = "pending"
    UNDER_REVIEW = "under_review"
    APPROVED = "approved"
    REJECTED = "rejected"
    DISBURSED = "disbursed"
    COMPLETED = "completed"

    @property
    def label(self) -> str:
        """Display label shown to borrowers and admins."""
        return _LOAN_STATUS_LABELS[self]


class PaymentStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    OVERDUE = "overdue"

    @property
    def label(self) -> str:
        return _PAYMENT_STATUS_LABELS[self]


_LOAN_STATUS_LABELS = {
    LoanStatus.PENDING: "Pendente",
    LoanStatus.UNDER_REVIEW: "Em Análise",
    LoanStatus.APPROVED: "Aprovado",
    LoanStatus.REJECTED: "Recusado",
    LoanStatus.DISBURSED: "Liberado",
    LoanStatus.COMPLETED: "Finalizado",
}

_PAYMENT_STATUS_LABELS = {
    PaymentStatus.PENDING: "Pendente",
    PaymentStatus.PAID: "Pago",
    PaymentStatus.OVERDUE: "Atrasado",
}

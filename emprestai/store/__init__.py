"""In-memory data stores for maintaining entity relationships."""

from emprestai.store.loans import DashboardSummary, LoanStore

__all__ = ["DashboardSummary", "LoanStore"]

"""Custom exception hierarchy for emprestai."""


class EmprestAiError(Exception):
    """Base exception for all emprestai errors."""


class ConfigurationError(EmprestAiError):
    """Raised when configuration is invalid or missing."""


class InvalidLoanParametersError(EmprestAiError, ValueError):
    """Raised when amount, term or rate are outside the accepted domain."""


class InvalidCPFError(EmprestAiError, ValueError):
    """Raised when a taxpayer ID fails check-digit validation."""


class IncompleteApplicationError(EmprestAiError):
    """Raised when a loan application is missing mandatory data."""


class InvalidLoanStateError(EmprestAiError):
    """Raised when a loan request cannot move to the requested status."""


class EntityNotFoundError(EmprestAiError):
    """Raised when a referenced entity does not exist."""


class ReferentialIntegrityError(EntityNotFoundError):
    """Raised when a foreign key reference is violated."""


class DuplicateEntityError(EmprestAiError):
    """Raised when an entity is added under an ID that is already taken."""


class SinkError(EmprestAiError):
    """Raised when a sink operation fails."""

class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class DuplicateAttendanceError(ValidationError):
    """Raised when an employee already has attendance on the requested date."""


class AdvanceCapExceededError(ValidationError):
    """Raised when an advance would push monthly utilization over the cap."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class AuditUnavailableError(DomainError):
    """Raised when the external audit service could not produce a result."""

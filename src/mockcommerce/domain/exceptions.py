"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the API and CLI layers can catch them uniformly.  Every error carries a
machine-readable ``code`` next to its human message.
"""


class DomainException(Exception):
    """Base class for all domain errors."""

    default_code = "DOMAIN_ERROR"

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code


class ValidationError(DomainException):
    """A business rule or invariant was violated."""

    default_code = "VALIDATION_ERROR"


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    default_code = "NOT_FOUND"

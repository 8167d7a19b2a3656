"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class InvalidExpirationError(ValidationError):
    """An expiration date is malformed or lies in the past."""


class DirectoryUnavailableError(DomainException):
    """The transient files directory can't be created or written to."""

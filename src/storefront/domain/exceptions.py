"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the HTTP and CLI layers can catch them uniformly and map them to a
status code or a user-friendly message.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class DomainValidationError(DomainException):
    """A value failed its invariant checks."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class BusinessRuleViolation(DomainException):
    """A valid request conflicts with the current state (stock, duplicates)."""


class EntityAlreadyExistsError(BusinessRuleViolation):
    """An entity with the same identity is already stored."""

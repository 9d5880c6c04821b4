"""Domain-level exceptions.

Every recoverable error is a subclass of DomainException so the menu loop
can catch them uniformly and print a short message instead of crashing.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidInputError(ValidationError):
    """A value typed by the user could not be parsed."""


class PartNotFoundError(DomainException):
    """No part with the requested name exists in the inventory."""

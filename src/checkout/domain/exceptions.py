"""Domain-level exceptions.

Every rejected product, price or purchase date raises a DomainException
subclass, which the CLI turns into a plain error message.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidSizeError(ValidationError):
    """A product size does not satisfy its category's size rule."""


class InvalidPurchaseDateError(ValidationError):
    """A purchase date does not match the purchase datetime format."""

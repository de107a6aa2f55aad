"""Domain-level exceptions.

All failures the storefront reports are expressed as subclasses of
DomainException so the CLI layer can catch them uniformly and display
user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Invalid input, or a transition the current state does not allow."""


class StoreUnavailableError(DomainException):
    """The store API could not be reached or returned an unreadable body."""

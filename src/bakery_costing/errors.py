"""Errors surfaced to API callers."""


class ValidationError(ValueError):
    """User input cannot be saved as given."""


class NotFoundError(LookupError):
    """The requested record does not exist for this owner."""


class PersistenceError(RuntimeError):
    """The document store rejected or failed an operation."""

"""Custom exceptions for the schema layer."""


class DbException(Exception):
    """Base exception for database-related errors."""
    pass


class NoSuchFieldError(DbException, LookupError):
    """Raised when a field index or field name does not resolve to a slot."""
    pass

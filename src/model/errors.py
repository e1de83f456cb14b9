"""Exceptions raised by value models and their adapters."""


class UnsupportedOperationError(Exception):
    """Raised when writing a property that has no writer bound."""


class InvalidArgumentError(ValueError):
    """Raised when an adapter is constructed with inconsistent parameters."""


class BindingError(Exception):
    """Raised when a property accessor cannot be resolved or invoked."""

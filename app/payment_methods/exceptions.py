"""Exceptions raised by payment method adapters."""


class PaymentError(Exception):
    """Base exception for payment-method errors."""
    pass


class ConfigurationError(PaymentError):
    """Raised when settings are missing a key or fail validation."""
    pass


class FormatError(PaymentError):
    """Raised when a value cannot be parsed as a bool, decimal or status."""
    pass


class UnknownStatusError(FormatError):
    """Raised when a transaction names a status that does not exist."""
    pass


class NotConfiguredError(PaymentError):
    """Raised when an adapter is used before ``configure`` was called."""
    pass


class PreconditionError(PaymentError):
    """Raised when an operation is called in a state that does not allow it."""
    pass


InvalidOperationError = PreconditionError

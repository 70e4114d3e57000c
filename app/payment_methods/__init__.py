"""Payment methods a storefront can offer at checkout."""

from .base import PaymentMethod, PaymentMethodDescription
from .exceptions import (
    ConfigurationError,
    FormatError,
    InvalidOperationError,
    NotConfiguredError,
    PaymentError,
    PreconditionError,
    UnknownStatusError,
)
from .models import (
    Order,
    PaymentForm,
    PaymentFormField,
    PaymentInfo,
    PaymentStatus,
    PreparedPayment,
    ReturnUrls,
    SettingsEntry,
)

__all__ = ["PaymentMethod", "PaymentMethodDescription", "PaymentError", "ConfigurationError", "FormatError", "UnknownStatusError", "NotConfiguredError", "PreconditionError", "InvalidOperationError", "Order", "PaymentForm", "PaymentFormField", "PaymentInfo", "PaymentStatus", "PreparedPayment", "ReturnUrls", "SettingsEntry"]

"""Base classes for payment methods hosted by a storefront."""

from abc import ABC, abstractmethod
from typing import Mapping, Optional, Sequence

from .models import Order, PaymentInfo, PreparedPayment, ReturnUrls, SettingsEntry


# ==================== Description ====================

class PaymentMethodDescription(ABC):
    """Static metadata the host needs before any payment method is configured."""

    @abstractmethod
    def get_user_friendly_name(self) -> str:
        """Display name shown to shoppers and operators."""
        pass

    @abstractmethod
    def get_settings_description(self) -> list[SettingsEntry]:
        """Settings the operator has to fill in (service URL, merchant code, ..).

        Returns:
            One entry per setting, in display order
        """
        pass


# ==================== Base Payment Method ====================

class PaymentMethod(ABC):
    """Abstract base class for payment methods a storefront can offer."""

    @abstractmethod
    def configure(self, settings: Mapping[str, str]) -> None:
        """Apply settings collected in the storefront administration.

        Args:
            settings: Raw operator-supplied values keyed by setting id
        """
        pass

    @abstractmethod
    def validate_settings(
        self,
        locale: str,
        settings: Mapping[str, str]
    ) -> list[str]:
        """Validate settings without applying them.

        The payment method cannot be activated until this returns no errors.

        Args:
            locale: Current operator locale
            settings: Settings to validate

        Returns:
            List of error messages, empty when the settings are valid
        """
        pass

    @abstractmethod
    def is_currency_supported(self, code: str) -> bool:
        """Check whether the current settings allow payments in ``code``.

        Args:
            code: Three-letter ISO currency code
        """
        pass

    @abstractmethod
    def create_setup_form(self, order: Order, locale: str) -> Optional[str]:
        """Create the optional setup form shown before payment.

        Args:
            order: Order info (id, price to be paid, ..)
            locale: Current shopper locale

        Returns:
            HTML fragment, or ``None`` when no setup is needed
        """
        pass

    @abstractmethod
    def validate_setup_form(
        self,
        order: Order,
        locale: str,
        form_values: Optional[Mapping[str, str]]
    ) -> list[str]:
        """Validate values submitted from the form built by ``create_setup_form``.

        Args:
            order: Order info (id, price to be paid, ..)
            locale: Current shopper locale
            form_values: Submitted form values

        Returns:
            Error messages to display on the setup form
        """
        pass

    @abstractmethod
    def prepare_payment(
        self,
        order: Order,
        locale: str,
        urls: ReturnUrls,
        setup_form: Optional[Mapping[str, str]] = None
    ) -> PreparedPayment:
        """Prepare the form the shopper sends to the payment portal.

        Args:
            order: Order info (id, price to be paid, ..)
            locale: Current shopper locale, can be forwarded to the portal
            urls: Where the portal should notify the storefront or return to
            setup_form: Values from the setup form, ``None`` when no setup
                was requested

        Returns:
            Payment form plus the transaction id the host has to store
        """
        pass

    @abstractmethod
    def check_payment_status(
        self,
        order: Order,
        transaction_ids: Sequence[str]
    ) -> list[PaymentInfo]:
        """Look up the status of previously prepared payments.

        Args:
            order: Order the transactions belong to
            transaction_ids: Ids returned by ``prepare_payment``

        Returns:
            Payment statuses; not required to correspond 1:1 with
            ``transaction_ids``
        """
        pass

"""InstaPay: a payment method that simulates a payment portal round-trip.

No portal is contacted. The ``Pay`` setting decides whether every payment
succeeds or is cancelled, and the outcome is carried inside the transaction
id so that ``check_payment_status`` can report it later.
"""

import logging
from typing import Mapping, Optional, Sequence

from ..base import PaymentMethod, PaymentMethodDescription
from ..exceptions import ConfigurationError, NotConfiguredError, PreconditionError
from ..models import (
    Order,
    PaymentForm,
    PaymentFormField,
    PaymentInfo,
    PaymentStatus,
    PreparedPayment,
    ReturnUrls,
    SettingsEntry,
    format_invariant_decimal,
)
from .settings import InstaPaySettings, SettingsIds
from .transaction import decode_price, decode_status, encode_transaction

logger = logging.getLogger(__name__)

SETUP_PARAMETER = "SomeParameter"
SETUP_FORM_HTML = f"<input type='text' name='{SETUP_PARAMETER}' required />"


class InstaPayPaymentMethodDescription(PaymentMethodDescription):
    def get_user_friendly_name(self) -> str:
        return "InstaPay"

    def get_settings_description(self) -> list[SettingsEntry]:
        return InstaPaySettings.get_description()


class InstaPayPaymentMethod(PaymentMethod):
    """Payment method that instantly pays or cancels, depending on settings."""

    def __init__(self, settings: Optional[Mapping[str, str]] = None) -> None:
        self._description = InstaPayPaymentMethodDescription()
        self._settings: Optional[InstaPaySettings] = None
        if settings is not None:
            self.configure(settings)

    # ---- settings ----

    def _ensure_configured(self) -> InstaPaySettings:
        if self._settings is None:
            raise NotConfiguredError("InstaPay has not been configured")
        return self._settings

    @property
    def settings(self) -> InstaPaySettings:
        return self._ensure_configured()

    @property
    def is_configured(self) -> bool:
        return self._settings is not None

    def configure(self, settings: Mapping[str, str]) -> None:
        snapshot = InstaPaySettings.parse(settings)
        errors = snapshot.validate()
        self._settings = snapshot
        logger.info("InstaPay configured (%d validation errors)", len(errors))

    def validate_settings(self, locale: str, settings: Mapping[str, str]) -> list[str]:
        return InstaPaySettings.parse(settings).validate()

    def get_user_friendly_name(self) -> str:
        return self._description.get_user_friendly_name()

    def get_settings_description(self) -> list[SettingsEntry]:
        return self._description.get_settings_description()

    # ---- checkout ----

    def is_currency_supported(self, code: str) -> bool:
        return self.settings.supports(code)

    def create_setup_form(self, order: Order, locale: str) -> Optional[str]:
        if self.settings.use_setup:
            return SETUP_FORM_HTML
        return None

    def validate_setup_form(
        self,
        order: Order,
        locale: str,
        form_values: Optional[Mapping[str, str]]
    ) -> list[str]:
        if not self.settings.use_setup:
            logger.warning("Setup form validated for order %s while setup is disabled", order.id)
            raise PreconditionError(
                "Should be called only to test setup form output, none was generated."
            )
        if not (form_values or {}).get(SETUP_PARAMETER):
            return ["There should be something filled."]
        return []

    def _payment_status(self) -> PaymentStatus:
        return PaymentStatus.SUCCESS if self.settings.pay else PaymentStatus.CANCELLED

    def _create_payment_form_fields(
        self,
        order: Order,
        setup_form: Optional[Mapping[str, str]]
    ) -> list[PaymentFormField]:
        fields = [
            PaymentFormField(name="orderId", value=str(order.id)),
            PaymentFormField(
                name="price",
                value=format_invariant_decimal(order.total_price_including_tax),
            ),
            PaymentFormField(name="currencyCode", value=order.currency_code),
        ]
        if self.settings.use_setup:
            if setup_form is None:
                logger.warning("Order %s prepared without the required setup form", order.id)
                raise PreconditionError("Setup form values are required when setup is enabled")
            fields.append(
                PaymentFormField(name=SETUP_PARAMETER, value=setup_form.get(SETUP_PARAMETER) or "")
            )
        return fields

    def prepare_payment(
        self,
        order: Order,
        locale: str,
        urls: ReturnUrls,
        setup_form: Optional[Mapping[str, str]] = None
    ) -> PreparedPayment:
        settings = self.settings
        errors = settings.validate()
        if errors:
            logger.warning("Refusing to prepare order %s: %s", order.id, errors)
            raise ConfigurationError("; ".join(errors))

        status = self._payment_status()
        target = urls.notify if settings.pay else urls.cancel
        form = PaymentForm.post(target, self._create_payment_form_fields(order, setup_form))
        transaction_id = encode_transaction(order.total_price_including_tax, status)

        logger.info("Prepared payment for order %s: %s -> %s", order.id, status.value, target)
        return PreparedPayment(form=form, transaction_id=transaction_id)

    # ---- status ----

    def check_payment_status(
        self,
        order: Order,
        transaction_ids: Sequence[str]
    ) -> list[PaymentInfo]:
        self._ensure_configured()
        payments = [
            PaymentInfo(
                order_id=order.id,
                transaction_id=transaction_id,
                price=decode_price(transaction_id),
                currency_code=order.currency_code,
                status=decode_status(transaction_id),
            )
            for transaction_id in transaction_ids
        ]
        logger.debug("Checked %d transactions for order %s", len(payments), order.id)
        return payments


__all__ = [
    "InstaPayPaymentMethod",
    "InstaPayPaymentMethodDescription",
    "InstaPaySettings",
    "SettingsIds",
]

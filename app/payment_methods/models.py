"""Value objects exchanged between a host storefront and a payment method."""

from decimal import Decimal
from enum import Enum
from typing import Iterable, Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict


def format_invariant_decimal(value: Decimal) -> str:
    """Format ``value`` with ``.`` as separator, no grouping and no exponent."""
    return format(value, "f")


class PaymentStatus(str, Enum):
    SUCCESS = "Success"
    CANCELLED = "Cancelled"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class Order(_Frozen):
    id: Union[int, str]
    total_price_including_tax: Decimal
    currency_code: str


class ReturnUrls(_Frozen):
    """Where the payment portal sends the shopper afterwards."""

    notify: str
    cancel: str


class PaymentFormField(_Frozen):
    name: str
    value: str


class PaymentForm(_Frozen):
    """HTTP form the host renders and submits on behalf of the shopper."""

    target_url: str
    method: Literal["POST"] = "POST"
    fields: Tuple[PaymentFormField, ...] = ()

    @classmethod
    def post(cls, target_url: str, fields: Iterable[PaymentFormField]) -> "PaymentForm":
        return cls(target_url=target_url, method="POST", fields=tuple(fields))

    def as_pairs(self) -> list[tuple[str, str]]:
        return [(field.name, field.value) for field in self.fields]


class PreparedPayment(_Frozen):
    form: PaymentForm
    transaction_id: str


class PaymentInfo(_Frozen):
    order_id: Union[int, str]
    transaction_id: str
    price: Decimal
    currency_code: str
    status: PaymentStatus


class SettingsEntry(_Frozen):
    """Describes one operator-editable setting."""

    id: str
    display_name: str
    help_text: str

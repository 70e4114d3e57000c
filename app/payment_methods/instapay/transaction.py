"""Transaction ids that stand in for a real payment portal.

A transaction id is ``<nonce>;<price>;<status>``. The nonce is a random
UUID that keeps ids unique for identical price and status; decoding never
reads it. Hosts must treat the whole string as opaque.
"""

import uuid
from decimal import Decimal, InvalidOperation

from ..exceptions import FormatError, UnknownStatusError
from ..models import PaymentStatus, format_invariant_decimal

SEPARATOR = ";"


def encode_transaction(price: Decimal, status: PaymentStatus) -> str:
    return SEPARATOR.join(
        (str(uuid.uuid4()), format_invariant_decimal(price), PaymentStatus(status).value)
    )


def _split(transaction: str) -> list[str]:
    parts = transaction.split(SEPARATOR)
    if len(parts) != 3:
        raise FormatError(f"Malformed transaction: {transaction!r}")
    return parts


def decode_price(transaction: str) -> Decimal:
    raw = _split(transaction)[1]
    try:
        price = Decimal(raw)
    except InvalidOperation as exc:
        raise FormatError(f"Invalid price in transaction: {raw!r}") from exc
    if not price.is_finite():
        raise FormatError(f"Invalid price in transaction: {raw!r}")
    return price


def decode_status(transaction: str) -> PaymentStatus:
    raw = _split(transaction)[2]
    try:
        return PaymentStatus(raw)
    except ValueError:
        raise UnknownStatusError(f"Unknown payment status: {raw!r}") from None


def decode_transaction(transaction: str) -> tuple[Decimal, PaymentStatus]:
    return decode_price(transaction), decode_status(transaction)

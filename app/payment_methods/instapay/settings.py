"""InstaPay settings parsed from the storefront administration."""

from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from ..exceptions import ConfigurationError, FormatError
from ..models import SettingsEntry


class SettingsIds:
    PAY = "Pay"
    USE_SETUP = "UseSetup"
    CURRENCIES = "Currencies"


_BOOLEANS = {"true": True, "false": False}


class InstaPaySettings:
    """Immutable snapshot of raw operator settings.

    Construction never fails so that half-edited settings can still be
    inspected. Malformed values are reported by ``validate`` and raise
    when the typed properties are read.
    """

    __slots__ = ("_raw",)

    def __init__(self, raw: Mapping[str, str]) -> None:
        self._raw = MappingProxyType(dict(raw))

    @classmethod
    def parse(cls, raw: Mapping[str, str]) -> "InstaPaySettings":
        return cls(raw)

    @property
    def raw(self) -> Mapping[str, str]:
        return self._raw

    def _get(self, key: str) -> str:
        try:
            return self._raw[key]
        except KeyError:
            raise ConfigurationError(f"Missing setting: {key}") from None

    def _lookup(self, key: str) -> Optional[str]:
        value = self._raw.get(key)
        return value.lower() if value is not None else None

    def _get_bool(self, key: str) -> bool:
        value = self._get(key)
        try:
            return _BOOLEANS[value.lower()]
        except KeyError:
            raise FormatError(
                f"Setting '{key}' is not 'true' or 'false': {value!r}"
            ) from None

    def _currency_tokens(self) -> list[str]:
        return [token.strip() for token in self._get(SettingsIds.CURRENCIES).split(",")]

    @property
    def pay(self) -> bool:
        return self._get_bool(SettingsIds.PAY)

    @property
    def use_setup(self) -> bool:
        return self._get_bool(SettingsIds.USE_SETUP)

    @property
    def supported_currencies(self) -> Tuple[str, ...]:
        """Configured currency codes in input order, empty entries skipped."""
        return tuple(token for token in self._currency_tokens() if token)

    def supports(self, code: str) -> bool:
        return code in frozenset(self.supported_currencies)

    @staticmethod
    def get_description() -> list[SettingsEntry]:
        return [
            SettingsEntry(
                id=SettingsIds.PAY,
                display_name="Pay",
                help_text="'true' to instantly mark order as 'Paid', 'false' to cancel payment.",
            ),
            SettingsEntry(
                id=SettingsIds.USE_SETUP,
                display_name="Use setup",
                help_text="'true' to display the setup form.",
            ),
            SettingsEntry(
                id=SettingsIds.CURRENCIES,
                display_name="Supported currencies",
                help_text="Comma separated list of currency codes that this plugin claims to support.",
            ),
        ]

    def validate(self) -> list[str]:
        """Describe every malformed setting. Never raises."""
        errors = []

        if self._lookup(SettingsIds.PAY) not in _BOOLEANS:
            errors.append("'Pay' needs to be set to either 'true' or 'false'.")

        if self._lookup(SettingsIds.USE_SETUP) not in _BOOLEANS:
            errors.append("'Use setup' needs to be set to either 'true' or 'false'.")

        currencies = self._raw.get(SettingsIds.CURRENCIES)
        if currencies is None or any(
            len(token.strip()) not in (0, 3) for token in currencies.split(",")
        ):
            errors.append(
                "'Supported currencies' are not in correct format. "
                "Every code is supposed to be three letters long. "
                "Codes should be separated by ','."
            )

        return errors

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InstaPaySettings):
            return NotImplemented
        return dict(self._raw) == dict(other._raw)

    def __hash__(self) -> int:
        return hash(frozenset(self._raw.items()))

    def __repr__(self) -> str:
        return f"InstaPaySettings({dict(self._raw)!r})"

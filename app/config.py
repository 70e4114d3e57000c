from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, extra="ignore"
    )

    LOG_LEVEL: str = "INFO"
    HTTP_PORT: int = 8000

    # Raw InstaPay settings, validated by the payment method itself
    INSTAPAY_PAY: str = "true"
    INSTAPAY_USE_SETUP: str = "false"
    INSTAPAY_CURRENCIES: str = Field(
        default="USD, EUR, GBP",
        validation_alias=AliasChoices("INSTAPAY_CURRENCIES", "INSTAPAY_SUPPORTED_CURRENCIES"),
    )

    def payment_method_settings(self) -> dict[str, str]:
        """Raw settings keyed the way the storefront administration stores them."""
        return {
            "Pay": self.INSTAPAY_PAY,
            "UseSetup": self.INSTAPAY_USE_SETUP,
            "Currencies": self.INSTAPAY_CURRENCIES,
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached Settings instance."""
    return Settings()

import os
import sys
from unittest.mock import patch

ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.append(ROOT_DIR)
sys.path.append(os.path.join(ROOT_DIR, "app"))

from config import Settings  # noqa: E402


def test_defaults_are_valid_payment_method_settings():
    with patch.dict(os.environ, {}, clear=True):
        settings = Settings(_env_file=None)

    assert settings.payment_method_settings() == {
        "Pay": "true",
        "UseSetup": "false",
        "Currencies": "USD, EUR, GBP",
    }


def test_environment_overrides():
    env = {
        "INSTAPAY_PAY": "false",
        "instapay_use_setup": "TRUE",
        "INSTAPAY_SUPPORTED_CURRENCIES": "CZK",
        "LOG_LEVEL": "debug",
    }
    with patch.dict(os.environ, env, clear=True):
        settings = Settings(_env_file=None)

    assert settings.LOG_LEVEL == "debug"
    assert settings.payment_method_settings() == {
        "Pay": "false",
        "UseSetup": "TRUE",
        "Currencies": "CZK",
    }

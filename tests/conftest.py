"""
Pytest configuration and fixtures for InstaPay tests.
"""

import os
import sys
from decimal import Decimal

import pytest

# Add app directory to Python path for imports
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.append(ROOT_DIR)
sys.path.append(os.path.join(ROOT_DIR, "app"))

from payment_methods.models import Order, ReturnUrls  # noqa: E402


@pytest.fixture
def raw_settings():
    """Valid settings as the storefront administration stores them."""
    return {"Pay": "true", "UseSetup": "false", "Currencies": "USD, EUR, GBP"}


@pytest.fixture
def order():
    return Order(id=7, total_price_including_tax=Decimal("19.99"), currency_code="USD")


@pytest.fixture
def urls():
    return ReturnUrls(notify="https://s/n", cancel="https://s/c")

from unittest.mock import Mock

import pytest

from .checkout.fields import get_default_checkout_fields
from .core.config import config_from_dict


class FakeOrder:
    """In-memory order exposing the private metadata API."""

    def __init__(self, pk=1, private_metadata=None):
        self.pk = pk
        self.private_metadata = dict(private_metadata or {})
        self.saved_fields = []

    def get_value_from_private_metadata(self, key, default=None):
        return self.private_metadata.get(key, default)

    def store_value_in_private_metadata(self, items):
        self.private_metadata.update(items)

    def save(self, update_fields=None):
        self.saved_fields.append(update_fields)


@pytest.fixture
def order():
    return FakeOrder()


@pytest.fixture
def company_order():
    return FakeOrder(
        private_metadata={
            "billing_is_company": "yes",
            "billing_company_name": "Acme UAB",
            "billing_company_code": "304567891",
            "billing_company_vat": "LT100011223344",
            "billing_company_address": "",
        }
    )


@pytest.fixture
def vat_config():
    return config_from_dict({"vat_mode_enabled": True})


@pytest.fixture
def default_fields():
    return get_default_checkout_fields()


@pytest.fixture
def staff_user():
    user = Mock()
    user.has_perm.return_value = True
    return user


@pytest.fixture
def customer_user():
    user = Mock()
    user.has_perm.return_value = False
    return user

import pytest

from ...checkout import REQUIRED_CLASS, FieldKind, Fieldset
from ...checkout.fields import FieldDefinition, get_default_checkout_fields
from ...checkout.transforms import build_checkout_fields
from ...core.config import config_from_dict
from ..address_fields import (
    build_address_fields,
    build_billing_address_fields,
    build_shipping_address_fields,
)


@pytest.fixture
def billing_address_fields(default_fields):
    fieldset = dict(default_fields[Fieldset.BILLING])
    fieldset["billing_company_code"] = FieldDefinition(
        key="billing_company_code", label="Company code", priority=31
    )
    return fieldset


def test_address_form_disable_only_affects_address_form(billing_address_fields):
    # given
    config = config_from_dict(
        {
            "vat_mode_enabled": True,
            "fields": {"billing_company_code": {"address_form": "disable"}},
        }
    )

    # when
    address_fields = build_billing_address_fields(billing_address_fields, config)
    checkout_fields = build_checkout_fields(get_default_checkout_fields(), config)

    # then
    assert "billing_company_code" not in address_fields
    assert "billing_company_code" in checkout_fields[Fieldset.BILLING]


def test_address_form_enable_applies_required(default_fields):
    config = config_from_dict(
        {"fields": {"billing_company": {"address_form": "enable", "required": True}}}
    )

    fields = build_billing_address_fields(default_fields[Fieldset.BILLING], config)

    assert fields["billing_company"].required is True
    assert REQUIRED_CLASS in fields["billing_company"].classes


def test_address_form_enable_without_required_keeps_default(default_fields):
    config = config_from_dict({"fields": {"billing_phone": {"address_form": "enable"}}})

    fields = build_billing_address_fields(default_fields[Fieldset.BILLING], config)

    assert fields["billing_phone"] == default_fields[Fieldset.BILLING]["billing_phone"]


def test_address_form_nothing_ignores_required(default_fields):
    # given
    config = config_from_dict(
        {"fields": {"billing_company": {"address_form": "nothing", "required": True}}}
    )

    # when
    fields = build_billing_address_fields(default_fields[Fieldset.BILLING], config)

    # then
    assert fields["billing_company"].required is False


def test_checkout_disabled_field_stays_on_address_form(default_fields):
    config = config_from_dict({"fields": {"billing_phone": {"status": "disabled"}}})

    fields = build_billing_address_fields(default_fields[Fieldset.BILLING], config)

    assert "billing_phone" in fields


def test_shipping_phone_added_when_enabled(default_fields):
    # given
    shipping = dict(default_fields[Fieldset.SHIPPING])
    del shipping["shipping_phone"]
    config = config_from_dict(
        {"fields": {"shipping_phone": {"address_form": "enable", "required": True}}}
    )

    # when
    fields = build_shipping_address_fields(shipping, config)

    # then
    phone = fields["shipping_phone"]
    assert phone.label == "Phone"
    assert phone.kind == FieldKind.TEL
    assert phone.priority == 100
    assert phone.required is True
    assert phone.classes == ("form-row-wide", REQUIRED_CLASS)


def test_shipping_phone_not_added_by_default(default_fields):
    shipping = dict(default_fields[Fieldset.SHIPPING])
    del shipping["shipping_phone"]

    fields = build_shipping_address_fields(shipping, config_from_dict({}))

    assert "shipping_phone" not in fields


def test_shipping_phone_existing_field_kept(default_fields):
    config = config_from_dict(
        {"fields": {"shipping_phone": {"address_form": "enable"}}}
    )

    fields = build_shipping_address_fields(default_fields[Fieldset.SHIPPING], config)

    default_phone = default_fields[Fieldset.SHIPPING]["shipping_phone"]
    assert fields["shipping_phone"] == default_phone


def test_build_address_fields_dispatch(default_fields):
    config = config_from_dict(
        {"fields": {"shipping_city": {"address_form": "disable"}}}
    )

    fields = build_address_fields(
        Fieldset.SHIPPING, default_fields[Fieldset.SHIPPING], config
    )

    assert "shipping_city" not in fields


def test_build_address_fields_unknown_type(default_fields):
    with pytest.raises(ValueError):
        build_address_fields("pickup", {}, config_from_dict({}))

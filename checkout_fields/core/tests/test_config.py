import pytest
from django.core.exceptions import ImproperlyConfigured

from .. import AddressFormMode, CheckoutOrder, FieldStatus
from ..config import (
    DEFAULT_FIELD_CONFIG,
    CheckoutFieldsConfig,
    FieldConfig,
    config_from_dict,
    field_config_from_value,
    get_checkout_fields_config,
)


def test_field_config_from_dict():
    config = field_config_from_value(
        "billing_phone",
        {"status": "enabled", "required": True, "address_form": "disable"},
    )

    assert config == FieldConfig(
        status=FieldStatus.ENABLED,
        required=True,
        address_form=AddressFormMode.DISABLE,
    )


def test_field_config_from_dict_defaults_address_form():
    config = field_config_from_value("billing_phone", {"status": "disabled"})

    assert config.is_disabled
    assert config.required is None
    assert config.address_form == AddressFormMode.NOTHING


@pytest.mark.parametrize(
    ("legacy_state", "status", "required"),
    [
        ("disabled", FieldStatus.DISABLED, False),
        ("required", FieldStatus.ENABLED, True),
        ("optional", FieldStatus.ENABLED, False),
        ("enabled", FieldStatus.ENABLED, False),
    ],
)
def test_field_config_from_legacy_string(legacy_state, status, required):
    config = field_config_from_value("billing_company", legacy_state)

    assert config.status == status
    assert config.required is required
    assert config.address_form == AddressFormMode.NOTHING


def test_field_config_unknown_legacy_string():
    with pytest.raises(ImproperlyConfigured):
        field_config_from_value("billing_company", "hidden")


def test_field_config_unknown_status():
    with pytest.raises(ImproperlyConfigured):
        field_config_from_value("billing_company", {"status": "maybe"})


def test_field_config_unknown_address_form():
    with pytest.raises(ImproperlyConfigured):
        field_config_from_value("billing_company", {"address_form": "always"})


def test_field_config_invalid_type():
    with pytest.raises(ImproperlyConfigured):
        field_config_from_value("billing_company", 1)


def test_config_from_empty_dict_uses_defaults():
    config = config_from_dict({})

    assert config == CheckoutFieldsConfig()
    assert config.vat_mode_enabled is False
    assert config.checkout_order == CheckoutOrder.BILLING_FIRST


def test_config_from_dict_converts_fields():
    config = config_from_dict(
        {
            "vat_mode_enabled": 1,
            "fields": {"billing_company": "disabled", "billing_phone": {}},
        }
    )

    assert config.vat_mode_enabled is True
    assert config.get_field_config("billing_company").is_disabled
    assert config.get_field_config("billing_phone") == DEFAULT_FIELD_CONFIG


def test_config_from_dict_ignores_unknown_keys():
    config = config_from_dict({"unknown_option": True})

    assert config == CheckoutFieldsConfig()


def test_config_from_dict_invalid_checkout_order():
    with pytest.raises(ImproperlyConfigured):
        config_from_dict({"checkout_order": "random"})


def test_get_field_config_for_unconfigured_field():
    config = CheckoutFieldsConfig()

    assert config.get_field_config("billing_city") == DEFAULT_FIELD_CONFIG


def test_get_vat_fields_uses_configured_labels():
    config = config_from_dict({"company_vat_label": "PVM kodas"})

    assert config.get_vat_fields() == {
        "billing_company_name": "Company name",
        "billing_company_code": "Company code",
        "billing_company_vat": "PVM kodas",
        "billing_company_address": "Company address",
    }


def test_get_checkout_fields_config_reads_django_settings(settings):
    # given
    settings.CHECKOUT_FIELDS = {
        "vat_mode_enabled": True,
        "checkout_order": CheckoutOrder.SHIPPING_FIRST,
    }

    # when
    config = get_checkout_fields_config()

    # then
    assert config.vat_mode_enabled is True
    assert config.checkout_order == CheckoutOrder.SHIPPING_FIRST


def test_get_checkout_fields_config_without_setting(settings):
    del settings.CHECKOUT_FIELDS

    assert get_checkout_fields_config() == CheckoutFieldsConfig()


@pytest.mark.parametrize(
    "template",
    [
        "%(label)s is 100% required.",
        "%s is a required field.",
        "This field is required.",
        "%(label)s (%(name)s) is required.",
    ],
)
def test_config_from_dict_invalid_error_template(template):
    with pytest.raises(ImproperlyConfigured):
        config_from_dict({"required_field_error": template})


def test_config_from_dict_error_template_with_escaped_percent():
    template = "%(label)s is 100%% required."

    config = config_from_dict({"required_field_error": template})

    assert config.required_field_error == template


def test_config_fields_are_read_only():
    config = config_from_dict({"fields": {"billing_company": "disabled"}})

    with pytest.raises(TypeError):
        config.fields["billing_phone"] = DEFAULT_FIELD_CONFIG

    assert "billing_phone" not in config.fields
    assert hash(config) == hash(
        config_from_dict({"fields": {"billing_company": "disabled"}})
    )

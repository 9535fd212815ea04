"""Checkout fields configuration.

The configuration is an explicit, immutable value. Nothing in the policy or
the transforms looks settings up on its own; callers load a
``CheckoutFieldsConfig`` once (usually with ``get_checkout_fields_config``)
and pass it in.
"""

import logging
from types import MappingProxyType
from typing import Any

import attrs
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from . import AddressFormMode, CheckoutOrder, FieldStatus

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS: dict[str, Any] = {
    "fields": {},
    "vat_mode_enabled": False,
    "force_ship_to_different": False,
    "checkout_order": CheckoutOrder.BILLING_FIRST,
    "billing_title": "Billing details",
    "shipping_title": "Ship to a different address?",
    "vat_checkbox_label": "I am purchasing as a company",
    "company_name_label": "Company name",
    "company_code_label": "Company code",
    "company_vat_label": "VAT number",
    "company_address_label": "Company address",
    "company_information_label": "Company information",
    "company_info_message": "",
    "required_field_error": "%(label)s is a required field.",
}

# Legacy settings stored a single state string per field.
LEGACY_FIELD_STATES = ("enabled", "disabled", "required", "optional")


@attrs.frozen
class FieldConfig:
    """Per-field overrides.

    required is tri-state: None keeps the host's default required flag.
    """

    status: str = FieldStatus.ENABLED
    required: bool | None = None
    address_form: str = AddressFormMode.NOTHING

    @property
    def is_disabled(self) -> bool:
        return self.status == FieldStatus.DISABLED


DEFAULT_FIELD_CONFIG = FieldConfig()


@attrs.frozen
class CheckoutFieldsConfig:
    fields: MappingProxyType = attrs.field(
        factory=dict, converter=MappingProxyType, hash=False
    )
    vat_mode_enabled: bool = False
    force_ship_to_different: bool = False
    checkout_order: str = CheckoutOrder.BILLING_FIRST
    billing_title: str = DEFAULT_SETTINGS["billing_title"]
    shipping_title: str = DEFAULT_SETTINGS["shipping_title"]
    vat_checkbox_label: str = DEFAULT_SETTINGS["vat_checkbox_label"]
    company_name_label: str = DEFAULT_SETTINGS["company_name_label"]
    company_code_label: str = DEFAULT_SETTINGS["company_code_label"]
    company_vat_label: str = DEFAULT_SETTINGS["company_vat_label"]
    company_address_label: str = DEFAULT_SETTINGS["company_address_label"]
    company_information_label: str = DEFAULT_SETTINGS["company_information_label"]
    company_info_message: str = DEFAULT_SETTINGS["company_info_message"]
    required_field_error: str = DEFAULT_SETTINGS["required_field_error"]

    def get_field_config(self, field_key: str) -> FieldConfig:
        return self.fields.get(field_key, DEFAULT_FIELD_CONFIG)

    def get_vat_fields(self) -> dict[str, str]:
        """Return the company field keys mapped to their configured labels."""
        return {
            "billing_company_name": self.company_name_label,
            "billing_company_code": self.company_code_label,
            "billing_company_vat": self.company_vat_label,
            "billing_company_address": self.company_address_label,
        }


def field_config_from_value(field_key: str, value: Any) -> FieldConfig:
    """Build a FieldConfig from a stored settings value.

    Accepts the current dict format and the legacy single-string format
    ("enabled", "disabled", "required", "optional").
    """
    if isinstance(value, FieldConfig):
        return value

    if isinstance(value, str):
        if value not in LEGACY_FIELD_STATES:
            raise ImproperlyConfigured(
                f"Unknown field state '{value}' for checkout field '{field_key}'."
            )
        return FieldConfig(
            status=FieldStatus.DISABLED
            if value == "disabled"
            else FieldStatus.ENABLED,
            required=value == "required",
            address_form=AddressFormMode.NOTHING,
        )

    if isinstance(value, dict):
        status = value.get("status", FieldStatus.ENABLED)
        address_form = value.get("address_form", AddressFormMode.NOTHING)
        required = value.get("required")
        if status not in dict(FieldStatus.CHOICES):
            raise ImproperlyConfigured(
                f"Unknown status '{status}' for checkout field '{field_key}'."
            )
        if address_form not in dict(AddressFormMode.CHOICES):
            raise ImproperlyConfigured(
                f"Unknown address_form '{address_form}' for checkout field "
                f"'{field_key}'."
            )
        return FieldConfig(
            status=status,
            required=None if required is None else bool(required),
            address_form=address_form,
        )

    raise ImproperlyConfigured(
        f"Checkout field '{field_key}' must be configured with a dict or a string."
    )


def validate_error_template(template: str) -> None:
    """Check that the error template interpolates with ``id`` and ``label``.

    Literal percent signs must be written as ``%%``.
    """
    if "%(label)s" not in template:
        raise ImproperlyConfigured(
            "required_field_error must contain the %(label)s placeholder."
        )
    try:
        template % {"id": "field", "label": "Field"}
    except (KeyError, TypeError, ValueError) as e:
        raise ImproperlyConfigured(
            f"Invalid required_field_error template '{template}': {e}"
        ) from e


def config_from_dict(data: dict) -> CheckoutFieldsConfig:
    """Deserialize CheckoutFieldsConfig from a settings dict.

    Missing keys fall back to DEFAULT_SETTINGS.
    """
    merged = {**DEFAULT_SETTINGS, **data}
    unknown = set(merged) - set(DEFAULT_SETTINGS)
    if unknown:
        logger.warning(
            "Ignoring unknown checkout fields settings",
            extra={"keys": sorted(unknown)},
        )
        for key in unknown:
            merged.pop(key)

    if merged["checkout_order"] not in dict(CheckoutOrder.CHOICES):
        raise ImproperlyConfigured(
            f"Unknown checkout_order '{merged['checkout_order']}'."
        )

    validate_error_template(merged["required_field_error"])

    merged["fields"] = {
        key: field_config_from_value(key, value)
        for key, value in (merged["fields"] or {}).items()
    }
    merged["vat_mode_enabled"] = bool(merged["vat_mode_enabled"])
    merged["force_ship_to_different"] = bool(merged["force_ship_to_different"])
    return CheckoutFieldsConfig(**merged)


def get_checkout_fields_config() -> CheckoutFieldsConfig:
    """Load the checkout fields configuration from Django settings.

    Configured via the CHECKOUT_FIELDS dict setting (default: empty, which
    gives DEFAULT_SETTINGS).
    """
    data = getattr(settings, "CHECKOUT_FIELDS", None) or {}
    return config_from_dict(data)

"""Field sets for the account address-edit forms.

This is independent of checkout gating: each field's ``address_form`` mode
decides whether it is shown on the billing/shipping address forms, reusing
the same required-flag mechanics as checkout.
"""

from typing import TYPE_CHECKING

from ..checkout import FieldKind, Fieldset
from ..checkout.fields import FieldDefinition, FieldSet, get_default_checkout_fields
from ..core import AddressFormMode

if TYPE_CHECKING:
    from ..core.config import CheckoutFieldsConfig

SHIPPING_PHONE_FIELD = "shipping_phone"


def apply_address_form_config(
    fieldset: FieldSet, prefix: str, config: "CheckoutFieldsConfig"
) -> FieldSet:
    result: FieldSet = {}
    for key, field in fieldset.items():
        if not key.startswith(prefix):
            result[key] = field
            continue

        field_config = config.get_field_config(key)
        if field_config.address_form == AddressFormMode.DISABLE:
            continue
        if (
            field_config.address_form == AddressFormMode.ENABLE
            and field_config.required is not None
        ):
            field = field.with_required(field_config.required)
        result[key] = field
    return result


def build_billing_address_fields(
    fieldset: FieldSet, config: "CheckoutFieldsConfig"
) -> FieldSet:
    return apply_address_form_config(
        fieldset, Fieldset.PREFIXES[Fieldset.BILLING], config
    )


def build_shipping_address_fields(
    fieldset: FieldSet, config: "CheckoutFieldsConfig"
) -> FieldSet:
    """Resolve the shipping address form.

    The host's shipping address form has no phone field, so shipping_phone is
    added when its address_form mode is "enable".
    """
    result = apply_address_form_config(
        fieldset, Fieldset.PREFIXES[Fieldset.SHIPPING], config
    )

    phone_config = config.get_field_config(SHIPPING_PHONE_FIELD)
    if (
        phone_config.address_form == AddressFormMode.ENABLE
        and SHIPPING_PHONE_FIELD not in result
    ):
        default_field = get_default_checkout_fields()[Fieldset.SHIPPING].get(
            SHIPPING_PHONE_FIELD
        )
        label = default_field.label if default_field else "Phone"
        result[SHIPPING_PHONE_FIELD] = FieldDefinition(
            key=SHIPPING_PHONE_FIELD,
            label=label,
            classes=("form-row-wide",),
            kind=FieldKind.TEL,
            priority=100,
            clear=True,
        ).with_required(bool(phone_config.required))
    return result


def build_address_fields(
    address_type: str, fieldset: FieldSet, config: "CheckoutFieldsConfig"
) -> FieldSet:
    if address_type == Fieldset.BILLING:
        return build_billing_address_fields(fieldset, config)
    if address_type == Fieldset.SHIPPING:
        return build_shipping_address_fields(fieldset, config)
    raise ValueError(f"Unknown address type '{address_type}'.")

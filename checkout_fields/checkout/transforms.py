"""Pure transforms over checkout field sets.

Every transform takes a CheckoutFields value plus the configuration and
returns a new value; inputs are never mutated. ``build_checkout_fields`` is
the ordered pipeline applied before the host renders or validates checkout.
"""

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

from . import Fieldset
from .fields import CheckoutFields, FieldSet, get_company_fields

if TYPE_CHECKING:
    from ..core.config import CheckoutFieldsConfig

Transform = Callable[[CheckoutFields, "CheckoutFieldsConfig"], CheckoutFields]


def apply_fieldset_config(
    fieldset: FieldSet, prefix: str, config: "CheckoutFieldsConfig"
) -> FieldSet:
    """Drop disabled fields and apply required overrides to one fieldset.

    Keys without the fieldset prefix are passed through unchanged.
    """
    result: FieldSet = {}
    for key, field in fieldset.items():
        if not key.startswith(prefix):
            result[key] = field
            continue

        field_config = config.get_field_config(key)
        if field_config.is_disabled:
            continue
        if field_config.required is not None:
            field = field.with_required(field_config.required)
        result[key] = field
    return result


def apply_field_configs(
    fields: CheckoutFields, config: "CheckoutFieldsConfig"
) -> CheckoutFields:
    result = dict(fields)
    for fieldset_name, prefix in Fieldset.PREFIXES.items():
        if fieldset_name in fields:
            result[fieldset_name] = apply_fieldset_config(
                fields[fieldset_name], prefix, config
            )
    return result


def add_company_fields(
    fields: CheckoutFields, config: "CheckoutFieldsConfig"
) -> CheckoutFields:
    if not config.vat_mode_enabled:
        return fields
    result = dict(fields)
    result[Fieldset.BILLING] = {
        **fields.get(Fieldset.BILLING, {}),
        **get_company_fields(config),
    }
    return result


CHECKOUT_PIPELINE: tuple[Transform, ...] = (apply_field_configs, add_company_fields)


def run_pipeline(
    fields: CheckoutFields,
    config: "CheckoutFieldsConfig",
    transforms: Iterable[Transform],
) -> CheckoutFields:
    for transform in transforms:
        fields = transform(fields, config)
    return fields


def build_checkout_fields(
    fields: CheckoutFields, config: "CheckoutFieldsConfig"
) -> CheckoutFields:
    """Resolve the effective checkout field set."""
    return run_pipeline(fields, config, CHECKOUT_PIPELINE)


def remove_fields(fields: CheckoutFields, keys: Iterable[str]) -> CheckoutFields:
    """Return a copy of the field set without the given keys in any fieldset."""
    keys = set(keys)
    if not keys:
        return fields
    return {
        fieldset_name: {k: f for k, f in fieldset.items() if k not in keys}
        for fieldset_name, fieldset in fields.items()
    }

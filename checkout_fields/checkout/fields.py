"""Typed checkout field definitions and the default field registry."""

from typing import TYPE_CHECKING

import attrs

from . import (
    COMPANY_CHECKBOX_CLASS,
    COMPANY_FIELD_CLASS,
    HIDDEN_CLASS,
    REQUIRED_CLASS,
    FieldKind,
    Fieldset,
)

if TYPE_CHECKING:
    from ..core.config import CheckoutFieldsConfig


@attrs.frozen
class FieldDefinition:
    key: str
    label: str
    required: bool = False
    classes: tuple[str, ...] = ("form-row-wide",)
    kind: str = FieldKind.TEXT
    priority: int = 0
    clear: bool = False
    placeholder: str = ""

    def with_required(self, required: bool) -> "FieldDefinition":
        """Return a copy with the required flag and validate-required class set."""
        classes = tuple(c for c in self.classes if c != REQUIRED_CLASS)
        if required:
            classes = (*classes, REQUIRED_CLASS)
        return attrs.evolve(self, required=required, classes=classes)

    def has_class(self, css_class: str) -> bool:
        return css_class in self.classes


FieldSet = dict[str, FieldDefinition]
CheckoutFields = dict[str, FieldSet]


def split_classes(value: str | list | tuple | None) -> tuple[str, ...]:
    """Normalize a host class value (string or list) into a tuple."""
    if not value:
        return ()
    if isinstance(value, str):
        return tuple(value.split())
    return tuple(value)


def field_from_dict(key: str, data: dict) -> FieldDefinition:
    """Build a FieldDefinition from a host-provided field dict."""
    return FieldDefinition(
        key=key,
        label=data.get("label", ""),
        required=bool(data.get("required", False)),
        classes=split_classes(data.get("class")),
        kind=data.get("type", FieldKind.TEXT),
        priority=int(data.get("priority", 0)),
        clear=bool(data.get("clear", False)),
        placeholder=data.get("placeholder", ""),
    )


def fieldset_from_dict(data: dict[str, dict]) -> FieldSet:
    return {key: field_from_dict(key, field) for key, field in data.items()}


def sorted_fieldset(fieldset: FieldSet) -> FieldSet:
    """Return the fieldset ordered by priority, keeping insertion order on ties."""
    return dict(sorted(fieldset.items(), key=lambda item: item[1].priority))


def _address_fields(prefix: str) -> FieldSet:
    fields = [
        FieldDefinition(
            f"{prefix}first_name", "First name", True, ("form-row-first",), priority=10
        ),
        FieldDefinition(
            f"{prefix}last_name", "Last name", True, ("form-row-last",), priority=20
        ),
        FieldDefinition(f"{prefix}company", "Company name", False, priority=30),
        FieldDefinition(
            f"{prefix}country",
            "Country / Region",
            True,
            ("form-row-wide", "address-field", "update_totals_on_change"),
            kind=FieldKind.COUNTRY,
            priority=40,
        ),
        FieldDefinition(
            f"{prefix}address_1",
            "Street address",
            True,
            ("form-row-wide", "address-field"),
            priority=50,
        ),
        FieldDefinition(
            f"{prefix}address_2",
            "Apartment, suite, unit, etc.",
            False,
            ("form-row-wide", "address-field"),
            priority=60,
        ),
        FieldDefinition(
            f"{prefix}city",
            "Town / City",
            True,
            ("form-row-wide", "address-field"),
            priority=70,
        ),
        FieldDefinition(
            f"{prefix}state",
            "State / County",
            False,
            ("form-row-wide", "address-field"),
            kind=FieldKind.STATE,
            priority=80,
        ),
        FieldDefinition(
            f"{prefix}postcode",
            "Postcode / ZIP",
            True,
            ("form-row-wide", "address-field"),
            priority=90,
        ),
    ]
    return {field.key: field for field in fields}


def get_default_checkout_fields() -> CheckoutFields:
    """Return the host's stock billing and shipping fields."""
    billing = _address_fields("billing_")
    billing["billing_phone"] = FieldDefinition(
        "billing_phone", "Phone", True, kind=FieldKind.TEL, priority=100
    )
    billing["billing_email"] = FieldDefinition(
        "billing_email", "Email address", True, kind=FieldKind.EMAIL, priority=110
    )
    shipping = _address_fields("shipping_")
    shipping["shipping_phone"] = FieldDefinition(
        "shipping_phone", "Phone", False, kind=FieldKind.TEL, priority=100
    )
    return {Fieldset.BILLING: billing, Fieldset.SHIPPING: shipping}


def get_company_fields(config: "CheckoutFieldsConfig") -> FieldSet:
    """Build the gate checkbox and its dependent company fields.

    None of them is required at field-set level; requiredness follows the gate.
    """
    fields: FieldSet = {
        "billing_is_company": FieldDefinition(
            key="billing_is_company",
            label=config.vat_checkbox_label,
            required=False,
            classes=("form-row-wide", COMPANY_CHECKBOX_CLASS),
            kind=FieldKind.CHECKBOX,
            priority=120,
            clear=True,
        )
    }
    for priority, (key, label) in enumerate(config.get_vat_fields().items(), 121):
        fields[key] = FieldDefinition(
            key=key,
            label=label,
            required=False,
            classes=("form-row-wide", COMPANY_FIELD_CLASS, HIDDEN_CLASS),
            kind=FieldKind.TEXT,
            priority=priority,
            clear=True,
        )
    return fields

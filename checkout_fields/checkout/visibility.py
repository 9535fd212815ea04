"""Conditional field visibility and validation.

One gate field (the "is company" checkbox) controls whether a fixed set of
dependent company fields is required. The same rule drives field rendering,
the client mirror and server validation.

The client transmits the keys it considers hidden in the
``awcf_disabled_fields`` input. That signal is advisory: it can only skip a
dependent field that would otherwise be checked. The gate's submitted value is
the sole authority, so a forged or stale signal can at most produce a false
pass for fields that are optional whenever the gate is off.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING

import attrs
from django.core.exceptions import ValidationError

from ..core.sanitize import is_truthy, sanitize_text_field
from . import DISABLED_FIELDS_INPUT
from .error_codes import CheckoutFieldsErrorCode
from .fields import CheckoutFields
from .transforms import build_checkout_fields, remove_fields

if TYPE_CHECKING:
    from ..core.config import CheckoutFieldsConfig

logger = logging.getLogger(__name__)

GATE_FIELD = "billing_is_company"


class GateState:
    OFF = "gate_off"
    ON = "gate_on"

    CHOICES = [
        (OFF, "Dependent fields hidden and optional"),
        (ON, "Dependent fields shown and required"),
    ]


@attrs.frozen
class GateRule:
    gate: str
    dependents: tuple[str, ...]

    @classmethod
    def from_config(cls, config: "CheckoutFieldsConfig") -> "GateRule":
        return cls(gate=GATE_FIELD, dependents=tuple(config.get_vat_fields()))

    def state(self, data: Mapping[str, str] | None) -> str:
        if data is not None and is_truthy(data.get(self.gate)):
            return GateState.ON
        return GateState.OFF


@attrs.frozen
class FieldVisibility:
    """Presentation state of one dependent field for a given gate state."""

    key: str
    visible: bool
    required: bool


def parse_disabled_fields(value: str | None) -> list[str]:
    """Split the transmitted signal into field keys, dropping blanks."""
    if not value:
        return []
    value = sanitize_text_field(value)
    return [key.strip() for key in value.split(",") if key.strip()]


def serialize_disabled_fields(keys: Iterable[str]) -> str:
    return ",".join(keys)


def required_field_missing(
    field_key: str, label: str, template: str
) -> ValidationError:
    """Build the error reported for an empty required dependent field."""
    return ValidationError(
        template,
        code=f"{field_key}_{CheckoutFieldsErrorCode.REQUIRED.value}",
        params={"id": field_key, "label": label},
    )


class VisibilityPolicy:
    """Evaluate the gate rule against host field sets and submitted data."""

    def __init__(self, config: "CheckoutFieldsConfig", rule: GateRule | None = None):
        self.config = config
        self.rule = rule or GateRule.from_config(config)

    @property
    def is_active(self) -> bool:
        return self.config.vat_mode_enabled

    def resolve_checkout_fields(self, fields: CheckoutFields) -> CheckoutFields:
        return build_checkout_fields(fields, self.config)

    def initial_state(self, persisted_gate: str | None = None) -> str:
        """Gate state for the first render of a form.

        Off, unless a previously submitted or stored gate value is supplied.
        """
        if is_truthy(persisted_gate):
            return GateState.ON
        return GateState.OFF

    def gate_state(self, data: Mapping[str, str] | None) -> str:
        return self.rule.state(data)

    def field_visibility(self, state: str) -> list[FieldVisibility]:
        is_on = state == GateState.ON
        return [
            FieldVisibility(key=key, visible=is_on, required=is_on)
            for key in self.rule.dependents
        ]

    def required_fields(self, data: Mapping[str, str]) -> list[str]:
        """Dependent fields that must be filled for this submission."""
        if not self.is_active or self.gate_state(data) == GateState.OFF:
            return []
        skipped = set(self.get_signalled_fields(data))
        return [key for key in self.rule.dependents if key not in skipped]

    def irrelevant_fields(self, data: Mapping[str, str]) -> list[str]:
        """Dependent fields exempt from validation for this submission."""
        if not self.is_active:
            return []
        if self.gate_state(data) == GateState.OFF:
            return list(self.rule.dependents)
        skipped = set(self.get_signalled_fields(data))
        return [key for key in self.rule.dependents if key in skipped]

    def get_signalled_fields(self, data: Mapping[str, str]) -> list[str]:
        """Keys from the client signal that this rule allows to be skipped.

        Anything outside the rule's dependents is ignored, so the signal cannot
        exempt unrelated host fields.
        """
        signalled = parse_disabled_fields(data.get(DISABLED_FIELDS_INPUT))
        allowed = [key for key in signalled if key in self.rule.dependents]
        ignored = [key for key in signalled if key not in self.rule.dependents]
        if ignored:
            logger.debug(
                "Ignoring signalled fields outside the gate rule",
                extra={"fields": ignored},
            )
        return allowed

    def prepare_checkout_fields(
        self, fields: CheckoutFields, data: Mapping[str, str]
    ) -> CheckoutFields:
        """Remove signalled dependent fields before the host validates checkout."""
        if not self.is_active:
            return fields
        return remove_fields(fields, self.get_signalled_fields(data))

    def validate(self, data: Mapping[str, str]) -> list[ValidationError]:
        """Collect a RequiredFieldMissing error for every empty required dependent."""
        if not self.is_active:
            return []

        if self.gate_state(data) == GateState.OFF:
            return []

        labels = self.config.get_vat_fields()
        errors = []
        for field_key in self.required_fields(data):
            value = sanitize_text_field(data.get(field_key))
            if not value:
                errors.append(
                    required_field_missing(
                        field_key,
                        labels.get(field_key, field_key),
                        self.config.required_field_error,
                    )
                )

        if errors:
            logger.info(
                "Checkout company details rejected",
                extra={"fields": [error.params["id"] for error in errors]},
            )
        return errors

    def clean(self, data: Mapping[str, str]) -> None:
        """Raise a ValidationError keyed by field when validation fails."""
        errors = self.validate(data)
        if errors:
            raise ValidationError({error.params["id"]: error for error in errors})

"""Model of the checkout page script.

The browser script mirrors the visibility policy for UX only: it toggles the
company rows and keeps the ``awcf_disabled_fields`` signal in step with the
gate checkbox. Server validation never depends on it having run.

``CheckoutPage`` holds the parts of the page the script touches. Handlers are
synchronous and re-bind to a fresh page after every asynchronous checkout
refresh, because the host replaces that part of the DOM.
"""

import attrs

from . import HIDDEN_CLASS, REQUIRED_CLASS, VISIBLE_CLASS
from .visibility import serialize_disabled_fields

INVALID_CLASSES = frozenset(
    {REQUIRED_CLASS, "woocommerce-invalid", "woocommerce-invalid-required-field"}
)


class LabelMarker:
    REQUIRED = "required"
    OPTIONAL = "optional"


@attrs.define
class FieldRow:
    key: str
    classes: set[str] = attrs.field(factory=set)
    required: bool = False
    value: str = ""
    label_marker: str | None = None


@attrs.define
class CheckoutPage:
    # None when the element is not on the page.
    gate_checked: bool | None = False
    company_rows: list[FieldRow] = attrs.field(factory=list)
    info_message_classes: set[str] | None = None
    disabled_fields_input: str | None = None
    ship_checkbox_checked: bool | None = None
    shipping_address_visible: bool = False


def show(classes: set[str]) -> None:
    classes.discard(HIDDEN_CLASS)
    classes.add(VISIBLE_CLASS)


def hide(classes: set[str]) -> None:
    classes.discard(VISIBLE_CLASS)
    classes.add(HIDDEN_CLASS)


class ClientMirror:
    """Company fields toggler."""

    def __init__(self, params: dict):
        self.params = params
        self.vat_fields: list[str] = list(params.get("vat_fields") or [])
        self.page: CheckoutPage | None = None

    def bind(self, page: CheckoutPage) -> None:
        self.page = page
        if self.params.get("vat_mode_enabled"):
            self.toggle_company_fields()

    def on_gate_change(self, checked: bool) -> None:
        if self.page is None or self.page.gate_checked is None:
            return
        self.page.gate_checked = checked
        self.toggle_company_fields()

    def on_checkout_updated(self, page: CheckoutPage) -> None:
        self.bind(page)

    def toggle_company_fields(self) -> None:
        page = self.page
        if page is None or page.gate_checked is None:
            return

        if page.gate_checked:
            for row in page.company_rows:
                show(row.classes)
                self.set_field_required(row, True)
            if page.info_message_classes is not None:
                show(page.info_message_classes)
            self.update_disabled_fields_input([])
        else:
            for row in page.company_rows:
                hide(row.classes)
                self.set_field_required(row, False)
            if page.info_message_classes is not None:
                hide(page.info_message_classes)
            self.update_disabled_fields_input(self.vat_fields)
            self.clear_hidden_field_values()

    def set_field_required(self, row: FieldRow, required: bool) -> None:
        row.required = required
        if required:
            row.classes.add(REQUIRED_CLASS)
            row.label_marker = LabelMarker.REQUIRED
        else:
            row.classes -= INVALID_CLASSES
            row.label_marker = (
                LabelMarker.OPTIONAL if self.params.get("optional_text") else None
            )

    def update_disabled_fields_input(self, disabled_fields: list[str]) -> None:
        if self.page is not None and self.page.disabled_fields_input is not None:
            self.page.disabled_fields_input = serialize_disabled_fields(
                disabled_fields
            )

    def clear_hidden_field_values(self) -> None:
        if self.page is None:
            return
        for row in self.page.company_rows:
            row.value = ""


class ShipToDifferentMirror:
    """Keeps the "ship to a different address" checkbox permanently checked."""

    def __init__(self, params: dict):
        self.params = params
        self.page: CheckoutPage | None = None

    def bind(self, page: CheckoutPage) -> None:
        self.page = page
        self.enforce()

    def on_change(self, checked: bool) -> None:
        if self.page is None or self.page.ship_checkbox_checked is None:
            return
        self.page.ship_checkbox_checked = checked
        self.enforce()

    def on_checkout_updated(self, page: CheckoutPage) -> None:
        self.bind(page)

    def enforce(self) -> None:
        page = self.page
        if not self.params.get("force_ship_to_different") or page is None:
            return
        if page.ship_checkbox_checked is None:
            return
        page.ship_checkbox_checked = True
        page.shipping_address_visible = True

"""Checkout page customisations handed to the host for rendering."""

from typing import TYPE_CHECKING

from django.utils.html import format_html
from django.utils.safestring import SafeString, mark_safe

from ..core import CheckoutOrder
from ..core.config import DEFAULT_SETTINGS
from . import DISABLED_FIELDS_INPUT, HIDDEN_CLASS, VISIBLE_CLASS, Fieldset
from .visibility import serialize_disabled_fields

if TYPE_CHECKING:
    from ..core.config import CheckoutFieldsConfig

HOST_TEXT_DOMAIN = "woocommerce"
BILLING_TITLE_STRINGS = ("Billing details", "Billing &amp; Shipping")
SHIPPING_TITLE_STRINGS = ("Ship to a different address?",)
OPTIONAL_TEXT = "(optional)"

FORCE_SHIP_TO_DIFFERENT_STYLES = """
.woocommerce-shipping-fields .shipping_address {
    display: block !important;
}
.woocommerce-checkout #ship-to-different-address-checkbox {
    display: none !important;
    visibility: hidden !important;
    position: absolute !important;
    opacity: 0 !important;
    pointer-events: none !important;
}
"""

COMPANY_FIELDS_STYLES = f"""
.{HIDDEN_CLASS} {{
    display: none !important;
}}
.{VISIBLE_CLASS} {{
    display: block !important;
}}
"""


def get_section_title(
    translated: str, text: str, domain: str, config: "CheckoutFieldsConfig"
) -> str:
    """Replace the host's section titles with configured ones.

    A title is only replaced when it is non-empty and differs from the default.
    """
    if domain != HOST_TEXT_DOMAIN:
        return translated

    if text in BILLING_TITLE_STRINGS:
        custom_title = config.billing_title
        if custom_title and custom_title != DEFAULT_SETTINGS["billing_title"]:
            return custom_title
    elif text in SHIPPING_TITLE_STRINGS:
        custom_title = config.shipping_title
        if custom_title and custom_title != DEFAULT_SETTINGS["shipping_title"]:
            return custom_title
    return translated


def order_sections(
    sections: list[str], config: "CheckoutFieldsConfig"
) -> list[str]:
    """Swap the billing and shipping sections when shipping should go first."""
    if config.checkout_order != CheckoutOrder.SHIPPING_FIRST:
        return list(sections)
    if Fieldset.BILLING not in sections or Fieldset.SHIPPING not in sections:
        return list(sections)

    result = list(sections)
    billing_index = result.index(Fieldset.BILLING)
    shipping_index = result.index(Fieldset.SHIPPING)
    result[billing_index], result[shipping_index] = (
        Fieldset.SHIPPING,
        Fieldset.BILLING,
    )
    return result


def resolve_ship_to_different_address(
    checked: bool, config: "CheckoutFieldsConfig"
) -> bool:
    if config.force_ship_to_different:
        return True
    return checked


def should_enqueue_scripts(config: "CheckoutFieldsConfig") -> bool:
    return config.vat_mode_enabled or config.force_ship_to_different


def get_script_params(config: "CheckoutFieldsConfig") -> dict:
    """Parameters exposed to the checkout script as ``awcf_params``."""
    return {
        "force_ship_to_different": config.force_ship_to_different,
        "vat_mode_enabled": config.vat_mode_enabled,
        "vat_fields": list(config.get_vat_fields()),
        "optional_text": OPTIONAL_TEXT,
    }


def render_disabled_fields_input(config: "CheckoutFieldsConfig") -> SafeString:
    """Render the hidden signal input.

    Company fields start hidden, so the initial value lists all of them.
    """
    if not config.vat_mode_enabled:
        return mark_safe("")
    return format_html(
        '<input type="hidden" id="{0}" name="{0}" value="{1}" />',
        DISABLED_FIELDS_INPUT,
        serialize_disabled_fields(config.get_vat_fields()),
    )


def render_company_info_message(config: "CheckoutFieldsConfig") -> SafeString:
    if not config.vat_mode_enabled or not config.company_info_message:
        return mark_safe("")
    return format_html(
        '<div class="awcf-company-info-message {}">'
        '<p class="awcf-info-text">{}</p>'
        "</div>",
        HIDDEN_CLASS,
        config.company_info_message,
    )


def get_inline_styles(config: "CheckoutFieldsConfig") -> str:
    styles = ""
    if config.force_ship_to_different:
        styles += FORCE_SHIP_TO_DIFFERENT_STYLES
    if config.vat_mode_enabled:
        styles += COMPANY_FIELDS_STYLES
    return styles

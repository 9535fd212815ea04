"""Read-only company details for emails and customer-facing order pages."""

from typing import TYPE_CHECKING

from django.utils.html import format_html, format_html_join
from django.utils.safestring import SafeString, mark_safe

from .metadata import OrderWithMetadata, get_company_meta, order_has_company_info

if TYPE_CHECKING:
    from ..core.config import CheckoutFieldsConfig

EMAIL_HEADING_STYLE = (
    "color: #96588a; display: block; "
    'font-family: "Helvetica Neue", Helvetica, Roboto, Arial, sans-serif; '
    "font-size: 18px; font-weight: bold; line-height: 130%; "
    "margin: 0 0 18px; text-align: left;"
)
EMAIL_CELL_STYLE = "text-align: left; border: 1px solid #e5e5e5; padding: 12px;"


def _filled_meta(order, config):
    return [meta for meta in get_company_meta(order, config) if meta.value]


def render_email_plain_text(
    order: OrderWithMetadata, config: "CheckoutFieldsConfig"
) -> str:
    lines = ["", config.company_information_label]
    lines.extend(f"{meta.label}: {meta.value}" for meta in _filled_meta(order, config))
    return "\n".join(lines) + "\n\n"


def render_email_html(
    order: OrderWithMetadata, config: "CheckoutFieldsConfig"
) -> SafeString:
    rows = format_html_join(
        "",
        '<tr><th scope="row" style="{0}">{1}</th><td style="{0}">{2}</td></tr>',
        (
            (EMAIL_CELL_STYLE, meta.label, meta.value)
            for meta in _filled_meta(order, config)
        ),
    )
    return format_html(
        '<div style="margin-bottom: 40px;">'
        '<h2 style="{}">{}</h2>'
        '<table cellspacing="0" cellpadding="6" '
        'style="width: 100%; border: 1px solid #e5e5e5;" border="1">'
        "<tbody>{}</tbody>"
        "</table>"
        "</div>",
        EMAIL_HEADING_STYLE,
        config.company_information_label,
        rows,
    )


def render_email_order_meta(
    order: OrderWithMetadata | None,
    plain_text: bool,
    config: "CheckoutFieldsConfig",
) -> str:
    """Company details appended after the order table in order emails."""
    if not order_has_company_info(order):
        return ""
    if plain_text:
        return render_email_plain_text(order, config)
    return render_email_html(order, config)


def render_order_details_meta(
    order: OrderWithMetadata | None, config: "CheckoutFieldsConfig"
) -> SafeString:
    """Company details section for the thank-you and order-details pages."""
    if not order_has_company_info(order):
        return mark_safe("")

    rows = format_html_join(
        "",
        "<tr><th>{}:</th><td>{}</td></tr>",
        ((meta.label, meta.value) for meta in _filled_meta(order, config)),
    )
    return format_html(
        '<section class="woocommerce-company-details">'
        '<h2 class="woocommerce-company-details__title">{}</h2>'
        '<table class="woocommerce-table woocommerce-table--company-details '
        'shop_table company_details">'
        "<tbody>{}</tbody>"
        "</table>"
        "</section>",
        config.company_information_label,
        rows,
    )

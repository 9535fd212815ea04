"""Editable company details block on the staff order page."""

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from django.core.exceptions import PermissionDenied, ValidationError
from django.utils.html import format_html, format_html_join
from django.utils.safestring import SafeString, mark_safe

from . import IS_COMPANY_META_KEY, MANAGE_ORDERS_PERMISSION, IsCompany
from .forms import MULTILINE_FIELDS, CompanyDetailsForm
from .metadata import OrderWithMetadata, order_has_company_info

if TYPE_CHECKING:
    from ..core.config import CheckoutFieldsConfig

logger = logging.getLogger(__name__)

ROW_CLASS = "awcf-company-field-row"


def _render_input(key: str, value: str) -> SafeString:
    if key in MULTILINE_FIELDS:
        return format_html(
            '<textarea id="awcf_{0}" name="{0}" rows="3" class="large-text">'
            "{1}</textarea>",
            key,
            value,
        )
    return format_html(
        '<input type="text" id="awcf_{0}" name="{0}" value="{1}" '
        'class="regular-text" />',
        key,
        value,
    )


def render_admin_order_meta(
    order: OrderWithMetadata, config: "CheckoutFieldsConfig"
) -> SafeString:
    if not config.vat_mode_enabled:
        return mark_safe("")

    is_company = order_has_company_info(order)
    row_style = "" if is_company else "display: none;"
    rows = format_html_join(
        "",
        '<tr class="{}" style="{}"><th><label for="awcf_{}">{}</label></th>'
        "<td>{}</td></tr>",
        (
            (
                ROW_CLASS,
                row_style,
                key,
                label,
                _render_input(
                    key, order.get_value_from_private_metadata(key) or ""
                ),
            )
            for key, label in config.get_vat_fields().items()
        ),
    )
    return format_html(
        '<div class="awcf-admin-company-details">'
        "<h3>{}</h3>"
        '<table class="form-table">'
        '<tr><th><label for="awcf_{}">{}</label></th>'
        '<td><input type="checkbox" id="awcf_{}" name="{}" value="1"{} /></td></tr>'
        "{}"
        "</table>"
        "</div>",
        config.company_information_label,
        IS_COMPANY_META_KEY,
        config.vat_checkbox_label,
        IS_COMPANY_META_KEY,
        IS_COMPANY_META_KEY,
        mark_safe(' checked="checked"') if is_company else "",
        rows,
    )


def save_admin_order_meta(
    order: OrderWithMetadata,
    data: Mapping[str, str],
    user,
    config: "CheckoutFieldsConfig",
) -> None:
    """Save company details edited by staff and persist the order.

    Unchecking the gate keeps previously stored company values.
    """
    if not user.has_perm(MANAGE_ORDERS_PERMISSION):
        logger.warning(
            "Refused to save order company details without permission",
            extra={"order_id": order.pk},
        )
        raise PermissionDenied(
            "To edit company details, you need the MANAGE_ORDERS permission."
        )

    if not config.vat_mode_enabled:
        return

    form = CompanyDetailsForm(data, config=config)
    if not form.is_valid():
        raise ValidationError(form.errors.as_data())
    cleaned_data = form.cleaned_data

    is_company = cleaned_data[IS_COMPANY_META_KEY]
    items = {IS_COMPANY_META_KEY: IsCompany.YES if is_company else IsCompany.NO}
    if is_company:
        for key in config.get_vat_fields():
            items[key] = cleaned_data[key]

    order.store_value_in_private_metadata(items=items)
    order.save(update_fields=["private_metadata"])
    logger.info(
        "Staff updated order company details",
        extra={"order_id": order.pk, "is_company": is_company},
    )

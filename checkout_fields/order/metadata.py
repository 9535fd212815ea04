"""Company details stored in order private metadata."""

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

import attrs

from ..checkout.visibility import GateRule, GateState
from ..core.sanitize import sanitize_text_field
from . import IS_COMPANY_META_KEY, IsCompany

if TYPE_CHECKING:
    from ..core.config import CheckoutFieldsConfig

logger = logging.getLogger(__name__)


class OrderWithMetadata(Protocol):
    """The part of the host order model used here."""

    pk: Any

    def get_value_from_private_metadata(self, key: str, default: Any = None) -> Any:
        ...

    def store_value_in_private_metadata(self, items: dict) -> None:
        ...

    def save(self, update_fields: list[str] | None = None) -> None:
        ...


@attrs.frozen
class CompanyMeta:
    key: str
    label: str
    value: str


def order_has_company_info(order: OrderWithMetadata | None) -> bool:
    if order is None:
        return False
    return order.get_value_from_private_metadata(IS_COMPANY_META_KEY) == IsCompany.YES


def get_company_meta(
    order: OrderWithMetadata, config: "CheckoutFieldsConfig"
) -> list[CompanyMeta]:
    return [
        CompanyMeta(
            key=key,
            label=label,
            value=order.get_value_from_private_metadata(key) or "",
        )
        for key, label in config.get_vat_fields().items()
    ]


def save_order_meta(
    order: OrderWithMetadata, data: Mapping[str, str], config: "CheckoutFieldsConfig"
) -> None:
    """Store the gate and the submitted company fields on a new order.

    With the gate off only the gate value is written; company values stored
    earlier are left as they are.
    """
    if not config.vat_mode_enabled:
        return

    rule = GateRule.from_config(config)
    is_company = rule.state(data) == GateState.ON
    items = {IS_COMPANY_META_KEY: IsCompany.YES if is_company else IsCompany.NO}

    if is_company:
        for field_key in rule.dependents:
            if field_key in data:
                items[field_key] = sanitize_text_field(data[field_key])

    order.store_value_in_private_metadata(items=items)
    logger.info(
        "Stored order company details",
        extra={"order_id": order.pk, "is_company": is_company, "keys": list(items)},
    )

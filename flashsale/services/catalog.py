from collections.abc import Iterable
from datetime import datetime
from typing import Any

from flashsale.models.product import Product
from flashsale.models.status import SaleStatus
from flashsale.seed import AVAILABLE_PRODUCTS, STATUS_OPTIONS
from flashsale.services.formatting import parse_timestamp, resolve_now

DEFAULT_STATUS_COLOR = "#666"
STATUS_COLORS = {
    SaleStatus.ACTIVE.value: "#52c41a",
    SaleStatus.INACTIVE.value: "#ff4d4f",
    SaleStatus.SCHEDULED.value: "#1890ff",
    SaleStatus.EXPIRED.value: "#8c8c8c",
}
_STATUS_LABELS = {option.value.value: option.label for option in STATUS_OPTIONS}


def _status_key(status: Any) -> str | None:
    if isinstance(status, SaleStatus):
        return status.value
    if isinstance(status, str):
        return status
    return None


def get_status_label(status: Any) -> Any:
    """Display label of a status; unknown values come back unchanged."""
    return _STATUS_LABELS.get(_status_key(status), status)


def get_status_color(status: Any) -> str:
    return STATUS_COLORS.get(_status_key(status), DEFAULT_STATUS_COLOR)


def get_products_by_ids(
    product_ids: Iterable[int] | None,
    products: Iterable[Product] = AVAILABLE_PRODUCTS,
) -> list[Product]:
    """
    Products whose id appears in ``product_ids``.

    Results follow catalog order, not the order of ``product_ids``. Ids with no
    matching product are skipped.
    """
    if not product_ids:
        return []
    wanted = set(product_ids)
    return [product for product in products if product.id in wanted]


def calculate_discounted_price(original_price: float, discount_percentage: float) -> float:
    return original_price * (1 - discount_percentage / 100)


def get_sale_status(
    start_date: Any,
    end_date: Any,
    current_status: Any,
    now: datetime | None = None,
) -> SaleStatus:
    """
    Status to display for a sale right now.

    An explicit ``inactive`` always wins. Otherwise the sale window decides:
    before the start it is scheduled, after the end it is expired, in between
    it is active. Dates that cannot be parsed never compare, so such a sale
    reads as active.
    """
    if _status_key(current_status) == SaleStatus.INACTIVE.value:
        return SaleStatus.INACTIVE

    current = resolve_now(now)
    start = parse_timestamp(start_date)
    end = parse_timestamp(end_date)

    if start is not None and current < start:
        return SaleStatus.SCHEDULED
    if end is not None and current > end:
        return SaleStatus.EXPIRED
    return SaleStatus.ACTIVE


def validate_sale_dates(start_date: Any, end_date: Any) -> tuple[bool, str | None]:
    start = parse_timestamp(start_date)
    end = parse_timestamp(end_date)
    if start is None:
        return False, "Start date is invalid"
    if end is None:
        return False, "End date is invalid"
    if end <= start:
        return False, "End date must be after start date"
    return True, None


def get_discount_color(percentage: float) -> str:
    if percentage >= 50:
        return "#ff4d4f"
    if percentage >= 30:
        return "#fa8c16"
    if percentage >= 20:
        return "#faad14"
    return "#52c41a"

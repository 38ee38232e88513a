import logging
import math
import os
import threading
from collections.abc import Iterable
from datetime import datetime
from typing import Any

from flashsale.models.flash_sale import FlashSale
from flashsale.models.status import SaleStatus
from flashsale.schemas.flash_sale import SaleDraft, SalePage
from flashsale.seed import seed_board
from flashsale.services.catalog import get_products_by_ids
from flashsale.services.formatting import parse_timestamp, resolve_now

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = int(os.getenv("FLASHSALE_PAGE_SIZE", "10"))
MAX_PAGE_SIZE = int(os.getenv("FLASHSALE_MAX_PAGE_SIZE", "100"))
DATE_SORT_FIELDS = {"created_date", "start_date", "end_date"}
NUMERIC_SORT_FIELDS = {"id", "discount_percentage", "total_sales", "revenue"}
TEXT_SORT_FIELDS = {"sale_name", "status"}
SORT_FIELDS = DATE_SORT_FIELDS | NUMERIC_SORT_FIELDS | TEXT_SORT_FIELDS
SORT_ORDERS = {"asc", "desc"}


def _sort_key(field: str):
    def key(sale: FlashSale) -> Any:
        value = getattr(sale, field)
        if field in DATE_SORT_FIELDS:
            return value
        if field in NUMERIC_SORT_FIELDS:
            return float(value)
        if isinstance(value, SaleStatus):
            value = value.value
        return str(value).lower()

    return key


def _matches_search(sale: FlashSale, needle: str) -> bool:
    if not needle:
        return True
    if needle in sale.sale_name.lower():
        return True
    product_names = " ".join(product.name for product in get_products_by_ids(sale.products))
    return needle in product_names.lower()


class FlashSaleBoard:
    """
    Editable, in-memory list of flash sales.

    The board starts from the seed data (or the given sales) and keeps its own
    list; the module constants are never modified. Records are frozen, so
    every edit swaps in a new record.
    """

    def __init__(self, sales: Iterable[FlashSale] | None = None) -> None:
        self._lock = threading.Lock()
        self._sales: list[FlashSale] = []
        if sales is None:
            seed_board(self)
        else:
            self.load(sales)

    def load(self, sales: Iterable[FlashSale]) -> None:
        with self._lock:
            self._sales = list(sales)

    def reset(self) -> None:
        seed_board(self)
        with self._lock:
            count = len(self._sales)
        logger.info("Flash sale board reset to %d seed sales", count)

    def all(self) -> list[FlashSale]:
        with self._lock:
            return list(self._sales)

    def query(
        self,
        search: str = "",
        status: str | None = None,
        sort_field: str = "created_date",
        sort_order: str = "desc",
        page: int = 1,
        per_page: int = DEFAULT_PAGE_SIZE,
    ) -> SalePage:
        if sort_field not in SORT_FIELDS:
            raise ValueError(f"Unknown sort field: {sort_field}")
        if sort_order not in SORT_ORDERS:
            raise ValueError("sort_order must be asc or desc")

        needle = (search or "").lower()
        matched = [
            sale
            for sale in self.all()
            if _matches_search(sale, needle) and (not status or sale.status == status)
        ]
        matched.sort(key=_sort_key(sort_field), reverse=sort_order == "desc")

        per_page = min(max(per_page, 1), MAX_PAGE_SIZE)
        page = max(page, 1)
        start = (page - 1) * per_page
        return SalePage(
            items=matched[start : start + per_page],
            total=len(matched),
            page=page,
            per_page=per_page,
            total_pages=math.ceil(len(matched) / per_page),
        )

    def get(self, sale_id: int) -> FlashSale:
        with self._lock:
            for sale in self._sales:
                if sale.id == sale_id:
                    return sale
        raise KeyError(sale_id)

    def create(self, draft: SaleDraft, now: datetime | None = None) -> FlashSale:
        fields = self._draft_fields(draft)
        with self._lock:
            sale = FlashSale(
                id=max((item.id for item in self._sales), default=0) + 1,
                created_date=resolve_now(now),
                total_sales=0,
                revenue=0,
                **fields,
            )
            self._sales.insert(0, sale)
        logger.info("Created flash sale #%d %r", sale.id, sale.sale_name)
        return sale

    def update(self, sale_id: int, draft: SaleDraft) -> FlashSale:
        fields = self._draft_fields(draft)
        with self._lock:
            for index, existing in enumerate(self._sales):
                if existing.id != sale_id:
                    continue
                sale = FlashSale(
                    id=existing.id,
                    created_date=existing.created_date,
                    total_sales=existing.total_sales,
                    revenue=existing.revenue,
                    **fields,
                )
                self._sales[index] = sale
                break
            else:
                raise KeyError(sale_id)
        logger.info("Updated flash sale #%d %r", sale.id, sale.sale_name)
        return sale

    def delete(self, sale_id: int) -> FlashSale:
        with self._lock:
            for index, existing in enumerate(self._sales):
                if existing.id == sale_id:
                    del self._sales[index]
                    break
            else:
                raise KeyError(sale_id)
        logger.info("Deleted flash sale #%d %r", existing.id, existing.sale_name)
        return existing

    @staticmethod
    def _draft_fields(draft: SaleDraft) -> dict[str, Any]:
        start = parse_timestamp(draft.start_date)
        end = parse_timestamp(draft.end_date)
        if start is None or end is None:
            raise ValueError("start_date and end_date are required")
        return {
            "sale_name": draft.sale_name.strip(),
            "products": tuple(draft.products),
            "discount_percentage": draft.discount_percentage,
            "start_date": start,
            "end_date": end,
            "status": draft.status,
        }


board = FlashSaleBoard()

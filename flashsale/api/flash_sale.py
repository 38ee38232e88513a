from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException

from flashsale.models.flash_sale import FlashSale
from flashsale.models.status import SaleStatus
from flashsale.schemas.flash_sale import (
    FlashSaleListOut,
    FlashSaleOut,
    PricingOut,
    SaleDraft,
    SaleProductOut,
)
from flashsale.services.board import DEFAULT_PAGE_SIZE, FlashSaleBoard, board
from flashsale.services.catalog import (
    calculate_discounted_price,
    get_discount_color,
    get_products_by_ids,
    get_sale_status,
    get_status_color,
    get_status_label,
    validate_sale_dates,
)
from flashsale.services.formatting import (
    format_currency,
    format_date,
    format_date_for_input,
    get_remaining_time,
    utc_now,
)

router = APIRouter(prefix="/flash-sales", tags=["flash-sales"])
MIN_DISCOUNT = 1
MAX_DISCOUNT = 90
STATUS_VALUES = {item.value for item in SaleStatus}


def get_board() -> FlashSaleBoard:
    return board


def get_now() -> datetime:
    return utc_now()


def _normalize_draft(draft: SaleDraft) -> SaleDraft:
    name = (draft.sale_name or "").strip()
    if not name:
        raise HTTPException(status_code=400, detail="Sale name is required")
    if not draft.products:
        raise HTTPException(status_code=400, detail="At least one product must be selected")
    if draft.discount_percentage < MIN_DISCOUNT or draft.discount_percentage > MAX_DISCOUNT:
        raise HTTPException(
            status_code=400,
            detail=f"Discount percentage must be between {MIN_DISCOUNT}% and {MAX_DISCOUNT}%",
        )
    if draft.start_date is None:
        raise HTTPException(status_code=400, detail="Start date is required")
    if draft.end_date is None:
        raise HTTPException(status_code=400, detail="End date is required")
    valid, error = validate_sale_dates(draft.start_date, draft.end_date)
    if not valid:
        raise HTTPException(status_code=400, detail=error)
    return draft.model_copy(update={"sale_name": name})


def _sale_view(sale: FlashSale, now: datetime) -> FlashSaleOut:
    current_status = get_sale_status(sale.start_date, sale.end_date, sale.status, now=now)
    product_items = []
    for product in get_products_by_ids(sale.products):
        discounted = calculate_discounted_price(product.price, sale.discount_percentage)
        product_items.append(
            SaleProductOut(
                id=product.id,
                name=product.name,
                category=product.category,
                price=product.price,
                discounted_price=discounted,
                price_display=format_currency(product.price),
                discounted_price_display=format_currency(discounted),
            )
        )
    return FlashSaleOut(
        **sale.model_dump(),
        current_status=current_status,
        status_label=get_status_label(current_status.value),
        status_color=get_status_color(current_status),
        remaining_time=(
            get_remaining_time(sale.end_date, now=now)
            if current_status == SaleStatus.ACTIVE
            else None
        ),
        start_date_display=format_date(sale.start_date),
        end_date_display=format_date(sale.end_date),
        start_date_input=format_date_for_input(sale.start_date),
        end_date_input=format_date_for_input(sale.end_date),
        revenue_display=format_currency(sale.revenue),
        discount_color=get_discount_color(sale.discount_percentage),
        product_items=product_items,
    )


def _find_sale_or_404(sales: FlashSaleBoard, sale_id: int) -> FlashSale:
    try:
        return sales.get(sale_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail="Flash sale not found") from exc


@router.get("", response_model=FlashSaleListOut)
def list_flash_sales(
    search: str = "",
    status: str | None = None,
    sort_field: str = "created_date",
    sort_order: str = "desc",
    page: int = 1,
    per_page: int = DEFAULT_PAGE_SIZE,
    sales: FlashSaleBoard = Depends(get_board),
    now: datetime = Depends(get_now),
):
    status = (status or "").strip() or None
    if status is not None and status not in STATUS_VALUES:
        raise HTTPException(status_code=422, detail=f"Unknown status: {status}")
    try:
        result = sales.query(
            search=search,
            status=status,
            sort_field=sort_field,
            sort_order=sort_order,
            page=page,
            per_page=per_page,
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return FlashSaleListOut(
        items=[_sale_view(sale, now) for sale in result.items],
        total=result.total,
        page=result.page,
        per_page=result.per_page,
        total_pages=result.total_pages,
    )


@router.get("/pricing", response_model=PricingOut)
def preview_pricing(price: float, discount: float):
    discounted = calculate_discounted_price(price, discount)
    return PricingOut(
        original_price=price,
        discount_percentage=discount,
        discounted_price=discounted,
        original_price_display=format_currency(price),
        discounted_price_display=format_currency(discounted),
        discount_color=get_discount_color(discount),
    )


@router.get("/{sale_id}", response_model=FlashSaleOut)
def get_flash_sale(
    sale_id: int,
    sales: FlashSaleBoard = Depends(get_board),
    now: datetime = Depends(get_now),
):
    return _sale_view(_find_sale_or_404(sales, sale_id), now)


@router.post("", response_model=FlashSaleOut, status_code=201)
def create_flash_sale(
    draft: SaleDraft,
    sales: FlashSaleBoard = Depends(get_board),
    now: datetime = Depends(get_now),
):
    sale = sales.create(_normalize_draft(draft), now=now)
    return _sale_view(sale, now)


@router.put("/{sale_id}", response_model=FlashSaleOut)
def update_flash_sale(
    sale_id: int,
    draft: SaleDraft,
    sales: FlashSaleBoard = Depends(get_board),
    now: datetime = Depends(get_now),
):
    _find_sale_or_404(sales, sale_id)
    normalized = _normalize_draft(draft)
    try:
        sale = sales.update(sale_id, normalized)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail="Flash sale not found") from exc
    return _sale_view(sale, now)


@router.delete("/{sale_id}")
def delete_flash_sale(sale_id: int, sales: FlashSaleBoard = Depends(get_board)):
    try:
        sale = sales.delete(sale_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail="Flash sale not found") from exc
    return {"ok": True, "id": sale.id, "sale_name": sale.sale_name}

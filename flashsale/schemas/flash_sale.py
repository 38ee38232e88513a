from datetime import datetime

from pydantic import BaseModel, Field

from flashsale.models.flash_sale import FlashSale
from flashsale.models.status import SaleStatus


class SaleDraft(BaseModel):
    sale_name: str = ""
    products: list[int] = Field(default_factory=list)
    discount_percentage: int = 10
    start_date: datetime | None = None
    end_date: datetime | None = None
    status: SaleStatus = SaleStatus.ACTIVE


class SalePage(BaseModel):
    items: list[FlashSale]
    total: int
    page: int
    per_page: int
    total_pages: int


class SaleProductOut(BaseModel):
    id: int
    name: str
    category: str
    price: float
    discounted_price: float
    price_display: str
    discounted_price_display: str


class FlashSaleOut(BaseModel):
    id: int
    sale_name: str
    products: list[int]
    discount_percentage: int
    start_date: datetime
    end_date: datetime
    status: SaleStatus
    created_date: datetime
    total_sales: int
    revenue: float

    current_status: SaleStatus
    status_label: str
    status_color: str
    remaining_time: str | None = None
    start_date_display: str
    end_date_display: str
    start_date_input: str
    end_date_input: str
    revenue_display: str
    discount_color: str
    product_items: list[SaleProductOut]


class FlashSaleListOut(BaseModel):
    items: list[FlashSaleOut]
    total: int
    page: int
    per_page: int
    total_pages: int


class PricingOut(BaseModel):
    original_price: float
    discount_percentage: float
    discounted_price: float
    original_price_display: str
    discounted_price_display: str
    discount_color: str

from datetime import datetime

from pydantic import BaseModel, Field

from flashsale.models.status import SaleStatus


class FlashSale(BaseModel):
    id: int
    sale_name: str
    products: tuple[int, ...] = ()  # product ids, not validated
    discount_percentage: int = Field(..., ge=0, le=100)
    start_date: datetime
    end_date: datetime
    status: SaleStatus
    created_date: datetime
    total_sales: int = Field(0, ge=0)
    revenue: float = Field(0, ge=0)

    class Config:
        frozen = True

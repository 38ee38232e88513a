from pydantic import BaseModel

from flashsale.models.status import SaleStatus


class StatusOptionOut(BaseModel):
    value: SaleStatus
    label: str
    color: str


class ProductOut(BaseModel):
    id: int
    name: str
    category: str
    price: float
    price_display: str

from enum import Enum

from pydantic import BaseModel


class SaleStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    SCHEDULED = "scheduled"
    EXPIRED = "expired"


class StatusOption(BaseModel):
    value: SaleStatus
    label: str

    class Config:
        frozen = True

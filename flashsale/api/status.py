from fastapi import APIRouter

from flashsale.schemas.catalog import StatusOptionOut
from flashsale.seed import STATUS_OPTIONS
from flashsale.services.catalog import get_status_color

router = APIRouter(prefix="/status-options", tags=["status"])


@router.get("", response_model=list[StatusOptionOut])
def list_status_options():
    return [
        StatusOptionOut(value=option.value, label=option.label, color=get_status_color(option.value))
        for option in STATUS_OPTIONS
    ]

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from flashsale.api.flash_sale import get_board, get_now
from flashsale.main import app
from flashsale.services.board import FlashSaleBoard

# Inside the seed data window: sales 1 and 4 running, 2 and 6 upcoming.
FIXED_NOW = datetime(2024, 1, 21, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def sale_board() -> FlashSaleBoard:
    return FlashSaleBoard()


@pytest.fixture
def client(sale_board, now):
    app.dependency_overrides[get_board] = lambda: sale_board
    app.dependency_overrides[get_now] = lambda: now
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()

"""
Tests for the HTTP surface.
"""

from datetime import datetime

import pytest

from flashsale import main

DRAFT = {
    "sale_name": "Monsoon Mega Sale",
    "products": [2, 5],
    "discount_percentage": 20,
    "start_date": "2024-02-10T00:00",
    "end_date": "2024-02-12T00:00",
    "status": "active",
}


def by_id(items: list[dict]) -> dict[int, dict]:
    return {item["id"]: item for item in items}


class TestService:
    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["service"] == "flash-sale-catalog"

    def test_healthz(self, client):
        body = client.get("/healthz").json()
        assert body["ok"] is True
        assert body["products"] == 10

    def test_api_key_required_when_configured(self, client, monkeypatch):
        monkeypatch.setattr(main, "API_KEY", "secret")
        assert client.get("/products").status_code == 401
        assert client.get("/products", headers={"X-API-Key": "wrong"}).status_code == 401
        assert client.get("/products", headers={"X-API-Key": "secret"}).status_code == 200
        assert client.get("/openapi.json").status_code == 200

    def test_run_serves_app_on_configured_address(self, monkeypatch):
        calls = []
        monkeypatch.setattr(main.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))
        monkeypatch.setattr(main, "SERVER_HOST", "0.0.0.0")
        monkeypatch.setattr(main, "SERVER_PORT", 9100)
        main.run()
        assert calls == [(main.app, {"host": "0.0.0.0", "port": 9100})]


class TestCatalogRoutes:
    def test_products(self, client):
        products = client.get("/products").json()
        assert len(products) == 10
        assert products[0]["name"] == "Premium Poultry Feed 25kg"
        assert products[0]["price_display"] == "₹850.00"

    def test_products_by_category(self, client):
        products = client.get("/products", params={"category": "Fish"}).json()
        assert [item["id"] for item in products] == [2, 5, 8]

    def test_lookup_keeps_catalog_order(self, client):
        products = client.get("/products/lookup", params=[("ids", 3), ("ids", 1), ("ids", 999)]).json()
        assert [item["id"] for item in products] == [1, 3]

    def test_lookup_without_ids(self, client):
        assert client.get("/products/lookup").json() == []

    def test_status_options(self, client):
        options = client.get("/status-options").json()
        assert options == [
            {"value": "active", "label": "Active", "color": "#52c41a"},
            {"value": "inactive", "label": "Inactive", "color": "#ff4d4f"},
            {"value": "scheduled", "label": "Scheduled", "color": "#1890ff"},
            {"value": "expired", "label": "Expired", "color": "#8c8c8c"},
        ]

    def test_pricing_preview(self, client):
        body = client.get("/flash-sales/pricing", params={"price": 100, "discount": 25}).json()
        assert body["discounted_price"] == 75
        assert body["original_price_display"] == "₹100.00"
        assert body["discounted_price_display"] == "₹75.00"
        assert body["discount_color"] == "#faad14"


class TestListFlashSales:
    def test_list(self, client):
        body = client.get("/flash-sales").json()
        assert body["total"] == 8
        assert body["page"] == 1
        assert [item["id"] for item in body["items"]] == [8, 7, 1, 2, 4, 6, 3, 5]

    def test_active_sale_view(self, client):
        sale = by_id(client.get("/flash-sales").json()["items"])[1]
        assert sale["current_status"] == "active"
        assert sale["status_label"] == "Active"
        assert sale["status_color"] == "#52c41a"
        assert sale["remaining_time"] == "4d 11h remaining"
        assert sale["revenue_display"] == "₹1,25,000.00"
        assert sale["start_date_display"] == "20 Jan 2024, 05:30 am"
        assert sale["start_date_input"] == "2024-01-20T00:00"
        assert sale["end_date_input"] == "2024-01-25T23:59"
        assert sale["discount_color"] == "#faad14"
        assert [item["id"] for item in sale["product_items"]] == [1, 2, 3]
        assert sale["product_items"][0]["discounted_price"] == 637.5
        assert sale["product_items"][0]["discounted_price_display"] == "₹637.50"

    def test_derived_statuses(self, client):
        sales = by_id(client.get("/flash-sales").json()["items"])
        assert sales[2]["status"] == "scheduled"
        assert sales[2]["current_status"] == "scheduled"
        assert sales[2]["remaining_time"] is None
        assert sales[4]["remaining_time"] == "11h 59m remaining"
        assert sales[8]["current_status"] == "inactive"
        assert sales[8]["status_label"] == "Inactive"

    def test_stored_active_but_past_window_shows_expired(self, client):
        client.put("/flash-sales/3", json={**DRAFT, "start_date": "2024-01-01T00:00", "end_date": "2024-01-02T00:00"})
        sale = client.get("/flash-sales/3").json()
        assert sale["status"] == "active"
        assert sale["current_status"] == "expired"
        assert sale["remaining_time"] is None

    def test_search_status_and_pagination(self, client):
        body = client.get(
            "/flash-sales",
            params={"search": "feed", "status": "expired", "sort_field": "revenue", "sort_order": "desc", "per_page": 2},
        ).json()
        assert body["total"] == 3
        assert body["total_pages"] == 2
        assert [item["id"] for item in body["items"]] == [5, 3]

    def test_empty_status_lists_all_sales(self, client):
        response = client.get("/flash-sales", params={"status": ""})
        assert response.status_code == 200
        assert response.json()["total"] == 8

    def test_invalid_status(self, client):
        assert client.get("/flash-sales", params={"status": "bogus"}).status_code == 422

    def test_invalid_sort_field(self, client):
        response = client.get("/flash-sales", params={"sort_field": "bogus"})
        assert response.status_code == 400
        assert "bogus" in response.json()["detail"]

    def test_get_missing(self, client):
        response = client.get("/flash-sales/999")
        assert response.status_code == 404
        assert response.json()["detail"] == "Flash sale not found"


class TestWriteFlashSales:
    def test_create(self, client, now):
        response = client.post("/flash-sales", json=DRAFT)
        assert response.status_code == 201
        body = response.json()
        assert body["id"] == 9
        assert body["total_sales"] == 0
        assert body["revenue"] == 0
        assert body["current_status"] == "scheduled"
        assert datetime.fromisoformat(body["created_date"].replace("Z", "+00:00")) == now
        assert client.get("/flash-sales").json()["items"][0]["id"] == 9

    @pytest.mark.parametrize(
        ("overrides", "detail"),
        [
            ({"sale_name": "   "}, "Sale name is required"),
            ({"products": []}, "At least one product must be selected"),
            ({"discount_percentage": 0}, "Discount percentage must be between 1% and 90%"),
            ({"discount_percentage": 95}, "Discount percentage must be between 1% and 90%"),
            ({"start_date": None}, "Start date is required"),
            ({"end_date": None}, "End date is required"),
            ({"end_date": "2024-02-09T00:00"}, "End date must be after start date"),
        ],
    )
    def test_create_validation(self, client, overrides, detail):
        response = client.post("/flash-sales", json={**DRAFT, **overrides})
        assert response.status_code == 400
        assert response.json()["detail"] == detail

    def test_create_with_malformed_body(self, client):
        assert client.post("/flash-sales", json={**DRAFT, "products": "abc"}).status_code == 422

    def test_update(self, client):
        response = client.put("/flash-sales/1", json={**DRAFT, "sale_name": "  Renamed  ", "status": "inactive"})
        assert response.status_code == 200
        body = response.json()
        assert body["sale_name"] == "Renamed"
        assert body["current_status"] == "inactive"
        assert body["revenue"] == 125000
        assert body["total_sales"] == 45

    def test_update_missing(self, client):
        assert client.put("/flash-sales/999", json=DRAFT).status_code == 404

    def test_delete(self, client):
        response = client.delete("/flash-sales/3")
        assert response.status_code == 200
        assert response.json() == {"ok": True, "id": 3, "sale_name": "Aquatic Feed Bonanza"}
        assert client.get("/flash-sales/3").status_code == 404

    def test_delete_missing(self, client):
        assert client.delete("/flash-sales/999").status_code == 404

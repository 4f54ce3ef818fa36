"""Tests for dashboard statistics."""
from wms.main import app


def test_dashboard_stats_seed(client):
    """Test the figures computed from the seed data."""
    response = client.get("/api/v1/dashboard/stats")

    assert response.status_code == 200
    data = response.json()
    assert data["total_stock"] == 45 + 2 + 12 + 0
    assert data["low_stock"] == 1  # only PROD-002; qty 0 is out of stock, not low
    assert data["today_transactions"] == 3
    assert len(data["recent_transactions"]) == 3


def test_dashboard_recent_transactions_capped(client):
    """Test only the first five ledger entries are shown."""
    for i in range(4):
        client.post(
            "/api/v1/transactions/",
            json={"sku": "PROD-003", "name": "Mechanical Keyboard", "type": "IN", "qty": i + 1}
        )

    data = client.get("/api/v1/dashboard/stats").json()
    assert data["today_transactions"] == 7
    assert len(data["recent_transactions"]) == 5
    assert data["recent_transactions"][0]["date"] == "2023-10-25 10:30"


def test_dashboard_stats_follow_catalog_changes(client):
    """Test stats reflect creates and deletes."""
    client.post(
        "/api/v1/products/",
        json={"sku": "PROD-005", "name": "Monitor Arm", "category": "Furniture", "qty": 5}
    )
    client.delete("/api/v1/products/1")

    data = client.get("/api/v1/dashboard/stats").json()
    assert data["total_stock"] == 2 + 12 + 0 + 5
    assert data["low_stock"] == 2


def test_dashboard_stats_invalid_stored_qty(client):
    """A corrupt stored quantity fails explicitly instead of poisoning the sum."""
    store = app.state.store
    store.products[0]["qty"] = "forty"

    response = client.get("/api/v1/dashboard/stats")

    assert response.status_code == 422
    assert "forty" in response.json()["detail"]

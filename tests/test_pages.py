"""Tests for the server-rendered browser UI."""
from wms.main import app


def test_dashboard_page(client):
    """Test the dashboard shows the seed figures and recent movements."""
    response = client.get("/")

    assert response.status_code == 200
    html = response.text
    assert 'id="totalStock">59<' in html
    assert 'id="lowStock">1<' in html
    assert 'id="todayTransactions">3<' in html
    assert "Stock In" in html
    assert "Stock Out" in html


def test_inventory_page_lists_seed(client):
    """Test every seed product is listed with its status badge."""
    response = client.get("/inventory")

    assert response.status_code == 200
    html = response.text
    for sku in ("PROD-001", "PROD-002", "PROD-003", "PROD-004"):
        assert sku in html
    assert "Out of Stock" in html
    assert "Low Stock" in html
    assert "In Stock" in html
    assert 'id="productModal"' not in html


def test_inventory_search(client):
    """Test searching narrows the table."""
    response = client.get("/inventory?search=mouse")

    html = response.text
    assert "PROD-001" in html
    assert "PROD-002" not in html


def test_inventory_category_filter(client):
    """Test filtering by category."""
    response = client.get("/inventory?category=Furniture")

    html = response.text
    assert "Office Chair" in html
    assert "Wireless Mouse" not in html


def test_inventory_no_results(client):
    """Test an empty result renders the empty row."""
    response = client.get("/inventory?search=zzz")

    assert response.status_code == 200
    assert "No products found" in response.text


def test_open_add_modal(client):
    """Test the add modal opens empty."""
    response = client.get("/inventory?modal=add")

    html = response.text
    assert 'id="productModal"' in html
    assert "Add Product" in html
    assert 'name="product_id" value=""' in html


def test_open_edit_modal(client):
    """Test the edit modal is prefilled."""
    response = client.get("/inventory?edit=2")

    html = response.text
    assert "Edit Product" in html
    assert 'name="product_id" value="2"' in html
    assert 'value="Office Chair"' in html


def test_open_edit_modal_unknown_id(client):
    """Test editing an unknown id opens nothing."""
    response = client.get("/inventory?edit=999")

    assert response.status_code == 200
    assert 'id="productModal"' not in response.text


def test_submit_form_creates_product(client):
    """Test submitting the form without an id creates a product."""
    response = client.post(
        "/inventory/save",
        data={"product_id": "", "sku": "PROD-005", "name": "Desk Lamp", "category": "Furniture", "qty": "15", "image": ""}
    )

    assert response.status_code == 200  # after redirect
    assert "Desk Lamp" in response.text

    product = client.get("/api/v1/products/5").json()
    assert product["qty"] == 15
    assert product["image"] == "https://placehold.co/50x50/png"


def test_submit_form_updates_product(client):
    """Test submitting the form with an id updates that product."""
    response = client.post(
        "/inventory/save",
        data={
            "product_id": "2",
            "sku": "PROD-002",
            "name": "Office Chair",
            "category": "Furniture",
            "qty": "9",
            "image": "https://example.com/chair.png"
        }
    )

    assert response.status_code == 200
    product = client.get("/api/v1/products/2").json()
    assert product["qty"] == 9
    assert product["image"] == "https://example.com/chair.png"
    assert client.get("/api/v1/products/").json()["total"] == 4


def test_submit_form_unknown_id_is_noop(client):
    """Test updating an unknown id changes nothing."""
    response = client.post(
        "/inventory/save",
        data={"product_id": "999", "sku": "X-1", "name": "Ghost", "category": "", "qty": "1", "image": ""}
    )

    assert response.status_code == 200
    assert client.get("/api/v1/products/").json()["total"] == 4


def test_submit_form_rejects_non_numeric_qty(client):
    """Test a non-numeric quantity is reported instead of stored."""
    response = client.post(
        "/inventory/save",
        data={"sku": "PROD-005", "name": "Desk Lamp", "category": "Furniture", "qty": "ten", "image": ""}
    )

    assert response.status_code == 400
    html = response.text
    assert 'id="productModal"' in html
    assert "qty" in html
    assert 'value="ten"' in html
    assert client.get("/api/v1/products/").json()["total"] == 4


def test_delete_requires_confirmation(client):
    """Test the delete link only asks for confirmation."""
    response = client.get("/inventory?delete=2")

    assert response.status_code == 200
    assert "Confirm delete" in response.text
    assert client.get("/api/v1/products/2").status_code == 200


def test_confirmed_delete(client):
    """Test confirming removes the product."""
    response = client.post("/inventory/2/delete")

    assert response.status_code == 200
    assert "Office Chair" not in response.text
    assert client.get("/api/v1/products/2").status_code == 404


def test_values_are_escaped(client):
    """Test product fields cannot inject markup."""
    client.post(
        "/api/v1/products/",
        json={"sku": "XSS-1", "name": "<script>alert(1)</script>", "category": "Electronics", "qty": 1}
    )

    html = client.get("/inventory").text
    assert "<script>alert(1)</script>" not in html
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in html


def test_submit_form_error_keeps_filters(client):
    """Test a rejected form keeps the table filters for Cancel."""
    response = client.post(
        "/inventory/save",
        data={
            "product_id": "",
            "sku": "PROD-005",
            "name": "Desk Lamp",
            "category": "Furniture",
            "qty": "ten",
            "image": "",
            "filter_search": "mouse",
            "filter_category": "Electronics"
        }
    )

    assert response.status_code == 400
    html = response.text
    assert "Office Chair" not in html
    assert "Wireless Mouse" in html
    assert "inventory?search=mouse&amp;category=Electronics\"" in html
    assert 'name="filter_search" value="mouse"' in html


def test_inventory_page_invalid_stored_qty(client):
    """Test a corrupt stored quantity shows a banner instead of breaking the page."""
    app.state.store.products[0]["qty"] = "forty"

    response = client.get("/inventory")

    assert response.status_code == 422
    assert response.headers["content-type"].startswith("text/html")
    html = response.text
    assert 'id="inventoryError"' in html
    assert "PROD-001" in html
    assert "Invalid quantity" in html
    assert "Office Chair" in html

"""Tests for the HTTP endpoints."""
import pytest


@pytest.mark.asyncio
class TestCustomerEndpoints:
    """Tests for /customers routes."""

    async def test_health(self, client):
        response = await client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    async def test_count(self, client):
        response = await client.get("/customers/count")
        assert response.status_code == 200
        assert response.json() == {"count": 4}

    async def test_customers_in_city(self, client):
        response = await client.get("/customers", params={"city": "Paris"})
        assert response.status_code == 200
        assert [c["id"] for c in response.json()] == [1, 5]

    async def test_customers_in_unknown_city(self, client):
        response = await client.get("/customers", params={"city": "Nowhere"})
        assert response.status_code == 200
        assert response.json() == []

    async def test_get_customer(self, client):
        response = await client.get("/customers/7")
        assert response.status_code == 200
        assert response.json() == {
            "id": 7,
            "first_name": "David",
            "street": "3 Place du Capitole",
        }

    async def test_get_unknown_customer(self, client):
        response = await client.get("/customers/404")
        assert response.status_code == 404

    async def test_get_customer_name(self, client):
        response = await client.get("/customers/1/name")
        assert response.status_code == 200
        assert response.json() == {"id": 1, "last_name": "Martin"}

    async def test_get_unknown_customer_name(self, client):
        response = await client.get("/customers/404/name")
        assert response.status_code == 404

    async def test_revenue_without_invoices(self, client):
        response = await client.get("/customers/404/revenue")
        assert response.status_code == 200
        assert response.json() == {"customer_id": 404, "total": 0.0}


@pytest.mark.asyncio
class TestInvoiceEndpoints:
    """Tests for /invoices routes."""

    async def test_create_invoice(self, client):
        response = await client.post(
            "/invoices",
            json={"customer_id": 7, "product_ids": [3, 8], "quantities": [2, 1]},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["customer_id"] == 7
        assert body["total"] == pytest.approx(45.0)
        assert body["items"] == [
            {"item": 0, "product_id": 3, "quantity": 2, "cost": 10.0},
            {"item": 1, "product_id": 8, "quantity": 1, "cost": 25.0},
        ]

        fetched = await client.get(f"/invoices/{body['id']}")
        assert fetched.status_code == 200
        assert fetched.json() == body

    async def test_created_invoice_shows_in_customer_totals(self, client):
        await client.post(
            "/invoices",
            json={"customer_id": 5, "product_ids": [1, 2], "quantities": [2, 1]},
        )

        revenue = await client.get("/customers/5/revenue")
        count = await client.get("/customers/5/invoices/count")
        assert revenue.json()["total"] == pytest.approx(120.5)
        assert count.json() == {"customer_id": 5, "count": 1}

    async def test_unknown_product_is_a_conflict(self, client):
        response = await client.post(
            "/invoices",
            json={"customer_id": 7, "product_ids": [3, 999], "quantities": [2, 1]},
        )
        assert response.status_code == 409

        count = await client.get("/customers/7/invoices/count")
        assert count.json()["count"] == 0

    async def test_mismatched_lines_are_a_bad_request(self, client):
        response = await client.post(
            "/invoices",
            json={"customer_id": 7, "product_ids": [3, 8], "quantities": [2]},
        )
        assert response.status_code == 400

    async def test_non_positive_quantity_is_invalid(self, client):
        response = await client.post(
            "/invoices",
            json={"customer_id": 7, "product_ids": [3], "quantities": [0]},
        )
        assert response.status_code == 422

    async def test_get_unknown_invoice(self, client):
        response = await client.get("/invoices/12345")
        assert response.status_code == 404

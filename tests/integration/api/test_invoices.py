"""Integration tests for invoice endpoints."""

from uuid import uuid4

import pytest
from httpx import AsyncClient

from tests.factories.staff import InvoiceCreateFactory


pytestmark = pytest.mark.integration


def invoice_payload(**overrides: object) -> dict:
    payload = InvoiceCreateFactory.build().model_dump(mode="json", by_alias=True)
    payload.update(overrides)
    return payload


async def create_invoice(client: AsyncClient, **overrides: object) -> dict:
    response = await client.post(
        "/api/invoice/createInvoice", json=invoice_payload(**overrides)
    )
    assert response.status_code == 201
    return response.json()["invoice"]


class TestCreateInvoice:
    """Tests for POST /api/invoice/createInvoice."""

    async def test_create_invoice(self, admin_client: AsyncClient):
        payload = invoice_payload()

        response = await admin_client.post("/api/invoice/createInvoice", json=payload)

        assert response.status_code == 201
        data = response.json()
        assert data["message"] == "Invoice created successfully"
        assert data["invoice"]["items"] == payload["items"]
        assert data["invoice"]["total"] == payload["total"]

    async def test_amounts_are_not_recomputed(self, admin_client: AsyncClient):
        """Subtotal, discount and total are stored exactly as supplied."""
        invoice = await create_invoice(
            admin_client, subtotal=1.0, discount=0.5, total=123.0
        )

        assert invoice["subtotal"] == 1.0
        assert invoice["discount"] == 0.5
        assert invoice["total"] == 123.0

    async def test_discount_defaults_to_zero(self, admin_client: AsyncClient):
        payload = invoice_payload()
        del payload["discount"]

        response = await admin_client.post("/api/invoice/createInvoice", json=payload)

        assert response.status_code == 201
        assert response.json()["invoice"]["discount"] == 0

    async def test_zero_quantity_rejected(self, admin_client: AsyncClient):
        payload = invoice_payload()
        payload["items"][0]["quantity"] = 0

        response = await admin_client.post("/api/invoice/createInvoice", json=payload)

        assert response.status_code == 400

    async def test_items_keep_order(self, admin_client: AsyncClient):
        payload = invoice_payload()

        invoice = await create_invoice(admin_client, items=payload["items"])

        assert [item["food"] for item in invoice["items"]] == [
            item["food"] for item in payload["items"]
        ]


class TestUpdateInvoiceDateTime:
    """Tests for PUT /api/invoice/updateInvoiceDateTime/{id}."""

    async def test_update_date_and_time(self, admin_client: AsyncClient):
        invoice = await create_invoice(admin_client)

        response = await admin_client.put(
            f"/api/invoice/updateInvoiceDateTime/{invoice['id']}",
            json={"date": "2024-12-31", "time": "23:59"},
        )

        assert response.status_code == 200
        data = response.json()["invoice"]
        assert data["date"] == "2024-12-31"
        assert data["time"] == "23:59"
        assert data["total"] == invoice["total"]

    async def test_amounts_cannot_change(self, admin_client: AsyncClient):
        """Fields other than date/time are ignored; alone they are an empty update."""
        invoice = await create_invoice(admin_client)

        response = await admin_client.put(
            f"/api/invoice/updateInvoiceDateTime/{invoice['id']}",
            json={"total": 0, "items": []},
        )

        assert response.status_code == 400
        fetched = await admin_client.get(f"/api/invoice/getInvoiceById/{invoice['id']}")
        assert fetched.json()["invoice"]["total"] == invoice["total"]
        assert fetched.json()["invoice"]["items"] == invoice["items"]

    async def test_update_unknown(self, admin_client: AsyncClient):
        response = await admin_client.put(
            f"/api/invoice/updateInvoiceDateTime/{uuid4()}", json={"time": "10:00"}
        )

        assert response.status_code == 404
        assert response.json()["message"] == "Invoice not found"


class TestReadDeleteInvoice:
    async def test_list_and_get(self, admin_client: AsyncClient):
        invoice = await create_invoice(admin_client)

        listed = await admin_client.get("/api/invoice/getAllInvoices")
        fetched = await admin_client.get(f"/api/invoice/getInvoiceById/{invoice['id']}")

        assert [i["id"] for i in listed.json()["invoices"]] == [invoice["id"]]
        assert fetched.json()["invoice"] == invoice

    async def test_delete(self, admin_client: AsyncClient):
        invoice = await create_invoice(admin_client)

        response = await admin_client.delete(
            f"/api/invoice/deleteInvoiceById/{invoice['id']}"
        )
        again = await admin_client.delete(
            f"/api/invoice/deleteInvoiceById/{invoice['id']}"
        )

        assert response.status_code == 200
        assert response.json()["message"] == "Invoice deleted successfully"
        assert again.status_code == 404

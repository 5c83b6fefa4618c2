"""
HTTP tests for the invoice and dashboard endpoints.
"""

from datetime import date

from invoicer.domain.services.email_service import DeliveryResult


PREFIX = "/api/v1"


def create(api_client, headers, payload):
    response = api_client.post(f"{PREFIX}/invoices", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestInvoiceEndpoints:

    def test_create_and_get(self, api_client, headers_a, invoice_payload):
        created = create(api_client, headers_a, invoice_payload())

        response = api_client.get(f"{PREFIX}/invoices/{created['id']}", headers=headers_a)

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["data"]["total"] == 20
        assert body["data"]["status"] == "UNPAID"
        assert len(body["data"]["items"]) == 1

    def test_missing_token(self, api_client, invoice_payload):
        response = api_client.post(f"{PREFIX}/invoices", json=invoice_payload())

        assert response.status_code == 401
        assert response.json() == {"success": False, "error": "Unauthorized"}
        assert response.headers["www-authenticate"] == "Bearer"

    def test_missing_token_with_invalid_body(self, api_client, invoice_payload):
        response = api_client.post(f"{PREFIX}/invoices", json=invoice_payload(to=None, total="lots"))

        assert response.status_code == 401
        assert response.json() == {"success": False, "error": "Unauthorized"}

    def test_empty_items_accepted(self, api_client, headers_a, invoice_payload):
        created = create(api_client, headers_a, invoice_payload(items=[], sub_total=0, total=0))

        assert created["items"] == []

    def test_invalid_token(self, api_client):
        response = api_client.get(f"{PREFIX}/invoices", headers={"Authorization": "Bearer nonsense"})

        assert response.status_code == 401

    def test_invalid_body(self, api_client, headers_a, invoice_payload):
        response = api_client.post(f"{PREFIX}/invoices", json=invoice_payload(to=None), headers=headers_a)

        assert response.status_code == 422
        assert response.json()["success"] is False
        assert response.json()["error"] == "Invalid request"

    def test_other_account_gets_not_found(self, api_client, headers_a, headers_b, invoice_payload):
        created = create(api_client, headers_a, invoice_payload())

        response = api_client.get(f"{PREFIX}/invoices/{created['id']}", headers=headers_b)

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Invoice not found"}

    def test_update(self, api_client, headers_a, invoice_payload):
        created = create(api_client, headers_a, invoice_payload())
        payload = invoice_payload(
            items=[{"item_name": "Rework", "quantity": 1, "price": 75, "total": 75}],
            sub_total=75,
            total=75,
            status="PAID",
        )

        response = api_client.put(f"{PREFIX}/invoices/{created['id']}", json=payload, headers=headers_a)

        assert response.status_code == 200, response.text
        data = response.json()["data"]
        assert data["id"] == created["id"]
        assert data["status"] == "PAID"
        assert [item["item_name"] for item in data["items"]] == ["Rework"]

    def test_list_with_pagination(self, api_client, headers_a, invoice_payload):
        for n in range(7):
            create(api_client, headers_a, invoice_payload(invoice_no=f"INV-{n}"))

        response = api_client.get(f"{PREFIX}/invoices", params={"page": 2}, headers=headers_a)

        assert response.status_code == 200
        body = response.json()
        assert len(body["data"]) == 2
        assert body["pagination"] == {"total": 7, "pages": 2, "page": 2, "limit": 5}

    def test_list_page_size_cap(self, api_client, headers_a):
        response = api_client.get(f"{PREFIX}/invoices", params={"limit": 1000}, headers=headers_a)

        assert response.status_code == 400
        assert response.json()["error"] == "Page size cannot exceed 100"


class TestSendEmailEndpoint:

    def test_send(self, api_client, headers_a, invoice_payload, email_channel):
        created = create(api_client, headers_a, invoice_payload())

        response = api_client.post(
            f"{PREFIX}/invoices/{created['id']}/send-email",
            json={"subject": "Invoice INV-001"},
            headers=headers_a,
        )

        assert response.status_code == 200, response.text
        assert response.json() == {"success": True, "message": "Email sent successfully"}
        assert email_channel.calls[0]["to"] == "jane@client.example.com"
        assert f"/invoice/paid/{created['id']}" in email_channel.calls[0]["html"]

    def test_delivery_error(self, api_client, headers_a, invoice_payload, email_channel):
        email_channel.result = DeliveryResult.failed("Rate limit exceeded")
        created = create(api_client, headers_a, invoice_payload())

        response = api_client.post(
            f"{PREFIX}/invoices/{created['id']}/send-email",
            json={"subject": "Invoice INV-001"},
            headers=headers_a,
        )

        assert response.status_code == 502
        assert response.json() == {"success": False, "error": "Rate limit exceeded"}

    def test_no_recipient_email(self, api_client, headers_a, invoice_payload, email_channel):
        payload = invoice_payload()
        payload["to"]["email"] = ""
        created = create(api_client, headers_a, payload)

        response = api_client.post(
            f"{PREFIX}/invoices/{created['id']}/send-email",
            json={"subject": "Invoice INV-001"},
            headers=headers_a,
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Client email not found"
        assert email_channel.calls == []


class TestDashboardEndpoint:

    def test_stats(self, api_client, headers_a, invoice_payload):
        create(api_client, headers_a, invoice_payload(status="PAID"))
        create(api_client, headers_a, invoice_payload(invoice_no="INV-002", total=30, sub_total=30))

        response = api_client.get(f"{PREFIX}/dashboard/stats", headers=headers_a)

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["total_revenue"] == 50
        assert data["total_invoices"] == 2
        assert data["paid_invoices"] == 1
        assert data["unpaid_invoices"] == 1
        assert len(data["recent_invoices"]) == 2
        assert {point["date"] for point in data["chart_data"]} == {date.today().isoformat()}

    def test_requires_token(self, api_client):
        assert api_client.get(f"{PREFIX}/dashboard/stats").status_code == 401

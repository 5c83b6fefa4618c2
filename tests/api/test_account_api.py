"""
HTTP tests for the account, settings and session endpoints.
"""

PREFIX = "/api/v1"


class TestUserEndpoints:

    def test_me(self, api_client, headers_a):
        response = api_client.get(f"{PREFIX}/users/me", headers=headers_a)

        assert response.status_code == 200
        assert response.json()["data"]["email"] == "a@example.com"

    def test_patch_me(self, api_client, headers_b):
        response = api_client.patch(f"{PREFIX}/users/me", json={"currency": "jpy"}, headers=headers_b)

        assert response.status_code == 200
        assert response.json()["data"]["currency"] == "JPY"
        assert response.json()["data"]["first_name"] == "Bob"


class TestSessionEndpoint:

    def test_provisions_account(self, api_client, make_headers):
        headers = make_headers("44444444-4444-4444-4444-444444444444", "dana@example.com", name="Dana Scully")

        response = api_client.post(f"{PREFIX}/auth/session", headers=headers)

        assert response.status_code == 200, response.text
        data = response.json()["data"]
        assert data["email"] == "dana@example.com"
        assert data["first_name"] == "Dana"

        me = api_client.get(f"{PREFIX}/users/me", headers=headers)
        assert me.json()["data"]["id"] == "44444444-4444-4444-4444-444444444444"

    def test_unauthenticated(self, api_client):
        response = api_client.post(f"{PREFIX}/auth/session")

        assert response.status_code == 401


class TestSettingsEndpoints:

    def test_empty_then_saved(self, api_client, headers_a):
        empty = api_client.get(f"{PREFIX}/settings", headers=headers_a)
        assert empty.status_code == 200
        assert empty.json() == {"success": True, "data": None}

        saved = api_client.put(
            f"{PREFIX}/settings",
            json={"invoice_logo": "logo.png", "signature": {"name": "Alice", "image": "sig.png"}},
            headers=headers_a,
        )
        assert saved.status_code == 200, saved.text

        fetched = api_client.get(f"{PREFIX}/settings", headers=headers_a).json()["data"]
        assert fetched["invoice_logo"] == "logo.png"
        assert fetched["signature"]["name"] == "Alice"


class TestServiceEndpoints:

    def test_health(self, api_client):
        response = api_client.get(f"{PREFIX}/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_root_is_unprefixed(self, api_client):
        response = api_client.get("/")

        assert response.status_code == 200
        assert response.json()["health"] == f"{PREFIX}/health"
        assert api_client.get(f"{PREFIX}/").status_code == 404

    def test_unknown_route(self, api_client):
        response = api_client.get("/nope")

        assert response.status_code == 404
        assert response.json()["success"] is False

"""
Tests for yard_invites.integrations.fastapi module.
"""

import pytest
from fastapi.testclient import TestClient

from yard_invites.integrations.fastapi import CORS_HEADERS, create_app
from yard_invites.notices.models import DeliveryStatus

from tests.conftest import make_backend, make_config


@pytest.fixture
def backend():
    return make_backend(DeliveryStatus.SENT, message_id="msg_123")


@pytest.fixture
def client(notifier_config, backend):
    app = create_app(notifier_config, backend=backend)
    with TestClient(app) as test_client:
        yield test_client


def assert_cors(response):
    for name, value in CORS_HEADERS.items():
        assert response.headers[name] == value


class TestPreflight:
    """Tests for CORS preflight handling."""

    @pytest.mark.parametrize("path", ["/send-invitation-email", "/send-invitation"])
    def test_options(self, client, path):
        response = client.options(path)

        assert response.status_code == 200
        assert response.text == "ok"
        assert_cors(response)

    def test_browser_preflight_headers(self, client):
        response = client.options(
            "/send-invitation-email",
            headers={
                "Origin": "https://app.example",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "content-type, apikey",
            },
        )

        assert response.status_code == 200
        assert response.headers["Access-Control-Allow-Origin"] == "*"


class TestSendInvitationEmailRoute:
    """Tests for POST /send-invitation-email."""

    def test_success(self, client, sample_payload, backend):
        response = client.post("/send-invitation-email", json=sample_payload)

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["invite_url"] == "https://app.example/invite/tok123"
        assert body["email_id"] == "msg_123"
        assert_cors(response)
        backend.deliver.assert_awaited_once()

    def test_missing_fields(self, client, backend):
        response = client.post(
            "/send-invitation-email", json={"invitee_email": "ann@example.com"}
        )

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["missing_fields"] == [
            "invitee_name", "inviter_name", "hours", "mode", "invitation_token"
        ]
        assert_cors(response)
        backend.deliver.assert_not_called()

    def test_nan_hours_rejected(self, client, backend):
        body = (
            b'{"invitee_email": "ann@example.com", "invitee_name": "Ann", '
            b'"inviter_name": "Bo", "hours": NaN, "mode": "helped", '
            b'"invitation_token": "tok123"}'
        )

        response = client.post(
            "/send-invitation-email",
            content=body,
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["invalid_fields"] == ["hours"]
        backend.deliver.assert_not_called()

    def test_malformed_json(self, client, backend):
        response = client.post(
            "/send-invitation-email",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is False
        assert body["error"] == "Failed to send invitation email"
        assert "details" in body
        backend.deliver.assert_not_called()

    def test_malformed_json_error_policy(self):
        config = make_config(site_url="https://app.example", internal_error_policy="error")
        app = create_app(config, backend=make_backend())

        with TestClient(app) as client:
            response = client.post("/send-invitation-email", content=b"")

        assert response.status_code == 500
        assert response.json()["success"] is False
        assert_cors(response)

    def test_documented_example_without_provider(self, sample_payload):
        """Test the example from the contract with no provider configured."""
        app = create_app(make_config(site_url="https://app.example"))

        with TestClient(app) as client:
            response = client.post("/send-invitation-email", json=sample_payload)

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["invite_url"] == "https://app.example/invite/tok123"
        assert body["delivery"] == "skipped"


class TestSendInvitationRoute:
    """Tests for POST /send-invitation."""

    def test_sms(self, client, sample_contact_payload):
        sample_contact_payload.update(type="sms", contact="+15550100")

        response = client.post("/send-invitation", json=sample_contact_payload)

        assert response.status_code == 200
        assert response.json()["message"] == "SMS invitation not sent; delivery is not configured"

    def test_missing_fields(self, client):
        response = client.post("/send-invitation", json={})

        assert response.status_code == 400
        assert response.json()["error"] == "Missing required fields"


class TestLifecycle:
    """Tests for application lifecycle."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "delivery_backend": "fake"}

    def test_backend_closed_on_shutdown(self, notifier_config, backend):
        app = create_app(notifier_config, backend=backend)

        with TestClient(app):
            backend.close.assert_not_called()

        backend.close.assert_awaited_once()

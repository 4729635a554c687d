"""
Pytest configuration and fixtures for yard_invites tests.

Provides configs, sample payloads, a mock Supabase client and a mock
delivery backend.
"""

import json
import os
from typing import Callable, List
from unittest.mock import AsyncMock, Mock

import httpx
import pytest

from yard_invites.config import NotifierConfig
from yard_invites.delivery.base import DeliveryBackend
from yard_invites.notices.models import DeliveryResult, DeliveryStatus
from yard_invites.utils.supabase import NotifierSupabaseClient

SITE_URL = "https://app.example"
RESEND_KEY = "re_test_key_1234567890"
SUPABASE_URL = "https://test.supabase.co"
SUPABASE_KEY = "test-service-key-12345678901234567890"


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep YARD_* variables from the host out of every test."""
    for key in list(os.environ):
        if key.startswith("YARD_"):
            monkeypatch.delenv(key, raising=False)


def make_config(**kwargs) -> NotifierConfig:
    """Build a config that ignores any .env file in the working directory."""
    return NotifierConfig(_env_file=None, **kwargs)


@pytest.fixture
def notifier_config():
    """Config with a site URL and no delivery backend."""
    return make_config(site_url=SITE_URL)


@pytest.fixture
def resend_config():
    return make_config(site_url=SITE_URL, resend_api_key=RESEND_KEY)


@pytest.fixture
def supabase_config():
    return make_config(
        site_url=SITE_URL,
        supabase_url=SUPABASE_URL,
        supabase_service_role_key=SUPABASE_KEY,
    )


@pytest.fixture
def sample_payload():
    """A complete, valid invitation request body."""
    return {
        "invitee_email": "ann@example.com",
        "invitee_name": "Ann",
        "inviter_name": "Bo",
        "hours": 2,
        "mode": "helped",
        "invitation_token": "tok123",
    }


@pytest.fixture
def sample_contact_payload():
    """A complete, valid contact invitation request body."""
    return {
        "contact": "ann@example.com",
        "name": "Ann",
        "inviterName": "Bo",
        "hours": 1,
        "mode": "helped",
        "type": "email",
    }


@pytest.fixture
def mock_supabase_client():
    """Create a mock Supabase AsyncClient with an auth admin API."""
    client = AsyncMock()

    auth_client = AsyncMock()
    auth_admin = AsyncMock()
    auth_client.admin = auth_admin
    client.auth = auth_client

    invited_user = Mock()
    invited_user.id = "0b7c4c1e-1111-2222-3333-444455556666"
    auth_admin.invite_user_by_email = AsyncMock(return_value=Mock(user=invited_user))

    return client


@pytest.fixture
def mock_notifier_supabase_client(mock_supabase_client, supabase_config):
    """Create a NotifierSupabaseClient around the mock client."""
    return NotifierSupabaseClient(config=supabase_config, client=mock_supabase_client)


def make_backend(status: DeliveryStatus = DeliveryStatus.SENT, **result_kwargs) -> Mock:
    """
    Mock delivery backend whose deliver/send_email return a fixed result.

    Args:
        status: Delivery status to report
        **result_kwargs: Extra DeliveryResult fields (message_id, error)
    """
    backend = Mock(spec=DeliveryBackend)
    backend.name = "fake"
    result = DeliveryResult(status=status, provider="fake", **result_kwargs)
    backend.deliver = AsyncMock(return_value=result)
    backend.send_email = AsyncMock(return_value=result)
    backend.close = AsyncMock()
    return backend


@pytest.fixture
def mock_backend():
    """Backend that reports every delivery as sent."""
    return make_backend(DeliveryStatus.SENT, message_id="msg_123")


def resend_transport(
    status_code: int = 200,
    body=None,
) -> tuple[httpx.MockTransport, List[httpx.Request]]:
    """
    httpx transport that answers every request with a fixed response.

    Returns:
        The transport and the list it records requests into
    """
    requests: List[httpx.Request] = []
    body = {"id": "email_abc123"} if body is None else body

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(status_code, content=json.dumps(body).encode())

    return httpx.MockTransport(handler), requests


def failing_transport(exc_factory: Callable[[httpx.Request], Exception]) -> httpx.MockTransport:
    """httpx transport that raises for every request."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise exc_factory(request)

    return httpx.MockTransport(handler)

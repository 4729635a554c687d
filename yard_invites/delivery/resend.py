"""
Direct email delivery through the Resend HTTP API.
"""

import logging
from typing import Optional

import httpx

from ..config import NotifierConfig
from ..notices.models import DeliveryResult, EmailContent, InvitationNotice
from .base import DeliveryBackend

logger = logging.getLogger(__name__)


class ResendEmailBackend(DeliveryBackend):
    """
    Sends invitation emails with one ``POST`` to the Resend send endpoint.

    Example:
        ```python
        backend = ResendEmailBackend(config)
        result = await backend.deliver(notice, content, invite_url)
        if result.ok:
            print(result.message_id)
        await backend.close()
        ```
    """

    name = "resend"

    def __init__(
        self,
        config: NotifierConfig,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Initialize ResendEmailBackend.

        Args:
            config: Notifier configuration with ``resend_api_key`` set
            http_client: Optional client to use instead of creating one lazily
        """
        self.api_key = config.resend_api_key
        self.api_url = config.resend_api_url
        self.from_email = config.from_email
        self.timeout = config.http_timeout
        self._http_client = http_client

    async def _get_http_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client for provider calls."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=self.timeout)
        return self._http_client

    def _build_payload(self, to_email: str, content: EmailContent) -> dict:
        return {
            "from": self.from_email,
            "to": [to_email],
            "subject": content.subject,
            "html": content.html,
            "text": content.text,
        }

    async def deliver(
        self,
        notice: InvitationNotice,
        content: EmailContent,
        invite_url: str,
    ) -> DeliveryResult:
        return await self.send_email(notice.invitee_email, content)

    async def send_email(self, to_email: str, content: EmailContent) -> DeliveryResult:
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

        try:
            http_client = await self._get_http_client()
            response = await http_client.post(
                self.api_url,
                json=self._build_payload(to_email, content),
                headers=headers,
            )
        except httpx.HTTPError as e:
            logger.warning("Resend request for %s failed: %s", to_email, e)
            return self._failed(f"Email provider request failed: {e}")

        if not 200 <= response.status_code < 300:
            error = _error_message(response)
            logger.warning(
                "Resend rejected email to %s (status %s): %s",
                to_email,
                response.status_code,
                error,
            )
            return self._failed(error)

        message_id = _json_body(response).get("id")
        logger.info("Invitation email sent to %s (id=%s)", to_email, message_id)
        return self._sent(message_id)

    async def close(self) -> None:
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None


def _json_body(response: httpx.Response) -> dict:
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def _error_message(response: httpx.Response) -> str:
    body = _json_body(response)
    message = body.get("message") or body.get("error")
    if isinstance(message, dict):
        message = message.get("message")
    if not message:
        message = response.text[:500] if response.text else response.reason_phrase
    return f"Email provider returned {response.status_code}: {message}"

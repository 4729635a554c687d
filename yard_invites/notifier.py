"""
Invitation notifier.

The request handler behind the HTTP endpoints. One call validates the
payload, builds the invite link, renders the email, makes exactly one
delivery attempt and returns a response. Delivery problems never turn into
request failures: the invitation already exists, the email is best-effort.
"""

import logging
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from .config import NotifierConfig
from .delivery import DeliveryBackend, select_backend
from .exceptions import InvitationValidationError
from .notices.content import (
    render_contact_email,
    render_contact_message,
    render_invitation_email,
)
from .notices.models import (
    ContactChannel,
    DeliveryResult,
    DeliveryStatus,
    InviteLink,
)
from .notices.urls import build_invite_url, build_landing_url
from .notices.validation import parse_contact_invitation, parse_notice

logger = logging.getLogger(__name__)

SMS_NOT_CONFIGURED_NOTE = "SMS provider not configured; invitation message was not sent"


class NotifierResponse(BaseModel):
    """HTTP status plus JSON body for one notifier call."""

    status_code: int = 200
    body: Dict[str, Any] = Field(default_factory=dict)


class InvitationNotifier:
    """
    Sends invitation notifications through one delivery backend.

    Example:
        ```python
        notifier = InvitationNotifier(load_config())
        response = await notifier.send_invitation_email({
            "invitee_email": "ann@example.com",
            "invitee_name": "Ann",
            "inviter_name": "Bo",
            "hours": 2,
            "mode": "helped",
            "invitation_token": "tok123",
        })
        response.body["invite_url"]
        ```
    """

    def __init__(
        self,
        config: NotifierConfig,
        backend: Optional[DeliveryBackend] = None,
    ) -> None:
        """
        Initialize InvitationNotifier.

        Args:
            config: Notifier configuration
            backend: Delivery backend; selected from config when omitted
        """
        self.config = config
        self.backend = backend if backend is not None else select_backend(config)

    async def send_invitation_email(self, payload: Any) -> NotifierResponse:
        """
        Validate, render and deliver one invitation email.

        Args:
            payload: Parsed JSON request body

        Returns:
            NotifierResponse; 400 for input errors, 200 for every delivery
            outcome, and 200 or 500 for unexpected errors depending on
            ``internal_error_policy``
        """
        try:
            notice = parse_notice(payload)
        except InvitationValidationError as e:
            return self.invalid_request(e)

        try:
            link = build_invite_url(self.config.site_url, notice.invitation_token)
            content = render_invitation_email(notice, link.url)
            result = await self.backend.deliver(notice, content, link.url)
        except Exception as e:
            return self.internal_error(e)

        return self._invitation_response(result, link)

    async def send_contact_invitation(self, payload: Any) -> NotifierResponse:
        """
        Send the short-form invitation to an email address or phone number.

        Email contacts go through the configured backend. There is no SMS
        backend, so SMS contacts are logged and reported as skipped.
        """
        try:
            invitation = parse_contact_invitation(payload)
        except InvitationValidationError as e:
            return self.invalid_request(e)

        try:
            landing_url = build_landing_url(self.config.site_url)
            if invitation.channel == ContactChannel.EMAIL:
                content = render_contact_email(invitation, landing_url)
                result = await self.backend.send_email(invitation.contact, content)
                label = "Email"
            else:
                message = render_contact_message(invitation, landing_url)
                logger.info("Would send SMS to %s: %s", invitation.contact, message)
                result = DeliveryResult(
                    status=DeliveryStatus.SKIPPED,
                    provider="sms",
                    error=SMS_NOT_CONFIGURED_NOTE,
                )
                label = "SMS"
        except Exception as e:
            return self.internal_error(e, error="Failed to send invitation")

        body: Dict[str, Any] = {
            "success": True,
            "message": _contact_message(label, result.status),
        }
        body.update(_delivery_fields(result))
        return NotifierResponse(body=body)

    def invalid_request(self, error: InvitationValidationError) -> NotifierResponse:
        """400 response for a payload with missing or malformed fields."""
        body: Dict[str, Any] = {"success": False}
        if error.missing_fields:
            body["error"] = "Missing required fields"
            body["missing_fields"] = error.missing_fields
        else:
            body["error"] = "Invalid fields"
            body["invalid_fields"] = error.invalid_fields

        logger.info("Rejected invitation request: %s", error)
        return NotifierResponse(status_code=400, body=body)

    def internal_error(
        self,
        exc: Exception,
        error: str = "Failed to send invitation email",
    ) -> NotifierResponse:
        """
        Response for an unexpected error, shaped by ``internal_error_policy``.

        ``"ok"`` answers 200 so the caller's invitation flow carries on;
        ``"error"`` answers 500.
        """
        logger.exception("%s: %s", error, exc)
        status_code = 500 if self.config.internal_error_policy == "error" else 200
        return NotifierResponse(
            status_code=status_code,
            body={"success": False, "error": error, "details": str(exc)},
        )

    def _invitation_response(
        self,
        result: DeliveryResult,
        link: InviteLink,
    ) -> NotifierResponse:
        if result.status == DeliveryStatus.SENT:
            message = "Invitation email sent successfully"
        elif result.status == DeliveryStatus.SKIPPED:
            message = "Invitation created; email delivery is not configured"
        else:
            message = "Invitation created but the email could not be delivered"

        body: Dict[str, Any] = {
            "success": True,
            "message": message,
            "invite_url": link.url,
        }
        body.update(_delivery_fields(result))
        if link.used_fallback:
            body["site_url_fallback"] = True
        return NotifierResponse(body=body)

    async def close(self) -> None:
        await self.backend.close()


def _delivery_fields(result: DeliveryResult) -> Dict[str, Any]:
    fields: Dict[str, Any] = {
        "delivery": result.status.value,
        "provider": result.provider,
    }
    if result.status == DeliveryStatus.SENT:
        if result.message_id:
            fields["email_id"] = result.message_id
    elif result.status == DeliveryStatus.SKIPPED:
        fields["note"] = result.error
    else:
        fields["email_error"] = result.error
    return fields


def _contact_message(label: str, status: DeliveryStatus) -> str:
    if status == DeliveryStatus.SENT:
        return f"{label} invitation sent successfully"
    if status == DeliveryStatus.SKIPPED:
        return f"{label} invitation not sent; delivery is not configured"
    return f"{label} invitation could not be delivered"

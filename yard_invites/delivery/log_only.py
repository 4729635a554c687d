"""
Log-only delivery, used when no email backend is configured.
"""

import logging

from ..notices.models import DeliveryResult, EmailContent, InvitationNotice
from .base import DeliveryBackend

logger = logging.getLogger(__name__)

NOT_CONFIGURED_NOTE = "Email provider not configured; invitation email was not sent"


class LogOnlyBackend(DeliveryBackend):
    """Logs what would have been sent and reports the delivery as skipped."""

    name = "log-only"

    async def deliver(
        self,
        notice: InvitationNotice,
        content: EmailContent,
        invite_url: str,
    ) -> DeliveryResult:
        return await self.send_email(notice.invitee_email, content)

    async def send_email(self, to_email: str, content: EmailContent) -> DeliveryResult:
        logger.info("Would send email to %s: %s", to_email, content.subject)
        logger.debug("Text content for %s:\n%s", to_email, content.text)
        return self._skipped(NOT_CONFIGURED_NOTE)

"""
Delivery backend interface.
"""

from abc import ABC, abstractmethod

from ..notices.models import (
    DeliveryResult,
    DeliveryStatus,
    EmailContent,
    InvitationNotice,
)


class DeliveryBackend(ABC):
    """
    Hands a rendered invitation to something that can deliver it.

    Implementations make at most one outbound attempt per call and never
    raise for provider problems: rejections and transport errors come back
    as a ``DeliveryResult`` with ``status=FAILED``.
    """

    name: str = "backend"

    @abstractmethod
    async def deliver(
        self,
        notice: InvitationNotice,
        content: EmailContent,
        invite_url: str,
    ) -> DeliveryResult:
        """Deliver one invitation."""

    async def send_email(self, to_email: str, content: EmailContent) -> DeliveryResult:
        """
        Send a plain email that is not tied to an invitation notice.

        Backends that can only deliver invitations report it as skipped.
        """
        return self._skipped(f"{self.name} cannot send plain emails")

    async def close(self) -> None:
        """Release network resources held by the backend."""

    def _sent(self, message_id=None) -> DeliveryResult:
        return DeliveryResult(
            status=DeliveryStatus.SENT,
            provider=self.name,
            message_id=str(message_id) if message_id is not None else None,
        )

    def _failed(self, error: str) -> DeliveryResult:
        return DeliveryResult(status=DeliveryStatus.FAILED, provider=self.name, error=error)

    def _skipped(self, note: str) -> DeliveryResult:
        return DeliveryResult(status=DeliveryStatus.SKIPPED, provider=self.name, error=note)

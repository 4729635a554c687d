"""
Identity-provider invites through the Supabase auth admin API.

Wraps: supabase_auth._async.gotrue_admin_api.AsyncGoTrueAdminAPI.invite_user_by_email
"""

import logging
from typing import Optional

from ..config import NotifierConfig
from ..notices.models import DeliveryResult, EmailContent, InvitationNotice
from ..utils.supabase import NotifierSupabaseClient
from .base import DeliveryBackend

logger = logging.getLogger(__name__)


class SupabaseInviteBackend(DeliveryBackend):
    """
    Lets Supabase send its own "you have been invited" email.

    The rendered content is not used: Supabase sends its configured invite
    template. The invitation details travel as user metadata, and the invite
    link redirects to our invite URL once the user is confirmed.
    """

    name = "supabase"

    def __init__(
        self,
        config: NotifierConfig,
        client: Optional[NotifierSupabaseClient] = None,
    ) -> None:
        """
        Initialize SupabaseInviteBackend.

        Args:
            config: Notifier configuration with Supabase credentials
            client: Optional pre-built client (created lazily otherwise)
        """
        self.config = config
        self._client = client

    async def _get_client(self) -> NotifierSupabaseClient:
        if self._client is None:
            self._client = await NotifierSupabaseClient.create(self.config)
        return self._client

    async def deliver(
        self,
        notice: InvitationNotice,
        content: EmailContent,
        invite_url: str,
    ) -> DeliveryResult:
        options = {
            "data": notice.metadata(),
            "redirect_to": invite_url,
        }

        try:
            client = await self._get_client()
            response = await client.auth.admin.invite_user_by_email(
                notice.invitee_email, options
            )
        except Exception as e:
            # Invitation stays valid; the caller still gets the link
            logger.warning(
                "Supabase invite for %s failed: %s", notice.invitee_email, e
            )
            return self._failed(f"Identity provider invite failed: {e}")

        user = getattr(response, "user", None)
        if user is None:
            logger.warning(
                "Supabase invite for %s returned no user", notice.invitee_email
            )
            return self._failed("Identity provider invite returned no user")

        logger.info(
            "Supabase invite sent to %s (user=%s)", notice.invitee_email, user.id
        )
        return self._sent(user.id)

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None

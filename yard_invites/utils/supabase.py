"""
Supabase client wrapper for the notifier.

Provides a thin wrapper around the Supabase AsyncClient configured with the
service role key, which the auth admin API requires.

Package versions this was built against:
- supabase: 2.27.1
- supabase-auth: 2.27.1
"""

from supabase import AsyncClient, acreate_client
from supabase.lib.client_options import AsyncClientOptions
from supabase_auth import AsyncMemoryStorage

from ..config import NotifierConfig
from ..exceptions import ConfigurationError


class NotifierSupabaseClient:
    """
    Wrapper around Supabase AsyncClient used for identity-provider invites.

    Example:
        ```python
        config = NotifierConfig(
            supabase_url="https://xxx.supabase.co",
            supabase_service_role_key="service-role-key",
        )
        client = await NotifierSupabaseClient.create(config)

        await client.auth.admin.invite_user_by_email(
            "ann@example.com", {"data": {...}, "redirect_to": invite_url}
        )
        ```
    """

    def __init__(self, config: NotifierConfig, client: AsyncClient) -> None:
        """
        Initialize the wrapper.

        Note:
            Use NotifierSupabaseClient.create() instead of direct instantiation.
        """
        self.config = config
        self._client = client

    @classmethod
    async def create(cls, config: NotifierConfig) -> "NotifierSupabaseClient":
        """
        Create and initialize a NotifierSupabaseClient.

        Args:
            config: Notifier configuration with Supabase credentials

        Returns:
            Initialized NotifierSupabaseClient

        Raises:
            ConfigurationError: If the Supabase URL or service role key is missing
        """
        if not config.has_supabase:
            raise ConfigurationError(
                "supabase_url and supabase_service_role_key are required "
                "for identity-provider invites"
            )

        # Service role sessions are never refreshed or persisted
        options = AsyncClientOptions(
            storage=AsyncMemoryStorage(),
            auto_refresh_token=False,
            persist_session=False,
            headers={
                "apikey": config.supabase_service_role_key,
                "Authorization": f"Bearer {config.supabase_service_role_key}",
            },
        )

        client = await acreate_client(
            supabase_url=config.supabase_url,
            supabase_key=config.supabase_service_role_key,
            options=options,
        )

        return cls(config=config, client=client)

    @property
    def auth(self):
        """
        Access the Supabase Auth client.

        ``auth.admin.invite_user_by_email`` is the only call the notifier makes.
        """
        return self._client.auth

    async def close(self) -> None:
        """Sign out the admin session and release the auth HTTP connections."""
        await self._client.auth.sign_out()
        # auth.admin shares this HTTP client; the other sub-clients are never created
        await self._client.auth.close()

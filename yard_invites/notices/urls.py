"""
Invite link construction.
"""

import logging
from typing import Optional

from ..config import DEFAULT_SITE_URL
from .models import InviteLink

logger = logging.getLogger(__name__)


def resolve_site_url(site_url: Optional[str]) -> InviteLink:
    """Return the configured site URL, or the local development default."""
    if site_url:
        return InviteLink(url=site_url.rstrip("/"), used_fallback=False)

    logger.warning("Site URL is not configured, using fallback %s", DEFAULT_SITE_URL)
    return InviteLink(url=DEFAULT_SITE_URL, used_fallback=True)


def build_invite_url(site_url: Optional[str], invitation_token: str) -> InviteLink:
    """
    Build the invite link ``<site_url>/invite/<token>``.

    The token is opaque and inserted verbatim. Nothing else from the request
    influences the URL.

    Args:
        site_url: Configured site base URL, or None
        invitation_token: Token issued by whoever created the invitation

    Returns:
        InviteLink with the URL and whether the fallback site URL was used

    Example:
        ```python
        build_invite_url("https://app.example", "tok123").url
        # 'https://app.example/invite/tok123'
        ```
    """
    base = resolve_site_url(site_url)
    return InviteLink(
        url=f"{base.url}/invite/{invitation_token}",
        used_fallback=base.used_fallback,
    )


def build_landing_url(site_url: Optional[str]) -> str:
    """Generic ``<site_url>/invite`` link used by contact invitations."""
    return f"{resolve_site_url(site_url).url}/invite"

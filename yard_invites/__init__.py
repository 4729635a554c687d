"""
yard-invites - invitation email notifier for Yard.

Renders an invitation email for a time-logging invite and delivers it through
Resend, Supabase auth invites, or a log-only fallback. Delivery is
best-effort: the invite link is always returned to the caller.

Example:
    ```python
    from yard_invites import InvitationNotifier, load_config

    notifier = InvitationNotifier(load_config())
    response = await notifier.send_invitation_email({
        "invitee_email": "ann@example.com",
        "invitee_name": "Ann",
        "inviter_name": "Bo",
        "hours": 2,
        "mode": "helped",
        "invitation_token": "tok123",
    })
    print(response.body["invite_url"])
    ```
"""

from .config import NotifierConfig, load_config
from .delivery import (
    DeliveryBackend,
    LogOnlyBackend,
    ResendEmailBackend,
    SupabaseInviteBackend,
    select_backend,
)
from .exceptions import ConfigurationError, InvitationValidationError, NotifierError
from .notices import (
    DeliveryResult,
    DeliveryStatus,
    EmailContent,
    InvitationNotice,
    build_invite_url,
    parse_notice,
    render_invitation_email,
)
from .notifier import InvitationNotifier, NotifierResponse

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "NotifierConfig",
    "load_config",
    # Handler
    "InvitationNotifier",
    "NotifierResponse",
    # Notices
    "InvitationNotice",
    "EmailContent",
    "DeliveryResult",
    "DeliveryStatus",
    "build_invite_url",
    "parse_notice",
    "render_invitation_email",
    # Delivery backends
    "DeliveryBackend",
    "ResendEmailBackend",
    "SupabaseInviteBackend",
    "LogOnlyBackend",
    "select_backend",
    # Errors
    "NotifierError",
    "InvitationValidationError",
    "ConfigurationError",
]

"""
Delivery backends.

Exactly one backend is chosen at startup from the configuration:

- ``resend``: direct email through the Resend API
- ``supabase``: Supabase auth admin "invite user by email"
- ``none``: log what would have been sent
"""

import logging

from ..config import NotifierConfig
from ..exceptions import ConfigurationError
from .base import DeliveryBackend
from .log_only import LogOnlyBackend
from .resend import ResendEmailBackend
from .supabase import SupabaseInviteBackend

logger = logging.getLogger(__name__)


def select_backend(config: NotifierConfig) -> DeliveryBackend:
    """
    Build the delivery backend the configuration asks for.

    With ``delivery_backend="auto"`` Resend wins over Supabase, and with
    neither configured the log-only backend is used.

    Raises:
        ConfigurationError: If an explicitly chosen backend lacks credentials
    """
    choice = config.delivery_backend

    if choice == "auto":
        if config.has_resend:
            choice = "resend"
        elif config.has_supabase:
            choice = "supabase"
        else:
            choice = "none"

    if choice == "resend":
        if not config.has_resend:
            raise ConfigurationError("delivery_backend 'resend' requires resend_api_key")
        backend: DeliveryBackend = ResendEmailBackend(config)
    elif choice == "supabase":
        if not config.has_supabase:
            raise ConfigurationError(
                "delivery_backend 'supabase' requires supabase_url "
                "and supabase_service_role_key"
            )
        backend = SupabaseInviteBackend(config)
    else:
        backend = LogOnlyBackend()

    logger.info("Using %s delivery backend", backend.name)
    return backend


__all__ = [
    "DeliveryBackend",
    "LogOnlyBackend",
    "ResendEmailBackend",
    "SupabaseInviteBackend",
    "select_backend",
]

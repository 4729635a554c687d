"""
Invitation notices.

Validation, invite links and email rendering for a single invitation.
"""

from .content import render_contact_message, render_invitation_email
from .models import (
    ContactChannel,
    ContactInvitation,
    DeliveryResult,
    DeliveryStatus,
    EmailContent,
    InvitationNotice,
    InviteLink,
)
from .urls import build_invite_url
from .validation import find_missing_fields, parse_contact_invitation, parse_notice

__all__ = [
    "InvitationNotice",
    "ContactInvitation",
    "ContactChannel",
    "EmailContent",
    "InviteLink",
    "DeliveryResult",
    "DeliveryStatus",
    "build_invite_url",
    "find_missing_fields",
    "parse_notice",
    "parse_contact_invitation",
    "render_invitation_email",
    "render_contact_message",
]

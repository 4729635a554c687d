"""
Invitation notice models.

Pydantic models for the transient data that flows through one notification
request. Nothing here is persisted.
"""

from enum import Enum
from typing import Annotated, Optional, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, FiniteFloat

HELPED_MODE = "helped"


def _reject_bool(value):
    # bool is an int subclass; true would otherwise render as "1 hour"
    if isinstance(value, bool):
        raise ValueError("hours must be a number")
    return value


# int or finite float; booleans and NaN/Infinity are rejected
Hours = Annotated[Union[int, FiniteFloat], BeforeValidator(_reject_bool)]


class ContactChannel(str, Enum):
    """Channels accepted by the contact invitation endpoint."""

    EMAIL = "email"
    SMS = "sms"


class DeliveryStatus(str, Enum):
    """Terminal outcomes of a single dispatch attempt."""

    SENT = "sent"
    FAILED = "failed"
    SKIPPED = "skipped"


class InvitationNotice(BaseModel):
    """
    Invitation notice - everything needed to render and send one invite email.

    Built from the request body once every required field has been checked
    for presence, then discarded when the response is written.
    """

    model_config = ConfigDict(frozen=True)

    # Not syntax-checked here; an undeliverable address is a provider rejection
    invitee_email: str
    invitee_name: str
    inviter_name: str

    # Quantity of logged time; 1 renders as "hour", anything else as "hours"
    hours: Hours

    # "helped" means the inviter helped the invitee
    mode: str

    # Opaque, used verbatim as the last path segment of the invite URL
    invitation_token: str

    @property
    def helped(self) -> bool:
        return self.mode == HELPED_MODE

    def metadata(self) -> dict:
        """User metadata attached to identity-provider invites."""
        return {
            "invitee_name": self.invitee_name,
            "inviter_name": self.inviter_name,
            "hours": self.hours,
            "mode": self.mode,
            "invitation_token": self.invitation_token,
        }


class ContactInvitation(BaseModel):
    """Payload of the short-form contact invitation (email or SMS)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    contact: str
    name: str
    inviter_name: str = Field(..., alias="inviterName")
    hours: Hours
    mode: str
    channel: ContactChannel = Field(..., alias="type")

    @property
    def helped(self) -> bool:
        return self.mode == HELPED_MODE


class EmailContent(BaseModel):
    """Rendered email: subject plus HTML and plain-text bodies."""

    model_config = ConfigDict(frozen=True)

    subject: str
    html: str
    text: str


class InviteLink(BaseModel):
    """An invite URL and whether it was built from the fallback site URL."""

    model_config = ConfigDict(frozen=True)

    url: str
    used_fallback: bool = False


class DeliveryResult(BaseModel):
    """
    Outcome of handing one rendered email to a delivery backend.

    Backends never raise for provider problems; they report them here with
    ``status=FAILED`` and a human-readable ``error``.
    """

    model_config = ConfigDict(frozen=True)

    status: DeliveryStatus
    provider: str
    message_id: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == DeliveryStatus.SENT

"""
Request payload validation.

Presence is checked first, with JavaScript-style truthiness: an empty string,
zero, ``None`` or ``False`` counts as missing. Only when every required field
is present is the payload handed to the pydantic model for type checks.
"""

from typing import Any, List, Sequence

from pydantic import ValidationError

from ..exceptions import InvitationValidationError
from .models import ContactInvitation, InvitationNotice

NOTICE_FIELDS = (
    "invitee_email",
    "invitee_name",
    "inviter_name",
    "hours",
    "mode",
    "invitation_token",
)

CONTACT_FIELDS = ("contact", "name", "inviterName", "hours", "mode", "type")


def find_missing_fields(payload: Any, required: Sequence[str] = NOTICE_FIELDS) -> List[str]:
    """
    Return the required fields that are absent or falsy, in declared order.

    A payload that is not a JSON object is missing every field.

    Example:
        ```python
        find_missing_fields({"invitee_email": "a@b.com", "hours": 0})
        # ['invitee_name', 'inviter_name', 'hours', 'mode', 'invitation_token']
        ```
    """
    if not isinstance(payload, dict):
        return list(required)
    return [field for field in required if not payload.get(field)]


def _invalid_fields(exc: ValidationError) -> List[str]:
    fields: List[str] = []
    for error in exc.errors():
        loc = error.get("loc") or ()
        name = str(loc[0]) if loc else "__root__"
        if name not in fields:
            fields.append(name)
    return fields


def parse_notice(payload: Any) -> InvitationNotice:
    """
    Validate a request body and build an InvitationNotice.

    Args:
        payload: Parsed JSON body

    Returns:
        InvitationNotice instance

    Raises:
        InvitationValidationError: If fields are missing or malformed
    """
    missing = find_missing_fields(payload, NOTICE_FIELDS)
    if missing:
        raise InvitationValidationError(missing_fields=missing)

    try:
        return InvitationNotice.model_validate(
            {field: payload[field] for field in NOTICE_FIELDS}
        )
    except ValidationError as e:
        raise InvitationValidationError(invalid_fields=_invalid_fields(e)) from e


def parse_contact_invitation(payload: Any) -> ContactInvitation:
    """
    Validate a contact invitation body (``contact``, ``name``, ``inviterName``,
    ``hours``, ``mode``, ``type``).

    Raises:
        InvitationValidationError: If fields are missing or malformed
    """
    missing = find_missing_fields(payload, CONTACT_FIELDS)
    if missing:
        raise InvitationValidationError(missing_fields=missing)

    try:
        return ContactInvitation.model_validate(
            {field: payload[field] for field in CONTACT_FIELDS}
        )
    except ValidationError as e:
        raise InvitationValidationError(invalid_fields=_invalid_fields(e)) from e

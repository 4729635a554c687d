"""
Invitation email rendering.

Pure functions only: the same notice and URL always give the same subject,
HTML and text.
"""

from html import escape
from typing import Union

from .models import ContactInvitation, EmailContent, InvitationNotice

PRODUCT_NAME = "Yard"
PRODUCT_BLURB = (
    "Yard is a professional time tracking and networking platform where time "
    "becomes currency and expertise flows freely through your network."
)

Number = Union[int, float]


def format_hours(hours: Number) -> str:
    """Render a quantity of hours without a trailing ``.0`` for whole numbers."""
    if isinstance(hours, float) and hours.is_integer():
        return str(int(hours))
    return str(hours)


def hours_unit(hours: Number) -> str:
    """``hour`` for exactly one, ``hours`` for everything else (0 and 1.5 too)."""
    return "hour" if hours == 1 else "hours"


def action_phrase(helped: bool) -> str:
    return "helped you" if helped else "you helped them"


def invitation_subject(inviter_name: str) -> str:
    return f"{inviter_name} wants to track time with you on {PRODUCT_NAME}"


def invitation_summary(inviter_name: str, hours: Number, helped: bool) -> str:
    """One sentence stating who wants to log how much time, and which way round."""
    return (
        f"{inviter_name} wants to track {format_hours(hours)} {hours_unit(hours)} "
        f"of time where {action_phrase(helped)} on {PRODUCT_NAME}."
    )


def render_invitation_html(notice: InvitationNotice, invite_url: str) -> str:
    summary = escape(
        invitation_summary(notice.inviter_name, notice.hours, notice.helped)
    )
    name = escape(notice.invitee_name)
    url = escape(invite_url, quote=True)

    return f"""<!DOCTYPE html>
<html>
  <body style="margin: 0; padding: 0; background-color: #f5f5f5;">
    <div style="font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; max-width: 560px; margin: 0 auto; padding: 32px 24px; background-color: #ffffff; color: #111;">
      <h2 style="margin: 0 0 16px; font-size: 22px;">You have been invited to {PRODUCT_NAME}</h2>
      <p style="margin: 0 0 12px; font-size: 15px;">Hi {name},</p>
      <p style="margin: 0 0 12px; font-size: 15px;">{summary}</p>
      <p style="margin: 0 0 24px; font-size: 15px; color: #444;">{escape(PRODUCT_BLURB)}</p>
      <p style="margin: 0 0 24px;">
        <a href="{url}" style="background-color: #000; color: #fff; padding: 12px 24px; text-decoration: none; border-radius: 8px; display: inline-block;">Join {PRODUCT_NAME} &amp; Confirm Time</a>
      </p>
      <p style="margin: 0 0 4px; font-size: 13px; color: #666;">If the button doesn't work, copy and paste this link into your browser:</p>
      <p style="margin: 0 0 24px; font-size: 13px; color: #666; word-break: break-all;">{url}</p>
      <p style="margin: 0; font-size: 15px;">Best regards,<br>The {PRODUCT_NAME} Team</p>
    </div>
  </body>
</html>
"""


def render_invitation_text(notice: InvitationNotice, invite_url: str) -> str:
    summary = invitation_summary(notice.inviter_name, notice.hours, notice.helped)
    return (
        f"Hi {notice.invitee_name},\n"
        "\n"
        f"{summary}\n"
        "\n"
        f"{PRODUCT_BLURB}\n"
        "\n"
        f"Click this link to join {PRODUCT_NAME} and confirm the time:\n"
        f"{invite_url}\n"
        "\n"
        "Best regards,\n"
        f"The {PRODUCT_NAME} Team\n"
    )


def render_invitation_email(notice: InvitationNotice, invite_url: str) -> EmailContent:
    """
    Render the invitation email for a notice.

    Args:
        notice: Validated invitation notice
        invite_url: Link the invitee should follow

    Returns:
        EmailContent with subject, HTML and plain-text bodies

    Example:
        ```python
        content = render_invitation_email(notice, "https://yard.app/invite/tok123")
        content.subject
        # 'Bo wants to track time with you on Yard'
        ```
    """
    return EmailContent(
        subject=invitation_subject(notice.inviter_name),
        html=render_invitation_html(notice, invite_url),
        text=render_invitation_text(notice, invite_url),
    )


def render_contact_message(invitation: ContactInvitation, landing_url: str) -> str:
    """Short one-paragraph message used for contact (email or SMS) invitations."""
    summary = invitation_summary(
        invitation.inviter_name, invitation.hours, invitation.helped
    ).rstrip(".")
    return (
        f"Hi {invitation.name}! {summary}. "
        f"Join your workyard to confirm: {landing_url}"
    )


def render_contact_email(invitation: ContactInvitation, landing_url: str) -> EmailContent:
    """Wrap the short contact message as an email."""
    message = render_contact_message(invitation, landing_url)
    return EmailContent(
        subject=invitation_subject(invitation.inviter_name),
        html=f"<p>{escape(message)}</p>",
        text=message,
    )

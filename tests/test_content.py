"""
Tests for yard_invites.notices.content module.
"""

import pytest

from yard_invites.notices.content import (
    format_hours,
    hours_unit,
    render_contact_email,
    render_contact_message,
    render_invitation_email,
)
from yard_invites.notices.models import ContactInvitation, InvitationNotice

INVITE_URL = "https://app.example/invite/tok123"


def make_notice(**overrides) -> InvitationNotice:
    data = {
        "invitee_email": "ann@example.com",
        "invitee_name": "Ann",
        "inviter_name": "Bo",
        "hours": 2,
        "mode": "helped",
        "invitation_token": "tok123",
    }
    data.update(overrides)
    return InvitationNotice(**data)


class TestHoursFormatting:
    """Tests for hour pluralisation and formatting."""

    def test_singular_for_exactly_one(self):
        assert hours_unit(1) == "hour"
        assert hours_unit(1.0) == "hour"

    @pytest.mark.parametrize("hours", [0, 2, 1.5, 0.5, 10])
    def test_plural_otherwise(self, hours):
        assert hours_unit(hours) == "hours"

    def test_whole_floats_lose_trailing_zero(self):
        assert format_hours(2.0) == "2"
        assert format_hours(1.5) == "1.5"
        assert format_hours(3) == "3"


class TestRenderInvitationEmail:
    """Tests for render_invitation_email."""

    def test_subject_names_inviter(self):
        content = render_invitation_email(make_notice(), INVITE_URL)
        assert content.subject == "Bo wants to track time with you on Yard"

    def test_helped_mode_phrase(self):
        content = render_invitation_email(make_notice(mode="helped"), INVITE_URL)
        assert "where helped you on Yard" in content.text
        assert "helped you" in content.html
        assert "you helped them" not in content.text

    @pytest.mark.parametrize("mode", ["helper", "gave_help", "HELPED"])
    def test_other_modes_phrase(self, mode):
        content = render_invitation_email(make_notice(mode=mode), INVITE_URL)
        assert "where you helped them on Yard" in content.text
        assert "you helped them" in content.html

    def test_singular_hour(self):
        content = render_invitation_email(make_notice(hours=1), INVITE_URL)
        assert "track 1 hour of time" in content.text
        assert "track 1 hour of time" in content.html

    def test_plural_hours(self):
        content = render_invitation_email(make_notice(hours=2), INVITE_URL)
        assert "track 2 hours of time" in content.text
        assert "track 2 hours of time" in content.html

    def test_fractional_hours_are_plural(self):
        content = render_invitation_email(make_notice(hours=1.5), INVITE_URL)
        assert "track 1.5 hours of time" in content.text

    def test_html_contains_link_and_fallback_copy(self):
        content = render_invitation_email(make_notice(), INVITE_URL)
        assert f'<a href="{INVITE_URL}"' in content.html
        # Button link plus the copy-paste fallback
        assert content.html.count(INVITE_URL) == 2
        assert "copy and paste this link" in content.html
        assert "style=" in content.html
        assert "Hi Ann," in content.html

    def test_text_has_no_markup(self):
        content = render_invitation_email(make_notice(), INVITE_URL)
        assert "Hi Ann," in content.text
        assert INVITE_URL in content.text
        assert "<" not in content.text
        assert ">" not in content.text

    def test_html_escapes_user_input(self):
        notice = make_notice(invitee_name="<script>x</script>", inviter_name="Bo & Co")
        content = render_invitation_email(notice, INVITE_URL)
        assert "<script>" not in content.html
        assert "&lt;script&gt;" in content.html
        assert "Bo &amp; Co" in content.html
        # The plain-text body keeps names as typed
        assert "Hi <script>x</script>," in content.text

    def test_rendering_is_deterministic(self):
        first = render_invitation_email(make_notice(), INVITE_URL)
        second = render_invitation_email(make_notice(), INVITE_URL)
        assert first == second


class TestContactMessage:
    """Tests for the short contact invitation message."""

    def make_invitation(self, **overrides) -> ContactInvitation:
        data = {
            "contact": "+15550100",
            "name": "Ann",
            "inviterName": "Bo",
            "hours": 3,
            "mode": "helper",
            "type": "sms",
        }
        data.update(overrides)
        return ContactInvitation(**data)

    def test_message(self):
        message = render_contact_message(
            self.make_invitation(), "https://app.example/invite"
        )
        assert message == (
            "Hi Ann! Bo wants to track 3 hours of time where you helped them on Yard. "
            "Join your workyard to confirm: https://app.example/invite"
        )

    def test_message_singular_helped(self):
        message = render_contact_message(
            self.make_invitation(hours=1, mode="helped"), "https://app.example/invite"
        )
        assert "track 1 hour of time where helped you on Yard." in message

    def test_contact_email(self):
        content = render_contact_email(
            self.make_invitation(type="email", contact="ann@example.com"),
            "https://app.example/invite",
        )
        assert content.subject == "Bo wants to track time with you on Yard"
        assert content.text.startswith("Hi Ann!")
        assert content.html.startswith("<p>Hi Ann!")

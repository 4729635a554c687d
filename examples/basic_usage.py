"""
Basic yard-invites usage example.

This example demonstrates the notifier without the HTTP layer:
- Rendering an invitation email
- Sending it through whichever backend the environment configures

Run with:
    python examples/basic_usage.py
"""

import asyncio

from yard_invites import (
    InvitationNotifier,
    build_invite_url,
    load_config,
    parse_notice,
    render_invitation_email,
)
from yard_invites.log import configure_logging

PAYLOAD = {
    "invitee_email": "ann@example.com",
    "invitee_name": "Ann",
    "inviter_name": "Bo",
    "hours": 2,
    "mode": "helped",
    "invitation_token": "tok123",
}


async def main():
    # Load config from YARD_* environment variables or .env
    config = load_config()
    configure_logging(config.effective_log_level)

    # =================================================================
    # 1. Render the email
    # =================================================================
    print("Rendering invitation...")

    notice = parse_notice(PAYLOAD)
    link = build_invite_url(config.site_url, notice.invitation_token)
    content = render_invitation_email(notice, link.url)

    print(f"  Subject: {content.subject}")
    print(f"  Invite URL: {link.url}")
    print(content.text)

    # =================================================================
    # 2. Send it
    # =================================================================
    print("Sending invitation...")

    notifier = InvitationNotifier(config)
    try:
        response = await notifier.send_invitation_email(PAYLOAD)
        print(f"  Backend: {notifier.backend.name}")
        print(f"  Status: {response.status_code}")
        print(f"  Body: {response.body}")
    finally:
        await notifier.close()


if __name__ == "__main__":
    asyncio.run(main())

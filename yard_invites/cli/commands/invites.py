"""
CLI commands for rendering and sending invitations.
"""

import asyncio
import json

import typer
from rich.console import Console
from rich.panel import Panel

from ...config import load_config
from ...exceptions import InvitationValidationError
from ...log import configure_logging
from ...notices.content import render_invitation_email
from ...notices.urls import build_invite_url
from ...notices.validation import parse_notice
from ...notifier import InvitationNotifier

console = Console()
app = typer.Typer(help="Render and send invitation emails")


def _payload(
    email: str,
    name: str,
    inviter: str,
    hours: float,
    mode: str,
    token: str,
) -> dict:
    return {
        "invitee_email": email,
        "invitee_name": name,
        "inviter_name": inviter,
        "hours": int(hours) if hours.is_integer() else hours,
        "mode": mode,
        "invitation_token": token,
    }


@app.command("preview")
def invites_preview_command(
    email: str = typer.Argument(..., help="Invitee email address"),
    name: str = typer.Option(..., "--name", "-n", help="Invitee display name"),
    inviter: str = typer.Option(..., "--inviter", "-i", help="Inviter display name"),
    hours: float = typer.Option(..., "--hours", "-h", help="Hours being logged"),
    token: str = typer.Option(..., "--token", "-t", help="Invitation token"),
    mode: str = typer.Option("helped", "--mode", "-m", help="'helped' or 'helper'"),
    html: bool = typer.Option(False, "--html", help="Also print the HTML body"),
) -> None:
    """Render an invitation email without sending it."""
    config = load_config()

    try:
        notice = parse_notice(_payload(email, name, inviter, hours, mode, token))
    except InvitationValidationError as e:
        console.print(f"[red]✗[/red] {e}")
        raise typer.Exit(code=1)

    link = build_invite_url(config.site_url, notice.invitation_token)
    content = render_invitation_email(notice, link.url)

    console.print(f"[bold]To:[/bold] {notice.invitee_email}")
    console.print(f"[bold]Subject:[/bold] {content.subject}")
    console.print(f"[bold]Invite URL:[/bold] {link.url}")
    console.print(Panel(content.text, title="Text"))
    if html:
        console.print(Panel(content.html, title="HTML"))


@app.command("send")
def invites_send_command(
    email: str = typer.Argument(..., help="Invitee email address"),
    name: str = typer.Option(..., "--name", "-n", help="Invitee display name"),
    inviter: str = typer.Option(..., "--inviter", "-i", help="Inviter display name"),
    hours: float = typer.Option(..., "--hours", "-h", help="Hours being logged"),
    token: str = typer.Option(..., "--token", "-t", help="Invitation token"),
    mode: str = typer.Option("helped", "--mode", "-m", help="'helped' or 'helper'"),
) -> None:
    """Send one invitation through the configured delivery backend."""
    config = load_config()
    configure_logging(config.effective_log_level)

    async def _send():
        notifier = InvitationNotifier(config)
        try:
            return await notifier.send_invitation_email(
                _payload(email, name, inviter, hours, mode, token)
            )
        finally:
            await notifier.close()

    response = asyncio.run(_send())
    console.print_json(json.dumps(response.body))

    if response.status_code >= 400 or not response.body.get("success"):
        raise typer.Exit(code=1)

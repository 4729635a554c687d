"""
FastAPI application example.

Serves POST /send-invitation-email and POST /send-invitation with the
configuration found in the environment.

Run with:
    uvicorn examples.fastapi_app:app --reload
"""

from yard_invites.config import load_config
from yard_invites.integrations.fastapi import create_app
from yard_invites.log import configure_logging

config = load_config()
configure_logging(config.effective_log_level)

app = create_app(config)

"""
FastAPI application for the invitation notifier.

Example:
    ```python
    from yard_invites.integrations.fastapi import create_app

    app = create_app()
    # uvicorn module:app
    ```
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from ..config import NotifierConfig, load_config
from ..delivery import DeliveryBackend
from ..notifier import InvitationNotifier, NotifierResponse

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}

INVITATION_EMAIL_PATH = "/send-invitation-email"
CONTACT_INVITATION_PATH = "/send-invitation"


def get_notifier(request: Request) -> InvitationNotifier:
    """
    Get the application's InvitationNotifier.

    Use as a FastAPI dependency.
    """
    return request.app.state.notifier


def _json_response(response: NotifierResponse) -> JSONResponse:
    return JSONResponse(status_code=response.status_code, content=response.body)


def create_app(
    config: Optional[NotifierConfig] = None,
    backend: Optional[DeliveryBackend] = None,
) -> FastAPI:
    """
    Build the notifier application.

    Args:
        config: Notifier configuration (loaded from the environment if omitted)
        backend: Delivery backend override, mainly for tests

    Returns:
        FastAPI application; the backend is closed on shutdown
    """
    config = config if config is not None else load_config()
    notifier = InvitationNotifier(config, backend=backend)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        try:
            yield
        finally:
            await notifier.close()

    app = FastAPI(
        title="Yard invitation notifier",
        description="Sends invitation emails for logged time",
        lifespan=lifespan,
    )
    app.state.notifier = notifier

    @app.middleware("http")
    async def add_cors_headers(request: Request, call_next):
        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response

    @app.options(INVITATION_EMAIL_PATH)
    @app.options(CONTACT_INVITATION_PATH)
    async def preflight() -> PlainTextResponse:
        return PlainTextResponse("ok")

    @app.post(INVITATION_EMAIL_PATH)
    async def send_invitation_email(
        request: Request,
        notifier: InvitationNotifier = Depends(get_notifier),
    ) -> JSONResponse:
        try:
            payload = await request.json()
        except ValueError as e:
            return _json_response(notifier.internal_error(e))

        return _json_response(await notifier.send_invitation_email(payload))

    @app.post(CONTACT_INVITATION_PATH)
    async def send_contact_invitation(
        request: Request,
        notifier: InvitationNotifier = Depends(get_notifier),
    ) -> JSONResponse:
        try:
            payload = await request.json()
        except ValueError as e:
            return _json_response(
                notifier.internal_error(e, error="Failed to send invitation")
            )

        return _json_response(await notifier.send_contact_invitation(payload))

    @app.get("/health")
    async def health(notifier: InvitationNotifier = Depends(get_notifier)) -> dict:
        return {"status": "healthy", "delivery_backend": notifier.backend.name}

    return app

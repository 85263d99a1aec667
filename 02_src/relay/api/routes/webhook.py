"""Messenger webhook routes."""

import json

from fastapi import APIRouter, Header, HTTPException, Query, Request
from fastapi.responses import PlainTextResponse

from ...app import IApplication
from ...errors import TransportError
from ...logging_config import get_logger
from ...normalizer import normalize_batch, parse_batch
from ..signature import verify_signature

logger = get_logger(__name__)


def create_webhook_router(app: IApplication) -> APIRouter:
    """Create webhook router."""
    router = APIRouter(tags=["webhook"])

    @router.get("/webhook", response_class=PlainTextResponse)
    async def verify_webhook(
        hub_mode: str | None = Query(None, alias="hub.mode"),
        hub_verify_token: str | None = Query(None, alias="hub.verify_token"),
        hub_challenge: str | None = Query(None, alias="hub.challenge"),
    ) -> str:
        """Subscription verification handshake."""
        if hub_mode == "subscribe" and hub_verify_token == app.settings.validation_token:
            logger.info("Validating webhook")
            return hub_challenge or ""

        logger.error("Failed validation. Make sure the validation tokens match.")
        raise HTTPException(status_code=403, detail="Verification failed")

    @router.post("/webhook", response_class=PlainTextResponse)
    async def receive_webhook(
        request: Request,
        x_hub_signature: str | None = Header(None),
    ) -> str:
        """Accept a batch, schedule it and acknowledge immediately."""
        body = await request.body()
        try:
            verify_signature(app.settings.app_secret, body, x_hub_signature)
            try:
                raw = json.loads(body)
            except ValueError as e:
                raise TransportError("Webhook body is not valid JSON") from e
            batch = parse_batch(raw)
        except TransportError as e:
            logger.warning("Rejected webhook: %s", e)
            raise HTTPException(status_code=e.status_code, detail=str(e))

        app.submit(normalize_batch(batch))
        return "EVENT_RECEIVED"

    return router

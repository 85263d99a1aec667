"""OutputRouter implementation."""

from typing import Any, Protocol

import httpx

from ..errors import SendError
from ..logging_config import get_logger
from ..models import OutboundMessage

logger = get_logger(__name__)

SEND_API_URL = "https://graph.facebook.com/v2.6/me/messages"


class IOutputRouter(Protocol):
    """Delivery of rendered messages to a recipient."""

    async def deliver(self, recipient_id: str, message: OutboundMessage) -> None:
        """Send a message. Failures are logged, never raised."""
        ...


class MessengerClient:
    """Messenger Send API client."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        page_access_token: str,
        url: str = SEND_API_URL,
    ):
        self._client = client
        self._token = page_access_token
        self._url = url

    async def send(self, body: dict[str, Any]) -> dict[str, Any]:
        """POST a Send API body. Raises SendError on any failure."""
        try:
            response = await self._client.post(
                self._url, params={"access_token": self._token}, json=body
            )
        except httpx.HTTPError as e:
            raise SendError(f"Send API unreachable: {e}") from e

        if response.status_code != 200:
            raise SendError(
                f"Send API returned {response.status_code}: {response.text[:200]}"
            )

        try:
            data = response.json()
        except ValueError as e:
            raise SendError("Send API returned invalid JSON") from e

        recipient_id = data.get("recipient_id")
        message_id = data.get("message_id")
        if message_id:
            logger.info(
                "Successfully sent message with id %s to recipient %s",
                message_id,
                recipient_id,
            )
        else:
            logger.info("Successfully called Send API for recipient %s", recipient_id)
        return data


class OutputRouter:
    """Routes rendered messages to the Send API (fire and forget)."""

    def __init__(self, client: MessengerClient):
        self._client = client

    async def deliver(self, recipient_id: str, message: OutboundMessage) -> None:
        """Send to recipient; log SendError without retrying."""
        body = message.to_body(recipient_id)
        try:
            await self._client.send(body)
        except SendError as e:
            logger.error(
                "Failed calling Send API for %s: %s",
                recipient_id,
                e,
                extra={"user_id": recipient_id},
            )

"""SIM implementation - posts signed demo webhook batches to a running relay."""

import asyncio
import json
import random
import time
from typing import Any, Protocol

import httpx

from relay.api.signature import sign
from relay.logging_config import get_logger

logger = get_logger(__name__)

PAGE_ID = "page_001"

# Virtual users and the texts each sends, one per round
SCENARIO = {
    "user_001": ["hello", "I want cashback", "check balance", "bye"],
    "user_002": ["hi", "do you offer mobile insurance?", "thanks"],
    "user_003": ["generic", "what interest can I get?", "end"],
}


def build_text_batch(sender_id: str, text: str, page_id: str = PAGE_ID) -> dict[str, Any]:
    """Webhook batch carrying a single text message."""
    now = int(time.time() * 1000)
    return {
        "object": "page",
        "entry": [
            {
                "id": page_id,
                "time": now,
                "messaging": [
                    {
                        "sender": {"id": sender_id},
                        "recipient": {"id": page_id},
                        "timestamp": now,
                        "message": {"mid": f"mid.{now}", "text": text},
                    }
                ],
            }
        ],
    }


class ISim(Protocol):
    """Generate webhook traffic for a local relay."""

    async def start(self) -> None:
        """Start hardcoded scenario."""
        ...

    async def stop(self) -> None:
        """Stop scenario."""
        ...


class Sim:
    """SIM with hardcoded scenario for manual testing."""

    def __init__(self, app_secret: str, api_url: str = "http://localhost:5000"):
        self._app_secret = app_secret
        self._api_url = api_url
        self._running = False
        self._task: asyncio.Task | None = None
        self._client: httpx.AsyncClient | None = None

    async def start(self) -> None:
        """Start hardcoded scenario."""
        if self._running:
            return

        self._running = True
        self._client = httpx.AsyncClient()

        # Start background task
        self._task = asyncio.create_task(self._run_scenario())

    async def stop(self) -> None:
        """Stop scenario."""
        self._running = False

        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass

        if self._client:
            await self._client.aclose()
            self._client = None

    async def _run_scenario(self) -> None:
        """Run hardcoded scenario."""
        rounds = max(len(texts) for texts in SCENARIO.values())
        logger.info("SIM started: %s users, %s rounds", len(SCENARIO), rounds)

        try:
            for i in range(rounds):
                if not self._running:
                    break

                for user_id, texts in SCENARIO.items():
                    if not self._running:
                        break
                    if i < len(texts):
                        await self._post_text(user_id, texts[i])
                        await asyncio.sleep(random.uniform(1, 3))

                # Small delay between rounds
                await asyncio.sleep(2)

        except asyncio.CancelledError:
            pass
        finally:
            self._running = False
            logger.info("SIM completed")

    async def _post_text(self, user_id: str, text: str) -> None:
        """POST one signed webhook batch."""
        if not self._client:
            return

        body = json.dumps(build_text_batch(user_id, text)).encode()
        try:
            response = await self._client.post(
                f"{self._api_url}/webhook",
                content=body,
                headers={
                    "Content-Type": "application/json",
                    "X-Hub-Signature": sign(self._app_secret, body),
                },
                timeout=10.0,
            )
        except httpx.HTTPError as e:
            logger.error("SIM: Failed to post webhook: %s", e)
            return

        if response.status_code == 200:
            logger.info("SIM: %s -> %s", user_id, text)
        else:
            logger.error("SIM: Webhook rejected with %s", response.status_code)

"""Dialog service adapter using the Watson Conversation REST API."""

from typing import Any, Protocol

import httpx

from ..errors import OracleError
from ..logging_config import get_logger
from ..models import ConversationContext, OracleTurnResult

logger = get_logger(__name__)

API_VERSION = "2016-07-11"


class IDialogOracle(Protocol):
    """Abstraction for the dialog service."""

    async def converse(
        self,
        text: str,
        context: ConversationContext | None = None,
    ) -> OracleTurnResult:
        """Send one user utterance with the prior context."""
        ...


class WatsonConversationOracle:
    """Watson Conversation v1 message endpoint."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        url: str,
        username: str,
        password: str,
        workspace_id: str,
        version: str = API_VERSION,
    ):
        self._client = client
        self._endpoint = f"{url.rstrip('/')}/v1/workspaces/{workspace_id}/message"
        self._auth = httpx.BasicAuth(username, password)
        self._version = version

    async def converse(
        self,
        text: str,
        context: ConversationContext | None = None,
    ) -> OracleTurnResult:
        """Run one dialog turn. Raises OracleError on any failure."""
        body: dict[str, Any] = {"input": {"text": text}}
        if context is not None:
            body["context"] = context

        try:
            response = await self._client.post(
                self._endpoint,
                params={"version": self._version},
                json=body,
                auth=self._auth,
            )
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            raise OracleError(
                f"Dialog service returned {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise OracleError(f"Dialog service unreachable: {e}") from e
        except ValueError as e:
            raise OracleError("Dialog service returned invalid JSON") from e

        return parse_turn(data)


def parse_turn(data: Any) -> OracleTurnResult:
    """Interpret a message endpoint response body."""
    if not isinstance(data, dict):
        raise OracleError("Malformed dialog response: not an object")

    context = data.get("context")
    if not isinstance(context, dict):
        raise OracleError("Malformed dialog response: missing context")

    output = data.get("output") or {}
    if not isinstance(output, dict):
        raise OracleError("Malformed dialog response: output is not an object")

    text = output.get("text", [])
    if isinstance(text, str):
        text = [text]
    if not isinstance(text, list):
        raise OracleError("Malformed dialog response: output.text is not a list")

    intent = None
    intents = data.get("intents") or []
    if isinstance(intents, list) and intents and isinstance(intents[0], dict):
        intent = intents[0].get("intent")

    action = output.get("action")

    return OracleTurnResult(
        next_context=context,
        detected_intent=intent,
        output_text=[str(line) for line in text],
        action_tag=str(action) if action else None,
    )

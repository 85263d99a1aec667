"""Tests for WatsonConversationOracle."""

import json

import httpx
import pytest

from relay.errors import OracleError
from relay.oracle import WatsonConversationOracle, parse_turn


def make_oracle(handler) -> WatsonConversationOracle:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return WatsonConversationOracle(
        client=client,
        url="https://dialog.example.com/conversation/api/",
        username="user",
        password="pass",
        workspace_id="ws-1",
    )


class TestConverse:
    """Tests for WatsonConversationOracle.converse()."""

    @pytest.mark.asyncio
    async def test_sends_text_and_context(self):
        """Request carries input text, context, version and basic auth."""
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["request"] = request
            return httpx.Response(
                200,
                json={
                    "intents": [{"intent": "greeting", "confidence": 0.98}],
                    "output": {"text": ["Hi there"]},
                    "context": {"conversation_id": "abc", "turn": 2},
                },
            )

        oracle = make_oracle(handler)
        result = await oracle.converse("hello", {"conversation_id": "abc"})

        request = captured["request"]
        assert request.method == "POST"
        assert request.url.path == "/conversation/api/v1/workspaces/ws-1/message"
        assert request.url.params["version"] == "2016-07-11"
        assert request.headers["authorization"].startswith("Basic ")
        assert json.loads(request.content) == {
            "input": {"text": "hello"},
            "context": {"conversation_id": "abc"},
        }

        assert result.detected_intent == "greeting"
        assert result.output_text == ["Hi there"]
        assert result.action_tag is None
        assert result.next_context == {"conversation_id": "abc", "turn": 2}

    @pytest.mark.asyncio
    async def test_omits_absent_context(self):
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["body"] = json.loads(request.content)
            return httpx.Response(200, json={"output": {"text": []}, "context": {}})

        await make_oracle(handler).converse("hello")

        assert "context" not in captured["body"]

    @pytest.mark.asyncio
    async def test_server_error_raises(self):
        oracle = make_oracle(lambda request: httpx.Response(500, text="boom"))

        with pytest.raises(OracleError, match="500"):
            await oracle.converse("hello")

    @pytest.mark.asyncio
    async def test_transport_error_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(OracleError, match="unreachable"):
            await make_oracle(handler).converse("hello")

    @pytest.mark.asyncio
    async def test_timeout_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(OracleError):
            await make_oracle(handler).converse("hello")

    @pytest.mark.asyncio
    async def test_invalid_json_raises(self):
        oracle = make_oracle(lambda request: httpx.Response(200, text="<html>"))

        with pytest.raises(OracleError, match="invalid JSON"):
            await oracle.converse("hello")


class TestParseTurn:
    """Tests for parse_turn()."""

    def test_action_without_text(self):
        result = parse_turn({"output": {"action": "end_conversation"}, "context": {"c": 3}})
        assert result.output_text == []
        assert result.action_tag == "end_conversation"
        assert result.detected_intent is None
        assert result.next_context == {"c": 3}

    def test_multiple_lines_kept(self):
        result = parse_turn({"output": {"text": ["a", "b"]}, "context": {}})
        assert result.output_text == ["a", "b"]

    def test_string_text_becomes_list(self):
        result = parse_turn({"output": {"text": "single"}, "context": {}})
        assert result.output_text == ["single"]

    def test_missing_output(self):
        result = parse_turn({"context": {"c": 1}})
        assert result.output_text == []
        assert result.action_tag is None

    @pytest.mark.parametrize(
        "data",
        [
            [],
            "text",
            {"output": {"text": []}},
            {"output": {"text": []}, "context": "opaque"},
            {"output": "nope", "context": {}},
            {"output": {"text": 5}, "context": {}},
        ],
    )
    def test_malformed(self, data):
        with pytest.raises(OracleError):
            parse_turn(data)

"""Integration tests: signed webhook in, Send API calls out."""

import json

import httpx
import pytest

from relay.api import create_fastapi_app
from relay.api.signature import sign
from relay.app import Application
from sim import build_text_batch

# Dialog service replies keyed by user text
DIALOG = {
    "hello": {"output": {"text": ["Hi there"]}, "context": {"c": 1}},
    "check balance": {
        "output": {"text": [], "action": "check_balance"},
        "context": {"c": 2},
    },
    "cashback": {"output": {"text": ["Let me look"], "action": "cashback"}, "context": {"c": 4}},
    "bye": {"output": {"action": "end_conversation"}, "context": {"c": 3}},
}


class FakeServices:
    """MockTransport handler standing in for every outbound host."""

    def __init__(self, products=None):
        self.products = [] if products is None else products
        self.sent: list[dict] = []
        self.dialog_requests: list[dict] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        host = request.url.host
        if host == "dialog.example.com":
            body = json.loads(request.content)
            self.dialog_requests.append(body)
            return httpx.Response(200, json=DIALOG[body["input"]["text"]])
        if host == "products.example.com":
            return httpx.Response(200, json=self.products)
        if host == "graph.facebook.com":
            self.sent.append(json.loads(request.content))
            return httpx.Response(200, json={"recipient_id": "u", "message_id": "mid"})
        return httpx.Response(404)


@pytest.fixture
def services():
    return FakeServices()


@pytest.fixture
async def app(settings, services):
    application = Application(settings, transport=httpx.MockTransport(services))
    await application.start()
    yield application
    await application.stop()


@pytest.fixture
async def http(app):
    transport = httpx.ASGITransport(app=create_fastapi_app(app))
    async with httpx.AsyncClient(transport=transport, base_url="http://relay") as client:
        yield client


async def post_text(http, app, user_id: str, text: str) -> httpx.Response:
    body = json.dumps(build_text_batch(user_id, text)).encode()
    response = await http.post(
        "/webhook",
        content=body,
        headers={
            "Content-Type": "application/json",
            "X-Hub-Signature": sign(app.settings.app_secret, body),
        },
    )
    await app.drain()
    return response


@pytest.mark.asyncio
async def test_greeting_round_trip(http, app, services):
    response = await post_text(http, app, "alice", "hello")

    assert response.status_code == 200
    assert services.dialog_requests == [{"input": {"text": "hello"}}]
    assert services.sent == [
        {
            "recipient": {"id": "alice"},
            "message": {"text": "Hi there", "metadata": "DEVELOPER_DEFINED_METADATA"},
        }
    ]
    assert app.context_store.get("alice") == {"c": 1}


@pytest.mark.asyncio
async def test_conversation_lifecycle(http, app, services):
    await post_text(http, app, "alice", "hello")
    await post_text(http, app, "alice", "check balance")

    assert services.dialog_requests[1]["context"] == {"c": 1}
    payload = services.sent[-1]["message"]["attachment"]["payload"]
    assert payload["template_type"] == "list"
    assert app.context_store.get("alice") == {"c": 2}

    await post_text(http, app, "alice", "bye")

    assert app.context_store.get("alice") is None
    status = await http.get("/api/status")
    assert status.json()["active_conversations"] == 0


@pytest.mark.asyncio
async def test_empty_product_list_falls_back(http, app, services):
    await post_text(http, app, "bob", "cashback")

    texts = [m["message"].get("text") for m in services.sent]
    assert texts[0] == "Let me look"
    assert texts[1] == "Sorry, I couldn't find a matching offer right now."
    assert app.context_store.get("bob") == {"c": 4}


@pytest.mark.asyncio
async def test_product_offer_sent(http, app, services):
    services.products = [
        {
            "name": "Cashback Account",
            "description": "1% back",
            "img_url": "https://img.example.com/c.png",
            "product_website": "https://bank.example.com",
            "brand": "Halifax",
        }
    ]

    await post_text(http, app, "bob", "cashback")

    payload = services.sent[-1]["message"]["attachment"]["payload"]
    assert payload["template_type"] == "generic"
    assert payload["elements"][0]["buttons"][1]["title"] == "Call Halifax"


@pytest.mark.asyncio
async def test_demo_keyword_skips_dialog(http, app, services):
    await post_text(http, app, "carol", "typing on")

    assert services.dialog_requests == []
    assert services.sent == [{"recipient": {"id": "carol"}, "sender_action": "typing_on"}]

"""Pytest configuration and fixtures."""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, Mock

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

SERVER_URL = "https://relay.example.com"


@pytest.fixture
def settings():
    """Settings with dummy credentials."""
    from relay.config import Settings

    return Settings(
        app_secret="app-secret",
        validation_token="verify-me",
        page_access_token="page-token",
        server_url=SERVER_URL,
        conversation_url="https://dialog.example.com/conversation/api",
        conversation_username="user",
        conversation_password="pass",
        conversation_workspace="ws-1",
        products_api_url="https://products.example.com/api/products",
        products_api_key="client-id",
        products_api_secret="client-secret",
    )


@pytest.fixture
def context_store():
    """Create empty in-memory context store."""
    from relay.context_store import InMemoryContextStore

    return InMemoryContextStore()


@pytest.fixture
def renderer():
    """Create renderer pointing at the test server URL."""
    from relay.rendering import ResponseRenderer

    return ResponseRenderer(SERVER_URL)


@pytest.fixture
def mock_oracle():
    """Create mock dialog service returning an empty turn."""
    from relay.models import OracleTurnResult

    oracle = Mock()
    oracle.converse = AsyncMock(return_value=OracleTurnResult(next_context={}))
    return oracle


@pytest.fixture
def mock_lookup():
    """Create mock product lookup returning one record."""
    lookup = Mock()
    lookup.lookup = AsyncMock(
        return_value={
            "name": "Cashback Current Account",
            "description": "Earn cashback on bills",
            "img_url": "https://img.example.com/cashback.png",
            "product_website": "https://bank.example.com/cashback",
            "brand": "Santander",
        }
    )
    return lookup


@pytest.fixture
def mock_output():
    """Create mock output router recording deliveries."""
    output = Mock()
    output.deliver = AsyncMock()
    return output


@pytest.fixture
def dispatcher(context_store, mock_oracle, mock_lookup, renderer, mock_output):
    """Create ConversationDispatcher wired to mocks."""
    from relay.dispatch import ConversationDispatcher

    return ConversationDispatcher(
        context_store=context_store,
        oracle=mock_oracle,
        lookup=mock_lookup,
        renderer=renderer,
        output_router=mock_output,
    )


def text_event(text: str, sender_id: str = "user1"):
    """Build a TextMessage event."""
    from relay.models import TextMessage

    return TextMessage(
        sender_id=sender_id, recipient_id="page1", timestamp=1, text=text
    )


def sent_messages(mock_output) -> list:
    """Outbound messages passed to the mock router, in order."""
    return [c.args[1] for c in mock_output.deliver.await_args_list]

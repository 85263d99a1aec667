"""Messenger relay core module."""

from .app import Application, IApplication
from .config import Settings, load_settings
from .context_store import IContextStore, InMemoryContextStore
from .dispatch import ActionKind, ActionSpec, ActionTable, ConversationDispatcher
from .errors import (
    ConfigError,
    DataLookupError,
    OracleError,
    RelayError,
    SendError,
    TransportError,
)
from .lookup import IProductLookup, ProductLookup
from .models import InboundEvent, OracleTurnResult, OutboundMessage
from .normalizer import normalize_batch, parse_batch
from .oracle import IDialogOracle, WatsonConversationOracle
from .output_router import IOutputRouter, MessengerClient, OutputRouter
from .rendering import ResponseRenderer

__all__ = [
    # Application
    "Application",
    "IApplication",
    "Settings",
    "load_settings",
    # Errors
    "RelayError",
    "ConfigError",
    "TransportError",
    "OracleError",
    "DataLookupError",
    "SendError",
    # Models
    "InboundEvent",
    "OracleTurnResult",
    "OutboundMessage",
    # Components
    "IContextStore",
    "InMemoryContextStore",
    "IDialogOracle",
    "WatsonConversationOracle",
    "IProductLookup",
    "ProductLookup",
    "ResponseRenderer",
    "ActionKind",
    "ActionSpec",
    "ActionTable",
    "ConversationDispatcher",
    "IOutputRouter",
    "MessengerClient",
    "OutputRouter",
    "normalize_batch",
    "parse_batch",
]

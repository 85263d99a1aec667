"""Conversation dispatch module."""

from .actions import DEFAULT_ACTIONS, ActionKind, ActionSpec, ActionTable
from .dispatcher import (
    ATTACHMENT_ACK,
    LOOKUP_FALLBACK,
    OPTIN_ACK,
    POSTBACK_ACK,
    QUICK_REPLY_ACK,
    ConversationDispatcher,
)

__all__ = [
    "ActionKind",
    "ActionSpec",
    "ActionTable",
    "DEFAULT_ACTIONS",
    "ConversationDispatcher",
    "QUICK_REPLY_ACK",
    "ATTACHMENT_ACK",
    "POSTBACK_ACK",
    "OPTIN_ACK",
    "LOOKUP_FALLBACK",
]

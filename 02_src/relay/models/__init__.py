"""Core data models for the relay."""

from .events import (
    AccountLink,
    AttachmentMessage,
    DeliveryReceipt,
    EchoMessage,
    EventKind,
    InboundEvent,
    Optin,
    Postback,
    QuickReplyMessage,
    ReadReceipt,
    TextMessage,
)
from .oracle import ConversationContext, OracleTurnResult
from .outbound import (
    ButtonTemplate,
    GenericTemplate,
    ListTemplate,
    MediaAttachment,
    OutboundMessage,
    PlainText,
    QuickReplies,
    ReceiptTemplate,
    SenderAction,
    TemplateMessage,
)

__all__ = [
    # Inbound
    "EventKind",
    "InboundEvent",
    "TextMessage",
    "QuickReplyMessage",
    "AttachmentMessage",
    "EchoMessage",
    "Postback",
    "Optin",
    "DeliveryReceipt",
    "ReadReceipt",
    "AccountLink",
    # Dialog service
    "ConversationContext",
    "OracleTurnResult",
    # Outbound
    "OutboundMessage",
    "PlainText",
    "TemplateMessage",
    "GenericTemplate",
    "ListTemplate",
    "ButtonTemplate",
    "ReceiptTemplate",
    "MediaAttachment",
    "QuickReplies",
    "SenderAction",
]

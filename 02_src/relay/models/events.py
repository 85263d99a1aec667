"""Inbound webhook event models."""

from dataclasses import dataclass, field
from enum import Enum


class EventKind(str, Enum):
    """Kinds of normalized inbound events."""

    TEXT = "text"
    QUICK_REPLY = "quick_reply"
    ATTACHMENT = "attachment"
    ECHO = "echo"
    POSTBACK = "postback"
    OPTIN = "optin"
    DELIVERY = "delivery"
    READ = "read"
    ACCOUNT_LINK = "account_link"


@dataclass
class InboundEvent:
    """Fields common to every messaging event."""

    sender_id: str
    recipient_id: str
    timestamp: int | None

    kind = None  # overridden by each event type


@dataclass
class TextMessage(InboundEvent):
    """A user typed text."""

    text: str = ""
    mid: str | None = None

    kind = EventKind.TEXT


@dataclass
class QuickReplyMessage(InboundEvent):
    """A user tapped a quick reply button."""

    text: str = ""
    payload: str | None = None
    mid: str | None = None

    kind = EventKind.QUICK_REPLY


@dataclass
class AttachmentMessage(InboundEvent):
    """A user sent one or more attachments without text."""

    attachment_types: list[str] = field(default_factory=list)
    mid: str | None = None

    kind = EventKind.ATTACHMENT


@dataclass
class EchoMessage(InboundEvent):
    """Echo of a message the page itself sent."""

    mid: str | None = None
    app_id: str | None = None
    metadata: str | None = None

    kind = EventKind.ECHO


@dataclass
class Postback(InboundEvent):
    """A postback button was tapped."""

    payload: str | None = None

    kind = EventKind.POSTBACK


@dataclass
class Optin(InboundEvent):
    """Send-to-Messenger authentication."""

    ref: str | None = None

    kind = EventKind.OPTIN


@dataclass
class DeliveryReceipt(InboundEvent):
    """Messages were delivered."""

    mids: list[str] = field(default_factory=list)
    watermark: int | None = None
    seq: int | None = None

    kind = EventKind.DELIVERY


@dataclass
class ReadReceipt(InboundEvent):
    """Messages up to the watermark were read."""

    watermark: int | None = None
    seq: int | None = None

    kind = EventKind.READ


@dataclass
class AccountLink(InboundEvent):
    """Account was linked or unlinked."""

    status: str | None = None
    authorization_code: str | None = None

    kind = EventKind.ACCOUNT_LINK

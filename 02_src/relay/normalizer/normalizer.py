"""Classify raw Messenger webhook payloads into inbound events."""

from typing import Any, Iterator

from pydantic import BaseModel, ValidationError

from ..errors import TransportError
from ..logging_config import get_logger
from ..models import (
    AccountLink,
    AttachmentMessage,
    DeliveryReceipt,
    EchoMessage,
    InboundEvent,
    Optin,
    Postback,
    QuickReplyMessage,
    ReadReceipt,
    TextMessage,
)

logger = get_logger(__name__)


class PageEntry(BaseModel):
    """One page entry of a webhook batch."""

    id: str | int | None = None
    time: int | None = None
    messaging: list[Any] = []


class WebhookBatch(BaseModel):
    """Envelope of a webhook POST."""

    object: str
    entry: list[PageEntry]


def parse_batch(raw: Any) -> WebhookBatch:
    """
    Validate a decoded webhook body.

    Raises:
        TransportError: If the envelope is malformed or not a page subscription.
    """
    try:
        batch = WebhookBatch.model_validate(raw)
    except ValidationError as e:
        raise TransportError(f"Malformed webhook payload: {e.error_count()} errors") from e

    if batch.object != "page":
        raise TransportError(f"Unsupported webhook object: {batch.object}")

    return batch


def normalize_batch(batch: WebhookBatch) -> Iterator[InboundEvent]:
    """Yield events in entry order, then messaging order. Unknown events are dropped."""
    for entry in batch.entry:
        for raw_event in entry.messaging:
            event = normalize_event(raw_event)
            if event is not None:
                yield event


def normalize_event(raw: Any) -> InboundEvent | None:
    """Classify one messaging event; None if it cannot be handled."""
    if not isinstance(raw, dict):
        logger.warning("Dropping non-object messaging event: %r", raw)
        return None

    sender_id = _nested_id(raw, "sender")
    recipient_id = _nested_id(raw, "recipient")
    if sender_id is None or recipient_id is None:
        logger.warning("Dropping event without sender or recipient: %s", raw)
        return None

    common = {
        "sender_id": sender_id,
        "recipient_id": recipient_id,
        "timestamp": raw.get("timestamp"),
    }

    optin = _section(raw, "optin")
    message = _section(raw, "message")
    delivery = _section(raw, "delivery")
    postback = _section(raw, "postback")
    read = _section(raw, "read")
    linking = _section(raw, "account_linking")

    # First match wins
    if optin is not None:
        return Optin(**common, ref=optin.get("ref"))
    if message is not None:
        return _normalize_message(message, common)
    if delivery is not None:
        return DeliveryReceipt(
            **common,
            mids=list(delivery.get("mids") or []),
            watermark=delivery.get("watermark"),
            seq=delivery.get("seq"),
        )
    if postback is not None:
        return Postback(**common, payload=postback.get("payload"))
    if read is not None:
        return ReadReceipt(
            **common, watermark=read.get("watermark"), seq=read.get("seq")
        )
    if linking is not None:
        return AccountLink(
            **common,
            status=linking.get("status"),
            authorization_code=linking.get("authorization_code"),
        )

    logger.info("Webhook received unknown messaging event: %s", raw)
    return None


def _normalize_message(
    message: dict[str, Any], common: dict[str, Any]
) -> InboundEvent | None:
    mid = message.get("mid")

    if message.get("is_echo"):
        app_id = message.get("app_id")
        return EchoMessage(
            **common,
            mid=mid,
            app_id=str(app_id) if app_id is not None else None,
            metadata=message.get("metadata"),
        )

    quick_reply = _section(message, "quick_reply")
    if quick_reply is not None:
        return QuickReplyMessage(
            **common,
            text=message.get("text") or "",
            payload=quick_reply.get("payload"),
            mid=mid,
        )

    text = message.get("text")
    if isinstance(text, str) and text:
        return TextMessage(**common, text=text, mid=mid)

    attachments = message.get("attachments")
    if isinstance(attachments, list) and attachments:
        return AttachmentMessage(
            **common,
            attachment_types=[
                a.get("type", "unknown") if isinstance(a, dict) else "unknown"
                for a in attachments
            ],
            mid=mid,
        )

    logger.info("Dropping message %s with no text or attachments", mid)
    return None


def _nested_id(raw: dict[str, Any], key: str) -> str | None:
    value = raw.get(key)
    if not isinstance(value, dict) or value.get("id") is None:
        return None
    return str(value["id"])


def _section(raw: dict[str, Any], key: str) -> dict[str, Any] | None:
    """Sub-object of an event, or None when absent or not an object."""
    value = raw.get(key)
    return value if isinstance(value, dict) else None

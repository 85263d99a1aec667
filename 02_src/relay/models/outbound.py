"""Outbound Send API message models."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass
class OutboundMessage(ABC):
    """Base for everything the relay can send to a recipient."""

    @abstractmethod
    def to_message(self) -> dict[str, Any]:
        """Build the `message` object of the Send API body."""
        ...

    def to_body(self, recipient_id: str) -> dict[str, Any]:
        """Build the complete Send API request body."""
        return {"recipient": {"id": recipient_id}, "message": self.to_message()}


@dataclass
class PlainText(OutboundMessage):
    text: str
    metadata: str | None = "DEVELOPER_DEFINED_METADATA"

    def to_message(self) -> dict[str, Any]:
        message: dict[str, Any] = {"text": self.text}
        if self.metadata:
            message["metadata"] = self.metadata
        return message


@dataclass
class TemplateMessage(OutboundMessage):
    """Structured template wrapped in a template attachment."""

    @abstractmethod
    def template_payload(self) -> dict[str, Any]:
        ...

    def to_message(self) -> dict[str, Any]:
        return {
            "attachment": {
                "type": "template",
                "payload": self.template_payload(),
            }
        }


@dataclass
class GenericTemplate(TemplateMessage):
    elements: list[dict[str, Any]] = field(default_factory=list)

    def template_payload(self) -> dict[str, Any]:
        return {"template_type": "generic", "elements": self.elements}


@dataclass
class ListTemplate(TemplateMessage):
    elements: list[dict[str, Any]] = field(default_factory=list)
    top_element_style: str = "large"

    def template_payload(self) -> dict[str, Any]:
        return {
            "template_type": "list",
            "top_element_style": self.top_element_style,
            "elements": self.elements,
        }


@dataclass
class ButtonTemplate(TemplateMessage):
    text: str = ""
    buttons: list[dict[str, Any]] = field(default_factory=list)

    def template_payload(self) -> dict[str, Any]:
        return {
            "template_type": "button",
            "text": self.text,
            "buttons": self.buttons,
        }


@dataclass
class ReceiptTemplate(TemplateMessage):
    # recipient_name, order_number, elements, summary, ...
    receipt: dict[str, Any] = field(default_factory=dict)

    def template_payload(self) -> dict[str, Any]:
        return {"template_type": "receipt", **self.receipt}


@dataclass
class MediaAttachment(OutboundMessage):
    """Image, audio, video or file hosted at a URL."""

    media_type: str
    url: str

    def to_message(self) -> dict[str, Any]:
        return {
            "attachment": {
                "type": self.media_type,
                "payload": {"url": self.url},
            }
        }


@dataclass
class QuickReplies(OutboundMessage):
    text: str
    quick_replies: list[dict[str, Any]] = field(default_factory=list)

    def to_message(self) -> dict[str, Any]:
        return {"text": self.text, "quick_replies": self.quick_replies}


@dataclass
class SenderAction(OutboundMessage):
    """Typing indicator or read marker; carries no message."""

    action: str

    def to_message(self) -> dict[str, Any]:
        raise TypeError("SenderAction has no message body")

    def to_body(self, recipient_id: str) -> dict[str, Any]:
        return {"recipient": {"id": recipient_id}, "sender_action": self.action}

"""Tests for data models."""

import pytest

from relay.models import (
    ButtonTemplate,
    EventKind,
    GenericTemplate,
    ListTemplate,
    MediaAttachment,
    OracleTurnResult,
    OutboundMessage,
    PlainText,
    Postback,
    QuickReplies,
    SenderAction,
    TemplateMessage,
    TextMessage,
)


class TestInboundEvents:
    """Tests for inbound event models."""

    def test_text_message_fields(self):
        event = TextMessage(sender_id="u", recipient_id="p", timestamp=10, text="hi")
        assert event.kind is EventKind.TEXT
        assert event.mid is None

    def test_kind_is_not_a_field(self):
        event = Postback("u", "p", None, payload="x")
        assert event.kind is EventKind.POSTBACK
        assert "kind" not in event.__dataclass_fields__

    def test_event_kind_values(self):
        assert EventKind.ACCOUNT_LINK.value == "account_link"
        assert EventKind("quick_reply") is EventKind.QUICK_REPLY


class TestOracleTurnResult:
    """Tests for OracleTurnResult defaults."""

    def test_defaults(self):
        result = OracleTurnResult(next_context={"c": 1})
        assert result.output_text == []
        assert result.action_tag is None
        assert result.detected_intent is None


class TestOutboundBodies:
    """Tests for Send API body construction."""

    def test_plain_text(self):
        body = PlainText("Hello").to_body("u1")
        assert body == {
            "recipient": {"id": "u1"},
            "message": {"text": "Hello", "metadata": "DEVELOPER_DEFINED_METADATA"},
        }

    def test_plain_text_without_metadata(self):
        assert PlainText("Hi", metadata=None).to_message() == {"text": "Hi"}

    def test_generic_template(self):
        body = GenericTemplate(elements=[{"title": "t"}]).to_body("u1")
        assert body["message"] == {
            "attachment": {
                "type": "template",
                "payload": {"template_type": "generic", "elements": [{"title": "t"}]},
            }
        }

    def test_list_template(self):
        payload = ListTemplate(elements=[{"title": "a"}]).to_message()["attachment"]["payload"]
        assert payload["template_type"] == "list"
        assert payload["top_element_style"] == "large"

    def test_button_template(self):
        payload = ButtonTemplate(text="t", buttons=[]).template_payload()
        assert payload == {"template_type": "button", "text": "t", "buttons": []}

    def test_media_attachment(self):
        message = MediaAttachment("audio", "https://x/sample.mp3").to_message()
        assert message == {
            "attachment": {"type": "audio", "payload": {"url": "https://x/sample.mp3"}}
        }

    def test_quick_replies(self):
        message = QuickReplies("Pick", [{"content_type": "text"}]).to_message()
        assert message == {"text": "Pick", "quick_replies": [{"content_type": "text"}]}

    def test_sender_action_body(self):
        body = SenderAction("typing_on").to_body("u1")
        assert body == {"recipient": {"id": "u1"}, "sender_action": "typing_on"}

    def test_sender_action_has_no_message(self):
        with pytest.raises(TypeError):
            SenderAction("typing_on").to_message()

    @pytest.mark.parametrize("base", [OutboundMessage, TemplateMessage])
    def test_base_classes_are_abstract(self, base):
        with pytest.raises(TypeError):
            base()

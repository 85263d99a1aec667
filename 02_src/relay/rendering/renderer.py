"""Builds outbound message payloads from dialog outcomes."""

from typing import Any

from ..models import (
    ButtonTemplate,
    GenericTemplate,
    ListTemplate,
    MediaAttachment,
    PlainText,
    QuickReplies,
    ReceiptTemplate,
    SenderAction,
)

SENDER_ACTIONS = ("mark_seen", "typing_on", "typing_off")


def _web_default_action(url: str) -> dict[str, Any]:
    return {
        "type": "web_url",
        "url": url,
        "messenger_extensions": False,
        "webview_height_ratio": "tall",
        "fallback_url": url,
    }


class ResponseRenderer:
    """Pure mapping from outcomes to Send API messages. No I/O."""

    def __init__(self, server_url: str):
        self._server_url = server_url.rstrip("/")

    def asset(self, path: str) -> str:
        """Absolute URL of a hosted asset."""
        return f"{self._server_url}/assets/{path}"

    # Dialog outcomes

    def render_text(self, text: str) -> PlainText:
        return PlainText(text=text)

    def render_offer(self, record: dict[str, Any]) -> GenericTemplate:
        """Single product card with website and call buttons."""
        brand = record.get("brand", "")
        website = record.get("product_website")
        return GenericTemplate(
            elements=[
                {
                    "title": record.get("name"),
                    "subtitle": record.get("description"),
                    "item_url": website,
                    "image_url": record.get("img_url"),
                    "buttons": [
                        {
                            "type": "web_url",
                            "url": website,
                            "title": f"Open {brand}'s website",
                        },
                        {
                            "type": "postback",
                            "title": f"Call {brand}",
                            "payload": f"Call {brand}",
                        },
                    ],
                }
            ]
        )

    def render_balance_summary(self) -> ListTemplate:
        """Fixed example balances across linked accounts."""
        return ListTemplate(
            top_element_style="large",
            elements=[
                {
                    "title": "All your accounts: HSBC, NatWest, Lloyds",
                    "image_url": self.asset("watson.png"),
                    "subtitle": "Your total balance is £5210.44",
                    "default_action": {
                        **_web_default_action("https://facebook.com/chattybank"),
                        "fallback_url": "https://hsbc.com",
                    },
                },
                self._bank_element(
                    "HSBC Current Account",
                    "banks/hsbc.jpg",
                    "Your HSBC balance is £1902.89",
                    "https://hsbc.com",
                    "Go to HSBC's website",
                ),
                self._bank_element(
                    "NatWest Savings Account",
                    "banks/natwest.png",
                    "Your NatWest balance is £1348.89",
                    "https://natwest.com",
                    "Go to NatWest's website",
                ),
                self._bank_element(
                    "Lloyds Joint Current Account",
                    "banks/lloyds.jpg",
                    "Your Lloyds balance is £1958.66",
                    "https://www.lloydsbank.com/",
                    "Go to Lloyds' website",
                ),
            ],
        )

    def _bank_element(
        self, title: str, image: str, subtitle: str, url: str, button_title: str
    ) -> dict[str, Any]:
        return {
            "title": title,
            "image_url": self.asset(image),
            "subtitle": subtitle,
            "default_action": _web_default_action(url),
            "buttons": [{"type": "web_url", "url": url, "title": button_title}],
        }

    # Demo outputs

    def render_image(self) -> MediaAttachment:
        return MediaAttachment(media_type="image", url=self.asset("rift.png"))

    def render_gif(self) -> MediaAttachment:
        return MediaAttachment(media_type="image", url=self.asset("instagram_logo.gif"))

    def render_audio(self) -> MediaAttachment:
        return MediaAttachment(media_type="audio", url=self.asset("sample.mp3"))

    def render_video(self) -> MediaAttachment:
        return MediaAttachment(media_type="video", url=self.asset("allofus480.mov"))

    def render_file(self) -> MediaAttachment:
        return MediaAttachment(media_type="file", url=self.asset("test.txt"))

    def render_button(self) -> ButtonTemplate:
        return ButtonTemplate(
            text="This is test text",
            buttons=[
                {
                    "type": "web_url",
                    "url": "https://www.oculus.com/en-us/rift/",
                    "title": "Open Web URL",
                },
                {
                    "type": "postback",
                    "title": "Trigger Postback",
                    "payload": "DEVELOPER_DEFINED_PAYLOAD",
                },
                {
                    "type": "phone_number",
                    "title": "Call Phone Number",
                    "payload": "+16505551234",
                },
            ],
        )

    def render_generic_demo(self) -> GenericTemplate:
        return GenericTemplate(
            elements=[
                {
                    "title": "rift",
                    "subtitle": "Next-generation virtual reality",
                    "item_url": "https://www.oculus.com/en-us/rift/",
                    "image_url": self.asset("rift.png"),
                    "buttons": [
                        {
                            "type": "web_url",
                            "url": "https://www.oculus.com/en-us/rift/",
                            "title": "Open Web URL",
                        },
                        {
                            "type": "postback",
                            "title": "Call Postback",
                            "payload": "Payload for first bubble",
                        },
                    ],
                },
                {
                    "title": "touch",
                    "subtitle": "Your Hands, Now in VR",
                    "item_url": "https://www.oculus.com/en-us/touch/",
                    "image_url": self.asset("touch.png"),
                    "buttons": [
                        {
                            "type": "web_url",
                            "url": "https://www.oculus.com/en-us/touch/",
                            "title": "Open Web URL",
                        },
                        {
                            "type": "postback",
                            "title": "Call Postback",
                            "payload": "Payload for second bubble",
                        },
                    ],
                },
            ]
        )

    def render_receipt(self, receipt_id: str = "order1357") -> ReceiptTemplate:
        return ReceiptTemplate(
            receipt={
                "recipient_name": "Peter Chang",
                "order_number": receipt_id,
                "currency": "USD",
                "payment_method": "Visa 1234",
                "timestamp": "1428444852",
                "elements": [
                    {
                        "title": "Oculus Rift",
                        "subtitle": "Includes: headset, sensor, remote",
                        "quantity": 1,
                        "price": 599.00,
                        "currency": "USD",
                        "image_url": self.asset("riftsq.png"),
                    },
                    {
                        "title": "Samsung Gear VR",
                        "subtitle": "Frost White",
                        "quantity": 1,
                        "price": 99.99,
                        "currency": "USD",
                        "image_url": self.asset("gearvrsq.png"),
                    },
                ],
                "address": {
                    "street_1": "1 Hacker Way",
                    "street_2": "",
                    "city": "Menlo Park",
                    "postal_code": "94025",
                    "state": "CA",
                    "country": "US",
                },
                "summary": {
                    "subtotal": 698.99,
                    "shipping_cost": 20.00,
                    "total_tax": 57.67,
                    "total_cost": 626.66,
                },
                "adjustments": [
                    {"name": "New Customer Discount", "amount": -50},
                    {"name": "$100 Off Coupon", "amount": -100},
                ],
            }
        )

    def render_quick_replies(self) -> QuickReplies:
        return QuickReplies(
            text="What's your favorite movie genre?",
            quick_replies=[
                {
                    "content_type": "text",
                    "title": title,
                    "payload": f"DEVELOPER_DEFINED_PAYLOAD_FOR_PICKING_{title.upper()}",
                }
                for title in ("Action", "Comedy", "Drama")
            ],
        )

    def render_account_linking(self) -> ButtonTemplate:
        return ButtonTemplate(
            text="Welcome. Link your account.",
            buttons=[
                {
                    "type": "account_link",
                    "url": f"{self._server_url}/authorize",
                }
            ],
        )

    def render_sender_action(self, action: str) -> SenderAction:
        if action not in SENDER_ACTIONS:
            raise ValueError(f"Unknown sender action: {action}")
        return SenderAction(action=action)

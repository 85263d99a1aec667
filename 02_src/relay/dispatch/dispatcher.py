"""Conversation dispatcher: per-user dialog turns and action handling."""

from typing import Awaitable, Callable, Iterable

from ..context_store import IContextStore
from ..errors import DataLookupError, OracleError
from ..logging_config import get_logger
from ..lookup import IProductLookup
from ..models import (
    AccountLink,
    AttachmentMessage,
    DeliveryReceipt,
    EchoMessage,
    InboundEvent,
    Optin,
    OutboundMessage,
    Postback,
    QuickReplyMessage,
    ReadReceipt,
    TextMessage,
)
from ..oracle import IDialogOracle
from ..output_router import IOutputRouter
from ..rendering import ResponseRenderer
from .actions import ActionKind, ActionSpec, ActionTable

logger = get_logger(__name__)

QUICK_REPLY_ACK = "Quick reply tapped"
ATTACHMENT_ACK = "Message with attachment received"
POSTBACK_ACK = "Postback called"
OPTIN_ACK = "Authentication successful"
LOOKUP_FALLBACK = "Sorry, I couldn't find a matching offer right now."


class ConversationDispatcher:
    """
    Drives one turn per inbound event.

    A user is Fresh while the context store has no entry for them and Active
    once a dialog turn has stored context. The end_conversation action
    returns them to Fresh.
    """

    def __init__(
        self,
        context_store: IContextStore,
        oracle: IDialogOracle,
        lookup: IProductLookup,
        renderer: ResponseRenderer,
        output_router: IOutputRouter,
        actions: ActionTable | None = None,
    ):
        self._store = context_store
        self._oracle = oracle
        self._lookup = lookup
        self._renderer = renderer
        self._output = output_router
        self._actions = actions or ActionTable()
        self._demo_outputs = self._build_demo_outputs()
        self._handlers: dict[type, Callable[[InboundEvent], Awaitable[None]]] = {
            TextMessage: self._handle_text,
            QuickReplyMessage: self._handle_quick_reply,
            AttachmentMessage: self._handle_attachment,
            EchoMessage: self._handle_echo,
            Postback: self._handle_postback,
            Optin: self._handle_optin,
            DeliveryReceipt: self._handle_delivery,
            ReadReceipt: self._handle_read,
            AccountLink: self._handle_account_link,
        }

    def _build_demo_outputs(self) -> dict[str, Callable[[], OutboundMessage]]:
        r = self._renderer
        return {
            "image": r.render_image,
            "gif": r.render_gif,
            "audio": r.render_audio,
            "video": r.render_video,
            "file": r.render_file,
            "button": r.render_button,
            "generic": r.render_generic_demo,
            "receipt": r.render_receipt,
            "quick reply": r.render_quick_replies,
            "read receipt": lambda: r.render_sender_action("mark_seen"),
            "typing on": lambda: r.render_sender_action("typing_on"),
            "typing off": lambda: r.render_sender_action("typing_off"),
            "account linking": r.render_account_linking,
        }

    @property
    def demo_keywords(self) -> frozenset[str]:
        return frozenset(self._demo_outputs)

    async def dispatch_batch(self, events: Iterable[InboundEvent]) -> None:
        """Handle events strictly in order; one failure does not stop the rest."""
        for event in events:
            try:
                await self.dispatch(event)
            except Exception as e:
                logger.error(
                    "Unhandled error for %s event from %s: %s",
                    event.kind.value,
                    event.sender_id,
                    e,
                    exc_info=True,
                )

    async def dispatch(self, event: InboundEvent) -> None:
        """Handle a single normalized event."""
        handler = self._handlers.get(type(event))
        if handler is None:
            logger.warning("No handler for event type %s", type(event).__name__)
            return
        await handler(event)

    async def _send(self, user_id: str, message: OutboundMessage) -> None:
        await self._output.deliver(user_id, message)

    async def _send_text(self, user_id: str, text: str) -> None:
        await self._send(user_id, self._renderer.render_text(text))

    # Messages

    async def _handle_text(self, event: TextMessage) -> None:
        logger.info(
            "Received message for user %s and page %s at %s",
            event.sender_id,
            event.recipient_id,
            event.timestamp,
            extra={"user_id": event.sender_id, "event_kind": event.kind.value},
        )

        demo = self._demo_outputs.get(event.text)
        if demo is not None:
            await self._send(event.sender_id, demo())
            return

        await self.converse(event.sender_id, event.text)

    async def converse(self, user_id: str, text: str) -> None:
        """Run one dialog turn for a user and act on the result."""
        prior = self._store.get(user_id)
        if prior is not None:
            logger.debug("Current context for %s", user_id, extra={"context": prior})

        try:
            result = await self._oracle.converse(text, prior)
        except OracleError as e:
            logger.error("Dialog turn failed for %s: %s", user_id, e)
            await self._send_text(user_id, str(e))
            return

        if result.detected_intent:
            logger.info(
                "Detected intent: #%s",
                result.detected_intent,
                extra={"user_id": user_id},
            )

        self._store.set(user_id, result.next_context)

        # Only the first line is sent
        if result.output_text:
            if len(result.output_text) > 1:
                logger.debug(
                    "Dropping %s extra output lines for %s",
                    len(result.output_text) - 1,
                    user_id,
                )
            await self._send_text(user_id, result.output_text[0])

        if result.action_tag:
            logger.info(
                "Detected action: #%s", result.action_tag, extra={"user_id": user_id}
            )
            action = self._actions.resolve(result.action_tag)
            if action is None:
                logger.info("Ignoring unknown action %s", result.action_tag)
                return
            await self._run_action(user_id, action)

    async def _run_action(self, user_id: str, action: ActionSpec) -> None:
        if action.kind is ActionKind.LOOKUP:
            try:
                record = await self._lookup.lookup(action.query)
            except DataLookupError as e:
                logger.warning("Product lookup failed for %s: %s", user_id, e)
                await self._send_text(user_id, LOOKUP_FALLBACK)
                return
            await self._send(user_id, self._renderer.render_offer(record))
        elif action.kind is ActionKind.SHOW_BALANCE:
            await self._send(user_id, self._renderer.render_balance_summary())
        elif action.kind is ActionKind.END_CONVERSATION:
            self._store.clear(user_id)

    async def _handle_quick_reply(self, event: QuickReplyMessage) -> None:
        logger.info(
            "Quick reply for message %s with payload %s", event.mid, event.payload
        )
        await self._send_text(event.sender_id, QUICK_REPLY_ACK)

    async def _handle_attachment(self, event: AttachmentMessage) -> None:
        logger.info(
            "Attachment message %s from %s: %s",
            event.mid,
            event.sender_id,
            ", ".join(event.attachment_types),
        )
        await self._send_text(event.sender_id, ATTACHMENT_ACK)

    async def _handle_echo(self, event: EchoMessage) -> None:
        logger.info(
            "Received echo for message %s and app %s with metadata %s",
            event.mid,
            event.app_id,
            event.metadata,
        )

    # Other events

    async def _handle_postback(self, event: Postback) -> None:
        logger.info(
            "Received postback for user %s and page %s with payload '%s' at %s",
            event.sender_id,
            event.recipient_id,
            event.payload,
            event.timestamp,
        )
        await self._send_text(event.sender_id, POSTBACK_ACK)

    async def _handle_optin(self, event: Optin) -> None:
        logger.info(
            "Received authentication for user %s and page %s with pass "
            "through param '%s' at %s",
            event.sender_id,
            event.recipient_id,
            event.ref,
            event.timestamp,
        )
        await self._send_text(event.sender_id, OPTIN_ACK)

    async def _handle_delivery(self, event: DeliveryReceipt) -> None:
        for mid in event.mids:
            logger.info("Received delivery confirmation for message ID: %s", mid)
        logger.info("All message before %s were delivered.", event.watermark)

    async def _handle_read(self, event: ReadReceipt) -> None:
        logger.info(
            "Received message read event for watermark %s and sequence number %s",
            event.watermark,
            event.seq,
        )

    async def _handle_account_link(self, event: AccountLink) -> None:
        logger.info(
            "Received account link event for user %s with status %s and auth code %s",
            event.sender_id,
            event.status,
            event.authorization_code,
        )

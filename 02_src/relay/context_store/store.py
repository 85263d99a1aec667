"""In-memory per-user conversation context store."""

from typing import Protocol

from ..logging_config import get_logger
from ..models import ConversationContext

logger = get_logger(__name__)


class IContextStore(Protocol):
    """Keyed cache of dialog context, one entry per user."""

    def get(self, user_id: str) -> ConversationContext | None:
        """Return stored context, or None for a fresh conversation."""
        ...

    def set(self, user_id: str, context: ConversationContext) -> None:
        """Replace the stored context for a user."""
        ...

    def clear(self, user_id: str) -> None:
        """Forget the user's context. No error if absent."""
        ...

    def reset(self) -> None:
        """Forget all contexts."""
        ...

    def __len__(self) -> int:
        ...


class InMemoryContextStore:
    """
    Dict-backed context store living for the process lifetime.

    Only touched from the event loop thread, so each operation is atomic.
    Two overlapping turns for the same user race; the last set wins.
    Entries never expire.
    """

    def __init__(self):
        self._contexts: dict[str, ConversationContext] = {}

    def get(self, user_id: str) -> ConversationContext | None:
        return self._contexts.get(user_id)

    def set(self, user_id: str, context: ConversationContext) -> None:
        self._contexts[user_id] = context

    def clear(self, user_id: str) -> None:
        if self._contexts.pop(user_id, None) is not None:
            logger.info("Conversation ended for %s", user_id)

    def reset(self) -> None:
        self._contexts.clear()

    def __len__(self) -> int:
        return len(self._contexts)


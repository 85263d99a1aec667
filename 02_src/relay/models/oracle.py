"""Dialog service turn models."""

from dataclasses import dataclass, field

# Opaque conversation state returned by the dialog service
ConversationContext = dict


@dataclass
class OracleTurnResult:
    """Interpreted response of one dialog service turn."""

    next_context: ConversationContext
    detected_intent: str | None = None
    output_text: list[str] = field(default_factory=list)
    action_tag: str | None = None

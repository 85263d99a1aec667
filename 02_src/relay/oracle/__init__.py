"""Dialog service module."""

from .adapter import IDialogOracle, WatsonConversationOracle, parse_turn

__all__ = ["IDialogOracle", "WatsonConversationOracle", "parse_turn"]

"""Output router module."""

from .router import SEND_API_URL, IOutputRouter, MessengerClient, OutputRouter

__all__ = ["IOutputRouter", "MessengerClient", "OutputRouter", "SEND_API_URL"]

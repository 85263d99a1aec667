"""Rendering module."""

from .renderer import SENDER_ACTIONS, ResponseRenderer

__all__ = ["ResponseRenderer", "SENDER_ACTIONS"]

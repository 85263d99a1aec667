"""Webhook simulator."""

from .sim import ISim, Sim, build_text_batch

__all__ = ["ISim", "Sim", "build_text_batch"]

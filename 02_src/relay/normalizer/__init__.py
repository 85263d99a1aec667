"""Webhook normalizer module."""

from .normalizer import (
    PageEntry,
    WebhookBatch,
    normalize_batch,
    normalize_event,
    parse_batch,
)

__all__ = [
    "PageEntry",
    "WebhookBatch",
    "normalize_batch",
    "normalize_event",
    "parse_batch",
]

"""Context store module."""

from .store import IContextStore, InMemoryContextStore

__all__ = ["IContextStore", "InMemoryContextStore"]

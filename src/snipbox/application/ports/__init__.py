"""Application ports (interfaces implemented by infrastructure)."""

from snipbox.application.ports.session_store import SessionStore, StoredSession

__all__ = ["SessionStore", "StoredSession"]

from .memory_session_store import InMemorySessionStore, SessionRegistry
from .view_state_registry import ViewStateRegistry

__all__ = [
    "InMemorySessionStore",
    "SessionRegistry",
    "ViewStateRegistry",
]

from .session_store import SessionStore
from .student_store import StudentStore

__all__ = [
    "SessionStore",
    "StudentStore",
]

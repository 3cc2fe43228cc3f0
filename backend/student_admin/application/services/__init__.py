from .auth_service import AuthService
from .edit_session_controller import EditSessionController
from .student_table import build_student_table

__all__ = [
    "AuthService",
    "EditSessionController",
    "build_student_table",
]

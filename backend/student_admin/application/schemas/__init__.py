from .auth import AuthMessageResponse, AuthStatusResponse, CredentialsRequest
from .student import StudentRecord, attribute_name, build_update_payload
from .student_table import FieldUpdateRequest, StudentRow, StudentTableResponse

__all__ = [
    "AuthMessageResponse",
    "AuthStatusResponse",
    "CredentialsRequest",
    "StudentRecord",
    "attribute_name",
    "build_update_payload",
    "FieldUpdateRequest",
    "StudentRow",
    "StudentTableResponse",
]

from .student_api_client import HttpStudentStore

__all__ = ["HttpStudentStore"]

from .demo_user import DemoUser
from .student import Student

__all__ = [
    "DemoUser",
    "Student",
]

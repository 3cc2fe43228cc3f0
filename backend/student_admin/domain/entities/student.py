"""Domain entity — a student record as cached by the admin view."""

from dataclasses import dataclass, fields
from datetime import date
from typing import Any


@dataclass
class Student:
    """A single student entry owned by the remote student store.

    The admin view only ever holds a transient copy. ``password`` is
    write-only: it is never populated from store responses and only
    travels outward when an edit sets it.
    """

    id: str
    name: str = ""
    username: str = ""
    phone: str = ""
    student_class: str = ""
    dob: date | None = None
    profile_photo: str | None = None
    password: str | None = None

    def to_fields(self) -> dict[str, Any]:
        """Shallow copy of the record's fields, keyed by attribute name."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

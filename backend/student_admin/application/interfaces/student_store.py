"""Abstract interface (port) for the remote student store."""

from abc import ABC, abstractmethod
from typing import Any

from student_admin.domain.entities import Student


class StudentStore(ABC):
    """Port for the external student REST backend — implemented in the infrastructure layer.

    Every method is a single attempt. Failures surface as
    ``StudentStoreError`` (or its ``StudentStoreUnavailableError`` subclass).
    """

    @abstractmethod
    async def list_students(self) -> list[Student]:
        """Fetch the full list of student records."""
        ...

    @abstractmethod
    async def update_student(self, student_id: str, fields: dict[str, Any]) -> Student:
        """Send the edited fields for a record and return the store's representation."""
        ...

    @abstractmethod
    async def delete_student(self, student_id: str) -> None:
        """Delete a record by its identifier."""
        ...

"""Shared test doubles for the application ports."""

import asyncio
from dataclasses import fields as dataclass_fields
from typing import Any

from student_admin.application.interfaces import StudentStore
from student_admin.domain.entities import Student
from student_admin.domain.exceptions import StudentStoreError

_STUDENT_FIELDS = {f.name for f in dataclass_fields(Student)}


class FakeStudentStore(StudentStore):
    """In-memory fake of the remote student store for unit testing."""

    def __init__(self, students: list[Student] | None = None):
        self._students = list(students or [])
        self.list_calls = 0
        self.update_calls: list[tuple[str, dict[str, Any]]] = []
        self.delete_calls: list[str] = []
        self.fail_with: StudentStoreError | None = None
        self.gate: asyncio.Event | None = None

    async def _maybe_block(self) -> None:
        if self.gate is not None:
            await self.gate.wait()

    async def list_students(self) -> list[Student]:
        self.list_calls += 1
        if self.fail_with:
            raise self.fail_with
        return list(self._students)

    async def update_student(self, student_id: str, fields: dict[str, Any]) -> Student:
        self.update_calls.append((student_id, fields))
        await self._maybe_block()
        if self.fail_with:
            raise self.fail_with
        known = {k: v for k, v in fields.items() if k in _STUDENT_FIELDS and k != "password"}
        return Student(**known)

    async def delete_student(self, student_id: str) -> None:
        self.delete_calls.append(student_id)
        await self._maybe_block()
        if self.fail_with:
            raise self.fail_with
        self._students = [s for s in self._students if s.id != student_id]

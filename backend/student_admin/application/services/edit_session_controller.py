"""Edit session controller — single-cursor inline editing over the remote student store.

Holds the view's cached record list, the edit cursor (``editing_id``) and
the edit buffer. The list only changes after the store confirms an update
or a delete; failures become a single display string in ``error`` and
leave the prior state untouched so the user can retry.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from student_admin.application.interfaces import StudentStore
from student_admin.application.schemas.student import attribute_name
from student_admin.domain.entities import Student
from student_admin.domain.exceptions import (
    EntityNotFoundError,
    NoActiveEditError,
    StudentStoreError,
)

logger = logging.getLogger(__name__)

DELETE_FAILED_MESSAGE = "Failed to delete student."
PENDING_MESSAGE = "Another operation on this student is still in progress."


class EditSessionController:
    """Two-state controller: idle, or editing exactly one record.

    One instance lives for as long as the browser session's view does.
    Records with an update or delete in flight refuse further edit, save
    and delete actions until the store has answered.
    """

    def __init__(self, store: StudentStore):
        self._store = store
        self.students: list[Student] = []
        self.editing_id: str | None = None
        self.buffer: dict[str, Any] = {}
        self.error: str = ""
        self.mounted = False
        self._in_flight = 0
        self._pending: set[str] = set()

    @property
    def loading(self) -> bool:
        return self._in_flight > 0

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None

    def is_pending(self, student_id: str) -> bool:
        return student_id in self._pending

    def find(self, student_id: str) -> Student:
        for student in self.students:
            if student.id == student_id:
                return student
        raise EntityNotFoundError("Student", student_id)

    # ── Store round-trips ────────────────────────────────────────────

    async def load(self) -> bool:
        """Fetch the full list from the store (the view's mount step)."""
        self.mounted = True
        with self._tracking(None):
            try:
                students = await self._store.list_students()
            except StudentStoreError as exc:
                logger.warning("Loading students failed: %s", exc)
                self.error = exc.message
                return False

        self.students = students
        if self.editing_id is not None and all(s.id != self.editing_id for s in students):
            self.cancel()
        logger.info("Loaded %d student(s)", len(students))
        return True

    async def commit(self) -> bool:
        """Send the edit buffer for the cursor record and merge the store's answer."""
        if self.editing_id is None:
            raise NoActiveEditError("save")

        student_id = self.editing_id
        if self._refuse_if_pending(student_id):
            return False

        with self._tracking(student_id):
            try:
                updated = await self._store.update_student(student_id, dict(self.buffer))
            except StudentStoreError as exc:
                logger.warning("Saving student %s failed: %s", student_id, exc)
                self.error = f"Error: {exc.message}"
                return False

        self.error = ""
        self.students = [
            updated if student.id == student_id else student
            for student in self.students
        ]
        # The cursor may have moved to another row while the save was in flight
        if self.editing_id == student_id:
            self.cancel()
        return True

    async def remove(self, student_id: str) -> bool:
        """Delete a record in the store, then drop it from the list."""
        if self._refuse_if_pending(student_id):
            return False

        with self._tracking(student_id):
            try:
                await self._store.delete_student(student_id)
            except StudentStoreError as exc:
                logger.warning("Deleting student %s failed: %s", student_id, exc)
                self.error = DELETE_FAILED_MESSAGE
                return False

        self.students = [s for s in self.students if s.id != student_id]
        if self.editing_id == student_id:
            self.cancel()
        return True

    # ── Local transitions ────────────────────────────────────────────

    def begin_edit(self, student: Student) -> bool:
        """Put ``student`` in edit mode, discarding any uncommitted buffer."""
        if self._refuse_if_pending(student.id):
            return False
        self.editing_id = student.id
        self.buffer = student.to_fields()
        return True

    def update_field(self, field_name: str, value: Any) -> None:
        """Merge one field into the buffer.

        Store field names (``studentClass``) land on the same key as their
        attribute names (``student_class``); other names and all values are
        taken as-is.
        """
        if self.editing_id is None:
            raise NoActiveEditError("update a field")
        self.buffer[attribute_name(field_name)] = value

    def cancel(self) -> None:
        self.editing_id = None
        self.buffer = {}

    # ── Helpers ──────────────────────────────────────────────────────

    def _refuse_if_pending(self, student_id: str) -> bool:
        if student_id in self._pending:
            logger.info("Student %s has an operation in flight; action refused", student_id)
            self.error = PENDING_MESSAGE
            return True
        return False

    @contextmanager
    def _tracking(self, student_id: str | None) -> Iterator[None]:
        self._in_flight += 1
        if student_id is not None:
            self._pending.add(student_id)
        try:
            yield
        finally:
            self._in_flight -= 1
            if student_id is not None:
                self._pending.discard(student_id)

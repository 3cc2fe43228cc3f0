"""Record list view — renders the edit controller's state as a table view model."""

from datetime import date
from typing import Any

from student_admin.application.schemas import StudentRow, StudentTableResponse
from student_admin.application.services.edit_session_controller import EditSessionController
from student_admin.domain.entities import Student

EMPTY_MESSAGE = "No students found."
NO_PHOTO_LABEL = "No Photo"


def build_student_table(controller: EditSessionController) -> StudentTableResponse:
    """One row per cached record, in list order; the cursor row shows the buffer."""
    rows = [
        _edit_row(student, controller)
        if student.id == controller.editing_id
        else _view_row(student, controller)
        for student in controller.students
    ]
    return StudentTableResponse(
        rows=rows,
        editing_id=controller.editing_id,
        error=controller.error,
        loading=controller.loading,
        empty_message=None if rows else EMPTY_MESSAGE,
    )


def _view_row(student: Student, controller: EditSessionController) -> StudentRow:
    return StudentRow(
        id=student.id,
        mode="view",
        name=student.name,
        username=student.username,
        phone=student.phone,
        student_class=student.student_class,
        dob=_display_date(student.dob),
        photo=student.profile_photo,
        photo_label=None if student.profile_photo else NO_PHOTO_LABEL,
        pending=controller.is_pending(student.id),
    )


def _edit_row(student: Student, controller: EditSessionController) -> StudentRow:
    buffer = controller.buffer
    photo = buffer.get("profile_photo")
    return StudentRow(
        id=student.id,
        mode="edit",
        name=_display_text(buffer.get("name")),
        username=_display_text(buffer.get("username")),
        phone=_display_text(buffer.get("phone")),
        student_class=_display_text(buffer.get("student_class")),
        dob=_display_date(buffer.get("dob")),
        photo=photo or None,
        photo_label=None if photo else NO_PHOTO_LABEL,
        pending=controller.is_pending(student.id),
    )


def _display_text(value: Any) -> str:
    return "" if value is None else str(value)


def _display_date(value: Any) -> str | None:
    if value is None or value == "":
        return None
    if isinstance(value, date):
        return value.isoformat()
    return str(value)[:10]

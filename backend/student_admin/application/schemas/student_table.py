"""Pydantic DTOs for the rendered student table and its edit requests."""

from typing import Any, Literal

from pydantic import BaseModel, Field


class StudentRow(BaseModel):
    """One rendered table row — record values in view mode, buffer values in edit mode."""

    id: str
    mode: Literal["view", "edit"]
    name: str
    username: str
    phone: str
    student_class: str
    dob: str | None
    photo: str | None
    photo_label: str | None = Field(
        None, description="Placeholder text shown when the record has no photo",
    )
    pending: bool = False


class StudentTableResponse(BaseModel):
    """Full state of the student management view."""

    rows: list[StudentRow]
    editing_id: str | None
    error: str
    loading: bool
    empty_message: str | None = None


class FieldUpdateRequest(BaseModel):
    """Schema for merging one field into the edit buffer."""

    field: str = Field(..., min_length=1, examples=["name"])
    value: Any = Field(None, examples=["Ada Lovelace"])

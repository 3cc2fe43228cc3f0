"""Pydantic DTOs for the remote student store's wire format."""

from datetime import date, datetime, timezone
from typing import Any

from pydantic import AliasChoices, BaseModel, Field, field_validator
from pydantic_core import to_jsonable_python

from student_admin.domain.entities import Student

# Attribute name → field name on the wire, for the names that differ
_WIRE_NAMES = {
    "id": "_id",
    "student_class": "studentClass",
    "profile_photo": "profilePhoto",
}
_ATTRIBUTE_NAMES = {wire: attr for attr, wire in _WIRE_NAMES.items()}


class StudentRecord(BaseModel):
    """A student record as returned by the store (``GET /students``, ``PUT /students/:id``)."""

    id: str = Field(
        ...,
        validation_alias=AliasChoices("_id", "id"),
        serialization_alias="_id",
        examples=["65a1f0c2e4b0a1b2c3d4e5f6"],
    )
    name: str = ""
    username: str = ""
    phone: str = ""
    student_class: str = Field("", alias="studentClass")
    dob: date | None = None
    profile_photo: str | None = Field(None, alias="profilePhoto")

    model_config = {"populate_by_name": True}

    @field_validator("name", "username", "phone", "student_class", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, (int, float)):
            return str(value)
        return value

    @field_validator("dob", mode="before")
    @classmethod
    def _coerce_date(cls, value: Any) -> Any:
        """Accept plain ISO dates as well as full timestamps (``2001-02-03T00:00:00.000Z``)."""
        if value in (None, ""):
            return None
        if isinstance(value, str) and "T" in value:
            value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        if isinstance(value, datetime):
            # Offset timestamps count by their UTC day
            if value.tzinfo is not None:
                value = value.astimezone(timezone.utc)
            return value.date()
        return value

    @field_validator("profile_photo", mode="before")
    @classmethod
    def _blank_photo_is_none(cls, value: Any) -> Any:
        return value or None

    def to_entity(self) -> Student:
        return Student(
            id=self.id,
            name=self.name,
            username=self.username,
            phone=self.phone,
            student_class=self.student_class,
            dob=self.dob,
            profile_photo=self.profile_photo,
        )


def attribute_name(field_name: str) -> str:
    """Map a store field name (``studentClass``) to its attribute name (``student_class``)."""
    return _ATTRIBUTE_NAMES.get(field_name, field_name)


def build_update_payload(fields: dict[str, Any]) -> dict[str, Any]:
    """Translate an edit buffer into the JSON body of ``PUT /students/:id``.

    Field names are not validated: unknown names pass through verbatim.
    An unset password is left out so the store keeps the current one.
    """
    payload: dict[str, Any] = {}
    for name, value in fields.items():
        if name == "password" and not value:
            continue
        payload[_WIRE_NAMES.get(name, name)] = to_jsonable_python(value)
    return payload

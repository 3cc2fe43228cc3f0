"""Unit tests for the student store wire format."""

from datetime import date

from student_admin.application.schemas import StudentRecord, attribute_name, build_update_payload
from student_admin.domain.entities import Student


def test_record_parses_store_field_names():
    record = StudentRecord.model_validate({
        "_id": "65a1",
        "name": "Ada",
        "username": "ada",
        "phone": 5551234,
        "studentClass": "10-B",
        "dob": "2008-04-01T00:00:00.000Z",
        "profilePhoto": "https://cdn.example/ada.png",
        "password": "$2b$10$hash",
        "__v": 0,
    })

    student = record.to_entity()

    assert student.id == "65a1"
    assert student.phone == "5551234"
    assert student.student_class == "10-B"
    assert student.dob == date(2008, 4, 1)
    assert student.profile_photo == "https://cdn.example/ada.png"
    assert student.password is None


def test_record_accepts_plain_id_and_missing_optionals():
    student = StudentRecord.model_validate({"id": "7", "name": None}).to_entity()

    assert student.id == "7"
    assert student.name == ""
    assert student.dob is None
    assert student.profile_photo is None


def test_empty_photo_is_treated_as_absent():
    record = StudentRecord.model_validate({"_id": "1", "profilePhoto": ""})
    assert record.profile_photo is None


def test_update_payload_uses_store_field_names():
    buffer = Student(id="2", name="C", student_class="9-A", dob=date(2009, 1, 31)).to_fields()

    payload = build_update_payload(buffer)

    assert payload["_id"] == "2"
    assert payload["name"] == "C"
    assert payload["studentClass"] == "9-A"
    assert payload["dob"] == "2009-01-31"
    assert payload["profilePhoto"] is None
    assert "password" not in payload


def test_update_payload_passes_unknown_fields_and_set_password():
    payload = build_update_payload({"id": "2", "password": "s3cret", "nickname": "Cee"})

    assert payload == {"_id": "2", "password": "s3cret", "nickname": "Cee"}


def test_offset_timestamp_uses_utc_day():
    record = StudentRecord.model_validate({"_id": "1", "dob": "2001-02-02T23:00:00-05:00"})
    assert record.dob == date(2001, 2, 3)


def test_attribute_name_maps_store_names():
    assert attribute_name("studentClass") == "student_class"
    assert attribute_name("profilePhoto") == "profile_photo"
    assert attribute_name("_id") == "id"
    assert attribute_name("nickname") == "nickname"

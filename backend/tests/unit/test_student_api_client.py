"""Unit tests for the HttpStudentStore."""

import json
from datetime import date

import httpx
import pytest

from student_admin.domain.exceptions import StudentStoreError, StudentStoreUnavailableError
from student_admin.infrastructure.student_api import HttpStudentStore
from student_admin.infrastructure.student_api.student_api_client import UPDATE_FAILED_MESSAGE


# ── Helpers ──


def _record(student_id: str = "2", name: str = "B") -> dict:
    return {
        "_id": student_id,
        "name": name,
        "username": name.lower(),
        "phone": "555-0100",
        "studentClass": "9-A",
        "dob": "2009-01-31T00:00:00.000Z",
        "profilePhoto": "",
    }


def _make_store(handler) -> tuple[HttpStudentStore, list[httpx.Request]]:
    """Build a store whose requests are answered by ``handler`` and recorded."""
    seen: list[httpx.Request] = []

    def recording_handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return handler(request)

    store = HttpStudentStore(
        base_url="http://students.test/",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(recording_handler)),
    )
    return store, seen


# ── Tests ──


@pytest.mark.asyncio
async def test_list_students_parses_records():
    store, seen = _make_store(lambda request: httpx.Response(200, json=[_record("1", "A"), _record()]))

    students = await store.list_students()

    assert seen[0].method == "GET"
    assert str(seen[0].url) == "http://students.test/students"
    assert "authorization" not in seen[0].headers
    assert [s.id for s in students] == ["1", "2"]
    assert students[1].dob == date(2009, 1, 31)
    assert students[1].profile_photo is None


@pytest.mark.asyncio
async def test_list_students_error_status():
    store, _ = _make_store(lambda request: httpx.Response(500, text="boom"))

    with pytest.raises(StudentStoreError) as exc_info:
        await store.list_students()

    assert exc_info.value.status_code == 500
    assert exc_info.value.message == "Error: 500 - Internal Server Error"


@pytest.mark.asyncio
async def test_list_students_rejects_non_list_body():
    store, _ = _make_store(lambda request: httpx.Response(200, json={"students": []}))

    with pytest.raises(StudentStoreError) as exc_info:
        await store.list_students()

    assert "Invalid student list" in exc_info.value.message


@pytest.mark.asyncio
async def test_update_student_sends_buffer_and_returns_store_version():
    store, seen = _make_store(lambda request: httpx.Response(200, json=_record("2", "C")))

    student = await store.update_student(
        "2",
        {"id": "2", "name": "C", "student_class": "9-A", "dob": date(2009, 1, 31), "password": None},
    )

    request = seen[0]
    assert request.method == "PUT"
    assert request.url.path == "/students/2"
    assert json.loads(request.content) == {
        "_id": "2",
        "name": "C",
        "studentClass": "9-A",
        "dob": "2009-01-31",
    }
    assert student.id == "2"
    assert student.name == "C"


@pytest.mark.asyncio
async def test_update_student_uses_server_message():
    store, _ = _make_store(
        lambda request: httpx.Response(400, json={"message": "Username already taken"})
    )

    with pytest.raises(StudentStoreError) as exc_info:
        await store.update_student("2", {"username": "a"})

    assert exc_info.value.status_code == 400
    assert exc_info.value.message == "Username already taken"


@pytest.mark.asyncio
async def test_update_student_falls_back_to_generic_message():
    store, _ = _make_store(lambda request: httpx.Response(502, text="<html>Bad gateway</html>"))

    with pytest.raises(StudentStoreError) as exc_info:
        await store.update_student("2", {"name": "C"})

    assert exc_info.value.message == UPDATE_FAILED_MESSAGE


@pytest.mark.asyncio
async def test_delete_student_accepts_any_success_status():
    store, seen = _make_store(lambda request: httpx.Response(204))

    await store.delete_student("2")

    assert seen[0].method == "DELETE"
    assert seen[0].url.path == "/students/2"


@pytest.mark.asyncio
async def test_delete_student_error_status():
    store, _ = _make_store(lambda request: httpx.Response(404, json={"message": "missing"}))

    with pytest.raises(StudentStoreError) as exc_info:
        await store.delete_student("2")

    assert exc_info.value.message == "Failed to delete student."


@pytest.mark.asyncio
async def test_transport_failure_raises_unavailable():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    store, _ = _make_store(handler)

    with pytest.raises(StudentStoreUnavailableError) as exc_info:
        await store.list_students()

    assert exc_info.value.status_code is None
    assert exc_info.value.message == "Connection refused"


@pytest.mark.asyncio
async def test_list_students_skips_unreadable_records():
    body = [_record("1", "A"), {"name": "no id"}, {"_id": "3", "dob": "not-a-dateTx"}, _record()]
    store, _ = _make_store(lambda request: httpx.Response(200, json=body))

    students = await store.list_students()

    assert [s.id for s in students] == ["1", "2"]

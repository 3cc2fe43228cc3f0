"""Student API client — implements the StudentStore interface.

Talks to the external student REST backend (``/students``) with httpx.
Every call is a single attempt; non-success statuses and transport
failures are raised as StudentStoreError so callers can show one
human-readable message.
"""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from student_admin.application.interfaces import StudentStore
from student_admin.application.schemas.student import StudentRecord, build_update_payload
from student_admin.domain.entities import Student
from student_admin.domain.exceptions import StudentStoreError, StudentStoreUnavailableError
from student_admin.infrastructure.logging.colored_logger import StoreCallLogger, StoreStage

logger = logging.getLogger(__name__)
_log = StoreCallLogger(__name__)

UPDATE_FAILED_MESSAGE = "Failed to update student."
UNREACHABLE_MESSAGE = "Failed to reach the student store."


class HttpStudentStore(StudentStore):
    """Infrastructure adapter — connects to the remote student store.

    No authentication header is sent: the admin view's access gate is
    purely local to this service.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:5000",
        timeout: float | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._http_client = http_client

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def _send(
        self,
        stage: tuple[str, str, str],
        method: str,
        path: str,
        json: dict[str, Any] | None = None,
    ) -> httpx.Response:
        client = await self._get_client()
        should_close = self._http_client is None

        try:
            with _log.timed_step(stage, f"{method} {path}"):
                try:
                    return await client.request(method, f"{self._base_url}{path}", json=json)
                except httpx.HTTPError as exc:
                    raise StudentStoreUnavailableError(str(exc) or UNREACHABLE_MESSAGE) from exc
        finally:
            if should_close:
                await client.aclose()

    async def list_students(self) -> list[Student]:
        response = await self._send(StoreStage.LIST, "GET", "/students")

        if not response.is_success:
            raise StudentStoreError(
                status_code=response.status_code,
                message=f"Error: {response.status_code} - {response.reason_phrase}",
            )

        try:
            data = response.json()
            if not isinstance(data, list):
                raise ValueError(f"expected a JSON array, got {type(data).__name__}")
        except ValueError as exc:
            raise StudentStoreError(
                status_code=response.status_code,
                message=f"Invalid student list from store: {exc}",
            ) from exc

        students: list[Student] = []
        for position, item in enumerate(data):
            try:
                students.append(StudentRecord.model_validate(item).to_entity())
            except ValidationError as exc:
                logger.warning(
                    "Skipping unreadable student at position %d: %s",
                    position,
                    exc.errors(include_url=False),
                )
        return students

    async def update_student(self, student_id: str, fields: dict[str, Any]) -> Student:
        payload = build_update_payload(fields)
        response = await self._send(
            StoreStage.UPDATE, "PUT", f"/students/{student_id}", json=payload
        )

        if not response.is_success:
            self._raise_update_error(response)

        try:
            return StudentRecord.model_validate(response.json()).to_entity()
        except ValueError as exc:
            raise StudentStoreError(
                status_code=response.status_code,
                message=f"Invalid student from store: {exc}",
            ) from exc

    async def delete_student(self, student_id: str) -> None:
        response = await self._send(StoreStage.DELETE, "DELETE", f"/students/{student_id}")

        if not response.is_success:
            raise StudentStoreError(
                status_code=response.status_code,
                message="Failed to delete student.",
            )

    @staticmethod
    def _raise_update_error(response: httpx.Response) -> None:
        """Raise StudentStoreError using the store's ``message`` field when present."""
        message = UPDATE_FAILED_MESSAGE
        try:
            data = response.json()
            if isinstance(data, dict) and data.get("message"):
                message = str(data["message"])
        except ValueError:
            logger.debug("Update error body is not JSON: %r", response.text[:200])

        raise StudentStoreError(status_code=response.status_code, message=message)

"""Stand-in for the remote student REST backend, served through httpx.MockTransport."""

import json

import httpx


class RemoteStudentStoreStub:
    """Answers ``/students`` requests from an in-memory list of JSON records."""

    def __init__(self, records: list[dict]):
        self.records = [dict(r) for r in records]
        self.requests: list[httpx.Request] = []
        self.reject_updates_with: str | None = None

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        parts = request.url.path.strip("/").split("/")

        if parts == ["students"] and request.method == "GET":
            return httpx.Response(200, json=self.records)

        if len(parts) == 2 and parts[0] == "students":
            index = self._index_of(parts[1])
            if index is None:
                return httpx.Response(404, json={"message": "Student not found"})

            if request.method == "PUT":
                if self.reject_updates_with:
                    return httpx.Response(400, json={"message": self.reject_updates_with})
                body = json.loads(request.content)
                body.pop("password", None)
                self.records[index] = {**self.records[index], **body}
                return httpx.Response(200, json=self.records[index])

            if request.method == "DELETE":
                del self.records[index]
                return httpx.Response(200, json={"message": "Student deleted"})

        return httpx.Response(405)

    def _index_of(self, student_id: str) -> int | None:
        for index, record in enumerate(self.records):
            if record["_id"] == student_id:
                return index
        return None

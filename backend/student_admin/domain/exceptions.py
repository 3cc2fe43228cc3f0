"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class StudentStoreError(Exception):
    """Raised when the remote student store rejects a request.

    ``message`` is the human-readable text meant for display; it is either
    taken from the store's response body or a generic fallback.
    """

    def __init__(self, status_code: int | None, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"[student-store] {status_code}: {message}")


class StudentStoreUnavailableError(StudentStoreError):
    """Raised when the remote student store cannot be reached at all."""

    def __init__(self, message: str):
        super().__init__(status_code=None, message=message)


class NoActiveEditError(Exception):
    """Raised when an edit-buffer operation is attempted with no row in edit mode."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Cannot {operation}: no student is being edited")


class InvalidCredentialsError(Exception):
    """Raised when a login attempt does not match the registered demo user."""

    def __init__(self, message: str = "Invalid credentials!"):
        self.message = message
        super().__init__(message)


class RegistrationError(Exception):
    """Raised when a registration request is missing required fields."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"'{field}' is required")

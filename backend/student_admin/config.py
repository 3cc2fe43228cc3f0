import logging
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

_config_logger = logging.getLogger(__name__)

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Student Records Admin"
    app_version: str = "0.1.0"
    app_env: str = "development"
    cors_origins: list[str] = ["http://localhost:3000"]

    # Remote student store (external REST backend)
    student_api_base_url: str = "http://localhost:5000"
    student_api_timeout: float | None = None  # seconds; None disables the timeout

    # Browser session cookie carrying the session flag store id
    session_cookie_name: str = "session_id"

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_http: str = "WARNING"          # httpx / httpcore — outbound HTTP
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_students: str = "INFO"         # student store client + edit controller

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    def model_post_init(self, __context: object) -> None:
        """Normalise the store base URL so paths can be appended verbatim."""
        if self.student_api_base_url.endswith("/"):
            object.__setattr__(
                self, "student_api_base_url", self.student_api_base_url.rstrip("/")
            )
            _config_logger.debug("Stripped trailing slash from student_api_base_url")


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()

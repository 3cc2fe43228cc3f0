"""Logging setup for the student admin service.

Levels come from Settings: ``log_level`` for the root logger, plus one
setting per category so outbound HTTP chatter and the student store
traffic can be tuned independently.
"""

import logging
import sys

from student_admin.config import get_settings

# Settings field → loggers it controls
_CATEGORY_MAP: dict[str, list[str]] = {
    "log_level_http": ["httpx", "httpcore"],
    "log_level_uvicorn": ["uvicorn", "uvicorn.access", "uvicorn.error"],
    "log_level_students": [
        "student_admin.infrastructure.student_api",
        "student_admin.application.services",
    ],
}

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s — %(message)s"


def setup_logging() -> None:
    """Apply root and per-category levels; called from the app lifespan."""
    settings = get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)

    levels = {
        field: _parse_level(getattr(settings, field)) for field in _CATEGORY_MAP
    }
    for field, logger_names in _CATEGORY_MAP.items():
        for name in logger_names:
            logging.getLogger(name).setLevel(levels[field])

    logging.getLogger(__name__).debug(
        "Log levels: root=%s %s",
        settings.log_level,
        " ".join(f"{field.removeprefix('log_level_')}={logging.getLevelName(level)}"
                 for field, level in levels.items()),
    )


def _parse_level(raw: str) -> int:
    """Level name to logging constant; unknown names fall back to INFO."""
    numeric = getattr(logging, raw.upper(), None)
    return numeric if isinstance(numeric, int) else logging.INFO

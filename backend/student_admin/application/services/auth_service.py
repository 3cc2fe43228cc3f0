"""Application service for the login/registration demo.

The "credential store" is the browser session itself: one user record
under ``user`` and an access flag under ``isAllowed``. Nothing here is
a real authentication system.
"""

import json
import logging
from dataclasses import asdict

from student_admin.application.interfaces import SessionStore
from student_admin.domain.entities import DemoUser
from student_admin.domain.exceptions import InvalidCredentialsError, RegistrationError

logger = logging.getLogger(__name__)

USER_KEY = "user"
ACCESS_FLAG_KEY = "isAllowed"


class AuthService:
    """Register, log in and log out against a single session store."""

    def __init__(self, session_store: SessionStore):
        self._session = session_store

    def register(self, username: str, password: str) -> DemoUser:
        """Store the demo user, replacing any previously registered one."""
        if not username:
            raise RegistrationError("username")
        if not password:
            raise RegistrationError("password")

        user = DemoUser(username=username, password=password)
        self._session.set_item(USER_KEY, json.dumps(asdict(user)))
        logger.info("Registered demo user '%s'", username)
        return user

    def login(self, username: str, password: str) -> None:
        user = self._load_user()
        if user is None or not user.matches(username, password):
            raise InvalidCredentialsError()
        self._session.set_item(ACCESS_FLAG_KEY, "true")

    def logout(self) -> None:
        self._session.remove_item(ACCESS_FLAG_KEY)

    def is_allowed(self) -> bool:
        return bool(self._session.get_item(ACCESS_FLAG_KEY))

    def _load_user(self) -> DemoUser | None:
        raw = self._session.get_item(USER_KEY)
        if raw is None:
            return None
        try:
            data = json.loads(raw)
            return DemoUser(username=data["username"], password=data["password"])
        except (ValueError, KeyError, TypeError) as exc:
            logger.warning("Stored demo user is unreadable: %s", exc)
            return None

"""Domain entity — the single user record of the login/registration demo."""

from dataclasses import dataclass


@dataclass
class DemoUser:
    """Credentials kept in the browser session; not a real account."""

    username: str
    password: str

    def matches(self, username: str, password: str) -> bool:
        return self.username == username and self.password == password

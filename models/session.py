"""
models/session.py
-----------------
The interactive session of the current process.
"""

from dataclasses import dataclass


@dataclass
class Session:
    """
    Holds the username of whoever registered or logged in last.

    An empty username means nobody is authenticated. There is no
    logout: once set, the username is only ever replaced.
    """
    username: str = ""

    @property
    def is_authenticated(self) -> bool:
        return self.username != ""

    def authenticate(self, username: str) -> None:
        self.username = username

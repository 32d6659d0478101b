"""
security/auth.py
-----------------
Login gate for the interactive handlers.
Blocks account operations until someone has registered or logged in.
"""

from functools import wraps
from typing import Callable

from models.session import Session
from utils.logger import get_logger
from utils.prompt import Console

logger = get_logger(__name__)

LOGIN_REQUIRED_MESSAGE = "Error: you must login first!"


def login_required(func: Callable):
    """
    Decorator that restricts a handler to authenticated sessions.

    Usage:
        @login_required
        def my_handler(console, service, session):
            ...

    Behavior:
        - If the session has a username, the handler runs.
        - Otherwise the login message is printed and the handler is skipped,
          so nothing is prompted and no procedure is called.
    """
    @wraps(func)
    def wrapper(console: Console, service, session: Session, *args, **kwargs):
        if not session.is_authenticated:
            logger.debug(f"Blocked {func.__name__}: no user logged in")
            console.write(LOGIN_REQUIRED_MESSAGE)
            return None
        return func(console, service, session, *args, **kwargs)

    return wrapper

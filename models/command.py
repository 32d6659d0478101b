"""
models/command.py
-----------------
Menu commands understood by the interactive loop.
"""

from enum import Enum


class Command(Enum):
    REGISTER = "1"
    LOGIN = "2"
    DEPOSIT = "3"
    WITHDRAW = "4"
    TRANSFER = "5"
    UPDATE_BALANCES = "6"
    CHECK_BALANCE = "7"
    QUIT = "q"
    UNKNOWN = "?"

    @classmethod
    def parse(cls, raw: str) -> "Command":
        """
        Map one line of user input to a command.

        Surrounding whitespace is ignored. "q", "quit" and "exit" (any case)
        mean QUIT; anything that is not one of "1".."7" is UNKNOWN.
        """
        text = raw.strip()
        if text.lower() in _QUIT_WORDS:
            return cls.QUIT
        for command in _NUMBERED:
            if command.value == text:
                return command
        return cls.UNKNOWN


_QUIT_WORDS = {"q", "quit", "exit"}
_NUMBERED = [c for c in Command if c.value.isdigit()]

"""
utils/prompt.py
---------------
Line-based prompting on top of text streams.
Typed prompts keep asking until the input parses; end of input
raises EOFError so callers can wind down cleanly.
"""

import getpass
import sys
from typing import Callable, Optional, TextIO, TypeVar

T = TypeVar("T")

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


class Console:
    """Reads answers from `stdin` and writes prompts to `stdout`."""

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def write(self, text: str = "") -> None:
        print(text, file=self.stdout, flush=True)

    def read_line(self) -> str:
        """Read one line without its newline. Raises EOFError at end of input."""
        line = self.stdin.readline()
        if line == "":
            raise EOFError("end of input")
        return line.rstrip("\r\n")

    def ask_text(self, label: str) -> str:
        """Prompt once and return the answer with surrounding whitespace removed."""
        self.write(label)
        return self.read_line().strip()

    def ask_secret(self, label: str) -> str:
        """Like ask_text, but without echo when reading from a terminal."""
        if not self.stdin.isatty():
            return self.ask_text(label)
        return getpass.getpass(f"{label}\n", stream=self.stdout).strip()

    def ask_int(self, label: str, minimum: int = INT64_MIN, maximum: int = INT64_MAX) -> int:
        """Prompt until the answer is a whole number within [minimum, maximum]."""
        return self.ask_parsed(
            label,
            lambda raw: _parse_int(raw, minimum, maximum),
            "Error: please enter a whole number.",
        )

    def ask_parsed(self, label: str, parse: Callable[[str], Optional[T]], error: str) -> T:
        """
        Prompt until `parse` accepts the answer.

        `parse` returns None for input it rejects; `error` is printed
        before asking again.
        """
        while True:
            self.write(label)
            value = parse(self.read_line().strip())
            if value is not None:
                return value
            self.write(error)


def _parse_int(raw: str, minimum: int, maximum: int) -> Optional[int]:
    try:
        value = int(raw)
    except ValueError:
        return None
    if not minimum <= value <= maximum:
        return None
    return value

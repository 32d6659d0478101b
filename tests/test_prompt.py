"""
Tests for typed console prompts and the small domain models.
"""

import pytest

from models.account import AccountType
from models.session import Session
from utils.prompt import INT64_MAX, INT64_MIN

from conftest import make_console, output_of


class TestAskInt:
    def test_accepts_signed_numbers(self):
        console = make_console("-42")

        assert console.ask_int("How much?") == -42

    def test_reprompts_until_numeric(self):
        console = make_console("abc", "12.5", "", "12")

        assert console.ask_int("How much?") == 12
        assert output_of(console).count("please enter a whole number") == 3
        assert output_of(console).count("How much?") == 4

    def test_int64_bounds(self):
        console = make_console(str(INT64_MAX + 1), str(INT64_MIN - 1), str(INT64_MAX))

        assert console.ask_int("How much?") == INT64_MAX
        assert output_of(console).count("please enter a whole number") == 2

    def test_eof(self):
        with pytest.raises(EOFError):
            make_console().ask_int("How much?")


class TestAskText:
    def test_strips_whitespace(self):
        assert make_console("  alice  ").ask_text("Username:") == "alice"

    def test_secret_falls_back_to_plain_read_when_not_a_tty(self):
        console = make_console("hunter2")

        assert console.ask_secret("Password:") == "hunter2"
        assert "Password:" in output_of(console)

    def test_windows_line_endings(self):
        console = make_console("bob\r")

        assert console.ask_text("Username:") == "bob"


class TestModels:
    def test_session_starts_anonymous(self):
        session = Session()

        assert session.username == ""
        assert not session.is_authenticated

    def test_account_type_parse(self):
        assert AccountType.parse("client") is AccountType.CLIENT
        assert AccountType.parse("employee") is AccountType.EMPLOYEE
        assert AccountType.parse("admin") is None
        assert AccountType.parse("") is None

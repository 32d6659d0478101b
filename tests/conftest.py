"""
Shared fixtures: psycopg2-shaped fakes so nothing talks to a real server.
"""

import io
import socket
from types import SimpleNamespace

import psycopg2
import pytest
from psycopg2 import sql

from models.session import Session
from repositories.bank_repo import BankRepository
from services.bank_service import BankService
from utils.prompt import Console


def render(stmt) -> str:
    """Turn a statement into text without needing a live connection."""
    if isinstance(stmt, sql.Composable):
        try:
            return stmt.as_string(None)
        except TypeError:
            # Identifiers can only be quoted by a real connection.
            return repr(stmt)
    return stmt


class FakeCursor:
    def __init__(self, conn):
        self.conn = conn
        self.description = None
        self.statusmessage = None
        self.rowcount = -1
        self._rows = []

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, stmt, params=None):
        text = render(stmt)
        self.conn.executed.append((text, list(params) if params is not None else None))
        error = self.conn.errors.pop(0) if self.conn.errors else None
        if error is not None:
            raise error
        self.conn.notices.extend(self.conn.pending_notices)
        self.conn.pending_notices = []
        self.conn.notifies.extend(self.conn.pending_notifies)
        self.conn.pending_notifies = []
        self._rows = self.conn.result_rows.pop(0) if self.conn.result_rows else []
        self.description = [("col",)] if self._rows else None
        self.statusmessage = text.split("(")[0].split()[0].upper()
        self.rowcount = len(self._rows)

    def fetchone(self):
        return self._rows[0] if self._rows else (1,)

    def fetchall(self):
        return list(self._rows)


class FakeConnection:
    """
    Records every executed statement as (text, params).

    `errors` is consumed one entry per execute(); None means succeed.
    `result_rows` is consumed one entry per execute() as the returned rows.
    `pending_notifies` land in `notifies` on the next execute(), the way
    psycopg2 collects NOTIFY messages that arrive during a query.
    """

    def __init__(self):
        self.executed = []
        self.errors = []
        self.result_rows = []
        self.notices = []
        self.pending_notices = []
        self.notifies = []
        self.pending_notifies = []
        self.autocommit = False
        self.closed = False

    def cursor(self):
        return FakeCursor(self)

    def close(self):
        self.closed = True

    def calls(self):
        """Only the CALL statements, as (text, params)."""
        return [(t, p) for t, p in self.executed if t.startswith("CALL")]


class FakeListenConnection(FakeConnection):
    """
    A listener connection backed by one end of a socket pair, so that
    select() really blocks and wakes up.
    """

    def __init__(self):
        super().__init__()
        self._ours, self._theirs = socket.socketpair()
        self._queued = []
        self.poll_errors = []

    def fileno(self):
        if self.closed:
            raise psycopg2.InterfaceError("connection already closed")
        return self._ours.fileno()

    def send_notification(self, payload, channel="raise_notice", pid=4242):
        self._queued.append(notification(payload, channel, pid))
        self._theirs.send(b"!")

    def poll(self):
        if self.poll_errors:
            raise self.poll_errors.pop(0)
        self._ours.recv(1024)
        self.notifies.extend(self._queued)
        self._queued = []

    def close(self):
        super().close()
        self._ours.close()
        self._theirs.close()


@pytest.fixture
def fake_conn():
    return FakeConnection()


@pytest.fixture
def repo(fake_conn):
    return BankRepository(fake_conn)


@pytest.fixture
def service(repo):
    return BankService(repo)


@pytest.fixture
def session():
    return Session()


@pytest.fixture
def logged_in():
    return Session(username="alice")


def make_console(*lines):
    """Console fed with the given input lines; output is captured."""
    stdin = io.StringIO("".join(f"{line}\n" for line in lines))
    return Console(stdin=stdin, stdout=io.StringIO())


def output_of(console) -> str:
    return console.stdout.getvalue()


def procedure_error(message="procedure failed"):
    return psycopg2.InternalError(message)


def notification(payload, channel="raise_notice", pid=4242):
    return SimpleNamespace(channel=channel, pid=pid, payload=payload)

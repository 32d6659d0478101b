"""
db/errors.py
------------
Error types raised by the database layer.

Two tiers:
    - Fatal: DatabaseUnavailableError, ListenerError. The entry point
      logs them and exits with a non-zero status.
    - Recoverable: ProcedureCallError. The service layer logs it and
      the interactive loop continues.
"""


class BankClientError(Exception):
    """Base class for all errors raised by the bank client."""


class DatabaseUnavailableError(BankClientError):
    """The primary connection could not be opened, pinged or configured."""


class ListenerError(BankClientError):
    """The notification listener lost its connection or failed a keep-alive ping."""


class ProcedureCallError(BankClientError):
    """A stored procedure call failed on the server."""

    def __init__(self, procedure: str, cause: Exception):
        self.procedure = procedure
        self.cause = cause
        super().__init__(str(cause).strip() or cause.__class__.__name__)

"""
repositories/bank_repo.py
--------------------------
Data access layer for the bank's stored procedures.
The client owns no tables: every operation is a CALL into the
configured schema and the server enforces all rules.
"""

import psycopg2
from psycopg2 import sql

from db.connection import get_connection
from db.errors import ProcedureCallError
from models.procedure import ProcedureResult
from utils.logger import get_logger

logger = get_logger(__name__)


class BankRepository:
    """Issues positional CALLs against the bank procedures."""

    def __init__(self, conn=None):
        self._conn = conn

    @property
    def conn(self):
        return self._conn if self._conn is not None else get_connection()

    def call(self, procedure: str, *args) -> ProcedureResult:
        """
        Call a stored procedure with the given positional arguments.

        Args:
            procedure: Procedure name, e.g. 'deposit'. Left unquoted so the
                server folds it to lower case like any plain identifier.
            *args: Arguments passed in order as query parameters.

        Returns:
            ProcedureResult with status, rows and any server notices.

        Raises:
            ProcedureCallError: If the server rejects the call.
        """
        stmt = sql.SQL("CALL {}({});").format(
            sql.SQL(procedure),
            sql.SQL(", ").join([sql.Placeholder()] * len(args)),
        )
        conn = self.conn
        del conn.notices[:]
        try:
            with conn.cursor() as cur:
                cur.execute(stmt, args)
                rows = cur.fetchall() if cur.description else []
                result = ProcedureResult(
                    procedure=procedure,
                    status=cur.statusmessage or "",
                    rowcount=cur.rowcount,
                    rows=[tuple(r) for r in rows],
                )
        except psycopg2.Error as e:
            logger.debug(f"CALL {procedure} failed: {e}")
            raise ProcedureCallError(procedure, e) from e

        result.notices = [n.strip() for n in conn.notices]
        return result

    def register(self, *args) -> ProcedureResult:
        return self.call("register", *args)

    def login(self, username: str, password: str) -> ProcedureResult:
        return self.call("login", username, password)

    def deposit(self, amount: int) -> ProcedureResult:
        return self.call("deposit", amount)

    def withdraw(self, amount: int) -> ProcedureResult:
        return self.call("withdraw", amount)

    def transfer(self, amount: int, to_account: int) -> ProcedureResult:
        return self.call("transfer", amount, to_account)

    def update_balances(self) -> ProcedureResult:
        return self.call("updateBalances")

    def check_balance(self) -> ProcedureResult:
        return self.call("checkBalance")

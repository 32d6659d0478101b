"""
services/bank_service.py
-------------------------
Business-facing wrapper around the bank's stored procedures.
"""

from typing import Callable, Optional

from db.errors import ProcedureCallError
from models.account import Registration
from models.procedure import ProcedureResult
from models.session import Session
from repositories.bank_repo import BankRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class BankService:
    """
    One method per remote procedure.

    Responsibilities:
        - Forward arguments to the repository unchanged.
        - Log success with the raw result, or log the failure and carry on.
        - Record the username in the session after register/login succeeds.

    Every method returns the ProcedureResult, or None when the call failed.
    """

    def __init__(self, repo: Optional[BankRepository] = None):
        self.repo = repo or BankRepository()

    def register(self, session: Session, registration: Registration) -> Optional[ProcedureResult]:
        result = self._invoke("register", self.repo.register, *registration.as_args())
        if result is not None:
            session.authenticate(registration.username)
        return result

    def login(self, session: Session, username: str, password: str) -> Optional[ProcedureResult]:
        result = self._invoke("login", self.repo.login, username, password)
        if result is not None:
            session.authenticate(username)
        return result

    def deposit(self, amount: int) -> Optional[ProcedureResult]:
        return self._invoke("deposit", self.repo.deposit, amount)

    def withdraw(self, amount: int) -> Optional[ProcedureResult]:
        return self._invoke("withdraw", self.repo.withdraw, amount)

    def transfer(self, amount: int, to_account: int) -> Optional[ProcedureResult]:
        return self._invoke("transfer", self.repo.transfer, amount, to_account)

    def update_balances(self) -> Optional[ProcedureResult]:
        return self._invoke("update balances", self.repo.update_balances)

    def check_balance(self) -> Optional[ProcedureResult]:
        return self._invoke("check balance", self.repo.check_balance)

    @staticmethod
    def _invoke(action: str, call: Callable[..., ProcedureResult], *args) -> Optional[ProcedureResult]:
        try:
            result = call(*args)
        except ProcedureCallError as e:
            logger.error(f"{action.capitalize()} error: {e}")
            return None
        logger.info(f"Successful {action} {result}")
        return result

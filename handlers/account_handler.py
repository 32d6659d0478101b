"""
handlers/account_handler.py
----------------------------
Handles the money-moving menu options. All of them require a
logged-in session.
"""

from typing import Optional

from models.procedure import ProcedureResult
from models.session import Session
from security.auth import login_required
from services.bank_service import BankService
from utils.logger import get_logger
from utils.prompt import Console

logger = get_logger(__name__)


def show_result(console: Console, result: Optional[ProcedureResult]) -> None:
    """Print whatever the procedure returned: OUT values and server notices."""
    if result is None:
        return
    for row in result.rows:
        console.write(" | ".join(str(v) for v in row))
    for notice in result.notices:
        console.write(notice)


@login_required
def handle_deposit(console: Console, service: BankService, session: Session) -> None:
    amount = console.ask_int("How much?")
    logger.debug(f"{session.username} deposits {amount}")
    show_result(console, service.deposit(amount))


@login_required
def handle_withdraw(console: Console, service: BankService, session: Session) -> None:
    amount = console.ask_int("How much?")
    logger.debug(f"{session.username} withdraws {amount}")
    show_result(console, service.withdraw(amount))


@login_required
def handle_transfer(console: Console, service: BankService, session: Session) -> None:
    """Move money from the logged-in account to another account number."""
    amount = console.ask_int("How much?")
    to_account = console.ask_int("To which account number?")
    logger.debug(f"{session.username} transfers {amount} to account {to_account}")
    show_result(console, service.transfer(amount, to_account))


@login_required
def handle_update_balances(console: Console, service: BankService, session: Session) -> None:
    """Ask the server to accrue interest on balances."""
    logger.debug(f"{session.username} requests a balance update")
    show_result(console, service.update_balances())


@login_required
def handle_check_balance(console: Console, service: BankService, session: Session) -> None:
    logger.debug(f"{session.username} checks the balance")
    show_result(console, service.check_balance())

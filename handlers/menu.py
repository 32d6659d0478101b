"""
handlers/menu.py
----------------
The interactive loop: show the menu, read a choice, run its handler.
The loop ends on the quit command or at end of input.
"""

from typing import Callable, Optional

from handlers.account_handler import (
    handle_check_balance,
    handle_deposit,
    handle_transfer,
    handle_update_balances,
    handle_withdraw,
)
from handlers.auth_handler import handle_login, handle_register
from models.command import Command
from models.session import Session
from services.bank_service import BankService
from utils.logger import get_logger
from utils.prompt import Console

logger = get_logger(__name__)

Handler = Callable[[Console, BankService, Session], None]

MENU_TEXT = (
    "Choose one of the following options:\n"
    "1) register\n"
    "2) login\n"
    "3) deposit\n"
    "4) withdraw\n"
    "5) transfer\n"
    "6) update balances\n"
    "7) check balance\n"
    "q) quit"
)
UNKNOWN_OPTION_MESSAGE = "Error: unknown user option!"

HANDLERS: dict[Command, Handler] = {
    Command.REGISTER: handle_register,
    Command.LOGIN: handle_login,
    Command.DEPOSIT: handle_deposit,
    Command.WITHDRAW: handle_withdraw,
    Command.TRANSFER: handle_transfer,
    Command.UPDATE_BALANCES: handle_update_balances,
    Command.CHECK_BALANCE: handle_check_balance,
}


def dispatch(
    command: Command,
    console: Console,
    service: BankService,
    session: Session,
    handlers: Optional[dict[Command, Handler]] = None,
) -> bool:
    """
    Run the handler for one command.

    Returns:
        False once the loop should stop (QUIT), True otherwise.
    """
    if command is Command.QUIT:
        return False
    handler = (HANDLERS if handlers is None else handlers).get(command)
    if handler is None:
        console.write(UNKNOWN_OPTION_MESSAGE)
        return True
    handler(console, service, session)
    return True


def run_menu(
    console: Console,
    service: BankService,
    session: Session,
    handlers: Optional[dict[Command, Handler]] = None,
) -> None:
    """Loop until the user quits or input runs out."""
    while True:
        console.write(MENU_TEXT)
        try:
            command = Command.parse(console.read_line())
            if not dispatch(command, console, service, session, handlers):
                logger.info("Quit requested.")
                return
        except EOFError:
            logger.info("End of input, leaving the menu.")
            return

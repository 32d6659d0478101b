"""
handlers/auth_handler.py
-------------------------
Handles the register and login menu options.
Delegates all work to BankService.
"""

from models.account import AccountType, Registration
from models.session import Session
from services.bank_service import BankService
from utils.logger import get_logger
from utils.prompt import Console

logger = get_logger(__name__)

ACCOUNT_TYPE_PROMPT = "Account type (client/employee): "


def ask_account_type(console: Console) -> AccountType:
    """Keep asking until the answer is exactly 'client' or 'employee'."""
    while True:
        console.write(ACCOUNT_TYPE_PROMPT)
        account_type = AccountType.parse(console.read_line().strip())
        if account_type is not None:
            return account_type


def handle_register(console: Console, service: BankService, session: Session) -> None:
    """Prompt for the registration fields and open a new account."""
    registration = Registration(
        username=console.ask_text("Username: "),
        password=console.ask_secret("Password: "),
        first_name=console.ask_text("Firstname: "),
        last_name=console.ask_text("Lastname: "),
        national_id=console.ask_text("National ID: "),
        date_of_birth=console.ask_text("Date of birth (yy/mm/dd): "),
        account_type=ask_account_type(console),
        interest_rate=console.ask_int("Interest rate: "),
    )
    logger.debug(f"Register requested for {registration.username} ({registration.account_type.value})")

    if service.register(session, registration) is not None:
        console.write(f"Registered and logged in as {session.username}.")


def handle_login(console: Console, service: BankService, session: Session) -> None:
    """Prompt for credentials and log in."""
    username = console.ask_text("Username:")
    password = console.ask_secret("Password:")
    logger.debug(f"Login requested for {username}")

    if service.login(session, username, password) is not None:
        console.write(f"Logged in as {session.username}.")

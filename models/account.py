"""
models/account.py
-----------------
Domain models for account registration.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class AccountType(str, Enum):
    """Kind of account a user registers for."""
    CLIENT = "client"
    EMPLOYEE = "employee"

    @classmethod
    def parse(cls, raw: str) -> Optional["AccountType"]:
        """Return the matching member for an exact literal, or None."""
        try:
            return cls(raw)
        except ValueError:
            return None


@dataclass
class Registration:
    """
    Everything the `register` procedure needs to open an account.

    Attributes:
        username: Login name.
        password: Plain password, checked server-side.
        first_name: Given name.
        last_name: Family name.
        national_id: National identification number.
        date_of_birth: Free-form 'yy/mm/dd' string, not validated.
        account_type: client or employee.
        interest_rate: Interest rate as a whole number.
    """
    username: str
    password: str
    first_name: str
    last_name: str
    national_id: str
    date_of_birth: str
    account_type: AccountType
    interest_rate: int

    def as_args(self) -> tuple:
        """Positional arguments in the order the procedure declares them."""
        return (
            self.username,
            self.password,
            self.first_name,
            self.last_name,
            self.national_id,
            self.date_of_birth,
            self.account_type.value,
            self.interest_rate,
        )

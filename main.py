"""
main.py
-------
Entry point for the KimBank command-line client.

Responsibilities:
    - Open the command connection and select the bank schema.
    - Start the background notification listener.
    - Run the interactive menu until the user quits.
    - Turn fatal database and listener errors into a non-zero exit status.
"""

import signal
import sys
import threading

from config import DB_SCHEMA, NOTIFY_CHANNEL
from db.connection import close_connection, init_connection
from db.errors import DatabaseUnavailableError, ListenerError
from db.listener import NotificationListener
from handlers.menu import run_menu
from models.session import Session
from services.bank_service import BankService
from utils.logger import get_logger
from utils.prompt import Console

logger = get_logger(__name__)


def _interrupt_main(error: ListenerError) -> None:
    """
    Listener failure callback: wake the main thread with SIGINT so a
    blocking stdin read is interrupted and main() can shut down.
    """
    signal.pthread_kill(threading.main_thread().ident, signal.SIGINT)


def main() -> int:
    """Run the client. Returns the process exit status."""

    # ── 1. Database setup ─────────────────────────────────
    logger.info(f"Connecting to the database (schema '{DB_SCHEMA}')...")
    try:
        init_connection()
    except DatabaseUnavailableError as e:
        logger.critical(f"Cannot start: {e}")
        return 1

    # ── 2. Notification listener ──────────────────────────
    listener = NotificationListener(on_failure=_interrupt_main)
    try:
        listener.start()
    except ListenerError as e:
        logger.critical(f"Cannot listen on '{NOTIFY_CHANNEL}': {e}")
        close_connection()
        return 1

    # ── 3. Interactive menu ───────────────────────────────
    status = 0
    try:
        run_menu(Console(), BankService(), Session())
    except KeyboardInterrupt:
        if listener.error is not None:
            logger.critical(f"Shutting down after listener failure: {listener.error}")
            status = 1
        else:
            logger.info("Interrupted.")
    finally:
        # ── 4. Cleanup on shutdown ────────────────────────
        listener.stop(timeout=1.0)
        close_connection()
    logger.info("KimBank client stopped.")
    return status


if __name__ == "__main__":
    sys.exit(main())

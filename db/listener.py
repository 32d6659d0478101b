"""
db/listener.py
--------------
Background listener for PostgreSQL LISTEN/NOTIFY.

Opens its own connection, subscribes to one channel and prints every
notification payload as it arrives. When the connection stays idle for
`ping_interval` seconds a keep-alive ping is sent.

Any transport error is fatal for the listener: it is raised as
ListenerError and handed to the `on_failure` callback, which decides
what happens to the process.
"""

import select
import threading
from typing import Callable, Optional

import psycopg2
from psycopg2 import sql

from config import DATABASE_URL, LISTENER_PING_INTERVAL, NOTIFY_CHANNEL
from db.connection import ping
from db.errors import ListenerError
from utils.logger import get_logger

logger = get_logger(__name__)


def _print_payload(payload: str) -> None:
    print(payload, flush=True)


class NotificationListener:
    """
    Long-lived subscription to a single notification channel.

    Usage:
        listener = NotificationListener(on_failure=handle_fatal)
        listener.start()      # connects, LISTENs, spawns the thread
        ...
        listener.stop()
    """

    def __init__(
        self,
        dsn: str = DATABASE_URL,
        channel: str = NOTIFY_CHANNEL,
        ping_interval: float = LISTENER_PING_INTERVAL,
        on_notify: Callable[[str], None] = _print_payload,
        on_failure: Optional[Callable[[ListenerError], None]] = None,
        connect: Callable = psycopg2.connect,
    ):
        self.dsn = dsn
        self.channel = channel
        self.ping_interval = ping_interval
        self.on_notify = on_notify
        self.on_failure = on_failure
        self._connect = connect
        self._conn = None
        self._thread: Optional[threading.Thread] = None
        self._stopped = threading.Event()
        self.ping_count = 0
        self.error: Optional[ListenerError] = None

    def subscribe(self) -> None:
        """
        Open the listener connection and issue LISTEN.

        Raises:
            ListenerError: If the connection or the LISTEN command fails.
        """
        try:
            conn = self._connect(self.dsn)
            conn.autocommit = True
            with conn.cursor() as cur:
                cur.execute(sql.SQL("LISTEN {}").format(sql.Identifier(self.channel)))
        except psycopg2.Error as e:
            raise ListenerError(f"cannot listen on '{self.channel}': {e}") from e
        self._conn = conn
        logger.info(f"Listening for notifications on channel '{self.channel}'.")

    def start(self) -> None:
        """Subscribe synchronously, then run the wait loop in a daemon thread."""
        self.subscribe()
        self._thread = threading.Thread(
            target=self._run_guarded, name="notification-listener", daemon=True
        )
        self._thread.start()

    def stop(self, timeout: Optional[float] = None) -> None:
        """Ask the loop to exit and close the listener connection."""
        self._stopped.set()
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join(timeout)
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def run_forever(self) -> None:
        """Wait for notifications until stop() is called or an error is raised."""
        while not self._stopped.is_set():
            self.poll_once()

    def poll_once(self) -> None:
        """
        Wait at most `ping_interval` seconds for the connection to become
        readable, pinging on timeout. Then dispatch every pending
        notification, including any that arrived during the ping.

        Raises:
            ListenerError: On any connection error, including a failed ping.
        """
        conn = self._conn
        if conn is None:
            raise ListenerError("listener is not subscribed")
        try:
            readable, _, _ = select.select([conn], [], [], self.ping_interval)
            if readable:
                conn.poll()
            else:
                ping(conn)
                self.ping_count += 1
                logger.debug(f"Listener keep-alive ping #{self.ping_count}")
        except (psycopg2.Error, OSError) as e:
            raise ListenerError(f"listener connection failed: {e}") from e

        while conn.notifies:
            notify = conn.notifies.pop(0)
            logger.info(f"Notification on '{notify.channel}' from pid {notify.pid}")
            self.on_notify(notify.payload)

    def _run_guarded(self) -> None:
        try:
            self.run_forever()
        except ListenerError as e:
            self._fail(e)
        except Exception as e:
            error = ListenerError(f"listener stopped unexpectedly: {e!r}")
            error.__cause__ = e
            self._fail(error)

    def _fail(self, error: ListenerError) -> None:
        if self._stopped.is_set():
            return
        self.error = error
        logger.critical(f"Notification listener failed: {error}")
        if self.on_failure is not None:
            self.on_failure(error)

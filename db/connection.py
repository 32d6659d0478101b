"""
db/connection.py
----------------
Manages the single PostgreSQL connection used for command execution.
The connection runs in autocommit mode: transaction boundaries belong
to the stored procedures, not to the client.
"""

import psycopg2
from psycopg2 import sql

from config import DATABASE_URL, DB_SCHEMA
from db.errors import DatabaseUnavailableError
from utils.logger import get_logger

logger = get_logger(__name__)

_conn = None


def connect(dsn: str = DATABASE_URL):
    """
    Open a new autocommit connection and verify it with a ping.

    Args:
        dsn: libpq connection string or URL.

    Returns:
        A psycopg2 connection object.

    Raises:
        DatabaseUnavailableError: If the server is unreachable or the ping fails.
    """
    try:
        conn = psycopg2.connect(dsn)
        conn.autocommit = True
    except psycopg2.Error as e:
        logger.error(f"Failed to connect to the database: {e}")
        raise DatabaseUnavailableError(f"cannot connect: {e}") from e

    try:
        ping(conn)
    except psycopg2.Error as e:
        conn.close()
        logger.error(f"Database ping failed: {e}")
        raise DatabaseUnavailableError(f"ping failed: {e}") from e
    return conn


def ping(conn) -> None:
    """Run a no-op round trip on the connection."""
    with conn.cursor() as cur:
        cur.execute("SELECT 1;")
        cur.fetchone()


def set_namespace(conn, schema: str) -> None:
    """
    Select the active schema for the rest of the session.

    Raises:
        DatabaseUnavailableError: If the server rejects the command.
    """
    stmt = sql.SQL("SET search_path TO {}").format(sql.Identifier(schema))
    try:
        with conn.cursor() as cur:
            cur.execute(stmt)
    except psycopg2.Error as e:
        logger.error(f"Failed to select schema '{schema}': {e}")
        raise DatabaseUnavailableError(f"cannot select schema {schema!r}: {e}") from e
    logger.info(f"Using schema '{schema}'.")


def init_connection(dsn: str = DATABASE_URL, schema: str = DB_SCHEMA) -> None:
    """
    Open the module-level command connection and select the schema.
    Calling it again while a connection is open is a no-op.
    """
    global _conn
    if _conn is not None:
        return
    conn = connect(dsn)
    try:
        set_namespace(conn, schema)
    except DatabaseUnavailableError:
        conn.close()
        raise
    _conn = conn
    logger.info("Connected to the PostgreSQL database.")


def get_connection():
    """
    Get the command connection.

    Raises:
        RuntimeError: If init_connection() has not been called.
    """
    if _conn is None:
        raise RuntimeError("Database connection not initialized. Call init_connection() first.")
    return _conn


def close_connection() -> None:
    """Close the command connection."""
    global _conn
    if _conn is not None:
        _conn.close()
        _conn = None
        logger.info("Database connection closed.")

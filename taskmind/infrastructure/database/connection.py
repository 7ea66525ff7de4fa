"""Direct database access for task persistence using pyodbc."""

import asyncio
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

from taskmind.config.settings import Settings
from taskmind.utils.retry import is_transient_db_error, run_with_retry

if TYPE_CHECKING:
    import pyodbc

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _connect(settings: Settings) -> "pyodbc.Connection":
    if not settings.database_connection_string:
        raise ValueError("database_connection_string is not configured in settings")
    # Needs the system ODBC driver manager, so loaded on first use
    import pyodbc

    return pyodbc.connect(settings.database_connection_string)


async def _run_in_thread(settings: Settings, work: Callable[[], T]) -> T:
    """Run blocking ODBC work in the thread pool, retrying transient failures."""

    async def _attempt() -> T:
        return await asyncio.to_thread(work)

    return await run_with_retry(
        _attempt,
        max_retries=settings.db_max_retries,
        initial_delay=settings.db_retry_delay,
        backoff_factor=settings.db_retry_backoff,
    )


async def execute_query(
    settings: Settings, sql: str, params: tuple[Any, ...] | None = None
) -> list[dict[str, Any]]:
    """
    Execute a SELECT query and return results as a list of dictionaries.

    Args:
        settings: Application settings containing database_connection_string
        sql: SQL query string (use ? placeholders for parameters)
        params: Optional tuple of parameters for parameterized queries

    Returns:
        One dictionary per row, keyed by column name

    Raises:
        Exception: If database connection or query execution fails
    """

    def _execute() -> list[dict[str, Any]]:
        conn = _connect(settings)
        try:
            cursor = conn.cursor()
            try:
                if params:
                    cursor.execute(sql, params)
                else:
                    cursor.execute(sql)
                columns = [column[0] for column in cursor.description]
                return [dict(zip(columns, row)) for row in cursor.fetchall()]
            finally:
                cursor.close()
        except Exception as e:
            logger.error("Database query error: %s", e)
            raise
        finally:
            conn.close()

    return await _run_in_thread(settings, _execute)


async def execute_insert(
    settings: Settings, sql: str, params: tuple[Any, ...] | None = None
) -> dict[str, Any]:
    """
    Execute an INSERT, UPDATE, or DELETE statement.

    Returns:
        Dictionary with success status and affected row count:
        {
            "success": bool,
            "rows_affected": int,
            "error": str | None
        }

    Raises:
        Exception: If the connection cannot be opened or a transient error
            persists after retries
    """

    def _execute() -> dict[str, Any]:
        conn = _connect(settings)
        try:
            cursor = conn.cursor()
            try:
                if params:
                    cursor.execute(sql, params)
                else:
                    cursor.execute(sql)
                rows_affected = cursor.rowcount
                conn.commit()
            finally:
                cursor.close()
            return {"success": True, "rows_affected": rows_affected, "error": None}
        except Exception as e:
            logger.error("Database insert/update error: %s", e)
            conn.rollback()
            # Transient errors go back to the retry loop
            if is_transient_db_error(e):
                raise
            return {"success": False, "rows_affected": 0, "error": str(e)}
        finally:
            conn.close()

    return await _run_in_thread(settings, _execute)

"""
Retry utilities for transient database errors.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

# SQLSTATE codes worth retrying. Syntax errors, missing tables, constraint
# violations and the like are permanent.
_TRANSIENT_SQLSTATES: frozenset[str] = frozenset({
    "HYT00",  # Timeout expired
    "HYT01",  # Connection timeout expired
    "08S01",  # Communication link failure
    "08001",  # Unable to connect to data source
    "08007",  # Connection failure during transaction
    "40001",  # Deadlock victim
})


def is_transient_db_error(exception: BaseException) -> bool:
    """Check if a pyodbc error carries a transient SQLSTATE."""
    if isinstance(exception, (TimeoutError, asyncio.TimeoutError)):
        return True
    if type(exception).__module__ != "pyodbc":
        return False
    if exception.args and isinstance(exception.args[0], str):
        if exception.args[0].strip() in _TRANSIENT_SQLSTATES:
            return True
    error_str = str(exception)
    return any(code in error_str for code in _TRANSIENT_SQLSTATES)


async def run_with_retry(
    func: Callable[[], Awaitable[T]],
    max_retries: int = 3,
    initial_delay: float = 2.0,
    backoff_factor: float = 2.0,
) -> T:
    """
    Execute an async function, retrying transient database errors.

    Args:
        func: Async function to execute (no parameters)
        max_retries: Maximum number of attempts
        initial_delay: Delay in seconds before the second attempt
        backoff_factor: Multiplier applied to the delay after each attempt

    Returns:
        Result from the function

    Raises:
        Exception: The last error once attempts run out, or any permanent error
    """
    for attempt in range(max_retries):
        try:
            return await func()
        except Exception as e:
            if not is_transient_db_error(e) or attempt >= max_retries - 1:
                raise
            wait_time = initial_delay * (backoff_factor**attempt)
            logger.warning(
                "Transient DB error (%s). Attempt %s/%s. Waiting %.1f seconds before retry...",
                e,
                attempt + 1,
                max_retries,
                wait_time,
            )
            await asyncio.sleep(wait_time)

    raise RuntimeError("run_with_retry called with max_retries < 1")

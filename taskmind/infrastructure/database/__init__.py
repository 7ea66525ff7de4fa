"""Database connection utilities."""

from taskmind.infrastructure.database.connection import execute_insert, execute_query
from taskmind.infrastructure.database.helpers import audit_log, check_db_result

__all__ = [
    "audit_log",
    "check_db_result",
    "execute_insert",
    "execute_query",
]

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import mysql.connector

from ..core.exceptions import InfrastructureError
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as e:
        conn.rollback()
        raise InfrastructureError(f"Database operation failed: {e.msg}") from e
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def limit_clause(amount: Optional[int]) -> str:
    """LIMIT fragment for list queries; None or non-positive means no limit."""
    if amount is None or int(amount) <= 0:
        return ""
    return f" LIMIT {int(amount)}"

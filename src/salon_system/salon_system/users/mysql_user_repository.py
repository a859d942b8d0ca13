from __future__ import annotations

from typing import Optional, Sequence

import mysql.connector
from mysql.connector import errorcode

from ..core.enums import Role
from ..core.exceptions import LoginTakenError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, limit_clause
from .model import User
from .repository import UserRepository

_COLUMNS = "user_id, login, password_hash, name, email, role"


def _write(cur, sql: str, params: tuple, login: str) -> None:
    # users.login is UNIQUE; a concurrent writer may have claimed it after validation.
    try:
        cur.execute(sql, params)
    except mysql.connector.IntegrityError as e:
        if e.errno == errorcode.ER_DUP_ENTRY:
            raise LoginTakenError(f"Login already in use: {login}") from e
        raise


def _to_user(row: dict) -> User:
    return User(
        user_id=int(row["user_id"]),
        login=row["login"],
        password_hash=row["password_hash"],
        name=row.get("name") or "",
        email=row.get("email") or "",
        role=Role(int(row["role"])),
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: int) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE user_id=%s", (int(user_id),))
            row = fetchone(cur)
            return _to_user(row) if row else None

    def get_by_login(self, login: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE login=%s", (login,))
            row = fetchone(cur)
            return _to_user(row) if row else None

    def list_all(self, *, amount: Optional[int] = None) -> Sequence[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users ORDER BY user_id" + limit_clause(amount))
            return [_to_user(r) for r in fetchall(cur)]

    def insert(self, user: User) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            _write(
                cur,
                """
                INSERT INTO users(login, password_hash, name, email, role)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (user.login, user.password_hash, user.name, user.email, int(user.role)),
                user.login,
            )
            return int(cur.lastrowid)

    def update(self, user: User) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            _write(
                cur,
                """
                UPDATE users
                SET login=%s, password_hash=%s, name=%s, email=%s, role=%s
                WHERE user_id=%s
                """,
                (user.login, user.password_hash, user.name, user.email, int(user.role), int(user.user_id)),
                user.login,
            )
            return cur.rowcount > 0

    def delete_by_id(self, user_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM users WHERE user_id=%s", (int(user_id),))
            return cur.rowcount > 0

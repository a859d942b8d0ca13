from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

import mysql.connector
from werkzeug.security import generate_password_hash

from ..core.enums import Role
from .connection import DBConfig

logger = logging.getLogger(__name__)

DEMO_USERS = (
    # login, password, name, email, role
    ("robert", "robert123", "Robert", "robert@salon.local", Role.ADMIN),
    ("tony", "tony1234", "Tony", "tony@salon.local", Role.USER),
)


def _strip_create_db_and_use(sql: str) -> str:
    # schema.sql may carry its own CREATE DATABASE / USE; the configured name wins.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # Splits on ';' outside quotes; enough for our own schema/seed files.
    buf: list[str] = []
    in_single = False
    in_double = False
    escape = False

    for ch in sql:
        if escape:
            buf.append(ch)
            escape = False
            continue

        if ch == "\\":
            buf.append(ch)
            escape = True
            continue

        if ch == "'" and not in_double:
            in_single = not in_single
        elif ch == '"' and not in_single:
            in_double = not in_double
        elif ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt and not _only_comments(stmt):
                yield stmt
            continue

        buf.append(ch)

    tail = "".join(buf).strip()
    if tail and not _only_comments(tail):
        yield tail


def _only_comments(stmt: str) -> bool:
    return all(not line.strip() or line.strip().startswith("--") for line in stmt.splitlines())


def _connect(target: DBConfig, *, with_database: bool = True):
    kwargs = dict(host=target.host, port=target.port, user=target.user, password=target.password, use_pure=True)
    if with_database:
        kwargs["database"] = target.database
    return mysql.connector.connect(**kwargs)


def _run_script(db_config: dict, path: str | Path) -> None:
    target = DBConfig.from_mapping(db_config)
    sql = _strip_create_db_and_use(Path(path).read_text(encoding="utf-8"))

    conn = _connect(target)
    try:
        cur = conn.cursor()
        for stmt in _iter_sql_statements(sql):
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()


def ensure_database_exists(db_config: dict) -> None:
    target = DBConfig.from_mapping(db_config)
    conn = _connect(target, with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    ensure_database_exists(db_config)
    _run_script(db_config, schema_path)
    logger.info("Schema applied from %s", schema_path)


def apply_seed_sql(db_config: dict, *, seed_path: str | Path) -> None:
    _run_script(db_config, seed_path)
    logger.info("Seed applied from %s", seed_path)


def ensure_demo_users(db_config: dict) -> None:
    """Create (or reset) the demo logins so a fresh database can authenticate."""
    target = DBConfig.from_mapping(db_config)
    conn = _connect(target)
    try:
        cur = conn.cursor(dictionary=True)
        for login, password, name, email, role in DEMO_USERS:
            password_hash = generate_password_hash(password)
            cur.execute("SELECT user_id FROM users WHERE login=%s", (login,))
            if cur.fetchone():
                cur.execute(
                    "UPDATE users SET password_hash=%s, name=%s, email=%s, role=%s WHERE login=%s",
                    (password_hash, name, email, int(role), login),
                )
            else:
                cur.execute(
                    "INSERT INTO users (login, password_hash, name, email, role) VALUES (%s, %s, %s, %s, %s)",
                    (login, password_hash, name, email, int(role)),
                )
        conn.commit()
    finally:
        conn.close()


def list_tables(db_config: dict) -> list[str]:
    target = DBConfig.from_mapping(db_config)
    conn = _connect(target)
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()

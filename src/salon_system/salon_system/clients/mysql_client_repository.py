from __future__ import annotations

import json
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, limit_clause
from .model import Client
from .repository import ClientRepository


def _to_client(row: dict) -> Client:
    numbers = json.loads(row.get("contact_numbers") or "[]")
    return Client(
        client_id=int(row["client_id"]),
        name=row["name"],
        email=row.get("email") or "",
        contact_numbers=tuple(str(n) for n in numbers),
    )


class MySQLClientRepository(ClientRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, client_id: int) -> Optional[Client]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT client_id, name, email, contact_numbers FROM clients WHERE client_id=%s",
                (int(client_id),),
            )
            row = fetchone(cur)
            return _to_client(row) if row else None

    def list_all(self, *, amount: Optional[int] = None) -> Sequence[Client]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT client_id, name, email, contact_numbers FROM clients ORDER BY client_id" + limit_clause(amount)
            )
            return [_to_client(r) for r in fetchall(cur)]

    def insert(self, client: Client) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO clients(name, email, contact_numbers) VALUES(%s,%s,%s)",
                (client.name, client.email, json.dumps(list(client.contact_numbers))),
            )
            return int(cur.lastrowid)

    def update(self, client: Client) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE clients SET name=%s, email=%s, contact_numbers=%s WHERE client_id=%s",
                (client.name, client.email, json.dumps(list(client.contact_numbers)), int(client.client_id)),
            )
            return cur.rowcount > 0

    def delete_by_id(self, client_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM clients WHERE client_id=%s", (int(client_id),))
            return cur.rowcount > 0

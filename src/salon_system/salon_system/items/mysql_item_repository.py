from __future__ import annotations

from decimal import Decimal
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Item
from .repository import ItemRepository


def _to_item(row: dict) -> Item:
    return Item(
        item_id=int(row["item_id"]),
        description=row["description"],
        value=Decimal(str(row["value"])),
    )


class MySQLItemRepository(ItemRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, item_id: int) -> Optional[Item]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT item_id, description, value FROM items WHERE item_id=%s", (int(item_id),))
            row = fetchone(cur)
            return _to_item(row) if row else None

    def list_all(self) -> Sequence[Item]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT item_id, description, value FROM items ORDER BY item_id")
            return [_to_item(r) for r in fetchall(cur)]

    def insert(self, item: Item) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("INSERT INTO items(description, value) VALUES(%s,%s)", (item.description, item.value))
            return int(cur.lastrowid)

    def delete_by_id(self, item_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM items WHERE item_id=%s", (int(item_id),))
            return cur.rowcount > 0

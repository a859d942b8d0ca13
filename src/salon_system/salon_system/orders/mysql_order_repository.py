from __future__ import annotations

from collections import defaultdict
from decimal import Decimal
from typing import Optional, Sequence

from ..core.enums import PaymentMethod
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import ItemOrder, ServiceOrder
from .repository import ServiceOrderRepository


class MySQLServiceOrderRepository(ServiceOrderRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _select(self, where: str = "", params: tuple = ()) -> list[ServiceOrder]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT order_id, client_id, order_date, payment_method, obs
                FROM service_orders
                {where}
                ORDER BY order_date DESC, order_id DESC
                """,
                params,
            )
            rows = fetchall(cur)
            if not rows:
                return []

            order_ids = [int(r["order_id"]) for r in rows]
            placeholders = ",".join(["%s"] * len(order_ids))
            cur.execute(
                f"""
                SELECT order_id, item_id, description, value, amount
                FROM service_order_items
                WHERE order_id IN ({placeholders})
                ORDER BY line_id
                """,
                tuple(order_ids),
            )
            lines: dict[int, list[ItemOrder]] = defaultdict(list)
            for r in fetchall(cur):
                lines[int(r["order_id"])].append(
                    ItemOrder(
                        item_id=int(r["item_id"]),
                        description=r["description"],
                        value=Decimal(str(r["value"])),
                        amount=int(r["amount"]),
                    )
                )

            return [
                ServiceOrder(
                    order_id=int(r["order_id"]),
                    client_id=int(r["client_id"]),
                    date=r["order_date"],
                    payment_method=PaymentMethod(int(r["payment_method"])),
                    obs=r.get("obs") or "",
                    items=tuple(lines[int(r["order_id"])]),
                )
                for r in rows
            ]

    def get_by_id(self, order_id: int) -> Optional[ServiceOrder]:
        found = self._select("WHERE order_id=%s", (int(order_id),))
        return found[0] if found else None

    def list_all(self) -> Sequence[ServiceOrder]:
        return self._select()

    def list_by_client(self, client_id: int) -> Sequence[ServiceOrder]:
        return self._select("WHERE client_id=%s", (int(client_id),))

    def insert(self, order: ServiceOrder) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO service_orders(client_id, order_date, payment_method, obs)
                VALUES(%s,%s,%s,%s)
                """,
                (int(order.client_id), order.date, int(order.payment_method), order.obs or None),
            )
            order_id = int(cur.lastrowid)
            for line in order.items:
                cur.execute(
                    """
                    INSERT INTO service_order_items(order_id, item_id, description, value, amount)
                    VALUES(%s,%s,%s,%s,%s)
                    """,
                    (order_id, int(line.item_id), line.description, line.value, int(line.amount)),
                )
            return order_id

    def delete_by_id(self, order_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            # service_order_items rows go with the order (ON DELETE CASCADE).
            cur.execute("DELETE FROM service_orders WHERE order_id=%s", (int(order_id),))
            return cur.rowcount > 0

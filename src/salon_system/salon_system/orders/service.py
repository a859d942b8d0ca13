from __future__ import annotations

import logging

from ..clients.repository import ClientRepository
from ..common.validators import parse_id
from ..core.result import Result
from ..items.model import Item
from ..items.repository import ItemRepository
from .model import ItemOrder, ItemOrderResponse, OrderResponse, ServiceOrder, ServiceOrderCommand
from .repository import ServiceOrderRepository
from .validators import ServiceOrderCommandValidator

logger = logging.getLogger(__name__)

ORDER_INVALID = "Order Invalid"


def to_response(order: ServiceOrder) -> OrderResponse:
    return OrderResponse(
        id=str(order.order_id),
        client_id=str(order.client_id),
        date=order.date,
        payment_method=order.payment_method,
        obs=order.obs,
        items=[
            ItemOrderResponse(id=str(i.item_id), description=i.description, value=i.value, amount=i.amount)
            for i in order.items
        ],
        total=order.total,
    )


class OrderService:
    def __init__(self, orders: ServiceOrderRepository, clients: ClientRepository, items: ItemRepository):
        self._orders = orders
        self._clients = clients
        self._items = items

    def create_order(self, command: ServiceOrderCommand) -> Result:
        catalog = self._lookup_items(command)
        validation = ServiceOrderCommandValidator(self._clients, catalog).validate(command)
        if not validation.is_valid:
            return Result.from_validation(validation)

        lines = []
        for dto in command.items:
            item = catalog[parse_id(dto.id)]
            lines.append(ItemOrder(item_id=item.item_id, description=item.description, value=item.value, amount=int(dto.amount)))

        order = ServiceOrder(
            order_id=None,
            client_id=parse_id(command.client_id),
            date=command.date,
            payment_method=command.payment_method,
            obs=(command.obs or "").strip(),
            items=tuple(lines),
        )
        order_id = self._orders.insert(order)
        logger.info("Order created: order_id=%s client_id=%s", order_id, order.client_id)
        return Result.created(to_response(order.with_id(order_id)))

    def get_all_orders(self) -> Result:
        return Result.ok([to_response(o) for o in self._orders.list_all()])

    def get_order_by_id(self, order_id) -> Result:
        oid = parse_id(order_id)
        order = self._orders.get_by_id(oid) if oid is not None else None
        if not order:
            return Result.fail(ORDER_INVALID)
        return Result.ok(to_response(order))

    def get_orders_by_client_id(self, client_id) -> Result:
        cid = parse_id(client_id)
        orders = self._orders.list_by_client(cid) if cid is not None else []
        return Result.ok([to_response(o) for o in orders])

    def delete_order(self, order_id) -> Result:
        oid = parse_id(order_id)
        if oid is None or not self._orders.delete_by_id(oid):
            return Result.fail(ORDER_INVALID)
        logger.info("Order deleted: order_id=%s", oid)
        return Result.ok()

    def _lookup_items(self, command: ServiceOrderCommand) -> dict[int, Item]:
        """One store read per distinct item id; the order lines reuse these entities."""
        catalog: dict[int, Item] = {}
        for dto in command.items:
            iid = parse_id(dto.id)
            if iid is None or iid in catalog:
                continue
            item = self._items.get_by_id(iid)
            if item is not None:
                catalog[iid] = item
        return catalog

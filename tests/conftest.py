from __future__ import annotations

from decimal import Decimal
from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

from src.salon_system.salon_system.clients.model import Client
from src.salon_system.salon_system.core.enums import Role
from src.salon_system.salon_system.items.model import Item
from src.salon_system.salon_system.orders.model import ServiceOrder
from src.salon_system.salon_system.users.model import User
from src.salon_system.salon_system.users.passwords import PasswordVerifier
from src.salon_system.salon_system.users.tokens import JwtSettings, TokenIssuer

TEST_SECRET = "test-jwt-secret-that-is-long-enough-for-hs256"

ROBERT_ID = 1
LOGIN_ROBERT = "robert"
PASSWORD_ROBERT = "robert123"

TONY_ID = 2
LOGIN_TONY = "tony"
PASSWORD_TONY = "tony1234"


def _hash(password: str) -> str:
    # Low iteration count keeps the suite fast.
    return generate_password_hash(password, method="pbkdf2:sha256:1000")


class InMemoryUsers:
    def __init__(self, users=()):
        self._by_id: dict[int, User] = {u.user_id: u for u in users}
        self._next_id = max(self._by_id, default=0) + 1

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._by_id.get(user_id)

    def get_by_login(self, login: str) -> Optional[User]:
        return next((u for u in self._by_id.values() if u.login == login), None)

    def list_all(self, *, amount=None):
        users = sorted(self._by_id.values(), key=lambda u: u.user_id)
        return users[:amount] if amount and amount > 0 else users

    def insert(self, user: User) -> int:
        uid = self._next_id
        self._next_id += 1
        self._by_id[uid] = user.with_id(uid)
        return uid

    def update(self, user: User) -> bool:
        if user.user_id not in self._by_id:
            return False
        self._by_id[user.user_id] = user
        return True

    def delete_by_id(self, user_id: int) -> bool:
        return self._by_id.pop(user_id, None) is not None


class InMemoryClients:
    def __init__(self, clients=()):
        self._by_id: dict[int, Client] = {c.client_id: c for c in clients}
        self._next_id = max(self._by_id, default=0) + 1

    def get_by_id(self, client_id: int) -> Optional[Client]:
        return self._by_id.get(client_id)

    def list_all(self, *, amount=None):
        clients = sorted(self._by_id.values(), key=lambda c: c.client_id)
        return clients[:amount] if amount and amount > 0 else clients

    def insert(self, client: Client) -> int:
        cid = self._next_id
        self._next_id += 1
        self._by_id[cid] = client.with_id(cid)
        return cid

    def update(self, client: Client) -> bool:
        if client.client_id not in self._by_id:
            return False
        self._by_id[client.client_id] = client
        return True

    def delete_by_id(self, client_id: int) -> bool:
        return self._by_id.pop(client_id, None) is not None


class InMemoryItems:
    def __init__(self, items=()):
        self._by_id: dict[int, Item] = {i.item_id: i for i in items}
        self._next_id = max(self._by_id, default=0) + 1

    def get_by_id(self, item_id: int) -> Optional[Item]:
        return self._by_id.get(item_id)

    def list_all(self):
        return sorted(self._by_id.values(), key=lambda i: i.item_id)

    def insert(self, item: Item) -> int:
        iid = self._next_id
        self._next_id += 1
        self._by_id[iid] = item.with_id(iid)
        return iid

    def delete_by_id(self, item_id: int) -> bool:
        return self._by_id.pop(item_id, None) is not None


class InMemoryOrders:
    def __init__(self):
        self._by_id: dict[int, ServiceOrder] = {}
        self._next_id = 1

    def get_by_id(self, order_id: int) -> Optional[ServiceOrder]:
        return self._by_id.get(order_id)

    def list_all(self):
        return list(self._by_id.values())

    def list_by_client(self, client_id: int):
        return [o for o in self._by_id.values() if o.client_id == client_id]

    def insert(self, order: ServiceOrder) -> int:
        oid = self._next_id
        self._next_id += 1
        self._by_id[oid] = order.with_id(oid)
        return oid

    def delete_by_id(self, order_id: int) -> bool:
        return self._by_id.pop(order_id, None) is not None


@pytest.fixture
def robert() -> User:
    return User(
        user_id=ROBERT_ID,
        login=LOGIN_ROBERT,
        password_hash=_hash(PASSWORD_ROBERT),
        name="Robert",
        email="robert@salon.local",
        role=Role.ADMIN,
    )


@pytest.fixture
def tony() -> User:
    return User(
        user_id=TONY_ID,
        login=LOGIN_TONY,
        password_hash=_hash(PASSWORD_TONY),
        name="Tony",
        email="tony@salon.local",
        role=Role.USER,
    )


@pytest.fixture
def users_repo(robert, tony) -> InMemoryUsers:
    return InMemoryUsers([robert, tony])


@pytest.fixture
def passwords() -> PasswordVerifier:
    return PasswordVerifier()


@pytest.fixture
def jwt_settings() -> JwtSettings:
    return JwtSettings(secret=TEST_SECRET)


@pytest.fixture
def token_issuer(jwt_settings) -> TokenIssuer:
    return TokenIssuer(jwt_settings)


@pytest.fixture
def clients_repo() -> InMemoryClients:
    return InMemoryClients(
        [Client(client_id=1, name="Maria Silva", email="maria@example.com", contact_numbers=("11999990000",))]
    )


@pytest.fixture
def items_repo() -> InMemoryItems:
    return InMemoryItems(
        [
            Item(item_id=1, description="Haircut", value=Decimal("35.00")),
            Item(item_id=2, description="Beard trim", value=Decimal("20.00")),
        ]
    )


@pytest.fixture
def orders_repo() -> InMemoryOrders:
    return InMemoryOrders()

from __future__ import annotations

from dataclasses import dataclass

from .clients.mysql_client_repository import MySQLClientRepository
from .clients.service import ClientService
from .database.connection import DBConfig, DatabaseConnection
from .items.mysql_item_repository import MySQLItemRepository
from .items.service import ItemService
from .orders.mysql_order_repository import MySQLServiceOrderRepository
from .orders.service import OrderService
from .users.mysql_user_repository import MySQLUserRepository
from .users.passwords import PasswordVerifier
from .users.service import AuthService, UserService
from .users.tokens import JwtSettings, TokenIssuer


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    users_repo: MySQLUserRepository
    clients_repo: MySQLClientRepository
    items_repo: MySQLItemRepository
    orders_repo: MySQLServiceOrderRepository

    password_verifier: PasswordVerifier
    token_issuer: TokenIssuer

    auth_service: AuthService
    user_service: UserService
    client_service: ClientService
    item_service: ItemService
    order_service: OrderService


def build_container(*, db_config: dict, jwt_settings: JwtSettings) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    users_repo = MySQLUserRepository(conn)
    clients_repo = MySQLClientRepository(conn)
    items_repo = MySQLItemRepository(conn)
    orders_repo = MySQLServiceOrderRepository(conn)

    password_verifier = PasswordVerifier()
    token_issuer = TokenIssuer(jwt_settings)

    return Container(
        conn=conn,
        users_repo=users_repo,
        clients_repo=clients_repo,
        items_repo=items_repo,
        orders_repo=orders_repo,
        password_verifier=password_verifier,
        token_issuer=token_issuer,
        auth_service=AuthService(users_repo, password_verifier, token_issuer),
        user_service=UserService(users_repo, password_verifier),
        client_service=ClientService(clients_repo),
        item_service=ItemService(items_repo),
        order_service=OrderService(orders_repo, clients_repo, items_repo),
    )

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import mysql.connector

from ..core.exceptions import InfrastructureError


@dataclass
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str

    @classmethod
    def from_mapping(cls, db_config: dict) -> "DBConfig":
        return cls(
            host=str(db_config.get("host", "localhost")),
            port=int(db_config.get("port", 3306)),
            user=str(db_config.get("user", "root")),
            password=str(db_config.get("password", "")),
            database=str(db_config.get("database", "salon_db")),
        )


class DatabaseConnection:
    """Singleton-like DB connection factory.

    Note: We create short-lived connections per operation (safe for simple Flask apps).
    """

    _instance: Optional["DatabaseConnection"] = None

    def __init__(self, config: DBConfig):
        self._config = config

    @classmethod
    def get_instance(cls, config: DBConfig) -> "DatabaseConnection":
        if cls._instance is None:
            cls._instance = DatabaseConnection(config)
        return cls._instance

    def connect(self):
        try:
            return mysql.connector.connect(
                host=self._config.host,
                port=int(self._config.port),
                user=self._config.user,
                password=self._config.password,
                database=self._config.database,
            )
        except mysql.connector.Error as e:
            raise InfrastructureError(
                f"Cannot connect to {self._config.host}:{self._config.port}/{self._config.database}"
            ) from e

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Optional

from mysql.connector import pooling

from ..core.constants import DEFAULT_DB_POOL_SIZE


@dataclass
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str

    @classmethod
    def from_dict(cls, db_config: dict) -> "DBConfig":
        return cls(
            host=str(db_config.get("host", "localhost")),
            port=int(db_config.get("port", 3306)),
            user=str(db_config.get("user", "root")),
            password=str(db_config.get("password", "")),
            database=str(db_config.get("database", "hr_records")),
        )


class DatabaseConnection:
    """Pooled DB connection factory.

    The pool is opened on first use so the app can start before MySQL is up.
    Closing a pooled connection returns it to the pool.
    """

    def __init__(self, config: DBConfig, *, pool_size: int = DEFAULT_DB_POOL_SIZE, pool_name: str = "hr_records"):
        self._config = config
        self._pool_size = int(pool_size)
        self._pool_name = pool_name
        self._pool: Optional[pooling.MySQLConnectionPool] = None
        self._pool_lock = threading.Lock()

    def connect(self):
        if self._pool is None:
            with self._pool_lock:
                if self._pool is None:
                    self._pool = pooling.MySQLConnectionPool(
                        pool_name=self._pool_name,
                        pool_size=self._pool_size,
                        host=self._config.host,
                        port=int(self._config.port),
                        user=self._config.user,
                        password=self._config.password,
                        database=self._config.database,
                    )
        return self._pool.get_connection()

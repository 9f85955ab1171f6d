from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

import pandas as pd
import vertica_python
from vertica_python.errors import ConnectionError as VerticaConnectionError

from config import AppConfig


logger = logging.getLogger(__name__)


class VerticaConfigError(RuntimeError):
    pass


@dataclass
class SqlClient:
    """
    One Vertica connection, opened on first use and reused for every call.

    Calls are serialized with a lock: the dashboard shares one client across
    Streamlit session threads and a vertica-python connection is not
    thread-safe. A connection the server has closed is replaced on next use.

    Statements use positional `%s` placeholders with a tuple of values.
    """

    cfg: AppConfig
    _conn: Optional[Any] = field(default=None, init=False, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False, compare=False)

    def _conn_info(self) -> dict[str, Any]:
        if not self.cfg.vertica_database or not self.cfg.vertica_username:
            raise VerticaConfigError(
                "Missing VERTICA_DATABASE / VERTICA_USERNAME for Vertica authentication. "
                "Set them in the environment or in .env, or use mock data."
            )
        return {
            "host": self.cfg.vertica_host,
            "port": self.cfg.vertica_port,
            "database": self.cfg.vertica_database,
            "user": self.cfg.vertica_username,
            "password": self.cfg.vertica_password or "",
            "autocommit": False,
        }

    @property
    def connection(self):
        if self._conn is not None and self._conn.closed():
            logger.warning("Vertica connection was closed, reconnecting")
            self._conn = None
        if self._conn is None:
            info = self._conn_info()
            self._conn = vertica_python.connect(**info)
            logger.info("Connected to Vertica %s:%s/%s", info["host"], info["port"], info["database"])
        return self._conn

    def _drop_broken(self, e: Exception) -> None:
        # The socket is gone; the next call opens a fresh connection
        logger.warning("Dropping broken Vertica connection: %s", e)
        self._conn = None

    def query(self, query: str, params: Optional[Sequence[Any]] = None) -> pd.DataFrame:
        """Returns a pandas.DataFrame from Vertica."""
        logger.debug("query: %s params=%s", " ".join(query.split()), params)
        with self._lock:
            try:
                with self.connection.cursor() as cur:
                    cur.execute(query, tuple(params or ()))
                    rows = cur.fetchall()
                    cols = [d[0] for d in (cur.description or [])]
            except VerticaConnectionError as e:
                self._drop_broken(e)
                raise
        return pd.DataFrame(rows, columns=cols)

    def execute(self, statement: str, params: Optional[Sequence[Any]] = None) -> int:
        """
        Runs a DML/DDL statement in its own transaction and returns the affected-row count.

        Vertica answers DML with a one-row result set holding the count.
        """
        logger.debug("execute: %s params=%s", " ".join(statement.split()), params)
        with self._lock:
            conn = self.connection
            try:
                with conn.cursor() as cur:
                    cur.execute(statement, tuple(params or ()))
                    row = cur.fetchone() if cur.description else None
                    count = int(row[0]) if row else max(cur.rowcount, 0)
                conn.commit()
            except VerticaConnectionError as e:
                self._drop_broken(e)
                raise
            except Exception:
                conn.rollback()
                raise
        return count

    def close(self) -> None:
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None
                logger.info("Vertica connection closed")


def get_sql_client(cfg: AppConfig) -> SqlClient:
    return SqlClient(cfg=cfg)

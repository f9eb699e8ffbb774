"""SHUNT FILE PURPOSE
Purpose: persisted shunt status (typed boolean variables behind a swappable key/value store).
Hot path: yes (every status query reads one variable).
Feature flags: none.
Failure mode: absent variable reads as disabled; sqlite errors propagate to the caller.
"""

from __future__ import annotations

import sqlite3
import time
from pathlib import Path
from typing import Protocol

from shunt.config import db_path as _configured_db_path

VARIABLE_PREFIX = "shunt_"


class VariableStore(Protocol):
    def get(self, key: str, default: bool = False) -> bool: ...

    def set(self, key: str, value: bool) -> None: ...


class MemoryVariableStore:
    def __init__(self, initial: dict[str, bool] | None = None) -> None:
        self._values: dict[str, bool] = dict(initial or {})

    def get(self, key: str, default: bool = False) -> bool:
        return self._values.get(key, default)

    def set(self, key: str, value: bool) -> None:
        self._values[key] = bool(value)

    def snapshot(self) -> dict[str, bool]:
        return dict(self._values)


def init_schema(conn: sqlite3.Connection) -> None:
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS variables (
            name TEXT PRIMARY KEY,
            value INTEGER NOT NULL,
            updated_ts INTEGER NOT NULL
        )
        """
    )
    conn.commit()


def get_conn(db_path: str) -> sqlite3.Connection:
    in_memory = db_path == ":memory:"
    if not in_memory:
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    # the shared in-memory connection may be used from the ASGI worker thread
    conn = sqlite3.connect(db_path, check_same_thread=not in_memory)
    conn.row_factory = sqlite3.Row
    init_schema(conn)
    return conn


class SqliteVariableStore:
    """Boolean variables in a single sqlite table.

    File-backed stores open a connection per call. An in-memory database only
    lives as long as its connection, so ``":memory:"`` keeps one open.
    """

    def __init__(self, db_path: str | None = None) -> None:
        self.db_path = db_path or _configured_db_path()
        self._shared: sqlite3.Connection | None = None
        if self.db_path == ":memory:":
            self._shared = get_conn(self.db_path)

    def _conn(self) -> sqlite3.Connection:
        if self._shared is not None:
            return self._shared
        return get_conn(self.db_path)

    def _release(self, conn: sqlite3.Connection) -> None:
        if conn is not self._shared:
            conn.close()

    def get(self, key: str, default: bool = False) -> bool:
        conn = self._conn()
        try:
            row = conn.execute("SELECT value FROM variables WHERE name = ?", (key,)).fetchone()
        finally:
            self._release(conn)
        if row is None:
            return default
        return bool(row["value"])

    def set(self, key: str, value: bool) -> None:
        conn = self._conn()
        try:
            with conn:
                conn.execute(
                    """
                    INSERT INTO variables(name, value, updated_ts) VALUES (?, ?, ?)
                    ON CONFLICT(name) DO UPDATE SET value = excluded.value, updated_ts = excluded.updated_ts
                    """,
                    (key, 1 if value else 0, int(time.time())),
                )
        finally:
            self._release(conn)

    def close(self) -> None:
        if self._shared is not None:
            self._shared.close()
            self._shared = None


class StatusStore:
    def __init__(self, variables: VariableStore, prefix: str = VARIABLE_PREFIX) -> None:
        self.variables = variables
        self.prefix = prefix

    def namespaced_key(self, name: str) -> str:
        if not isinstance(name, str) or not name:
            raise ValueError("shunt name is required")
        return f"{self.prefix}{name}"

    def read(self, name: str) -> bool:
        return bool(self.variables.get(self.namespaced_key(name), False))

    def write(self, name: str, value: bool) -> None:
        self.variables.set(self.namespaced_key(name), bool(value))

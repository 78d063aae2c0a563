from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Sequence

from .connection import DatabaseConnection

Params = Sequence[Any]


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True) -> Iterator[tuple]:
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


@dataclass(frozen=True)
class RunResult:
    lastrowid: Optional[int]
    rowcount: int


class StorageAdapter:
    """Parameterized query primitives over a :class:`DatabaseConnection`.

    Repositories only ever need three things: one row, all rows, or "run this
    statement". Each call is its own short transaction.
    """

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, query: str, params: Params = ()) -> Optional[Dict[str, Any]]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(query, tuple(params))
            return fetchone(cur)

    def all(self, query: str, params: Params = ()) -> List[Dict[str, Any]]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(query, tuple(params))
            return fetchall(cur)

    def run(self, query: str, params: Params = ()) -> RunResult:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(query, tuple(params))
            lastrowid = int(cur.lastrowid) if cur.lastrowid else None
            return RunResult(lastrowid=lastrowid, rowcount=int(cur.rowcount or 0))

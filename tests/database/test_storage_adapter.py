import pytest

from src.personnel_system.personnel_system.database.connection import DatabaseConnection, DBConfig
from src.personnel_system.personnel_system.database.mysql_base import RunResult, StorageAdapter


class FakeCursor:
    def __init__(self, conn):
        self._conn = conn
        self.lastrowid = None
        self.rowcount = 0
        self.closed = False

    def execute(self, query, params):
        if self._conn.fail:
            raise RuntimeError("boom")
        self._conn.executed.append((query, params))
        self.lastrowid = 42
        self.rowcount = 1

    def fetchone(self):
        return self._conn.rows[0] if self._conn.rows else None

    def fetchall(self):
        return self._conn.rows

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self, rows=None, fail=False):
        self.rows = rows or []
        self.fail = fail
        self.executed = []
        self.commits = 0
        self.rollbacks = 0
        self.closed = False
        self.cursor_kwargs = None

    def cursor(self, **kwargs):
        self.cursor_kwargs = kwargs
        return FakeCursor(self)

    def commit(self):
        self.commits += 1

    def rollback(self):
        self.rollbacks += 1

    def close(self):
        self.closed = True


class FakeDatabase(DatabaseConnection):
    def __init__(self, conn):
        super().__init__(DBConfig.from_mapping({}))
        self.conn = conn

    def connect(self, *, with_database: bool = True):
        return self.conn


def test_get_returns_first_row_or_none():
    conn = FakeConnection(rows=[{"id": 1}])
    assert StorageAdapter(FakeDatabase(conn)).get("SELECT 1 WHERE id=%s", [1]) == {"id": 1}
    assert conn.executed == [("SELECT 1 WHERE id=%s", (1,))]
    assert conn.cursor_kwargs == {"dictionary": True}

    assert StorageAdapter(FakeDatabase(FakeConnection())).get("SELECT 1") is None


def test_all_returns_list():
    conn = FakeConnection(rows=[{"id": 1}, {"id": 2}])
    assert StorageAdapter(FakeDatabase(conn)).all("SELECT id") == [{"id": 1}, {"id": 2}]


def test_run_commits_and_reports_result():
    conn = FakeConnection()
    result = StorageAdapter(FakeDatabase(conn)).run("DELETE FROM t WHERE id=%s", (3,))

    assert result == RunResult(lastrowid=42, rowcount=1)
    assert conn.commits == 1
    assert conn.rollbacks == 0
    assert conn.closed


def test_failure_rolls_back_and_closes():
    conn = FakeConnection(fail=True)

    with pytest.raises(RuntimeError):
        StorageAdapter(FakeDatabase(conn)).run("UPDATE t SET x=1")

    assert conn.commits == 0
    assert conn.rollbacks == 1
    assert conn.closed


def test_db_config_from_mapping_defaults():
    config = DBConfig.from_mapping({"port": "3307"})
    assert config.port == 3307
    assert config.host == "localhost"
    assert config.database == "personnel_db"

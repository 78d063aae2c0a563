from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterator, List, Mapping, Union

from .connection import DatabaseConnection, DBConfig

logger = logging.getLogger(__name__)

_CREATE_DB_RE = re.compile(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$")
_USE_DB_RE = re.compile(r"(?im)^\s*USE\b.*?;\s*$")


def _strip_database_directives(sql: str) -> str:
    # The target database comes from DB_CONFIG, not from the SQL file.
    sql = _CREATE_DB_RE.sub("", sql)
    return _USE_DB_RE.sub("", sql)


def split_sql_statements(sql: str) -> Iterator[str]:
    """Yield the statements of a SQL script one by one.

    Semicolons inside quoted strings and ``--`` line comments are ignored.
    """
    statement: List[str] = []
    quote = None
    i = 0
    n = len(sql)
    while i < n:
        ch = sql[i]
        if quote:
            statement.append(ch)
            if ch == "\\" and i + 1 < n:
                statement.append(sql[i + 1])
                i += 2
                continue
            if ch == quote:
                quote = None
        elif ch in ("'", '"', "`"):
            quote = ch
            statement.append(ch)
        elif ch == "-" and sql.startswith("--", i):
            newline = sql.find("\n", i)
            i = n if newline == -1 else newline
            continue
        elif ch == ";":
            text = "".join(statement).strip()
            statement = []
            if text:
                yield text
        else:
            statement.append(ch)
        i += 1

    text = "".join(statement).strip()
    if text:
        yield text


def _factory(db_config: Union[Mapping, DatabaseConnection]) -> DatabaseConnection:
    if isinstance(db_config, DatabaseConnection):
        return db_config
    return DatabaseConnection(DBConfig.from_mapping(db_config))


def _execute_script(conn_factory: DatabaseConnection, sql: str) -> int:
    conn = conn_factory.connect()
    count = 0
    try:
        cur = conn.cursor()
        for statement in split_sql_statements(_strip_database_directives(sql)):
            cur.execute(statement)
            count += 1
        conn.commit()
    finally:
        conn.close()
    return count


def ensure_database_exists(db_config: Union[Mapping, DatabaseConnection]) -> None:
    conn_factory = _factory(db_config)
    name = conn_factory.config.database
    conn = conn_factory.connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(f"CREATE DATABASE IF NOT EXISTS `{name}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci")
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: Union[Mapping, DatabaseConnection], *, schema_path: Union[str, Path]) -> None:
    conn_factory = _factory(db_config)
    ensure_database_exists(conn_factory)
    count = _execute_script(conn_factory, Path(schema_path).read_text(encoding="utf-8"))
    logger.info("Applied %s (%d statements)", schema_path, count)


def apply_seed_sql(db_config: Union[Mapping, DatabaseConnection], *, seed_path: Union[str, Path]) -> None:
    conn_factory = _factory(db_config)
    count = _execute_script(conn_factory, Path(seed_path).read_text(encoding="utf-8"))
    logger.info("Applied %s (%d statements)", seed_path, count)


def list_tables(db_config: Union[Mapping, DatabaseConnection]) -> List[str]:
    conn = _factory(db_config).connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()

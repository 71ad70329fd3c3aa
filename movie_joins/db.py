from __future__ import annotations

# movie_joins/db.py
import logging
import sqlite3
from contextlib import contextmanager
from typing import Any, Iterator, List, Mapping, Optional, Sequence, Union
import os
from pathlib import Path
import yaml

from .logs import QueryLogContext

logger = logging.getLogger(__name__)

# DB path resolution order:
# 1) env MOVIE_DB_PATH (highest priority)
# 2) config.yaml test_db_path (when running under tests)
# 3) config.yaml db_path
# 4) fallback: movies.db at the project root
_PROJECT_ROOT = os.path.dirname(os.path.dirname(__file__))
_ROOT_DB = os.path.join(_PROJECT_ROOT, "movies.db")

Params = Union[Sequence[Any], Mapping[str, Any]]


class StoreError(RuntimeError):
    """Raised when the store is unavailable or rejects a query."""

    def __init__(self, message: str, sql: Optional[str] = None):
        super().__init__(message)
        self.sql = sql


def _read_config_yaml() -> dict:
    cfg_path = os.path.join(_PROJECT_ROOT, "config.yaml")
    if not os.path.exists(cfg_path):
        return {}
    try:
        with open(cfg_path, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning("ignoring unreadable config %s: %s", cfg_path, e)
        return {}
    if not isinstance(cfg, dict):
        return {}
    out = {}
    for k in ("db_path", "test_db_path"):
        v = cfg.get(k)
        if isinstance(v, str) and v.strip():
            out[k] = v.strip()
    return out


def _from_root(p: str) -> str:
    return p if os.path.isabs(p) else os.path.join(_PROJECT_ROOT, p)


def get_db_path() -> str:
    env_path = os.environ.get("MOVIE_DB_PATH")
    cfg = _read_config_yaml()
    cfg_db = cfg.get("db_path")
    cfg_test = cfg.get("test_db_path")
    is_test = (os.environ.get("APP_ENV") == "test") or (os.environ.get("PYTEST_CURRENT_TEST") is not None)

    if env_path:
        return env_path
    # config paths are relative to the project root, like the fallback
    if is_test and cfg_test:
        return _from_root(cfg_test)
    if cfg_db:
        return _from_root(cfg_db)
    return _ROOT_DB


def _ro_uri(path: str) -> str:
    # as_uri() percent-encodes '#' and '?' so mode=ro cannot be cut off
    return Path(path).resolve().as_uri() + "?mode=ro"


@contextmanager
def get_conn(db_path: str | None = None) -> Iterator[sqlite3.Connection]:
    """
    Open a read-only SQLite connection. An explicit db_path wins over get_db_path().
    Foreign keys on, row_factory set to Row, autocommit.
    """
    path = db_path or get_db_path()
    try:
        conn = sqlite3.connect(
            _ro_uri(path),
            uri=True,
            check_same_thread=False,
            isolation_level=None,
        )
    except sqlite3.Error as e:
        raise StoreError(f"cannot open store {path}: {e}") from e
    try:
        conn.execute("PRAGMA foreign_keys = ON;")
        conn.row_factory = sqlite3.Row
        yield conn
    finally:
        conn.close()


class ResultRows(list):
    """Row dicts plus the result's column names, kept even when no rows come back."""

    def __init__(self, rows=(), columns: Sequence[str] = ()):
        super().__init__(rows)
        # duplicate names collapse to one key per row dict, so do the same here
        self.columns: List[str] = list(dict.fromkeys(columns))


def execute(
    sql: str,
    params: Params = (),
    *,
    action: str | None = None,
    db_path: str | None = None,
) -> ResultRows:
    """
    Run one statement and return its rows as dicts, in the order the store
    produced them. Any sqlite3 error surfaces as StoreError.
    """
    log = QueryLogContext(action or "QUERY")
    log.set_payload(params)
    try:
        with get_conn(db_path) as conn:
            cur = conn.execute(sql, params)
            rows = cur.fetchall()
            columns = [d[0] for d in cur.description or ()]
    except StoreError as e:
        e.sql = sql
        log.write("ERROR", str(e))
        raise
    except sqlite3.Error as e:
        log.write("ERROR", str(e))
        raise StoreError(str(e), sql) from e
    out = ResultRows((dict(r) for r in rows), columns)
    log.set_row_count(len(out))
    log.write("OK")
    return out

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Iterable, List, Optional, Tuple

import mysql.connector
from mysql.connector import errorcode

from ..common.patch import Patch
from ..core.exceptions import ValidationError
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
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


def set_clause(patch: Patch, allowed: Iterable[str]) -> Tuple[str, List[Any]]:
    """Build ``col=%s, ...`` for an UPDATE from whitelisted patch columns."""
    cols: List[str] = []
    params: List[Any] = []
    for name, value in patch.only(allowed).items():
        cols.append(f"{name}=%s")
        params.append(value)
    return ", ".join(cols), params


def insert_clause(values: Dict[str, Any]) -> Tuple[str, str, List[Any]]:
    """Column list, placeholder list and params for an INSERT."""
    cols = list(values)
    return ", ".join(cols), ",".join(["%s"] * len(cols)), [values[c] for c in cols]


@contextmanager
def unique_violation(message: str):
    """Translate duplicate-key errors from MySQL into ValidationError.

    Other integrity failures (NOT NULL, bad data) propagate unchanged.
    """
    try:
        yield
    except mysql.connector.IntegrityError as e:
        if e.errno != errorcode.ER_DUP_ENTRY:
            raise
        raise ValidationError(message) from e


def prefixed(row: Dict[str, Any], prefix: str) -> Dict[str, Any]:
    """Pick ``<prefix>col`` keys out of a joined row, stripping the prefix."""
    return {k[len(prefix):]: v for k, v in row.items() if k.startswith(prefix)}

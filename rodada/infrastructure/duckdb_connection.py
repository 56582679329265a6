# rodada/infrastructure/duckdb_connection.py
from __future__ import annotations

from pathlib import Path

import duckdb

from .config import get_settings

SCHEMA_PATH = Path(__file__).parent / "schema.sql"

_connection: duckdb.DuckDBPyConnection | None = None


def get_connection() -> duckdb.DuckDBPyConnection:
    global _connection  # noqa: PLW0603
    if _connection is None:
        _connection = inicializar_schema(duckdb.connect(get_settings().duckdb_path))
    return _connection


def set_connection(conn: duckdb.DuckDBPyConnection) -> None:
    """Usado em testes para injetar DuckDB in-memory."""
    global _connection  # noqa: PLW0603
    _connection = conn


def inicializar_schema(conn: duckdb.DuckDBPyConnection) -> duckdb.DuckDBPyConnection:
    conn.execute(SCHEMA_PATH.read_text(encoding="utf-8"))
    return conn

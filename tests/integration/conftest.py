from __future__ import annotations

import os
from collections.abc import Generator

import duckdb
import pytest
from fastapi.testclient import TestClient

# Desabilitar rate limit e fixar segredos em testes
os.environ["API_RATE_LIMIT_PER_MINUTE"] = "0"
os.environ["ADMIN_API_KEY"] = "chave-admin-teste"
os.environ["CREDENCIAL_HMAC_SALT"] = "salt-teste"


@pytest.fixture()
def test_db() -> Generator[duckdb.DuckDBPyConnection, None, None]:
    """DuckDB in-memory com schema vazio, novo a cada teste."""
    from rodada.infrastructure.duckdb_connection import inicializar_schema

    conn = inicializar_schema(duckdb.connect(":memory:"))
    yield conn
    conn.close()


@pytest.fixture()
def client(test_db: duckdb.DuckDBPyConnection) -> Generator[TestClient, None, None]:
    """TestClient do FastAPI com DuckDB in-memory injetado."""
    from rodada.infrastructure import duckdb_connection
    duckdb_connection.set_connection(test_db)

    from rodada.infrastructure.config import get_settings
    get_settings.cache_clear()

    from rodada.interfaces.api.main import app
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def admin_headers() -> dict[str, str]:
    return {"X-Admin-Key": "chave-admin-teste"}


@pytest.fixture()
def evento(client: TestClient, admin_headers: dict[str, str]) -> dict[str, str]:
    """Associado A e fornecedores X e Y cadastrados pelo admin, todos com senha 'senha-123'."""
    empresas = {
        "A": ("11222333000181", "Mercado Bom Preco", "associate"),
        "X": ("33000167000101", "Laticinios Serra", "supplier"),
        "Y": ("44555666000177", "Bebidas Norte", "supplier"),
    }
    for cnpj, nome, papel in empresas.values():
        response = client.post(
            "/api/admin/empresas",
            json={"cnpj": cnpj, "nome_fantasia": nome, "papel": papel, "senha": "senha-123"},
            headers=admin_headers,
        )
        assert response.status_code == 201
    return {chave: dados[0] for chave, dados in empresas.items()}

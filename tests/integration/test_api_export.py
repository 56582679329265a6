# tests/integration/test_api_export.py
from __future__ import annotations

import csv
import io

from fastapi.testclient import TestClient


def _lancar(client: TestClient, headers: dict[str, str], associado: str, fornecedor: str, valor: object, notas: str = "") -> None:
    response = client.post(
        "/api/admin/negociacoes",
        json={"associado_cnpj": associado, "fornecedor_cnpj": fornecedor, "valor": valor, "notas": notas},
        headers=headers,
    )
    assert response.status_code == 201


def test_export_sem_negociacoes_retorna_404(client: TestClient, admin_headers: dict[str, str]) -> None:
    response = client.get("/api/admin/export", headers=admin_headers)
    assert response.status_code == 404


def test_export_exige_chave_admin(client: TestClient) -> None:
    assert client.get("/api/admin/export").status_code == 401


def test_export_csv_com_bom_e_cabecalho(
    client: TestClient, evento: dict[str, str], admin_headers: dict[str, str],
) -> None:
    _lancar(client, admin_headers, evento["A"], evento["X"], "1500.5", 'pedido "grande"')
    _lancar(client, admin_headers, evento["A"], evento["Y"], None)

    response = client.get("/api/admin/export", headers=admin_headers)
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    disposition = response.headers["content-disposition"]
    assert "attachment" in disposition
    assert "rodada_negocios_" in disposition

    texto = response.content.decode("utf-8")
    assert texto.startswith("\ufeff")
    linhas = texto.removeprefix("\ufeff").split("\n")
    assert linhas[0] == "ID,Associado,CNPJ Associado,Fornecedor,CNPJ Fornecedor,Valor,Data,Notas"
    assert len(linhas) == 3

    registros = list(csv.reader(io.StringIO("\n".join(linhas[1:]))))
    assert registros[0][1] == "MERCADO BOM PRECO"
    assert registros[0][3] == "LATICINIOS SERRA"
    assert registros[0][5] == "1500.50"
    assert registros[0][7] == 'pedido "grande"'
    assert registros[1][5] == "0.00"
    assert '"pedido ""grande"""' in linhas[1]

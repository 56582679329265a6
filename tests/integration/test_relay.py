# tests/integration/test_relay.py
from __future__ import annotations

import json

import httpx
import pytest
from fastapi.testclient import TestClient

from rodada.infrastructure.relay_client import RelayClient
from rodada.interfaces.api.dependencies import get_relay_client
from rodada.interfaces.api.main import app

RELAY_URL = "https://relay.example.com/hook"


def _configurar_relay(client: TestClient, headers: dict[str, str], url: str | None) -> None:
    response = client.put(
        "/api/admin/configuracao",
        json={
            "permitir_associado": True,
            "permitir_fornecedor": True,
            "permitir_negociacoes": True,
            "relay_url": url,
        },
        headers=headers,
    )
    assert response.status_code == 200


def _relay_capturando(recebidos: list[httpx.Request], status: int = 200) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        recebidos.append(request)
        return httpx.Response(status)

    relay = RelayClient(transport=httpx.MockTransport(handler))
    app.dependency_overrides[get_relay_client] = lambda: relay


def test_lancamento_envia_ao_relay(
    client: TestClient, evento: dict[str, str], admin_headers: dict[str, str],
) -> None:
    recebidos: list[httpx.Request] = []
    _relay_capturando(recebidos)
    _configurar_relay(client, admin_headers, RELAY_URL)

    response = client.post(
        "/api/negociacoes",
        json={"fornecedor_cnpj": evento["X"], "valor": "250", "notas": "ok"},
        auth=(evento["A"], "senha-123"),
    )
    assert response.status_code == 201

    assert len(recebidos) == 1
    assert str(recebidos[0].url) == RELAY_URL
    corpo = json.loads(recebidos[0].content)
    assert corpo["id"] == response.json()["id"]
    assert corpo["associado"] == "MERCADO BOM PRECO"
    assert corpo["fornecedor"] == "LATICINIOS SERRA"
    assert corpo["valor"] == "250.00"
    assert corpo["valor_formatado"] == "R$ 250,00"
    assert corpo["notas"] == "ok"


def test_sem_relay_configurado_nada_e_enviado(
    client: TestClient, evento: dict[str, str], admin_headers: dict[str, str],
) -> None:
    recebidos: list[httpx.Request] = []
    _relay_capturando(recebidos)

    response = client.post(
        "/api/admin/negociacoes",
        json={"associado_cnpj": evento["A"], "fornecedor_cnpj": evento["X"], "valor": "10"},
        headers=admin_headers,
    )
    assert response.status_code == 201
    assert recebidos == []


def test_falha_do_relay_nao_afeta_o_lancamento(
    client: TestClient, evento: dict[str, str], admin_headers: dict[str, str],
) -> None:
    recebidos: list[httpx.Request] = []
    _relay_capturando(recebidos, status=500)
    _configurar_relay(client, admin_headers, RELAY_URL)

    response = client.post(
        "/api/admin/negociacoes",
        json={"associado_cnpj": evento["A"], "fornecedor_cnpj": evento["X"], "valor": "10"},
        headers=admin_headers,
    )
    assert response.status_code == 201
    assert len(recebidos) == 1
    assert len(client.get("/api/admin/negociacoes", headers=admin_headers).json()) == 1


def test_relay_client_retorna_false_em_erro_de_rede(capsys: pytest.CaptureFixture[str]) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("sem rota", request=request)

    relay = RelayClient(transport=httpx.MockTransport(handler))
    assert relay.enviar(RELAY_URL, {"id": "abc"}) is False
    saida = capsys.readouterr().out
    assert "ERRO" in saida
    assert "abc" in saida


def test_relay_client_segue_redirecionamento() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/hook":
            return httpx.Response(302, headers={"Location": "https://relay.example.com/final"})
        return httpx.Response(200)

    relay = RelayClient(transport=httpx.MockTransport(handler))
    assert relay.enviar(RELAY_URL, {"id": "1"}) is True

from fastapi.testclient import TestClient

SENHA = "senha-123"


def _lancar(client: TestClient, associado: str, fornecedor: str, valor: object = "100.00", notas: str = ""):  # type: ignore[no-untyped-def]
    return client.post(
        "/api/negociacoes",
        json={"fornecedor_cnpj": fornecedor, "valor": valor, "notas": notas},
        auth=(associado, SENHA),
    )


def test_lancamento_retorna_201_com_nomes(client: TestClient, evento: dict[str, str]) -> None:
    response = _lancar(client, evento["A"], evento["X"], "1500.5", "pedido de lancamento")
    assert response.status_code == 201
    data = response.json()
    assert data["associado"] == "MERCADO BOM PRECO"
    assert data["fornecedor"] == "LATICINIOS SERRA"
    assert data["valor"] == "1500.50"
    assert data["valor_formatado"] == "R$ 1.500,50"
    assert data["notas"] == "pedido de lancamento"


def test_lancamento_sem_credencial_retorna_401(client: TestClient, evento: dict[str, str]) -> None:
    response = client.post("/api/negociacoes", json={"fornecedor_cnpj": evento["X"], "valor": "10"})
    assert response.status_code == 401


def test_fornecedor_autenticado_nao_pode_lancar(client: TestClient, evento: dict[str, str]) -> None:
    response = _lancar(client, evento["X"], evento["Y"])
    assert response.status_code == 403
    assert "associados" in response.json()["detail"]
    assert client.get("/api/me/cobertura", auth=(evento["X"], SENHA)).json()["total_negociados"] == 0


def test_fornecedor_inexistente_retorna_404(client: TestClient, evento: dict[str, str]) -> None:
    response = _lancar(client, evento["A"], "99999999000199")
    assert response.status_code == 404


def test_contraparte_com_papel_errado_retorna_404(client: TestClient, evento: dict[str, str]) -> None:
    response = _lancar(client, evento["A"], evento["A"])
    assert response.status_code == 404


def test_valor_zero_ou_negativo_retorna_422(client: TestClient, evento: dict[str, str]) -> None:
    assert _lancar(client, evento["A"], evento["X"], "0").status_code == 422
    assert _lancar(client, evento["A"], evento["X"], "0.004").status_code == 422
    assert _lancar(client, evento["A"], evento["X"], "-5").status_code == 422


def test_valor_acima_do_maximo_retorna_422(client: TestClient, evento: dict[str, str]) -> None:
    response = _lancar(client, evento["A"], evento["X"], "100000000000000000")
    assert response.status_code == 422
    assert "invalido" in response.json()["detail"]


def test_lancamento_sem_valor_registra_sem_negociacao(client: TestClient, evento: dict[str, str]) -> None:
    response = _lancar(client, evento["A"], evento["X"], None)
    assert response.status_code == 201
    assert response.json()["valor"] is None
    assert response.json()["valor_formatado"] == "Sem Negociação"


def test_par_duplicado_retorna_409(client: TestClient, evento: dict[str, str]) -> None:
    assert _lancar(client, evento["A"], evento["X"]).status_code == 201
    response = _lancar(client, evento["A"], evento["X"], "50")
    assert response.status_code == 409


def test_outro_fornecedor_e_aceito(client: TestClient, evento: dict[str, str]) -> None:
    assert _lancar(client, evento["A"], evento["X"]).status_code == 201
    assert _lancar(client, evento["A"], evento["Y"]).status_code == 201


def test_negociacoes_bloqueadas_retorna_403(
    client: TestClient, evento: dict[str, str], admin_headers: dict[str, str],
) -> None:
    client.put(
        "/api/admin/configuracao",
        json={"permitir_associado": True, "permitir_fornecedor": True, "permitir_negociacoes": False},
        headers=admin_headers,
    )
    assert _lancar(client, evento["A"], evento["X"]).status_code == 403


def test_cobertura_do_associado(client: TestClient, evento: dict[str, str]) -> None:
    _lancar(client, evento["A"], evento["X"], "100")
    response = client.get("/api/me/cobertura", auth=(evento["A"], SENHA))
    assert response.status_code == 200
    data = response.json()
    assert data["rotulo_contador"] == "Fornecedores Negociados"
    assert data["total_negociados"] == 1
    assert data["total_contrapartes"] == 2
    assert [p["cnpj"] for p in data["parceiros_negociados"]] == [evento["X"]]
    assert [p["cnpj"] for p in data["parceiros_pendentes"]] == [evento["Y"]]
    assert data["valor_total_formatado"] == "R$ 100,00"
    assert len(data["historico"]) == 1
    assert data["serie_grafico"] == [{"nome": "LATICINIOS SERRA", "total": "100.00"}]


def test_cobertura_do_fornecedor(client: TestClient, evento: dict[str, str]) -> None:
    _lancar(client, evento["A"], evento["X"], "100")
    data = client.get("/api/me/cobertura", auth=(evento["X"], SENHA)).json()
    assert data["rotulo_contador"] == "Associados Atendidos"
    assert data["total_negociados"] == 1
    assert data["total_contrapartes"] == 1
    assert data["parceiros_pendentes"] == []

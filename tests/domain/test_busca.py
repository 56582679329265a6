import uuid
from datetime import datetime, timedelta

from rodada.application.services.busca_service import filtrar_empresas, filtrar_negociacoes
from rodada.domain.empresa.entities import Empresa
from rodada.domain.empresa.enums import Papel
from rodada.domain.empresa.value_objects import NomeFantasia
from rodada.domain.negociacao.entities import Negociacao

A = Empresa(cnpj="11222333000181", nome_fantasia=NomeFantasia("Mercado Bom Preco"), papel=Papel.ASSOCIADO)
F = Empresa(cnpj="33000167000101", nome_fantasia=NomeFantasia("Laticinios Serra"), papel=Papel.FORNECEDOR)
G = Empresa(cnpj="44555666000177", nome_fantasia=NomeFantasia("Bebidas Norte"), papel=Papel.FORNECEDOR)
EMPRESAS = [A, F, G]


def _negociacao(fornecedor: str, minuto: int) -> Negociacao:
    return Negociacao(
        id=uuid.uuid4(),
        associado_cnpj=A.cnpj,
        fornecedor_cnpj=fornecedor,
        valor=None,
        notas="",
        criado_em=datetime(2026, 10, 19, 9, 0) + timedelta(minutes=minuto),
    )


def test_filtrar_empresas_por_papel():
    assert filtrar_empresas(EMPRESAS, Papel.FORNECEDOR) == [F, G]


def test_filtrar_empresas_por_nome_sem_caixa():
    assert filtrar_empresas(EMPRESAS, termo="laticinios") == [F]


def test_filtrar_empresas_por_trecho_de_cnpj():
    assert filtrar_empresas(EMPRESAS, termo="44555") == [G]


def test_filtrar_empresas_sem_filtro_retorna_todas():
    assert filtrar_empresas(EMPRESAS) == EMPRESAS


def test_filtrar_negociacoes_mais_recentes_primeiro():
    n1, n2 = _negociacao(F.cnpj, 1), _negociacao(G.cnpj, 2)
    assert filtrar_negociacoes([n1, n2], EMPRESAS) == [n2, n1]


def test_filtrar_negociacoes_termo_em_qualquer_lado():
    n1, n2 = _negociacao(F.cnpj, 1), _negociacao(G.cnpj, 2)
    assert filtrar_negociacoes([n1, n2], EMPRESAS, termo="bebidas") == [n2]
    assert filtrar_negociacoes([n1, n2], EMPRESAS, termo="mercado") == [n2, n1]


def test_filtrar_negociacoes_papel_restringe_o_lado():
    n1 = _negociacao(F.cnpj, 1)
    assert filtrar_negociacoes([n1], EMPRESAS, Papel.FORNECEDOR, "mercado") == []
    assert filtrar_negociacoes([n1], EMPRESAS, Papel.ASSOCIADO, "mercado") == [n1]

# rodada/application/services/busca_service.py
"""Filtros das listagens administrativas. Funcoes puras sobre snapshots."""
from __future__ import annotations

from collections.abc import Iterable, Sequence

from rodada.domain.empresa.entities import Empresa
from rodada.domain.empresa.enums import Papel
from rodada.domain.negociacao.entities import Negociacao


def filtrar_empresas(
    empresas: Iterable[Empresa],
    papel: Papel | None = None,
    termo: str = "",
) -> list[Empresa]:
    """Filtro por papel e busca por nome (sem caixa) ou trecho do CNPJ."""
    termo = termo.strip()
    return [
        e for e in empresas
        if (papel is None or e.papel is papel) and _casa(e.nome_fantasia.valor, e.cnpj, termo)
    ]


def filtrar_negociacoes(
    negociacoes: Iterable[Negociacao],
    empresas: Sequence[Empresa],
    papel: Papel | None = None,
    termo: str = "",
) -> list[Negociacao]:
    """Mais recentes primeiro. Sem papel, o termo pode casar com qualquer um
    dos lados; com papel, so com o lado daquele papel."""
    termo = termo.strip()
    nomes = {e.cnpj: e.nome_fantasia.valor for e in empresas}

    def casa_associado(n: Negociacao) -> bool:
        return _casa(nomes.get(n.associado_cnpj, ""), n.associado_cnpj, termo)

    def casa_fornecedor(n: Negociacao) -> bool:
        return _casa(nomes.get(n.fornecedor_cnpj, ""), n.fornecedor_cnpj, termo)

    ordenadas = sorted(negociacoes, key=lambda n: n.criado_em, reverse=True)
    if papel is Papel.ASSOCIADO:
        return [n for n in ordenadas if casa_associado(n)]
    if papel is Papel.FORNECEDOR:
        return [n for n in ordenadas if casa_fornecedor(n)]
    return [n for n in ordenadas if casa_associado(n) or casa_fornecedor(n)]


def _casa(nome: str, cnpj: str, termo: str) -> bool:
    if not termo:
        return True
    return termo.lower() in nome.lower() or termo in cnpj

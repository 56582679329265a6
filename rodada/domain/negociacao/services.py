# rodada/domain/negociacao/services.py
#
# Pure ledger rules for negotiation records.
#
# Design decisions:
#   - Every function receives snapshots (companies, records) and returns new
#     values. Nothing here reads or writes storage; the application services
#     load the snapshot, call these functions and persist the result.
#   - The same registrar_negociacao serves buyer self-service and admin entry.
#     Admins pass both sides explicitly; roles are still checked.
#   - Clock and id generator are keyword arguments so tests can pin them.
#
# Invariants:
#   - Validation order is fixed: parties, then amount, then duplicate pair.
#   - registrar_negociacao never returns a record whose valor is <= 0.
#   - corrigir_negociacao preserves id, parties and criado_em.
#   - Inputs are never mutated.
from __future__ import annotations

import dataclasses
import uuid
from collections.abc import Callable, Iterable, Sequence
from datetime import datetime
from decimal import Decimal, InvalidOperation

from rodada.domain.empresa.entities import Empresa
from rodada.domain.empresa.enums import Papel
from rodada.domain.empresa.value_objects import normalizar_cnpj

from .entities import Negociacao
from .errors import (
    NegociacaoDuplicadaError,
    NegociacaoNaoEncontradaError,
    ParteDesconhecidaError,
    ValorInvalidoError,
)
from .value_objects import ValorNegociacao


def registrar_negociacao(
    associado_cnpj: str,
    fornecedor_cnpj: str,
    valor: Decimal | None,
    notas: str,
    empresas: Iterable[Empresa],
    negociacoes: Iterable[Negociacao],
    *,
    agora: datetime | None = None,
    gerar_id: Callable[[], uuid.UUID] = uuid.uuid4,
) -> Negociacao:
    """Valida e constroi um novo registro do ledger.

    Args:
        associado_cnpj:  CNPJ do lado comprador (papel ASSOCIADO).
        fornecedor_cnpj: CNPJ do lado vendedor (papel FORNECEDOR).
        valor:           Valor do acordo, ou None para "sem negociacao".
        notas:           Texto livre.
        empresas:        Snapshot do diretorio.
        negociacoes:     Snapshot do ledger.
        agora:           Momento de criacao; default datetime.now().

    Raises:
        ParteDesconhecidaError:   CNPJ ausente ou com papel errado.
        ValorInvalidoError:       valor presente e nao estritamente positivo.
        NegociacaoDuplicadaError: par ja registrado.
    """
    associado_cnpj = normalizar_cnpj(associado_cnpj)
    fornecedor_cnpj = normalizar_cnpj(fornecedor_cnpj)

    por_cnpj = {e.cnpj: e for e in empresas}
    _exigir_parte(associado_cnpj, Papel.ASSOCIADO, por_cnpj)
    _exigir_parte(fornecedor_cnpj, Papel.FORNECEDOR, por_cnpj)

    valor_vo = _valor_de_acordo(valor)

    if any(n.par == (associado_cnpj, fornecedor_cnpj) for n in negociacoes):
        raise NegociacaoDuplicadaError(associado_cnpj, fornecedor_cnpj)

    return Negociacao(
        id=gerar_id(),
        associado_cnpj=associado_cnpj,
        fornecedor_cnpj=fornecedor_cnpj,
        valor=valor_vo,
        notas=(notas or "").strip(),
        criado_em=agora or datetime.now(),
    )


def corrigir_negociacao(
    negociacao_id: uuid.UUID,
    novo_valor: Decimal | None,
    novas_notas: str,
    negociacoes: Iterable[Negociacao],
) -> Negociacao:
    """Correcao administrativa: troca valor e notas de um registro existente.

    Diferente do lancamento, aceita zero ou None (retirada de um acordo).

    Raises:
        NegociacaoNaoEncontradaError: id ausente do snapshot.
        ValorInvalidoError:           novo_valor negativo ou nao-numerico.
    """
    atual = next((n for n in negociacoes if n.id == negociacao_id), None)
    if atual is None:
        raise NegociacaoNaoEncontradaError(negociacao_id)

    valor_vo = None if novo_valor is None else _valor_vo(novo_valor)
    return dataclasses.replace(atual, valor=valor_vo, notas=(novas_notas or "").strip())


def remover_empresa_em_cascata(
    cnpj: str,
    empresas: Sequence[Empresa],
    negociacoes: Sequence[Negociacao],
) -> tuple[list[Empresa], list[Negociacao]]:
    """Remove a empresa e todo registro que a referencia como associado ou
    fornecedor. Retorna novas listas; nenhum registro orfao sobra."""
    cnpj = normalizar_cnpj(cnpj)
    restantes = [e for e in empresas if e.cnpj != cnpj]
    registros = [n for n in negociacoes if not n.envolve(cnpj)]
    return restantes, registros


def _exigir_parte(cnpj: str, papel: Papel, por_cnpj: dict[str, Empresa]) -> Empresa:
    empresa = por_cnpj.get(cnpj)
    if empresa is None:
        raise ParteDesconhecidaError(cnpj)
    if empresa.papel is not papel:
        raise ParteDesconhecidaError(cnpj, f"nao e {papel.rotulo.lower()}")
    return empresa


def _valor_vo(valor: Decimal | int | str) -> ValorNegociacao:
    try:
        return ValorNegociacao(Decimal(str(valor)))
    except (InvalidOperation, ValueError) as err:
        raise ValorInvalidoError(f"Valor de negociacao invalido: {valor}") from err


def _valor_de_acordo(valor: Decimal | None) -> ValorNegociacao | None:
    """None passa direto (sem acordo). Valor presente precisa ser > 0 depois
    de arredondado em centavos."""
    if valor is None:
        return None
    valor_vo = _valor_vo(valor)
    if not valor_vo.positivo:
        raise ValorInvalidoError(
            "Informe um valor de negociacao maior que zero ou registre sem negociacao"
        )
    return valor_vo

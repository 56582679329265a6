# rodada/application/services/cobertura_service.py
"""Positivacao e estatisticas do evento. Funcoes puras, zero IO.

Tudo aqui e recalculado a cada leitura a partir do snapshot recebido:
sem contadores escondidos, mesma entrada = mesma saida.
"""
from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from rodada.domain.empresa.entities import Empresa
from rodada.domain.empresa.enums import Papel
from rodada.domain.negociacao.entities import Negociacao

_ZERO = Decimal("0")
_CENTAVOS = Decimal("0.01")


@dataclass(frozen=True)
class PontoGrafico:
    nome: str
    total: Decimal


@dataclass(frozen=True)
class Cobertura:
    """Positivacao de uma empresa frente as contrapartes.

    Invariante: parceiros_negociados e parceiros_pendentes sao disjuntos e
    sua uniao e exatamente o conjunto de CNPJs de contrapartes."""

    empresa: Empresa
    contrapartes: tuple[Empresa, ...]
    parceiros_negociados: frozenset[str]
    parceiros_pendentes: frozenset[str]
    valor_total: Decimal
    total_por_parceiro: dict[str, Decimal]
    historico: tuple[Negociacao, ...]
    serie_grafico: tuple[PontoGrafico, ...]

    @property
    def total_negociados(self) -> int:
        return len(self.parceiros_negociados)

    @property
    def pendentes(self) -> tuple[Empresa, ...]:
        """Contrapartes pendentes na ordem do diretorio."""
        return tuple(e for e in self.contrapartes if e.cnpj in self.parceiros_pendentes)


@dataclass(frozen=True)
class Positivacao:
    cnpj: str
    nome: str
    negociados: int
    faltantes: int
    total_base: int

    @property
    def rotulo(self) -> str:
        return f"{self.negociados} [Faltam {self.faltantes}]"


@dataclass(frozen=True)
class VolumeEmpresa:
    cnpj: str
    nome: str
    valor: Decimal


@dataclass(frozen=True)
class ResumoEvento:
    total_registros: int
    volume_total: Decimal
    ticket_medio: Decimal
    total_associados: int
    total_fornecedores: int
    positivacao_fornecedores: tuple[Positivacao, ...]
    positivacao_associados: tuple[Positivacao, ...]
    volume_por_fornecedor: tuple[VolumeEmpresa, ...]
    volume_por_associado: tuple[VolumeEmpresa, ...]


def calcular_cobertura(
    empresa: Empresa,
    empresas: Sequence[Empresa],
    negociacoes: Iterable[Negociacao],
) -> Cobertura:
    """Funcao pura. Registro sem acordo conta como parceiro negociado e soma
    zero no valor total."""
    contrapartes = tuple(e for e in empresas if e.papel is empresa.papel.contraparte)
    cnpjs_contrapartes = {e.cnpj for e in contrapartes}

    relevantes = [n for n in negociacoes if _lado(n, empresa.papel) == empresa.cnpj]

    total_por_parceiro: dict[str, Decimal] = {}
    for n in relevantes:
        parceiro = _lado(n, empresa.papel.contraparte)
        total_por_parceiro[parceiro] = total_por_parceiro.get(parceiro, _ZERO) + n.valor_ou_zero

    # Registros apontando para empresas fora do diretorio nao entram na positivacao.
    negociados = frozenset(total_por_parceiro) & cnpjs_contrapartes
    pendentes = frozenset(cnpjs_contrapartes - negociados)

    serie = tuple(
        PontoGrafico(nome=e.nome_fantasia.valor, total=total_por_parceiro[e.cnpj])
        for e in contrapartes
        if total_por_parceiro.get(e.cnpj, _ZERO) > _ZERO
    )

    return Cobertura(
        empresa=empresa,
        contrapartes=contrapartes,
        parceiros_negociados=negociados,
        parceiros_pendentes=pendentes,
        valor_total=sum((n.valor_ou_zero for n in relevantes), _ZERO),
        total_por_parceiro=total_por_parceiro,
        historico=tuple(sorted(relevantes, key=lambda n: n.criado_em, reverse=True)),
        serie_grafico=serie,
    )


def calcular_resumo_evento(
    empresas: Sequence[Empresa],
    negociacoes: Sequence[Negociacao],
) -> ResumoEvento:
    """Funcao pura. ticket_medio divide o volume apenas pelos registros com
    valor (ignora os sem acordo); volume_total trata None como zero."""
    associados = [e for e in empresas if e.papel is Papel.ASSOCIADO]
    fornecedores = [e for e in empresas if e.papel is Papel.FORNECEDOR]

    volume_total = sum((n.valor_ou_zero for n in negociacoes), _ZERO)
    com_valor = [n for n in negociacoes if not n.sem_acordo]
    ticket_medio = (
        (volume_total / len(com_valor)).quantize(_CENTAVOS, rounding=ROUND_HALF_UP)
        if com_valor
        else _ZERO
    )

    return ResumoEvento(
        total_registros=len(negociacoes),
        volume_total=volume_total,
        ticket_medio=ticket_medio,
        total_associados=len(associados),
        total_fornecedores=len(fornecedores),
        positivacao_fornecedores=_positivacao(fornecedores, associados, negociacoes),
        positivacao_associados=_positivacao(associados, fornecedores, negociacoes),
        volume_por_fornecedor=_ranking_volume(fornecedores, negociacoes),
        volume_por_associado=_ranking_volume(associados, negociacoes),
    )


def _lado(negociacao: Negociacao, papel: Papel) -> str:
    if papel is Papel.ASSOCIADO:
        return negociacao.associado_cnpj
    return negociacao.fornecedor_cnpj


def _positivacao(
    empresas: Sequence[Empresa],
    contrapartes: Sequence[Empresa],
    negociacoes: Sequence[Negociacao],
) -> tuple[Positivacao, ...]:
    """Ordena por negociados decrescente; sort estavel, empate mantem a
    ordem do diretorio."""
    total_base = len(contrapartes)
    cnpjs_contrapartes = {c.cnpj for c in contrapartes}
    itens: list[Positivacao] = []
    for empresa in empresas:
        parceiros = {
            _lado(n, empresa.papel.contraparte)
            for n in negociacoes
            if _lado(n, empresa.papel) == empresa.cnpj
        } & cnpjs_contrapartes
        itens.append(Positivacao(
            cnpj=empresa.cnpj,
            nome=empresa.nome_fantasia.valor,
            negociados=len(parceiros),
            faltantes=max(0, total_base - len(parceiros)),
            total_base=total_base,
        ))
    return tuple(sorted(itens, key=lambda p: p.negociados, reverse=True))


def _ranking_volume(
    empresas: Sequence[Empresa],
    negociacoes: Sequence[Negociacao],
) -> tuple[VolumeEmpresa, ...]:
    itens = [
        VolumeEmpresa(
            cnpj=e.cnpj,
            nome=e.nome_fantasia.valor,
            valor=sum(
                (n.valor_ou_zero for n in negociacoes if _lado(n, e.papel) == e.cnpj),
                _ZERO,
            ),
        )
        for e in empresas
    ]
    return tuple(sorted((i for i in itens if i.valor > _ZERO), key=lambda i: i.valor, reverse=True))

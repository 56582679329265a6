from __future__ import annotations

import uuid
from decimal import Decimal

import duckdb

from rodada.domain.negociacao.entities import Negociacao
from rodada.domain.negociacao.errors import NegociacaoDuplicadaError
from rodada.domain.negociacao.value_objects import ValorNegociacao

_COLUNAS = "id, associado_cnpj, fornecedor_cnpj, valor, notas, criado_em"


class DuckDBNegociacaoRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def listar(self) -> list[Negociacao]:
        """Ordem de lancamento (mais antigas primeiro)."""
        rows = self._conn.execute(
            f"SELECT {_COLUNAS} FROM negociacao ORDER BY criado_em, ordem",  # noqa: S608
        ).fetchall()
        return [self._hidratar(r) for r in rows]

    def buscar_por_id(self, negociacao_id: uuid.UUID) -> Negociacao | None:
        row = self._conn.execute(
            f"SELECT {_COLUNAS} FROM negociacao WHERE id = ?",  # noqa: S608
            [str(negociacao_id)],
        ).fetchone()
        if row is None:
            return None
        return self._hidratar(row)

    def salvar(self, negociacao: Negociacao) -> None:
        """Insere ou, para um id existente, atualiza valor e notas.

        Raises:
            NegociacaoDuplicadaError: o par ja existe com outro id (escrita
                concorrente que passou pela validacao do snapshot).
        """
        try:
            self._conn.execute(
                f"""INSERT INTO negociacao ({_COLUNAS}) VALUES (?, ?, ?, ?, ?, ?)
                    ON CONFLICT (id) DO UPDATE SET
                        valor = excluded.valor,
                        notas = excluded.notas""",  # noqa: S608
                [
                    str(negociacao.id),
                    negociacao.associado_cnpj,
                    negociacao.fornecedor_cnpj,
                    negociacao.valor.valor if negociacao.valor is not None else None,
                    negociacao.notas,
                    negociacao.criado_em,
                ],
            )
        except duckdb.ConstraintException as err:
            raise NegociacaoDuplicadaError(
                negociacao.associado_cnpj, negociacao.fornecedor_cnpj,
            ) from err

    def remover(self, negociacao_id: uuid.UUID) -> bool:
        if self.buscar_por_id(negociacao_id) is None:
            return False
        self._conn.execute("DELETE FROM negociacao WHERE id = ?", [str(negociacao_id)])
        return True

    def _hidratar(self, row: tuple) -> Negociacao:  # type: ignore[type-arg]
        """Colunas: id(0), associado_cnpj(1), fornecedor_cnpj(2), valor(3),
        notas(4), criado_em(5)"""
        return Negociacao(
            id=uuid.UUID(str(row[0])),
            associado_cnpj=str(row[1]),
            fornecedor_cnpj=str(row[2]),
            valor=ValorNegociacao(Decimal(str(row[3]))) if row[3] is not None else None,
            notas=str(row[4] or ""),
            criado_em=row[5],
        )

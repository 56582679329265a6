from __future__ import annotations

import duckdb

from rodada.domain.empresa.entities import Empresa
from rodada.domain.empresa.enums import Papel
from rodada.domain.empresa.value_objects import NomeFantasia

_COLUNAS = "cnpj, nome_fantasia, papel, telefone, email, senha_hash"


class DuckDBEmpresaRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def listar(self) -> list[Empresa]:
        rows = self._conn.execute(
            f"SELECT {_COLUNAS} FROM empresa ORDER BY ordem",  # noqa: S608
        ).fetchall()
        return [self._hidratar(r) for r in rows]

    def buscar_por_cnpj(self, cnpj: str) -> Empresa | None:
        row = self._conn.execute(
            f"SELECT {_COLUNAS} FROM empresa WHERE cnpj = ?",  # noqa: S608
            [cnpj],
        ).fetchone()
        if row is None:
            return None
        return self._hidratar(row)

    def salvar(self, empresa: Empresa) -> None:
        """Upsert pela chave natural."""
        self._conn.execute(
            f"""INSERT INTO empresa ({_COLUNAS}) VALUES (?, ?, ?, ?, ?, ?)
                ON CONFLICT (cnpj) DO UPDATE SET
                    nome_fantasia = excluded.nome_fantasia,
                    papel = excluded.papel,
                    telefone = excluded.telefone,
                    email = excluded.email,
                    senha_hash = excluded.senha_hash""",  # noqa: S608
            [
                empresa.cnpj,
                empresa.nome_fantasia.valor,
                empresa.papel.value,
                empresa.telefone,
                empresa.email,
                empresa.senha_hash,
            ],
        )

    def remover(self, cnpj: str) -> int:
        """Remove a empresa e, na mesma transacao, todas as negociacoes que a
        referenciam em qualquer lado. Retorna quantas negociacoes sairam."""
        self._conn.begin()
        try:
            row = self._conn.execute(
                "SELECT count(*) FROM negociacao WHERE associado_cnpj = ? OR fornecedor_cnpj = ?",
                [cnpj, cnpj],
            ).fetchone()
            self._conn.execute(
                "DELETE FROM negociacao WHERE associado_cnpj = ? OR fornecedor_cnpj = ?",
                [cnpj, cnpj],
            )
            self._conn.execute("DELETE FROM empresa WHERE cnpj = ?", [cnpj])
        except duckdb.Error:
            self._conn.rollback()
            raise
        self._conn.commit()
        return int(row[0]) if row else 0

    def _hidratar(self, row: tuple) -> Empresa:  # type: ignore[type-arg]
        """Colunas: cnpj(0), nome_fantasia(1), papel(2), telefone(3),
        email(4), senha_hash(5)"""
        return Empresa(
            cnpj=str(row[0]),
            nome_fantasia=NomeFantasia(str(row[1])),
            papel=Papel(str(row[2])),
            telefone=str(row[3] or ""),
            email=str(row[4] or ""),
            senha_hash=str(row[5] or ""),
        )

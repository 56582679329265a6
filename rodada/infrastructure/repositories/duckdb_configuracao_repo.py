from __future__ import annotations

import duckdb

from rodada.domain.configuracao.entities import ConfiguracaoInscricao


class DuckDBConfiguracaoRepo:
    """Linha unica (id = 1). Sem linha gravada valem os defaults."""

    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def carregar(self) -> ConfiguracaoInscricao:
        row = self._conn.execute(
            """SELECT permitir_associado, permitir_fornecedor, permitir_negociacoes, relay_url
               FROM configuracao WHERE id = 1""",
        ).fetchone()
        if row is None:
            return ConfiguracaoInscricao()
        return ConfiguracaoInscricao(
            permitir_associado=bool(row[0]),
            permitir_fornecedor=bool(row[1]),
            permitir_negociacoes=bool(row[2]),
            relay_url=str(row[3]) if row[3] else None,
        )

    def salvar(self, configuracao: ConfiguracaoInscricao) -> None:
        self._conn.execute(
            """INSERT INTO configuracao VALUES (1, ?, ?, ?, ?)
               ON CONFLICT (id) DO UPDATE SET
                   permitir_associado = excluded.permitir_associado,
                   permitir_fornecedor = excluded.permitir_fornecedor,
                   permitir_negociacoes = excluded.permitir_negociacoes,
                   relay_url = excluded.relay_url""",
            [
                configuracao.permitir_associado,
                configuracao.permitir_fornecedor,
                configuracao.permitir_negociacoes,
                configuracao.relay_url,
            ],
        )

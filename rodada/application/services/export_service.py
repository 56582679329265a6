from __future__ import annotations

import csv
import io
from collections.abc import Iterable, Sequence
from datetime import date

from rodada.domain.empresa.entities import Empresa
from rodada.domain.negociacao.entities import Negociacao

from .moeda import formatar_data_hora

CABECALHO = (
    "ID",
    "Associado",
    "CNPJ Associado",
    "Fornecedor",
    "CNPJ Fornecedor",
    "Valor",
    "Data",
    "Notas",
)

# Prefixo para o Excel reconhecer UTF-8.
BOM = "\ufeff"


class ExportService:
    def exportar_negociacoes_csv(
        self,
        negociacoes: Iterable[Negociacao],
        empresas: Sequence[Empresa],
    ) -> str:
        """Cabecalho sem aspas; todas as celulas de dados entre aspas, com
        aspas internas duplicadas. Sem acordo exporta 0.00."""
        nomes = {e.cnpj: e.nome_fantasia.valor for e in empresas}

        output = io.StringIO()
        output.write(",".join(CABECALHO) + "\n")
        writer = csv.writer(output, quoting=csv.QUOTE_ALL, lineterminator="\n")
        for n in negociacoes:
            writer.writerow([
                str(n.id),
                nomes.get(n.associado_cnpj, "N/A"),
                n.associado_cnpj,
                nomes.get(n.fornecedor_cnpj, "N/A"),
                n.fornecedor_cnpj,
                f"{n.valor_ou_zero:.2f}",
                formatar_data_hora(n.criado_em),
                n.notas or "",
            ])

        return output.getvalue().removesuffix("\n")

    def nome_arquivo(self, referencia: date | None = None) -> str:
        return f"rodada_negocios_{(referencia or date.today()).isoformat()}.csv"

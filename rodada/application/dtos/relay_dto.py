from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel

from rodada.application.services.moeda import formatar_brl, formatar_data_hora
from rodada.domain.negociacao.entities import Negociacao


class RelayPayloadDTO(BaseModel):
    """Corpo enviado ao webhook a cada nova negociacao."""

    id: str
    associado: str
    fornecedor: str
    valor: str | None
    valor_formatado: str
    criado_em: str
    criado_em_formatado: str
    notas: str

    @classmethod
    def from_domain(cls, negociacao: Negociacao, nomes: Mapping[str, str]) -> RelayPayloadDTO:
        valor = negociacao.valor.valor if negociacao.valor is not None else None
        return cls(
            id=str(negociacao.id),
            associado=nomes.get(negociacao.associado_cnpj, "N/A"),
            fornecedor=nomes.get(negociacao.fornecedor_cnpj, "N/A"),
            valor=str(valor) if valor is not None else None,
            valor_formatado=formatar_brl(valor),
            criado_em=negociacao.criado_em.isoformat(),
            criado_em_formatado=formatar_data_hora(negociacao.criado_em),
            notas=negociacao.notas or "",
        )

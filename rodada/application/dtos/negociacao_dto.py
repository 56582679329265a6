from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal

from pydantic import BaseModel, Field

from rodada.application.services.moeda import formatar_brl, formatar_data_hora
from rodada.domain.negociacao.entities import Negociacao


class NegociacaoLancamentoDTO(BaseModel):
    """Lancamento do proprio associado. valor ausente = sem negociacao."""

    fornecedor_cnpj: str = Field(min_length=1)
    valor: Decimal | None = None
    notas: str = ""


class NegociacaoAdminDTO(BaseModel):
    associado_cnpj: str = Field(min_length=1)
    fornecedor_cnpj: str = Field(min_length=1)
    valor: Decimal | None = None
    notas: str = ""


class NegociacaoCorrecaoDTO(BaseModel):
    valor: Decimal | None = None
    notas: str = ""


class NegociacaoDTO(BaseModel):
    id: str
    associado_cnpj: str
    associado: str
    fornecedor_cnpj: str
    fornecedor: str
    valor: str | None
    valor_formatado: str
    notas: str
    criado_em: str
    criado_em_formatado: str

    @classmethod
    def from_domain(cls, negociacao: Negociacao, nomes: Mapping[str, str]) -> NegociacaoDTO:
        valor = negociacao.valor.valor if negociacao.valor is not None else None
        return cls(
            id=str(negociacao.id),
            associado_cnpj=negociacao.associado_cnpj,
            associado=nomes.get(negociacao.associado_cnpj, "N/A"),
            fornecedor_cnpj=negociacao.fornecedor_cnpj,
            fornecedor=nomes.get(negociacao.fornecedor_cnpj, "N/A"),
            valor=str(valor) if valor is not None else None,
            valor_formatado=formatar_brl(valor),
            notas=negociacao.notas,
            criado_em=negociacao.criado_em.isoformat(),
            criado_em_formatado=formatar_data_hora(negociacao.criado_em),
        )

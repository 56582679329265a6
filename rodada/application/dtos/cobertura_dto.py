from __future__ import annotations

from pydantic import BaseModel

from rodada.application.services.cobertura_service import Cobertura
from rodada.application.services.moeda import formatar_brl
from rodada.domain.empresa.enums import Papel

from .negociacao_dto import NegociacaoDTO


class ParceiroDTO(BaseModel):
    cnpj: str
    nome_fantasia: str
    total: str


class PontoGraficoDTO(BaseModel):
    nome: str
    total: str


class CoberturaDTO(BaseModel):
    cnpj: str
    nome_fantasia: str
    papel: str
    rotulo_contador: str
    total_negociados: int
    total_contrapartes: int
    valor_total: str
    valor_total_formatado: str
    parceiros_negociados: list[ParceiroDTO]
    parceiros_pendentes: list[ParceiroDTO]
    historico: list[NegociacaoDTO]
    serie_grafico: list[PontoGraficoDTO]

    @classmethod
    def from_domain(cls, cobertura: Cobertura) -> CoberturaDTO:
        empresa = cobertura.empresa
        nomes = {c.cnpj: c.nome_fantasia.valor for c in cobertura.contrapartes}
        nomes[empresa.cnpj] = empresa.nome_fantasia.valor
        return cls(
            cnpj=empresa.cnpj,
            nome_fantasia=empresa.nome_fantasia.valor,
            papel=empresa.papel.value,
            rotulo_contador=(
                "Fornecedores Negociados" if empresa.papel is Papel.ASSOCIADO else "Associados Atendidos"
            ),
            total_negociados=cobertura.total_negociados,
            total_contrapartes=len(cobertura.contrapartes),
            valor_total=str(cobertura.valor_total),
            valor_total_formatado=formatar_brl(cobertura.valor_total),
            parceiros_negociados=[
                ParceiroDTO(
                    cnpj=c.cnpj,
                    nome_fantasia=c.nome_fantasia.valor,
                    total=str(cobertura.total_por_parceiro[c.cnpj]),
                )
                for c in cobertura.contrapartes
                if c.cnpj in cobertura.parceiros_negociados
            ],
            parceiros_pendentes=[
                ParceiroDTO(cnpj=c.cnpj, nome_fantasia=c.nome_fantasia.valor, total="0")
                for c in cobertura.pendentes
            ],
            historico=[NegociacaoDTO.from_domain(n, nomes) for n in cobertura.historico],
            serie_grafico=[
                PontoGraficoDTO(nome=p.nome, total=str(p.total)) for p in cobertura.serie_grafico
            ],
        )

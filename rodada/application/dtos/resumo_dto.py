from __future__ import annotations

from pydantic import BaseModel

from rodada.application.services.cobertura_service import Positivacao, ResumoEvento, VolumeEmpresa
from rodada.application.services.moeda import formatar_brl


class PositivacaoDTO(BaseModel):
    cnpj: str
    nome: str
    negociados: int
    faltantes: int
    total_base: int
    rotulo: str

    @classmethod
    def from_domain(cls, p: Positivacao) -> PositivacaoDTO:
        return cls(
            cnpj=p.cnpj,
            nome=p.nome,
            negociados=p.negociados,
            faltantes=p.faltantes,
            total_base=p.total_base,
            rotulo=p.rotulo,
        )


class VolumeEmpresaDTO(BaseModel):
    cnpj: str
    nome: str
    valor: str

    @classmethod
    def from_domain(cls, v: VolumeEmpresa) -> VolumeEmpresaDTO:
        return cls(cnpj=v.cnpj, nome=v.nome, valor=str(v.valor))


class ResumoEventoDTO(BaseModel):
    total_registros: int
    volume_total: str
    volume_total_formatado: str
    ticket_medio: str
    ticket_medio_formatado: str
    total_associados: int
    total_fornecedores: int
    positivacao_fornecedores: list[PositivacaoDTO]
    positivacao_associados: list[PositivacaoDTO]
    volume_por_fornecedor: list[VolumeEmpresaDTO]
    volume_por_associado: list[VolumeEmpresaDTO]

    @classmethod
    def from_domain(cls, resumo: ResumoEvento) -> ResumoEventoDTO:
        return cls(
            total_registros=resumo.total_registros,
            volume_total=str(resumo.volume_total),
            volume_total_formatado=formatar_brl(resumo.volume_total),
            ticket_medio=str(resumo.ticket_medio),
            ticket_medio_formatado=formatar_brl(resumo.ticket_medio),
            total_associados=resumo.total_associados,
            total_fornecedores=resumo.total_fornecedores,
            positivacao_fornecedores=[PositivacaoDTO.from_domain(p) for p in resumo.positivacao_fornecedores],
            positivacao_associados=[PositivacaoDTO.from_domain(p) for p in resumo.positivacao_associados],
            volume_por_fornecedor=[VolumeEmpresaDTO.from_domain(v) for v in resumo.volume_por_fornecedor],
            volume_por_associado=[VolumeEmpresaDTO.from_domain(v) for v in resumo.volume_por_associado],
        )

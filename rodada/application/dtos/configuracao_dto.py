from __future__ import annotations

from pydantic import BaseModel

from rodada.domain.configuracao.entities import ConfiguracaoInscricao


class ConfiguracaoPublicaDTO(BaseModel):
    permitir_associado: bool
    permitir_fornecedor: bool
    permitir_negociacoes: bool


class ConfiguracaoDTO(ConfiguracaoPublicaDTO):
    relay_url: str | None = None

    @classmethod
    def from_domain(cls, configuracao: ConfiguracaoInscricao) -> ConfiguracaoDTO:
        return cls(
            permitir_associado=configuracao.permitir_associado,
            permitir_fornecedor=configuracao.permitir_fornecedor,
            permitir_negociacoes=configuracao.permitir_negociacoes,
            relay_url=configuracao.relay_url,
        )

    def to_domain(self) -> ConfiguracaoInscricao:
        return ConfiguracaoInscricao(
            permitir_associado=self.permitir_associado,
            permitir_fornecedor=self.permitir_fornecedor,
            permitir_negociacoes=self.permitir_negociacoes,
            relay_url=self.relay_url,
        )

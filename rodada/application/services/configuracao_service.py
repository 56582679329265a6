from __future__ import annotations

from rodada.domain.configuracao.entities import ConfiguracaoInscricao
from rodada.domain.configuracao.repository import ConfiguracaoRepository


class ConfiguracaoService:
    def __init__(self, configuracao_repo: ConfiguracaoRepository) -> None:
        self._configuracao_repo = configuracao_repo

    def obter(self) -> ConfiguracaoInscricao:
        return self._configuracao_repo.carregar()

    def atualizar(self, configuracao: ConfiguracaoInscricao) -> ConfiguracaoInscricao:
        self._configuracao_repo.salvar(configuracao)
        return configuracao

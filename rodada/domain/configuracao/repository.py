from __future__ import annotations

from typing import Protocol

from .entities import ConfiguracaoInscricao


class ConfiguracaoRepository(Protocol):
    def carregar(self) -> ConfiguracaoInscricao: ...
    def salvar(self, configuracao: ConfiguracaoInscricao) -> None: ...

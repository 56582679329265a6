from __future__ import annotations

import uuid
from typing import Protocol

from .entities import Negociacao


class NegociacaoRepository(Protocol):
    def listar(self) -> list[Negociacao]: ...
    def buscar_por_id(self, negociacao_id: uuid.UUID) -> Negociacao | None: ...
    def salvar(self, negociacao: Negociacao) -> None: ...
    def remover(self, negociacao_id: uuid.UUID) -> bool: ...

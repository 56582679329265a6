from __future__ import annotations

from typing import Protocol

from .entities import Empresa


class EmpresaRepository(Protocol):
    def listar(self) -> list[Empresa]: ...
    def buscar_por_cnpj(self, cnpj: str) -> Empresa | None: ...
    def salvar(self, empresa: Empresa) -> None: ...
    def remover(self, cnpj: str) -> int: ...

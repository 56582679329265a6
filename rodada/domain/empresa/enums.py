from __future__ import annotations

from enum import Enum


class Papel(str, Enum):
    """Papel da empresa na rodada. Valor e o identificador usado no wire."""

    ASSOCIADO = "associate"
    FORNECEDOR = "supplier"

    @property
    def contraparte(self) -> Papel:
        """Associado negocia com fornecedor e vice-versa."""
        return Papel.FORNECEDOR if self is Papel.ASSOCIADO else Papel.ASSOCIADO

    @property
    def rotulo(self) -> str:
        return "Associado" if self is Papel.ASSOCIADO else "Fornecedor"

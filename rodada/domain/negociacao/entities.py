from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from .value_objects import ValorNegociacao


@dataclass(frozen=True)
class Negociacao:
    """Registro do ledger: uma negociacao entre um associado e um fornecedor.

    valor=None significa contato feito sem acordo ("Sem Negociacao"), que e
    um estado distinto de um acordo de valor zero."""

    id: uuid.UUID
    associado_cnpj: str
    fornecedor_cnpj: str
    valor: ValorNegociacao | None
    notas: str
    criado_em: datetime

    @property
    def sem_acordo(self) -> bool:
        return self.valor is None

    @property
    def valor_ou_zero(self) -> Decimal:
        return self.valor.valor if self.valor is not None else Decimal("0")

    @property
    def par(self) -> tuple[str, str]:
        return self.associado_cnpj, self.fornecedor_cnpj

    def envolve(self, cnpj: str) -> bool:
        return cnpj in (self.associado_cnpj, self.fornecedor_cnpj)

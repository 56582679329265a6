from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

_CENTAVOS = Decimal("0.01")
# Maior valor da coluna DECIMAL(18, 2)
VALOR_MAXIMO = Decimal("9999999999999999.99")


@dataclass(frozen=True)
class ValorNegociacao:
    """Valor em Decimal, quantizado em centavos. Nunca float. Nunca negativo.

    Zero e aceito aqui porque uma correcao administrativa pode zerar um
    acordo; a exigencia de valor positivo no lancamento fica no servico."""

    valor: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.valor, Decimal):
            object.__setattr__(self, "valor", Decimal(str(self.valor)))
        if not self.valor.is_finite():
            raise ValueError("Valor de negociacao deve ser finito")
        if self.valor < Decimal("0"):
            raise ValueError("Valor de negociacao nao pode ser negativo")
        if self.valor > VALOR_MAXIMO:
            raise ValueError(f"Valor de negociacao acima do maximo de {VALOR_MAXIMO}")
        object.__setattr__(self, "valor", self.valor.quantize(_CENTAVOS))

    @property
    def positivo(self) -> bool:
        return self.valor > Decimal("0")

"""Formatacao de valores em reais e datas no padrao pt-BR."""
from __future__ import annotations

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

SEM_NEGOCIACAO = "Sem Negociação"

_CENTAVOS = Decimal("0.01")


def formatar_brl(valor: Decimal | None) -> str:
    """Decimal("1234.5") -> "R$ 1.234,50". None -> "Sem Negociação"."""
    if valor is None:
        return SEM_NEGOCIACAO
    q = valor.quantize(_CENTAVOS, rounding=ROUND_HALF_UP)
    sinal = "-" if q < 0 else ""
    inteiro, centavos = f"{abs(q):.2f}".split(".")
    milhares = f"{int(inteiro):,}".replace(",", ".")
    return f"{sinal}R$ {milhares},{centavos}"


def formatar_data_hora(momento: datetime) -> str:
    """dd/mm/aaaa, HH:MM:SS"""
    return momento.strftime("%d/%m/%Y, %H:%M:%S")

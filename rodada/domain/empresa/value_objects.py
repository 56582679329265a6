from __future__ import annotations

from dataclasses import dataclass


def normalizar_cnpj(raw: str) -> str:
    """CNPJ e chave natural opaca: apenas remove espacos nas pontas."""
    return raw.strip()


@dataclass(frozen=True)
class NomeFantasia:
    """Nome fantasia nao-vazio, trimado e em caixa alta."""

    valor: str

    def __post_init__(self) -> None:
        stripped = self.valor.strip()
        if not stripped:
            raise ValueError("Nome fantasia nao pode ser vazio")
        object.__setattr__(self, "valor", stripped.upper())

    def __str__(self) -> str:
        return self.valor

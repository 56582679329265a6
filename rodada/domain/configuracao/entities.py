from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ConfiguracaoInscricao:
    """Configuracao unica do evento. Criada com defaults (tudo aberto, sem
    relay), alterada apenas pelo administrador, nunca removida."""

    permitir_associado: bool = True
    permitir_fornecedor: bool = True
    permitir_negociacoes: bool = True
    relay_url: str | None = None

    def __post_init__(self) -> None:
        url = (self.relay_url or "").strip()
        if url and not url.startswith(("http://", "https://")):
            raise ValueError("relay_url deve comecar com http:// ou https://")
        object.__setattr__(self, "relay_url", url or None)

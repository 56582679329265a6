"""Erros de validacao do ledger. Todos sincronos, locais e nao-fatais:
a operacao e rejeitada e o estado anterior permanece intacto."""
from __future__ import annotations


class LedgerError(ValueError):
    """Base para erros de validacao do ledger de negociacoes."""


class ParteDesconhecidaError(LedgerError):
    """CNPJ inexistente no diretorio ou com papel incompativel."""

    def __init__(self, cnpj: str, motivo: str = "nao cadastrado") -> None:
        self.cnpj = cnpj
        super().__init__(f"Empresa {cnpj} {motivo}")


class ValorInvalidoError(LedgerError):
    """Valor de negociacao fora do dominio aceito pela operacao."""


class NegociacaoDuplicadaError(LedgerError):
    """Ja existe registro para o par (associado, fornecedor)."""

    def __init__(self, associado_cnpj: str, fornecedor_cnpj: str) -> None:
        self.associado_cnpj = associado_cnpj
        self.fornecedor_cnpj = fornecedor_cnpj
        super().__init__(
            f"Ja existe negociacao entre {associado_cnpj} e {fornecedor_cnpj}"
        )


class NegociacaoNaoEncontradaError(LedgerError):
    def __init__(self, negociacao_id: object) -> None:
        self.negociacao_id = negociacao_id
        super().__init__(f"Negociacao {negociacao_id} nao encontrada")

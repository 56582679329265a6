"""Erros do shell de aplicacao: regras de evento (portoes de cadastro e de
lancamento), diretorio e credenciais. Os erros de validacao do ledger ficam
em rodada.domain.negociacao.errors."""
from __future__ import annotations


class OperacaoNegadaError(Exception):
    """Base para operacoes recusadas pelas regras do evento."""


class CadastroBloqueadoError(OperacaoNegadaError):
    pass


class NegociacoesBloqueadasError(OperacaoNegadaError):
    pass


class EmpresaJaCadastradaError(OperacaoNegadaError):
    def __init__(self, cnpj: str) -> None:
        self.cnpj = cnpj
        super().__init__(f"CNPJ {cnpj} ja cadastrado")


class EmpresaNaoEncontradaError(OperacaoNegadaError):
    def __init__(self, cnpj: str) -> None:
        self.cnpj = cnpj
        super().__init__(f"Empresa {cnpj} nao encontrada")


class PapelImutavelError(OperacaoNegadaError):
    pass


class CredenciaisInvalidasError(OperacaoNegadaError):
    pass


class PapelNaoPermitidoError(OperacaoNegadaError):
    """Empresa autenticada com papel que nao pode executar a operacao."""

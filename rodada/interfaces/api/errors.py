from __future__ import annotations

from fastapi import HTTPException

from rodada.application.errors import (
    CadastroBloqueadoError,
    CredenciaisInvalidasError,
    EmpresaJaCadastradaError,
    EmpresaNaoEncontradaError,
    NegociacoesBloqueadasError,
    OperacaoNegadaError,
    PapelImutavelError,
    PapelNaoPermitidoError,
)
from rodada.domain.negociacao.errors import (
    LedgerError,
    NegociacaoDuplicadaError,
    NegociacaoNaoEncontradaError,
    ParteDesconhecidaError,
    ValorInvalidoError,
)

_STATUS: tuple[tuple[type[Exception], int], ...] = (
    (ParteDesconhecidaError, 404),
    (NegociacaoNaoEncontradaError, 404),
    (EmpresaNaoEncontradaError, 404),
    (ValorInvalidoError, 422),
    (PapelImutavelError, 422),
    (NegociacaoDuplicadaError, 409),
    (EmpresaJaCadastradaError, 409),
    (CadastroBloqueadoError, 403),
    (NegociacoesBloqueadasError, 403),
    (PapelNaoPermitidoError, 403),
    (CredenciaisInvalidasError, 401),
)


def para_http(err: LedgerError | OperacaoNegadaError | ValueError) -> HTTPException:
    """Traduz erros de dominio/aplicacao para HTTPException. ValueError de
    value object (ex.: nome vazio) vira 422."""
    for tipo, status in _STATUS:
        if isinstance(err, tipo):
            return HTTPException(status_code=status, detail=str(err))
    return HTTPException(status_code=422, detail=str(err))

from fastapi import APIRouter, BackgroundTasks, Depends

from rodada.application.dtos.negociacao_dto import NegociacaoDTO, NegociacaoLancamentoDTO
from rodada.application.errors import OperacaoNegadaError
from rodada.application.services.negociacao_service import NegociacaoService
from rodada.domain.empresa.entities import Empresa
from rodada.domain.negociacao.errors import LedgerError
from rodada.infrastructure.relay_client import RelayClient
from rodada.interfaces.api.dependencies import (
    get_empresa_autenticada,
    get_negociacao_service,
    get_relay_client,
)
from rodada.interfaces.api.errors import para_http

router = APIRouter()


@router.post("/negociacoes", response_model=NegociacaoDTO, status_code=201)
def lancar_negociacao(
    body: NegociacaoLancamentoDTO,
    background_tasks: BackgroundTasks,
    empresa: Empresa = Depends(get_empresa_autenticada),  # noqa: B008
    service: NegociacaoService = Depends(get_negociacao_service),  # noqa: B008
    relay: RelayClient = Depends(get_relay_client),  # noqa: B008
) -> NegociacaoDTO:
    try:
        negociacao = service.registrar(empresa, body.fornecedor_cnpj, body.valor, body.notas)
    except (LedgerError, OperacaoNegadaError) as err:
        raise para_http(err) from err

    envio = service.preparar_relay(negociacao)
    if envio is not None:
        background_tasks.add_task(relay.enviar, *envio)
    return NegociacaoDTO.from_domain(negociacao, service.nomes())

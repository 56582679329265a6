import uuid
from typing import Literal

from fastapi import APIRouter, BackgroundTasks, Depends, Query

from rodada.application.dtos.cobertura_dto import CoberturaDTO
from rodada.application.dtos.empresa_dto import EmpresaAtualizacaoDTO, EmpresaCadastroDTO, EmpresaDTO
from rodada.application.dtos.negociacao_dto import (
    NegociacaoAdminDTO,
    NegociacaoCorrecaoDTO,
    NegociacaoDTO,
)
from rodada.application.errors import OperacaoNegadaError
from rodada.application.services.empresa_service import EmpresaService
from rodada.application.services.negociacao_service import NegociacaoService
from rodada.domain.empresa.enums import Papel
from rodada.domain.negociacao.errors import LedgerError
from rodada.infrastructure.relay_client import RelayClient
from rodada.interfaces.api.dependencies import (
    get_empresa_service,
    get_negociacao_service,
    get_relay_client,
    verificar_admin,
)
from rodada.interfaces.api.errors import para_http

router = APIRouter(prefix="/admin", dependencies=[Depends(verificar_admin)])

PapelQuery = Literal["associate", "supplier"] | None


# ---------- Empresas ----------


@router.get("/empresas", response_model=list[EmpresaDTO])
def listar_empresas(
    papel: PapelQuery = Query(default=None),
    q: str = Query(default="", max_length=200),
    service: EmpresaService = Depends(get_empresa_service),  # noqa: B008
) -> list[EmpresaDTO]:
    empresas = service.listar(Papel(papel) if papel else None, q)
    return [EmpresaDTO.from_domain(e) for e in empresas]


@router.post("/empresas", response_model=EmpresaDTO, status_code=201)
def cadastrar_empresa(
    body: EmpresaCadastroDTO,
    service: EmpresaService = Depends(get_empresa_service),  # noqa: B008
) -> EmpresaDTO:
    try:
        empresa = service.cadastrar_admin(
            cnpj=body.cnpj,
            nome_fantasia=body.nome_fantasia,
            papel=Papel(body.papel),
            senha=body.senha,
            telefone=body.telefone,
            email=body.email,
        )
    except (OperacaoNegadaError, ValueError) as err:
        raise para_http(err) from err
    return EmpresaDTO.from_domain(empresa)


@router.put("/empresas/{cnpj}", response_model=EmpresaDTO)
def atualizar_empresa(
    cnpj: str,
    body: EmpresaAtualizacaoDTO,
    service: EmpresaService = Depends(get_empresa_service),  # noqa: B008
) -> EmpresaDTO:
    try:
        empresa = service.atualizar(
            cnpj,
            nome_fantasia=body.nome_fantasia,
            telefone=body.telefone,
            email=body.email,
            senha=body.senha,
            papel=Papel(body.papel) if body.papel else None,
        )
    except (OperacaoNegadaError, ValueError) as err:
        raise para_http(err) from err
    return EmpresaDTO.from_domain(empresa)


@router.delete("/empresas/{cnpj}")
def remover_empresa(
    cnpj: str,
    service: EmpresaService = Depends(get_empresa_service),  # noqa: B008
) -> dict[str, int]:
    try:
        removidas = service.remover(cnpj)
    except OperacaoNegadaError as err:
        raise para_http(err) from err
    return {"negociacoes_removidas": removidas}


@router.get("/empresas/{cnpj}/cobertura", response_model=CoberturaDTO)
def cobertura_empresa(
    cnpj: str,
    service: EmpresaService = Depends(get_empresa_service),  # noqa: B008
) -> CoberturaDTO:
    try:
        cobertura = service.cobertura(cnpj)
    except OperacaoNegadaError as err:
        raise para_http(err) from err
    return CoberturaDTO.from_domain(cobertura)


# ---------- Negociacoes ----------


@router.get("/negociacoes", response_model=list[NegociacaoDTO])
def listar_negociacoes(
    papel: PapelQuery = Query(default=None),
    q: str = Query(default="", max_length=200),
    service: NegociacaoService = Depends(get_negociacao_service),  # noqa: B008
) -> list[NegociacaoDTO]:
    negociacoes = service.listar(Papel(papel) if papel else None, q)
    nomes = service.nomes()
    return [NegociacaoDTO.from_domain(n, nomes) for n in negociacoes]


@router.post("/negociacoes", response_model=NegociacaoDTO, status_code=201)
def lancar_negociacao(
    body: NegociacaoAdminDTO,
    background_tasks: BackgroundTasks,
    service: NegociacaoService = Depends(get_negociacao_service),  # noqa: B008
    relay: RelayClient = Depends(get_relay_client),  # noqa: B008
) -> NegociacaoDTO:
    try:
        negociacao = service.registrar_admin(
            body.associado_cnpj, body.fornecedor_cnpj, body.valor, body.notas,
        )
    except LedgerError as err:
        raise para_http(err) from err

    envio = service.preparar_relay(negociacao)
    if envio is not None:
        background_tasks.add_task(relay.enviar, *envio)
    return NegociacaoDTO.from_domain(negociacao, service.nomes())


@router.put("/negociacoes/{negociacao_id}", response_model=NegociacaoDTO)
def corrigir_negociacao(
    negociacao_id: uuid.UUID,
    body: NegociacaoCorrecaoDTO,
    service: NegociacaoService = Depends(get_negociacao_service),  # noqa: B008
) -> NegociacaoDTO:
    try:
        negociacao = service.corrigir(negociacao_id, body.valor, body.notas)
    except LedgerError as err:
        raise para_http(err) from err
    return NegociacaoDTO.from_domain(negociacao, service.nomes())


@router.delete("/negociacoes/{negociacao_id}", status_code=204)
def remover_negociacao(
    negociacao_id: uuid.UUID,
    service: NegociacaoService = Depends(get_negociacao_service),  # noqa: B008
) -> None:
    try:
        service.remover(negociacao_id)
    except LedgerError as err:
        raise para_http(err) from err

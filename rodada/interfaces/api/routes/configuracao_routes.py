from fastapi import APIRouter, Depends, HTTPException

from rodada.application.dtos.configuracao_dto import ConfiguracaoDTO, ConfiguracaoPublicaDTO
from rodada.application.services.configuracao_service import ConfiguracaoService
from rodada.interfaces.api.dependencies import get_configuracao_service, verificar_admin

router = APIRouter()


@router.get("/configuracao/publica", response_model=ConfiguracaoPublicaDTO)
def configuracao_publica(
    service: ConfiguracaoService = Depends(get_configuracao_service),  # noqa: B008
) -> ConfiguracaoPublicaDTO:
    c = service.obter()
    return ConfiguracaoPublicaDTO(
        permitir_associado=c.permitir_associado,
        permitir_fornecedor=c.permitir_fornecedor,
        permitir_negociacoes=c.permitir_negociacoes,
    )


@router.get(
    "/admin/configuracao",
    response_model=ConfiguracaoDTO,
    dependencies=[Depends(verificar_admin)],
)
def obter_configuracao(
    service: ConfiguracaoService = Depends(get_configuracao_service),  # noqa: B008
) -> ConfiguracaoDTO:
    return ConfiguracaoDTO.from_domain(service.obter())


@router.put(
    "/admin/configuracao",
    response_model=ConfiguracaoDTO,
    dependencies=[Depends(verificar_admin)],
)
def atualizar_configuracao(
    body: ConfiguracaoDTO,
    service: ConfiguracaoService = Depends(get_configuracao_service),  # noqa: B008
) -> ConfiguracaoDTO:
    try:
        configuracao = body.to_domain()
    except ValueError as err:
        raise HTTPException(status_code=422, detail=str(err)) from err
    return ConfiguracaoDTO.from_domain(service.atualizar(configuracao))

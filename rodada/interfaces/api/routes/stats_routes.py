from fastapi import APIRouter, Depends

from rodada.application.dtos.resumo_dto import ResumoEventoDTO
from rodada.application.services.negociacao_service import NegociacaoService
from rodada.interfaces.api.dependencies import get_negociacao_service, verificar_admin

router = APIRouter()


@router.get(
    "/admin/resumo",
    response_model=ResumoEventoDTO,
    dependencies=[Depends(verificar_admin)],
)
def resumo_evento(
    service: NegociacaoService = Depends(get_negociacao_service),  # noqa: B008
) -> ResumoEventoDTO:
    return ResumoEventoDTO.from_domain(service.resumo_evento())

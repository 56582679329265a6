from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from rodada.application.services.export_service import BOM, ExportService
from rodada.application.services.negociacao_service import NegociacaoService
from rodada.interfaces.api.dependencies import (
    get_export_service,
    get_negociacao_service,
    verificar_admin,
)

router = APIRouter()


@router.get("/admin/export", dependencies=[Depends(verificar_admin)])
def exportar_negociacoes(
    service: NegociacaoService = Depends(get_negociacao_service),  # noqa: B008
    export_service: ExportService = Depends(get_export_service),  # noqa: B008
) -> Response:
    empresas, negociacoes = service.snapshot()
    if not negociacoes:
        raise HTTPException(status_code=404, detail="Nao ha negociacoes para exportar")

    conteudo = export_service.exportar_negociacoes_csv(negociacoes, empresas)
    return Response(
        content=(BOM + conteudo).encode("utf-8"),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f"attachment; filename={export_service.nome_arquivo()}"},
    )

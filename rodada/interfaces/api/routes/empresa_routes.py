from fastapi import APIRouter, Depends, HTTPException

from rodada.application.dtos.cobertura_dto import CoberturaDTO
from rodada.application.dtos.empresa_dto import (
    AlteracaoSenhaDTO,
    EmpresaCadastroDTO,
    EmpresaDTO,
    LoginDTO,
)
from rodada.application.errors import OperacaoNegadaError
from rodada.application.services.empresa_service import EmpresaService
from rodada.domain.empresa.entities import Empresa
from rodada.domain.empresa.enums import Papel
from rodada.interfaces.api.dependencies import get_empresa_autenticada, get_empresa_service
from rodada.interfaces.api.errors import para_http

router = APIRouter()


@router.post("/empresas", response_model=EmpresaDTO, status_code=201)
def cadastrar_empresa(
    body: EmpresaCadastroDTO,
    service: EmpresaService = Depends(get_empresa_service),  # noqa: B008
) -> EmpresaDTO:
    try:
        empresa = service.cadastrar(
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


@router.post("/login", response_model=EmpresaDTO)
def login(
    body: LoginDTO,
    service: EmpresaService = Depends(get_empresa_service),  # noqa: B008
) -> EmpresaDTO:
    try:
        empresa = service.autenticar(body.cnpj, body.senha)
    except OperacaoNegadaError as err:
        raise para_http(err) from err
    return EmpresaDTO.from_domain(empresa)


@router.get("/me", response_model=EmpresaDTO)
def perfil(empresa: Empresa = Depends(get_empresa_autenticada)) -> EmpresaDTO:  # noqa: B008
    return EmpresaDTO.from_domain(empresa)


@router.get("/me/cobertura", response_model=CoberturaDTO)
def minha_cobertura(
    empresa: Empresa = Depends(get_empresa_autenticada),  # noqa: B008
    service: EmpresaService = Depends(get_empresa_service),  # noqa: B008
) -> CoberturaDTO:
    return CoberturaDTO.from_domain(service.cobertura(empresa.cnpj))


@router.post("/me/senha", status_code=204)
def alterar_senha(
    body: AlteracaoSenhaDTO,
    empresa: Empresa = Depends(get_empresa_autenticada),  # noqa: B008
    service: EmpresaService = Depends(get_empresa_service),  # noqa: B008
) -> None:
    try:
        service.alterar_senha(empresa.cnpj, body.senha_atual, body.nova_senha)
    except OperacaoNegadaError as err:
        raise HTTPException(status_code=403, detail="Senha atual incorreta") from err

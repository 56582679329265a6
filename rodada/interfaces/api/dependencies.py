from __future__ import annotations

import secrets

from fastapi import Depends, Header, HTTPException
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from rodada.application.errors import CredenciaisInvalidasError
from rodada.application.services.configuracao_service import ConfiguracaoService
from rodada.application.services.empresa_service import EmpresaService
from rodada.application.services.export_service import ExportService
from rodada.application.services.negociacao_service import NegociacaoService
from rodada.domain.empresa.entities import Empresa
from rodada.infrastructure.config import get_settings
from rodada.infrastructure.duckdb_connection import get_connection
from rodada.infrastructure.relay_client import RelayClient
from rodada.infrastructure.repositories.duckdb_configuracao_repo import DuckDBConfiguracaoRepo
from rodada.infrastructure.repositories.duckdb_empresa_repo import DuckDBEmpresaRepo
from rodada.infrastructure.repositories.duckdb_negociacao_repo import DuckDBNegociacaoRepo

_basic = HTTPBasic()


def get_empresa_service() -> EmpresaService:
    conn = get_connection()
    return EmpresaService(
        empresa_repo=DuckDBEmpresaRepo(conn),
        negociacao_repo=DuckDBNegociacaoRepo(conn),
        configuracao_repo=DuckDBConfiguracaoRepo(conn),
    )


def get_negociacao_service() -> NegociacaoService:
    conn = get_connection()
    return NegociacaoService(
        empresa_repo=DuckDBEmpresaRepo(conn),
        negociacao_repo=DuckDBNegociacaoRepo(conn),
        configuracao_repo=DuckDBConfiguracaoRepo(conn),
    )


def get_configuracao_service() -> ConfiguracaoService:
    return ConfiguracaoService(configuracao_repo=DuckDBConfiguracaoRepo(get_connection()))


def get_export_service() -> ExportService:
    return ExportService()


def get_relay_client() -> RelayClient:
    return RelayClient(timeout=get_settings().relay_timeout_seconds)


def get_empresa_autenticada(
    credentials: HTTPBasicCredentials = Depends(_basic),  # noqa: B008
    service: EmpresaService = Depends(get_empresa_service),  # noqa: B008
) -> Empresa:
    """HTTP Basic: usuario = CNPJ, senha = credencial da empresa."""
    try:
        return service.autenticar(credentials.username, credentials.password)
    except CredenciaisInvalidasError as err:
        raise HTTPException(
            status_code=401,
            detail=str(err),
            headers={"WWW-Authenticate": "Basic"},
        ) from err


def verificar_admin(x_admin_key: str | None = Header(default=None)) -> None:
    chave = get_settings().admin_api_key
    if not chave:
        raise HTTPException(status_code=503, detail="Acesso administrativo nao configurado")
    if x_admin_key is None or not secrets.compare_digest(x_admin_key, chave):
        raise HTTPException(status_code=401, detail="Chave administrativa invalida")

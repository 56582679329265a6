from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from rodada.interfaces.api.middleware.rate_limit import RateLimitMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    from rodada.infrastructure.config import get_settings
    from rodada.infrastructure.duckdb_connection import get_connection
    from rodada.infrastructure.log import log

    settings = get_settings()
    get_connection()  # valida conexao e cria o schema no startup
    log(f"DuckDB pronto em {settings.duckdb_path}")
    if not settings.admin_api_key:
        log("ADMIN_API_KEY ausente: rotas /api/admin respondem 503", "aviso")
    if not settings.credencial_hmac_salt:
        log("CREDENCIAL_HMAC_SALT ausente: credenciais gravadas com HMAC sem salt", "aviso")
    yield


app = FastAPI(
    title="Rodada de Negocios API",
    debug=False,  # NUNCA True em producao
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url=None,
)


@app.middleware("http")
async def add_security_headers(request: Request, call_next: object) -> Response:
    response = await call_next(request)  # type: ignore[misc]
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return response  # type: ignore[return-value]


app.add_middleware(RateLimitMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:5173"],
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)

from rodada.interfaces.api.routes.admin_routes import router as admin_router  # noqa: E402
from rodada.interfaces.api.routes.configuracao_routes import router as configuracao_router  # noqa: E402
from rodada.interfaces.api.routes.empresa_routes import router as empresa_router  # noqa: E402
from rodada.interfaces.api.routes.export_routes import router as export_router  # noqa: E402
from rodada.interfaces.api.routes.negociacao_routes import router as negociacao_router  # noqa: E402
from rodada.interfaces.api.routes.stats_routes import router as stats_router  # noqa: E402

app.include_router(empresa_router, prefix="/api")
app.include_router(negociacao_router, prefix="/api")
app.include_router(configuracao_router, prefix="/api")
app.include_router(admin_router, prefix="/api")
app.include_router(stats_router, prefix="/api")
app.include_router(export_router, prefix="/api")

# rodada/interfaces/api/middleware/rate_limit.py
#
# Janela deslizante de 60 s por IP. API_RATE_LIMIT_PER_MINUTE=0 desliga o
# limite; requests com X-Admin-Key valida nunca entram na janela.
from __future__ import annotations

import secrets
import time
from collections import defaultdict, deque

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from rodada.infrastructure.config import Settings, get_settings

JANELA_SEGUNDOS = 60.0

_EXCEDIDO = '{"detail": "Rate limit excedido. Tente novamente em 1 minuto."}'


def _e_admin(request: Request, settings: Settings) -> bool:
    chave = request.headers.get("X-Admin-Key")
    return bool(chave and settings.admin_api_key and secrets.compare_digest(chave, settings.admin_api_key))


class RateLimitMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: object) -> None:
        super().__init__(app)  # type: ignore[arg-type]
        self._janelas: defaultdict[str, deque[float]] = defaultdict(deque)
        self._ultima_varredura = time.monotonic()

    def _varrer(self, agora: float) -> None:
        """Descarta IPs cujo ultimo request ja saiu da janela."""
        expirados = [
            ip for ip, janela in self._janelas.items()
            if not janela or agora - janela[-1] >= JANELA_SEGUNDOS
        ]
        for ip in expirados:
            del self._janelas[ip]
        self._ultima_varredura = agora

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        settings = get_settings()
        limite = settings.rate_limit_per_minute
        if limite == 0 or _e_admin(request, settings):
            return await call_next(request)

        ip = request.client.host if request.client else "unknown"
        agora = time.monotonic()
        if agora - self._ultima_varredura >= JANELA_SEGUNDOS:
            self._varrer(agora)

        janela = self._janelas[ip]
        while janela and agora - janela[0] >= JANELA_SEGUNDOS:
            janela.popleft()

        if len(janela) >= limite:
            return Response(content=_EXCEDIDO, status_code=429, media_type="application/json")

        janela.append(agora)
        return await call_next(request)

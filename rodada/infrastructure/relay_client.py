# rodada/infrastructure/relay_client.py
#
# Fire-and-forget webhook relay for newly registered negotiations.
#
# Design decisions:
#   - One POST per record with a JSON body; redirects are followed (spreadsheet
#     script endpoints answer POST with a 302).
#   - Any httpx.HTTPError is logged and swallowed. The relay never retries and
#     never reaches the end user.
#   - The transport is injectable so tests can use httpx.MockTransport.
from __future__ import annotations

from collections.abc import Mapping

import httpx

from rodada.infrastructure.log import log


class RelayClient:
    def __init__(
        self,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._timeout = timeout
        self._transport = transport

    def enviar(self, url: str, payload: Mapping[str, object]) -> bool:
        """POST payload to url. Returns True on 2xx, False on any HTTP error."""
        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                response = client.post(url, json=dict(payload), follow_redirects=True)
                response.raise_for_status()
        except httpx.HTTPError as err:
            log(f"Falha ao enviar negociacao {payload.get('id')} ao relay: {err}", "erro")
            return False
        return True

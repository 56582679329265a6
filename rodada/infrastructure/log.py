# rodada/infrastructure/log.py
#
# Service log lines for startup, relay failures and admin removals.
#
# Format: "[rodada mm:ss] NIVEL mensagem", elapsed since process start.
# Plain stdout with flush; no logging framework.
from __future__ import annotations

import sys
import time
from typing import Literal

Nivel = Literal["info", "aviso", "erro"]

_inicio = time.monotonic()


def log(mensagem: str, nivel: Nivel = "info") -> None:
    minutos, segundos = divmod(int(time.monotonic() - _inicio), 60)
    sys.stdout.write(f"[rodada {minutos:02d}:{segundos:02d}] {nivel.upper():<5} {mensagem}\n")
    sys.stdout.flush()

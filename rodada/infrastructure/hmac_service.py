# rodada/infrastructure/hmac_service.py
#
# HMAC-SHA256 digests for company credential secrets.
#
# Design decisions:
#   - The plain secret is never stored; the empresa table holds only the
#     64-char lowercase hex digest.
#   - Salt is read from Settings via get_settings(), never hard-coded.
#   - Verification uses hmac.compare_digest.
#
# Invariants:
#   - Same (senha, salt) always produces the same output.
#   - An empty salt ("") still produces a valid HMAC; it is just insecure.
from __future__ import annotations

import hashlib
import hmac as _hmac_stdlib

from rodada.infrastructure.config import get_settings


def hmac_sha256_credencial(senha: str) -> str:
    """Compute HMAC-SHA256 of a credential secret using the application salt.

    Returns:
        64-character lowercase hex string (256-bit HMAC output).
    """
    salt = get_settings().credencial_hmac_salt
    return _hmac_stdlib.new(
        salt.encode("utf-8"),
        senha.encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()


def verificar_credencial(senha: str, senha_hash: str) -> bool:
    if not senha_hash:
        return False
    return _hmac_stdlib.compare_digest(hmac_sha256_credencial(senha), senha_hash)

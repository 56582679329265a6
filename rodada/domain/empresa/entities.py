from __future__ import annotations

from dataclasses import dataclass

from .enums import Papel
from .value_objects import NomeFantasia


@dataclass(frozen=True)
class Empresa:
    """Aggregate Root do diretorio. CNPJ e a chave natural; papel nao muda
    depois do cadastro. senha_hash guarda o HMAC da credencial, nunca o texto."""

    cnpj: str
    nome_fantasia: NomeFantasia
    papel: Papel
    telefone: str = ""
    email: str = ""
    senha_hash: str = ""

    def __post_init__(self) -> None:
        if not self.cnpj.strip():
            raise ValueError("Empresa exige CNPJ nao-vazio")

    @property
    def is_associado(self) -> bool:
        return self.papel is Papel.ASSOCIADO

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from rodada.domain.empresa.entities import Empresa


class EmpresaCadastroDTO(BaseModel):
    cnpj: str = Field(min_length=1, max_length=32)
    nome_fantasia: str = Field(min_length=1, max_length=200)
    telefone: str = ""
    email: str = ""
    senha: str = Field(min_length=1)
    papel: Literal["associate", "supplier"]


class EmpresaAtualizacaoDTO(BaseModel):
    nome_fantasia: str = Field(min_length=1, max_length=200)
    telefone: str = ""
    email: str = ""
    senha: str | None = None
    papel: Literal["associate", "supplier"] | None = None


class AlteracaoSenhaDTO(BaseModel):
    senha_atual: str
    nova_senha: str = Field(min_length=1)


class LoginDTO(BaseModel):
    cnpj: str
    senha: str


class EmpresaDTO(BaseModel):
    cnpj: str
    nome_fantasia: str
    papel: str
    papel_rotulo: str
    telefone: str
    email: str

    @classmethod
    def from_domain(cls, empresa: Empresa) -> EmpresaDTO:
        return cls(
            cnpj=empresa.cnpj,
            nome_fantasia=empresa.nome_fantasia.valor,
            papel=empresa.papel.value,
            papel_rotulo=empresa.papel.rotulo,
            telefone=empresa.telefone,
            email=empresa.email,
        )

from __future__ import annotations

from rodada.domain.configuracao.repository import ConfiguracaoRepository
from rodada.domain.empresa.entities import Empresa
from rodada.domain.empresa.enums import Papel
from rodada.domain.empresa.repository import EmpresaRepository
from rodada.domain.empresa.value_objects import NomeFantasia, normalizar_cnpj
from rodada.domain.negociacao.repository import NegociacaoRepository
from rodada.infrastructure.hmac_service import hmac_sha256_credencial, verificar_credencial
from rodada.infrastructure.log import log

from ..errors import (
    CadastroBloqueadoError,
    CredenciaisInvalidasError,
    EmpresaJaCadastradaError,
    EmpresaNaoEncontradaError,
    PapelImutavelError,
)
from .busca_service import filtrar_empresas
from .cobertura_service import Cobertura, calcular_cobertura


class EmpresaService:
    """Imperative Shell do diretorio: le snapshots, aplica as regras do
    evento e grava pelo repositorio."""

    def __init__(
        self,
        empresa_repo: EmpresaRepository,
        negociacao_repo: NegociacaoRepository,
        configuracao_repo: ConfiguracaoRepository,
    ) -> None:
        self._empresa_repo = empresa_repo
        self._negociacao_repo = negociacao_repo
        self._configuracao_repo = configuracao_repo

    def cadastrar(
        self,
        cnpj: str,
        nome_fantasia: str,
        papel: Papel,
        senha: str,
        telefone: str = "",
        email: str = "",
    ) -> Empresa:
        """Autocadastro, sujeito ao portao do papel na configuracao."""
        configuracao = self._configuracao_repo.carregar()
        aberto = (
            configuracao.permitir_associado if papel is Papel.ASSOCIADO
            else configuracao.permitir_fornecedor
        )
        if not aberto:
            raise CadastroBloqueadoError(f"Cadastro de {papel.rotulo.lower()}s encerrado")
        return self.cadastrar_admin(cnpj, nome_fantasia, papel, senha, telefone, email)

    def cadastrar_admin(
        self,
        cnpj: str,
        nome_fantasia: str,
        papel: Papel,
        senha: str,
        telefone: str = "",
        email: str = "",
    ) -> Empresa:
        cnpj = normalizar_cnpj(cnpj)
        if self._empresa_repo.buscar_por_cnpj(cnpj) is not None:
            raise EmpresaJaCadastradaError(cnpj)

        empresa = Empresa(
            cnpj=cnpj,
            nome_fantasia=NomeFantasia(nome_fantasia),
            papel=papel,
            telefone=telefone.strip(),
            email=email.strip(),
            senha_hash=hmac_sha256_credencial(senha),
        )
        self._empresa_repo.salvar(empresa)
        return empresa

    def atualizar(
        self,
        cnpj: str,
        nome_fantasia: str,
        telefone: str = "",
        email: str = "",
        senha: str | None = None,
        papel: Papel | None = None,
    ) -> Empresa:
        """Senha vazia ou None mantem a credencial atual. O papel nao muda."""
        atual = self.buscar(cnpj)
        if papel is not None and papel is not atual.papel:
            raise PapelImutavelError("O papel da empresa nao pode ser alterado")

        empresa = Empresa(
            cnpj=atual.cnpj,
            nome_fantasia=NomeFantasia(nome_fantasia),
            papel=atual.papel,
            telefone=telefone.strip(),
            email=email.strip(),
            senha_hash=hmac_sha256_credencial(senha) if senha else atual.senha_hash,
        )
        self._empresa_repo.salvar(empresa)
        return empresa

    def remover(self, cnpj: str) -> int:
        """Remove a empresa e suas negociacoes. Retorna quantas negociacoes sairam."""
        empresa = self.buscar(cnpj)
        removidas = self._empresa_repo.remover(empresa.cnpj)
        log(f"Empresa {empresa.cnpj} removida com {removidas} negociacao(oes)")
        return removidas

    def buscar(self, cnpj: str) -> Empresa:
        cnpj = normalizar_cnpj(cnpj)
        empresa = self._empresa_repo.buscar_por_cnpj(cnpj)
        if empresa is None:
            raise EmpresaNaoEncontradaError(cnpj)
        return empresa

    def listar(self, papel: Papel | None = None, termo: str = "") -> list[Empresa]:
        return filtrar_empresas(self._empresa_repo.listar(), papel, termo)

    def autenticar(self, cnpj: str, senha: str) -> Empresa:
        empresa = self._empresa_repo.buscar_por_cnpj(normalizar_cnpj(cnpj))
        if empresa is None or not verificar_credencial(senha, empresa.senha_hash):
            raise CredenciaisInvalidasError("CNPJ ou Senha incorretos.")
        return empresa

    def alterar_senha(self, cnpj: str, senha_atual: str, nova_senha: str) -> None:
        empresa = self.autenticar(cnpj, senha_atual)
        self.atualizar(
            empresa.cnpj,
            empresa.nome_fantasia.valor,
            empresa.telefone,
            empresa.email,
            senha=nova_senha,
        )

    def cobertura(self, cnpj: str) -> Cobertura:
        empresa = self.buscar(cnpj)
        return calcular_cobertura(
            empresa,
            self._empresa_repo.listar(),
            self._negociacao_repo.listar(),
        )

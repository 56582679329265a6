from __future__ import annotations

import uuid
from decimal import Decimal

from rodada.domain.configuracao.repository import ConfiguracaoRepository
from rodada.domain.empresa.entities import Empresa
from rodada.domain.empresa.enums import Papel
from rodada.domain.empresa.repository import EmpresaRepository
from rodada.domain.negociacao.entities import Negociacao
from rodada.domain.negociacao.errors import NegociacaoNaoEncontradaError
from rodada.domain.negociacao.repository import NegociacaoRepository
from rodada.domain.negociacao.services import corrigir_negociacao, registrar_negociacao
from rodada.infrastructure.log import log

from ..dtos.relay_dto import RelayPayloadDTO
from ..errors import NegociacoesBloqueadasError, PapelNaoPermitidoError
from .busca_service import filtrar_negociacoes
from .cobertura_service import ResumoEvento, calcular_resumo_evento


class NegociacaoService:
    """Imperative Shell do ledger: carrega snapshots, chama o Pure Core
    (rodada.domain.negociacao.services) e persiste o resultado."""

    def __init__(
        self,
        empresa_repo: EmpresaRepository,
        negociacao_repo: NegociacaoRepository,
        configuracao_repo: ConfiguracaoRepository,
    ) -> None:
        self._empresa_repo = empresa_repo
        self._negociacao_repo = negociacao_repo
        self._configuracao_repo = configuracao_repo

    def registrar(
        self,
        associado: Empresa,
        fornecedor_cnpj: str,
        valor: Decimal | None,
        notas: str = "",
    ) -> Negociacao:
        """Lancamento do proprio associado, sujeito ao portao de negociacoes."""
        if not associado.is_associado:
            raise PapelNaoPermitidoError("Apenas associados lancam negociacoes.")
        if not self._configuracao_repo.carregar().permitir_negociacoes:
            raise NegociacoesBloqueadasError(
                "O lancamento de novas negociacoes esta bloqueado pela organizacao."
            )
        return self.registrar_admin(associado.cnpj, fornecedor_cnpj, valor, notas)

    def registrar_admin(
        self,
        associado_cnpj: str,
        fornecedor_cnpj: str,
        valor: Decimal | None,
        notas: str = "",
    ) -> Negociacao:
        """Mesmas invariantes do autoatendimento; apenas o portao nao se aplica."""
        negociacao = registrar_negociacao(
            associado_cnpj,
            fornecedor_cnpj,
            valor,
            notas,
            self._empresa_repo.listar(),
            self._negociacao_repo.listar(),
        )
        self._negociacao_repo.salvar(negociacao)
        return negociacao

    def corrigir(
        self,
        negociacao_id: uuid.UUID,
        valor: Decimal | None,
        notas: str = "",
    ) -> Negociacao:
        negociacao = corrigir_negociacao(negociacao_id, valor, notas, self._negociacao_repo.listar())
        self._negociacao_repo.salvar(negociacao)
        return negociacao

    def remover(self, negociacao_id: uuid.UUID) -> None:
        if not self._negociacao_repo.remover(negociacao_id):
            raise NegociacaoNaoEncontradaError(negociacao_id)
        log(f"Negociacao {negociacao_id} removida")

    def listar(self, papel: Papel | None = None, termo: str = "") -> list[Negociacao]:
        return filtrar_negociacoes(self._negociacao_repo.listar(), self._empresa_repo.listar(), papel, termo)

    def snapshot(self) -> tuple[list[Empresa], list[Negociacao]]:
        return self._empresa_repo.listar(), self._negociacao_repo.listar()

    def nomes(self) -> dict[str, str]:
        return {e.cnpj: e.nome_fantasia.valor for e in self._empresa_repo.listar()}

    def resumo_evento(self) -> ResumoEvento:
        return calcular_resumo_evento(*self.snapshot())

    def preparar_relay(self, negociacao: Negociacao) -> tuple[str, dict[str, object]] | None:
        """URL e corpo para o relay, ou None quando nao ha relay configurado."""
        url = self._configuracao_repo.carregar().relay_url
        if not url:
            return None
        payload = RelayPayloadDTO.from_domain(negociacao, self.nomes())
        return url, payload.model_dump()

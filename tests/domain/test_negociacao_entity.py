import uuid
from datetime import datetime
from decimal import Decimal

import pytest

from rodada.domain.negociacao.entities import Negociacao
from rodada.domain.negociacao.value_objects import VALOR_MAXIMO, ValorNegociacao


def test_valor_negociacao_quantizado_em_centavos():
    assert ValorNegociacao(Decimal("10.5")).valor == Decimal("10.50")
    assert str(ValorNegociacao(Decimal("10.5")).valor) == "10.50"


def test_valor_negociacao_negativo_invalido():
    with pytest.raises(ValueError, match="negativo"):
        ValorNegociacao(Decimal("-1"))


def test_valor_negociacao_zero_valido_mas_nao_positivo():
    vn = ValorNegociacao(Decimal("0"))
    assert vn.valor == Decimal("0")
    assert not vn.positivo


def test_valor_negociacao_acima_do_maximo_invalido():
    assert ValorNegociacao(VALOR_MAXIMO).valor == Decimal("9999999999999999.99")
    with pytest.raises(ValueError, match="maximo"):
        ValorNegociacao(Decimal("10000000000000000"))
    with pytest.raises(ValueError, match="maximo"):
        ValorNegociacao(Decimal("9999999999999999.995"))


def test_valor_negociacao_nan_invalido():
    with pytest.raises(ValueError, match="finito"):
        ValorNegociacao(Decimal("NaN"))


def test_negociacao_sem_acordo_vale_zero():
    n = Negociacao(
        id=uuid.uuid4(),
        associado_cnpj="A",
        fornecedor_cnpj="X",
        valor=None,
        notas="so conversamos",
        criado_em=datetime(2026, 5, 1, 10, 0),
    )
    assert n.sem_acordo
    assert n.valor_ou_zero == Decimal("0")
    assert n.par == ("A", "X")
    assert n.envolve("A") and n.envolve("X")
    assert not n.envolve("Y")

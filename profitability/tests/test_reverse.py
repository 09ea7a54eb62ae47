import pytest

from profitability import (
    ChannelInput,
    UnreachableMarginError,
    calculate,
    price_for_margin,
    suggest_prices,
)


def _fba_input() -> ChannelInput:
    return ChannelInput(
        cost_item=20.0,
        pack_cost=2.0,
        inbound_freight=3.0,
        prep_center=1.0,
        commission_pct=15.0,
        ads_pct=5.0,
    )


def test_price_for_target_margin():
    """Testa o preço necessário para 30% de margem no Amazon FBA"""
    price = price_for_margin(_fba_input(), 30.0)

    assert price == pytest.approx(52.0)


def test_margin_reaching_100_percent_is_unreachable():
    """Testa se taxas + margem = 100% levanta erro em vez de preço infinito"""
    with pytest.raises(UnreachableMarginError) as exc_info:
        price_for_margin(_fba_input(), 80.0)

    assert exc_info.value.percent_total == pytest.approx(20.0)
    assert exc_info.value.percent_sum == pytest.approx(100.0)


def test_margin_above_100_percent_is_unreachable():
    """Testa se taxas + margem > 100% levanta erro"""
    with pytest.raises(UnreachableMarginError):
        price_for_margin(_fba_input(), 60.0, tax_percent=25.0)


def test_margin_just_below_limit_is_reachable():
    """Testa se margem logo abaixo do limite tem solução positiva"""
    price = price_for_margin(_fba_input(), 79.0)

    assert price == pytest.approx(26.0 / 0.01)


def test_tax_counts_in_percent_total():
    """Testa se o imposto entra na soma dos percentuais"""
    price = price_for_margin(_fba_input(), 30.0, tax_percent=10.0)

    assert price == pytest.approx(26.0 / (1 - 60.0 / 100))


def test_zero_unit_cost_prices_at_zero():
    """Testa se custos unitários zerados resultam em preço 0"""
    data = ChannelInput(commission_pct=12.0)

    assert price_for_margin(data, 0.0) == 0.0
    assert price_for_margin(data, 30.0) == 0.0


def test_forward_reverse_round_trip():
    """Testa se o preço calculado devolve a margem alvo no cálculo direto"""
    inputs = [
        _fba_input(),
        ChannelInput(cost_item=10.0, outbound_freight=7.5, commission_pct=14.0, ads_pct=3.0),
        ChannelInput(cost_item=100.0, pack_cost=4.0, gateway_pct=3.5, other_pct=2.0, fixed_fee=5.0),
        ChannelInput(cost_item=8.0, outbound_freight=12.0, flex_revenue=3.0, commission_pct=14.0),
    ]

    for data in inputs:
        for target in (0.0, 15.0, 42.5):
            price = price_for_margin(data, target, tax_percent=6.0)
            result = calculate(data.model_copy(update={"price": price}), tax_percent=6.0)
            assert result.margin == pytest.approx(target, abs=1e-6)


def test_suggest_prices_default_presets():
    """Testa as sugestões padrão de 20/30/40% de margem"""
    suggestions = suggest_prices(_fba_input())

    assert [s.target_margin for s in suggestions] == [20.0, 30.0, 40.0]
    assert all(s.reachable for s in suggestions)
    assert suggestions[1].price == pytest.approx(52.0)
    assert suggestions[1].result.margin == pytest.approx(30.0)

    prices = [s.price for s in suggestions]
    assert prices == sorted(prices)


def test_suggest_prices_flags_unreachable_margins():
    """Testa se margens inatingíveis voltam marcadas, sem erro"""
    suggestions = suggest_prices(_fba_input(), tax_percent=30.0, margins=[20.0, 50.0, 70.0])

    assert suggestions[0].reachable is True
    assert suggestions[1].reachable is False
    assert suggestions[1].price is None
    assert suggestions[1].percent_sum == pytest.approx(100.0)
    assert suggestions[2].reachable is False

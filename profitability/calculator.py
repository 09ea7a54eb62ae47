"""
Cálculo de lucratividade por canal de venda.

Todas as funções são puras: não leem nem alteram estado fora dos
argumentos, então podem ser chamadas em paralelo sem travas.

Convenções:
- Percentuais (comissão, ads, outros, gateway, imposto) incidem sobre o
  PREÇO DE VENDA, nunca sobre o custo.
- Divisão por zero (preço ou capital investido zerados) resulta em 0.
"""
import logging
import math
from typing import Dict, Iterable, List, Mapping, Optional

from profitability.channels import BaseChannel
from profitability.interface import (
    ChannelInput,
    ChannelResult,
    ChannelType,
    CostBreakdown,
    PriceSuggestion,
    ProfitabilityAnalysis,
    UnreachableMarginError,
)
from profitability.product import Product

logger = logging.getLogger(__name__)

DEFAULT_MARGIN_PRESETS = (20.0, 30.0, 40.0)


def safe_div(numerator: float, denominator: float, default: float = 0.0) -> float:
    """Divisão protegida: denominador zero ou resultado não finito devolve `default`"""
    if denominator == 0:
        return default
    result = numerator / denominator
    if not math.isfinite(result):
        return default
    return result


def percent_cost_total(data: ChannelInput, tax_percent: float = 0.0) -> float:
    """Soma dos percentuais que incidem sobre o preço (taxas + imposto)"""
    return data.commission_pct + data.ads_pct + data.other_pct + data.gateway_pct + tax_percent


def unit_cost_total(data: ChannelInput) -> float:
    """
    Custos fixos por unidade. A receita Flex é abatida e o total pode
    ficar negativo (subsídio); não há piso em zero.
    """
    return (
        data.cost_item
        + data.pack_cost
        + data.inbound_freight
        + data.outbound_freight
        + data.prep_center
        + data.fixed_fee
        + data.other_value
        - data.flex_revenue
    )


def invested_cost(data: ChannelInput) -> float:
    """Capital em risco antes da venda (não inclui embalagem nem taxas contingentes)"""
    return data.cost_item + data.inbound_freight + data.prep_center


def calculate(data: ChannelInput, tax_percent: float = 0.0) -> ChannelResult:
    """
    Calcula lucro, margem e ROI para o preço informado.

    Args:
        data: Entrada normalizada do canal
        tax_percent: Imposto global (% sobre o preço)

    Returns:
        ChannelResult sem arredondamento (use .rounded() para exibir)
    """
    price = data.price

    percent_costs = price * percent_cost_total(data, tax_percent) / 100
    unit_costs = unit_cost_total(data)
    total_cost = percent_costs + unit_costs

    profit = price - total_cost
    margin = safe_div(profit, price) * 100 if price > 0 else 0.0

    invested = invested_cost(data)
    roi = safe_div(profit, invested) * 100 if invested > 0 else 0.0

    breakdown = CostBreakdown(
        cost_item=data.cost_item,
        pack_cost=data.pack_cost,
        inbound_freight=data.inbound_freight,
        outbound_freight=data.outbound_freight,
        prep_center=data.prep_center,
        fixed_fee=data.fixed_fee,
        other_value=data.other_value,
        commission=price * data.commission_pct / 100,
        ads=price * data.ads_pct / 100,
        other=price * data.other_pct / 100,
        gateway=price * data.gateway_pct / 100,
        tax=price * tax_percent / 100,
        flex_revenue=data.flex_revenue,
    )

    return ChannelResult(
        profit=profit,
        margin=margin,
        roi=roi,
        price=price,
        unit_cost_total=unit_costs,
        percent_cost_total=percent_costs,
        total_cost=total_cost,
        invested_cost=invested,
        breakdown=breakdown,
    )


def price_for_margin(data: ChannelInput, target_margin: float, tax_percent: float = 0.0) -> float:
    """
    Resolve o preço que atinge a margem alvo.

    Preço = Custos unitários / (1 - (%taxas + %imposto + %margem) / 100)

    Args:
        data: Entrada normalizada (o campo price é ignorado)
        target_margin: Margem desejada em %
        tax_percent: Imposto global (% sobre o preço)

    Raises:
        UnreachableMarginError: Se taxas + margem >= 100%
    """
    percent_total = percent_cost_total(data, tax_percent)
    denominator = 1 - (percent_total + target_margin) / 100

    if denominator <= 0:
        logger.warning(
            f"Margem inatingível: taxas {percent_total:.2f}% + margem {target_margin:.2f}% >= 100%"
        )
        raise UnreachableMarginError(percent_total, target_margin)

    return safe_div(unit_cost_total(data), denominator)


def suggest_prices(
        data: ChannelInput,
        tax_percent: float = 0.0,
        margins: Optional[Iterable[float]] = None,
) -> List[PriceSuggestion]:
    """
    Preços sugeridos para margens predefinidas (padrão 20/30/40%).
    Margens inatingíveis voltam com reachable=False em vez de erro.
    """
    suggestions = []
    percent_total = percent_cost_total(data, tax_percent)

    for margin in margins if margins is not None else DEFAULT_MARGIN_PRESETS:
        try:
            price = price_for_margin(data, margin, tax_percent)
        except UnreachableMarginError as e:
            suggestions.append(PriceSuggestion(
                target_margin=margin,
                reachable=False,
                percent_sum=e.percent_sum,
            ))
            continue

        result = calculate(data.model_copy(update={"price": price}), tax_percent)
        suggestions.append(PriceSuggestion(
            target_margin=margin,
            reachable=True,
            percent_sum=percent_total + margin,
            price=price,
            result=result,
        ))

    return suggestions


def calculate_channel(product: Product, channel: BaseChannel, price: Optional[float] = None) -> ChannelResult:
    """Calcula um canal a partir do produto (ignora o flag enabled)"""
    return calculate(channel.to_input(product, price), product.tax_percent)


def calculate_all(
        product: Product,
        channels: Optional[Mapping[ChannelType, BaseChannel]] = None,
) -> Dict[ChannelType, ChannelResult]:
    """
    Calcula todos os canais habilitados do produto.

    Canais desabilitados não aparecem no resultado (nem zerados), para
    distinguir "não configurado" de "configurado e com prejuízo".
    """
    if channels is None:
        channels = product.channels

    # Chave pelo tipo do próprio canal, não pela chave recebida no mapa
    results = {
        ChannelType(channel.channel_type): calculate_channel(product, channel)
        for channel in channels.values()
        if channel.enabled
    }

    logger.debug(f"Lucratividade calculada para {len(results)} de {len(channels)} canais")

    return results


def analyze_product(
        product: Product,
        channels: Optional[Mapping[ChannelType, BaseChannel]] = None,
) -> ProfitabilityAnalysis:
    """Resumo consolidado: melhor/pior canal por margem, média e receita total"""
    if channels is None:
        channels = product.channels

    results = calculate_all(product, channels)

    if not results:
        return ProfitabilityAnalysis(
            total_channels=len(channels),
            active_channels=0,
            profitable_channels=0,
        )

    best = max(results, key=lambda key: results[key].margin)
    worst = min(results, key=lambda key: results[key].margin)

    return ProfitabilityAnalysis(
        total_channels=len(channels),
        active_channels=len(results),
        profitable_channels=sum(1 for result in results.values() if result.profit > 0),
        best_channel=best,
        worst_channel=worst,
        average_margin=safe_div(sum(r.margin for r in results.values()), len(results)),
        total_revenue=sum(r.price for r in results.values()),
        results=results,
    )


def validate_channel_input(data: ChannelInput, tax_percent: float = 0.0) -> List[str]:
    """
    Validação de entrada para formulários/API. O cálculo não chama esta
    função: valores negativos são responsabilidade de quem chama.

    Returns:
        Lista de mensagens de erro (vazia quando válido)
    """
    errors = []

    if data.price <= 0:
        errors.append("price deve ser maior que zero")

    if data.cost_item < 0:
        errors.append("cost_item não pode ser negativo")

    if tax_percent < 0 or tax_percent > 100:
        errors.append("tax_percent deve estar entre 0% e 100%")

    for field in ("commission_pct", "ads_pct", "other_pct", "gateway_pct"):
        if getattr(data, field) < 0:
            errors.append(f"{field} não pode ser negativo")

    for field in ("pack_cost", "fixed_fee", "other_value", "inbound_freight",
                  "outbound_freight", "prep_center", "flex_revenue"):
        if getattr(data, field) < 0:
            errors.append(f"{field} não pode ser negativo")

    return errors

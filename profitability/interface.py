import math
import re
from enum import Enum
from typing import Annotated, Any, Dict, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


class ChannelType(str, Enum):
    """Tipos de canal de venda suportados pela calculadora"""
    SITE = "site"
    AMAZON_FBM = "amazon_fbm"
    AMAZON_FBA_ONSITE = "amazon_fba_onsite"
    AMAZON_DBA = "amazon_dba"
    AMAZON_FBA = "amazon_fba"
    ML_ME1 = "ml_me1"
    ML_FLEX = "ml_flex"
    ML_ENVIOS = "ml_envios"
    ML_FULL = "ml_full"
    SHOPEE = "shopee"
    MAGALU_FULL = "magalu_full"
    MAGALU_ENVIOS = "magalu_envios"
    TIKTOK_SHOP = "tiktok_shop"
    MARKETPLACE_OTHER = "marketplace_other"


class ProfitabilityError(Exception):
    """Base exception para erros da calculadora de lucratividade"""
    pass


class UnsupportedChannelError(ProfitabilityError, ValueError):
    """Tipo de canal desconhecido"""
    pass


class UnreachableMarginError(ProfitabilityError):
    """
    Margem alvo inatingível: a soma dos percentuais sobre o preço
    (taxas + impostos) com a margem desejada chega a 100% ou mais.
    """

    def __init__(self, percent_total: float, target_margin: float):
        self.percent_total = percent_total
        self.target_margin = target_margin
        self.percent_sum = percent_total + target_margin
        super().__init__(
            f"Margem de {target_margin:.2f}% inatingível: taxas somam {percent_total:.2f}% "
            f"e, com a margem, chegam a {self.percent_sum:.2f}% (limite < 100%)"
        )


# "1.234" / "12.345.678": ponto como separador de milhar (sem vírgula decimal)
_THOUSANDS_ONLY = re.compile(r"^-?[1-9]\d{0,2}(\.\d{3})+$")


def parse_value(value: Any) -> Any:
    """
    Converte valores monetários/percentuais em formato brasileiro para float.

    Aceita números, None/"" (-> 0.0) e strings como "R$ 1.234,56" ou "15%".
    Sem vírgula, o ponto é decimal ("12.5" -> 12.5), exceto quando o texto
    segue o agrupamento de milhar ("R$ 1.234" -> 1234.0).
    Strings irreconhecíveis e valores não finitos (NaN, Infinity) levantam
    ValueError (vira erro de validação no pydantic).
    """
    if value is None:
        return 0.0
    if isinstance(value, bool):
        raise ValueError("valor booleano não é numérico")
    if isinstance(value, (int, float)):
        try:
            result = float(value)
        except OverflowError:
            raise ValueError(f"valor fora do intervalo: {value!r}")
    elif isinstance(value, str):
        clean = value.replace("R$", "").replace("%", "").replace(" ", "").strip()
        if not clean:
            return 0.0
        if "," in clean or _THOUSANDS_ONLY.match(clean):
            # "1.234,56" -> "1234.56"
            clean = clean.replace(".", "").replace(",", ".")
        try:
            result = float(clean)
        except ValueError:
            raise ValueError(f"valor inválido: {value!r}")
    else:
        return value

    if not math.isfinite(result):
        raise ValueError(f"valor não finito: {value!r}")
    return result


def profitability_status(margin: float) -> str:
    """Classificação textual da margem (usada nos badges da UI)"""
    if margin >= 30:
        return "Excelente"
    if margin >= 15:
        return "Boa"
    if margin >= 0:
        return "Baixa"
    return "Prejuízo"


# Campos monetários e percentuais: sempre >= 0, aceitam formato brasileiro
Money = Annotated[float, BeforeValidator(parse_value), Field(ge=0, allow_inf_nan=False)]
Percent = Annotated[float, BeforeValidator(parse_value), Field(ge=0, allow_inf_nan=False)]


class ChannelInput(BaseModel):
    """
    Projeção normalizada (agnóstica de canal) usada pelo cálculo.
    Campos que não se aplicam a um canal ficam em 0 e são neutros na fórmula.
    """
    model_config = ConfigDict(frozen=True)

    price: float = 0.0
    cost_item: float = 0.0
    pack_cost: float = 0.0
    commission_pct: float = 0.0
    ads_pct: float = 0.0
    other_pct: float = 0.0
    gateway_pct: float = 0.0
    fixed_fee: float = 0.0
    other_value: float = 0.0
    inbound_freight: float = 0.0
    outbound_freight: float = 0.0
    prep_center: float = 0.0
    flex_revenue: float = 0.0


class CostBreakdown(BaseModel):
    """Valores em R$ de cada componente de custo"""
    cost_item: float
    pack_cost: float
    inbound_freight: float
    outbound_freight: float
    prep_center: float
    fixed_fee: float
    other_value: float
    commission: float
    ads: float
    other: float
    gateway: float
    tax: float
    flex_revenue: float  # abatido do custo unitário


class ChannelResult(BaseModel):
    """Resultado do cálculo de lucratividade de um canal"""
    profit: float
    margin: float  # % sobre o preço de venda
    roi: float     # % sobre o capital investido
    price: float = 0.0
    unit_cost_total: float = 0.0
    percent_cost_total: float = 0.0
    total_cost: float = 0.0
    invested_cost: float = 0.0
    breakdown: Optional[CostBreakdown] = None

    @property
    def status(self) -> str:
        return profitability_status(self.margin)

    def rounded(self, places: int = 2) -> "ChannelResult":
        """Cópia arredondada para exibição (o cálculo interno não arredonda)"""
        data = {
            key: round(value, places)
            for key, value in self.model_dump(exclude={"breakdown"}).items()
        }
        if self.breakdown is not None:
            data["breakdown"] = CostBreakdown(
                **{key: round(value, places) for key, value in self.breakdown.model_dump().items()}
            )
        return ChannelResult(**data)


class PriceSuggestion(BaseModel):
    """Preço sugerido para uma margem alvo"""
    target_margin: float
    reachable: bool
    percent_sum: float
    price: Optional[float] = None
    result: Optional[ChannelResult] = None


class ProfitabilityAnalysis(BaseModel):
    """Resumo de lucratividade de um produto em todos os canais"""
    total_channels: int
    active_channels: int
    profitable_channels: int
    best_channel: Optional[ChannelType] = None
    worst_channel: Optional[ChannelType] = None
    average_margin: float = 0.0
    total_revenue: float = 0.0
    results: Dict[ChannelType, ChannelResult] = Field(default_factory=dict)

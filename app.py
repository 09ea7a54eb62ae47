# -*- coding: utf-8 -*-
import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from config import settings
# Importar módulo de lucratividade
from profitability import (
    AnyChannel,
    ChannelFactory,
    ChannelInput,
    Product,
    UnreachableMarginError,
    UnsupportedChannelError,
    analyze_product,
    calculate_channel,
    price_for_margin,
    suggest_prices,
    validate_channel_input,
)

# Configuração de logging estruturado
logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Channel Profitability API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _with_default_tax(product: Product) -> Product:
    """Aplica o imposto padrão configurado quando o produto não informa"""
    if "tax_percent" in product.model_fields_set:
        return product
    return product.model_copy(update={"tax_percent": settings.default_tax_percent})


# ============================================================================
# PROFITABILITY ENDPOINTS
# ============================================================================

class CalculateRequest(BaseModel):
    """Request para cálculo de lucratividade em um canal"""
    product: Product = Field(..., description="Base de custo do produto")
    channel: AnyChannel = Field(..., description="Configuração do canal (discriminada por channel_type)")
    price: Optional[float] = Field(None, ge=0, allow_inf_nan=False, description="Preço alternativo (padrão: sale_price do canal)")


class CalculateResponse(BaseModel):
    channel_type: str
    result: Dict[str, Any]
    status: str


class CalculateAllRequest(BaseModel):
    """Request para cálculo de todos os canais habilitados do produto"""
    product: Product


class PriceForMarginRequest(BaseModel):
    product: Product
    channel: AnyChannel
    target_margin: float = Field(..., description="Margem desejada em %")


class SuggestPricesRequest(BaseModel):
    product: Product
    channel: AnyChannel
    margins: Optional[List[float]] = Field(None, description="Margens em % (padrão: presets configurados)")


class ValidateRequest(BaseModel):
    """Request para validação de entrada (aceita valores inválidos para reportá-los)"""
    channel_type: str
    price: float
    cost_item: float
    pack_cost: float = 0.0
    tax_percent: float = 0.0
    commission_pct: float = 0.0
    ads_pct: float = 0.0
    other_pct: float = 0.0
    fixed_fee: float = 0.0
    other_value: float = 0.0
    # Específicos de canal: só podem ser diferentes de zero onde se aplicam
    gateway_pct: float = 0.0
    inbound_freight: float = 0.0
    outbound_freight: float = 0.0
    prep_center: float = 0.0
    flex_revenue: float = 0.0


CHANNEL_SPECIFIC_FIELDS = ("gateway_pct", "inbound_freight", "outbound_freight", "prep_center", "flex_revenue")


@app.get("/profitability/channels")
async def profitability_channels():
    """
    Lista canais suportados com nome, comissão padrão e campos editáveis.
    """
    supported_channels = ChannelFactory.get_supported_channels()

    return {
        "supported_channels": supported_channels,
        "channels": {channel: ChannelFactory.describe(channel) for channel in supported_channels},
    }


@app.get("/profitability/channels/{channel_type}/defaults")
async def profitability_channel_defaults(channel_type: str):
    """
    Retorna a configuração padrão (nova) de um canal.

    Raises:
        422: Canal não suportado
    """
    try:
        return ChannelFactory.defaults_for(channel_type).model_dump()
    except UnsupportedChannelError as e:
        raise HTTPException(
            status_code=422,
            detail={
                "message": str(e),
                "supported_channels": ChannelFactory.get_supported_channels()
            }
        )


@app.post("/profitability/calculate", response_model=CalculateResponse)
async def profitability_calculate(request: CalculateRequest):
    """
    Calcula lucro, margem e ROI do produto em um canal.
    O flag enabled do canal não é considerado aqui.
    """
    try:
        product = _with_default_tax(request.product)
        result = calculate_channel(product, request.channel, request.price)

        return CalculateResponse(
            channel_type=request.channel.channel_type,
            result=result.rounded(settings.display_decimals).model_dump(),
            status=result.status,
        )

    except Exception as e:
        logger.exception("Erro ao calcular lucratividade")
        raise HTTPException(
            status_code=500,
            detail={"message": f"Erro ao calcular lucratividade: {str(e)}"}
        )


@app.post("/profitability/calculate-all")
async def profitability_calculate_all(request: CalculateAllRequest):
    """
    Calcula todos os canais habilitados do produto e o resumo consolidado.
    Canais desabilitados não aparecem em "results".
    """
    try:
        product = _with_default_tax(request.product)
        analysis = analyze_product(product)

        results = {
            channel_type.value: {
                **result.rounded(settings.display_decimals).model_dump(),
                "status": result.status,
            }
            for channel_type, result in analysis.results.items()
        }

        return {
            "results": results,
            "analysis": analysis.model_dump(exclude={"results"}, mode="json"),
        }

    except Exception as e:
        logger.exception("Erro ao calcular canais")
        raise HTTPException(
            status_code=500,
            detail={"message": f"Erro ao calcular canais: {str(e)}"}
        )


@app.post("/profitability/price-for-margin")
async def profitability_price_for_margin(request: PriceForMarginRequest):
    """
    Calcula o preço necessário para atingir a margem alvo.

    Raises:
        422: Margem inatingível (taxas + margem >= 100%)
    """
    product = _with_default_tax(request.product)
    data = request.channel.to_input(product)

    try:
        price = price_for_margin(data, request.target_margin, product.tax_percent)
    except UnreachableMarginError as e:
        raise HTTPException(
            status_code=422,
            detail={
                "message": str(e),
                "percent_total": e.percent_total,
                "target_margin": e.target_margin,
                "percent_sum": e.percent_sum,
            }
        )

    return {
        "channel_type": request.channel.channel_type,
        "target_margin": request.target_margin,
        "price": round(price, settings.display_decimals),
    }


@app.post("/profitability/suggest-prices")
async def profitability_suggest_prices(request: SuggestPricesRequest):
    """Preços sugeridos para as margens predefinidas (20/30/40% por padrão)"""
    product = _with_default_tax(request.product)
    data = request.channel.to_input(product)
    margins = request.margins if request.margins is not None else settings.margin_presets

    suggestions = suggest_prices(data, product.tax_percent, margins)

    return {
        "channel_type": request.channel.channel_type,
        "suggestions": [
            {
                "target_margin": s.target_margin,
                "reachable": s.reachable,
                "percent_sum": s.percent_sum,
                "price": round(s.price, settings.display_decimals) if s.price is not None else None,
            }
            for s in suggestions
        ],
    }


@app.post("/profitability/validate")
async def profitability_validate(request: ValidateRequest):
    """
    Valida entradas de precificação.

    Returns:
        200: Válido
        422: Inválido (com lista de erros)
    """
    data = ChannelInput(
        price=request.price,
        cost_item=request.cost_item,
        pack_cost=request.pack_cost,
        commission_pct=request.commission_pct,
        ads_pct=request.ads_pct,
        other_pct=request.other_pct,
        fixed_fee=request.fixed_fee,
        other_value=request.other_value,
        **{field: getattr(request, field) for field in CHANNEL_SPECIFIC_FIELDS},
    )
    errors = validate_channel_input(data, request.tax_percent)

    # Validar channel
    if not ChannelFactory.is_supported(request.channel_type):
        errors.append(
            f"Canal '{request.channel_type}' não suportado. "
            f"Canais disponíveis: {', '.join(ChannelFactory.get_supported_channels())}"
        )
    else:
        editable = ChannelFactory.editable_fields(request.channel_type)
        for field in CHANNEL_SPECIFIC_FIELDS:
            if getattr(request, field) != 0 and field not in editable:
                errors.append(f"{field} não se aplica ao canal '{request.channel_type}'")

    if errors:
        raise HTTPException(
            status_code=422,
            detail={"errors": errors}
        )

    return {"valid": True, "message": "Entrada válida"}


# ========= MAIN PARA RODAR DEBUGANDO =========


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app:app", host="127.0.0.1", port=5002, reload=settings.dev_mode)

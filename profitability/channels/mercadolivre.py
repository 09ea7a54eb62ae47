from typing import Literal

from profitability.interface import Money, Percent
from .base import BaseChannel


class MercadoLivreME1Channel(BaseChannel):
    """Mercado Livre ME1: envio por conta do vendedor, frete cobrado à parte"""

    DISPLAY_NAME = "Mercado Livre ME1"
    DESCRIPTION = "Mercado Envios 1"
    DEFAULT_COMMISSION = 14.0

    channel_type: Literal["ml_me1"] = "ml_me1"
    commission_pct: Percent = DEFAULT_COMMISSION


class MercadoLivreFlexChannel(BaseChannel):
    """
    Mercado Livre Flex.

    Características:
    - Entrega própria no mesmo dia (frete de saída)
    - O ML repassa um valor por entrega (receita Flex), que abate o custo
    """

    DISPLAY_NAME = "Mercado Livre Flex"
    DESCRIPTION = "Mercado Livre Flex"
    DEFAULT_COMMISSION = 14.0

    channel_type: Literal["ml_flex"] = "ml_flex"
    commission_pct: Percent = DEFAULT_COMMISSION
    outbound_freight: Money = 0.0
    # Armazenado positivo, subtraído do custo unitário
    flex_revenue: Money = 0.0


class MercadoLivreEnviosChannel(BaseChannel):
    """Mercado Livre Envios (ME2)"""

    DISPLAY_NAME = "Mercado Livre Envios"
    DESCRIPTION = "Mercado Envios"
    DEFAULT_COMMISSION = 14.0

    channel_type: Literal["ml_envios"] = "ml_envios"
    commission_pct: Percent = DEFAULT_COMMISSION
    outbound_freight: Money = 0.0


class MercadoLivreFullChannel(BaseChannel):
    """Mercado Livre Full: estoque no centro de distribuição do ML"""

    DISPLAY_NAME = "Mercado Livre Full"
    DESCRIPTION = "Mercado Livre Full"
    DEFAULT_COMMISSION = 14.0

    channel_type: Literal["ml_full"] = "ml_full"
    commission_pct: Percent = DEFAULT_COMMISSION
    inbound_freight: Money = 0.0
    prep_center: Money = 0.0

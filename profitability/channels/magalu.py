from typing import Literal

from profitability.interface import Money, Percent
from .base import BaseChannel


class MagaluFullChannel(BaseChannel):
    """Magalu Full: estoque no centro de distribuição do Magazine Luiza"""

    DISPLAY_NAME = "Magalu Full"
    DESCRIPTION = "Fulfillment Magazine Luiza"
    DEFAULT_COMMISSION = 16.0

    channel_type: Literal["magalu_full"] = "magalu_full"
    commission_pct: Percent = DEFAULT_COMMISSION
    inbound_freight: Money = 0.0


class MagaluEnviosChannel(BaseChannel):
    """Magalu Envios: vendedor despacha pela logística Magalu"""

    DISPLAY_NAME = "Magalu Envios"
    DESCRIPTION = "Magalu Entregas"
    DEFAULT_COMMISSION = 16.0

    channel_type: Literal["magalu_envios"] = "magalu_envios"
    commission_pct: Percent = DEFAULT_COMMISSION
    outbound_freight: Money = 0.0

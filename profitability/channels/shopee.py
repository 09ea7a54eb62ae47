from typing import Literal

from profitability.interface import Money, Percent
from .base import BaseChannel


class ShopeeChannel(BaseChannel):
    """
    Shopee.

    Características:
    - Público busca preço baixo
    - Comissão variável por categoria
    - Foco em volume
    """

    DISPLAY_NAME = "Shopee"
    DESCRIPTION = "Shopee"
    DEFAULT_COMMISSION = 12.0

    channel_type: Literal["shopee"] = "shopee"
    commission_pct: Percent = DEFAULT_COMMISSION
    outbound_freight: Money = 0.0

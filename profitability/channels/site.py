from typing import Literal

from profitability.interface import Percent
from .base import BaseChannel


class SiteChannel(BaseChannel):
    """
    Site próprio (e-commerce da marca).

    Características:
    - Sem comissão de marketplace
    - Custo de gateway de pagamento sobre o preço
    - Frete não entra no cálculo (repassado ao cliente)
    """

    DISPLAY_NAME = "Site Próprio"
    DESCRIPTION = "Vendas através do site próprio"
    DEFAULT_COMMISSION = 0.0

    channel_type: Literal["site"] = "site"
    commission_pct: Percent = DEFAULT_COMMISSION
    gateway_pct: Percent = 0.0

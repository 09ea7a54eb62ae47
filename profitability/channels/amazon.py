from typing import Literal

from profitability.interface import Money, Percent
from .base import BaseChannel


class AmazonFBMChannel(BaseChannel):
    """
    Amazon FBM (Fulfilled by Merchant).

    O vendedor armazena e despacha: paga o frete de saída.
    """

    DISPLAY_NAME = "Amazon FBM"
    DESCRIPTION = "Fulfilled by Merchant"
    DEFAULT_COMMISSION = 15.0

    channel_type: Literal["amazon_fbm"] = "amazon_fbm"
    commission_pct: Percent = DEFAULT_COMMISSION
    outbound_freight: Money = 0.0


class AmazonFBAOnSiteChannel(BaseChannel):
    """Amazon FBA On-Site: estoque próprio com coleta pela Amazon"""

    DISPLAY_NAME = "Amazon FBA On-Site"
    DESCRIPTION = "FBA com estoque próprio"
    DEFAULT_COMMISSION = 15.0

    channel_type: Literal["amazon_fba_onsite"] = "amazon_fba_onsite"
    commission_pct: Percent = DEFAULT_COMMISSION
    outbound_freight: Money = 0.0


class AmazonDBAChannel(BaseChannel):
    """Amazon DBA (Delivery by Amazon)"""

    DISPLAY_NAME = "Amazon DBA"
    DESCRIPTION = "Delivery by Amazon"
    DEFAULT_COMMISSION = 15.0

    channel_type: Literal["amazon_dba"] = "amazon_dba"
    commission_pct: Percent = DEFAULT_COMMISSION
    outbound_freight: Money = 0.0


class AmazonFBAChannel(BaseChannel):
    """
    Amazon FBA (Fulfilled by Amazon).

    Características:
    - Estoque enviado ao centro de distribuição (frete de entrada)
    - Preparação em prep center antes do envio
    - Entrega ao cliente por conta da Amazon
    """

    DISPLAY_NAME = "Amazon FBA"
    DESCRIPTION = "Fulfilled by Amazon"
    DEFAULT_COMMISSION = 15.0

    channel_type: Literal["amazon_fba"] = "amazon_fba"
    commission_pct: Percent = DEFAULT_COMMISSION
    inbound_freight: Money = 0.0
    prep_center: Money = 0.0

from typing import Literal

from profitability.interface import Percent
from .base import BaseChannel


class MarketplaceOtherChannel(BaseChannel):
    """Outros marketplaces (apenas taxas genéricas)"""

    DISPLAY_NAME = "Outro Marketplace"
    DESCRIPTION = "Marketplace genérico"
    DEFAULT_COMMISSION = 10.0

    channel_type: Literal["marketplace_other"] = "marketplace_other"
    commission_pct: Percent = DEFAULT_COMMISSION

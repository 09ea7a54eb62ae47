from typing import Literal

from profitability.interface import Money, Percent
from .base import BaseChannel


class TikTokShopChannel(BaseChannel):
    DISPLAY_NAME = "TikTok Shop"
    DESCRIPTION = "TikTok Shop"
    DEFAULT_COMMISSION = 8.0

    channel_type: Literal["tiktok_shop"] = "tiktok_shop"
    commission_pct: Percent = DEFAULT_COMMISSION
    outbound_freight: Money = 0.0

from typing import Annotated, Union

from pydantic import Field

from .base import BaseChannel
from .site import SiteChannel
from .amazon import (
    AmazonFBMChannel,
    AmazonFBAOnSiteChannel,
    AmazonDBAChannel,
    AmazonFBAChannel,
)
from .mercadolivre import (
    MercadoLivreME1Channel,
    MercadoLivreFlexChannel,
    MercadoLivreEnviosChannel,
    MercadoLivreFullChannel,
)
from .shopee import ShopeeChannel
from .magalu import MagaluFullChannel, MagaluEnviosChannel
from .tiktok import TikTokShopChannel
from .other import MarketplaceOtherChannel

# União discriminada por channel_type (uma variante por tipo de canal)
AnyChannel = Annotated[
    Union[
        SiteChannel,
        AmazonFBMChannel,
        AmazonFBAOnSiteChannel,
        AmazonDBAChannel,
        AmazonFBAChannel,
        MercadoLivreME1Channel,
        MercadoLivreFlexChannel,
        MercadoLivreEnviosChannel,
        MercadoLivreFullChannel,
        ShopeeChannel,
        MagaluFullChannel,
        MagaluEnviosChannel,
        TikTokShopChannel,
        MarketplaceOtherChannel,
    ],
    Field(discriminator="channel_type"),
]

__all__ = [
    "AnyChannel",
    "BaseChannel",
    "SiteChannel",
    "AmazonFBMChannel",
    "AmazonFBAOnSiteChannel",
    "AmazonDBAChannel",
    "AmazonFBAChannel",
    "MercadoLivreME1Channel",
    "MercadoLivreFlexChannel",
    "MercadoLivreEnviosChannel",
    "MercadoLivreFullChannel",
    "ShopeeChannel",
    "MagaluFullChannel",
    "MagaluEnviosChannel",
    "TikTokShopChannel",
    "MarketplaceOtherChannel",
]

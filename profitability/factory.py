from typing import Any, Dict, List, Type, Union

from profitability.interface import ChannelType, UnsupportedChannelError
from profitability.channels import (
    BaseChannel,
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
)


class ChannelFactory:
    """
    Factory para instanciar configurações de canal com seus padrões.

    Usa mapeamento centralizado channel -> classe para garantir
    consistência e facilitar manutenção. Cada chamada devolve uma
    instância nova, nunca um objeto compartilhado.
    """

    # Mapeamento canônico: channel -> Channel class
    _CHANNELS: Dict[ChannelType, Type[BaseChannel]] = {
        ChannelType.SITE: SiteChannel,
        ChannelType.AMAZON_FBM: AmazonFBMChannel,
        ChannelType.AMAZON_FBA_ONSITE: AmazonFBAOnSiteChannel,
        ChannelType.AMAZON_DBA: AmazonDBAChannel,
        ChannelType.AMAZON_FBA: AmazonFBAChannel,
        ChannelType.ML_ME1: MercadoLivreME1Channel,
        ChannelType.ML_FLEX: MercadoLivreFlexChannel,
        ChannelType.ML_ENVIOS: MercadoLivreEnviosChannel,
        ChannelType.ML_FULL: MercadoLivreFullChannel,
        ChannelType.SHOPEE: ShopeeChannel,
        ChannelType.MAGALU_FULL: MagaluFullChannel,
        ChannelType.MAGALU_ENVIOS: MagaluEnviosChannel,
        ChannelType.TIKTOK_SHOP: TikTokShopChannel,
        ChannelType.MARKETPLACE_OTHER: MarketplaceOtherChannel,
    }

    @classmethod
    def _resolve(cls, channel: Union[str, ChannelType]) -> Type[BaseChannel]:
        channel_lower = str(getattr(channel, "value", channel)).lower().strip()

        try:
            channel_class = cls._CHANNELS.get(ChannelType(channel_lower))
        except ValueError:
            channel_class = None

        if not channel_class:
            supported = ", ".join(cls.get_supported_channels())
            raise UnsupportedChannelError(
                f"Canal '{channel}' não suportado. "
                f"Canais disponíveis: {supported}"
            )

        return channel_class

    @classmethod
    def defaults_for(cls, channel: Union[str, ChannelType]) -> BaseChannel:
        """
        Retorna uma configuração nova com os padrões do canal.

        Args:
            channel: Tipo do canal (case-insensitive)

        Returns:
            Instância desabilitada, com comissão padrão e valores zerados

        Raises:
            UnsupportedChannelError: Se o canal não for suportado
        """
        return cls._resolve(channel).defaults()

    @classmethod
    def build(cls, channel: Union[str, ChannelType], **values: Any) -> BaseChannel:
        """Cria um canal validado a partir dos padrões, sobrescrevendo os valores informados"""
        channel_class = cls._resolve(channel)
        data = channel_class.defaults().model_dump(exclude={"channel_type"})
        data.update(values)
        return channel_class(**data)

    @classmethod
    def editable_fields(cls, channel: Union[str, ChannelType]) -> List[str]:
        """Campos aplicáveis ao canal (os demais ficam fixos em 0)"""
        return cls._resolve(channel).editable_fields()

    @classmethod
    def describe(cls, channel: Union[str, ChannelType]) -> Dict[str, Any]:
        """Metadados do canal para telas de configuração"""
        channel_class = cls._resolve(channel)
        return {
            "name": channel_class.DISPLAY_NAME,
            "description": channel_class.DESCRIPTION,
            "default_commission": channel_class.DEFAULT_COMMISSION,
            "fields": channel_class.editable_fields(),
        }

    @classmethod
    def get_supported_channels(cls) -> List[str]:
        """Retorna lista de canais suportados"""
        return [channel.value for channel in cls._CHANNELS]

    @classmethod
    def is_supported(cls, channel: str) -> bool:
        """Verifica se um canal é suportado"""
        return channel.lower().strip() in cls.get_supported_channels()

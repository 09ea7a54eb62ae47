from typing import Dict

from pydantic import BaseModel, Field, model_validator

from profitability.channels import AnyChannel
from profitability.interface import ChannelType, Money, Percent


class Product(BaseModel):
    """
    Base de custo de um produto e suas configurações por canal.

    No máximo uma configuração por tipo de canal (chave = channel_type).
    """
    cost_item: Money = Field(0.0, description="Custo unitário de aquisição (FOB)")
    pack_cost: Money = Field(0.0, description="Custo de embalagem por unidade")
    tax_percent: Percent = Field(0.0, description="Imposto global sobre o preço de venda (%)")
    channels: Dict[ChannelType, AnyChannel] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _check_channel_keys(self) -> "Product":
        for key, channel in self.channels.items():
            if channel.channel_type != key.value:
                raise ValueError(
                    f"Canal '{channel.channel_type}' cadastrado na chave '{key.value}'"
                )
        return self

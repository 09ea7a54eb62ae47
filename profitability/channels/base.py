from typing import TYPE_CHECKING, ClassVar, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from profitability.interface import ChannelInput, Money, Percent

if TYPE_CHECKING:
    from profitability.product import Product


# Campos opcionais que variam por canal (tabela de ligação)
SPECIFIC_FIELDS: Tuple[str, ...] = (
    "inbound_freight",
    "outbound_freight",
    "prep_center",
    "flex_revenue",
    "gateway_pct",
)


class BaseChannel(BaseModel):
    """
    Configuração comum a todos os canais de venda.

    Cada subclasse declara apenas os campos específicos que se aplicam
    ao seu tipo (frete de entrada, frete de saída, prep center, receita
    Flex, gateway). Campos extras são rejeitados na validação, então um
    canal nunca lê um valor que não faz sentido para ele.
    """
    model_config = ConfigDict(extra="forbid")

    # Configurações padrão (sobrescritas por canal)
    DISPLAY_NAME: ClassVar[str] = ""
    DESCRIPTION: ClassVar[str] = ""
    DEFAULT_COMMISSION: ClassVar[float] = 0.0

    enabled: bool = False
    sale_price: Money = 0.0
    commission_pct: Percent = 0.0
    ads_pct: Percent = 0.0
    other_pct: Percent = 0.0
    fixed_fee: Money = 0.0
    other_value: Money = 0.0
    # Sobrescreve o custo de embalagem do produto quando informado
    pack_cost: Optional[Money] = None

    @classmethod
    def defaults(cls) -> "BaseChannel":
        """Nova instância com os padrões do canal (desabilitado, valores zerados)"""
        return cls()

    @classmethod
    def editable_fields(cls) -> List[str]:
        """Campos que o usuário pode editar neste canal"""
        return [name for name in cls.model_fields if name != "channel_type"]

    @classmethod
    def specific_fields(cls) -> List[str]:
        return [name for name in SPECIFIC_FIELDS if name in cls.model_fields]

    def to_input(self, product: "Product", price: Optional[float] = None) -> ChannelInput:
        """
        Monta a entrada normalizada do cálculo combinando a base de custo
        do produto com os campos deste canal.

        Args:
            product: Produto com custo do item e embalagem
            price: Preço alternativo (padrão: sale_price do canal)
        """
        specific = {name: getattr(self, name) for name in self.specific_fields()}

        return ChannelInput(
            price=self.sale_price if price is None else price,
            cost_item=product.cost_item,
            pack_cost=product.pack_cost if self.pack_cost is None else self.pack_cost,
            commission_pct=self.commission_pct,
            ads_pct=self.ads_pct,
            other_pct=self.other_pct,
            fixed_fee=self.fixed_fee,
            other_value=self.other_value,
            **specific,
        )


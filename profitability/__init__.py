from .interface import (
    ChannelType,
    ChannelInput,
    ChannelResult,
    CostBreakdown,
    PriceSuggestion,
    ProfitabilityAnalysis,
    ProfitabilityError,
    UnsupportedChannelError,
    UnreachableMarginError,
    profitability_status,
)
from .channels import AnyChannel, BaseChannel
from .product import Product
from .factory import ChannelFactory
from .calculator import (
    safe_div,
    calculate,
    calculate_channel,
    calculate_all,
    price_for_margin,
    suggest_prices,
    analyze_product,
    validate_channel_input,
)

__all__ = [
    "ChannelType",
    "ChannelInput",
    "ChannelResult",
    "CostBreakdown",
    "PriceSuggestion",
    "ProfitabilityAnalysis",
    "ProfitabilityError",
    "UnsupportedChannelError",
    "UnreachableMarginError",
    "profitability_status",
    "AnyChannel",
    "BaseChannel",
    "Product",
    "ChannelFactory",
    "safe_div",
    "calculate",
    "calculate_channel",
    "calculate_all",
    "price_for_margin",
    "suggest_prices",
    "analyze_product",
    "validate_channel_input",
]

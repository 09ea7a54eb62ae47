# config.py
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    dev_mode: bool = False

    app_slug: str = "channel-profitability"

    # Imposto padrão (% sobre o preço) quando o produto não informa
    default_tax_percent: float = 0.0
    # Casas decimais nas respostas da API (o cálculo interno não arredonda)
    display_decimals: int = 2
    # Margens (%) usadas na sugestão de preços
    margin_presets: List[float] = [20.0, 30.0, 40.0]

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )


settings = Settings()

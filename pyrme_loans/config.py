"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "pyrme-loans"
    log_level: str = "INFO"

    # Display
    currency_symbol: str = "₹"

    # Request limits
    max_term_months: int = 480  # 40 years
    max_principal: float = 1e12  # 1 lakh crore
    max_monthly_income: float = 1e10
    max_annual_rate_percent: float = 100.0
    max_offers: int = 100


settings = Settings()

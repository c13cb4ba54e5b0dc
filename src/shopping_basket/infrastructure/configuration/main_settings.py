from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application-level settings. Pricing tables live in PricingSettings."""

    app_name: str = "Shopping Basket Service"
    env: str = Field(default="local", alias="APP_ENV")
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)

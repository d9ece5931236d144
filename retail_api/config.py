from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # ==============================
    # Application
    # ==============================
    APP_NAME: str = "Retail Loan Inventory Backend"
    ENVIRONMENT: str = "local"
    API_PREFIX: str = "/api"
    HOST: str = "localhost"
    PORT: int = 4000

    # ==============================
    # Database
    # ==============================
    DATABASE_URL: str = "sqlite:///./retail.db"
    SEED_DEMO_DATA: bool = True

    # ==============================
    # Logging
    # ==============================
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    # ==============================
    # HTTP
    # ==============================
    CORS_ORIGINS: str = "*"
    PAGE_SIZE: int = 50

    # ==============================
    # Stock / loan guardrails
    # ==============================
    ALLOW_NEGATIVE_STOCK: bool = False
    ALLOW_NEGATIVE_BALANCE: bool = False

    def cors_origin_list(self) -> list[str]:
        origins = [value.strip() for value in self.CORS_ORIGINS.split(",")]
        return [value for value in origins if value] or ["*"]


@lru_cache
def get_settings() -> Settings:
    """Cached settings loader (once per process)."""
    return Settings()


__all__ = ["Settings", "get_settings"]

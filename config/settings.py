from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CHECKMARKET_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Hosted store (Supabase / PostgREST)
    store_url: str = ""  # e.g., https://<project>.supabase.co
    store_key: str = ""  # anon or service key
    request_timeout: float = 30.0

    # Also delete dependent rows in the store when a category or item is deleted
    cascade_remote_deletes: bool = False

    # Presentation
    currency_symbol: str = "R$"

    log_level: str = "INFO"

    @property
    def rest_url(self) -> str:
        """Base URL of the REST endpoint that exposes the tables."""
        return f"{self.store_url.rstrip('/')}/rest/v1"

    def is_store_configured(self) -> bool:
        """Check if the store URL and key are set."""
        return bool(self.store_url.strip() and self.store_key.strip())


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()

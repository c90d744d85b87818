from __future__ import annotations
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///./asset_ledger.db"
    secret_key: str = "dev-secret-key-change-in-production"
    access_token_expire_minutes: int = 30

    # Identity allowed to register assets, toggle status, create snapshots
    # and hand the privilege over. Only used when the database has none yet.
    privileged_address: str = "0x00000000000000000000000000000000000000a1"

    frontend_url: str = "http://localhost:3000"
    extra_cors_origins: str = ""  # comma-separated additional origins for production

    # Notification delivery
    notification_webhook_urls: str = ""  # comma-separated
    notification_timeout_seconds: float = 10.0

    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}

    @property
    def webhook_urls(self) -> list[str]:
        return [u.strip() for u in self.notification_webhook_urls.split(",") if u.strip()]


@lru_cache()
def get_settings() -> Settings:
    return Settings()

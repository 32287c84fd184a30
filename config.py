"""Configuration via pydantic-settings. Reads from .env or environment."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # ===== SYSTEM =====
    database_url: str = "sqlite+aiosqlite:///./vault.db"
    log_level: str = "INFO"
    port: int = 8001

    # ===== DEMO/PRODUCTION MODE =====
    demo_mode: bool = False  # If true, seed demo data into an empty vault on startup
    seed_on_startup: bool = True  # Only honoured when demo_mode=true

    # ===== 2FA =====
    totp_period: int = 30  # seconds per code window
    totp_digits: int = 6

    # ===== ACTIVITY LOG =====
    activity_user: str = "System"  # Recorded when no X-Operator header is sent
    activity_log_limit: int = 100


settings = Settings()

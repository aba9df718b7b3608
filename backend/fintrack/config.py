"""Configuration settings for the application."""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    app_name: str = "FinTrack API"
    debug: bool = False
    log_level: str = "INFO"

    # Ledger storage: "memory" (lost on restart) or "sqlite"
    storage_backend: str = "memory"
    database_path: str = "fintrack.db"
    demo_user_id: str = "demo-user-001"

    # AI advisor. A missing key for the selected provider puts the advisor in fallback mode.
    advisor_model: str = "claude-3-5-sonnet-20241022"
    anthropic_api_key: str = ""
    openai_api_key: str = ""
    google_api_key: str = ""


settings = Settings()

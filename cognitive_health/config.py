"""
Application Configuration — Pydantic Settings

Centralized configuration management using environment variables.
Loads from .env file automatically with sensible defaults.

The modality weight table is NOT configured here: it lives in
cognitive_health.scoring.config as a named constant.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    
    Priority: Environment variables > .env file > defaults
    """
    
    # === Project ===
    PROJECT_NAME: str = "Cognitive Health Monitor"
    
    # === Environment ===
    ENVIRONMENT: str = "local"  # local, development, staging, production
    LOG_LEVEL: str = "INFO"
    
    # === Period Aggregation ===
    WEEKLY_WINDOW_DAYS: int = 7
    TREND_DEAD_BAND_PCT: float = 2.0   # ±% treated as "stable"
    TOP_CONTRIBUTORS_LIMIT: int = 3
    
    # === Settings Configuration ===
    model_config = SettingsConfigDict(
        env_file=(".env",),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


# Singleton instance
settings = Settings()

"""
Application Configuration — Pydantic Settings

Centralized configuration management using environment variables.
Loads from .env file automatically with sensible defaults.

Scoring constants (confidence formula, category thresholds) are NOT here:
they are part of the recommendation contract and live in rules/scoring.py.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Priority: Environment variables > .env file > defaults
    """

    # === API Configuration ===
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "Sleep Hygiene Advisor"

    # === CORS Configuration ===
    CORS_ORIGINS: list[str] = [
        "http://localhost:5173",
        "http://localhost:8080",
        "http://127.0.0.1:5173",
        "http://127.0.0.1:8080",
    ]
    CORS_ORIGIN_REGEX: str | None = None  # e.g. r"https://.*\.example\.com"

    # === Recommendations ===
    DEFAULT_TOP_N: int = 3  # "Top priorities" shown first on the results view

    # === Logging ===
    LOG_LEVEL: str = "INFO"

    # === Environment ===
    ENVIRONMENT: str = "local"  # local, development, staging, production

    # === Settings Configuration ===
    model_config = SettingsConfigDict(
        env_file=("sleep_advisor/.env", ".env"),  # Check both paths
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


# Singleton instance
settings = Settings()

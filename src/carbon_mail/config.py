"""
Configuration settings for Carbon Mail.

All settings are loaded from environment variables with sensible defaults.
Use .env file for local development.
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_PROMPT_TEMPLATES_DIR = str(Path(__file__).parent / "prompts")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Application ===
    APP_NAME: str = "Carbon Mail"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"

    # === Ollama Configuration ===
    OLLAMA_BASE_URL: str = "http://localhost:11434"
    OLLAMA_MODEL: str = "mistral"  # Suggested in the "no models" hint as well
    OLLAMA_TIMEOUT: float = 60.0  # seconds, per classification call
    HEALTH_TIMEOUT: float = 3.0  # seconds, GET /api/tags

    # === LLM Generation Parameters ===
    LLM_TEMPERATURE: float = 0.1  # Low for short, reproducible answers
    LLM_MAX_TOKENS: int = 150

    # === Batching ===
    BATCH_SIZE: int = 5  # Max concurrent calls to the local model service
    SCAN_SUBSET_SIZE: int = 20  # Emails offered to the client per scan

    # === Prompts ===
    PROMPT_TEMPLATES_DIR: str = DEFAULT_PROMPT_TEMPLATES_DIR

    # === Monitoring ===
    PROMETHEUS_ENABLED: bool = True


# Global settings instance
settings = Settings()

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # === Application ===
    APP_NAME: str = "Workflow State Machine"
    APP_VERSION: str = "1.0.0"

    # === API ===
    API_PREFIX: str = "/api/v1"

    # === Logging ===
    LOG_LEVEL: str = "INFO"

    # === Metrics ===
    METRICS_ENABLED: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("API_PREFIX")
    @classmethod
    def validate_api_prefix(cls, v: str) -> str:
        v = v.rstrip("/")
        if v and not v.startswith("/"):
            raise ValueError("API prefix must start with '/'")
        return v


try:
    settings = Settings()
except Exception as e:
    import sys

    print(f"CRITICAL: Configuration validation failed: {e}")
    sys.exit(1)

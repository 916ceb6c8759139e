"""Configuration management using pydantic-settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    database_path: str = "./data/thoughtbox.db"
    # Seconds SQLite waits on a locked database before failing
    database_timeout: float = 5.0

    host: str = "0.0.0.0"
    port: int = 8080
    cors_origins: list[str] = ["*"]
    log_level: str = "INFO"

    # Bcrypt work factor (higher = more secure but slower)
    # For tests, use 4 for faster execution while maintaining functionality
    bcrypt_work_factor: int = 12

    # Access tokens are hex-encoded random bytes, issued once per user
    access_token_bytes: int = Field(default=128, ge=128)
    min_password_length: int = 5

    # Only reads of /thoughts are gated unless this is enabled
    protect_thought_writes: bool = False
    thoughts_page_size: int = 20

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        validate_assignment=True
    )


settings = Settings()

"""
CharLM Service Configuration
"""

from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, model_validator


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # ===== Service =====
    SERVICE_NAME: str = Field(default="charlm-service")
    SERVICE_VERSION: str = Field(default="1.0.0")
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=8000)
    LOG_LEVEL: str = Field(default="info")
    DEBUG: bool = Field(default=False)

    # ===== CORS =====
    CORS_ORIGINS: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:8080"]
    )

    # ===== Model Defaults =====
    DEFAULT_WINDOW_LENGTH: int = Field(default=7, ge=1)
    DEFAULT_TEXT_LENGTH: int = Field(default=200, ge=0)
    MAX_TEXT_LENGTH: int = Field(default=10000, ge=0)
    RANDOM_SEED: Optional[int] = Field(default=None)

    # ===== Corpus (trained at startup when set) =====
    CORPUS_PATH: Optional[str] = Field(default=None)
    CORPUS_ENCODING: str = Field(default="utf-8")

    # >>> pydantic v2 settings config <<<
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @model_validator(mode="after")
    def check_text_lengths(self) -> "Settings":
        if self.DEFAULT_TEXT_LENGTH > self.MAX_TEXT_LENGTH:
            raise ValueError(
                f"DEFAULT_TEXT_LENGTH ({self.DEFAULT_TEXT_LENGTH}) must not exceed "
                f"MAX_TEXT_LENGTH ({self.MAX_TEXT_LENGTH})"
            )
        return self


settings = Settings()

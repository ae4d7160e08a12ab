from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Library settings loaded from environment."""

    # Service
    service_name: str = "chatdraft"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Dispatch
    restore_file_positions: bool = Field(
        default=True,
        description="Seek attached streams back to their recorded offset after sending",
    )

    class Config:
        env_prefix = "CHATDRAFT_"
        env_file = ".env"
        case_sensitive = False


settings = Settings()

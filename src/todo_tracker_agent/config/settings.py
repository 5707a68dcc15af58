"""Application settings using Pydantic Settings."""

import logging
import os
import warnings
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Model configuration
    litellm_model: str = "vertex_ai.gemini-3.0-flash-preview"

    # LiteLLM Proxy (env: OPENAI_API_KEY, OPENAI_API_BASE)
    openai_api_key: str = ""
    openai_api_base: str = ""

    # Application
    app_name: str = "todo_tracker_agent"
    log_level: str = "INFO"

    # Todo list
    todo_display_style: Literal["auto", "ansi", "plain"] = "auto"
    todo_allow_empty: bool = False  # accept [] as "clear all tasks"

    def configure_litellm_proxy(self) -> None:
        """Set OPENAI_* env vars so litellm picks them up."""
        if self.openai_api_base:
            os.environ["OPENAI_API_BASE"] = self.openai_api_base
        if self.openai_api_key:
            os.environ["OPENAI_API_KEY"] = self.openai_api_key

    def configure_logging(self) -> None:
        """Configure logging for the application."""
        logging.basicConfig(
            level=self.log_level.upper(),
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
        # Suppress noisy Pydantic serialization warnings from LiteLLM
        warnings.filterwarnings("ignore", message="Pydantic serializer warnings")


# Global settings instance
settings = Settings()
settings.configure_litellm_proxy()
settings.configure_logging()

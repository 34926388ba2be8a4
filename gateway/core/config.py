"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        http_payload_size_limit: Maximum accepted request body size, in bytes.
        data_dir: Directory holding update files awaiting processing.
        error_docs_url: Base URL of the public error code documentation.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "search-gateway"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    http_payload_size_limit: int = 104_857_600  # 100 MiB
    data_dir: str = "data.gw"
    error_docs_url: str = "https://docs.search-gateway.dev/errors"


settings = Settings()

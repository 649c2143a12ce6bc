"""Configuration management for the Hello OpenAPI Service.

Uses Pydantic Settings for type-safe configuration with .env file support.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Environment
    environment: str = "development"
    log_level: str = "INFO"

    # Service Configuration
    host: str = "0.0.0.0"
    port: int = 8000
    allowed_origins: str = "http://localhost:3000"

    # API documentation
    api_title: str = "Hello OpenAPI Service"
    api_version: str = "0.1.0"
    openapi_url: str = "/api-docs/openapi.json"
    swagger_path: str = "/swagger"

    @property
    def allowed_origins_list(self) -> list[str]:
        """Parse allowed origins as list."""
        return [origin.strip() for origin in self.allowed_origins.split(",")]

    @property
    def swagger_index_url(self) -> str:
        return f"{self.swagger_path.rstrip('/')}/index.html"


settings = Settings()

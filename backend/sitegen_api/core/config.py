"""Configuration and settings"""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings from environment variables"""

    # Anthropic API
    anthropic_api_key: str = Field(default="", env="ANTHROPIC_API_KEY")
    anthropic_base_url: str = Field(default="https://api.anthropic.com", env="ANTHROPIC_BASE_URL")
    anthropic_version: str = "2023-06-01"
    # Non-streaming website generation
    anthropic_model: str = Field(default="claude-3-5-sonnet-20241022", env="ANTHROPIC_MODEL")
    anthropic_max_tokens: int = Field(default=8000, env="ANTHROPIC_MAX_TOKENS")
    anthropic_temperature: float = 0.7
    # Streaming code generation
    anthropic_stream_model: str = Field(default="claude-3-haiku-20240307", env="ANTHROPIC_STREAM_MODEL")
    anthropic_stream_max_tokens: int = Field(default=4000, env="ANTHROPIC_STREAM_MAX_TOKENS")
    # Template-enhanced single call
    anthropic_studio_model: str = Field(default="claude-3-opus-20240229", env="ANTHROPIC_STUDIO_MODEL")
    anthropic_studio_max_tokens: int = Field(default=4000, env="ANTHROPIC_STUDIO_MAX_TOKENS")

    # OpenAI API
    openai_api_key: str = Field(default="", env="OPENAI_API_KEY")
    openai_validation_model: str = Field(default="gpt-4-turbo-preview", env="OPENAI_VALIDATION_MODEL")
    openai_validation_max_tokens: int = 1000
    openai_update_model: str = Field(default="gpt-4o", env="OPENAI_UPDATE_MODEL")
    openai_update_max_tokens: int = Field(default=16000, env="OPENAI_UPDATE_MAX_TOKENS")

    # Vercel
    vercel_token: str = Field(default="", env="VERCEL_TOKEN")
    vercel_api_url: str = Field(default="https://api.vercel.com", env="VERCEL_API_URL")

    # Outbound HTTP
    request_timeout: float = Field(default=300.0, env="REQUEST_TIMEOUT")

    # Optional X-API-Key protection (disabled when empty)
    api_key: str = Field(default="", env="API_KEY")

    # Frontend
    frontend_url: str = Field(default="http://localhost:3000", env="FRONTEND_URL")

    # Server
    backend_host: str = Field(default="localhost", env="BACKEND_HOST")
    backend_port: int = Field(default=8000, env="BACKEND_PORT")
    log_level: str = Field(default="INFO", env="LOG_LEVEL")

    # API Configuration
    api_title: str = "SiteForge Website Generator API"
    api_version: str = "0.1.0"

    class Config:
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = Settings()

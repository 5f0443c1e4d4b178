"""
Application configuration using Pydantic Settings
"""

from typing import List, Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""

    # Application
    APP_NAME: str = "Sagelytics Competitor API"
    VERSION: str = "0.1.0"
    ENVIRONMENT: str = Field(default="development", description="Environment: development, staging, production")
    DEBUG: bool = Field(default=True, description="Debug mode")

    @field_validator('DEBUG', mode='before')
    @classmethod
    def validate_debug(cls, v):
        """Validate DEBUG field to handle string inputs"""
        if isinstance(v, str):
            return v.lower() in ('true', '1', 'yes', 'on')
        return bool(v)

    # CORS
    ALLOWED_HOSTS: List[str] = Field(
        default=["http://localhost:3000", "http://127.0.0.1:3000"],
        description="Allowed CORS origins"
    )

    @field_validator('ALLOWED_HOSTS', mode='before')
    @classmethod
    def validate_allowed_hosts(cls, v):
        """Validate ALLOWED_HOSTS field to handle JSON string inputs"""
        if isinstance(v, str):
            try:
                import json
                return json.loads(v)
            except json.JSONDecodeError:
                # If not JSON, treat as comma-separated string
                return [host.strip() for host in v.split(',') if host.strip()]
        return v

    # Search API (Serper)
    SERPER_API_KEY: Optional[str] = Field(default=None, description="Serper search API key")
    SERPER_API_URL: str = Field(default="https://google.serper.dev/search", description="Serper search endpoint")
    SEARCH_COUNTRY: str = Field(default="us", description="Search result country (gl)")
    SEARCH_LANGUAGE: str = Field(default="en", description="Search result language (hl)")

    # Outbound HTTP
    HTTP_TIMEOUT: float = Field(default=15.0, description="Timeout for outbound API requests in seconds")
    HTTP_USER_AGENT: str = Field(
        default="sagelytics-bot/1.0 (+https://sagelytics.com/bot)",
        description="User agent for outbound requests"
    )

    # OpenAI-compatible text generation API
    OPENAI_API_KEY: Optional[str] = Field(default=None, description="OpenAI API key")
    OPENAI_BASE_URL: Optional[str] = Field(
        default=None,
        description="Override for OpenAI-compatible providers (e.g. https://api.groq.com/openai/v1)"
    )
    OPENAI_MODEL: str = Field(default="gpt-4o-mini", description="Model used for competitor suggestions")
    OPENAI_TEMPERATURE: float = Field(default=0.7, description="Sampling temperature for competitor suggestions")

    # Pricing
    DEFAULT_BASELINE_PRICE: float = Field(
        default=200.0,
        description="Baseline price used when the user has no catalog prices yet"
    )

    # Logging
    LOG_LEVEL: str = Field(default="INFO", description="Log level")

    class Config:
        env_file = ".env"
        case_sensitive = True


# Create settings instance
settings = Settings()

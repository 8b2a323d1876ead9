"""
Centralized configuration for the Content Analyzer
All environment variables and settings are defined here
"""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    Provides centralized configuration with validation and defaults.
    """

    # ======================
    # AI Provider Configuration
    # ======================
    ANTHROPIC_API_KEY: str = Field(default="", description="Anthropic API key")
    ANTHROPIC_MODEL: str = Field(
        default="claude-sonnet-4-20250514",
        description="Claude model to use for analysis"
    )
    MAX_TOKENS: int = Field(default=4000, description="Max tokens for Claude response")
    AI_ANALYSIS_ENABLED: bool = Field(
        default=True,
        description="Try AI analysis first; the deterministic analyzer is always the fallback"
    )
    MAX_CONTENT_CHARS: int = Field(
        default=50000,
        description="Content longer than this is rejected by the AI provider"
    )

    # ======================
    # Redis / Cache Configuration
    # ======================
    REDIS_URL: str = Field(
        default="redis://localhost:6379/0",
        description="Redis connection URL"
    )
    CACHE_ENABLED: bool = Field(
        default=True,
        description="Cache analysis results in Redis"
    )
    CACHE_TTL: int = Field(
        default=86400,  # 24 hours
        description="Cache time-to-live in seconds"
    )

    # ======================
    # Page Fetch Configuration
    # ======================
    FETCH_TIMEOUT: int = Field(
        default=20,
        description="Timeout for fetching a page in seconds"
    )
    FETCH_USER_AGENT: str = Field(
        default="Mozilla/5.0 (compatible; ContentAnalyzer/1.0)",
        description="User-Agent header sent when fetching pages"
    )
    BATCH_MAX_PAGES: int = Field(
        default=10,
        description="Maximum number of pages in one batch request"
    )

    # ======================
    # Server Configuration
    # ======================
    API_WORKERS: int = Field(
        default=2,
        description="Number of Uvicorn workers for API"
    )

    # ======================
    # Logging Configuration
    # ======================
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level"
    )

    @property
    def ai_configured(self) -> bool:
        """AI analysis is usable only when enabled and a key is present"""
        return self.AI_ANALYSIS_ENABLED and bool(self.ANTHROPIC_API_KEY)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"  # Allow extra env vars in .env file


# Global settings instance
settings = Settings()

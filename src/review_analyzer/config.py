"""
Configuration settings for Review Analyzer.

All settings are loaded from environment variables with sensible defaults.
Use .env file for local development.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from review_analyzer.models.enums import NounLevelEnum, SentimentEnum


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    
    # === Application ===
    APP_NAME: str = "Review Analyzer"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"
    
    # === Hosted Inference (Hugging Face) ===
    HF_API_BASE_URL: str = "https://router.huggingface.co/hf-inference"
    HF_API_TOKEN: str | None = None  # Per-request token from the user takes precedence
    INFERENCE_TIMEOUT: float = 30.0  # seconds
    WAIT_FOR_MODEL: bool = False  # Ask the endpoint to block while a cold model loads
    
    # Text-classification models, tried first for sentiment (review text sent as-is)
    SENTIMENT_MODELS: list[str] = ["siebert/sentiment-roberta-large-english"]
    # Text-generation models, prompted for sentiment and noun level, tried in order
    GENERATION_MODELS: list[str] = ["google/gemma-7b-it"]
    
    # === Generation Parameters ===
    GENERATION_MAX_NEW_TOKENS: int = 50
    GENERATION_TEMPERATURE: float = 0.1
    
    # === Normalization Policy ===
    DEFAULT_SENTIMENT: SentimentEnum = SentimentEnum.NEUTRAL  # When nothing parseable
    DEFAULT_NOUN_LEVEL: NounLevelEnum = NounLevelEnum.MEDIUM  # When nothing parseable
    SENTIMENT_MIN_SCORE: float = 0.0  # Winning score below this maps to neutral
    
    # === Local Fallbacks ===
    LOCAL_SENTIMENT_FALLBACK: bool = False  # Off: remote sentiment errors are surfaced
    LOCAL_NOUN_FALLBACK: bool = True
    
    # === Reviews ===
    REVIEWS_SOURCE: str = "reviews_test.tsv"  # Path or http(s) URL
    
    # === Prompts ===
    PROMPT_TEMPLATES_DIR: str | None = None  # None: templates shipped with the package
    
    # === Monitoring ===
    PROMETHEUS_ENABLED: bool = True


# Global settings instance
settings = Settings()

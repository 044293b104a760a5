"""Configuration management for the language gate."""
from pydantic_settings import BaseSettings
from typing import List, Optional
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Classification defaults
    english_threshold: float = 0.8
    min_word_length: int = 2
    allow_numbers: bool = True
    allow_abbreviations: bool = True

    # Short texts use a lower bar since one foreign word skews the ratio
    short_text_word_limit: int = 4
    short_text_threshold: float = 0.6

    # Statistical detector tie-break
    detector_confidence: float = 0.9
    detector_min_ratio: float = 0.7
    detector_top_n: int = 5
    english_language_code: str = "en"
    langdetect_seed: int = 0

    # Cache sizes
    statistical_cache_size: int = 1000
    word_cache_size: int = 5000

    # Dictionary resource
    dictionary_size: int = 50000
    extra_dictionary_path: Optional[str] = None  # one word per line
    extra_geographical_terms: List[str] = []

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

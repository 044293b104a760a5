"""Module-level language detection helpers over a shared detector.

The detector, its dictionary and both caches are created on first use and
shared for the life of the process.
"""
from functools import lru_cache
from src.classification.decision_engine import LanguageAnalysis, LanguageDetector
from src.utils.document_patterns import matches_document_pattern


@lru_cache()
def get_language_detector() -> LanguageDetector:
    """Get the shared detector instance."""
    return LanguageDetector()


def detect_non_english_text(text, options=None, **overrides) -> bool:
    """
    Detect if text is non-English.

    Args:
        text: Text to analyze
        options: ClassificationOptions or mapping with any of english_threshold,
            min_word_length, allow_numbers, allow_abbreviations
        **overrides: Individual option overrides

    Returns:
        True if NON-English, False if English
    """
    return get_language_detector().detect_non_english_text(text, options, **overrides)


def is_english(text, options=None, **overrides) -> bool:
    """Convenience wrapper: True if text IS English."""
    return not detect_non_english_text(text, options, **overrides)


def analyze_text(text, options=None, **overrides) -> LanguageAnalysis:
    """Return the detailed analysis behind the English/non-English verdict."""
    return get_language_detector().analyze(text, options, **overrides)


def clear_caches() -> None:
    """Clear the shared detector's caches; a no-op before first use."""
    if get_language_detector.cache_info().currsize:
        get_language_detector().clear_caches()


clear_language_detector_caches = clear_caches

__all__ = [
    "analyze_text",
    "clear_caches",
    "clear_language_detector_caches",
    "detect_non_english_text",
    "get_language_detector",
    "is_english",
    "matches_document_pattern",
]

"""Statistical language detector backed by langdetect."""
from typing import List, Protocol, Tuple
from langdetect import DetectorFactory, detect_langs
from langdetect.lang_detect_exception import LangDetectException
from config.settings import get_settings
import logging

logger = logging.getLogger(__name__)
settings = get_settings()

# (language code, confidence), most confident first
RankedLanguages = List[Tuple[str, float]]


class StatisticalDetectionError(Exception):
    """Raised when the statistical detector cannot rank a text."""


class StatisticalDetector(Protocol):
    """Anything that ranks candidate languages for a text."""

    def rank(self, text: str) -> RankedLanguages:
        ...


class LangdetectDetector:
    """Rank languages with langdetect's n-gram profiles."""

    def __init__(self, seed: int = None):
        """
        Initialize detector.

        Args:
            seed: Random seed for reproducible results (default: from settings)
        """
        # langdetect samples n-grams randomly unless seeded
        DetectorFactory.seed = settings.langdetect_seed if seed is None else seed

    def rank(self, text: str) -> RankedLanguages:
        """
        Rank candidate languages for text.

        Args:
            text: Text to analyze

        Returns:
            List of (language_code, probability) pairs, most probable first

        Raises:
            StatisticalDetectionError: If langdetect finds no usable features
        """
        try:
            candidates = detect_langs(text)
        except LangDetectException as e:
            raise StatisticalDetectionError(f"Unable to detect language: {e}") from e

        return [(candidate.lang, candidate.prob) for candidate in candidates]

"""Statistical language detection package."""
from src.statistical.detector import (
    LangdetectDetector,
    RankedLanguages,
    StatisticalDetectionError,
    StatisticalDetector,
)

__all__ = ["LangdetectDetector", "RankedLanguages", "StatisticalDetectionError", "StatisticalDetector"]

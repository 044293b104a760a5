"""Batch pre-filter that routes records by language."""
from typing import Dict, List, Optional, Tuple
from src.classification.decision_engine import LanguageDetector
from src.classification.options import ClassificationOptions
from src.utils.language_detector import get_language_detector
import logging

logger = logging.getLogger(__name__)


class EnglishTextFilter:
    """Filter texts and records before translation or further processing."""

    def __init__(
        self,
        detector: Optional[LanguageDetector] = None,
        options: Optional[ClassificationOptions] = None,
        keep: str = 'english'
    ):
        """
        Initialize text filter.

        Args:
            detector: Language detector (default: shared detector)
            options: Classification options (default: from settings)
            keep: Which records to keep, 'english' or 'non_english'
        """
        if keep not in ('english', 'non_english'):
            raise ValueError(f"keep must be 'english' or 'non_english', got {keep!r}")

        self.detector = detector or get_language_detector()
        self.options = ClassificationOptions.resolve(options)
        self.keep = keep

    def split_texts(self, texts: List[str]) -> Tuple[List[str], List[str]]:
        """
        Split texts into English and non-English, preserving order.

        Args:
            texts: Texts to classify

        Returns:
            Tuple of (english_texts, non_english_texts)
        """
        english, non_english = [], []
        for text in texts:
            if self.detector.detect_non_english_text(text, self.options):
                non_english.append(text)
            else:
                english.append(text)
        return english, non_english

    def filter_records(self, records: List[Dict], text_key: str = 'text') -> List[Dict]:
        """
        Keep records whose text matches the configured language.

        Args:
            records: Record dictionaries
            text_key: Key holding the text to classify (default: 'text')

        Returns:
            Records that passed the filter, in input order
        """
        kept = []
        skipped = 0

        for record in records:
            text = record.get(text_key)
            if not isinstance(text, str):
                logger.warning(f"Record has no text under '{text_key}', skipping")
                skipped += 1
                continue

            non_english = self.detector.detect_non_english_text(text, self.options)
            if non_english == (self.keep == 'non_english'):
                kept.append(record)
            else:
                logger.debug(f"Filtered out record: {text[:50]}...")

        logger.info(
            f"Kept {len(kept)} {self.keep} records (filtered from {len(records)}, "
            f"{skipped} without text)"
        )
        return kept

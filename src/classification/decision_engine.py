"""English/non-English decision over normalized words."""
import re
from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping, Optional, Tuple, Union
from config.settings import get_settings
from src.classification.lexical_classifier import LexicalClassifier
from src.classification.options import ClassificationOptions
from src.resources.dictionary import EnglishDictionary, get_english_dictionary
from src.statistical.detector import LangdetectDetector, StatisticalDetector
from src.utils.bounded_cache import BoundedCache
from src.utils.text_normalizer import TextNormalizer
import logging

logger = logging.getLogger(__name__)
settings = get_settings()

OptionsLike = Union[ClassificationOptions, Mapping[str, Any], None]


@dataclass(frozen=True)
class LanguageAnalysis:
    """Outcome of one decision with the values that produced it."""

    non_english: bool
    reason: str
    normalized_text: str = ""
    word_count: int = 0
    relevant_words: int = 0
    english_words: int = 0
    english_ratio: float = 1.0
    threshold: Optional[float] = None
    detector_language: Optional[str] = None
    detector_confidence: Optional[float] = None

    @property
    def is_english(self) -> bool:
        return not self.non_english

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class LanguageDetector:
    """
    Classify text as English or non-English.

    Words are scored against the English dictionary and foreign-word
    heuristics. Only when the English ratio falls below the threshold is the
    statistical detector consulted, on the original text.
    """

    # Quotes and punctuation removed from every token
    TOKEN_STRIP_CHARS = re.compile(r'[‘’\'\-“”"`~!@#$%^&*()+={}\[\]|\\:;<>?,./]')

    def __init__(
        self,
        dictionary: Optional[EnglishDictionary] = None,
        statistical_detector: Optional[StatisticalDetector] = None,
        normalizer: Optional[TextNormalizer] = None,
        word_cache_size: int = None,
        statistical_cache_size: int = None
    ):
        """
        Initialize detector.

        Args:
            dictionary: English word set (default: wordfreq dictionary from settings)
            statistical_detector: Fallback ranker (default: langdetect)
            normalizer: Text normalizer (default: configured geographical terms)
            word_cache_size: Word verdict cache capacity (default: from settings)
            statistical_cache_size: Detector result cache capacity (default: from settings)
        """
        self.lexical_classifier = LexicalClassifier(
            dictionary if dictionary is not None else get_english_dictionary(),
            cache_size=word_cache_size
        )
        self.statistical_detector = statistical_detector or LangdetectDetector()
        self.normalizer = normalizer or TextNormalizer()
        self.statistical_cache = BoundedCache(
            settings.statistical_cache_size if statistical_cache_size is None else statistical_cache_size
        )

    @property
    def word_cache(self) -> BoundedCache:
        return self.lexical_classifier.cache

    def clear_caches(self) -> None:
        """Clear the statistical result and word verdict caches."""
        self.statistical_cache.clear()
        self.word_cache.clear()

    def statistical_analysis(self, text: str) -> Tuple[str, float]:
        """
        Ask the statistical detector for the language of raw text.

        An English result with high confidence anywhere in the top results
        is preferred over the top-ranked language.

        Args:
            text: Original, unnormalized text (also the cache key)

        Returns:
            (language_code, confidence)
        """
        cached = self.statistical_cache.get(text)
        if cached is not None:
            return cached

        ranked = self.statistical_detector.rank(text)
        if not ranked:
            raise ValueError("Statistical detector returned no languages")

        result = ranked[0]
        for language, confidence in ranked[:settings.detector_top_n]:
            if language == settings.english_language_code and confidence >= settings.detector_confidence:
                result = (language, confidence)
                break

        result = (result[0], float(result[1]))
        self.statistical_cache.put(text, result)
        return result

    def analyze(self, text, options: OptionsLike = None, **overrides) -> LanguageAnalysis:
        """
        Analyze text and explain the decision.

        Args:
            text: Text to analyze; None, non-strings and blank text count as English
            options: ClassificationOptions or mapping of option overrides
            **overrides: Individual option overrides

        Returns:
            LanguageAnalysis with ``non_english`` set to the verdict
        """
        opts = ClassificationOptions.resolve(options, **overrides)

        if not text or not isinstance(text, str) or not text.strip():
            return LanguageAnalysis(non_english=False, reason='empty')

        normalized = self.normalizer.normalize(text)
        words = normalized.lower().split(' ') if normalized else []

        if not words:
            return LanguageAnalysis(non_english=False, reason='empty', normalized_text=normalized)

        threshold = opts.english_threshold
        if len(words) <= settings.short_text_word_limit:
            threshold = settings.short_text_threshold

        english_words = 0
        relevant_words = 0

        for word in words:
            clean_word = self.TOKEN_STRIP_CHARS.sub('', word).strip()
            if len(clean_word) < opts.min_word_length:
                continue

            relevant_words += 1
            if self.lexical_classifier.classify_word_cached(clean_word, opts):
                english_words += 1

        english_ratio = english_words / relevant_words if relevant_words > 0 else 1.0

        analysis = dict(
            normalized_text=normalized,
            word_count=len(words),
            relevant_words=relevant_words,
            english_words=english_words,
            english_ratio=english_ratio,
            threshold=threshold,
        )

        if english_ratio >= threshold:
            logger.debug(f"English by ratio {english_ratio:.2f} >= {threshold}")
            return LanguageAnalysis(non_english=False, reason='ratio', **analysis)

        try:
            language, confidence = self.statistical_analysis(text)
        except Exception as e:
            logger.warning(f"Statistical detection failed, deciding by ratio alone: {e}")
            return LanguageAnalysis(non_english=True, reason='detector_unavailable', **analysis)

        analysis.update(detector_language=language, detector_confidence=confidence)
        confident = confidence >= settings.detector_confidence

        if language == settings.english_language_code and confident and english_ratio >= settings.detector_min_ratio:
            reason, non_english = 'detector_english', False
        elif language != settings.english_language_code and confident:
            reason, non_english = 'detector_non_english', True
        else:
            reason, non_english = 'detector_inconclusive', True

        logger.debug(
            f"Ratio {english_ratio:.2f} below {threshold}; detector says {language} "
            f"({confidence:.2f}) -> {reason}"
        )
        return LanguageAnalysis(non_english=non_english, reason=reason, **analysis)

    def detect_non_english_text(self, text, options: OptionsLike = None, **overrides) -> bool:
        """
        Detect if text is non-English.

        Args:
            text: Text to analyze
            options: ClassificationOptions or mapping of option overrides
            **overrides: Individual option overrides

        Returns:
            True if NON-English, False if English
        """
        return self.analyze(text, options, **overrides).non_english

    def is_english(self, text, options: OptionsLike = None, **overrides) -> bool:
        """Return True if text IS English."""
        return not self.detect_non_english_text(text, options, **overrides)

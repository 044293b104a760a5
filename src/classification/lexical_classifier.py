"""Word-level English classification."""
import re
from config.settings import get_settings
from src.classification.indicators import has_obvious_non_english_indicators
from src.classification.options import ClassificationOptions
from src.resources.dictionary import EnglishDictionary
from src.utils.bounded_cache import BoundedCache

settings = get_settings()


class LexicalClassifier:
    """Decide whether single words are English, memoizing verdicts."""

    ENGLISH_CHARSET = re.compile(r'[a-zA-Z0-9\'-]+')
    DIGITS = re.compile(r'[0-9]+')

    def __init__(self, dictionary: EnglishDictionary, cache_size: int = None):
        """
        Initialize classifier.

        Args:
            dictionary: English word set (anything supporting ``in``)
            cache_size: Word verdict cache capacity (default: from settings)
        """
        self.dictionary = dictionary
        self.cache = BoundedCache(settings.word_cache_size if cache_size is None else cache_size)

    def is_english_word(self, word: str, allow_numbers: bool = True) -> bool:
        """
        Classify a single word; the first matching rule wins.

        Args:
            word: Normalized word
            allow_numbers: Treat all-digit tokens as English

        Returns:
            True if the word is English
        """
        if not self.ENGLISH_CHARSET.fullmatch(word):
            return False

        if allow_numbers and self.DIGITS.fullmatch(word):
            return True

        if has_obvious_non_english_indicators(word):
            return False

        if word in self.dictionary:
            return True

        # Contractions: check the stem before the apostrophe
        if "'" in word:
            return word.split("'")[0] in self.dictionary

        return False

    def classify_word_cached(self, word: str, options: ClassificationOptions) -> bool:
        """Classify a word, reusing a previous verdict for the same word and flags."""
        cache_key = f"{word}_{options.allow_numbers}_{options.allow_abbreviations}"

        cached = self.cache.get(cache_key)
        if cached is not None:
            return cached

        result = self.is_english_word(word, allow_numbers=options.allow_numbers)
        self.cache.put(cache_key, result)
        return result

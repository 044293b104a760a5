"""English dictionary resource used for word membership tests."""
from pathlib import Path
from typing import Iterable, List, Optional, Set
from functools import lru_cache
from wordfreq import top_n_list
from config.settings import get_settings
from src.resources.geographical_terms import GEOGRAPHICAL_TERMS
import logging

logger = logging.getLogger(__name__)
settings = get_settings()


class EnglishDictionary:
    """Read-only set of known English words.

    Membership is exact and case-sensitive: callers lowercase words before
    looking them up, matching the lowercase wordfreq list.
    """

    def __init__(self, words: Iterable[str]):
        self._words: Set[str] = set(words)

    def __contains__(self, word: str) -> bool:
        return word in self._words

    def __len__(self) -> int:
        return len(self._words)

    def contains(self, word: str) -> bool:
        """Check whether ``word`` is a known English word."""
        return word in self._words

    @classmethod
    def from_wordfreq(
        cls,
        size: Optional[int] = None,
        extra_path: Optional[str] = None
    ) -> "EnglishDictionary":
        """
        Build the dictionary from the wordfreq English frequency list.

        Args:
            size: Number of most frequent words to include (default: from settings)
            extra_path: Optional file with additional words, one per line

        Returns:
            Loaded dictionary
        """
        size = size or settings.dictionary_size
        words = set(top_n_list('en', size))
        logger.info(f"Loaded {len(words)} English words from wordfreq")

        if extra_path:
            extra = load_word_file(extra_path)
            words.update(extra)
            logger.info(f"Added {len(extra)} words from {extra_path}")

        return cls(words)


def load_word_file(path: str) -> Set[str]:
    """
    Read a word list file.

    Blank lines and lines starting with ``#`` are ignored.

    Raises:
        FileNotFoundError: If the file does not exist
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"Word list not found: {path}")

    words = set()
    with file_path.open(encoding='utf-8') as handle:
        for line in handle:
            word = line.strip()
            if word and not word.startswith('#'):
                words.add(word)
    return words


def get_geographical_terms() -> List[str]:
    """Return the configured geographical terms, built-in ones first."""
    terms = [term for term, _kind in GEOGRAPHICAL_TERMS]
    terms.extend(t for t in settings.extra_geographical_terms if t not in terms)
    return terms


@lru_cache()
def get_english_dictionary() -> EnglishDictionary:
    """Get cached dictionary instance built from settings."""
    return EnglishDictionary.from_wordfreq(
        size=settings.dictionary_size,
        extra_path=settings.extra_dictionary_path
    )

"""Text normalization ahead of word-level language scoring."""
import re
from typing import Iterable, List, Optional
from src.utils.document_patterns import DocumentPatterns


class TextNormalizer:
    """Strip identifiers and place names, then reduce text to letters and basic punctuation."""

    # Candidates for removal; letters among them are kept by filter_characters
    NON_PUNCTUATION = re.compile(r'[^\s.,!?:;\'"()\-]')
    WHITESPACE = re.compile(r'\s+')

    def __init__(self, geographical_terms: Optional[Iterable[str]] = None):
        """
        Initialize normalizer.

        Args:
            geographical_terms: Terms to strip (default: configured terms)
        """
        if geographical_terms is None:
            from src.resources.dictionary import get_geographical_terms
            geographical_terms = get_geographical_terms()

        self.term_patterns: List[re.Pattern] = [
            re.compile(rf'\b{re.escape(term)}\b|\b{re.escape(term)}s\b', re.IGNORECASE)
            for term in geographical_terms
        ]

    @classmethod
    def collapse_whitespace(cls, text: str) -> str:
        """Collapse whitespace runs to a single space and trim."""
        return cls.WHITESPACE.sub(' ', text).strip()

    def remove_geographical_terms(self, text: str) -> str:
        """
        Remove geographical terms as whole words.

        Only the first occurrence of each term is removed.
        """
        if not text:
            return text

        for pattern in self.term_patterns:
            text = pattern.sub('', text, count=1)

        return self.collapse_whitespace(text)

    @classmethod
    def filter_characters(cls, text: str) -> str:
        """Replace everything except letters, whitespace and basic punctuation with spaces."""
        # str.isalpha is true only for Unicode letters, so digits, superscripts,
        # fractions and roman numerals are dropped
        text = cls.NON_PUNCTUATION.sub(lambda m: m.group() if m.group().isalpha() else ' ', text)
        return cls.collapse_whitespace(text)

    def normalize(self, text: Optional[str]) -> str:
        """
        Complete normalization pipeline.

        Args:
            text: Raw text

        Returns:
            Normalized text, empty string for empty input
        """
        if not text:
            return ""

        # Step 1: Strip document identifiers
        text = DocumentPatterns.strip(text)

        # Step 2: Strip geographical terms
        text = self.remove_geographical_terms(text)

        # Step 3: Keep letters and basic punctuation
        return self.filter_characters(text)

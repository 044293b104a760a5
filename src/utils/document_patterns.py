"""Document identifier patterns such as AEM01-WI-DSU06-SD01."""
import re


class DocumentPatterns:
    """Match and strip organizational document identifiers."""

    # Strict identifier shapes, tried in order
    MATCH_PATTERNS = [
        re.compile(r'\b[A-Z]{2,6}\d{1,4}(-[A-Z]{1,3}\d{1,4}){1,3}\b', re.ASCII),  # AEM01-WI-DSU06-SD01
        re.compile(r'\b[A-Z]{2,6}\d{2,4}-[A-Z]{1,3}\d{1,3}\b', re.ASCII),  # AURG340-SF06
        re.compile(r'\b[A-Z]{2,6}\d{1,4}\b', re.ASCII),  # AEM01
    ]

    # Looser shapes for stripping; earlier patterns consume whole hyphenated
    # codes so the bare-code pattern cannot leave suffix fragments behind
    STRIP_PATTERNS = [
        re.compile(r'\b[A-Z]{2,6}\d{0,4}(-[A-Z]{2,6}\d{0,4}){1,4}\b', re.ASCII),
        re.compile(r'\b[A-Z]{2,6}\d{2,4}-[A-Z]{1,3}\d{1,3}\b', re.ASCII),
        re.compile(r'\b[A-Z]{2,6}\d{1,4}\b', re.ASCII),
        re.compile(r'\b[A-Z]{2,4}-[A-Z]{2,4}\d{2,4}\b', re.ASCII),
    ]

    @classmethod
    def matches(cls, text) -> bool:
        """
        Check whether text contains a document identifier.

        Args:
            text: Text to check; anything that is not a non-empty string never matches

        Returns:
            True if any identifier pattern is found
        """
        if not text or not isinstance(text, str):
            return False

        for pattern in cls.MATCH_PATTERNS:
            if pattern.search(text):
                return True

        return False

    @classmethod
    def strip(cls, text: str) -> str:
        """Remove every identifier-like code from text."""
        for pattern in cls.STRIP_PATTERNS:
            text = pattern.sub('', text)
        return re.sub(r'\s+', ' ', text).strip()


def matches_document_pattern(text) -> bool:
    """Check if text contains a document identifier like AEM01 or AURG340-SF06."""
    return DocumentPatterns.matches(text)

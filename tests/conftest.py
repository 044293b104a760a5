"""Shared fixtures for language detection tests."""
import pytest
from src.classification.decision_engine import LanguageDetector
from src.resources.dictionary import EnglishDictionary
from src.utils.language_detector import clear_caches
from src.utils.text_normalizer import TextNormalizer

ENGLISH_WORDS = {
    'the', 'quick', 'brown', 'fox', 'jumps', 'over', 'lazy', 'dog', 'this', 'is',
    'a', 'valid', 'reference', 'report', 'about', 'water', 'quality', 'in',
    'we', 'are', 'here', 'don', 'alpha', 'beta', 'gamma',
}


class FakeStatisticalDetector:
    """Deterministic detector returning a fixed ranking and recording calls."""

    def __init__(self, ranking=None, error=None):
        self.ranking = ranking if ranking is not None else [('de', 0.99)]
        self.error = error
        self.calls = []

    def rank(self, text):
        self.calls.append(text)
        if self.error:
            raise self.error
        return list(self.ranking)


@pytest.fixture
def fake_dictionary():
    return EnglishDictionary(ENGLISH_WORDS)


@pytest.fixture
def fake_detector():
    return FakeStatisticalDetector()


@pytest.fixture
def detector(fake_dictionary, fake_detector):
    """Language detector with a small dictionary and fake statistical detector."""
    return LanguageDetector(
        dictionary=fake_dictionary,
        statistical_detector=fake_detector,
        normalizer=TextNormalizer(geographical_terms=['Zürich', 'München']),
    )


@pytest.fixture(autouse=True)
def reset_shared_caches():
    yield
    clear_caches()

"""Tests for non-English signal heuristics."""
import pytest
from src.classification.indicators import (
    has_non_english_characters,
    has_non_english_ending,
    has_obvious_non_english_indicators,
    is_closed_class_word,
)


@pytest.mark.parametrize("word", ["über", "garçon", "niño", "città", "smørrebrød", "łódź", "şehir"])
def test_diacritics_flag_words(word):
    assert has_non_english_characters(word)
    assert has_obvious_non_english_indicators(word)


@pytest.mark.parametrize("word", ["Gesellschaft", "Möglichkeit", "nación", "stazione", "rapidamente", "mogelijk", "acteur"])
def test_foreign_endings_flag_words(word):
    assert has_non_english_ending(word)
    assert has_obvious_non_english_indicators(word)


@pytest.mark.parametrize("word", ["und", "UND", "Wann", "porque", "pourquoi", "perché", "wanneer", "mesmo", "onlar", "hendes"])
def test_closed_class_words(word):
    assert is_closed_class_word(word)
    assert has_obvious_non_english_indicators(word)


@pytest.mark.parametrize("word", ["la", "der", "Het", "uma", "gli", "avec"])
def test_articles_and_prepositions(word):
    assert has_obvious_non_english_indicators(word)


@pytest.mark.parametrize("word", ["the", "house", "running", "reference", "quality"])
def test_english_words_pass(word):
    assert not has_obvious_non_english_indicators(word)


def test_character_checks_skip_text_with_spaces():
    assert not has_obvious_non_english_indicators("über alles")


def test_closed_class_match_is_whole_string():
    assert not has_obvious_non_english_indicators("under")
    assert not has_obvious_non_english_indicators("und so")


@pytest.mark.parametrize("value", [None, "", "a", 42])
def test_short_or_invalid_input(value):
    assert has_obvious_non_english_indicators(value) is False


@pytest.mark.parametrize("word", ["is", "this", "it", "in", "with", "quality", "IT", "This"])
def test_words_containing_i_are_not_turkish(word):
    assert not has_non_english_characters(word)
    assert not has_obvious_non_english_indicators(word)


@pytest.mark.parametrize("word", ["kız", "ÜBER", "MAÑANA", "ŁÓDŹ", "İstanbul"])
def test_diacritics_detected_in_either_case(word):
    assert has_non_english_characters(word)

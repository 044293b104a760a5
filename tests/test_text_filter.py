"""Tests for the batch language pre-filter."""
import pytest
from src.ingestion.text_filter import EnglishTextFilter

RECORDS = [
    {'id': 1, 'text': "The quick brown fox jumps over the lazy dog"},
    {'id': 2, 'text': "alpha beta gamma zzz yyy"},
    {'id': 3, 'title': "no text field"},
    {'id': 4, 'text': None},
    {'id': 5, 'text': ""},
]


def test_keeps_english_records(detector):
    kept = EnglishTextFilter(detector=detector).filter_records(RECORDS)
    assert [record['id'] for record in kept] == [1, 5]


def test_keeps_non_english_records(detector):
    kept = EnglishTextFilter(detector=detector, keep='non_english').filter_records(RECORDS)
    assert [record['id'] for record in kept] == [2]


def test_custom_text_key(detector):
    records = [{'body': "the lazy dog"}, {'body': "zzz yyy xxx www vvv"}]
    kept = EnglishTextFilter(detector=detector).filter_records(records, text_key='body')
    assert kept == [{'body': "the lazy dog"}]


def test_split_texts_preserves_order(detector):
    texts = ["the lazy dog", "zzz yyy xxx www vvv", "quick brown fox", "xxx www vvv uuu ttt"]
    english, non_english = EnglishTextFilter(detector=detector).split_texts(texts)
    assert english == ["the lazy dog", "quick brown fox"]
    assert non_english == ["zzz yyy xxx www vvv", "xxx www vvv uuu ttt"]


def test_options_are_applied(detector):
    text_filter = EnglishTextFilter(detector=detector, options={'english_threshold': 0.5})
    english, _ = text_filter.split_texts(["alpha beta gamma zzz yyy"])
    assert english == ["alpha beta gamma zzz yyy"]


def test_invalid_keep_value(detector):
    with pytest.raises(ValueError):
        EnglishTextFilter(detector=detector, keep='french')

"""Tests for the English dictionary resource."""
import pytest
from src.resources.dictionary import EnglishDictionary, get_geographical_terms, load_word_file


def test_membership():
    dictionary = EnglishDictionary(['report', 'water'])
    assert 'report' in dictionary
    assert dictionary.contains('water')
    assert not dictionary.contains('Report')
    assert len(dictionary) == 2


def test_load_word_file_skips_blanks_and_comments(tmp_path):
    path = tmp_path / 'words.txt'
    path.write_text("# custom words\nzzyzx\n\n  qwerty  \n", encoding='utf-8')

    assert load_word_file(str(path)) == {'zzyzx', 'qwerty'}


def test_load_word_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_word_file(str(tmp_path / 'missing.txt'))


def test_from_wordfreq_with_extra_words(tmp_path):
    path = tmp_path / 'words.txt'
    path.write_text("zzyzx\n", encoding='utf-8')

    dictionary = EnglishDictionary.from_wordfreq(size=1000, extra_path=str(path))

    assert 'the' in dictionary
    assert 'zzyzx' in dictionary
    assert len(dictionary) <= 1001


def test_geographical_terms_use_term_field():
    terms = get_geographical_terms()
    assert 'Zürich' in terms
    assert 'city' not in terms

"""Tests for the command line entry point."""
import json
import pytest
import main
from src.utils import language_detector


@pytest.fixture
def use_fake_detector(monkeypatch, detector):
    monkeypatch.setattr(language_detector, 'get_language_detector', lambda: detector)
    return detector


def test_labels_each_text(use_fake_detector, capsys):
    assert main.main(["the lazy dog", "zzz yyy xxx www vvv"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines == ["EN\tthe lazy dog", "NON-EN\tzzz yyy xxx www vvv"]


def test_explain_prints_json(use_fake_detector, capsys):
    assert main.main(["--explain", "the lazy dog"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert data['text'] == "the lazy dog"
    assert data['non_english'] is False
    assert data['reason'] == 'ratio'


def test_reads_texts_from_file(use_fake_detector, capsys, tmp_path):
    path = tmp_path / 'texts.txt'
    path.write_text("the lazy dog\n\nzzz yyy xxx www vvv\n", encoding='utf-8')

    assert main.main(["--file", str(path)]) == 0
    assert len(capsys.readouterr().out.splitlines()) == 2


def test_option_flags(use_fake_detector, capsys):
    assert main.main(["--threshold", "0.5", "alpha beta gamma zzz yyy"]) == 0
    assert capsys.readouterr().out.startswith("EN\t")

    assert main.main(["--no-numbers", "--min-word-length", "1", "12345 the"]) == 0
    assert capsys.readouterr().out.startswith("EN\t")


def test_no_input_fails():
    assert main.main([]) == 2

"""Lookup resources for language classification."""
from src.resources.dictionary import EnglishDictionary, get_english_dictionary, get_geographical_terms
from src.resources.geographical_terms import GEOGRAPHICAL_TERMS

__all__ = ["EnglishDictionary", "get_english_dictionary", "get_geographical_terms", "GEOGRAPHICAL_TERMS"]

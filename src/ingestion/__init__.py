"""Ingestion package for pre-filtering text by language."""
from src.ingestion.text_filter import EnglishTextFilter

__all__ = ["EnglishTextFilter"]

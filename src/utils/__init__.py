"""Utilities package."""
from src.utils.bounded_cache import BoundedCache
from src.utils.document_patterns import DocumentPatterns, matches_document_pattern
from src.utils.text_normalizer import TextNormalizer

__all__ = ["BoundedCache", "DocumentPatterns", "TextNormalizer", "matches_document_pattern"]

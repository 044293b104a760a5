"""English/non-English classification package."""
from src.classification.options import ClassificationOptions
from src.classification.lexical_classifier import LexicalClassifier
from src.classification.decision_engine import LanguageAnalysis, LanguageDetector

__all__ = ["ClassificationOptions", "LexicalClassifier", "LanguageAnalysis", "LanguageDetector"]

"""
AnkiTrans - Bing Dictionary lookups turned into AnkiTrans flashcard fields
"""

__version__ = "1.0.0"
__description__ = "Dictionary HTML extraction and card field composition for AnkiTrans"

# Export the pure pipeline and the service factory for easy access
from .core.composer import compose
from .core.extractor import extract
from .core.factory import create_dictionary_service

__all__ = ["extract", "compose", "create_dictionary_service"]

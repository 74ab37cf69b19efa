"""Interface definitions for core components"""

from abc import ABC, abstractmethod

from ..models.field_set import FieldSet
from ..models.word_record import WordRecord


class DictionaryFetcherInterface(ABC):
    """Interface for services that retrieve a dictionary results page"""

    @abstractmethod
    def fetch_html(self, word: str) -> str:
        """Return the decoded HTML of the results page for a word"""
        pass

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Human readable name of the dictionary source"""
        pass


class ExtractorInterface(ABC):
    """Interface for HTML-to-record extraction"""

    @abstractmethod
    def extract(self, html: str, query_term: str) -> WordRecord:
        """Parse a results page into a structured record"""
        pass


class ComposerInterface(ABC):
    """Interface for record-to-card-field composition"""

    @abstractmethod
    def compose(self, query_term: str, record: WordRecord) -> FieldSet:
        """Render a record into the fixed card field set"""
        pass


class TextProcessorInterface(ABC):
    """Interface for text processing operations"""

    @abstractmethod
    def normalize_term(self, term: str) -> str | None:
        """Normalise a lookup term, or None when nothing is left"""
        pass

    @abstractmethod
    def clean_html(self, fragment: str) -> str:
        """Convert an HTML fragment to plain text"""
        pass

    @abstractmethod
    def split_meanings(self, gloss: str) -> list[str]:
        """Split a concise gloss into individual meanings"""
        pass

"""Lookup orchestration: validate, fetch, extract, classify and compose"""

from dataclasses import dataclass

from ..exceptions import AnkiTransError, WordNotFoundError, WordValidationError
from ..logging_config import get_logger
from ..models.field_set import FieldSet
from ..models.word_record import WordRecord
from ..utils.error_handler import ErrorCollector
from .interfaces import (
    ComposerInterface,
    DictionaryFetcherInterface,
    ExtractorInterface,
    TextProcessorInterface,
)

logger = get_logger(__name__)


@dataclass
class LookupResult:
    """Outcome of looking up one word"""

    word: str
    success: bool
    record: WordRecord | None = None
    fields: FieldSet | None = None
    error: str | None = None


class DictionaryService:
    """Looks words up on the dictionary site and builds card fields"""

    def __init__(
        self,
        fetcher: DictionaryFetcherInterface,
        extractor: ExtractorInterface,
        composer: ComposerInterface,
        text_processor: TextProcessorInterface,
    ):
        self.fetcher = fetcher
        self.extractor = extractor
        self.composer = composer
        self.text_processor = text_processor

    def validate_word(self, word: str) -> str:
        """Normalise a lookup term or raise WordValidationError"""
        if not isinstance(word, str):
            raise WordValidationError(word, "Word must be a string")
        cleaned = self.text_processor.normalize_term(word)
        if not cleaned:
            raise WordValidationError(word, "Word cannot be empty")
        return cleaned

    def lookup_html(self, word: str, html: str) -> WordRecord:
        """Extract a record from an already fetched page.

        Raises:
            WordValidationError: the word is empty or not a string
            WordNotFoundError: the page holds no definition for the word
        """
        term = self.validate_word(word)
        record = self.extractor.extract(html, term)
        if record.is_empty_result:
            raise WordNotFoundError(term, [self.fetcher.source_name])
        return record

    def lookup(self, word: str) -> WordRecord:
        """Fetch and extract the record for a word"""
        term = self.validate_word(word)
        logger.info(f"Looking up: {term}")
        html = self.fetcher.fetch_html(term)
        return self.lookup_html(term, html)

    def build_card(self, word: str, html: str | None = None) -> FieldSet:
        """Look a word up and compose its card fields.

        ``Word`` keeps the text as the user selected it (trimmed), while the
        lookup itself uses the normalised term.
        """
        record = self.lookup(word) if html is None else self.lookup_html(word, html)
        return self.composer.compose(word.strip(), record)

    def build_cards(self, words: list[str]) -> list[LookupResult]:
        """Build cards for several words, collecting failures instead of raising"""
        results: list[LookupResult] = []
        errors = ErrorCollector()
        for i, word in enumerate(words, 1):
            logger.debug(f"({i}/{len(words)}) {word}")
            try:
                record = self.lookup(word)
                fields = self.composer.compose(word.strip(), record)
                results.append(
                    LookupResult(word=word, success=True, record=record, fields=fields)
                )
            except AnkiTransError as e:
                errors.add_error(word, e)
                results.append(LookupResult(word=word, success=False, error=str(e)))

        if errors.has_errors():
            errors.log_all(logger)
        return results

"""Text processing utilities shared by the extraction rules"""

import re
from collections.abc import Iterable

from .constants import ExtractionConstants, TextConstants
from .interfaces import TextProcessorInterface


class TextProcessor(TextProcessorInterface):
    """Handles all text cleaning and normalisation operations"""

    # Compile regex patterns once for better performance (sourced from constants)
    WHITESPACE_RE = re.compile(TextConstants.WHITESPACE_PATTERN)
    HTML_TAG_RE = re.compile(TextConstants.HTML_TAG_PATTERN)
    MEANING_SEPARATOR_RE = re.compile(ExtractionConstants.MEANING_SEPARATOR_PATTERN)
    BRACKETED_RE = re.compile(ExtractionConstants.BRACKETED_PATTERN)

    HTML_ENTITIES = TextConstants.HTML_ENTITIES

    @classmethod
    def normalize_term(cls, term: str) -> str | None:
        """Trim, collapse inner whitespace and lowercase a lookup term"""
        if not isinstance(term, str):
            return None
        term = cls.WHITESPACE_RE.sub(" ", term.strip())
        return term.lower() if term else None

    @classmethod
    def clean_html(cls, fragment: str) -> str:
        """Convert an HTML fragment to plain single-spaced text.

        Removes every tag, decodes the common named entities and collapses
        whitespace runs. Must be applied once per capture.
        """
        if not fragment:
            return ""

        text = cls.HTML_TAG_RE.sub("", fragment)
        for entity, char in cls.HTML_ENTITIES:
            text = text.replace(entity, char)

        return cls.WHITESPACE_RE.sub(" ", text).strip()

    @classmethod
    def clean_text(cls, text: str) -> str:
        """Normalise whitespace of already plain text"""
        if not text:
            return ""
        return cls.WHITESPACE_RE.sub(" ", text).strip()

    @classmethod
    def split_meanings(cls, gloss: str) -> list[str]:
        """Split a concise gloss on CJK/ASCII semicolons, dropping empty parts"""
        if not gloss:
            return []
        parts = (part.strip() for part in cls.MEANING_SEPARATOR_RE.split(gloss))
        return [part for part in parts if part]

    @classmethod
    def extract_bracketed(cls, text: str) -> str:
        """Return the first ``[...]`` payload, e.g. a phonetic transcription"""
        if not text:
            return ""
        match = cls.BRACKETED_RE.search(text)
        return match.group(1).strip() if match else ""

    @staticmethod
    def ordered_unique(values: Iterable[str]) -> list[str]:
        """Deduplicate by exact match, keeping first-seen order"""
        seen: dict[str, None] = {}
        for value in values:
            if value and value not in seen:
                seen[value] = None
        return list(seen)

"""Custom exceptions for the AnkiTrans application"""

from typing import Any


class AnkiTransError(Exception):
    """Base exception class for all application errors"""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (Details: {self.details})"
        return self.message


class MalformedInputError(AnkiTransError):
    """Raised when an argument violates the calling contract"""

    def __init__(self, argument: str, reason: str):
        super().__init__(
            f"Malformed argument '{argument}': {reason}",
            {"argument": argument, "reason": reason},
        )
        self.argument = argument
        self.reason = reason


class WordValidationError(MalformedInputError):
    """Raised when the query term is missing, empty or not a string"""

    def __init__(self, word: Any, reason: str):
        AnkiTransError.__init__(
            self,
            f"Invalid word '{word}': {reason}",
            {"word": word, "reason": reason},
        )
        self.argument = "query_term"
        self.word = word
        self.reason = reason


class WordNotFoundError(AnkiTransError):
    """Raised when the dictionary page holds no definition for a word"""

    def __init__(self, word: str, attempted_sources: list | None = None):
        sources_info = (
            f" (tried: {', '.join(attempted_sources)})" if attempted_sources else ""
        )
        super().__init__(
            f"No definition found for '{word}'{sources_info}",
            {"word": word, "attempted_sources": attempted_sources or []},
        )
        self.word = word
        self.attempted_sources = attempted_sources or []


class DictionaryFetchError(AnkiTransError):
    """Raised when the dictionary results page cannot be retrieved"""

    def __init__(
        self,
        word: str,
        url: str,
        status_code: int | None = None,
        original_error: Exception | None = None,
    ):
        reason = f"HTTP {status_code}" if status_code is not None else "request failed"
        super().__init__(
            f"Failed to fetch dictionary page for '{word}' from {url}: {reason}",
            {
                "word": word,
                "url": url,
                "status_code": status_code,
                "original_error": str(original_error) if original_error else None,
            },
        )
        self.word = word
        self.url = url
        self.status_code = status_code
        self.original_error = original_error


class ConfigurationError(AnkiTransError):
    """Raised when configuration is invalid or missing"""

    def __init__(self, setting: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for '{setting}': {reason}",
            {"setting": setting, "value": value, "reason": reason},
        )
        self.setting = setting
        self.value = value
        self.reason = reason

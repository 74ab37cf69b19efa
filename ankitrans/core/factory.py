"""Factory functions for creating configured instances"""

from typing import cast

from .container import DIContainer, setup_default_container
from .dictionary_service import DictionaryService
from .interfaces import (
    ComposerInterface,
    DictionaryFetcherInterface,
    ExtractorInterface,
    TextProcessorInterface,
)


def create_dictionary_service(container: DIContainer | None = None) -> DictionaryService:
    """Create a DictionaryService from a container (defaults when omitted)"""
    container = container or setup_default_container()

    fetcher = cast(
        DictionaryFetcherInterface, container.get(DictionaryFetcherInterface)
    )
    extractor = cast(ExtractorInterface, container.get(ExtractorInterface))
    composer = cast(ComposerInterface, container.get(ComposerInterface))
    text_processor = cast(
        TextProcessorInterface, container.get(TextProcessorInterface)
    )

    # Validate all dependencies are available
    if not all([fetcher, extractor, composer, text_processor]):
        raise RuntimeError(
            "Some required dependencies are not registered in the container"
        )

    return DictionaryService(
        fetcher=fetcher,
        extractor=extractor,
        composer=composer,
        text_processor=text_processor,
    )

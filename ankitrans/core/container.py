"""Dependency injection container wiring the lookup pipeline"""

from collections.abc import Callable
from typing import Any

from .interfaces import (
    ComposerInterface,
    DictionaryFetcherInterface,
    ExtractorInterface,
    TextProcessorInterface,
)


class DIContainer:
    """Maps interfaces to ready instances or to lazily built singletons"""

    def __init__(self) -> None:
        self._instances: dict[type, Any] = {}
        self._factories: dict[type, Callable[[], Any]] = {}

    def register_instance(self, interface: type[Any], instance: Any) -> None:
        """Use ``instance`` for ``interface``, taking precedence over factories"""
        self._instances[interface] = instance

    def register_singleton(
        self, interface: type[Any], factory: Callable[[], Any]
    ) -> None:
        """Build lazily on first ``get`` and reuse afterwards"""
        self._factories[interface] = factory

    def get(self, interface: type[Any]) -> Any | None:
        if interface in self._instances:
            return self._instances[interface]

        factory = self._factories.get(interface)
        if factory is None:
            return None
        instance = self._instances[interface] = factory()
        return instance

    def has(self, interface: type[Any]) -> bool:
        return interface in self._instances or interface in self._factories


def setup_default_container() -> DIContainer:
    """Container with the Bing Dictionary fetcher and the default pipeline"""
    from .composer import FieldComposer
    from .dictionary_fetcher import BingDictionaryFetcher
    from .extractor import DictionaryExtractor
    from .text_processor import TextProcessor

    defaults: dict[type, Callable[[], Any]] = {
        DictionaryFetcherInterface: BingDictionaryFetcher,
        ExtractorInterface: DictionaryExtractor,
        ComposerInterface: FieldComposer,
        TextProcessorInterface: TextProcessor,
    }

    container = DIContainer()
    for interface, implementation in defaults.items():
        container.register_singleton(interface, implementation)
    return container

"""Ordered fallback rule chains used by the extractor.

A chain holds the strategies for one record field, newest page layout
first. Strategies are evaluated in order and the first non-empty result
wins; a strategy that raises counts as a miss. When every strategy misses
the chain's default is used.
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from bs4 import BeautifulSoup

from ..logging_config import get_logger
from ..utils.error_handler import handle_errors

T = TypeVar("T")

logger = get_logger(__name__)


@dataclass(frozen=True)
class ParsedPage:
    """A results page parsed once and shared by every rule"""

    soup: BeautifulSoup
    html: str
    query_term: str


Strategy = Callable[[ParsedPage], T]


class RuleChain(Generic[T]):
    """Chain of responsibility over independent extraction strategies"""

    def __init__(
        self,
        field: str,
        strategies: Sequence[tuple[str, Strategy[T]]],
        default: Strategy[T],
    ):
        self.field = field
        self.default = default
        self._strategies = [
            (
                name,
                handle_errors(
                    default_return=None,
                    log_level=logging.DEBUG,
                    operation_name=f"{field}.{name}",
                )(strategy),
            )
            for name, strategy in strategies
        ]

    @property
    def strategy_names(self) -> list[str]:
        return [name for name, _ in self._strategies]

    def apply(self, page: ParsedPage) -> T:
        for name, strategy in self._strategies:
            result = strategy(page)
            if result:
                logger.debug(f"{self.field}: matched by '{name}'")
                return result
        logger.debug(f"{self.field}: no strategy matched, using default")
        return self.default(page)

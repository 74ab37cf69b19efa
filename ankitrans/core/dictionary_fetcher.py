"""Fetch Bing Dictionary results pages"""

import requests  # type: ignore[import-untyped]

from ..config.settings import settings
from ..exceptions import DictionaryFetchError
from ..logging_config import get_logger
from .constants import DictionaryConstants
from .interfaces import DictionaryFetcherInterface

logger = get_logger(__name__)


class BingDictionaryFetcher(DictionaryFetcherInterface):
    """Retrieves the cn.bing.com/dict results page for a word.

    One GET per lookup with browser-like headers; retrying is left to the
    caller.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: int | None = None,
        market: str | None = None,
    ):
        self.base_url = (base_url or settings.dictionary.base_url).rstrip("/")
        self.timeout = int(
            timeout if timeout is not None else settings.dictionary.request_timeout
        )
        self.market = market or settings.dictionary.market
        self.session = requests.Session()
        headers = DictionaryConstants.DEFAULT_HEADERS.copy()
        headers["User-Agent"] = settings.dictionary.user_agent
        headers["Accept-Language"] = settings.dictionary.accept_language
        self.session.headers.update(headers)

    @property
    def source_name(self) -> str:
        return DictionaryConstants.SOURCE_NAME

    def build_params(self, word: str) -> dict[str, str]:
        # mkt/setlang force the Chinese interface the extractor understands
        return {"q": word, "mkt": self.market, "setlang": self.market}

    def fetch_html(self, word: str) -> str:
        """Return the decoded results page, raising DictionaryFetchError on failure"""
        try:
            response = self.session.get(
                self.base_url, params=self.build_params(word), timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.warning(f"Network error fetching {word}: {e}")
            raise DictionaryFetchError(word, self.base_url, original_error=e) from e

        if response.status_code != 200:
            logger.warning(f"Bing Dictionary returned {response.status_code} for {word}")
            raise DictionaryFetchError(
                word, self.base_url, status_code=response.status_code
            )

        # Bing serves UTF-8 but does not always say so in the headers
        if not response.encoding or response.encoding.lower() == "iso-8859-1":
            response.encoding = "utf-8"
        html = response.text
        if len(html) < 500:
            logger.debug(f"Suspiciously short response for {word}: {html[:200]!r}")
        return html

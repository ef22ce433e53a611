"""Quote provider with live fetch, cache and built-in fallback."""

import logging
import random
from collections import deque

import requests

from tt_stats.exceptions import QuoteFetchError
from tt_stats.models.quote import Quote

logger = logging.getLogger(__name__)

FALLBACK_QUOTE = Quote(
    text="The only way to do great work is to love what you do.",
    attribution="Steve Jobs",
)


class QuoteService:
    """Fetch quotes from the ZenQuotes API, degrading gracefully offline.

    ``get_quote`` tries, in order:
    1. A live fetch (successful results are cached)
    2. A random quote from the bounded cache of earlier fetches
    3. The built-in FALLBACK_QUOTE
    """

    def __init__(
        self,
        api_url: str = "https://zenquotes.io/api/random",
        timeout: float = 5.0,
        cache_size: int = 10,
        session: requests.Session | None = None,
        rng: random.Random | None = None,
    ):
        """Initialize the quote service.

        Args:
            api_url: Endpoint returning a JSON list of {"q": ..., "a": ...}
            timeout: Request timeout in seconds
            cache_size: Maximum number of fetched quotes kept (oldest evicted)
            session: Optional requests session (default: module-level requests)
            rng: Random source for picking cached quotes
        """
        self._api_url = api_url
        self._timeout = timeout
        self._http = session or requests
        self._rng = rng or random.Random()
        self._cache: deque[Quote] = deque(maxlen=cache_size)

    @property
    def cached_quotes(self) -> list[Quote]:
        """Cached quotes, oldest first."""
        return list(self._cache)

    def fetch_quote(self) -> Quote:
        """Fetch one quote from the API and add it to the cache.

        Raises:
            QuoteFetchError: On network errors, HTTP errors or bad payloads
        """
        try:
            response = self._http.get(self._api_url, timeout=self._timeout)
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.Timeout as e:
            raise QuoteFetchError(f"Quote request timed out after {self._timeout}s") from e
        except (requests.RequestException, ValueError) as e:
            raise QuoteFetchError(f"Quote request failed: {e}") from e

        if not isinstance(data, list) or not data or not isinstance(data[0], dict):
            raise QuoteFetchError("Quote API returned no quotes")

        first = data[0]
        text = first.get("q")
        if not isinstance(text, str) or not text:
            raise QuoteFetchError("Quote API returned an empty quote")

        quote = Quote(text=text, attribution=str(first.get("a") or ""))
        self._cache.append(quote)
        return quote

    def get_quote(self) -> Quote:
        """Get a quote, falling back to the cache and then FALLBACK_QUOTE."""
        try:
            return self.fetch_quote()
        except QuoteFetchError as e:
            logger.debug(f"Live quote unavailable: {e}")

        if self._cache:
            return self._rng.choice(self._cache)

        return FALLBACK_QUOTE

"""Tests for QuoteService."""

import random
from unittest.mock import MagicMock

import pytest
import requests

from tt_stats.exceptions import QuoteFetchError
from tt_stats.models import Quote
from tt_stats.services.quote_service import FALLBACK_QUOTE, QuoteService


def _response(payload=None, status_error=None, json_error=None):
    response = MagicMock()
    if status_error:
        response.raise_for_status.side_effect = status_error
    if json_error:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def session():
    return MagicMock()


@pytest.fixture
def service(session):
    return QuoteService(
        api_url="https://example.test/api/random",
        timeout=2.0,
        cache_size=3,
        session=session,
        rng=random.Random(0),
    )


class TestFetchQuote:
    """Tests for live fetching."""

    def test_success(self, service, session):
        session.get.return_value = _response([{"q": "Hello there.", "a": "Kenobi"}])

        quote = service.fetch_quote()

        assert quote == Quote("Hello there.", "Kenobi")
        session.get.assert_called_once_with("https://example.test/api/random", timeout=2.0)
        assert service.cached_quotes == [quote]

    def test_timeout(self, service, session):
        session.get.side_effect = requests.exceptions.Timeout()

        with pytest.raises(QuoteFetchError, match="timed out"):
            service.fetch_quote()

    def test_connection_error(self, service, session):
        session.get.side_effect = requests.exceptions.ConnectionError("offline")

        with pytest.raises(QuoteFetchError):
            service.fetch_quote()

    def test_http_error(self, service, session):
        session.get.return_value = _response(status_error=requests.exceptions.HTTPError("500"))

        with pytest.raises(QuoteFetchError):
            service.fetch_quote()

    def test_bad_json(self, service, session):
        session.get.return_value = _response(json_error=ValueError("not json"))

        with pytest.raises(QuoteFetchError):
            service.fetch_quote()

    @pytest.mark.parametrize("payload", [[], {}, [{"a": "nobody"}], ["text"]])
    def test_empty_payload(self, service, session, payload):
        session.get.return_value = _response(payload)

        with pytest.raises(QuoteFetchError):
            service.fetch_quote()
        assert service.cached_quotes == []

    def test_cache_evicts_oldest(self, service, session):
        for i in range(5):
            session.get.return_value = _response([{"q": f"quote {i}", "a": ""}])
            service.fetch_quote()

        assert [q.text for q in service.cached_quotes] == ["quote 2", "quote 3", "quote 4"]


class TestGetQuote:
    """Tests for the live -> cache -> built-in fallback chain."""

    def test_live_quote_preferred(self, service, session):
        session.get.return_value = _response([{"q": "Live.", "a": "Net"}])
        assert service.get_quote() == Quote("Live.", "Net")

    def test_falls_back_to_cache(self, service, session):
        session.get.return_value = _response([{"q": "Cached.", "a": "Earlier"}])
        service.fetch_quote()
        session.get.side_effect = requests.exceptions.ConnectionError("offline")

        assert service.get_quote() == Quote("Cached.", "Earlier")

    def test_falls_back_to_builtin(self, service, session):
        session.get.side_effect = requests.exceptions.ConnectionError("offline")
        assert service.get_quote() == FALLBACK_QUOTE

    def test_failure_does_not_grow_cache(self, service, session):
        session.get.side_effect = requests.exceptions.ConnectionError("offline")
        service.get_quote()
        assert service.cached_quotes == []

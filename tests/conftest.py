"""Shared test configuration and fixtures."""

import logging

import pytest
import requests

from dogwatch.api.dognzb import DogNZBApi


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code=200, content=b""):
        self.status_code = status_code
        self.content = content


class FakeGetter:
    """Getter that records requested URLs and replays canned responses."""

    def __init__(self, response=None, error=None, responses=None):
        self.response = response or FakeResponse()
        self.error = error
        self.responses = list(responses or [])
        self.urls = []
        self.closed = False

    def get(self, url):
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        if self.responses:
            return self.responses.pop(0)
        return self.response

    def close(self):
        self.closed = True


LIST_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0" xmlns:newznab="http://www.newznab.com/DTD/2010/feeds/attributes/">
  <channel>
    <title>DogNZB Watchlist</title>
    <description>Your movie watchlist</description>
    <item>
      <title>The Shawshank Redemption</title>
      <imdbid>tt0111161</imdbid>
      <newznab:attr name="year" value="1994"/>
    </item>
    <item>
      <title>Heat</title>
      <imdbid>tt0113277</imdbid>
    </item>
    <item>
      <title>Alien</title>
      <imdbid>tt0078748</imdbid>
    </item>
  </channel>
</rss>
"""

EMPTY_LIST_XML = b"<rss><channel><title>DogNZB Watchlist</title></channel></rss>"

LIST_ERROR_XML = b'<error code="100" description="Incorrect user credentials"/>'

ADD_OK_XML = b"<response><uuid>abc123</uuid><code></code><description></description></response>"

ADD_ERROR_XML = (
    b"<response><code>ALREADY_ADDED</code>"
    b"<description>Item is already on your watchlist</description></response>"
)

MALFORMED_XML = b"<rss><channel><item><title>Broken</title></channel>"


@pytest.fixture
def fake_getter():
    return FakeGetter()


@pytest.fixture
def make_api():
    """Build a DogNZBApi over a FakeGetter returning the given response."""

    def _make(content=b"", status_code=200, error=None, api_key="secret-key"):
        getter = FakeGetter(FakeResponse(status_code, content), error=error)
        return DogNZBApi(api_key, getter), getter

    return _make


@pytest.fixture
def connection_error():
    return requests.ConnectionError("connection refused")


@pytest.fixture(scope="function", autouse=True)
def reset_logging():
    """Reset logging configuration after each test."""
    yield
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        handler.close()
        root_logger.removeHandler(handler)
    root_logger.setLevel(logging.WARNING)

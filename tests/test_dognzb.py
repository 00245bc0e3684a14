"""Tests for the DogNZB watchlist API client."""

from urllib.parse import parse_qs, urlsplit

import pytest

from conftest import (
    ADD_ERROR_XML,
    ADD_OK_XML,
    EMPTY_LIST_XML,
    LIST_ERROR_XML,
    LIST_XML,
    MALFORMED_XML,
)
from dogwatch.api.dognzb import (
    DogNZBApi,
    DogNZBApiError,
    ParseError,
    ServiceError,
    TransportError,
    decode_add_remove,
    decode_list,
)
from dogwatch.models import AddRemoveResult, ResourceKind


def _query(url):
    return parse_qs(urlsplit(url).query, keep_blank_values=True)


class TestBuildUrl:
    """Request URL construction."""

    @pytest.mark.parametrize("verb", ["list", "add", "remove"])
    @pytest.mark.parametrize(
        "kind,param,other",
        [
            (ResourceKind.MOVIE, "movieid", "showid"),
            (ResourceKind.TV, "showid", "movieid"),
        ],
    )
    def test_identifier_parameter_matches_kind(self, make_api, verb, kind, param, other):
        api, _ = make_api()

        query = _query(api.build_url(verb, kind, "tt0111161"))

        assert len(query[param]) == 1
        assert other not in query
        assert query["t"] == [verb]
        assert query["o"] == ["json"]
        assert query["apikey"] == ["secret-key"]

    @pytest.mark.parametrize(
        "item_id",
        ["tt0111161", "81189", "a b&c=d/e?f#g", "100%", "ünïcødé"],
    )
    def test_identifier_round_trips(self, make_api, item_id):
        api, _ = make_api()

        query = _query(api.build_url("add", ResourceKind.TV, item_id))

        assert query["showid"] == [item_id]

    def test_reserved_characters_are_encoded(self, make_api):
        api, _ = make_api(api_key="k&y=1")

        url = api.build_url("remove", ResourceKind.MOVIE, "a&b")

        assert "apikey=k%26y%3D1" in url
        assert "movieid=a%26b" in url

    def test_list_ignores_identifier(self, make_api):
        api, _ = make_api()

        query = _query(api.build_url("list", ResourceKind.MOVIE, "tt0111161"))

        assert query["movieid"] == [""]

    def test_url_points_at_watchlist_endpoint(self, make_api):
        api, _ = make_api()

        url = api.build_url("list", ResourceKind.MOVIE)

        assert url.startswith("https://api.dognzb.cr/watchlist?")

    def test_encoding_is_deterministic(self, make_api):
        api, _ = make_api()

        assert api.build_url("add", ResourceKind.MOVIE, "tt1") == (
            "https://api.dognzb.cr/watchlist?t=add&o=json&apikey=secret-key&movieid=tt1"
        )

    def test_custom_base_url_trailing_slash(self, fake_getter):
        api = DogNZBApi("key", fake_getter, url="http://localhost:8080/")

        assert api.build_url("list", ResourceKind.TV).startswith(
            "http://localhost:8080/watchlist?"
        )

    def test_unknown_verb_rejected(self, make_api):
        api, _ = make_api()

        with pytest.raises(ValueError):
            api.build_url("purge", ResourceKind.MOVIE)

    def test_api_key_is_read_only(self, make_api):
        api, _ = make_api()

        with pytest.raises(AttributeError):
            api.api_key = "other"


class TestListItems:
    """Listing watchlists."""

    def test_returns_items_in_document_order(self, make_api):
        api, getter = make_api(LIST_XML)

        items = api.list_items(ResourceKind.MOVIE)

        assert [item.title for item in items] == [
            "The Shawshank Redemption",
            "Heat",
            "Alien",
        ]
        assert [item.imdb_id for item in items] == ["tt0111161", "tt0113277", "tt0078748"]
        assert len(getter.urls) == 1
        assert _query(getter.urls[0])["t"] == ["list"]

    def test_item_keeps_service_fields(self, make_api):
        api, _ = make_api(LIST_XML)

        item = api.list_items(ResourceKind.MOVIE)[0]

        assert item.fields["year"] == "1994"
        assert item.identifier == "tt0111161"

    def test_empty_watchlist(self, make_api):
        api, _ = make_api(EMPTY_LIST_XML)

        assert api.list_items(ResourceKind.TV) == []

    def test_service_error_discards_items(self, make_api):
        body = (
            b'<rss code="201" description="Watchlist unavailable">'
            b"<channel><item><title>Heat</title></item></channel></rss>"
        )
        api, _ = make_api(body)

        with pytest.raises(ServiceError) as exc_info:
            api.list_items(ResourceKind.MOVIE)

        assert exc_info.value.code == 201
        assert exc_info.value.description == "Watchlist unavailable"
        assert str(exc_info.value) == "Watchlist unavailable"

    def test_newznab_error_document(self, make_api):
        api, _ = make_api(LIST_ERROR_XML)

        with pytest.raises(ServiceError, match="Incorrect user credentials") as exc_info:
            api.list_items(ResourceKind.MOVIE)

        assert exc_info.value.code == 100

    def test_zero_error_code_is_success(self, make_api):
        body = b'<rss code="0" description=""><channel><item><title>Heat</title></item></channel></rss>'
        api, _ = make_api(body)

        assert len(api.list_items(ResourceKind.MOVIE)) == 1

    def test_non_numeric_error_code(self, make_api):
        api, _ = make_api(b'<rss code="oops"><channel/></rss>')

        with pytest.raises(ParseError):
            api.list_items(ResourceKind.MOVIE)

    def test_missing_channel(self, make_api):
        api, _ = make_api(b"<html><body>Maintenance</body></html>")

        with pytest.raises(ParseError):
            api.list_items(ResourceKind.MOVIE)


class TestAddRemove:
    """Adding and removing watchlist items."""

    def test_add_success(self, make_api):
        api, getter = make_api(ADD_OK_XML)

        assert api.add(ResourceKind.MOVIE, "tt0111161") is None

        query = _query(getter.urls[0])
        assert query["t"] == ["add"]
        assert query["movieid"] == ["tt0111161"]

    def test_add_service_error(self, make_api):
        api, _ = make_api(ADD_ERROR_XML)

        with pytest.raises(ServiceError, match="already on your watchlist") as exc_info:
            api.add(ResourceKind.TV, "81189")

        assert exc_info.value.code == "ALREADY_ADDED"

    def test_remove_returns_acknowledgment(self, make_api):
        api, getter = make_api(ADD_OK_XML)

        result = api.remove(ResourceKind.TV, "81189")

        assert isinstance(result, AddRemoveResult)
        assert result.error_code == ""
        assert result.fields == {"uuid": "abc123"}
        assert _query(getter.urls[0])["showid"] == ["81189"]

    def test_remove_service_error_returns_nothing(self, make_api):
        api, _ = make_api(ADD_ERROR_XML)
        result = None

        with pytest.raises(ServiceError):
            result = api.remove(ResourceKind.MOVIE, "tt0111161")

        assert result is None

    def test_error_as_root_attributes(self, make_api):
        api, _ = make_api(b'<error code="300" description="Missing parameter"/>')

        with pytest.raises(ServiceError, match="Missing parameter"):
            api.add(ResourceKind.MOVIE, "")


class TestFailureModes:
    """Transport and parse failures shared by every operation."""

    OPERATIONS = [
        lambda api: api.list_items(ResourceKind.MOVIE),
        lambda api: api.add(ResourceKind.MOVIE, "tt0111161"),
        lambda api: api.remove(ResourceKind.TV, "81189"),
    ]

    @pytest.mark.parametrize("operation", OPERATIONS)
    def test_http_500(self, make_api, operation):
        api, _ = make_api(LIST_XML, status_code=500)

        with pytest.raises(TransportError) as exc_info:
            operation(api)

        assert exc_info.value.status_code == 500

    @pytest.mark.parametrize("operation", OPERATIONS)
    def test_connection_failure(self, make_api, connection_error, operation):
        api, _ = make_api(error=connection_error)

        with pytest.raises(TransportError) as exc_info:
            operation(api)

        assert exc_info.value.__cause__ is connection_error

    @pytest.mark.parametrize("operation", OPERATIONS)
    def test_malformed_xml(self, make_api, operation):
        api, _ = make_api(MALFORMED_XML)

        with pytest.raises(ParseError):
            operation(api)

    @pytest.mark.parametrize("operation", OPERATIONS)
    def test_exactly_one_request(self, make_api, operation):
        api, getter = make_api(b"not xml", status_code=200)

        with pytest.raises(DogNZBApiError):
            operation(api)

        assert len(getter.urls) == 1

    def test_non_200_success_status_accepted(self, make_api):
        api, _ = make_api(EMPTY_LIST_XML, status_code=203)

        assert api.list_items(ResourceKind.MOVIE) == []


class TestDecoders:
    """Decoding response bodies directly."""

    def test_decode_list_with_error(self):
        result = decode_list(LIST_ERROR_XML)

        assert result.failed
        assert result.items == []
        assert result.error_description == "Incorrect user credentials"

    def test_decode_list_error_child(self):
        result = decode_list(b'<rss><error code="429" description="Slow down"/><channel/></rss>')

        assert result.error_code == 429
        assert result.error_description == "Slow down"

    def test_decode_add_remove_success(self):
        result = decode_add_remove(ADD_OK_XML)

        assert not result.failed
        assert result.error_description == ""

    def test_decode_add_remove_root_attributes_kept(self):
        result = decode_add_remove(b'<response status="ok" code=""/>')

        assert not result.failed
        assert result.fields == {"status": "ok"}


class _ClientLibraryError(Exception):
    """Stands in for a non-requests HTTP library's exception."""


class _UnreadableResponse:
    status_code = 200

    @property
    def content(self):
        raise _ClientLibraryError("stream reset")


class TestForeignTransports:
    """Getters built on something other than requests."""

    @pytest.mark.parametrize("operation", TestFailureModes.OPERATIONS)
    def test_any_get_failure_is_transport_error(self, make_api, operation):
        error = _ClientLibraryError("connect failed")
        api, _ = make_api(error=error)

        with pytest.raises(TransportError) as exc_info:
            operation(api)

        assert exc_info.value.__cause__ is error

    def test_body_read_failure_is_transport_error(self, fake_getter):
        fake_getter.response = _UnreadableResponse()
        api = DogNZBApi("key", fake_getter)

        with pytest.raises(TransportError, match="stream reset"):
            api.list_items(ResourceKind.MOVIE)


def test_item_fields_are_read_only(make_api):
    api, _ = make_api(LIST_XML)

    item = api.list_items(ResourceKind.MOVIE)[0]

    with pytest.raises(TypeError):
        item.fields["year"] = "2000"
    assert item.fields["year"] == "1994"

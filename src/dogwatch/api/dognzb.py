"""DogNZB watchlist API client."""

import logging
import xml.etree.ElementTree as ET
from typing import Optional, Protocol
from urllib.parse import quote_plus, urlencode

from ..models import AddRemoveResult, ListResult, ResourceKind, WatchlistItem

logger = logging.getLogger(__name__)


class DogNZBApiError(Exception):
    """DogNZB API error."""


class TransportError(DogNZBApiError):
    """Request could not be completed or returned a non-success status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ParseError(DogNZBApiError):
    """Response body could not be decoded."""


class ServiceError(DogNZBApiError):
    """DogNZB reported a failure in its response."""

    def __init__(self, description: str, code=None):
        super().__init__(description or f"DogNZB returned error code {code}")
        self.description = description
        self.code = code


class Response(Protocol):
    status_code: int
    content: bytes


class Getter(Protocol):
    """Anything that can issue a GET for a URL, such as requests.Session."""

    def get(self, url: str) -> Response:
        ...


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _parse_xml(body: bytes) -> ET.Element:
    try:
        return ET.fromstring(body)
    except ET.ParseError as e:
        raise ParseError(f"Failed to parse DogNZB response: {e}") from e


def _read_error(root: ET.Element) -> tuple[Optional[str], str]:
    """Pull the error code and description out of a response document.

    DogNZB reports errors newznab style as attributes on the root
    (``<error code="100" description="..."/>``), but some responses carry
    them as an ``<error>`` child or as ``<code>``/``<description>`` elements.

    Returns:
        Tuple of (code or None if absent, description)
    """
    code = root.get("code")
    description = root.get("description")

    error_elem = root.find("error")
    if error_elem is not None:
        if code is None:
            code = error_elem.get("code")
        if description is None:
            description = error_elem.get("description")

    if code is None:
        code_elem = root.find("code")
        if code_elem is not None:
            code = code_elem.text or ""
    if description is None:
        description_elem = root.find("description")
        if description_elem is not None:
            description = description_elem.text

    if code is not None:
        code = code.strip()
    return code, (description or "").strip()


def _parse_item(item_elem: ET.Element) -> WatchlistItem:
    fields = {}
    for child in item_elem:
        name = _local_name(child.tag)
        # newznab:attr elements carry their data as name/value pairs
        if name == "attr" and child.get("name"):
            fields[child.get("name")] = child.get("value", "")
        else:
            fields[name] = (child.text or "").strip()

    return WatchlistItem(
        title=fields.get("title", ""),
        imdb_id=fields.get("imdbid") or fields.get("imdb") or None,
        tvdb_id=fields.get("tvdbid") or fields.get("tvdb") or None,
        fields=fields,
    )


def decode_list(body: bytes) -> ListResult:
    """Decode the XML body of a watchlist listing.

    Args:
        body: Raw response body

    Returns:
        ListResult with items in document order

    Raises:
        ParseError: If the body is not XML or not a listing
    """
    root = _parse_xml(body)
    code, description = _read_error(root)

    error_code = 0
    if code:
        try:
            error_code = int(code)
        except ValueError as e:
            raise ParseError(f"Invalid error code in DogNZB response: {code!r}") from e

    channel = root.find("channel")
    if channel is None:
        if code is None:
            raise ParseError(
                f"Unexpected DogNZB response: <{_local_name(root.tag)}> has no channel"
            )
        return ListResult(error_code=error_code, error_description=description)

    items = [_parse_item(item_elem) for item_elem in channel.findall("item")]
    return ListResult(
        items=items,
        error_code=error_code,
        error_description=description,
    )


def decode_add_remove(body: bytes) -> AddRemoveResult:
    """Decode the XML body of an add or remove acknowledgment.

    Args:
        body: Raw response body

    Returns:
        AddRemoveResult; an empty error code means success

    Raises:
        ParseError: If the body is not XML
    """
    root = _parse_xml(body)
    code, description = _read_error(root)

    fields = {
        _local_name(child.tag): (child.text or "").strip()
        for child in root
        if _local_name(child.tag) not in ("code", "description", "error")
    }
    fields.update(
        (name, value) for name, value in root.attrib.items()
        if name not in ("code", "description")
    )

    return AddRemoveResult(
        error_code=code or "",
        error_description=description,
        fields=fields,
    )


class DogNZBApi:
    """Client for the DogNZB watchlist API."""

    BASE_URL = "https://api.dognzb.cr"
    VERBS = ("list", "add", "remove")

    def __init__(self, api_key: str, getter: Getter, url: str = BASE_URL):
        """Initialize DogNZB API client.

        Args:
            api_key: DogNZB API key
            getter: Transport used to issue GET requests
            url: DogNZB API base URL
        """
        self._api_key = api_key
        self._getter = getter
        self.url = url.rstrip("/")

    @property
    def api_key(self) -> str:
        return self._api_key

    def build_url(self, verb: str, kind: ResourceKind, item_id: str = "") -> str:
        """Build a watchlist request URL.

        Args:
            verb: One of list, add, remove
            kind: Watchlist to address
            item_id: Item id for add/remove; ignored for list

        Returns:
            Fully-qualified request URL
        """
        if verb not in self.VERBS:
            raise ValueError(f"Unknown watchlist verb: {verb}")

        if verb == "list":
            item_id = ""

        params = [
            ("t", verb),
            ("o", "json"),
            ("apikey", self._api_key),
            (kind.param, item_id),
        ]
        return f"{self.url}/watchlist?{urlencode(params)}"

    def _redact(self, url: str) -> str:
        if not self._api_key:
            return url
        return url.replace(quote_plus(self._api_key), "***")

    def _get(self, url: str) -> bytes:
        logger.debug("GET %s", self._redact(url))

        try:
            response = self._getter.get(url)
        except Exception as e:
            raise TransportError(f"Failed to reach DogNZB: {e}") from e

        status_code = response.status_code
        if not 200 <= status_code < 300:
            raise TransportError(
                f"Bad response from DogNZB: HTTP {status_code}",
                status_code=status_code,
            )

        try:
            return response.content
        except Exception as e:
            raise TransportError(f"Failed reading DogNZB response: {e}") from e

    def list_items(self, kind: ResourceKind) -> list[WatchlistItem]:
        """List the items in a watchlist.

        Args:
            kind: Watchlist to list

        Returns:
            Watchlist items in the order DogNZB returned them

        Raises:
            TransportError: If the request fails
            ParseError: If the response cannot be decoded
            ServiceError: If DogNZB reports an error
        """
        result = decode_list(self._get(self.build_url("list", kind)))

        if result.failed:
            raise ServiceError(result.error_description, code=result.error_code)

        logger.debug("Found %d items in %s watchlist", len(result.items), kind.label)
        return result.items

    def add(self, kind: ResourceKind, item_id: str) -> None:
        """Add an item to a watchlist.

        Raises:
            TransportError: If the request fails
            ParseError: If the response cannot be decoded
            ServiceError: If DogNZB reports an error
        """
        result = decode_add_remove(self._get(self.build_url("add", kind, item_id)))

        if result.failed:
            raise ServiceError(result.error_description, code=result.error_code)

        logger.debug("Added %s to %s watchlist", item_id, kind.label)

    def remove(self, kind: ResourceKind, item_id: str) -> AddRemoveResult:
        """Remove an item from a watchlist.

        Returns:
            DogNZB's acknowledgment of the removal

        Raises:
            TransportError: If the request fails
            ParseError: If the response cannot be decoded
            ServiceError: If DogNZB reports an error
        """
        result = decode_add_remove(self._get(self.build_url("remove", kind, item_id)))

        if result.failed:
            raise ServiceError(result.error_description, code=result.error_code)

        logger.debug("Removed %s from %s watchlist: %s", item_id, kind.label, result.fields)
        return result

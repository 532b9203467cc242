"""
HTTP transport and URL construction for the BGG XML API 2.
"""

import logging
import xml.etree.ElementTree as ET
from typing import Any, Optional
from urllib.parse import urlencode

import requests

from ..config import BASE_URL, REQUEST_TIMEOUT, USER_AGENT
from ..error_handling import DocumentParseError, FetchError

logger = logging.getLogger(__name__)

OPERATIONS = ("collection", "hot", "plays", "thing", "search", "user")


def build_url(operation: str, base_url: str = BASE_URL, **params: Any) -> str:
    """
    Build a request URL for an XML API 2 operation.

    Args:
        operation: Endpoint name (collection, hot, plays, thing, search, user)
        base_url: API root
        **params: Query parameters; True becomes 1, None and False are omitted

    Returns:
        Absolute request URL
    """
    if operation not in OPERATIONS:
        raise ValueError(f"Unknown XML API operation: {operation}")

    query = {}
    for name, value in params.items():
        if value is None or value is False:
            continue
        query[name] = 1 if value is True else value

    url = f"{base_url}/{operation}"
    if query:
        url += "?" + urlencode(query)
    return url


def parse_document(content: bytes) -> ET.Element:
    """
    Decode a response body as UTF-8 and parse it as XML.

    Upstream does not reliably declare its charset in the response headers,
    so the body is always decoded as UTF-8.
    """
    text = content.decode("utf-8", errors="replace").lstrip("\ufeff")
    try:
        return ET.fromstring(text)
    except ET.ParseError as e:
        raise DocumentParseError(f"Malformed XML document: {e}") from e


class HttpTransport:
    """
    Fetches raw response bodies over HTTP.
    """

    def __init__(self, session: Optional[requests.Session] = None, timeout: float = REQUEST_TIMEOUT):
        self.session = session or requests.Session()
        self.session.headers['User-Agent'] = USER_AGENT
        self.timeout = timeout

    def fetch(self, url: str) -> bytes:
        """
        Download a URL.

        Args:
            url: Absolute request URL

        Returns:
            Raw response body

        Raises:
            FetchError: On network errors or a non-success status
        """
        logger.debug(f"Downloading {url}")
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            status = getattr(getattr(e, 'response', None), 'status_code', None)
            raise FetchError(url, str(e), status_code=status) from e

        if response.status_code == 202:
            logger.warning(f"Request queued by BGG (202), response may be empty: {url}")
        return response.content

    def close(self) -> None:
        self.session.close()


def fetch_document(transport: Any, url: str) -> ET.Element:
    """Fetch a URL through the transport and parse the body."""
    return parse_document(transport.fetch(url))

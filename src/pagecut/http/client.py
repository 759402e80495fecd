"""Synchronous HTTP client built on requests."""

from __future__ import annotations

import logging
from types import TracebackType

import requests

from ..exceptions import FetchError
from .protocols import HttpResponse

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (pagecut/1.0)"


class RequestsHttpClient:
    """
    HTTP client backed by a ``requests.Session``.

    A single attempt is made per request. Transport failures surface as
    ``FetchError``; status handling is left to the caller.

    Example:
        with RequestsHttpClient(user_agent="pagecut") as client:
            response = client.get("https://example.com")
            print(response.text)
    """

    def __init__(
        self,
        user_agent: str | None = None,
        proxy: str | None = None,
        connect_timeout: float = 10.0,
        read_timeout: float = 30.0,
        session: requests.Session | None = None,
    ) -> None:
        """
        Initialize the HTTP client.

        Args:
            user_agent: Custom User-Agent string
            proxy: Proxy URL used for both http and https
            connect_timeout: Connection timeout in seconds
            read_timeout: Read timeout in seconds
            session: Pre-built session (mainly for tests)
        """
        self._timeout = (connect_timeout, read_timeout)
        self._session = session or requests.Session()
        self._session.headers["User-Agent"] = user_agent or DEFAULT_USER_AGENT
        if proxy:
            self._session.proxies.update({"http": proxy, "https": proxy})

    def __enter__(self) -> RequestsHttpClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        self._session.close()

    def _decode(self, response: requests.Response) -> str:
        """Decode the body, falling back to detected encoding when none is declared."""
        if response.encoding is None or (
            response.encoding.lower() == "iso-8859-1" and "charset" not in response.headers.get("Content-Type", "")
        ):
            response.encoding = response.apparent_encoding or "utf-8"
        return response.text

    def get(
        self,
        url: str,
        *,
        headers: dict[str, str] | None = None,
    ) -> HttpResponse:
        """
        Perform an HTTP GET request.

        Raises:
            FetchError: On connection errors, timeouts or invalid URLs
        """
        logger.debug(f"GET {url}")
        try:
            response = self._session.get(url, headers=headers, timeout=self._timeout, allow_redirects=True)
        except requests.RequestException as e:
            raise FetchError(url, str(e)) from e

        return HttpResponse(
            status_code=response.status_code,
            text=self._decode(response),
            content_type=response.headers.get("Content-Type", ""),
            headers=dict(response.headers),
            url=response.url,
        )

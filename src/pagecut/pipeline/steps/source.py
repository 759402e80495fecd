"""Steps that obtain the raw document: HTTP fetch, file read, stdin read."""

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

from ...exceptions import FetchError, SourceReadError
from ...http.protocols import HttpClient
from ...models.events import EventType, PageEvent
from ..base import EventEmitter, PageContext

logger = logging.getLogger(__name__)


class FetchStep:
    """
    Pipeline step that fetches ctx.url over HTTP.

    Populates ctx.document. A non-2xx status or an empty body is fatal;
    there are no retries.
    """

    name = "fetch"

    def __init__(self, http_client: HttpClient) -> None:
        """
        Initialize the fetch step.

        Args:
            http_client: HTTP client implementing HttpClient protocol
        """
        self._client = http_client

    def execute(
        self,
        ctx: PageContext,
        emit: Optional[EventEmitter] = None,
    ) -> PageContext:
        url = ctx.url
        if not url:
            raise FetchError("<none>", "no URL to fetch")

        response = self._client.get(url)

        if not response.ok:
            raise FetchError(url, f"HTTP {response.status_code}")

        if not response.text.strip():
            raise FetchError(url, "empty response body")

        ctx.document = response.text
        logger.debug(f"Fetched {url}: {len(response.text)} characters")

        if emit:
            emit(
                PageEvent(
                    type=EventType.FETCH_COMPLETED,
                    source=ctx.source,
                    message=f"Fetched {len(response.text)} characters (HTTP {response.status_code})",
                )
            )
        return ctx


class ReadStep:
    """
    Pipeline step that reads the document from a file or a text stream.

    Exactly one of ``path`` and ``stream`` is used; ``stream`` defaults to
    standard input when no path is given.
    """

    name = "read"

    def __init__(self, path: Optional[Path] = None, stream: Optional[TextIO] = None) -> None:
        self._path = path
        self._stream = stream

    def _read(self) -> str:
        if self._path is not None:
            try:
                return self._path.read_text(encoding="utf-8", errors="replace")
            except FileNotFoundError as e:
                raise SourceReadError(f"File to convert not found: {self._path}") from e
            except OSError as e:
                raise SourceReadError(f"Could not read {self._path}: {e}") from e

        stream = self._stream or sys.stdin
        # Binary-backed streams are decoded like files; undecodable bytes are replaced
        buffer = getattr(stream, "buffer", None)
        try:
            if buffer is not None:
                return buffer.read().decode("utf-8", errors="replace")
            return stream.read()
        except UnicodeDecodeError as e:
            raise SourceReadError(f"Standard input is not valid UTF-8: {e}") from e
        except OSError as e:
            raise SourceReadError(f"Could not read standard input: {e}") from e

    def execute(
        self,
        ctx: PageContext,
        emit: Optional[EventEmitter] = None,
    ) -> PageContext:
        document = self._read()
        if not document.strip():
            raise SourceReadError(f"No markup to convert from {ctx.source}")

        ctx.document = document
        logger.debug(f"Read {len(document)} characters from {ctx.source}")
        return ctx

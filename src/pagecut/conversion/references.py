"""Rewriting of link and resource references against a base location."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlsplit, urlunsplit

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

LINK_ATTRIBUTE = "href"
RESOURCE_ATTRIBUTE = "src"

_SUPPORTED_SCHEMES = frozenset({"http", "https"})


@dataclass(frozen=True)
class Location:
    """
    Base location derived from a source URL.

    Attributes:
        full_url: The source URL without its fragment
        domain: Scheme and host only, e.g. ``https://foo.bar``
        directory: The URL with its trailing slash and final path segment
            stripped, e.g. ``https://foo.bar/blog/2024``
    """

    full_url: str
    domain: str
    directory: str

    @classmethod
    def parse(cls, url: str) -> Optional[Location]:
        """
        Derive a location from a URL.

        Returns None when the URL has no recognizable http(s) scheme and host.

        Example:
            >>> Location.parse("https://foo.bar/blog/2024/article.html").directory
            'https://foo.bar/blog/2024'
        """
        try:
            parts = urlsplit(url.strip())
        except ValueError:
            return None

        if parts.scheme.lower() not in _SUPPORTED_SCHEMES or not parts.netloc:
            return None

        domain = f"{parts.scheme}://{parts.netloc}"
        path = parts.path.rstrip("/")
        directory_path = path.rsplit("/", 1)[0] if "/" in path else ""
        full_url = urlunsplit((parts.scheme, parts.netloc, parts.path, parts.query, ""))

        return cls(full_url=full_url, domain=domain, directory=domain + directory_path)


def rewrite_value(attribute: str, value: str, location: Location) -> str:
    """
    Rewrite a single attribute value.

    Rules, in order:
      1. ``href="#frag"`` -> ``full_url#frag`` (link attribute only)
      2. relative value (no leading ``/`` or ``#``, no ``:``) -> ``directory/value``
      3. absolute path (single leading ``/``) -> ``domain/value``

    Anything containing ``:`` is treated as scheme-qualified and left alone,
    as are protocol-relative ``//host`` values and empty values.
    """
    if not value:
        return value

    if value.startswith("#"):
        if attribute == LINK_ATTRIBUTE:
            return location.full_url + value
        return value

    if ":" in value:
        return value

    if value.startswith("//"):
        return value

    if value.startswith("/"):
        return location.domain + value

    return f"{location.directory}/{value}"


def rewrite_references(document: str, location: Location, parser: str = "html.parser") -> str:
    """
    Rewrite every href/src reference in a document against a base location.

    References are rewritten on parsed tags, so unquoted attributes are
    covered and markup shown as text (code samples, script bodies) is not
    touched. Running this twice re-prefixes relative values.

    Args:
        document: Raw markup
        location: Base location of the page
        parser: BeautifulSoup tree builder name

    Returns:
        New markup with references qualified
    """
    soup = BeautifulSoup(document, parser)
    rewritten = 0

    for attribute in (LINK_ATTRIBUTE, RESOURCE_ATTRIBUTE):
        for tag in soup.find_all(attrs={attribute: True}):
            value = tag.get(attribute)
            if not isinstance(value, str):
                continue

            new_value = rewrite_value(attribute, value, location)
            if new_value != value:
                tag[attribute] = new_value
                rewritten += 1

    logger.debug(f"Rewrote {rewritten} references against {location.full_url}")
    if not rewritten:
        return document
    return str(soup)

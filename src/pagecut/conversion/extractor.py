"""Selector-driven region extraction from HTML pages."""

import logging
from typing import Optional

import soupsieve
from bs4 import BeautifulSoup, Tag

from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class SelectorExtractor:
    """
    Extracts the nodes matching a CSS selector from an HTML document.

    Every node matching the selector is kept, in document order. Nodes
    matching the exclusion selector are removed from the kept nodes, and a
    matched node that itself matches the exclusion selector is dropped.

    Example:
        extractor = SelectorExtractor()
        region = extractor.extract(html, "div.page_content", exclude=".rouge-gutter")
    """

    def __init__(self, parser: str = "html.parser"):
        """
        Initialize the extractor.

        Args:
            parser: BeautifulSoup tree builder name
        """
        self._parser = parser

    def _parse_html(self, document: str) -> BeautifulSoup:
        return BeautifulSoup(document, self._parser)

    def _select(self, root: Tag, selector: str) -> list[Tag]:
        try:
            return list(root.select(selector))
        except (soupsieve.SelectorSyntaxError, NotImplementedError) as e:
            raise ConfigurationError(f"Invalid selector {selector!r}: {e}") from e

    def _remove_excluded(self, element: Tag, exclude: str) -> bool:
        """Drop excluded descendants; return False if the element itself is excluded."""
        if element.decomposed:
            return False
        try:
            if soupsieve.match(exclude, element):
                return False
        except (soupsieve.SelectorSyntaxError, NotImplementedError) as e:
            raise ConfigurationError(f"Invalid selector {exclude!r}: {e}") from e
        for el in self._select(element, exclude):
            el.decompose()
        return True

    def extract(self, document: str, selector: str, exclude: Optional[str] = None) -> str:
        """
        Extract a region from a document.

        Args:
            document: Raw HTML
            selector: CSS selector for the region
            exclude: Optional CSS selector for nodes to remove

        Returns:
            Serialized HTML of all matched nodes, empty string if none matched

        Raises:
            ConfigurationError: If a selector is not valid CSS
        """
        soup = self._parse_html(document)
        matches = self._select(soup, selector)

        if not matches:
            logger.debug(f"No elements match {selector!r}")
            return ""

        if exclude:
            matches = [element for element in matches if self._remove_excluded(element, exclude)]

        logger.debug(f"Matched {len(matches)} element(s) for {selector!r}")
        return "\n".join(str(element) for element in matches)

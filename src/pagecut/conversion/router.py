"""Dispatch of format identifiers to converter backends."""

from __future__ import annotations

import logging
from typing import Optional

from .markdown import HtmlToMarkdown
from .pandoc import PandocConverter
from .text import HtmlToText

logger = logging.getLogger(__name__)

MARKDOWN_FORMAT = "markdown"
PLAIN_FORMAT = "plain"


class ConverterRouter:
    """
    Format converter that picks a backend per target format.

    - ``markdown``: html2text
    - ``plain``: BeautifulSoup text extraction
    - anything else: passed to pandoc as a writer name

    Example:
        router = ConverterRouter()
        router.convert("<h1>Hi</h1>", "markdown")   # '# Hi\\n'
        router.convert("<h1>Hi</h1>", "gfm")        # via pandoc
    """

    def __init__(
        self,
        markdown: Optional[HtmlToMarkdown] = None,
        text: Optional[HtmlToText] = None,
        pandoc: Optional[PandocConverter] = None,
        preserve_whitespace: bool = False,
    ):
        self._markdown = markdown or HtmlToMarkdown()
        self._text = text or HtmlToText()
        self._pandoc = pandoc or PandocConverter(preserve_whitespace=preserve_whitespace)

    def convert(self, fragment: str, target_format: str) -> str:
        """Convert an HTML fragment to ``target_format``."""
        if target_format == MARKDOWN_FORMAT:
            return self._markdown.convert(fragment)
        if target_format == PLAIN_FORMAT:
            return self._text.convert(fragment)

        logger.debug(f"Converting with pandoc writer {target_format!r}")
        return self._pandoc.convert(fragment, target_format)

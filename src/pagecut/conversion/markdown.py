"""HTML to Markdown conversion."""

from __future__ import annotations

import logging
import re

import html2text

from .text import HtmlToText

logger = logging.getLogger(__name__)


class HtmlToMarkdown:
    """
    Converts HTML content to clean Markdown.

    Uses html2text with settings suited to documentation pages. References
    are expected to be absolute already, so no base URL is applied.

    Example:
        converter = HtmlToMarkdown()
        markdown = converter.convert("<h2>Setup</h2><p>Install it.</p>")
    """

    def __init__(
        self,
        body_width: int = 0,
        inline_links: bool = True,
        ignore_images: bool = False,
        ignore_tables: bool = False,
        protect_links: bool = True,
        unicode_snob: bool = True,
        escape_snob: bool = True,
        backquote_code: bool = True,
    ):
        """
        Initialize the Markdown converter.

        Args:
            body_width: Max line width (0 = no wrapping)
            inline_links: Use inline [text](url) vs reference style
            ignore_images: Skip image conversion
            ignore_tables: Skip table conversion
            protect_links: Prevent link mangling
            unicode_snob: Use Unicode chars where possible
            escape_snob: Escape special Markdown chars
            backquote_code: Fence code blocks with backticks instead of indenting
        """
        self._converter = html2text.HTML2Text()

        self._converter.body_width = body_width

        self._converter.inline_links = inline_links
        self._converter.wrap_links = False
        self._converter.protect_links = protect_links

        self._converter.ignore_images = ignore_images
        self._converter.ignore_tables = ignore_tables
        self._converter.unicode_snob = unicode_snob
        self._converter.escape_snob = escape_snob
        self._converter.backquote_code_style = backquote_code

        self._converter.default_image_alt = ""
        self._converter.single_line_break = False

    def _clean_output(self, markdown: str) -> str:
        """Clean up the converted Markdown."""
        markdown = "\n".join(line.rstrip() for line in markdown.split("\n"))
        markdown = re.sub(r"\n{3,}", "\n\n", markdown)

        return markdown.strip() + "\n"

    def convert(self, html: str) -> str:
        """
        Convert HTML to Markdown.

        Args:
            html: HTML content string

        Returns:
            Markdown string ending in a single newline
        """
        try:
            markdown = self._converter.handle(html)
            return self._clean_output(markdown)

        except Exception as e:
            logger.error(f"Failed to convert HTML to Markdown: {e}")
            # Plain text is better than nothing
            return HtmlToText().convert(html)

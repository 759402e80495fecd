"""Heading synthesis for converted documents."""

from __future__ import annotations

import html
import re
from dataclasses import dataclass
from typing import Optional

_SLUG_SEPARATORS = re.compile(r"[-_]+")


@dataclass(frozen=True)
class Heading:
    """
    Document heading: a title line and an optional source citation.

    Rendered as HTML so that the run's format converter produces heading and
    link syntax that is valid in the target format.
    """

    name: str
    source_url: Optional[str] = None

    def to_html(self) -> str:
        parts = [f"<h1>{html.escape(self.name)}</h1>"]
        if self.source_url:
            url = html.escape(self.source_url, quote=True)
            parts.append(f'<p>Source: <a href="{url}">{url}</a></p>')
        return "\n".join(parts)


def prettify_slug(slug: str) -> str:
    """
    Turn a slug into heading text.

    Example:
        >>> prettify_slug("big-cool_article")
        'big cool article'
    """
    return " ".join(_SLUG_SEPARATORS.sub(" ", slug).split())


class HeadingBuilder:
    """
    Builds the heading of a converted document.

    The extracted title text wins when it has content; otherwise the slug of
    the source is used. Building never fails: with neither a title nor a slug
    there is simply no heading.

    Example:
        builder = HeadingBuilder()
        heading = builder.build("", "big-cool-article", "https://foo.bar/big-cool-article")
        heading.name  # 'big cool article'
    """

    def __init__(self, enabled: bool = True, cite_source: bool = True):
        """
        Initialize the heading builder.

        Args:
            enabled: Build headings at all
            cite_source: Add a citation line linking the source URL
        """
        self._enabled = enabled
        self._cite_source = cite_source

    def build(
        self,
        title_text: Optional[str],
        fallback_slug: Optional[str],
        source_url: Optional[str] = None,
    ) -> Optional[Heading]:
        """
        Build a heading.

        Args:
            title_text: Text of the extracted title region (may be empty)
            fallback_slug: Slug of the source, used when the title is empty
            source_url: Source URL to cite, if known

        Returns:
            Heading, or None when disabled or no name is available
        """
        if not self._enabled:
            return None

        name = " ".join((title_text or "").split())
        if not name and fallback_slug:
            name = prettify_slug(fallback_slug)
        if not name:
            return None

        return Heading(name=name, source_url=source_url if self._cite_source else None)

"""Content conversion for pagecut (reference rewriting, extraction, formats, headings)."""

from .extractor import SelectorExtractor
from .heading import Heading, HeadingBuilder, prettify_slug
from .markdown import HtmlToMarkdown
from .pandoc import PandocConverter
from .protocols import FormatConverter, RegionExtractor
from .references import Location, rewrite_references, rewrite_value
from .router import MARKDOWN_FORMAT, PLAIN_FORMAT, ConverterRouter
from .text import HtmlToText

__all__ = [
    # Protocols
    "FormatConverter",
    "RegionExtractor",
    # References
    "Location",
    "rewrite_references",
    "rewrite_value",
    # Implementations
    "SelectorExtractor",
    "ConverterRouter",
    "HtmlToMarkdown",
    "HtmlToText",
    "PandocConverter",
    "MARKDOWN_FORMAT",
    "PLAIN_FORMAT",
    # Headings
    "Heading",
    "HeadingBuilder",
    "prettify_slug",
]

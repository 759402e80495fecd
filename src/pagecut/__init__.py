"""
pagecut - Cut a region out of a web page and convert it to Markdown.

Usage:
    from pagecut import PagecutConfig, PageConverter

    config = PagecutConfig(
        url="https://docs.example.com/guide/intro.html",
        selectors={"content": "div.page_content", "title": "h1"},
        output={"file": "<domain>/<slug>.md"},
    )

    with PageConverter(config) as converter:
        result = converter.run()
    print(result.outcome, result.output_path)
"""

__version__ = "1.0.0"

from .conversion import (
    ConverterRouter,
    Heading,
    HeadingBuilder,
    Location,
    SelectorExtractor,
    rewrite_references,
)
from .core.converter import Outcome, PageConverter, RunResult, convert_page
from .exceptions import (
    ConfigurationError,
    ConversionError,
    EmptyContentError,
    FetchError,
    OutputError,
    PagecutError,
    SourceReadError,
)
from .models.config import (
    EmptyPolicy,
    NetworkConfig,
    OutputConfig,
    PagecutConfig,
    ProfileName,
    SelectorConfig,
)
from .models.events import EventType, PageEvent

__all__ = [
    "__version__",
    # Core
    "PageConverter",
    "RunResult",
    "Outcome",
    "convert_page",
    # Config
    "PagecutConfig",
    "ProfileName",
    "EmptyPolicy",
    "SelectorConfig",
    "OutputConfig",
    "NetworkConfig",
    # Events
    "EventType",
    "PageEvent",
    # Conversion
    "Location",
    "rewrite_references",
    "SelectorExtractor",
    "ConverterRouter",
    "Heading",
    "HeadingBuilder",
    # Errors
    "PagecutError",
    "ConfigurationError",
    "FetchError",
    "SourceReadError",
    "ConversionError",
    "EmptyContentError",
    "OutputError",
]

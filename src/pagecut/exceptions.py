"""Exception hierarchy for pagecut.

Every fatal condition in a run is one of these. Pipeline steps raise them,
the pipeline records them on the page context, and the CLI maps the result
to an exit code.
"""

from __future__ import annotations


class PagecutError(Exception):
    """Base class for all pagecut errors."""


class ConfigurationError(PagecutError):
    """Invalid or contradictory run configuration."""


class FetchError(PagecutError):
    """The source URL could not be fetched or returned nothing usable."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to fetch {url}: {reason}")


class SourceReadError(PagecutError):
    """A file or standard input source could not be read."""


class ConversionError(PagecutError):
    """The format converter failed on a region."""


class EmptyContentError(PagecutError):
    """The content region converted to nothing and the policy forbids that."""

    def __init__(self, source: str):
        self.source = source
        super().__init__(f"No content extracted from {source}")


class OutputError(PagecutError):
    """The assembled document could not be written to its target."""

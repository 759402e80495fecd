"""Protocol definitions for region extraction and format conversion."""

from typing import Optional, Protocol


class RegionExtractor(Protocol):
    """
    Protocol for cutting a region out of a markup document.

    Implementations select the nodes matching a CSS selector and drop every
    node matching the exclusion selector before serializing the result.
    """

    def extract(self, document: str, selector: str, exclude: Optional[str] = None) -> str:
        """
        Extract a region from a document.

        Args:
            document: Raw markup
            selector: CSS selector for the region (e.g. ``div.page_content``)
            exclude: Optional CSS selector for nodes to remove from the region

        Returns:
            Serialized markup of the region, empty string if nothing matched
        """
        ...


class FormatConverter(Protocol):
    """
    Protocol for converting a markup fragment to formatted text.
    """

    def convert(self, fragment: str, target_format: str) -> str:
        """
        Convert markup to the target format.

        Args:
            fragment: Markup fragment
            target_format: Format identifier (``markdown``, ``plain``, pandoc writers)

        Returns:
            Formatted text, possibly empty
        """
        ...

"""RewriteStep - qualify href/src references against the page location."""

import logging
from typing import Optional

from ...conversion.references import Location, rewrite_references
from ...models.events import EventType, PageEvent
from ..base import EventEmitter, PageContext

logger = logging.getLogger(__name__)


class RewriteStep:
    """
    Pipeline step that rewrites references in ctx.document.

    The base is ctx.url, or ``base_url`` for sources without a URL. A base
    that is not an http(s) URL with a host disables rewriting for the run.
    """

    name = "rewrite"

    def __init__(self, base_url: Optional[str] = None) -> None:
        """
        Initialize the rewrite step.

        Args:
            base_url: Base URL used when the context has no source URL
        """
        self._base_url = base_url

    def execute(
        self,
        ctx: PageContext,
        emit: Optional[EventEmitter] = None,
    ) -> PageContext:
        base = ctx.url or self._base_url
        if not base:
            logger.debug(f"No base location for {ctx.source}, references left as-is")
            return ctx

        location = Location.parse(base)
        if location is None:
            logger.debug(f"Unrecognized location {base!r}, references left as-is")
            return ctx

        ctx.location = location
        ctx.document = rewrite_references(ctx.document or "", location)

        if emit:
            emit(
                PageEvent(
                    type=EventType.REFERENCES_REWRITTEN,
                    source=ctx.source,
                    message=f"References qualified against {location.directory}",
                )
            )
        return ctx

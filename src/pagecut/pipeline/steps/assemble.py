"""AssembleStep - emptiness policy and final document assembly."""

import logging
from typing import Optional

from ...exceptions import EmptyContentError
from ...models.config import EmptyPolicy
from ...models.events import EventType, PageEvent
from ..base import EventEmitter, PageContext

logger = logging.getLogger(__name__)


class AssembleStep:
    """
    Pipeline step that checks the content and assembles the document.

    Empty content (after trimming) either ends the run as a successful
    no-op or fails it, depending on the policy. Otherwise the result is
    heading + content + a trailing blank line.
    """

    name = "assemble"

    def __init__(self, empty_policy: EmptyPolicy = EmptyPolicy.SKIP) -> None:
        self._empty_policy = empty_policy

    def execute(
        self,
        ctx: PageContext,
        emit: Optional[EventEmitter] = None,
    ) -> PageContext:
        content = (ctx.content or "").strip()

        if not content:
            if self._empty_policy == EmptyPolicy.ERROR:
                raise EmptyContentError(ctx.source)

            ctx.should_skip = True
            ctx.skip_reason = "No content extracted"
            logger.info(f"No content extracted from {ctx.source}, nothing written")

            if emit:
                emit(
                    PageEvent(
                        type=EventType.PAGE_SUPPRESSED,
                        source=ctx.source,
                        message=ctx.skip_reason,
                    )
                )
            return ctx

        parts = []
        if ctx.heading and ctx.heading.strip():
            parts.append(ctx.heading.strip() + "\n\n")
        parts.append(content + "\n\n")

        ctx.result = "".join(parts)
        return ctx

"""EmitStep - write the assembled document to stdout or append to a file."""

import logging
import sys
from typing import Optional, TextIO

from ...exceptions import OutputError
from ...models.events import EventType, PageEvent
from ...naming import resolve_output_path
from ..base import EventEmitter, PageContext

logger = logging.getLogger(__name__)


class EmitStep:
    """
    Pipeline step that routes ctx.result to its destination.

    With an output template the resolved file is appended to (parent
    directories are created), so several pages can be collected into one
    document. Without one the result goes to ``stream`` (stdout by default).
    """

    name = "emit"

    def __init__(self, output_template: Optional[str] = None, stream: Optional[TextIO] = None) -> None:
        """
        Initialize the emit step.

        Args:
            output_template: Output file template (<domain>/<slug> tokens allowed)
            stream: Stream used when there is no output file
        """
        self._template = output_template
        self._stream = stream

    def _append(self, ctx: PageContext, content: str) -> None:
        path = resolve_output_path(self._template or "", ctx.url)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("a", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            raise OutputError(f"Failed to write {path}: {e}") from e

        ctx.output_path = path
        logger.info(f"Appended {ctx.source} to {path}")

    def execute(
        self,
        ctx: PageContext,
        emit: Optional[EventEmitter] = None,
    ) -> PageContext:
        if ctx.result is None:
            raise OutputError(f"Nothing assembled for {ctx.source}")

        if self._template:
            self._append(ctx, ctx.result)
        else:
            stream = self._stream or sys.stdout
            stream.write(ctx.result)
            stream.flush()

        if emit:
            emit(
                PageEvent(
                    type=EventType.PAGE_WRITTEN,
                    source=ctx.source,
                    output_path=ctx.output_path,
                    message=f"Written to {ctx.output_path or 'stdout'}",
                )
            )
        return ctx

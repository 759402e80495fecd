"""Base classes for the conversion pipeline."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Protocol, runtime_checkable

from ..conversion.references import Location
from ..exceptions import PagecutError
from ..models.events import EventType, PageEvent

logger = logging.getLogger(__name__)

# Type alias for event emitter function
EventEmitter = Callable[[PageEvent], None]


@dataclass
class PageContext:
    """
    State of one conversion run, handed from step to step.

    Steps replace values rather than editing them in place: ``document``
    is swapped for the rewritten document, never patched.

    Attributes:
        source: Source identifier for messages (URL, file path, ``<stdin>``)
        url: Source URL, if the page was fetched
        slug: Fallback name of the page (URL slug or file stem)
        document: Raw markup, after reference rewriting once that step ran
        location: Base location used for rewriting, if one was derived
        heading: Rendered heading block
        content: Rendered content region
        result: Final assembled document
        output_path: File the result was appended to (None for stdout)
        should_skip: If True, remaining steps will be skipped
        skip_reason: Human-readable reason for skipping
        error: Error message if a step failed
        exception: The error raised by the failing step
    """

    source: str
    url: Optional[str] = None
    slug: Optional[str] = None

    document: Optional[str] = None
    location: Optional[Location] = None
    heading: Optional[str] = None
    content: Optional[str] = None
    result: Optional[str] = None
    output_path: Optional[Path] = None

    should_skip: bool = False
    skip_reason: Optional[str] = None
    error: Optional[str] = None
    exception: Optional[PagecutError] = None


@runtime_checkable
class PipelineStep(Protocol):
    """
    Protocol for pipeline steps.

    Error Handling Contract:
    - For expected no-ops (empty content under the skip policy):
      set ctx.should_skip = True and ctx.skip_reason = "reason"
    - For fatal conditions: raise a PagecutError subclass
    - The pipeline catches PagecutError and records it on the context
    """

    name: str

    def execute(
        self,
        ctx: PageContext,
        emit: Optional[EventEmitter] = None,
    ) -> PageContext:
        """
        Execute this pipeline step.

        Args:
            ctx: The page context with accumulated state
            emit: Optional callback to emit events

        Returns:
            The (possibly modified) page context
        """
        ...


@dataclass
class ConvertPipeline:
    """
    Runs one page through an ordered list of steps.

    If a step sets ctx.should_skip = True, remaining steps are skipped. If a
    step raises a PagecutError, the error is recorded in ctx.error and
    processing stops; nothing after the failing step runs, so no output is
    written.

    Example:
        pipeline = ConvertPipeline(steps=[
            FetchStep(http_client),
            RewriteStep(),
            TitleStep(extractor, converter, builder, "h1", None, "markdown"),
            ContentStep(extractor, converter, "div.page_content", None, "markdown"),
            AssembleStep(EmptyPolicy.SKIP),
            EmitStep(),
        ])

        ctx = pipeline.execute("https://example.com/page", url="https://example.com/page")
        if ctx.error:
            logger.error(f"Failed: {ctx.error}")
    """

    steps: list[PipelineStep]

    def execute(
        self,
        source: str,
        *,
        url: Optional[str] = None,
        slug: Optional[str] = None,
        emit: Optional[EventEmitter] = None,
    ) -> PageContext:
        """
        Execute the pipeline for one source.

        Args:
            source: Source identifier for messages
            url: Source URL, if any
            slug: Fallback page name
            emit: Optional callback for emitting events

        Returns:
            PageContext with final state (check error/should_skip for status)
        """
        ctx = PageContext(source=source, url=url, slug=slug)

        if emit:
            emit(PageEvent(type=EventType.STARTED, source=source, message=f"Converting {source}"))

        for step in self.steps:
            if ctx.should_skip:
                break

            try:
                ctx = step.execute(ctx, emit)
            except PagecutError as e:
                ctx.error = f"{step.name}: {e}"
                ctx.exception = e
                ctx.should_skip = True
                logger.debug(f"{source} failed in {step.name}: {e}")

                if emit:
                    emit(PageEvent(type=EventType.FAILED, source=source, error=ctx.error))
                break

        return ctx

    def add_step(self, step: PipelineStep) -> "ConvertPipeline":
        """
        Add a step to the pipeline (fluent API).

        Returns:
            Self for chaining
        """
        self.steps.append(step)
        return self

"""Region extraction steps: title (heading) and content."""

import logging
from typing import Optional

from ...conversion.heading import HeadingBuilder
from ...conversion.protocols import FormatConverter, RegionExtractor
from ...conversion.router import PLAIN_FORMAT
from ...models.events import EventType, PageEvent
from ..base import EventEmitter, PageContext

logger = logging.getLogger(__name__)


class TitleStep:
    """
    Pipeline step that builds the rendered heading.

    Extracts the title region (when a selector is configured), flattens it
    to plain text, and hands it to the HeadingBuilder together with the
    context slug. The heading is rendered with the run's converter.
    """

    name = "title"

    def __init__(
        self,
        extractor: RegionExtractor,
        converter: FormatConverter,
        builder: HeadingBuilder,
        selector: Optional[str],
        exclude: Optional[str],
        target_format: str,
    ) -> None:
        self._extractor = extractor
        self._converter = converter
        self._builder = builder
        self._selector = selector
        self._exclude = exclude
        self._format = target_format

    def _title_text(self, document: str) -> str:
        if not self._selector:
            return ""
        region = self._extractor.extract(document, self._selector, self._exclude)
        if not region.strip():
            logger.debug(f"Title region {self._selector!r} is empty")
            return ""
        return self._converter.convert(region, PLAIN_FORMAT)

    def execute(
        self,
        ctx: PageContext,
        emit: Optional[EventEmitter] = None,
    ) -> PageContext:
        title_text = self._title_text(ctx.document or "")
        heading = self._builder.build(title_text, ctx.slug, ctx.url)
        if heading is None:
            return ctx

        ctx.heading = self._converter.convert(heading.to_html(), self._format)

        if emit:
            emit(
                PageEvent(
                    type=EventType.TITLE_EXTRACTED,
                    source=ctx.source,
                    message=f"Heading: {heading.name}",
                )
            )
        return ctx


class ContentStep:
    """
    Pipeline step that extracts and converts the content region.

    The converted text may be empty; the assemble step decides what that
    means.
    """

    name = "content"

    def __init__(
        self,
        extractor: RegionExtractor,
        converter: FormatConverter,
        selector: str,
        exclude: Optional[str],
        target_format: str,
    ) -> None:
        self._extractor = extractor
        self._converter = converter
        self._selector = selector
        self._exclude = exclude
        self._format = target_format

    def execute(
        self,
        ctx: PageContext,
        emit: Optional[EventEmitter] = None,
    ) -> PageContext:
        region = self._extractor.extract(ctx.document or "", self._selector, self._exclude)
        ctx.content = self._converter.convert(region, self._format) if region.strip() else ""

        logger.debug(f"Converted content of {ctx.source} to {len(ctx.content)} characters of {self._format}")

        if emit:
            emit(
                PageEvent(
                    type=EventType.CONTENT_CONVERTED,
                    source=ctx.source,
                    message=f"Converted to {len(ctx.content)} characters of {self._format}",
                )
            )
        return ctx

"""PageConverter - the orchestrator of one conversion run."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TextIO

from ..conversion.extractor import SelectorExtractor
from ..conversion.heading import HeadingBuilder
from ..conversion.protocols import FormatConverter, RegionExtractor
from ..conversion.router import ConverterRouter
from ..exceptions import ConfigurationError
from ..http.client import RequestsHttpClient
from ..http.protocols import HttpClient
from ..models.config import PagecutConfig
from ..models.profiles import apply_profile
from ..naming import derive_slug, slug_from_path
from ..pipeline.base import ConvertPipeline, EventEmitter, PageContext, PipelineStep
from ..pipeline.steps import AssembleStep, ContentStep, EmitStep, FetchStep, ReadStep, RewriteStep, TitleStep

logger = logging.getLogger(__name__)


class Outcome(str, Enum):
    """Terminal state of a run."""

    WRITTEN = "written"
    SUPPRESSED = "suppressed"
    FAILED = "failed"


@dataclass(frozen=True)
class RunResult:
    """
    Result of a conversion run.

    Attributes:
        outcome: How the run ended
        source: Source identifier
        output_path: File appended to, None for stdout or no output
        error: Error message for failed runs
        document: The assembled document, when one was produced
    """

    outcome: Outcome
    source: str
    output_path: Path | None = None
    error: str | None = None
    document: str | None = None

    @property
    def exit_code(self) -> int:
        return 1 if self.outcome == Outcome.FAILED else 0

    @classmethod
    def from_context(cls, ctx: PageContext) -> RunResult:
        if ctx.error:
            outcome = Outcome.FAILED
        elif ctx.result is None:
            outcome = Outcome.SUPPRESSED
        else:
            outcome = Outcome.WRITTEN
        return cls(
            outcome=outcome,
            source=ctx.source,
            output_path=ctx.output_path,
            error=ctx.error,
            document=ctx.result,
        )


class PageConverter:
    """
    Converts one page according to a PagecutConfig.

    Sequence: obtain document -> rewrite references -> title/heading ->
    content -> emptiness policy and assembly -> emit. Collaborators can be
    injected; otherwise the defaults (requests, BeautifulSoup, html2text /
    pandoc) are used.

    Example:
        config = PagecutConfig(
            url="https://docs.example.com/guide/intro.html",
            selectors={"content": "article", "title": "h1"},
        )

        with PageConverter(config) as converter:
            result = converter.run()
        sys.exit(result.exit_code)
    """

    def __init__(
        self,
        config: PagecutConfig,
        *,
        http_client: HttpClient | None = None,
        extractor: RegionExtractor | None = None,
        converter: FormatConverter | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ):
        """
        Initialize the converter.

        Args:
            config: Run configuration; profile defaults are applied here
            http_client: Fetcher for URL sources
            extractor: Region extractor
            converter: Format converter
            stdin: Stream read when the source is standard input
            stdout: Stream written when there is no output file

        Raises:
            ConfigurationError: If no content selector is configured
        """
        self.config = apply_profile(config)
        if not self.config.selectors.content:
            raise ConfigurationError("A content selector is required")

        self._owns_client = http_client is None
        self._http_client = http_client
        self._extractor = extractor or SelectorExtractor()
        self._converter = converter or ConverterRouter(preserve_whitespace=self.config.output.preserve_whitespace)
        self._stdin = stdin
        self._stdout = stdout

    def __enter__(self) -> PageConverter:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client and isinstance(self._http_client, RequestsHttpClient):
            self._http_client.close()
            self._http_client = None

    def _get_http_client(self) -> HttpClient:
        if self._http_client is None:
            network = self.config.network
            self._http_client = RequestsHttpClient(
                user_agent=network.user_agent,
                proxy=network.proxy,
                connect_timeout=float(network.connect_timeout),
                read_timeout=float(network.read_timeout),
            )
        return self._http_client

    def _source_step(self) -> PipelineStep:
        if self.config.url:
            return FetchStep(self._get_http_client())
        if self.config.reads_stdin:
            return ReadStep(stream=self._stdin)
        return ReadStep(path=self.config.file)

    def _fallback_slug(self) -> str | None:
        if self.config.url:
            return derive_slug(self.config.url)
        if self.config.file and not self.config.reads_stdin:
            return slug_from_path(self.config.file)
        return None

    def build_pipeline(self) -> ConvertPipeline:
        """Assemble the pipeline steps for this configuration."""
        selectors = self.config.selectors
        output = self.config.output

        steps: list[PipelineStep] = [
            self._source_step(),
            RewriteStep(base_url=self.config.base_url),
        ]

        if output.heading:
            builder = HeadingBuilder(enabled=True, cite_source=output.citation)
            steps.append(
                TitleStep(
                    self._extractor,
                    self._converter,
                    builder,
                    selectors.title,
                    selectors.effective_title_exclude,
                    output.format,
                )
            )

        steps.extend(
            [
                ContentStep(
                    self._extractor,
                    self._converter,
                    selectors.content or "",
                    selectors.effective_content_exclude,
                    output.format,
                ),
                AssembleStep(output.empty_policy),
                EmitStep(output.file, stream=self._stdout),
            ]
        )
        return ConvertPipeline(steps=steps)

    def run(self, emit: EventEmitter | None = None) -> RunResult:
        """
        Run the conversion.

        Args:
            emit: Optional callback receiving progress events

        Returns:
            RunResult; fatal errors are reported through it, not raised
        """
        pipeline = self.build_pipeline()
        ctx = pipeline.execute(
            self.config.source_label,
            url=self.config.url,
            slug=self._fallback_slug(),
            emit=emit,
        )

        result = RunResult.from_context(ctx)
        logger.debug(f"Run for {result.source} finished: {result.outcome.value}")
        return result


def convert_page(config: PagecutConfig, **kwargs) -> RunResult:
    """
    Convenience wrapper for one-shot conversions.

    Example:
        result = convert_page(PagecutConfig(file=Path("page.html"), selectors={"content": "main"}))
    """
    with PageConverter(config, **kwargs) as converter:
        return converter.run()

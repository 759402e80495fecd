"""Pydantic configuration models for pagecut."""

from enum import Enum
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field, model_validator

# Path value that selects standard input as the document source
STDIN_PATH = Path("-")

# Substitution tokens accepted in the output file template
OUTPUT_TOKENS = ("<domain>", "<slug>")


class ProfileName(str, Enum):
    """Built-in configuration profiles."""

    APPIAN = "appian"
    CUSTOM = "custom"


class EmptyPolicy(str, Enum):
    """What to do when the content region converts to nothing."""

    SKIP = "skip"
    ERROR = "error"


class SelectorConfig(BaseModel):
    """CSS selectors naming the regions to cut out of the page."""

    content: Optional[str] = Field(None, description="Selector for the content region (required)")
    title: Optional[str] = Field(None, description="Selector for the title region")
    exclude: Optional[str] = Field(
        None,
        description="Selector for nodes removed from both regions",
    )
    title_exclude: Optional[str] = Field(None, description="Exclusion selector for the title region only")
    content_exclude: Optional[str] = Field(None, description="Exclusion selector for the content region only")

    model_config = {"extra": "forbid", "frozen": True}

    @property
    def effective_title_exclude(self) -> Optional[str]:
        return self.title_exclude or self.exclude

    @property
    def effective_content_exclude(self) -> Optional[str]:
        return self.content_exclude or self.exclude


class OutputConfig(BaseModel):
    """Configuration for the converted document and where it goes."""

    file: Optional[str] = Field(
        None,
        description="Output file template (None = stdout). Supports <domain> and <slug>",
    )
    format: str = Field(
        "markdown",
        min_length=1,
        description="Target format: markdown, plain, or any pandoc writer name",
    )
    heading: bool = Field(True, description="Prepend a heading to the document")
    citation: bool = Field(True, description="Cite the source URL under the heading")
    empty_policy: EmptyPolicy = Field(
        EmptyPolicy.SKIP,
        description="skip = succeed without output, error = fail the run",
    )
    preserve_whitespace: bool = Field(False, description="Keep source line layout when converting")

    model_config = {"extra": "forbid", "frozen": True}


class NetworkConfig(BaseModel):
    """Configuration for the HTTP fetcher."""

    proxy: Optional[str] = Field(None, description="HTTP/HTTPS proxy URL")
    user_agent: Optional[str] = Field(None, description="Custom User-Agent header")
    connect_timeout: int = Field(10, ge=1, description="Connection timeout in seconds")
    read_timeout: int = Field(30, ge=1, description="Read timeout in seconds")

    model_config = {"extra": "forbid", "frozen": True}


class PagecutConfig(BaseModel):
    """
    Root configuration model for pagecut.

    Exactly one source must be given: ``url``, or ``file`` (``-`` reads
    standard input). The model is frozen; build a new one instead of
    mutating it.

    Example:
        config = PagecutConfig(
            url="https://docs.example.com/guide/intro.html",
            selectors={"content": "div.page_content", "title": "h1"},
            output={"file": "<domain>/<slug>.md"},
        )

    YAML format:
        url: https://docs.example.com/guide/intro.html
        selectors:
          content: div.page_content
          exclude: .rouge-gutter
        output:
          format: gfm
          empty_policy: error
    """

    profile: ProfileName = Field(
        ProfileName.CUSTOM,
        description="Built-in profile to apply (appian, custom)",
    )
    url: Optional[str] = Field(None, description="URL to fetch and convert")
    file: Optional[Path] = Field(None, description="Markup file to convert ('-' for stdin)")
    base_url: Optional[str] = Field(
        None,
        description="Base URL for rewriting references when the source is a file or stdin",
    )

    selectors: SelectorConfig = Field(default_factory=SelectorConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    network: NetworkConfig = Field(default_factory=NetworkConfig)

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "INFO",
        description="Logging level",
    )
    log_file: Optional[Path] = Field(None, description="Log file path")

    model_config = {"extra": "forbid", "frozen": True}

    @model_validator(mode="after")
    def _check_source(self) -> "PagecutConfig":
        if self.url and self.file:
            raise ValueError("A URL and a file/stdin source were both supplied; use only one")
        if not self.url and not self.file:
            raise ValueError("A URL or a file/stdin source must be supplied")
        if self.url and self.base_url:
            raise ValueError("base_url only applies to file/stdin sources; the URL is already the base")
        template = self.output.file
        if template and not self.url and any(token in template for token in OUTPUT_TOKENS):
            raise ValueError("Output tokens <domain>/<slug> need a URL source")
        return self

    @property
    def reads_stdin(self) -> bool:
        return self.file == STDIN_PATH

    @property
    def source_label(self) -> str:
        """Human-readable identifier of the document source."""
        if self.url:
            return self.url
        if self.reads_stdin:
            return "<stdin>"
        return str(self.file)

    def to_yaml(self) -> str:
        """Serialize config to YAML string."""
        import yaml

        return yaml.dump(self.model_dump(mode="json", exclude_none=True), default_flow_style=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "PagecutConfig":
        """Load config from YAML string."""
        import yaml

        data = yaml.safe_load(yaml_str)
        return cls.model_validate(data)

    @classmethod
    def from_yaml_file(cls, path: Path) -> "PagecutConfig":
        """Load config from YAML file."""
        return cls.from_yaml(path.read_text())

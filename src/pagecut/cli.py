"""Command-line interface for pagecut."""

import argparse
import sys
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from . import __version__
from .core.converter import Outcome, PageConverter
from .exceptions import ConfigurationError
from .logging_config import setup_logging
from .models.config import PagecutConfig
from .models.events import EventType, PageEvent
from .models.profiles import deep_update
from .naming import has_tokens


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI."""
    parser = argparse.ArgumentParser(
        prog="pagecut",
        description="Cut a region out of a web page and convert it to Markdown (or any pandoc format)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Convert the article body of a page
  pagecut -u https://blog.example.com/2024/post.html -s article -t h1

  # Convert piped markup, qualifying references against a base URL
  curl -s https://docs.example.com/guide.html | pagecut -f - -s main --base-url https://docs.example.com/guide.html

  # Collect pages into one file per site
  pagecut -u https://docs.example.com/a.html -s main -o "<domain>/<slug>.md"

  # Appian docs with the built-in selectors
  pagecut -u https://docs.appian.com/suite/help/latest/Records.html --profile appian
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--doctor",
        action="store_true",
        help="Run diagnostic checks",
    )

    # Source
    source_group = parser.add_argument_group("source (exactly one)")
    source_group.add_argument(
        "--url",
        "-u",
        help="URL to fetch and convert",
    )
    source_group.add_argument(
        "--file",
        "-f",
        type=Path,
        help="Markup file to convert ('-' reads standard input)",
    )
    source_group.add_argument(
        "--base-url",
        "--base-path",
        dest="base_url",
        metavar="URL",
        help="Base URL for qualifying references of a file/stdin source",
    )

    # Selectors
    selector_group = parser.add_argument_group("selectors")
    selector_group.add_argument(
        "--selector",
        "-s",
        help="CSS selector of the content region (required unless set by profile/config)",
    )
    selector_group.add_argument(
        "--title",
        "-t",
        metavar="SELECTOR",
        help="CSS selector of the title region used for the heading",
    )
    selector_group.add_argument(
        "--exclude",
        "-x",
        metavar="SELECTOR",
        help="CSS selector of nodes removed from both regions",
    )
    selector_group.add_argument(
        "--title-exclude",
        metavar="SELECTOR",
        help="CSS selector of nodes removed from the title region only",
    )
    selector_group.add_argument(
        "--content-exclude",
        metavar="SELECTOR",
        help="CSS selector of nodes removed from the content region only",
    )

    # Output
    output_group = parser.add_argument_group("output")
    output_group.add_argument(
        "--format",
        "-F",
        help="Target format: markdown (default), plain, or a pandoc writer such as gfm",
    )
    output_group.add_argument(
        "--output",
        "-o",
        metavar="FILE",
        help="Append to FILE instead of stdout; <domain> and <slug> are substituted",
    )
    output_group.add_argument(
        "--no-heading",
        "-H",
        action="store_true",
        help="Do not add a heading",
    )
    output_group.add_argument(
        "--no-citation",
        action="store_true",
        help="Do not cite the source URL under the heading",
    )
    output_group.add_argument(
        "--error-on-empty",
        action="store_true",
        help="Fail instead of silently succeeding when the content region is empty",
    )
    output_group.add_argument(
        "--preserve-whitespace",
        action="store_true",
        help="Keep the source line layout (pandoc formats)",
    )

    # Configuration
    config_group = parser.add_argument_group("configuration")
    config_group.add_argument(
        "--profile",
        "-p",
        choices=["appian", "custom"],
        default=None,
        help="Preset selectors and format",
    )
    config_group.add_argument(
        "--config",
        "-c",
        type=Path,
        metavar="FILE",
        help="YAML config file (command-line options take precedence)",
    )
    config_group.add_argument(
        "--print-config",
        action="store_true",
        help="Print the resolved configuration as YAML and exit",
    )

    # Network
    network_group = parser.add_argument_group("network settings")
    network_group.add_argument(
        "--proxy",
        type=str,
        metavar="URL",
        help="Proxy URL",
    )
    network_group.add_argument(
        "--user-agent",
        type=str,
        help="Custom User-Agent string",
    )
    network_group.add_argument(
        "--timeout",
        type=int,
        default=None,
        metavar="SECONDS",
        help="Read timeout in seconds (default: 30)",
    )

    # Logging
    logging_group = parser.add_argument_group("logging")
    logging_group.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Verbose output",
    )
    logging_group.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Only report errors",
    )
    logging_group.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log messages to this file",
    )

    return parser


def _load_config_file(path: Path) -> dict[str, Any]:
    """Read a YAML config file into a plain dict."""
    try:
        import yaml
    except ImportError as e:
        raise ConfigurationError("YAML config files need PyYAML: pip install pagecut[yaml]") from e

    try:
        data = yaml.safe_load(path.read_text())
    except OSError as e:
        raise ConfigurationError(f"Cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping")
    return data


def build_config(args: argparse.Namespace) -> PagecutConfig:
    """
    Build the run configuration from a config file and CLI arguments.

    Raises:
        ConfigurationError: For unreadable config files
        ValidationError: For invalid or contradictory settings
    """
    config_kwargs: dict[str, Any] = _load_config_file(args.config) if args.config else {}

    cli_kwargs: dict[str, Any] = {}
    if args.profile:
        cli_kwargs["profile"] = args.profile
    if args.url:
        cli_kwargs["url"] = args.url
    if args.file:
        cli_kwargs["file"] = args.file
    if args.base_url:
        cli_kwargs["base_url"] = args.base_url

    selector_kwargs: dict[str, Any] = {}
    if args.selector:
        selector_kwargs["content"] = args.selector
    if args.title:
        selector_kwargs["title"] = args.title
    if args.exclude:
        selector_kwargs["exclude"] = args.exclude
    if args.title_exclude:
        selector_kwargs["title_exclude"] = args.title_exclude
    if args.content_exclude:
        selector_kwargs["content_exclude"] = args.content_exclude
    if selector_kwargs:
        cli_kwargs["selectors"] = selector_kwargs

    output_kwargs: dict[str, Any] = {}
    if args.format:
        output_kwargs["format"] = args.format
    if args.output:
        output_kwargs["file"] = args.output
    if args.no_heading:
        output_kwargs["heading"] = False
    if args.no_citation:
        output_kwargs["citation"] = False
    if args.error_on_empty:
        output_kwargs["empty_policy"] = "error"
    if args.preserve_whitespace:
        output_kwargs["preserve_whitespace"] = True
    if output_kwargs:
        cli_kwargs["output"] = output_kwargs

    network_kwargs: dict[str, Any] = {}
    if args.proxy:
        network_kwargs["proxy"] = args.proxy
    if args.user_agent:
        network_kwargs["user_agent"] = args.user_agent
    if args.timeout is not None:
        network_kwargs["read_timeout"] = args.timeout
    if network_kwargs:
        cli_kwargs["network"] = network_kwargs

    if args.verbose:
        cli_kwargs["log_level"] = "DEBUG"
    elif args.quiet:
        cli_kwargs["log_level"] = "ERROR"
    if args.log_file:
        cli_kwargs["log_file"] = args.log_file

    return PagecutConfig.model_validate(deep_update(config_kwargs, cli_kwargs))


def _format_validation_error(error: ValidationError) -> str:
    messages = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"])
        message = detail["msg"].removeprefix("Value error, ")
        messages.append(f"{location}: {message}" if location else message)
    return "; ".join(messages)


def run_converter(
    args: argparse.Namespace,
    console: Optional[Console] = None,
) -> int:
    """Run one conversion with the given arguments."""
    console = console or Console(stderr=True)

    try:
        config = build_config(args)
    except ValidationError as e:
        console.print(f"[red]Configuration error:[/red] {escape(_format_validation_error(e))}")
        return 1
    except ConfigurationError as e:
        console.print(f"[red]Configuration error:[/red] {escape(str(e))}")
        return 1

    setup_logging(
        level=config.log_level,
        log_file=str(config.log_file) if config.log_file else None,
        force=True,
    )

    if args.print_config:
        print(config.to_yaml(), end="")
        return 0

    def show_event(event: PageEvent) -> None:
        if event.type != EventType.FAILED:
            console.print(f"[dim]{escape(str(event))}[/dim]")

    try:
        with PageConverter(config) as converter:
            result = converter.run(emit=show_event if args.verbose else None)
    except ConfigurationError as e:
        console.print(f"[red]Configuration error:[/red] {escape(str(e))}")
        return 1

    if result.outcome == Outcome.FAILED:
        console.print(f"[red]Error:[/red] {escape(result.error or 'conversion failed')}")
        console.print(f"pagecut terminating... ({escape(result.source)})")
    elif result.outcome == Outcome.WRITTEN and result.output_path and not args.quiet:
        console.print(f"[green]Appended[/green] {escape(result.source)} to {escape(str(result.output_path))}")

    return result.exit_code


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    if argv is None:
        argv = sys.argv[1:]

    if not argv:
        parser.print_help(sys.stderr)
        return 1

    args = parser.parse_args(argv)

    if args.doctor:
        from .doctor import run_doctor

        output_dir = Path(args.output).parent if args.output and not has_tokens(args.output) else None
        return run_doctor(output_dir=output_dir)

    return run_converter(args)


if __name__ == "__main__":
    sys.exit(main())

"""Conversion to arbitrary pandoc output formats."""

from __future__ import annotations

import logging

import pypandoc

from ..exceptions import ConversionError

logger = logging.getLogger(__name__)

# Code blocks keep plain fences instead of pandoc highlighting markup
DEFAULT_ARGS = ("--no-highlight",)


class PandocConverter:
    """
    Converts HTML to any pandoc writer through pypandoc.

    The target may carry pandoc extensions, e.g.
    ``markdown_strict-raw_html+simple_tables``. Requires the ``pandoc``
    binary on PATH.

    Example:
        converter = PandocConverter(preserve_whitespace=True)
        rst = converter.convert("<p>Hello</p>", "rst")
    """

    def __init__(self, preserve_whitespace: bool = False, extra_args: list[str] | None = None):
        """
        Initialize the pandoc converter.

        Args:
            preserve_whitespace: Keep the source line layout instead of unwrapping
            extra_args: Additional pandoc command-line arguments
        """
        self._wrap = "preserve" if preserve_whitespace else "none"
        self._extra_args = list(extra_args or [])

    def convert(self, html: str, target_format: str) -> str:
        """
        Convert HTML to the target pandoc format.

        Raises:
            ConversionError: If pandoc is missing or rejects the input/format
        """
        args = [f"--wrap={self._wrap}", *DEFAULT_ARGS, *self._extra_args]
        try:
            output: str = pypandoc.convert_text(html, to=target_format, format="html", extra_args=args)
        except (RuntimeError, OSError) as e:
            raise ConversionError(f"pandoc could not convert to {target_format!r}: {e}") from e

        logger.debug(f"pandoc produced {len(output)} characters of {target_format}")
        return output.strip() + "\n"

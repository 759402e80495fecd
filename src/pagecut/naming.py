"""Slugs and output path templates derived from source URLs."""

import re
from pathlib import Path
from typing import Optional
from urllib.parse import unquote, urlsplit

from .exceptions import ConfigurationError

DOMAIN_TOKEN = "<domain>"
SLUG_TOKEN = "<slug>"

_PAGE_EXTENSIONS = re.compile(r"\.(html?|php|aspx?|jsp)$", re.IGNORECASE)


def sanitize(name: str) -> str:
    """Sanitize a name for use in filenames."""
    name = re.sub(r'[<>:"|?*]', "", name)
    name = re.sub(r"[\\/]", "-", name)
    name = re.sub(r"\s+", "-", name)
    name = re.sub(r"-+", "-", name)
    return name.strip("-")


def derive_slug(url: str) -> str:
    """
    Derive the slug of a URL: its last path segment without page extension.

    Example:
        >>> derive_slug("https://foo.bar/blog/2024/article.html")
        'article'
        >>> derive_slug("https://foo.bar/")
        'index'
    """
    path = unquote(urlsplit(url).path).rstrip("/")
    segment = path.rsplit("/", 1)[-1]
    segment = _PAGE_EXTENSIONS.sub("", segment)
    return sanitize(segment) or "index"


def slug_from_path(path: Path) -> str:
    """Slug of a local input file (its stem)."""
    return sanitize(path.stem) or "index"


def domain_token(url: str) -> str:
    """
    Host part of a URL as a path-friendly token.

    Example:
        >>> domain_token("https://foo.bar/blog/2024/article.html")
        'foo_bar'
    """
    netloc = urlsplit(url).netloc
    return netloc.replace(".", "_").replace(":", "_")


def has_tokens(template: str) -> bool:
    return DOMAIN_TOKEN in template or SLUG_TOKEN in template


def resolve_output_path(template: str, url: Optional[str] = None) -> Path:
    """
    Resolve an output file template into a path.

    Args:
        template: Path template, may contain <domain> and <slug>
        url: Source URL the tokens are taken from

    Returns:
        Resolved path

    Raises:
        ConfigurationError: If the template has tokens but no URL is known

    Example:
        >>> resolve_output_path("<domain>/<slug>.md", "https://foo.bar/blog/2024/article.html")
        PosixPath('foo_bar/article.md')
    """
    if not has_tokens(template):
        return Path(template)

    if not url:
        raise ConfigurationError(f"Output template {template!r} uses <domain>/<slug> but there is no source URL")

    resolved = template.replace(DOMAIN_TOKEN, domain_token(url)).replace(SLUG_TOKEN, derive_slug(url))
    return Path(resolved)

"""Built-in configuration profiles for common sites."""

from __future__ import annotations

from typing import Any

from .config import PagecutConfig, ProfileName

PROFILES: dict[ProfileName, dict[str, Any]] = {
    ProfileName.APPIAN: {
        # Appian documentation pages
        "selectors": {
            "content": "div.page_content",
            "exclude": ".rouge-gutter",
        },
        "output": {
            "format": "markdown_strict-raw_html+simple_tables",
        },
    },
    ProfileName.CUSTOM: {
        # No overrides - use explicit config
    },
}


def deep_update(base: dict, overrides: dict) -> dict:
    """Recursively merge ``overrides`` into a copy of ``base``."""
    result = base.copy()
    for key, override_value in overrides.items():
        if key in result and isinstance(result[key], dict) and isinstance(override_value, dict):
            result[key] = deep_update(result[key], override_value)
        else:
            result[key] = override_value
    return result


def apply_profile(config: PagecutConfig) -> PagecutConfig:
    """
    Apply profile defaults to config, preserving user overrides.

    Profile values replace model defaults, but values the user set
    explicitly take precedence over the profile.

    Example:
        >>> config = PagecutConfig(url="https://docs.appian.com/x.html", profile=ProfileName.APPIAN)
        >>> apply_profile(config).selectors.content
        'div.page_content'
    """
    profile_overrides = PROFILES.get(config.profile, {})
    if not profile_overrides:
        return config

    explicit = config.model_dump(exclude_unset=True)
    merged = deep_update(profile_overrides, explicit)
    return PagecutConfig.model_validate(merged)

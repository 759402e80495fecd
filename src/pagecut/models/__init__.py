"""Pagecut configuration and event models."""

from .config import (
    STDIN_PATH,
    EmptyPolicy,
    NetworkConfig,
    OutputConfig,
    PagecutConfig,
    ProfileName,
    SelectorConfig,
)
from .events import EventType, PageEvent
from .profiles import PROFILES, apply_profile

__all__ = [
    # Config
    "STDIN_PATH",
    "EmptyPolicy",
    "NetworkConfig",
    "OutputConfig",
    "PagecutConfig",
    "ProfileName",
    "SelectorConfig",
    # Events
    "EventType",
    "PageEvent",
    # Profiles
    "PROFILES",
    "apply_profile",
]

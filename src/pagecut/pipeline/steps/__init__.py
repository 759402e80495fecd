"""Pipeline step implementations."""

from .assemble import AssembleStep
from .emit import EmitStep
from .extract import ContentStep, TitleStep
from .rewrite import RewriteStep
from .source import FetchStep, ReadStep

__all__ = [
    "AssembleStep",
    "ContentStep",
    "EmitStep",
    "FetchStep",
    "ReadStep",
    "RewriteStep",
    "TitleStep",
]

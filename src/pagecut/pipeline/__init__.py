"""Conversion pipeline for pagecut."""

from .base import ConvertPipeline, EventEmitter, PageContext, PipelineStep

__all__ = [
    "ConvertPipeline",
    "EventEmitter",
    "PageContext",
    "PipelineStep",
]

"""Event types emitted while a page moves through the pipeline."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Optional


class EventType(str, Enum):
    """Types of events emitted during a conversion run."""

    STARTED = "started"
    FETCH_COMPLETED = "fetch_completed"
    REFERENCES_REWRITTEN = "references_rewritten"
    TITLE_EXTRACTED = "title_extracted"
    CONTENT_CONVERTED = "content_converted"
    PAGE_SUPPRESSED = "page_suppressed"
    PAGE_WRITTEN = "page_written"
    FAILED = "failed"


@dataclass
class PageEvent:
    """
    A single progress event for a conversion run.

    Attributes:
        type: What happened
        source: Source identifier (URL, file path or ``<stdin>``)
        message: Human-readable description
        error: Error message for FAILED events
        output_path: File written for PAGE_WRITTEN events (None for stdout)
        timestamp: When the event was created (UTC)
    """

    type: EventType
    source: str
    message: Optional[str] = None
    error: Optional[str] = None
    output_path: Optional[Path] = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __str__(self) -> str:
        text = f"[{self.type.value}] {self.source}"
        if self.message:
            text += f" - {self.message}"
        if self.error:
            text += f" (error: {self.error})"
        return text

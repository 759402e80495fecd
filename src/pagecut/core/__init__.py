"""Run orchestration for pagecut."""

from .converter import Outcome, PageConverter, RunResult, convert_page

__all__ = ["Outcome", "PageConverter", "RunResult", "convert_page"]

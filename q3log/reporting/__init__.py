"""
Report rendering for aggregated games.
"""

from .summary import (
    LogSummary,
    LogSummaryType,
    build_log_summary,
    format_by_method_block,
    format_standard_block,
)

__all__ = [
    "LogSummary",
    "LogSummaryType",
    "build_log_summary",
    "format_by_method_block",
    "format_standard_block",
]

"""
Quake 3 Arena Log Parser

Parses Quake 3 Arena server logs (games.log) into per-game kill statistics:
total kills, players, kill scores and kills grouped by means of death.
"""

__version__ = "0.1.0"
__author__ = "Quake Log Parser Team"

from .processing.processor import LogProcessor, parse_log
from .reporting.summary import LogSummary, LogSummaryType

__all__ = ["LogProcessor", "parse_log", "LogSummary", "LogSummaryType"]

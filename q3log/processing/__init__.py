"""
Processing pipeline for Quake 3 Arena logs.
"""

from .processor import LogProcessor, ProcessingResult, parse_log

__all__ = ["LogProcessor", "ProcessingResult", "parse_log"]

"""
Segmentation module for grouping kill events into games.
"""

from .aggregator import GameAggregator

__all__ = ["GameAggregator"]

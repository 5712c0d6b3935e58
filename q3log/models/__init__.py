"""
Data models for per-game kill statistics.
"""

from .game import Game

__all__ = ["Game"]

"""
Log parser module for processing Quake 3 Arena server logs.
"""

from .tokenizer import LineTokenizer, ParsedLine
from .events import EventFactory, KillEvent, KillMethod, MatchStart, UnrecognizedKillMethod
from .parser import GameLogParser

__all__ = [
    "LineTokenizer",
    "ParsedLine",
    "EventFactory",
    "KillEvent",
    "KillMethod",
    "MatchStart",
    "UnrecognizedKillMethod",
    "GameLogParser",
]

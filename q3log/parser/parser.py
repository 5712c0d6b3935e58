"""
Main log parser that coordinates tokenization and event creation.
"""

from pathlib import Path
from typing import Iterator, List, Optional, Dict, Any
import logging

from .tokenizer import LineTokenizer
from .events import EventFactory, KillEvent, MatchStart, Signal


logger = logging.getLogger(__name__)


class GameLogParser:
    """
    Main parser for Quake 3 Arena server logs.

    Turns log text into an ordered stream of MatchStart and KillEvent
    signals in a single forward pass. Malformed lines never raise; they are
    skipped and counted.
    """

    def __init__(self, encoding: str = "utf-8"):
        """
        Initialize the log parser.

        Args:
            encoding: Text encoding used by parse_file
        """
        self.tokenizer = LineTokenizer()
        self.event_factory = EventFactory()
        self.encoding = encoding
        self.current_file: Optional[Path] = None
        self.lines_read = 0
        self.events_processed = 0
        self.matches_started = 0

    def parse_text(self, content: str) -> Iterator[Signal]:
        """
        Parse log text and yield signals.

        Args:
            content: Complete log text, possibly empty

        Yields:
            MatchStart and KillEvent objects in log order
        """
        if not content:
            return

        match_open = False
        for line_number, line in enumerate(content.split("\n"), start=1):
            self.lines_read += 1

            if self.tokenizer.is_match_start(line):
                match_open = True
                yield self._start_match(line_number)

            event = self._process_line(line, line_number)
            if event is None:
                continue

            # Kills before any marker still need a game to land in
            if not match_open:
                match_open = True
                yield self._start_match(line_number, implicit=True)

            yield event

    def parse_file(self, file_path) -> Iterator[Signal]:
        """
        Parse a log file and yield signals.

        Args:
            file_path: Path to the log file

        Yields:
            MatchStart and KillEvent objects in log order
        """
        file_path = Path(file_path)
        if not file_path.exists():
            raise FileNotFoundError(f"Log file not found: {file_path}")

        self.current_file = file_path
        logger.info(f"Starting parse of {file_path.name} ({file_path.stat().st_size / 1024:.1f} KB)")

        with open(file_path, "r", encoding=self.encoding, errors="ignore") as f:
            content = f.read()

        yield from self.parse_text(content)

        logger.info(f"Completed parsing {file_path.name}: "
                    f"{self.matches_started} games, {self.events_processed} kills, "
                    f"{self.tokenizer.error_count} skipped lines")

    def _start_match(self, line_number: int, implicit: bool = False) -> MatchStart:
        self.matches_started += 1
        if implicit:
            logger.debug(f"Kill on line {line_number} precedes any game start, opening a game")
        return self.event_factory.create_match_start(line_number, implicit=implicit)

    def _process_line(self, line: str, line_number: int) -> Optional[KillEvent]:
        """
        Process a single line and return a kill event if it holds one.

        Args:
            line: Raw line from the log
            line_number: 1-based line position

        Returns:
            KillEvent if the line is a well-formed kill, None otherwise
        """
        parsed_line = self.tokenizer.parse_line(line, line_number)
        if not parsed_line:
            return None

        self.events_processed += 1
        return self.event_factory.create_event(parsed_line)

    def parse_lines(self, lines: List[str]) -> List[Signal]:
        """
        Parse a list of lines and return signals.

        Args:
            lines: List of raw log lines

        Returns:
            List of MatchStart and KillEvent objects
        """
        return list(self.parse_text("\n".join(lines)))

    @property
    def skipped_lines(self) -> List[Dict[str, Any]]:
        """Kill lines that could not be decomposed."""
        return self.tokenizer.errors

    def get_stats(self) -> Dict[str, Any]:
        """
        Get parsing statistics.

        Returns:
            Dictionary with parsing stats
        """
        return {
            "file": str(self.current_file) if self.current_file else None,
            "lines_read": self.lines_read,
            "kill_lines": self.tokenizer.kill_line_count,
            "events_processed": self.events_processed,
            "matches_started": self.matches_started,
            "skipped_lines": self.tokenizer.error_count,
        }

    def reset(self):
        """Reset parser state for a new log."""
        self.tokenizer = LineTokenizer()
        self.lines_read = 0
        self.events_processed = 0
        self.matches_started = 0
        self.current_file = None

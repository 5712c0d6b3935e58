"""
Line tokenizer for parsing Quake 3 Arena log lines.
"""

import re
import logging
from typing import List, Optional, Dict, Any
from dataclasses import dataclass

from q3log.config.quake_data import MATCH_START_MARKER

logger = logging.getLogger(__name__)


@dataclass
class ParsedLine:
    """Represents a decomposed kill line."""

    game_time: str
    killer: str
    victim: str
    method_token: str
    raw_line: str
    line_number: Optional[int] = None


class KillLineError(ValueError):
    """Raised when a line looks like a kill but cannot be decomposed."""


class LineTokenizer:
    """
    Tokenizes individual lines from Quake 3 Arena server logs.

    Kill lines look like:
        "  2:22 Kill: 3 2 10: Isgalamido killed Dono da Bola by MOD_RAILGUN"

    The three numbers after "Kill:" are the killer id, victim id and means of
    death id; the player names follow the third colon.
    """

    # Format: "M:SS Kill: <anything>", matched against the whole trimmed line
    KILL_PATTERN = re.compile(r"^(\d+:\d{2}) Kill: .*$")

    KILLED_SEPARATOR = " killed "
    METHOD_SEPARATOR = " by"

    # Colons in "M:SS Kill: k v m:" before the killer name
    PREFIX_COLONS = 3

    # Malformed lines kept for reporting; error_count keeps counting past this
    MAX_ERROR_SAMPLES = 100

    def __init__(self):
        self.line_count = 0
        self.kill_line_count = 0
        self.error_count = 0
        self.errors: List[Dict[str, Any]] = []

    def is_match_start(self, line: str) -> bool:
        """Check if a line marks the start of a new game."""
        return MATCH_START_MARKER in line

    def parse_line(self, line: str, line_number: Optional[int] = None) -> Optional[ParsedLine]:
        """
        Parse a single log line into kill components.

        Args:
            line: Raw line from the log
            line_number: 1-based position of the line, used for error reports

        Returns:
            ParsedLine for a well-formed kill line, None otherwise
        """
        self.line_count += 1

        # Server logs right-align the timestamp and may carry \r endings
        line = line.strip()
        if not line:
            return None

        match = self.KILL_PATTERN.match(line)
        if not match:
            return None

        self.kill_line_count += 1

        try:
            killer, victim, method_token = self.decompose(line)
        except KillLineError as e:
            self.error_count += 1
            if len(self.errors) < self.MAX_ERROR_SAMPLES:
                self.errors.append({
                    "line": line[:100],
                    "error": str(e),
                    "line_number": line_number if line_number is not None else self.line_count,
                })
            logger.debug(f"Skipping malformed kill line {line_number}: {e}")
            return None

        return ParsedLine(
            game_time=match.group(1),
            killer=killer,
            victim=victim,
            method_token=method_token,
            raw_line=line,
            line_number=line_number,
        )

    def decompose(self, line: str):
        """
        Split a kill line into killer, victim and means-of-death token.

        Args:
            line: Trimmed kill line

        Returns:
            Tuple of (killer, victim, method_token)

        Raises:
            KillLineError: If a required separator is missing
        """
        left, separator, right = line.partition(self.KILLED_SEPARATOR)
        if not separator:
            raise KillLineError(f"missing '{self.KILLED_SEPARATOR.strip()}' separator")

        killer = self._strip_prefix(left)
        if killer is None:
            raise KillLineError("missing timestamp/id prefix before killer")

        by_index = right.rfind(self.METHOD_SEPARATOR)
        if by_index == -1:
            raise KillLineError(f"missing '{self.METHOD_SEPARATOR.strip()}' before method")
        victim = right[:by_index]

        method_token = line[line.rfind(" ") + 1:]

        return killer, victim, method_token

    def _strip_prefix(self, segment: str) -> Optional[str]:
        """
        Drop the "M:SS Kill: k v m: " prefix from the left half of a kill line.

        Everything after the third colon and its trailing space is the killer.
        A colon inside the killer name itself is not supported.
        """
        index = -1
        for _ in range(self.PREFIX_COLONS):
            index = segment.find(":", index + 1)
            if index == -1:
                return None
        return segment[index + 2:]

    def get_stats(self) -> Dict[str, Any]:
        """Get tokenizer statistics."""
        return {
            "lines_processed": self.line_count,
            "kill_lines": self.kill_line_count,
            "errors": self.error_count,
        }

"""
Log processing pipeline: parse, aggregate and render in one call.
"""

import os
import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from ..parser.parser import GameLogParser
from ..segmentation.aggregator import GameAggregator
from ..models.game import Game
from ..reporting.summary import LogSummary, build_log_summary

logger = logging.getLogger(__name__)


@dataclass
class ProcessingResult:
    """Outcome of processing one log."""

    games: List[Game]
    summary: LogSummary
    stats: Dict[str, Any] = field(default_factory=dict)
    skipped_lines: List[Dict[str, Any]] = field(default_factory=list)
    processing_time: float = 0.0
    source: Optional[Path] = None

    @property
    def total_kills(self) -> int:
        return sum(game.total_kills for game in self.games)


class LogProcessor:
    """
    Runs the parser, aggregator and report builder over log text or files.

    Every call uses a fresh parser and aggregator, so one processor can be
    shared between threads.
    """

    def __init__(self, encoding: str = "utf-8", max_workers: Optional[int] = None):
        """
        Initialize the processor.

        Args:
            encoding: Text encoding for log files
            max_workers: Maximum worker threads for process_files (defaults to CPU count)
        """
        self.encoding = encoding
        self.max_workers = max_workers or os.cpu_count() or 1

    def process_text(self, content: str) -> ProcessingResult:
        """
        Process complete log text.

        Args:
            content: Log text, possibly empty

        Returns:
            ProcessingResult with games, rendered summary and stats
        """
        parser = GameLogParser(encoding=self.encoding)
        return self._run(parser, parser.parse_text(content), has_content=bool(content))

    def process_file(self, log_path) -> ProcessingResult:
        """
        Process a log file.

        Args:
            log_path: Path to the log file

        Returns:
            ProcessingResult for the file
        """
        log_path = Path(log_path)
        parser = GameLogParser(encoding=self.encoding)
        has_content = log_path.exists() and log_path.stat().st_size > 0
        result = self._run(parser, parser.parse_file(log_path), has_content=has_content)
        result.source = log_path
        return result

    def process_files(self, log_paths: Sequence) -> List[ProcessingResult]:
        """
        Process several log files concurrently.

        Args:
            log_paths: Paths to log files

        Returns:
            Results in the same order as log_paths; files that failed are left out
        """
        paths = [Path(p) for p in log_paths]
        results: Dict[int, ProcessingResult] = {}

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            future_to_index = {
                executor.submit(self.process_file, path): index
                for index, path in enumerate(paths)
            }

            for future in as_completed(future_to_index):
                index = future_to_index[future]
                try:
                    results[index] = future.result()
                except OSError as e:
                    logger.error(f"Failed to process {paths[index]}: {e}")

        return [results[i] for i in sorted(results)]

    def _run(self, parser: GameLogParser, signals, has_content: bool) -> ProcessingResult:
        start_time = datetime.now()

        aggregator = GameAggregator()
        games = aggregator.process_signals(signals)

        # No content at all is reported as "no data", not as zero games
        summary = build_log_summary(games) if has_content else LogSummary()

        processing_time = (datetime.now() - start_time).total_seconds()
        stats = parser.get_stats()
        stats.update(aggregator.get_summary())

        logger.debug(f"Processed {stats['lines_read']} lines into {len(games)} games "
                     f"in {processing_time:.3f}s")

        return ProcessingResult(
            games=games,
            summary=summary,
            stats=stats,
            skipped_lines=list(parser.skipped_lines),
            processing_time=processing_time,
        )


def parse_log(content: str) -> LogSummary:
    """
    Parse Quake 3 Arena log text into its rendered report views.

    Args:
        content: Complete log text

    Returns:
        LogSummary; both views are None when content is empty
    """
    return LogProcessor().process_text(content).summary

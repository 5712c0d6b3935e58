"""
Rendering of aggregated games into the two report views.

Each game becomes one indented JSON block; joining blocks with line breaks
gives a report that can be printed as-is.
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, Optional, Tuple, Union

from q3log.models.game import Game


class LogSummaryType(Enum):
    """Available report views."""

    STANDARD = "standard"
    BY_KILL_METHOD = "by_kill_method"


def _render_block(data: Dict[str, Any]) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def format_standard_block(game: Game) -> str:
    """Render a game's kill total, roster and scores."""
    return _render_block({
        f"game_{game.game_id}": {
            "total_kills": game.total_kills,
            "players": list(game.players),
            "kills": dict(game.kills),
        }
    })


def format_by_method_block(game: Game) -> str:
    """Render a game's kill counts per means of death."""
    return _render_block({
        f"game-{game.game_id}": {
            "kills_by_means": {method.value: count for method, count in game.kills_by_method.items()},
        }
    })


@dataclass(frozen=True)
class LogSummary:
    """
    Rendered report for a parsed log.

    Both views are None when there was no log content at all, and empty
    tuples when the log was parsed but held no games.
    """

    standard: Optional[Tuple[str, ...]] = None
    by_kill_method: Optional[Tuple[str, ...]] = None

    @property
    def has_data(self) -> bool:
        """Check if a log was parsed."""
        return self.standard is not None or self.by_kill_method is not None

    @property
    def game_count(self) -> int:
        return len(self.standard or ())

    def get_view(self, view: Union[LogSummaryType, str]) -> Tuple[str, ...]:
        """
        Get the rendered blocks for a view.

        Args:
            view: LogSummaryType or its string value

        Returns:
            Tuple of rendered blocks, empty when there is nothing to show

        Raises:
            ValueError: If the view name is unknown
        """
        view = LogSummaryType(view)
        if view is LogSummaryType.STANDARD:
            blocks = self.standard
        else:
            blocks = self.by_kill_method
        return blocks or ()

    def render(self, view: Union[LogSummaryType, str]) -> str:
        """Join a view's blocks into one printable report."""
        return "\n".join(self.get_view(view))


def build_log_summary(games: Iterable[Game]) -> LogSummary:
    """
    Build both report views for a sequence of games.

    Args:
        games: Finished games in id order

    Returns:
        LogSummary with one block per game in each view
    """
    games = list(games)
    return LogSummary(
        standard=tuple(format_standard_block(game) for game in games),
        by_kill_method=tuple(format_by_method_block(game) for game in games),
    )

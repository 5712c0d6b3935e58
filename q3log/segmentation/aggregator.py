"""
Game aggregator for folding kill events into per-game statistics.
"""

import logging
from typing import Iterable, List, Dict, Any, Optional

from q3log.models.game import Game
from q3log.parser.events import KillEvent, MatchStart, Signal

logger = logging.getLogger(__name__)


class GameAggregator:
    """
    Aggregates parser signals into per-game kill statistics.

    Every MatchStart opens a new game; kill events are folded into the most
    recently opened one.
    """

    def __init__(self):
        self.games: List[Game] = []

    @property
    def current_game(self) -> Optional[Game]:
        """The game kill events are currently written into."""
        return self.games[-1] if self.games else None

    def process_signals(self, signals: Iterable[Signal]) -> List[Game]:
        """
        Process a sequence of signals and aggregate statistics.

        Args:
            signals: MatchStart and KillEvent objects in log order

        Returns:
            The aggregated games
        """
        for signal in signals:
            self.process_signal(signal)
        return self.games

    def process_signal(self, signal: Signal):
        """Process a single signal."""
        if isinstance(signal, MatchStart):
            self._start_game(signal.line_number)
        elif isinstance(signal, KillEvent):
            self._process_kill(signal)
        else:
            logger.debug(f"Ignoring unsupported signal {type(signal).__name__}")

    def _start_game(self, line_number: Optional[int] = None) -> Game:
        """Open a new empty game."""
        game = Game(game_id=len(self.games) + 1, start_line=line_number)
        self.games.append(game)
        return game

    def _process_kill(self, event: KillEvent):
        """Process kill event."""
        game = self.current_game
        if game is None:
            game = self._start_game()

        game.add_player(event.killer)
        game.add_player(event.victim)

        # <world> kills and suicides cost the victim a point
        if event.is_penalty():
            game.adjust_score(event.victim, -1)
        else:
            game.adjust_score(event.killer, 1)

        game.total_kills += 1
        game.count_method(event.method)

    def get_games(self) -> List[Game]:
        """Get all aggregated games."""
        return self.games

    def get_summary(self) -> Dict[str, Any]:
        """Get aggregation summary."""
        players = set()
        for game in self.games:
            players.update(game.players)

        return {
            "total_games": len(self.games),
            "total_kills": sum(g.total_kills for g in self.games),
            "unique_players": len(players),
            "top_scorers": {g.game_id: g.get_top_scorer() for g in self.games},
        }

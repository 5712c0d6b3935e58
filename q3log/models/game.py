"""
Per-game kill statistics.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from q3log.config.quake_data import is_world_actor
from q3log.parser.events import MethodType


@dataclass
class Game:
    """
    Running totals for a single game.

    Players, scores and method counts keep first-seen order so reports are
    reproducible for identical input.
    """

    game_id: int
    total_kills: int = 0
    players: List[str] = field(default_factory=list)
    kills: Dict[str, int] = field(default_factory=dict)
    kills_by_method: Dict[MethodType, int] = field(default_factory=dict)
    # 1-based log line that opened the game, None when synthesized
    start_line: Optional[int] = None

    def add_player(self, name: str) -> bool:
        """
        Add a player to the roster.

        Returns:
            True if the player was newly added
        """
        if is_world_actor(name) or name in self.players:
            return False
        self.players.append(name)
        return True

    def adjust_score(self, player: str, delta: int):
        """Add delta to a player's kill score, starting from 0."""
        self.kills[player] = self.kills.get(player, 0) + delta

    def count_method(self, method: MethodType):
        """Count one kill for a means of death."""
        self.kills_by_method[method] = self.kills_by_method.get(method, 0) + 1

    def get_player_count(self) -> int:
        """Get the number of players in this game."""
        return len(self.players)

    def get_method_total(self) -> int:
        """Sum of kills across all means of death."""
        return sum(self.kills_by_method.values())

    def get_top_scorer(self) -> Optional[Tuple[str, int]]:
        """Get the highest scoring player, first seen wins ties."""
        if not self.kills:
            return None
        return max(self.kills.items(), key=lambda item: item[1])

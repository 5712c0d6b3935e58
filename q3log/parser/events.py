"""
Event classes and factory for Quake 3 Arena log events.
"""

from typing import Optional, Union
from dataclasses import dataclass
from enum import Enum

from q3log.config.quake_data import (
    WORLD_ACTOR,
    get_method_label,
    is_environmental_method,
)


class KillMethod(Enum):
    """Enumeration of known means of death."""

    UNKNOWN = "MOD_UNKNOWN"
    SHOTGUN = "MOD_SHOTGUN"
    GAUNTLET = "MOD_GAUNTLET"
    MACHINEGUN = "MOD_MACHINEGUN"
    GRENADE = "MOD_GRENADE"
    GRENADE_SPLASH = "MOD_GRENADE_SPLASH"
    ROCKET = "MOD_ROCKET"
    ROCKET_SPLASH = "MOD_ROCKET_SPLASH"
    PLASMA = "MOD_PLASMA"
    PLASMA_SPLASH = "MOD_PLASMA_SPLASH"
    RAILGUN = "MOD_RAILGUN"
    LIGHTNING = "MOD_LIGHTNING"
    BFG = "MOD_BFG"
    BFG_SPLASH = "MOD_BFG_SPLASH"

    # Environmental
    WATER = "MOD_WATER"
    SLIME = "MOD_SLIME"
    LAVA = "MOD_LAVA"
    CRUSH = "MOD_CRUSH"
    TELEFRAG = "MOD_TELEFRAG"
    FALLING = "MOD_FALLING"
    SUICIDE = "MOD_SUICIDE"
    TARGET_LASER = "MOD_TARGET_LASER"
    TRIGGER_HURT = "MOD_TRIGGER_HURT"

    # Team Arena
    NAIL = "MOD_NAIL"
    CHAINGUN = "MOD_CHAINGUN"
    PROXIMITY_MINE = "MOD_PROXIMITY_MINE"
    KAMIKAZE = "MOD_KAMIKAZE"
    JUICED = "MOD_JUICED"
    GRAPPLE = "MOD_GRAPPLE"

    @classmethod
    def from_token(cls, token: str) -> "MethodType":
        """
        Resolve a raw means-of-death token.

        Args:
            token: Identifier as written at the end of a kill line

        Returns:
            The matching KillMethod, or an UnrecognizedKillMethod carrying
            the raw token for identifiers this parser does not know
        """
        try:
            return cls(token)
        except ValueError:
            return UnrecognizedKillMethod(token)

    @property
    def label(self) -> str:
        """Human readable name."""
        return get_method_label(self.value)

    @property
    def is_environmental(self) -> bool:
        """Check if the map caused the death."""
        return is_environmental_method(self.value)

    @property
    def is_recognized(self) -> bool:
        return True


@dataclass(frozen=True)
class UnrecognizedKillMethod:
    """A means of death outside the known set, kept as its raw token."""

    value: str

    @property
    def label(self) -> str:
        return get_method_label(self.value)

    @property
    def is_environmental(self) -> bool:
        return is_environmental_method(self.value)

    @property
    def is_recognized(self) -> bool:
        return False

    def __str__(self) -> str:
        return self.value


MethodType = Union[KillMethod, UnrecognizedKillMethod]


@dataclass(frozen=True)
class MatchStart:
    """Signals the start of a new game."""

    line_number: int
    # True when no marker was seen before the first kill line
    implicit: bool = False


@dataclass(frozen=True)
class KillEvent:
    """A single kill extracted from one log line."""

    killer: str
    victim: str
    method: MethodType
    game_time: Optional[str] = None
    line_number: Optional[int] = None
    raw_line: Optional[str] = None

    def is_world_kill(self) -> bool:
        """Check if the map killed the victim."""
        return self.killer == WORLD_ACTOR

    def is_suicide(self) -> bool:
        """Check if the victim killed themselves."""
        return self.killer == self.victim

    def is_penalty(self) -> bool:
        """Check if the kill costs the victim a point instead of crediting the killer."""
        return self.is_world_kill() or self.is_suicide()


Signal = Union[MatchStart, KillEvent]


class EventFactory:
    """Factory for creating event objects from tokenized lines."""

    @classmethod
    def create_event(cls, parsed_line) -> KillEvent:
        """
        Create a kill event from a parsed kill line.

        Args:
            parsed_line: ParsedLine produced by the LineTokenizer

        Returns:
            KillEvent with its means of death resolved
        """
        return KillEvent(
            killer=parsed_line.killer,
            victim=parsed_line.victim,
            method=KillMethod.from_token(parsed_line.method_token),
            game_time=parsed_line.game_time,
            line_number=parsed_line.line_number,
            raw_line=parsed_line.raw_line,
        )

    @classmethod
    def create_match_start(cls, line_number: int, implicit: bool = False) -> MatchStart:
        """Create a match start signal."""
        return MatchStart(line_number=line_number, implicit=implicit)

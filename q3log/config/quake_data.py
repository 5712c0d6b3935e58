"""
Quake 3 Arena data mappings and constants.

This module contains the game constants the parser keys on (world actor,
match boundary marker) and configurable display mappings for the means of
death that appear at the end of every kill line.
"""

from typing import Dict, Set


# Entity id the server logs for the non-player "killer" (falls, lava, etc.)
WORLD_ENTITY_ID = 1022
WORLD_ACTOR = "<world>"

# Present on the separator line written when a new game is initialised
MATCH_START_MARKER = "0:00 -"


# Configurable means-of-death display names
KILL_METHOD_LABELS: Dict[str, str] = {
    "MOD_UNKNOWN": "Unknown",
    "MOD_SHOTGUN": "Shotgun",
    "MOD_GAUNTLET": "Gauntlet",
    "MOD_MACHINEGUN": "Machinegun",
    "MOD_GRENADE": "Grenade",
    "MOD_GRENADE_SPLASH": "Grenade (splash)",
    "MOD_ROCKET": "Rocket",
    "MOD_ROCKET_SPLASH": "Rocket (splash)",
    "MOD_PLASMA": "Plasma Gun",
    "MOD_PLASMA_SPLASH": "Plasma Gun (splash)",
    "MOD_RAILGUN": "Railgun",
    "MOD_LIGHTNING": "Lightning Gun",
    "MOD_BFG": "BFG10K",
    "MOD_BFG_SPLASH": "BFG10K (splash)",
    "MOD_WATER": "Drowned",
    "MOD_SLIME": "Slime",
    "MOD_LAVA": "Lava",
    "MOD_CRUSH": "Crushed",
    "MOD_TELEFRAG": "Telefrag",
    "MOD_FALLING": "Falling",
    "MOD_SUICIDE": "Suicide",
    "MOD_TARGET_LASER": "Target Laser",
    "MOD_TRIGGER_HURT": "Trigger Hurt",
    # Team Arena
    "MOD_NAIL": "Nailgun",
    "MOD_CHAINGUN": "Chaingun",
    "MOD_PROXIMITY_MINE": "Proximity Mine",
    "MOD_KAMIKAZE": "Kamikaze",
    "MOD_JUICED": "Juiced",
    "MOD_GRAPPLE": "Grappling Hook",
}

# Means of death caused by the map rather than a weapon
ENVIRONMENTAL_METHODS: Set[str] = {
    "MOD_WATER",
    "MOD_SLIME",
    "MOD_LAVA",
    "MOD_CRUSH",
    "MOD_FALLING",
    "MOD_TARGET_LASER",
    "MOD_TRIGGER_HURT",
}


def get_method_label(token: str) -> str:
    """
    Get the display name for a means-of-death token.

    Args:
        token: Raw identifier as written in the log, e.g. ``MOD_RAILGUN``

    Returns:
        Human readable label, or the token itself when no label is known
    """
    return KILL_METHOD_LABELS.get(token, token)


def is_environmental_method(token: str) -> bool:
    """Check if a means of death is caused by the map."""
    return token in ENVIRONMENTAL_METHODS


def is_world_actor(name: str) -> bool:
    """Check if a killer/victim token is the world sentinel."""
    return name == WORLD_ACTOR

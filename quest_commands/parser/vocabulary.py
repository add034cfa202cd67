"""Static vocabulary tables for command parsing.

Maps the many ways a player can phrase a verb or a direction onto the
canonical members of CommandVerb and Direction. The tables are built once
at import time and exposed read-only.
"""

from collections.abc import Sequence
from types import MappingProxyType

from quest_commands.parser.command_types import CommandVerb, Direction


# Verb aliases -> canonical verb
VERB_SYNONYMS: MappingProxyType[str, CommandVerb] = MappingProxyType(
    {
        # Movement
        "go": CommandVerb.GO,
        "move": CommandVerb.GO,
        "walk": CommandVerb.GO,
        "travel": CommandVerb.GO,
        "head": CommandVerb.GO,
        "run": CommandVerb.GO,
        # Taking items
        "take": CommandVerb.TAKE,
        "get": CommandVerb.TAKE,
        "grab": CommandVerb.TAKE,
        "pick": CommandVerb.TAKE,
        "pickup": CommandVerb.TAKE,
        "loot": CommandVerb.TAKE,
        # Dropping items
        "drop": CommandVerb.DROP,
        "discard": CommandVerb.DROP,
        "throw": CommandVerb.DROP,
        # Using items
        "use": CommandVerb.USE,
        "consume": CommandVerb.USE,
        "drink": CommandVerb.USE,
        "eat": CommandVerb.USE,
        "apply": CommandVerb.USE,
        # Equipment
        "equip": CommandVerb.EQUIP,
        "wear": CommandVerb.EQUIP,
        "wield": CommandVerb.EQUIP,
        "unequip": CommandVerb.UNEQUIP,
        "remove": CommandVerb.UNEQUIP,
        "doff": CommandVerb.UNEQUIP,
        # Combat
        "attack": CommandVerb.ATTACK,
        "fight": CommandVerb.ATTACK,
        "hit": CommandVerb.ATTACK,
        "strike": CommandVerb.ATTACK,
        "kill": CommandVerb.ATTACK,
        # Looking
        "look": CommandVerb.LOOK,
        "examine": CommandVerb.LOOK,
        "inspect": CommandVerb.LOOK,
        "check": CommandVerb.LOOK,
        "observe": CommandVerb.LOOK,
        "view": CommandVerb.LOOK,
        "read": CommandVerb.LOOK,
        # Inventory
        "inventory": CommandVerb.INVENTORY,
        "inv": CommandVerb.INVENTORY,
        "i": CommandVerb.INVENTORY,
        "items": CommandVerb.INVENTORY,
        "bag": CommandVerb.INVENTORY,
        # Stats
        "stats": CommandVerb.STATS,
        "status": CommandVerb.STATS,
        "character": CommandVerb.STATS,
        "player": CommandVerb.STATS,
        # System
        "help": CommandVerb.HELP,
        "commands": CommandVerb.HELP,
        "?": CommandVerb.HELP,
        "save": CommandVerb.SAVE,
        "load": CommandVerb.LOAD,
        "quit": CommandVerb.QUIT,
        "exit": CommandVerb.QUIT,
    }
)

# Direction aliases -> canonical direction
DIRECTION_ALIASES: MappingProxyType[str, Direction] = MappingProxyType(
    {
        # Cardinal
        "north": Direction.NORTH,
        "n": Direction.NORTH,
        "forward": Direction.NORTH,
        "south": Direction.SOUTH,
        "s": Direction.SOUTH,
        "back": Direction.SOUTH,
        "backward": Direction.SOUTH,
        "east": Direction.EAST,
        "e": Direction.EAST,
        "right": Direction.EAST,
        "west": Direction.WEST,
        "w": Direction.WEST,
        "left": Direction.WEST,
        # Diagonal
        "northeast": Direction.NORTHEAST,
        "ne": Direction.NORTHEAST,
        "north-east": Direction.NORTHEAST,
        "northwest": Direction.NORTHWEST,
        "nw": Direction.NORTHWEST,
        "north-west": Direction.NORTHWEST,
        "southeast": Direction.SOUTHEAST,
        "se": Direction.SOUTHEAST,
        "south-east": Direction.SOUTHEAST,
        "southwest": Direction.SOUTHWEST,
        "sw": Direction.SOUTHWEST,
        "south-west": Direction.SOUTHWEST,
        # Vertical
        "up": Direction.UP,
        "u": Direction.UP,
        "upstairs": Direction.UP,
        "climb": Direction.UP,
        "down": Direction.DOWN,
        "d": Direction.DOWN,
        "downstairs": Direction.DOWN,
        "descend": Direction.DOWN,
    }
)

# Manner adverbs lifted out of target phrases into modifiers
MODIFIER_WORDS = frozenset(
    {
        "carefully",
        "quickly",
        "slowly",
        "quietly",
        "loudly",
        "stealthily",
        "cautiously",
        "gently",
        "forcefully",
    }
)

# Words that introduce a secondary target ("use key on door")
SECONDARY_TARGET_MARKERS = ("on", "with")


def resolve_verb(token: str) -> CommandVerb | None:
    """Look up the canonical verb for a token."""
    return VERB_SYNONYMS.get(token)


def resolve_direction(token: str) -> Direction | None:
    """Look up the canonical direction for a token."""
    return DIRECTION_ALIASES.get(token)


def is_direction(token: str) -> bool:
    """Whether a token is a known direction alias."""
    return token in DIRECTION_ALIASES


def find_direction(tokens: Sequence[str]) -> Direction | None:
    """Return the first direction mentioned anywhere in the tokens."""
    for token in tokens:
        if direction := resolve_direction(token):
            return direction
    return None

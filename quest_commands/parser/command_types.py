"""Command types and dataclasses for the command parser.

This module defines the closed vocabulary of verbs, directions and
categories the interpreter recognizes, plus the value objects that flow
between the parser, the validator and the caller.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any


class CommandVerb(str, Enum):
    """Canonical action verbs.

    Every recognized input word resolves to exactly one of these
    (or to nothing at all).
    """

    # Movement
    GO = "go"

    # Item interaction
    TAKE = "take"
    DROP = "drop"
    USE = "use"

    # Equipment
    EQUIP = "equip"
    UNEQUIP = "unequip"

    # Combat
    ATTACK = "attack"

    # Information
    LOOK = "look"
    INVENTORY = "inventory"
    STATS = "stats"

    # System
    HELP = "help"
    SAVE = "save"
    LOAD = "load"
    QUIT = "quit"


class Direction(str, Enum):
    """Canonical compass and vertical directions."""

    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"
    NORTHEAST = "northeast"
    NORTHWEST = "northwest"
    SOUTHEAST = "southeast"
    SOUTHWEST = "southwest"
    UP = "up"
    DOWN = "down"


class CommandCategory(str, Enum):
    """High-level categories for grouping verbs."""

    MOVEMENT = "movement"
    INTERACTION = "interaction"
    COMBAT = "combat"
    INVENTORY = "inventory"
    SYSTEM = "system"
    INFORMATION = "information"
    UNKNOWN = "unknown"


class CommandErrorKind(str, Enum):
    """Why a command was rejected."""

    EMPTY_INPUT = "empty_input"
    UNRECOGNIZED_VERB = "unrecognized_verb"
    MISSING_ARGUMENT = "missing_argument"
    INFEASIBLE_IN_CONTEXT = "infeasible_in_context"


# Mapping of verbs to categories
VERB_CATEGORIES: dict[CommandVerb, CommandCategory] = {
    # Movement
    CommandVerb.GO: CommandCategory.MOVEMENT,
    # Interaction
    CommandVerb.TAKE: CommandCategory.INTERACTION,
    CommandVerb.DROP: CommandCategory.INTERACTION,
    CommandVerb.USE: CommandCategory.INTERACTION,
    # Combat
    CommandVerb.ATTACK: CommandCategory.COMBAT,
    # Inventory
    CommandVerb.INVENTORY: CommandCategory.INVENTORY,
    CommandVerb.EQUIP: CommandCategory.INVENTORY,
    CommandVerb.UNEQUIP: CommandCategory.INVENTORY,
    # System
    CommandVerb.HELP: CommandCategory.SYSTEM,
    CommandVerb.SAVE: CommandCategory.SYSTEM,
    CommandVerb.LOAD: CommandCategory.SYSTEM,
    CommandVerb.QUIT: CommandCategory.SYSTEM,
    # Information
    CommandVerb.LOOK: CommandCategory.INFORMATION,
    CommandVerb.STATS: CommandCategory.INFORMATION,
}

# Verbs that are meaningless without an object
TARGETED_VERBS = frozenset(
    {
        CommandVerb.TAKE,
        CommandVerb.DROP,
        CommandVerb.USE,
        CommandVerb.EQUIP,
        CommandVerb.UNEQUIP,
        CommandVerb.ATTACK,
    }
)


def get_category(verb: CommandVerb | None) -> CommandCategory:
    """Derive the category of a verb.

    Args:
        verb: Canonical verb, or None when nothing was recognized.

    Returns:
        The verb's category, or UNKNOWN for None or an unmapped verb.
    """
    if verb is None:
        return CommandCategory.UNKNOWN
    return VERB_CATEGORIES.get(verb, CommandCategory.UNKNOWN)


def _freeze(values: Iterable[str] | None) -> tuple[str, ...]:
    if values is None:
        return ()
    if isinstance(values, str):
        return (values,)
    return tuple(values)


@dataclass(frozen=True)
class CommandContext:
    """Read-only snapshot of what the player can currently see and reach.

    Supplied by the caller on every parse/validate call and never retained
    between calls.

    Attributes:
        current_room_id: Identifier of the room the player is in
        available_exits: Directions that can currently be travelled
        visible_items: Names of items lying in the room
        visible_monster: Name of a visible hostile entity, if any
        visible_features: Names of interactable scenery
        inventory_items: Names of items the player carries
        equipped_items: Names of items the player has equipped
        in_combat: Whether combat is in progress
    """

    current_room_id: int | str | None = None
    available_exits: tuple[str, ...] = ()
    visible_items: tuple[str, ...] = ()
    visible_monster: str | None = None
    visible_features: tuple[str, ...] = ()
    inventory_items: tuple[str, ...] = ()
    equipped_items: tuple[str, ...] = ()
    in_combat: bool = False

    def __post_init__(self) -> None:
        # Lists passed by callers are frozen so the snapshot cannot drift
        for name in (
            "available_exits",
            "visible_items",
            "visible_features",
            "inventory_items",
            "equipped_items",
        ):
            object.__setattr__(self, name, _freeze(getattr(self, name)))
        if not self.visible_monster:
            object.__setattr__(self, "visible_monster", None)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CommandContext":
        """Build a context from a snake_case or camelCase mapping.

        Unknown keys are ignored.

        Example:
            CommandContext.from_dict({"availableExits": ["north"], "inCombat": False})
        """
        aliases = {
            "currentRoomId": "current_room_id",
            "availableExits": "available_exits",
            "visibleItems": "visible_items",
            "visibleMonster": "visible_monster",
            "visibleFeatures": "visible_features",
            "inventoryItems": "inventory_items",
            "equippedItems": "equipped_items",
            "inCombat": "in_combat",
        }
        known = set(aliases.values())
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            name = aliases.get(key, key)
            if name in known:
                kwargs[name] = value
        return cls(**kwargs)


@dataclass(frozen=True)
class ParsedCommand:
    """A single command interpreted from one line of player input.

    Attributes:
        raw: The player's input, verbatim
        category: Category derived from the verb
        verb: Canonical verb, None when nothing was recognized
        direction: Direction for movement commands
        target: Primary object of the command (item, monster, feature)
        secondary_target: Second object ("use key on door")
        modifiers: Manner adverbs lifted out of the input ("carefully")
        valid: Whether the command can be handed to the action resolver
        error: Player-facing explanation when the command is invalid
        error_kind: Machine-readable reason when the command is invalid
    """

    raw: str
    category: CommandCategory = CommandCategory.UNKNOWN
    verb: CommandVerb | None = None
    direction: Direction | None = None
    target: str | None = None
    secondary_target: str | None = None
    modifiers: tuple[str, ...] = field(default_factory=tuple)
    valid: bool = True
    error: str | None = None
    error_kind: CommandErrorKind | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "modifiers", _freeze(self.modifiers))
        if not self.valid and not self.error:
            raise ValueError("Invalid command must carry an error message")
        if self.valid and self.category == CommandCategory.MOVEMENT and self.direction is None:
            raise ValueError("Valid movement command must carry a direction")
        if self.valid and self.requires_target and not self.target:
            raise ValueError(f"Valid '{self.verb.value}' command must carry a target")

    @classmethod
    def invalid(
        cls,
        raw: str,
        error: str,
        kind: CommandErrorKind,
        category: CommandCategory = CommandCategory.UNKNOWN,
        verb: CommandVerb | None = None,
    ) -> "ParsedCommand":
        """Create a rejected command."""
        return cls(
            raw=raw,
            category=category,
            verb=verb,
            valid=False,
            error=error,
            error_kind=kind,
        )

    @property
    def requires_target(self) -> bool:
        """Whether this command's verb needs an object."""
        return self.verb in TARGETED_VERBS

    def invalidate(
        self,
        error: str,
        kind: CommandErrorKind = CommandErrorKind.INFEASIBLE_IN_CONTEXT,
    ) -> "ParsedCommand":
        """Return a copy of this command marked invalid."""
        return replace(self, valid=False, error=error, error_kind=kind)

    def __str__(self) -> str:
        """Human-readable representation of the command."""
        if not self.valid:
            return f"[INVALID] {self.error}"
        parts = [self.verb.value if self.verb else self.category.value]
        if self.direction:
            parts.append(self.direction.value)
        if self.target:
            parts.append(self.target)
        if self.secondary_target:
            parts.append(f"on {self.secondary_target}")
        if self.modifiers:
            parts.append(f"({', '.join(self.modifiers)})")
        return " ".join(parts)

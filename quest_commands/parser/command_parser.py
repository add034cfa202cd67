"""Command builder for converting player input to structured commands.

This module provides the CommandParser class which is the primary interface
for interpreting player input. Parsing is deterministic and side-effect
free: every failure is reported on the returned ParsedCommand rather than
raised, so callers must check ``valid`` before acting on a command.
"""

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass, field

from quest_commands.parser.command_types import (
    CommandCategory,
    CommandContext,
    CommandErrorKind,
    CommandVerb,
    Direction,
    ParsedCommand,
    get_category,
)
from quest_commands.parser.fuzzy import find_best_match
from quest_commands.parser.normalizer import FILLER_WORDS, split_words, tokenize
from quest_commands.parser.vocabulary import (
    MODIFIER_WORDS,
    SECONDARY_TARGET_MARKERS,
    find_direction,
    is_direction,
    resolve_verb,
)

logger = logging.getLogger(__name__)

# Conjunctions and commas separating clauses of a compound command
COMPOUND_DELIMITER = re.compile(r"\s*(?:,|\band\b|\bthen\b)\s*", re.IGNORECASE)

INVENTORY_SHORTCUTS = frozenset({"i", "inventory"})
STATS_SHORTCUTS = frozenset({"stats", "status"})
HELP_SHORTCUTS = frozenset({"help", "?", "commands"})

EMPTY_INPUT_ERROR = "Empty input. Please enter a command."
DIRECTION_PROMPT = "Which direction? Try: north, south, east, west, up, down."
ATTACK_PROMPT = "What do you want to attack?"


@dataclass
class TargetPhrase:
    """Object phrases pulled from the words following a verb.

    Attributes:
        primary: Main target phrase, None if nothing remained
        secondary: Phrase after "on"/"with" (only split out when requested)
        modifiers: Manner adverbs found anywhere after the verb
    """

    primary: str | None = None
    secondary: str | None = None
    modifiers: list[str] = field(default_factory=list)


def _join_meaningful(words: Sequence[str], modifiers: list[str]) -> str | None:
    kept = []
    for word in words:
        if word in FILLER_WORDS or is_direction(word):
            continue
        if word in MODIFIER_WORDS:
            modifiers.append(word)
            continue
        kept.append(word)
    return " ".join(kept) if kept else None


def extract_target(text: str, split_secondary: bool = False) -> TargetPhrase:
    """Extract the object phrase(s) following the verb.

    Filler words and direction aliases are dropped, manner adverbs are
    collected as modifiers and everything else is joined into one phrase.

    Args:
        text: Raw player input.
        split_secondary: Whether "on"/"with" separates a second target.

    Returns:
        TargetPhrase with the extracted phrases.
    """
    words = split_words(text)
    # Skip leading filler so the verb is the first meaningful word
    start = next((i for i, word in enumerate(words) if word not in FILLER_WORDS), len(words))
    remaining = words[start + 1 :]

    phrase = TargetPhrase()
    if split_secondary:
        marker = next(
            (i for i, word in enumerate(remaining) if word in SECONDARY_TARGET_MARKERS),
            None,
        )
        if marker is not None:
            phrase.primary = _join_meaningful(remaining[:marker], phrase.modifiers)
            phrase.secondary = _join_meaningful(remaining[marker + 1 :], phrase.modifiers)
            return phrase

    phrase.primary = _join_meaningful(remaining, phrase.modifiers)
    return phrase


def _resolve(phrase: str, options: Sequence[str]) -> str:
    """Resolve a phrase against known names, falling back to the phrase."""
    match = find_best_match(phrase, options)
    if match is not None and match != phrase:
        logger.debug(f"Resolved '{phrase}' to '{match}'")
    return match if match is not None else phrase


class CommandParser:
    """Parser for converting player input to structured commands.

    The parser works in stages:
    1. Tokenize and discard filler words
    2. Handle single-word shortcuts (i, stats, help)
    3. Treat a bare direction as an implicit "go"
    4. Resolve the first word to a canonical verb
    5. Apply the category's rules for targets and directions

    When a CommandContext is supplied, partial object names are resolved
    against what the player can see or carries.

    Example:
        parser = CommandParser()

        result = parser.parse("grab the health potion")
        # -> ParsedCommand(verb=TAKE, target="health potion")

        results = parser.parse_compound("take sword and attack goblin")
        # -> [ParsedCommand(verb=TAKE, ...), ParsedCommand(verb=ATTACK, ...)]
    """

    def parse(self, text: str, context: CommandContext | None = None) -> ParsedCommand:
        """Parse one command from player input.

        Args:
            text: Raw player input.
            context: Optional snapshot used for target resolution.

        Returns:
            ParsedCommand; check ``valid`` before using it.
        """
        tokens = tokenize(text)

        if not tokens:
            return ParsedCommand.invalid(text, EMPTY_INPUT_ERROR, CommandErrorKind.EMPTY_INPUT)

        first = tokens[0]

        # Shortcuts that bypass verb resolution
        if first in INVENTORY_SHORTCUTS and len(tokens) == 1:
            return ParsedCommand(
                raw=text, category=CommandCategory.INVENTORY, verb=CommandVerb.INVENTORY
            )
        if first in STATS_SHORTCUTS and len(tokens) == 1:
            return ParsedCommand(
                raw=text, category=CommandCategory.INFORMATION, verb=CommandVerb.STATS
            )
        if first in HELP_SHORTCUTS:
            return ParsedCommand(raw=text, category=CommandCategory.SYSTEM, verb=CommandVerb.HELP)

        verb = resolve_verb(first)
        direction = find_direction(tokens)

        # Bare direction ("north", "n") means "go north"
        if direction is not None and verb is None:
            phrase = extract_target(text)
            return ParsedCommand(
                raw=text,
                category=CommandCategory.MOVEMENT,
                verb=CommandVerb.GO,
                direction=direction,
                modifiers=tuple(phrase.modifiers),
            )

        if verb is None:
            logger.debug(f"Unrecognized verb '{first}' in {text!r}")
            return ParsedCommand.invalid(
                text,
                f"I don't understand '{first}'. Type 'help' for a list of commands.",
                CommandErrorKind.UNRECOGNIZED_VERB,
            )

        category = get_category(verb)
        phrase = extract_target(text, split_secondary=verb == CommandVerb.USE)

        match category:
            case CommandCategory.MOVEMENT:
                command = self._parse_movement(text, verb, direction, phrase)
            case CommandCategory.INTERACTION:
                command = self._parse_interaction(text, verb, phrase, context)
            case CommandCategory.COMBAT:
                command = self._parse_combat(text, verb, phrase, context)
            case CommandCategory.INFORMATION:
                command = self._parse_information(text, verb, phrase, context)
            case CommandCategory.INVENTORY:
                command = self._parse_inventory(text, verb, phrase, context)
            case CommandCategory.SYSTEM | CommandCategory.UNKNOWN:
                command = ParsedCommand(
                    raw=text, category=category, verb=verb, modifiers=tuple(phrase.modifiers)
                )

        logger.debug(f"Parsed {text!r} -> {command}")
        return command

    def parse_compound(
        self, text: str, context: CommandContext | None = None
    ) -> list[ParsedCommand]:
        """Parse a line that may hold several commands.

        Clauses are separated by "and", "then" or commas and parsed
        independently, left to right, against the same context.

        Args:
            text: Raw player input.
            context: Optional snapshot shared by every clause.

        Returns:
            One ParsedCommand per clause, in input order.
        """
        parts = COMPOUND_DELIMITER.split(text)
        if len(parts) == 1:
            return [self.parse(text, context)]

        clauses = [part.strip() for part in parts if part.strip()]
        if not clauses:
            return [
                ParsedCommand.invalid(text, EMPTY_INPUT_ERROR, CommandErrorKind.EMPTY_INPUT)
            ]

        logger.debug(f"Split {text!r} into {len(clauses)} clauses")
        return [self.parse(clause, context) for clause in clauses]

    def _parse_movement(
        self,
        text: str,
        verb: CommandVerb,
        direction: Direction | None,
        phrase: TargetPhrase,
    ) -> ParsedCommand:
        if direction is None:
            return ParsedCommand.invalid(
                text,
                DIRECTION_PROMPT,
                CommandErrorKind.MISSING_ARGUMENT,
                category=CommandCategory.MOVEMENT,
                verb=verb,
            )
        return ParsedCommand(
            raw=text,
            category=CommandCategory.MOVEMENT,
            verb=verb,
            direction=direction,
            modifiers=tuple(phrase.modifiers),
        )

    def _parse_interaction(
        self,
        text: str,
        verb: CommandVerb,
        phrase: TargetPhrase,
        context: CommandContext | None,
    ) -> ParsedCommand:
        if not phrase.primary:
            return ParsedCommand.invalid(
                text,
                f"What do you want to {verb.value}?",
                CommandErrorKind.MISSING_ARGUMENT,
                category=CommandCategory.INTERACTION,
                verb=verb,
            )

        target = phrase.primary
        secondary = phrase.secondary
        if context is not None:
            # Take from the room; drop and use from the pack
            options = context.visible_items if verb == CommandVerb.TAKE else context.inventory_items
            target = _resolve(target, options)
            if secondary:
                secondary = _resolve(secondary, self._visible_names(context))

        return ParsedCommand(
            raw=text,
            category=CommandCategory.INTERACTION,
            verb=verb,
            target=target,
            secondary_target=secondary,
            modifiers=tuple(phrase.modifiers),
        )

    def _parse_combat(
        self,
        text: str,
        verb: CommandVerb,
        phrase: TargetPhrase,
        context: CommandContext | None,
    ) -> ParsedCommand:
        target = phrase.primary
        monster = context.visible_monster if context is not None else None

        if target and monster:
            target = _resolve(target, [monster])
        elif not target and monster:
            logger.debug(f"Auto-targeting visible monster '{monster}'")
            target = monster

        if not target:
            return ParsedCommand.invalid(
                text,
                ATTACK_PROMPT,
                CommandErrorKind.MISSING_ARGUMENT,
                category=CommandCategory.COMBAT,
                verb=verb,
            )

        return ParsedCommand(
            raw=text,
            category=CommandCategory.COMBAT,
            verb=verb,
            target=target,
            modifiers=tuple(phrase.modifiers),
        )

    def _parse_information(
        self,
        text: str,
        verb: CommandVerb,
        phrase: TargetPhrase,
        context: CommandContext | None,
    ) -> ParsedCommand:
        target = None
        # A bare "look" means look around; stats never takes an object
        if verb == CommandVerb.LOOK and phrase.primary:
            target = phrase.primary
            if context is not None:
                target = _resolve(target, self._visible_names(context))

        return ParsedCommand(
            raw=text,
            category=CommandCategory.INFORMATION,
            verb=verb,
            target=target,
            modifiers=tuple(phrase.modifiers),
        )

    def _parse_inventory(
        self,
        text: str,
        verb: CommandVerb,
        phrase: TargetPhrase,
        context: CommandContext | None,
    ) -> ParsedCommand:
        if verb not in (CommandVerb.EQUIP, CommandVerb.UNEQUIP):
            return ParsedCommand(raw=text, category=CommandCategory.INVENTORY, verb=verb)

        if not phrase.primary:
            return ParsedCommand.invalid(
                text,
                f"What do you want to {verb.value}?",
                CommandErrorKind.MISSING_ARGUMENT,
                category=CommandCategory.INVENTORY,
                verb=verb,
            )

        target = phrase.primary
        if context is not None:
            options = (
                context.inventory_items if verb == CommandVerb.EQUIP else context.equipped_items
            )
            target = _resolve(target, options)

        return ParsedCommand(
            raw=text,
            category=CommandCategory.INVENTORY,
            verb=verb,
            target=target,
            modifiers=tuple(phrase.modifiers),
        )

    @staticmethod
    def _visible_names(context: CommandContext) -> list[str]:
        """Everything the player can currently see, items first."""
        names = [*context.visible_items, *context.visible_features]
        if context.visible_monster:
            names.append(context.visible_monster)
        return names


_default_parser = CommandParser()


def parse_command(text: str, context: CommandContext | None = None) -> ParsedCommand:
    """Parse one command from player input.

    Args:
        text: Raw player input.
        context: Optional snapshot used for target resolution.

    Returns:
        ParsedCommand; check ``valid`` before using it.

    Examples:
        >>> parse_command("n").direction
        <Direction.NORTH: 'north'>
        >>> parse_command("take").valid
        False
    """
    return _default_parser.parse(text, context)


def parse_compound_command(
    text: str, context: CommandContext | None = None
) -> list[ParsedCommand]:
    """Parse a line that may contain several commands.

    Args:
        text: Raw player input ("take sword and attack goblin").
        context: Optional snapshot shared by every clause.

    Returns:
        One ParsedCommand per clause, in input order.
    """
    return _default_parser.parse_compound(text, context)

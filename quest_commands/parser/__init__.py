"""Command parser module for converting player input to structured commands.

This module turns free-form player text into ParsedCommand objects that an
action resolver can execute. Parsing never mutates world state and never
raises for bad input: rejected input comes back with ``valid=False`` and a
player-facing error.

Main Components:
    - CommandVerb, Direction, CommandCategory: Closed vocabularies
    - ParsedCommand: One interpreted command
    - CommandContext: Snapshot of the player's surroundings
    - CommandParser: Builds commands, including compound input
    - find_best_match: Fuzzy resolution of object names
"""

from quest_commands.parser.command_types import (
    CommandCategory,
    CommandContext,
    CommandErrorKind,
    CommandVerb,
    Direction,
    ParsedCommand,
    VERB_CATEGORIES,
    get_category,
)
from quest_commands.parser.command_parser import (
    CommandParser,
    parse_command,
    parse_compound_command,
)
from quest_commands.parser.fuzzy import find_best_match
from quest_commands.parser.normalizer import normalize, tokenize
from quest_commands.parser.vocabulary import DIRECTION_ALIASES, VERB_SYNONYMS

__all__ = [
    # Core types
    "CommandCategory",
    "CommandContext",
    "CommandErrorKind",
    "CommandVerb",
    "Direction",
    "ParsedCommand",
    "VERB_CATEGORIES",
    "get_category",
    # Vocabulary
    "DIRECTION_ALIASES",
    "VERB_SYNONYMS",
    # Parsing
    "CommandParser",
    "parse_command",
    "parse_compound_command",
    "find_best_match",
    "normalize",
    "tokenize",
]

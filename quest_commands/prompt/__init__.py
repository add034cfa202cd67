"""Input surface helpers: command history and autocomplete.

These are independent of the parsing pipeline and are meant to be used by
whatever renders the command line.

Main Components:
    - CommandHistory: Bounded history with up/down navigation
    - get_autocomplete_suggestions: Completions from vocabulary and context
"""

from quest_commands.prompt.autocomplete import get_autocomplete_suggestions
from quest_commands.prompt.history import CommandHistory

__all__ = [
    "CommandHistory",
    "get_autocomplete_suggestions",
]

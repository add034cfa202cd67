"""Autocomplete suggestions for partially typed commands."""

from collections.abc import Iterable

from quest_commands.config import get_settings
from quest_commands.parser.command_types import CommandContext
from quest_commands.parser.normalizer import normalize
from quest_commands.parser.vocabulary import DIRECTION_ALIASES, VERB_SYNONYMS

# Hard cap regardless of the requested limit
MAX_SUGGESTIONS = 10


def _context_pools(context: CommandContext) -> Iterable[Iterable[str]]:
    yield context.visible_items
    yield context.inventory_items
    yield context.visible_features
    if context.visible_monster:
        yield (context.visible_monster,)


def get_autocomplete_suggestions(
    partial: str,
    context: CommandContext | None = None,
    limit: int | None = None,
) -> list[str]:
    """Suggest completions for partial input.

    Vocabulary words are suggested when they start with the partial text;
    names from the context (visible items, carried items, features, the
    visible monster) when they contain it anywhere.

    Args:
        partial: What the player has typed so far.
        context: Optional snapshot supplying entity names.
        limit: Max suggestions, capped at MAX_SUGGESTIONS. Defaults to the
            ``autocomplete_limit`` setting.

    Returns:
        Unique suggestions in order of first appearance: verbs,
        directions, then context names.

    Raises:
        ValueError: If limit is less than 1.
    """
    if limit is None:
        limit = get_settings().autocomplete_limit
    if limit < 1:
        raise ValueError(f"Suggestion limit must be at least 1, got {limit}")
    limit = min(limit, MAX_SUGGESTIONS)

    normalized = normalize(partial)
    if not normalized:
        return []

    suggestions: list[str] = []
    suggestions.extend(verb for verb in VERB_SYNONYMS if verb.startswith(normalized))
    suggestions.extend(
        direction for direction in DIRECTION_ALIASES if direction.startswith(normalized)
    )

    if context is not None:
        for pool in _context_pools(context):
            suggestions.extend(name for name in pool if normalized in normalize(name))

    # dict preserves first-seen order
    return list(dict.fromkeys(suggestions))[:limit]

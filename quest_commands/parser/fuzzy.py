"""Resolution of free-text phrases against known entity names."""

from collections.abc import Sequence

from quest_commands.parser.normalizer import normalize


def find_best_match(phrase: str, candidates: Sequence[str]) -> str | None:
    """Find the candidate name a phrase most plausibly refers to.

    The first rule that produces a result wins:
    1. exact match after normalization
    2. candidate starts with the phrase
    3. candidate contains the phrase

    Within a rule, earlier candidates win.

    Args:
        phrase: Target phrase typed by the player.
        candidates: Known names to match against.

    Returns:
        The matching candidate as given, or None if nothing matches.

    Examples:
        >>> find_best_match("health", ["iron sword", "health potion"])
        'health potion'
        >>> find_best_match("axe", ["iron sword"]) is None
        True
    """
    target = normalize(phrase)
    if not target:
        return None

    normalized = [(candidate, normalize(candidate)) for candidate in candidates]

    for candidate, name in normalized:
        if name == target:
            return candidate

    for candidate, name in normalized:
        if name.startswith(target):
            return candidate

    for candidate, name in normalized:
        if target in name:
            return candidate

    return None

"""Input normalization and tokenization."""

import re

# Words that carry no meaning for command resolution
FILLER_WORDS = frozenset({"a", "an", "the", "to", "at", "in", "on", "with", "my", "some"})

_WHITESPACE = re.compile(r"\s+")


def normalize(text: str) -> str:
    """Lower-case, trim and collapse whitespace runs to single spaces.

    Examples:
        >>> normalize("  Go   NoRtH ")
        'go north'
    """
    return _WHITESPACE.sub(" ", text.lower().strip())


def split_words(text: str) -> list[str]:
    """Split normalized text into words, keeping filler words."""
    normalized = normalize(text)
    return normalized.split(" ") if normalized else []


def tokenize(text: str) -> list[str]:
    """Split text into meaningful words, dropping filler words.

    Examples:
        >>> tokenize("take the health potion")
        ['take', 'health', 'potion']
        >>> tokenize("   ")
        []
    """
    return [word for word in split_words(text) if word not in FILLER_WORDS]

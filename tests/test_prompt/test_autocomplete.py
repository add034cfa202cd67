"""Tests for autocomplete suggestions."""

from unittest.mock import patch

import pytest

from quest_commands.config import Settings
from quest_commands.parser.command_types import CommandContext
from quest_commands.prompt.autocomplete import get_autocomplete_suggestions


class TestVocabularySuggestions:
    """Tests for verb and direction suggestions."""

    def test_suggests_verbs(self):
        """Verbs starting with the input are suggested."""
        assert "take" in get_autocomplete_suggestions("ta")

    def test_suggests_directions(self):
        """Directions starting with the input are suggested."""
        suggestions = get_autocomplete_suggestions("nor")

        assert "north" in suggestions
        assert "northeast" in suggestions

    def test_vocabulary_uses_prefix_only(self):
        """Vocabulary is not matched in the middle of words."""
        assert "attack" not in get_autocomplete_suggestions("tack")

    def test_verbs_come_before_directions(self):
        """Verb matches are listed first."""
        suggestions = get_autocomplete_suggestions("d")

        assert suggestions.index("drop") < suggestions.index("down")

    def test_input_is_normalized(self):
        """Casing and padding are ignored."""
        assert "take" in get_autocomplete_suggestions("  TA ")


class TestContextSuggestions:
    """Tests for suggestions drawn from the context."""

    def test_visible_items(self, context):
        """Visible items containing the input are suggested."""
        assert "health potion" in get_autocomplete_suggestions("health", context)

    def test_inventory_items(self, context):
        """Carried items are suggested."""
        assert "rusty key" in get_autocomplete_suggestions("rusty", context)

    def test_features_and_monster(self, context):
        """Features and the monster match anywhere in the name."""
        assert "mysterious door" in get_autocomplete_suggestions("door", context)
        assert "goblin scout" in get_autocomplete_suggestions("scout", context)

    def test_context_order(self):
        """Items, then inventory, then features, then the monster."""
        context = CommandContext(
            visible_items=["red gem"],
            inventory_items=["red cloak"],
            visible_features=["red door"],
            visible_monster="red dragon",
        )

        assert get_autocomplete_suggestions("red", context) == [
            "red gem",
            "red cloak",
            "red door",
            "red dragon",
        ]


class TestLimits:
    """Tests for deduplication and size limits."""

    def test_empty_input(self, context):
        """Empty or blank input gives nothing."""
        assert get_autocomplete_suggestions("") == []
        assert get_autocomplete_suggestions("   ", context) == []

    def test_at_most_ten(self, context):
        """No more than ten suggestions by default."""
        assert len(get_autocomplete_suggestions("a", context)) <= 10
        assert len(get_autocomplete_suggestions("s", context)) == 10

    def test_custom_limit(self):
        """An explicit limit is honored."""
        assert len(get_autocomplete_suggestions("s", limit=3)) == 3

    def test_limit_above_ten_is_capped(self, context):
        """Asking for more than ten still returns at most ten."""
        assert len(get_autocomplete_suggestions("s", context, limit=25)) == 10

    def test_configured_limit_above_ten_is_capped(self, context):
        """A setting above ten cannot lift the cap."""
        loose = Settings.model_construct(autocomplete_limit=30)

        with patch("quest_commands.prompt.autocomplete.get_settings", return_value=loose):
            assert len(get_autocomplete_suggestions("s", context)) == 10

    @pytest.mark.parametrize("limit", [0, -1])
    def test_limit_must_be_positive(self, limit):
        """A limit below one is a programming error."""
        with pytest.raises(ValueError):
            get_autocomplete_suggestions("s", limit=limit)

    def test_no_duplicates(self, context):
        """A name in several pools appears once."""
        suggestions = get_autocomplete_suggestions("torch", context)

        assert suggestions.count("torch") == 1
        assert len(suggestions) == len(set(suggestions))

    def test_duplicate_across_vocabulary_and_context(self):
        """A context name equal to a vocabulary word appears once."""
        context = CommandContext(visible_items=["bag"])

        assert get_autocomplete_suggestions("bag", context) == ["bag"]

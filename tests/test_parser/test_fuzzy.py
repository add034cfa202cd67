"""Tests for fuzzy name matching."""

from quest_commands.parser.fuzzy import find_best_match


ITEMS = ["health potion", "iron sword", "torch"]


class TestFindBestMatch:
    """Tests for find_best_match precedence."""

    def test_exact_match(self):
        """Exact names match."""
        assert find_best_match("torch", ITEMS) == "torch"

    def test_exact_match_ignores_case_and_spacing(self):
        """Case and whitespace do not matter."""
        assert find_best_match("  Iron   SWORD ", ITEMS) == "iron sword"

    def test_starts_with(self):
        """A prefix matches."""
        assert find_best_match("health", ITEMS) == "health potion"

    def test_contains(self):
        """A substring matches."""
        assert find_best_match("sword", ITEMS) == "iron sword"

    def test_no_match(self):
        """Nothing matching returns None."""
        assert find_best_match("axe", ITEMS) is None

    def test_empty_inputs(self):
        """Empty phrase or candidates return None."""
        assert find_best_match("", ITEMS) is None
        assert find_best_match("torch", []) is None

    def test_exact_beats_prefix_regardless_of_order(self):
        """An exact match wins over an earlier prefix match."""
        assert find_best_match("key", ["key ring", "key"]) == "key"

    def test_prefix_beats_contains_regardless_of_order(self):
        """A prefix match wins over an earlier substring match."""
        assert find_best_match("key", ["rusty key", "key ring"]) == "key ring"

    def test_first_in_list_wins_ties(self):
        """Among equal matches, list order decides."""
        assert find_best_match("potion", ["mana potion", "health potion"]) == "mana potion"

    def test_returns_candidate_as_given(self):
        """The candidate is returned with its original casing."""
        assert find_best_match("lantern", ["Old Lantern"]) == "Old Lantern"

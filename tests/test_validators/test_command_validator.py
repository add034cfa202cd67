"""Tests for CommandValidator class."""

from quest_commands.parser.command_parser import parse_command, parse_compound_command
from quest_commands.parser.command_types import CommandContext, CommandErrorKind
from quest_commands.validators.command_validator import CommandValidator, validate_command


class TestMovementValidation:
    """Tests for movement validation."""

    def test_available_exit_passes(self, context):
        """Moving through an existing exit is allowed."""
        command = parse_command("go north")

        validated = validate_command(command, context)

        assert validated.valid is True
        assert validated == command

    def test_missing_exit_fails(self, context):
        """Moving where there is no exit is rejected."""
        validated = validate_command(parse_command("go west"), context)

        assert validated.valid is False
        assert "can't go west" in validated.error
        assert validated.error == "You can't go west from here."
        assert validated.error_kind == CommandErrorKind.INFEASIBLE_IN_CONTEXT

    def test_rejection_keeps_the_parsed_fields(self, context):
        """A rejected command still says what was meant."""
        validated = validate_command(parse_command("sw"), context)

        assert validated.valid is False
        assert validated.direction is not None
        assert validated.raw == "sw"

    def test_exit_names_are_compared_case_insensitively(self):
        """Exit lists from the world may use any casing."""
        context = CommandContext(available_exits=["North "])

        assert validate_command(parse_command("n"), context).valid is True

    def test_no_exits(self):
        """A room without exits rejects every direction."""
        validated = validate_command(parse_command("up"), CommandContext())

        assert validated.error == "You can't go up from here."


class TestCombatValidation:
    """Tests for combat validation."""

    def test_attack_with_monster_passes(self, context):
        """Attacking a present monster is allowed."""
        command = parse_command("attack", context)

        assert validate_command(command, context).valid is True

    def test_attack_without_monster_fails(self, quiet_context):
        """Attacking an empty room is rejected."""
        command = parse_command("attack goblin", quiet_context)

        validated = validate_command(command, quiet_context)

        assert validated.valid is False
        assert validated.error == "There is nothing to attack here."


class TestPassThrough:
    """Tests for commands the validator leaves alone."""

    def test_invalid_command_is_returned_as_is(self, context):
        """Already-invalid commands are not re-checked."""
        command = parse_command("take")

        assert validate_command(command, context) is command

    def test_other_categories_pass(self, quiet_context):
        """Interaction, information, inventory and system commands pass."""
        for text in ("take banana", "look", "inventory", "equip crown", "save", "stats"):
            command = parse_command(text, quiet_context)

            assert validate_command(command, quiet_context) == command, text


class TestValidateAll:
    """Tests for validating compound input."""

    def test_validates_each_command(self, context):
        """Each clause is checked against the same snapshot."""
        commands = parse_compound_command("go north and go west", context)

        validated = CommandValidator().validate_all(commands, context)

        assert [c.valid for c in validated] == [True, False]

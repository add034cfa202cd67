"""Context validator that rejects commands impossible in the current scene.

Parsing decides what the player meant; validation decides whether that is
possible right now. Only the cheap, unambiguous checks live here: deeper
feasibility (is the item really in the pack?) belongs to the action
resolver that executes the command.
"""

import logging

from quest_commands.parser.command_types import (
    CommandCategory,
    CommandContext,
    ParsedCommand,
)

logger = logging.getLogger(__name__)


class CommandValidator:
    """Checks parsed commands against a context snapshot.

    Dispatches on command category. Categories without a check pass
    through unchanged, as do commands that are already invalid.

    Example:
        validator = CommandValidator()
        command = validator.validate(parse_command("go west"), context)

        if command.valid:
            # Hand over to the action resolver
        else:
            # Show command.error to the player
    """

    def validate(self, command: ParsedCommand, context: CommandContext) -> ParsedCommand:
        """Validate a single command.

        Args:
            command: Command produced by the parser.
            context: Current snapshot of the player's surroundings.

        Returns:
            The command unchanged, or an invalid copy explaining why it
            cannot be carried out.
        """
        if not command.valid:
            return command

        match command.category:
            case CommandCategory.MOVEMENT:
                result = self._validate_movement(command, context)
            case CommandCategory.COMBAT:
                result = self._validate_combat(command, context)
            case _:
                result = command

        if not result.valid:
            logger.debug(f"Rejected {command.raw!r}: {result.error}")
        return result

    def validate_all(
        self, commands: list[ParsedCommand], context: CommandContext
    ) -> list[ParsedCommand]:
        """Validate every command of a compound input against one snapshot."""
        return [self.validate(command, context) for command in commands]

    def _validate_movement(self, command: ParsedCommand, context: CommandContext) -> ParsedCommand:
        """Movement needs an exit in the requested direction."""
        if command.direction is None:
            return command

        direction = command.direction.value
        exits = {exit_name.strip().lower() for exit_name in context.available_exits}
        if direction not in exits:
            return command.invalidate(f"You can't go {direction} from here.")
        return command

    def _validate_combat(self, command: ParsedCommand, context: CommandContext) -> ParsedCommand:
        """Combat needs something hostile in the room."""
        if not context.visible_monster:
            return command.invalidate("There is nothing to attack here.")
        return command


_default_validator = CommandValidator()


def validate_command(command: ParsedCommand, context: CommandContext) -> ParsedCommand:
    """Validate a parsed command against a context snapshot.

    Args:
        command: Command produced by the parser.
        context: Current snapshot of the player's surroundings.

    Returns:
        The command unchanged if feasible, otherwise an invalid copy.
    """
    return _default_validator.validate(command, context)

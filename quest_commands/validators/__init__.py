"""Command validators.

Validators check whether parsed commands are possible in the player's
current surroundings before they reach the action resolver.

Main Components:
    - CommandValidator: Dispatches per-category feasibility checks
    - validate_command: Validate one command with the default validator
"""

from quest_commands.validators.command_validator import CommandValidator, validate_command

__all__ = [
    "CommandValidator",
    "validate_command",
]

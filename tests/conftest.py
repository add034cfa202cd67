"""Core test fixtures for command interpreter tests."""

import pytest

from quest_commands.parser.command_types import CommandContext


@pytest.fixture
def context() -> CommandContext:
    """A room with three exits, a few items, a goblin and some scenery."""
    return CommandContext(
        current_room_id=1,
        available_exits=["north", "south", "east"],
        visible_items=["health potion", "iron sword", "torch"],
        visible_monster="goblin scout",
        visible_features=["ancient chest", "mysterious door"],
        inventory_items=["torch", "rusty key"],
        equipped_items=["leather armor"],
        in_combat=False,
    )


@pytest.fixture
def quiet_context(context: CommandContext) -> CommandContext:
    """The same room with no monster in it."""
    return CommandContext(
        current_room_id=context.current_room_id,
        available_exits=context.available_exits,
        visible_items=context.visible_items,
        visible_monster=None,
        visible_features=context.visible_features,
        inventory_items=context.inventory_items,
        equipped_items=context.equipped_items,
    )

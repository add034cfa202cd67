"""Main CLI application for the command interpreter."""

import json
import logging
from pathlib import Path

import typer
from rich.logging import RichHandler

from quest_commands.cli.display import (
    console,
    display_command_outcome,
    display_commands,
    display_error,
    display_help,
    display_history,
    display_info,
    display_success,
    display_suggestions,
    display_welcome,
    prompt_input,
)
from quest_commands.config import get_settings
from quest_commands.parser.command_parser import CommandParser
from quest_commands.parser.command_types import CommandContext, CommandVerb
from quest_commands.prompt.autocomplete import get_autocomplete_suggestions
from quest_commands.prompt.history import CommandHistory
from quest_commands.validators.command_validator import CommandValidator

logger = logging.getLogger(__name__)

# Create main app
app = typer.Typer(
    name="quest-commands",
    help="Natural-language command interpreter for interactive fiction",
    add_completion=True,
)

REPEAT_COMMAND = "!!"
HISTORY_COMMAND = "history"


def _load_context(path: Path | None) -> CommandContext | None:
    """Load a context snapshot from a JSON file.

    Args:
        path: JSON file with context fields (snake_case or camelCase).

    Returns:
        CommandContext, or None when no path was given.
    """
    if path is None:
        return None

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        display_error(f"Could not read context file {path}: {e}")
        raise typer.Exit(1)

    if not isinstance(data, dict):
        display_error(f"Context file {path} must contain a JSON object")
        raise typer.Exit(1)

    try:
        context = CommandContext.from_dict(data)
    except TypeError as e:
        display_error(f"Invalid context in {path}: {e}")
        raise typer.Exit(1)

    logger.debug(f"Loaded context from {path}: {context}")
    return context


@app.command()
def parse(
    text: str = typer.Argument(..., help="Player input to interpret"),
    context_file: Path = typer.Option(None, "--context", "-c", help="JSON context snapshot"),
    validate: bool = typer.Option(
        True, "--validate/--no-validate", help="Check commands against the context"
    ),
) -> None:
    """Parse a line of input and show the resulting commands."""
    context = _load_context(context_file)

    commands = CommandParser().parse_compound(text, context)
    if validate and context is not None:
        commands = CommandValidator().validate_all(commands, context)

    display_commands(commands)


@app.command()
def suggest(
    partial: str = typer.Argument(..., help="Partially typed input"),
    context_file: Path = typer.Option(None, "--context", "-c", help="JSON context snapshot"),
    limit: int = typer.Option(None, "--limit", "-l", min=1, help="Max suggestions"),
) -> None:
    """Show autocomplete suggestions for partial input."""
    context = _load_context(context_file)
    suggestions = get_autocomplete_suggestions(partial, context, limit=limit)
    display_suggestions(partial, suggestions)


@app.command()
def play(
    context_file: Path = typer.Option(None, "--context", "-c", help="JSON context snapshot"),
) -> None:
    """Interactive prompt: type commands and see how they are understood."""
    context = _load_context(context_file)
    parser = CommandParser()
    validator = CommandValidator()
    history = CommandHistory()

    display_welcome(str(context.current_room_id) if context and context.current_room_id else None)
    display_info("Type commands. 'help' for the reference, 'quit' to leave.")

    while True:
        console.print()
        try:
            line = prompt_input()
        except (EOFError, KeyboardInterrupt):
            break

        stripped = line.strip()
        if not stripped:
            continue

        if stripped.lower() == HISTORY_COMMAND:
            display_history(history.get_recent())
            continue

        if stripped == REPEAT_COMMAND:
            recent = history.get_recent(1)
            if not recent:
                display_info("No previous command")
                continue
            line = recent[0]
            display_info(line)

        history.add(line)

        commands = parser.parse_compound(line, context)
        if context is not None:
            commands = validator.validate_all(commands, context)

        for command in commands:
            if command.valid and command.verb == CommandVerb.HELP:
                display_help()
            else:
                display_command_outcome(command)

        if any(command.valid and command.verb == CommandVerb.QUIT for command in commands):
            break

    display_success("Goodbye.")


@app.callback()
def main() -> None:
    """Quest Commands - turn player text into structured game commands.

    Use 'quest-commands parse "take sword"' to inspect a single line, or
    'quest-commands play' for an interactive prompt.
    """
    settings = get_settings()
    logging.basicConfig(
        level=settings.effective_log_level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


if __name__ == "__main__":
    app()

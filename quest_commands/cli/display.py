"""Rich display helpers for CLI output."""

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.markup import escape
from rich.table import Table

from quest_commands.parser.command_types import ParsedCommand


# Shared console instance
console = Console()


def display_welcome(room: str | None = None) -> None:
    """Display welcome message.

    Args:
        room: Optional name of the starting room.
    """
    title = "[bold cyan]Quest Commands[/bold cyan]"
    if room:
        title += f" - {room}"

    console.print()
    console.print(Panel(title, style="cyan"))
    console.print()


def display_error(message: str) -> None:
    """Display error message.

    Args:
        message: Error message.
    """
    console.print(f"[bold red]Error:[/bold red] {message}")


def display_success(message: str) -> None:
    """Display success message.

    Args:
        message: Success message.
    """
    console.print(f"[bold green]{message}[/bold green]")


def display_info(message: str) -> None:
    """Display info message.

    Args:
        message: Info message.
    """
    console.print(f"[dim]{message}[/dim]")


def display_commands(commands: list[ParsedCommand]) -> None:
    """Display parsed commands in a table.

    Args:
        commands: Commands in input order.
    """
    table = Table(title="Parsed Commands", box=box.ROUNDED)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Category", style="cyan")
    table.add_column("Command", style="white")
    table.add_column("Result")

    for index, command in enumerate(commands, 1):
        if command.valid:
            result = "[green]OK[/green]"
        else:
            result = f"[red]{escape(command.error or '')}[/red]"
        table.add_row(
            str(index),
            command.category.value,
            escape(_describe(command)),
            result,
        )

    console.print(table)


def _describe(command: ParsedCommand) -> str:
    """Summarize what a command asks for, whether or not it is valid."""
    if command.valid:
        return str(command)
    if command.verb is None:
        return command.raw.strip()

    parts = [command.verb.value]
    if command.direction:
        parts.append(command.direction.value)
    if command.target:
        parts.append(command.target)
    return " ".join(parts)


def display_command_outcome(command: ParsedCommand) -> None:
    """Display a single command as the game loop would report it.

    Args:
        command: Parsed (and usually validated) command.
    """
    if command.valid:
        console.print(f"[green]>[/green] {escape(str(command))}")
    else:
        console.print(f"[yellow]{escape(command.error or '')}[/yellow]")


def display_suggestions(partial: str, suggestions: list[str]) -> None:
    """Display autocomplete suggestions.

    Args:
        partial: The partial input that was completed.
        suggestions: Suggested completions.
    """
    if not suggestions:
        display_info(f"No suggestions for '{partial}'")
        return

    for suggestion in suggestions:
        console.print(f"  [cyan]{escape(suggestion)}[/cyan]")


def display_history(entries: list[str]) -> None:
    """Display recent history entries, oldest first.

    Args:
        entries: History entries.
    """
    if not entries:
        display_info("History is empty")
        return

    for index, entry in enumerate(entries, 1):
        console.print(f"  [dim]{index:>3}[/dim]  {escape(entry)}")


def display_help() -> None:
    """Show the command reference."""
    console.print()
    console.print("[bold cyan]━━━ Movement ━━━[/bold cyan]")
    console.print("  go <direction>    north, south, east, west, ne, nw, se, sw, up, down")
    console.print("  n / s / e / w     Shortcuts for the compass points")
    console.print()
    console.print("[bold cyan]━━━ Items ━━━[/bold cyan]")
    console.print("  take <item>       Pick something up")
    console.print("  drop <item>       Put something down")
    console.print("  use <item> \\[on <target>]")
    console.print("  equip / unequip <item>")
    console.print()
    console.print("[bold cyan]━━━ Combat & Information ━━━[/bold cyan]")
    console.print("  attack \\[target]   Attacks the visible monster if no target given")
    console.print("  look \\[target]     Look around, or at something")
    console.print("  i / stats         Inventory and character status")
    console.print()
    console.print("[bold cyan]━━━ Prompt ━━━[/bold cyan]")
    console.print("  history           Recent commands")
    console.print("  !!                Repeat the previous command")
    console.print("  quit              Leave")
    console.print()
    console.print("  Combine commands with 'and', 'then' or commas:")
    console.print("    [dim]> take sword and attack goblin[/dim]")
    console.print()


def prompt_input(prompt: str = "> ") -> str:
    """Get input from user with styled prompt.

    Args:
        prompt: Prompt string.

    Returns:
        User input.
    """
    return console.input(f"[bold cyan]{prompt}[/bold cyan]")

"""Bounded command history with shell-style navigation."""

from quest_commands.config import get_settings


class CommandHistory:
    """Order-preserving log of submitted commands.

    Works like a shell history: ``get_previous`` walks toward older
    entries (up arrow) and ``get_next`` toward newer ones (down arrow),
    returning an empty string once the walk passes the newest entry.
    Not thread-safe; meant to be owned by a single input surface.

    Example:
        history = CommandHistory(max_size=50)
        history.add("go north")
        history.add("take sword")

        history.get_previous()  # "take sword"
        history.get_previous()  # "go north"
        history.get_next()      # "take sword"
        history.get_next()      # ""
    """

    def __init__(self, max_size: int | None = None) -> None:
        """Initialize an empty history.

        Args:
            max_size: Entries to keep before evicting the oldest.
                Defaults to the ``history_max_size`` setting.

        Raises:
            ValueError: If max_size is less than 1.
        """
        if max_size is None:
            max_size = get_settings().history_max_size
        if max_size < 1:
            raise ValueError(f"History size must be at least 1, got {max_size}")

        self.max_size = max_size
        self._entries: list[str] = []
        self._cursor = 0

    def __len__(self) -> int:
        return len(self._entries)

    def add(self, command: str) -> None:
        """Record a submitted command.

        Blank input and exact repeats of the newest entry are ignored.
        Otherwise navigation restarts from the end.
        """
        if not command.strip():
            return
        if self._entries and self._entries[-1] == command:
            return

        self._entries.append(command)
        if len(self._entries) > self.max_size:
            self._entries.pop(0)

        self.reset_navigation()

    def get_previous(self) -> str | None:
        """Step toward older entries, stopping at the oldest.

        Returns:
            The entry under the cursor, or None if the history is empty.
        """
        if not self._entries:
            return None

        if self._cursor > 0:
            self._cursor -= 1
        return self._entries[self._cursor]

    def get_next(self) -> str | None:
        """Step toward newer entries.

        Returns:
            The entry under the cursor, an empty string once past the
            newest entry, or None if the history is empty.
        """
        if not self._entries:
            return None

        if self._cursor < len(self._entries) - 1:
            self._cursor += 1
            return self._entries[self._cursor]

        self._cursor = len(self._entries)
        return ""

    def reset_navigation(self) -> None:
        """Move the cursor past the newest entry."""
        self._cursor = len(self._entries)

    def get_all(self) -> list[str]:
        """Get a copy of every entry, oldest first."""
        return list(self._entries)

    def get_recent(self, n: int = 10) -> list[str]:
        """Get the last n entries, oldest first.

        Raises:
            ValueError: If n is negative.
        """
        if n < 0:
            raise ValueError(f"Count must not be negative, got {n}")
        if n == 0:
            return []
        return self._entries[-n:]

    def clear(self) -> None:
        """Forget every entry."""
        self._entries.clear()
        self._cursor = 0

"""Address-bar navigation for catalog sessions.

The controller writes its canonical query string through a Navigator
after every recompute. ``replace`` rewrites the current history entry;
``push`` creates a new one and is reserved for explicit navigations.
"""

from typing import Protocol


class Navigator(Protocol):
    """Destination for the canonical query string."""

    def replace(self, query: str) -> None:
        """Rewrite the current history entry."""
        ...

    def push(self, query: str) -> None:
        """Add a new history entry."""
        ...


class HistoryNavigator:
    """In-memory browser-like history.

    Example usage:
        history = HistoryNavigator("category=phones")
        controller = CatalogController(store, language, navigator=history)
        controller.start(history.current)
    """

    def __init__(self, initial: str = "") -> None:
        """Initialize history with a single entry.

        Args:
            initial: Query string of the first entry.
        """
        self._entries: list[str] = [initial]
        self._index = 0

    @property
    def current(self) -> str:
        """Query string of the current entry."""
        return self._entries[self._index]

    @property
    def entries(self) -> list[str]:
        """All entries, oldest first."""
        return list(self._entries)

    def replace(self, query: str) -> None:
        """Rewrite the current entry."""
        self._entries[self._index] = query

    def push(self, query: str) -> None:
        """Add an entry after the current one, dropping forward history."""
        del self._entries[self._index + 1 :]
        self._entries.append(query)
        self._index += 1

    def back(self) -> str | None:
        """Step back one entry.

        Returns:
            The new current query string, or None at the oldest entry.
        """
        if self._index == 0:
            return None
        self._index -= 1
        return self.current

    def forward(self) -> str | None:
        """Step forward one entry.

        Returns:
            The new current query string, or None at the newest entry.
        """
        if self._index == len(self._entries) - 1:
            return None
        self._index += 1
        return self.current

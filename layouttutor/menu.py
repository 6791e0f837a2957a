"""A titled, paginated selection list rendered as plain text."""

from __future__ import annotations

from typing import Any, Iterable, Optional, Protocol


class MenuItem(Protocol):
    def title(self) -> str: ...

    def description(self) -> str: ...


_MARGIN_V = 1
_MARGIN_H = 2
_LINES_PER_ITEM = 3  # title, description, spacing
_CHROME_LINES = 3  # title, gap, page indicator


class Menu:
    """A list of items with a movable selection."""

    def __init__(self, title: str, items: Iterable[Any] = ()) -> None:
        self.title = title
        self._items: list[MenuItem] = list(items)
        self._index = 0
        self._width = 0
        self._height = 0

    def set_items(self, items: Iterable[Any]) -> None:
        """Replace the items, keeping the selection within range."""
        self._items = list(items)
        self._index = min(self._index, max(len(self._items) - 1, 0))

    def set_size(self, width: int, height: int) -> None:
        """Set the outer size; the list gets what remains after margins."""
        self._width = max(0, width - 2 * _MARGIN_H)
        self._height = max(0, height - 2 * _MARGIN_V)

    def selected(self) -> Optional[Any]:
        return self._items[self._index] if self._items else None

    def selected_index(self) -> int:
        return self._index

    def _per_page(self) -> int:
        if self._height <= 0:
            return max(1, len(self._items))
        return max(1, (self._height - _CHROME_LINES) // _LINES_PER_ITEM)

    def handle_key(self, key: str) -> bool:
        """Move the selection; return whether it changed."""
        if not self._items:
            return False
        last = len(self._items) - 1
        per_page = self._per_page()
        targets = {
            "up": self._index - 1,
            "k": self._index - 1,
            "down": self._index + 1,
            "j": self._index + 1,
            "left": self._index - per_page,
            "h": self._index - per_page,
            "pgup": self._index - per_page,
            "right": self._index + per_page,
            "l": self._index + per_page,
            "pgdown": self._index + per_page,
            "home": 0,
            "g": 0,
            "end": last,
            "G": last,
        }
        if key not in targets:
            return False
        new_index = min(max(targets[key], 0), last)
        changed = new_index != self._index
        self._index = new_index
        return changed

    def render(self) -> str:
        """Render the visible page of the menu, margins included."""
        lines = [self.title, ""]
        if not self._items:
            lines.append("No items.")
        else:
            per_page = self._per_page()
            page = self._index // per_page
            pages = -(-len(self._items) // per_page)
            start = page * per_page
            for position, item in enumerate(self._items[start:start + per_page], start):
                marker = "│ " if position == self._index else "  "
                lines.append(marker + item.title())
                lines.append(marker + item.description())
                lines.append("")
            if pages > 1:
                lines.append(f"{page + 1}/{pages}")
        if self._width > 0:
            lines = [line[: self._width] for line in lines]
        pad = " " * _MARGIN_H
        body = [pad + line if line else "" for line in lines]
        return "\n".join([""] * _MARGIN_V + body + [""] * _MARGIN_V)
"""A single-line typing field that checks input against a target text."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from enum import Enum

DELETE_KEYS = frozenset({"backspace", "ctrl+h"})


class SegmentKind(Enum):
    """How a piece of the rendered field should be shown."""

    CORRECT = "correct"
    ERROR = "error"
    CURSOR = "cursor"
    PENDING = "pending"


@dataclass(frozen=True)
class Segment:
    """A run of text sharing one display kind."""

    kind: SegmentKind
    text: str


def sanitize(text: str) -> str:
    """Collapse tabs and newlines to spaces and drop other control characters."""
    cleaned = []
    for ch in text:
        if ch in "\r\n\t":
            cleaned.append(" ")
        elif unicodedata.category(ch) == "Cc":
            continue
        else:
            cleaned.append(ch)
    return "".join(cleaned)


class InputField:
    """Typing field bound to a target text, with horizontal scrolling."""

    def __init__(self, text_to_write: str = "", width: int = 0, scroll_off: int = 4) -> None:
        self.text_to_write = text_to_write
        # Maximum visible characters; 0 or less means unlimited.
        self.width = width
        # How many characters ahead stay visible while scrolling.
        self.scroll_off = scroll_off
        self._value: list[str] = []
        self._focus = False
        self._offset = 0

    def value(self) -> str:
        return "".join(self._value)

    def focused(self) -> bool:
        return self._focus

    def focus(self) -> None:
        self._focus = True

    def blur(self) -> None:
        self._focus = False

    def reset(self) -> None:
        """Clear all typed input."""
        self._value = []
        self._offset = 0

    def _handle_overflow(self) -> None:
        max_len = len(self.text_to_write)
        typed = len(self._value)
        if self.width <= 0 or max_len <= self.width:
            self._offset = 0
            return
        scroll_off = min(self.scroll_off, max_len - typed)
        available = self.width - scroll_off
        self._offset = 0 if typed <= available else typed - available

    def insert(self, text: str) -> None:
        """Append typed text, never going past the length of the target."""
        available = len(self.text_to_write) - len(self._value)
        if available <= 0:
            return
        self._value.extend(sanitize(text)[:available])
        self._handle_overflow()

    def delete_backward(self) -> None:
        if self._value:
            self._value.pop()
            self._handle_overflow()

    def handle_key(self, key: str) -> bool:
        """Apply a key press; return whether the typed value changed."""
        if not self._focus:
            return False
        before = len(self._value)
        if key in DELETE_KEYS:
            self.delete_backward()
        elif key == "space":
            self.insert(" ")
        elif len(key) == 1:
            self.insert(key)
        else:
            return False
        return len(self._value) != before

    def segments(self) -> list[Segment]:
        """The visible content, split into correct, error, cursor and pending runs."""
        result: list[Segment] = []
        start = self._offset
        for typed, wanted in zip(self._value[start:], self.text_to_write[start:]):
            kind = SegmentKind.CORRECT if typed == wanted else SegmentKind.ERROR
            if result and result[-1].kind is kind:
                result[-1] = Segment(kind, result[-1].text + typed)
            else:
                result.append(Segment(kind, typed))

        typed_len = len(self._value)
        target_len = len(self.text_to_write)
        if typed_len >= target_len:
            return result

        result.append(Segment(SegmentKind.CURSOR, self.text_to_write[typed_len]))
        end = target_len if self.width <= 0 else min(target_len, self.width + self._offset)
        pending = self.text_to_write[typed_len + 1:end]
        if pending:
            result.append(Segment(SegmentKind.PENDING, pending))
        return result
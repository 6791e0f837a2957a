"""The typing view for one level of a layout course."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from .inputfield import InputField
from .layout import LayoutCourse, Level

Style = Callable[[str, str], str]

_MARGIN_V = 1
_MARGIN_H = 2


def _plain(role: str, text: str) -> str:
    return text


@dataclass(frozen=True)
class KeyBinding:
    """A set of key names that trigger one action, with its help entry."""

    keys: tuple[str, ...]
    help_key: str = ""
    help_desc: str = ""

    def matches(self, key: str) -> bool:
        return key in self.keys


BACK = KeyBinding(("-",), "-", "back to menu")
RESET = KeyBinding(("ctrl+r",), "ctrl+r", "reset level")
QUIT = KeyBinding(("q", "esc", "ctrl+c"), "q", "quit")

HELP_BINDINGS = (BACK, RESET, QUIT)


class CourseView:
    """Shows the level title, the typing field and a short key help."""

    def __init__(self) -> None:
        self.course: Optional[LayoutCourse] = None
        self.level: Optional[Level] = None
        self.field = InputField()
        self.field.focus()

    def set_size(self, width: int, height: int) -> None:
        """Fit the typing field into the width left after the margins."""
        self.field.width = width - 2 * _MARGIN_H

    def set_layout(self, course: LayoutCourse) -> None:
        self.course = course

    def set_level(self, level: Level) -> None:
        """Start a level: clear the field and load the level's text."""
        self.level = level
        self.field.reset()
        self.field.text_to_write = level.text()

    def handle_key(self, key: str) -> bool:
        """Apply a key press; return whether the typed text changed."""
        changed = False
        if RESET.matches(key):
            changed = bool(self.field.value())
            self.field.reset()
        return self.field.handle_key(key) or changed

    def title(self) -> str:
        course_name = self.course.name if self.course else ""
        level_name = self.level.name if self.level else ""
        return f"{course_name}: {level_name}"

    def help_text(self) -> str:
        return " • ".join(f"{b.help_key} {b.help_desc}" for b in HELP_BINDINGS)

    def render(self, style: Optional[Style] = None) -> str:
        """Render the view; ``style(role, text)`` decorates each styled piece."""
        paint = style or _plain
        title = paint("title", f" {self.title()} ")
        field = "".join(paint(seg.kind.value, seg.text) for seg in self.field.segments())
        help_line = paint("help", self.help_text())
        pad = " " * _MARGIN_H
        body = [pad + title, "", pad + field, "", pad + help_line]
        return "\n".join([""] * _MARGIN_V + body + [""] * _MARGIN_V)
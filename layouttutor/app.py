"""The interactive terminal application tying menus and the course view together."""

from __future__ import annotations

import argparse
import sys
from enum import Enum
from typing import Iterable, Optional

from .course import CourseView, Style
from .layout import LayoutCourse, Level, all_courses
from .menu import Menu


class View(Enum):
    """Which screen is active."""

    LAYOUT_MENU = 0
    LEVEL_MENU = 1
    COURSE = 2


_QUIT_KEYS = frozenset({"ctrl+c", "q"})

_SEQUENCE_NAMES = {
    "KEY_ENTER": "enter",
    "KEY_BACKSPACE": "backspace",
    "KEY_DELETE": "delete",
    "KEY_UP": "up",
    "KEY_DOWN": "down",
    "KEY_LEFT": "left",
    "KEY_RIGHT": "right",
    "KEY_PGUP": "pgup",
    "KEY_PGDOWN": "pgdown",
    "KEY_HOME": "home",
    "KEY_END": "end",
    "KEY_ESCAPE": "esc",
    "KEY_EXIT": "esc",
    "KEY_TAB": "tab",
}

_CONTROL_NAMES = {
    "\r": "enter",
    "\n": "enter",
    "\t": "tab",
    "\x1b": "esc",
    "\x7f": "backspace",
}


def key_name(keystroke: str) -> str:
    """Turn a terminal keystroke into a key name such as 'enter' or 'ctrl+r'."""
    name = getattr(keystroke, "name", None)
    if getattr(keystroke, "is_sequence", False) and name in _SEQUENCE_NAMES:
        return _SEQUENCE_NAMES[name]
    text = str(keystroke)
    if text in _CONTROL_NAMES:
        return _CONTROL_NAMES[text]
    if len(text) == 1 and "\x01" <= text <= "\x1a":
        return "ctrl+" + chr(ord(text) + ord("a") - 1)
    return text


class App:
    """Course menu, level menu and typing view, switched by key presses."""

    def __init__(self, courses: Optional[Iterable[LayoutCourse]] = None) -> None:
        self.view = View.LAYOUT_MENU
        self.course_menu = Menu(
            "Choose course", all_courses() if courses is None else courses
        )
        self.level_menu = Menu("Choose level", [])
        self.course_view = CourseView()

    def resize(self, width: int, height: int) -> None:
        self.course_menu.set_size(width, height)
        self.level_menu.set_size(width, height)
        self.course_view.set_size(width, height)

    def handle_key(self, key: str) -> bool:
        """Apply a key press; return False once the application should quit."""
        if key in _QUIT_KEYS:
            return False
        if key == "-":
            if self.view is View.LEVEL_MENU:
                self.view = View.LAYOUT_MENU
            elif self.view is View.COURSE:
                self.view = View.LEVEL_MENU
        elif key == "enter":
            if self.view is View.LAYOUT_MENU:
                selected = self.course_menu.selected()
                if isinstance(selected, LayoutCourse):
                    self.course_view.set_layout(selected)
                    self.level_menu.set_items(selected.levels)
                    self.view = View.LEVEL_MENU
                    return True
            elif self.view is View.LEVEL_MENU:
                selected = self.level_menu.selected()
                if isinstance(selected, Level):
                    self.course_view.set_level(selected)
                    self.view = View.COURSE
                    return True

        if self.view is View.LAYOUT_MENU:
            self.course_menu.handle_key(key)
        elif self.view is View.LEVEL_MENU:
            self.level_menu.handle_key(key)
        else:
            self.course_view.handle_key(key)
        return True

    def render(self, style: Optional[Style] = None) -> str:
        if self.view is View.LAYOUT_MENU:
            return self.course_menu.render()
        if self.view is View.LEVEL_MENU:
            return self.level_menu.render()
        return self.course_view.render(style)


def _terminal_style(term) -> Style:
    painters = {
        "correct": term.color_rgb(0x43, 0xBF, 0x6D),
        "error": term.color_rgb(0xEB, 0x6F, 0x92),
        "pending": term.color(240),
        "cursor": lambda text: term.reverse + term.color(240) + text + term.normal,
        "title": lambda text: term.on_color(62) + term.color(230) + text + term.normal,
        "help": term.color(241),
    }

    def style(role: str, text: str) -> str:
        painter = painters.get(role)
        return painter(text) if painter else text

    return style


def _run() -> None:
    from blessed import Terminal

    term = Terminal()
    app = App()
    style = _terminal_style(term)
    size = None
    with term.fullscreen(), term.cbreak(), term.hidden_cursor():
        while True:
            current = (term.width, term.height)
            if current != size:
                size = current
                app.resize(*current)
            sys.stdout.write(term.home + term.clear + app.render(style))
            sys.stdout.flush()
            keystroke = term.inkey(timeout=0.5)
            if not keystroke:
                continue
            if not app.handle_key(key_name(keystroke)):
                break


def main(argv: Optional[list[str]] = None) -> int:
    """Start the interactive tutor."""
    parser = argparse.ArgumentParser(
        prog="layouttutor", description="Practise typing on a new keyboard layout."
    )
    parser.parse_args(argv)
    try:
        _run()
    except Exception as err:
        print(f"Something failed: {err}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Keyboard layout courses and their practice levels."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Level:
    """A practice level: a named list of words to type."""

    name: str
    detail: str = ""
    words: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "words", tuple(self.words))

    def title(self) -> str:
        return self.name

    def description(self) -> str:
        return self.detail

    def filter_value(self) -> str:
        return self.name

    def text(self) -> str:
        """The text the user has to type for this level."""
        return " ".join(self.words)


@dataclass(frozen=True)
class LayoutCourse:
    """A keyboard layout with its ordered practice levels."""

    name: str
    detail: str = ""
    levels: tuple[Level, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "levels", tuple(self.levels))

    def title(self) -> str:
        return self.name

    def description(self) -> str:
        return self.detail

    def filter_value(self) -> str:
        return self.name


COLEMAK = LayoutCourse(
    name="Colemak",
    detail="Standard Colemak",
    levels=(
        Level(
            name="Sire",
            detail="Words with characters 's', 'i', 'r', 'e'",
            words=("sire", "re", "si", "iri", "siri", "sir"),
        ),
        Level(
            name="Home row",
            detail="Words using characters on home row",
            words=("sons", "seas", "tree", "stories", "inns"),
        ),
    ),
)


def all_courses() -> list[LayoutCourse]:
    """Return every built-in course, in menu order."""
    return [COLEMAK]
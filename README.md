# layouttutor

A small full-screen terminal typing tutor for practising a new keyboard
layout. Pick a course, pick a level, and type the words shown on screen.
Each character you type is shown in green when it matches the text and in
red when it does not; the character under the cursor and the text still to
type are shown in grey.

The bundled course is **Colemak**. It has these levels:

- **Sire**: words made from the letters `s`, `i`, `r` and `e`
- **Home row**: words that use the home-row keys

## Installation

```
pip install .
```

## Usage

Start the tutor:

```
layouttutor
```

It takes no options besides `--help`. If the terminal cannot be set up, it
prints `Something failed: ...` and exits with status 1.

### Keys

In the course and level menus:

| Key                         | Action                            |
|-----------------------------|-----------------------------------|
| up / down, `k` / `j`        | move the selection                |
| left / right, `h` / `l`, pgup / pgdown | move by one page       |
| home / end, `g` / `G`       | jump to the first / last entry    |
| enter                       | open the selected entry           |
| `-`                         | go back to the course menu        |
| `q`, ctrl+c                 | quit                              |

While typing a level:

| Key                  | Action                        |
|----------------------|-------------------------------|
| any other character  | type it                       |
| space                | type a space                  |
| backspace, ctrl+h    | delete the last character     |
| ctrl+r               | reset the level               |
| `-`                  | go back to the level menu     |
| `q`, ctrl+c          | quit                          |

Because `q` and `-` are taken by the commands above, they cannot be typed
as part of a level. Input stops being accepted once as many characters have
been typed as the level's text holds.

The text scrolls sideways when a level is longer than the terminal is wide,
and a few characters ahead of the cursor (four by default) stay visible.

## Using it as a library

The pieces behind the interface can be used without a terminal:

```python
from layouttutor.layout import all_courses
from layouttutor.inputfield import InputField

course = all_courses()[0]
level = course.levels[0]

field = InputField(level.text(), 80, 4)
field.focus()
field.insert("sire")
print(field.value())
for segment in field.segments():
    print(segment.kind, segment.text)
```

- `layouttutor.layout`: the `Level` and `LayoutCourse` dataclasses and
  `all_courses()`; `Level.text()` joins the level's words with spaces.
- `layouttutor.inputfield`: `InputField` (`insert`, `delete_backward`,
  `handle_key`, `reset`, `segments`), `Segment`, `SegmentKind`
  (`CORRECT`, `ERROR`, `CURSOR`, `PENDING`) and `sanitize()`, which turns
  tabs and newlines into spaces and drops other control characters.
- `layouttutor.menu`: `Menu`, a paginated selection list rendered as plain
  text.
- `layouttutor.course`: `CourseView`, the typing screen, and `KeyBinding`.
- `layouttutor.app`: `App`, which switches between the screens on key names
  such as `"enter"`, `"-"` or `"ctrl+r"`, `View`, `key_name()` for turning a
  terminal keystroke into such a name, and `main()`.

`App.render()` and `CourseView.render()` take an optional
`style(role, text)` callable to decorate the title, help line and field
segments; without it the output is plain text.

## What it does not do

The tutor does not record scores, speed or accuracy, does not move on to the
next level when one is finished, and the menus cannot be filtered by typing.
The only course is the built-in Colemak one; there is no way to load courses
from files.

## Running the tests

```
pip install ".[test]"
pytest
```
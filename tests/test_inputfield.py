import pytest

from layouttutor.inputfield import InputField, Segment, SegmentKind, sanitize


def focused_field(text, width=0, scroll_off=4):
    field = InputField(text, width=width, scroll_off=scroll_off)
    field.focus()
    return field


def test_sanitize_replaces_whitespace_controls():
    result = sanitize("a\tb\nc\rd")
    assert "\t" not in result and "\n" not in result and "\r" not in result
    assert result.split(" ") == ["a", "b", "c", "d"]


def test_sanitize_drops_other_controls():
    assert sanitize("a\x00b\x07") == "ab"


def test_sanitize_keeps_plain_text():
    assert sanitize("sire re") == "sire re"


def test_focus_and_blur():
    field = InputField("abc")
    assert field.focused() is False
    field.focus()
    assert field.focused() is True
    field.blur()
    assert field.focused() is False


def test_unfocused_field_ignores_keys():
    field = InputField("abc")
    assert field.handle_key("a") is False
    assert field.value() == ""


def test_insert_is_limited_to_target_length():
    field = focused_field("sir")
    field.insert("sirens")
    assert field.value() == "sir"
    field.insert("x")
    assert field.value() == "sir"


def test_handle_key_types_and_deletes():
    field = focused_field("si re")
    assert field.handle_key("s") is True
    assert field.handle_key("i") is True
    assert field.handle_key("space") is True
    assert field.value() == "si "
    assert field.handle_key("backspace") is True
    assert field.value() == "si"
    assert field.handle_key("ctrl+h") is True
    assert field.value() == "s"


def test_named_keys_are_ignored():
    field = focused_field("abc")
    assert field.handle_key("enter") is False
    assert field.handle_key("ctrl+r") is False
    assert field.value() == ""


def test_delete_on_empty_does_nothing():
    field = focused_field("abc")
    assert field.handle_key("backspace") is False
    assert field.value() == ""


def test_reset_clears_value():
    field = focused_field("abc")
    field.insert("ab")
    field.reset()
    assert field.value() == ""
    assert field.segments()[0] == Segment(SegmentKind.CURSOR, "a")


def test_segments_before_typing():
    field = focused_field("sire")
    assert field.segments() == [
        Segment(SegmentKind.CURSOR, "s"),
        Segment(SegmentKind.PENDING, "ire"),
    ]


def test_segments_mark_correct_and_wrong_characters():
    field = focused_field("sire")
    field.insert("sa")
    assert field.segments() == [
        Segment(SegmentKind.CORRECT, "s"),
        Segment(SegmentKind.ERROR, "a"),
        Segment(SegmentKind.CURSOR, "r"),
        Segment(SegmentKind.PENDING, "e"),
    ]


def test_adjacent_runs_are_merged():
    field = focused_field("sire")
    field.insert("sixx")
    kinds = [s.kind for s in field.segments()]
    assert kinds == [SegmentKind.CORRECT, SegmentKind.ERROR]
    assert "".join(s.text for s in field.segments()) == "sixx"


def test_completed_text_has_no_cursor():
    field = focused_field("re")
    field.insert("re")
    assert field.segments() == [Segment(SegmentKind.CORRECT, "re")]


def test_short_text_within_width_is_not_scrolled():
    field = focused_field("abc", width=10)
    field.insert("ab")
    joined = "".join(s.text for s in field.segments())
    assert joined == "abc"


def test_scrolling_keeps_lookahead_visible():
    field = focused_field("abcdefghij", width=5, scroll_off=2)
    field.insert("abcdef")
    assert field.segments() == [
        Segment(SegmentKind.CORRECT, "def"),
        Segment(SegmentKind.CURSOR, "g"),
        Segment(SegmentKind.PENDING, "h"),
    ]


@pytest.mark.parametrize("typed", range(0, 11))
def test_visible_text_never_exceeds_width(typed):
    target = "abcdefghij"
    field = focused_field(target, width=5, scroll_off=2)
    field.insert(target[:typed])
    visible = "".join(s.text for s in field.segments())
    assert len(visible) <= 5
    assert visible in target


def test_deleting_scrolls_back():
    field = focused_field("abcdefghij", width=5, scroll_off=2)
    field.insert("abcdef")
    for _ in range(6):
        field.delete_backward()
    assert field.value() == ""
    assert "".join(s.text for s in field.segments()) == "abcde"
import pytest

from pixeldynasty.textedit.layout import PlainTextBuffer
from pixeldynasty.textedit.navigation import (
    FindState,
    find_charpos,
    is_word_boundary,
    locate_coord,
    move_word_left,
    move_word_right,
)

TWO_LINES = "hello\nworld"


@pytest.fixture
def two_lines():
    return PlainTextBuffer(TWO_LINES)


@pytest.mark.parametrize("text", ["hello\nworld", "ab\n", "a\n\nbc", "single"])
def test_charpos_and_locate_round_trip(text):
    buf = PlainTextBuffer(text)
    for n in range(len(buf) + 1):
        found = find_charpos(buf, n, False)
        assert locate_coord(buf, found.x + 0.25, found.y + 0.5) == n


def test_locate_above_text_is_start(two_lines):
    assert locate_coord(two_lines, 3.0, -1.0) == 0


def test_locate_below_text_is_end(two_lines):
    assert locate_coord(two_lines, 0.0, 50.0) == len(two_lines)


def test_locate_left_of_row_is_row_start(two_lines):
    assert locate_coord(two_lines, -1.0, 1.5) == TWO_LINES.index("w")


def test_locate_right_of_line_stops_before_newline(two_lines):
    assert locate_coord(two_lines, 40.0, 0.5) == TWO_LINES.index("\n")


def test_locate_right_of_last_line_is_end(two_lines):
    assert locate_coord(two_lines, 40.0, 1.5) == len(two_lines)


def test_locate_rounds_to_nearest_boundary(two_lines):
    left = locate_coord(two_lines, 2.4, 0.5)
    right = locate_coord(two_lines, 2.6, 0.5)
    assert right == left + 1


def test_locate_empty_buffer():
    assert locate_coord(PlainTextBuffer(""), 5.0, 5.0) == 0


def test_find_charpos_second_row(two_lines):
    found = find_charpos(two_lines, TWO_LINES.index("r"), False)
    assert found.first_char == TWO_LINES.index("w")
    assert found.prev_first == 0
    assert found.length == len("world")
    assert found.y == two_lines.line_height
    assert found.height == two_lines.line_height


def test_find_charpos_first_row_has_no_previous(two_lines):
    found = find_charpos(two_lines, 2, False)
    assert found.first_char == found.prev_first == 0
    assert found.length == len("hello\n")


def test_find_charpos_single_line_end():
    buf = PlainTextBuffer("abc", char_width=2.0)
    found = find_charpos(buf, len(buf), True)
    assert found == FindState(
        x=buf.layout_row(0).x1,
        y=0.0,
        height=buf.line_height,
        first_char=0,
        length=len(buf),
        prev_first=0,
    )


def test_find_charpos_after_trailing_newline():
    buf = PlainTextBuffer("ab\n")
    found = find_charpos(buf, len(buf), False)
    assert found.first_char == len(buf)
    assert found.length == 0
    assert found.x == 0.0


WORDS = "foo bar  baz"


@pytest.fixture
def words():
    return PlainTextBuffer(WORDS)


def test_word_boundaries(words):
    assert is_word_boundary(words, 0)
    assert is_word_boundary(words, WORDS.index("bar"))
    assert not is_word_boundary(words, WORDS.index("bar") + 1)
    assert not is_word_boundary(words, WORDS.index(" "))


def test_move_word_right_steps_through_words(words):
    first = move_word_right(words, 0)
    second = move_word_right(words, first)
    third = move_word_right(words, second)
    assert (first, second, third) == (
        WORDS.index("bar"),
        WORDS.index("baz"),
        len(WORDS),
    )


def test_move_word_right_never_passes_end(words):
    assert move_word_right(words, len(words)) == len(words)


def test_move_word_left_steps_back(words):
    first = move_word_left(words, len(words))
    second = move_word_left(words, first)
    third = move_word_left(words, second)
    assert (first, second, third) == (WORDS.index("baz"), WORDS.index("bar"), 0)


def test_move_word_left_clamps_at_start(words):
    assert move_word_left(words, 0) == 0
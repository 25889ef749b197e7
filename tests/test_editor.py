import pytest

from pixeldynasty.textedit.editor import Key, TextEditState
from pixeldynasty.textedit.layout import PlainTextBuffer


def make(text="", single_line=False, **kwargs):
    return PlainTextBuffer(text, **kwargs), TextEditState(single_line)


def test_type_text_inserts_and_moves_cursor():
    buf, state = make()
    state.type_text(buf, "hello")
    assert buf.text == "hello"
    assert state.cursor == len("hello")


def test_undo_redo_round_trip_of_typing():
    buf, state = make()
    state.type_text(buf, "hello")
    state.key(buf, Key.UNDO)
    assert buf.text == ""
    assert state.cursor == 0
    state.key(buf, Key.REDO)
    assert buf.text == "hello"
    assert state.cursor == len("hello")


def test_single_line_rejects_newline():
    buf, state = make(single_line=True)
    state.type_text(buf, "\n")
    assert buf.text == ""
    assert state.cursor == 0


def test_cut_removes_selection():
    text = "hello world"
    buf, state = make(text)
    state.select_start, state.select_end = 0, 5
    assert state.cut(buf) is True
    assert buf.text == text[5:]
    assert state.cursor == 0
    assert state.cut(buf) is False


def test_paste_replaces_selection():
    text = "abcdef"
    buf, state = make(text)
    state.select_start, state.select_end = 1, 3
    assert state.paste(buf, "XY") is True
    assert buf.text == text[:1] + "XY" + text[3:]
    assert state.cursor == 1 + len("XY")
    assert not state.has_selection()


def test_paste_fails_when_full():
    text = "abc"
    buf, state = make(text, max_length=len(text))
    assert state.paste(buf, "Z") is False
    assert buf.text == text


def test_backspace_and_undo():
    text = "abc"
    buf, state = make(text)
    state.key(buf, Key.TEXTEND)
    state.key(buf, Key.BACKSPACE)
    assert buf.text == text[:-1]
    assert state.cursor == len(text) - 1
    state.key(buf, Key.UNDO)
    assert buf.text == text
    assert state.cursor == len(text)


def test_delete_key_removes_char_under_cursor():
    text = "abc"
    buf, state = make(text)
    state.key(buf, Key.DELETE)
    assert buf.text == text[1:]
    assert state.cursor == 0


def test_left_right_are_bounded():
    text = "ab"
    buf, state = make(text)
    state.key(buf, Key.LEFT)
    assert state.cursor == 0
    for _ in range(len(text) + 3):
        state.key(buf, Key.RIGHT)
    assert state.cursor == len(text)


def test_shift_right_extends_selection():
    buf, state = make("abcd")
    state.key(buf, Key.RIGHT | Key.SHIFT)
    state.key(buf, Key.RIGHT | Key.SHIFT)
    assert state.select_start == 0
    assert state.select_end == state.cursor == 2


def test_left_collapses_selection_to_start():
    buf, state = make("abcd")
    state.select_start, state.select_end, state.cursor = 3, 1, 1
    state.key(buf, Key.LEFT)
    assert state.cursor == 1
    assert not state.has_selection()


def test_reversed_selection_delete():
    text = "abcdef"
    buf, state = make(text)
    state.select_start, state.select_end = 4, 1
    state.delete_selection(buf)
    assert buf.text == text[:1] + text[4:]
    assert state.cursor == state.select_start == state.select_end == 1


def test_line_start_and_end():
    text = "ab\ncd"
    buf, state = make(text)
    state.cursor = 4
    state.key(buf, Key.LINESTART)
    assert state.cursor == text.index("\n") + 1
    state.key(buf, Key.LINEEND)
    assert state.cursor == len(text)


def test_down_and_up_keep_column():
    text = "abc\ndef"
    buf, state = make(text)
    state.cursor = 1
    state.key(buf, Key.DOWN)
    assert state.cursor == text.index("\n") + 1 + 1
    state.key(buf, Key.UP)
    assert state.cursor == 1


def test_down_on_last_line_and_up_on_first_do_nothing():
    text = "abc\ndef"
    buf, state = make(text)
    state.cursor = 5
    state.key(buf, Key.DOWN)
    assert state.cursor == 5
    state.cursor = 1
    state.key(buf, Key.UP)
    assert state.cursor == 1


def test_single_line_down_acts_as_right():
    buf, state = make("abc", single_line=True)
    state.key(buf, Key.DOWN)
    assert state.cursor == 1
    state.key(buf, Key.UP)
    assert state.cursor == 0


def test_text_start_and_end():
    text = "abc\ndef"
    buf, state = make(text)
    state.key(buf, Key.TEXTEND)
    assert state.cursor == len(text)
    state.key(buf, Key.TEXTSTART | Key.SHIFT)
    assert state.cursor == 0
    assert state.select_start == len(text)


def test_insert_mode_overwrites_and_undoes():
    text = "abc"
    buf, state = make(text)
    state.key(buf, Key.INSERT)
    assert state.insert_mode is True
    state.type_text(buf, "X")
    assert buf.text == "X" + text[1:]
    state.key(buf, Key.UNDO)
    assert buf.text == text


def test_click_and_drag_select():
    text = "abc\ndef"
    buf, state = make(text)
    state.click(buf, 0.2, 1.5)
    row_start = text.index("\n") + 1
    assert state.cursor == row_start
    state.drag(buf, 2.2, 1.5)
    assert state.select_start == row_start
    assert state.select_end == state.cursor == row_start + 2


def test_word_moves():
    text = "one two three"
    buf, state = make(text)
    state.key(buf, Key.WORDRIGHT)
    assert state.cursor == text.index("two")
    state.key(buf, Key.WORDLEFT)
    assert state.cursor == 0


def test_character_codes_and_strings_are_typed():
    buf, state = make()
    state.key(buf, ord("a"))
    state.key(buf, "b")
    assert buf.text == "ab"
    state.key(buf, Key.UNDO | Key.SHIFT)
    assert buf.text == "ab"


def test_clamp_limits_cursor():
    text = "ab"
    buf, state = make(text)
    state.cursor = 10
    state.clamp(buf)
    assert state.cursor == len(text)


def test_reset_forgets_history():
    buf, state = make()
    state.type_text(buf, "hi")
    state.reset()
    state.key(buf, Key.UNDO)
    assert buf.text == "hi"
    assert state.cursor == 0


@pytest.mark.parametrize("key", [Key.PGDOWN, Key.PGUP])
def test_page_keys_need_row_count(key):
    text = "a\nb\nc"
    buf, state = make(text)
    state.cursor = 2
    state.key(buf, key)
    assert state.cursor == 2
    state.row_count_per_page = 1
    state.key(buf, key)
    assert state.cursor in (0, 4)
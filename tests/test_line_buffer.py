"""Test LineBuffer operations."""

import pytest
from lined.buffer import LineBuffer, is_printable


def test_new_buffer_has_one_empty_line():
    assert LineBuffer().lines == [""]
    assert LineBuffer([]).lines == [""]


def test_insert_char_middle_and_end():
    buf = LineBuffer(["helo"])
    buf.insert_char(0, 3, "l")
    assert buf[0] == "hello"
    buf.insert_char(0, 5, "!")
    assert buf[0] == "hello!"


def test_insert_char_rejects_column_past_end():
    buf = LineBuffer(["abc"])
    with pytest.raises(AssertionError):
        buf.insert_char(0, 4, "x")


def test_insert_char_rejects_non_printable():
    buf = LineBuffer(["abc"])
    with pytest.raises(AssertionError):
        buf.insert_char(0, 0, "\t")


def test_delete_char_before():
    buf = LineBuffer(["hello"])
    buf.delete_char_before(0, 5)
    assert buf[0] == "hell"
    buf.delete_char_before(0, 1)
    assert buf[0] == "ell"


def test_delete_char_before_at_column_zero_does_not_join():
    buf = LineBuffer(["first", "second"])
    buf.delete_char_before(1, 0)
    assert buf.lines == ["first", "second"]


def test_insert_then_delete_restores_line():
    for col in range(len("sample") + 1):
        buf = LineBuffer(["sample"])
        buf.insert_char(0, col, "Z")
        buf.delete_char_before(0, col + 1)
        assert buf[0] == "sample"


def test_split_line():
    buf = LineBuffer(["hello world", "next"])
    buf.split_line(0, 5)
    assert buf.lines == ["hello", " world", "next"]


def test_split_line_at_edges():
    buf = LineBuffer(["abc"])
    buf.split_line(0, 0)
    assert buf.lines == ["", "abc"]
    buf.split_line(1, 3)
    assert buf.lines == ["", "abc", ""]


def test_split_then_join_reconstructs_line():
    original = "the quick brown fox"
    for col in range(len(original) + 1):
        buf = LineBuffer([original])
        buf.split_line(0, col)
        assert buf[0] + buf[1] == original


def test_delete_line_removes_row():
    buf = LineBuffer(["a", "b", "c"])
    buf.delete_line(1)
    assert buf.lines == ["a", "c"]


def test_delete_last_remaining_line_clears_it():
    buf = LineBuffer(["only line"])
    buf.delete_line(0)
    assert buf.lines == [""]


def test_repeated_delete_never_empties_buffer():
    buf = LineBuffer([f"line {i}" for i in range(5)])
    for _ in range(10):
        buf.delete_line(len(buf) - 1)
        assert len(buf) >= 1
    assert buf.lines == [""]


def test_copy_line_returns_content():
    buf = LineBuffer(["hello", "world"])
    assert buf.copy_line(1) == "world"


def test_insert_line_after():
    buf = LineBuffer(["a", "c"])
    buf.insert_line_after(0, "b")
    assert buf.lines == ["a", "b", "c"]
    buf.insert_line_after(2, "d")
    assert buf.lines == ["a", "b", "c", "d"]


def test_row_out_of_range_is_assertion():
    buf = LineBuffer(["a"])
    with pytest.raises(AssertionError):
        buf.delete_line(1)
    with pytest.raises(AssertionError):
        buf.copy_line(-1)


def test_lines_property_is_a_copy():
    buf = LineBuffer(["a"])
    lines = buf.lines
    lines.append("b")
    assert len(buf) == 1


@pytest.mark.parametrize("ch,expected", [
    (" ", True), ("~", True), ("a", True),
    ("\x7f", False), ("\x1f", False), ("é", False), ("ab", False), ("", False),
])
def test_is_printable(ch, expected):
    assert is_printable(ch) is expected

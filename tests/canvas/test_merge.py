from asciigraph.canvas import Alignment, Canvas, merge_horiz, merge_vert
from asciigraph.color import Color, ColorMode, count_visible_chars

SQUARE = "\n".join(["████"] * 4)


def test_merge_horiz_squares_with_margin():
    out = merge_horiz(SQUARE, SQUARE, margin=2)
    lines = out.split("\n")

    assert len(lines) == 4
    for line in lines:
        assert len(line) == 10
        assert line[4:6] == "  "
        assert line == "████  ████"


def test_merge_vert_with_margin():
    assert merge_vert("ab", "c", margin=1) == "ab\n  \nc "


def test_merge_vert_center():
    assert merge_vert("a", "abc", alignment=Alignment.CENTER) == " a \nabc"


def test_merge_horiz_shorter_side_is_padded():
    assert merge_horiz("ab\ncd", "x", margin=1) == "ab x\ncd  "
    assert merge_horiz("ab\ncd", "x", alignment=Alignment.LAST, margin=1) == "ab  \ncd x"


def test_margin_is_dropped_next_to_empty_input():
    assert merge_horiz("", "ab", margin=3) == "ab"
    assert merge_vert("ab", "", margin=3) == "ab"


def test_merge_identity():
    text = "one\ntwo"
    assert merge_horiz(text, "") == "one\ntwo"
    assert merge_vert("", text) == "one\ntwo"


def test_merge_horiz_keeps_terminal_colors():
    colored = Canvas.from_text("ab").paint(Color.RED).to_text(ColorMode.terminal())
    out = merge_horiz(colored, "xy", ColorMode.terminal(), margin=1)

    assert out == colored + " xy"
    assert count_visible_chars(out) == 5


def test_merge_vert_measures_colored_lines():
    colored = Canvas.from_text("abc").paint(Color.GOLD).to_text(ColorMode.terminal())
    out = merge_vert(colored, "x", ColorMode.terminal())

    assert [count_visible_chars(line) for line in out.split("\n")] == [3, 3]

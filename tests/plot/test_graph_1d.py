import logging

import pytest
from asciigraph.color import Color, ColorMode, count_visible_chars
from asciigraph.plot import Graph, SkipRange
from asciigraph.plot.title import boxed_title

# Helpers


def lines_of(graph: Graph) -> list[str]:
    return graph.draw().split("\n")


def small_graph() -> Graph:
    return Graph(plot_width=4, plot_height=4).set_1d_data([1, 2, 3, 4]).set_pretty_y(None)


SMALL = [
    "     ╭────╮",
    "   4 │   █│",
    "     │  ▆█│",
    "     │ ▄██│",
    "1.75 │ ███│",
    "     ╰────╯",
    "      0    ",
]


class TestBars:
    def test_small_plot(self):
        assert lines_of(small_graph()) == SMALL

    def test_str_is_draw(self):
        g = small_graph()
        assert str(g) == g.draw()

    def test_draw_does_not_change_configuration(self):
        g = small_graph()
        assert g.draw() == g.draw()
        assert g.plot_width == 4

    def test_output_is_rectangular(self):
        g = Graph(plot_width=30, plot_height=12).set_1d_data([3, 1, 4, 1, 5, 9, 2, 6]).set_title("pi")
        canvas = g.render()
        assert canvas.is_valid()
        assert len({len(line) for line in g.draw().split("\n")}) == 1


class TestOverflow:
    def test_large_value_becomes_overflow_marker(self):
        g = (
            Graph(plot_height=20)
            .set_1d_data([0, 1, 1, 0, 2, 0, 1, 2, 0, 0, 0, 1, 0, 1000])
            .set_y_min(-1)
            .set_y_max(3)
        )
        lines = lines_of(g)

        # first plot row: only the 1000 column reaches it
        assert lines[1].endswith("^^^^^│")
        assert lines[1].count("^") == 5
        assert "~" not in g.draw()

    def test_custom_overflow_char(self):
        g = Graph(plot_width=4, plot_height=4).set_1d_data([1, 2, 50]).set_y_range(0, 3).set_overflow_char("!")
        assert "!" in g.draw()


class TestSkipRange:
    def test_split_plot(self):
        g = Graph(plot_width=10, plot_height=20).set_1d_data([1, 2, 3, 100, 101])
        text = g.draw()

        assert any(line.strip() == "~" * 12 for line in text.split("\n"))
        assert "^" not in text
        assert g.render().is_valid()

    def test_disabled(self):
        g = Graph(plot_width=10, plot_height=20).set_1d_data([1, 2, 3, 100, 101]).set_skip_range(SkipRange.disabled())
        assert "~" not in g.draw()

    def test_manual_outside_range_is_ignored(self, caplog):
        g = Graph(plot_width=10, plot_height=20).set_1d_data([1, 2, 3]).set_skip_range(SkipRange.manual(50, 60))
        with caplog.at_level(logging.WARNING, logger="asciigraph"):
            text = g.draw()
        assert "~" not in text
        assert "Ignoring skip range" in caplog.text


class TestGeometry:
    def test_block_width(self):
        g = Graph(plot_height=6).set_1d_data([1, 2, 3]).set_block_width(4).set_pretty_y(None)
        assert "╭" + "─" * 12 + "╮" in g.draw()

    def test_downsampling_keeps_width(self):
        g = Graph(plot_width=10, plot_height=5).set_1d_data(list(range(100)))
        assert "╭" + "─" * 10 + "╮" in g.draw()

    def test_odd_width_is_bumped_when_downsampling(self, caplog):
        g = Graph(plot_width=11, plot_height=5).set_1d_data(list(range(100)))
        with caplog.at_level(logging.WARNING, logger="asciigraph"):
            text = g.draw()
        assert "╭" + "─" * 12 + "╮" in text
        assert "odd plot width" in caplog.text

    def test_tiny_plot_is_clamped(self, caplog):
        g = Graph(plot_width=1, plot_height=1).set_1d_data([1, 2])
        with caplog.at_level(logging.WARNING, logger="asciigraph"):
            text = g.draw()
        assert "╭───╮" in text
        assert "too small" in caplog.text

    def test_quiet_demotes_warnings(self, caplog):
        g = Graph(plot_width=1, plot_height=1).set_1d_data([1, 2]).set_quiet(True)
        with caplog.at_level(logging.WARNING, logger="asciigraph"):
            g.draw()
        assert caplog.records == []

    def test_paddings(self):
        g = small_graph().set_paddings((1, 0, 2, 0))
        lines = lines_of(g)
        assert lines[0] == " " * 13
        assert lines[1:] == ["  " + line for line in SMALL]

    def test_padding_setters(self):
        g = small_graph().set_padding_top(1).set_padding_bottom(2).set_padding_left(3).set_padding_right(4)
        assert g.paddings == (1, 2, 3, 4)


class TestDecorations:
    def test_title_is_centered_on_top(self):
        lines = lines_of(small_graph().set_title("t"))
        assert lines[0] == "     t     "
        assert lines[1:] == SMALL

    def test_big_title_is_boxed(self):
        lines = lines_of(small_graph().set_title("t").set_big_title(True))
        assert lines[:3] == ["   ╭───╮   ", "   │ t │   ", "   ╰───╯   "]

    def test_custom_title_renderer(self):
        g = small_graph().set_title("t").set_big_title(True, lambda title: boxed_title(title.upper()))
        assert "T" in g.draw()

    def test_axis_labels(self):
        lines = lines_of(small_graph().set_x_axis_label("x").set_y_axis_label("y"))
        assert lines[0] == "y" + " " * 10
        assert lines[1:-1] == SMALL
        assert lines[-1] == " " * 10 + "x"

    def test_labeled_interval_sits_under_plot(self):
        g = Graph(plot_width=20, plot_height=4).set_1d_data(list(range(10))).add_labeled_interval(0, 4, "ab")
        lines = lines_of(g)
        plot_left = lines[0].index("╭") + 1

        row = next(line for line in lines if "<" in line)
        assert row.index("<──ab───>") == plot_left

    def test_intervals_go_below_x_axis_label(self):
        g = (
            Graph(plot_width=20, plot_height=4)
            .set_1d_data(list(range(10)))
            .set_x_axis_label("a very long x axis label here")
            .add_labeled_interval(0, 4, "ab")
        )
        lines = lines_of(g)
        plot_left = lines[0].index("╭") + 1

        assert lines[-2].endswith("a very long x axis label here")
        assert lines[-1].index("<──ab───>") == plot_left

    def test_zero_width_interval_adds_no_row(self):
        base = Graph(plot_width=20, plot_height=4).set_1d_data(list(range(10)))
        plain = base.draw()
        assert base.add_labeled_interval(5, 5, "x").draw() == plain


class TestColors:
    def test_html(self):
        g = small_graph().set_primary_color(Color.RED).set_color_mode(ColorMode.html())
        assert '<span class="red">' in g.draw()

    def test_terminal_keeps_rectangle(self):
        g = small_graph().set_title("t").set_title_color(Color.GOLD).set_primary_color(Color.BLUE)
        g.set_color_mode(ColorMode.terminal())
        text = g.draw()

        assert "\x1b[38;2;" in text
        assert {count_visible_chars(line) for line in text.split("\n")} == {11}

    def test_no_color_mode_drops_colors(self):
        g = small_graph().set_primary_color(Color.RED)
        assert g.draw().split("\n") == SMALL


def test_y_label_formatter():
    g = small_graph().set_y_label_formatter(lambda v: f"<{v}>")
    assert "<4>" in g.draw()


def test_labeled_data_uses_labels():
    g = Graph(plot_width=4, plot_height=4).set_1d_labeled_data([("mon", 1), ("tue", 2)])
    assert "mon" in g.draw()


def test_empty_data_raises():
    with pytest.raises(Exception, match="empty"):
        Graph().set_1d_data([]).draw()

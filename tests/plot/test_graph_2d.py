import pytest
from asciigraph.plot import Graph
from asciigraph.plot.render2d import QUADRANTS, pack_quadrants


def test_sparse_points():
    g = Graph().set_2d_data([(0, 0, "*"), (2, 1, "o")], ["a", None, "c"], ["top", None])

    assert (g.plot_width, g.plot_height) == (3, 2)
    assert g.draw().split("\n") == [
        "    ╭───╮",
        "top │*  │",
        "    │  o│",
        "    ╰───╯",
        "     a   ",
    ]


def test_newline_glyph_is_blank():
    g = Graph().set_2d_data([(0, 0, "\n")], ["a"], ["b"])
    assert g.draw().split("\n")[1] == "b │ │"


def test_x_labels_alternate_rows():
    g = Graph().set_2d_data([], ["a", None, "c"], [None]).set_x_label_interval(2)
    assert g.draw().split("\n")[-2:] == ["  a   ", "    c "]


def test_x_labels_closer_than_interval_are_dropped():
    g = Graph().set_2d_data([], ["a", None, "c"], [None])
    assert g.draw().split("\n")[-1] == "  a   "


def test_high_resolution():
    g = Graph().set_2d_data_high_resolution([[True, False], [False, True]], ["x"], ["y"])
    assert "│▚│" in g.draw()


def test_high_resolution_blank_quadrant():
    g = Graph().set_2d_data_high_resolution([[False, False], [False, False]], ["x"], ["y"])
    assert "│ │" in g.draw()


class TestPackQuadrants:
    def test_all_fifteen_patterns(self):
        assert len(QUADRANTS) == 15
        assert len(set(QUADRANTS.values())) == 15

    def test_layout(self):
        bitmap = [
            [True, True, False, False],
            [False, False, False, True],
        ]
        points = pack_quadrants(bitmap, 2, 1)
        assert [(p.x, p.y, p.glyph) for p in points] == [(0, 0, "▀"), (1, 0, "▗")]

    def test_wrong_shape(self):
        with pytest.raises(ValueError):
            pack_quadrants([[True]], 1, 1)


def test_labeled_interval_uses_columns():
    g = Graph().set_2d_data([], [None] * 12, [None]).add_labeled_interval(1, 10, "ab")
    lines = g.draw().split("\n")
    plot_left = lines[0].index("╭") + 1

    assert lines[-1].index("<") == plot_left + 1

import pytest
from asciigraph.plot import Graph, GraphConfigError, NoDataError

# Helpers


def codes(graph: Graph) -> list[str]:
    return [e.code for e in graph.validate()]


def test_valid_graph_has_no_errors():
    assert Graph().set_1d_data([1, 2, 3]).validate() == []


def test_no_data():
    errors = Graph().validate()
    assert len(errors) == 1
    assert isinstance(errors[0], NoDataError)


def test_draw_without_data_raises():
    with pytest.raises(NoDataError):
        Graph().draw()


def test_empty_1d_data():
    assert codes(Graph().set_1d_data([])) == ["empty_data"]


def test_y_min_above_y_max():
    g = Graph().set_1d_data([1]).set_y_range(5, 1)
    assert codes(g) == ["invalid_y_range"]
    with pytest.raises(GraphConfigError, match="invalid_y_range"):
        g.draw()


def test_equal_bounds_are_valid():
    assert codes(Graph().set_1d_data([1]).set_y_range(2, 2)) == []


def test_reversed_interval():
    assert codes(Graph().set_1d_data([1]).add_labeled_interval(4, 2, "x")) == ["invalid_interval"]


def test_zero_width_interval_is_valid():
    assert codes(Graph().set_1d_data([1]).add_labeled_interval(5, 5, "x")) == []


def test_2d_point_out_of_range():
    g = Graph().set_2d_data([(3, 0, "*")], ["a", "b"], ["c"])
    errors = g.validate()
    assert [e.code for e in errors] == ["coordinate_out_of_range"]
    assert errors[0].details == {"x": 3, "y": 0}


def test_2d_label_length_mismatch():
    g = Graph().set_2d_data([], ["a", "b"], ["c"]).set_plot_width(5)
    assert codes(g) == ["label_length_mismatch"]


def test_bad_dimensions():
    g = Graph(plot_width=-1).set_1d_data([1]).set_block_width(0)
    assert codes(g) == ["invalid_dimension", "invalid_dimension"]


def test_all_problems_are_reported():
    g = Graph().set_y_range(3, 1).add_labeled_interval(2, 1, "x")
    assert codes(g) == ["no_data", "invalid_y_range", "invalid_interval"]


def test_error_str_has_code():
    err = Graph().validate()[0]
    assert str(err).startswith("no_data: ")

import json

from asciigraph.cli.exitcodes import EXIT_CONFIG_ERROR, EXIT_OK
from asciigraph.cli.main import main
from asciigraph.color import Color, ColorMode, count_visible_chars
from asciigraph.plot import Graph

# Helpers


def write_config(tmp_path, data, name="graph.json"):
    path = tmp_path / name
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


class TestRender:
    def test_render(self, tmp_path, capsys):
        config = write_config(tmp_path, {"1d_data": [1, 2, 3, 4], "plot_width": 4, "plot_height": 4, "pretty_y": None})

        assert main(["render", config]) == EXIT_OK

        out = capsys.readouterr().out
        assert out.startswith("     ╭────╮\n")
        assert out.endswith("      0    \n")

    def test_color_flag_overrides_config(self, tmp_path, capsys):
        config = write_config(tmp_path, {"1d_data": [1, 2], "primary_color": "red", "color_mode": "terminal"})

        assert main(["render", config, "--color", "html", "--html-prefix", "g-"]) == EXIT_OK
        out = capsys.readouterr().out
        assert '<span class="g-red">' in out
        assert "\x1b[" not in out

    def test_missing_config(self, tmp_path, capsys):
        assert main(["render", str(tmp_path / "nope.json")]) == EXIT_CONFIG_ERROR
        assert "config_not_found" in capsys.readouterr().err

    def test_graph_without_data(self, tmp_path, capsys):
        config = write_config(tmp_path, {"title": "nothing"})

        assert main(["render", config]) == EXIT_CONFIG_ERROR
        assert "no_data" in capsys.readouterr().err

    def test_bad_key(self, tmp_path, capsys):
        config = write_config(tmp_path, {"plot_width": "wide", "1d_data": [1]})

        assert main(["render", config]) == EXIT_CONFIG_ERROR
        assert "type_error" in capsys.readouterr().err


class TestMerge:
    def test_horizontal(self, tmp_path, capsys):
        a = tmp_path / "a.txt"
        b = tmp_path / "b.txt"
        a.write_text("ab\ncd\n", encoding="utf-8")
        b.write_text("x\n", encoding="utf-8")

        assert main(["merge", str(a), str(b), "--horizontal", "--margin", "1"]) == EXIT_OK
        assert capsys.readouterr().out == "ab x\ncd  \n"

    def test_vertical_center(self, tmp_path, capsys):
        a = tmp_path / "a.txt"
        b = tmp_path / "b.txt"
        a.write_text("a", encoding="utf-8")
        b.write_text("abc", encoding="utf-8")

        assert main(["merge", str(a), str(b), "--align", "center"]) == EXIT_OK
        assert capsys.readouterr().out == " a \nabc\n"

    def test_terminal_colored_drawings(self, tmp_path, capsys):
        a = tmp_path / "a.txt"
        b = tmp_path / "b.txt"
        colored = Graph(plot_width=6, plot_height=4).set_1d_data([1, 2, 3, 4]).set_primary_color(Color.RED)
        colored.set_color_mode(ColorMode.terminal())
        a.write_text(colored.draw(), encoding="utf-8")
        b.write_text(colored.draw(), encoding="utf-8")

        assert main(["merge", str(a), str(b), "--horizontal", "--margin", "1", "--color", "terminal"]) == EXIT_OK
        lines = capsys.readouterr().out.rstrip("\n").split("\n")

        width = count_visible_chars(colored.draw().split("\n")[0])
        assert any("\x1b[38;2;" in line for line in lines)
        assert [count_visible_chars(line) for line in lines] == [2 * width + 1] * len(lines)

    def test_missing_file(self, tmp_path, capsys):
        a = tmp_path / "a.txt"
        a.write_text("a", encoding="utf-8")

        assert main(["merge", str(a), str(tmp_path / "b.txt")]) == EXIT_CONFIG_ERROR
        assert "does not exist" in capsys.readouterr().err

import argparse
import logging
import sys

from asciigraph._version import __version__
from asciigraph.canvas import Alignment
from asciigraph.cli import merge, render
from asciigraph.cli.exitcodes import EXIT_CONFIG_ERROR, EXIT_ENGINE_ERROR
from asciigraph.plot.errors import AsciiGraphError

COLOR_CHOICES = ["none", "terminal", "terminal-bg", "html"]


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-v", "--verbose", action="store_true", help="Log layout decisions (debug level).")

    p = argparse.ArgumentParser(prog="asciigraph", description="Asciigraph: plots drawn with text characters")
    p.add_argument("--version", action="version", version=f"asciigraph {__version__}")

    sub = p.add_subparsers(dest="cmd", required=True)

    # render
    render_p = sub.add_parser("render", parents=[common], help="Draw a graph from a JSON/YAML config file.")
    render_p.add_argument("config", help="Config file (.json, .yaml, .yml).")
    render_p.add_argument(
        "--color",
        choices=COLOR_CHOICES,
        default=None,
        help="Color mode (default: the config file's color_mode, else none).",
    )
    render_p.add_argument("--html-prefix", default="", help="CSS class prefix for --color html.")

    # merge
    merge_p = sub.add_parser("merge", parents=[common], help="Place two text drawings next to each other.")
    merge_p.add_argument("first", help="First text file (top, or left with --horizontal).")
    merge_p.add_argument("second", help="Second text file.")
    merge_p.add_argument("--horizontal", action="store_true", help="Merge side by side instead of stacking.")
    merge_p.add_argument("--margin", type=int, default=0, help="Blank rows/columns between the two (default: 0).")
    merge_p.add_argument(
        "--align",
        choices=[a.value for a in Alignment],
        default="first",
        help="Alignment of the smaller drawing (default: first).",
    )
    merge_p.add_argument(
        "--color",
        choices=COLOR_CHOICES,
        default=None,
        help="Color mode both drawings were rendered with, so escape codes take no columns (default: none).",
    )
    merge_p.add_argument("--html-prefix", default="", help="CSS class prefix for --color html.")

    return p


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        if args.cmd == "render":
            return render.run(config=args.config, color=args.color, html_prefix=args.html_prefix)

        if args.cmd == "merge":
            return merge.run(
                first=args.first,
                second=args.second,
                horizontal=args.horizontal,
                margin=args.margin,
                align=args.align,
                color=args.color,
                html_prefix=args.html_prefix,
            )

        print("Unknown command.", file=sys.stderr)
        return EXIT_ENGINE_ERROR

    except AsciiGraphError as e:
        print(f"asciigraph: error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    except Exception as e:
        print(f"asciigraph: error: {e}", file=sys.stderr)
        return EXIT_ENGINE_ERROR


def entrypoint() -> None:
    raise SystemExit(main())

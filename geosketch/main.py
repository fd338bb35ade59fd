"""Command line entry point for the diagram editor."""
from __future__ import annotations

import argparse
import logging
from typing import Iterable

from geosketch import config
from geosketch.editor import DiagramEditor
from geosketch.errors import GeosketchError
from geosketch.logging_config import setup_logging
from geosketch.state.saves import load_diagram, save_diagram


logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="geosketch",
        description="Sketch point/line diagrams for geometry exercises.",
    )
    parser.add_argument("--config", help="YAML file overriding editor settings")
    parser.add_argument("--load", help="JSON diagram to open as the starting state")
    parser.add_argument("--save", help="Write the diagram to this JSON file on exit")
    parser.add_argument("--log-level", dest="log_level", help="DEBUG, INFO, WARNING, ...")
    parser.add_argument("--log-file", dest="log_file", help="Also write logs to this file")
    return parser


def main(argv: Iterable[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        cfg = config.load_config(args.config)
    except GeosketchError as exc:
        setup_logging()
        logger.error("%s", exc)
        return 1
    setup_logging(args.log_level or cfg.log_level, args.log_file)

    editor = DiagramEditor(cfg)
    try:
        if args.load:
            points, lines = load_diagram(args.load)
            editor.load_state(points, lines)
    except (GeosketchError, OSError) as exc:
        logger.error("Could not load %s: %s", args.load, exc)
        return 1

    # imported late so --help works without opening a window
    from geosketch.engine import Engine

    Engine(cfg, editor).run()

    if args.save:
        try:
            save_diagram(args.save, editor.points, editor.lines)
        except OSError as exc:
            logger.error("Could not save %s: %s", args.save, exc)
            return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

"""Command line entry point: ``graphdiff OLD NEW``."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from graphdiff.config import log_level
from graphdiff.diff import diff_graphs
from graphdiff.graph.loader import load_graph
from graphdiff.render.dot import DotRenderer

LOGGER = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="graphdiff",
        description="Render the difference between two graph descriptions as Graphviz DOT",
        add_help=False,
    )
    parser.add_argument("old_graph", help="Path to the older graph description")
    parser.add_argument("new_graph", help="Path to the newer graph description")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the diff and return the process exit status.

    Argument errors exit through :mod:`argparse` with status 2. Unreadable
    inputs return 1 before anything is written to stdout.
    """

    args = build_parser().parse_args(argv)
    logging.basicConfig(stream=sys.stderr, level=log_level(), format=LOG_FORMAT)

    graphs = []
    for path in (args.old_graph, args.new_graph):
        try:
            graphs.append(load_graph(path))
        except OSError as exc:
            LOGGER.error("Failed to read %s: %s", path, exc)
            return 1

    old, new = graphs
    diff = diff_graphs(old, new)
    if diff.is_empty():
        LOGGER.info("No differences between %s and %s", args.old_graph, args.new_graph)
    else:
        LOGGER.info("%s", diff.summary())
    DotRenderer().write(diff, sys.stdout)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI helper
    sys.exit(main())

"""Line scanner turning a graph description into a :class:`Graph`.

Each line is split at the first ``" - "``. The text before it names either a
node (no indentation) or, when indented by at least two spaces, an edge from
the most recently declared node to that name. Text after the separator is a
free-form comment and is ignored.
"""
from __future__ import annotations

import logging
import os
from typing import Iterable, Optional, Union

from .model import Graph
from .store import GraphStore

LOGGER = logging.getLogger(__name__)

SEPARATOR = " - "
EDGE_INDENT = "  "


def _strip_newline(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def parse_lines(lines: Iterable[str], *, source: str = "<input>") -> Graph:
    """Build a :class:`Graph` from ``lines``.

    Lines without the separator are skipped silently. Edge lines naming a
    target that has not been declared yet, or appearing before any node, are
    logged and skipped.
    """

    store = GraphStore()
    latest_node: Optional[str] = None

    for lineno, raw in enumerate(lines, start=1):
        line = _strip_newline(raw)
        dash = line.find(SEPARATOR)
        if dash == -1:
            continue

        name = line[:dash]
        if not name.startswith(EDGE_INDENT):
            latest_node = name
            store.add_node(name)
            continue

        target = name.strip()
        if latest_node is None:
            LOGGER.warning(
                "Edge reference to %s before any node declaration (%s:%d)",
                target,
                source,
                lineno,
            )
            continue
        if not store.has_node(target):
            LOGGER.warning(
                "Edge reference to undefined node %s (%s:%d)",
                target,
                source,
                lineno,
            )
            continue
        store.add_edge(latest_node, target)

    return store.freeze()


def load_graph(path: Union[str, os.PathLike]) -> Graph:
    """Read the graph description stored at ``path``.

    Bytes that are not valid UTF-8 are kept as lone surrogates
    (``surrogateescape``) so any readable file loads. ``OSError`` propagates
    to the caller.
    """

    with open(path, "r", encoding="utf-8", errors="surrogateescape", newline="\n") as handle:
        return parse_lines(handle, source=os.fspath(path))


__all__ = ["EDGE_INDENT", "SEPARATOR", "load_graph", "parse_lines"]

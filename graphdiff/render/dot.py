"""Graphviz DOT rendering of a :class:`~graphdiff.diff.GraphDiff`."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, TextIO

from graphdiff.diff import GraphDiff, Membership, diff_graphs
from graphdiff.graph.model import Graph

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
}


def _escape_char(char: str) -> str:
    if char in _ESCAPES:
        return _ESCAPES[char]
    if char.isprintable():
        return char
    code = ord(char)
    if 0xDC80 <= code <= 0xDCFF:
        # raw input byte that was not valid UTF-8
        return f"\\x{code - 0xDC00:02x}"
    if code < 0x80:
        return f"\\x{code:02x}"
    if code <= 0xFFFF:
        return f"\\u{code:04x}"
    return f"\\U{code:08x}"


def quote(name: str) -> str:
    """Return ``name`` as a double-quoted string literal."""

    return '"' + "".join(_escape_char(char) for char in name) + '"'


def _attributes(membership: Membership) -> str:
    color = membership.color
    if color is None:
        return ""
    return f" [color={color}]"


@dataclass
class DotRenderer:
    """Serialize a graph diff as a ``digraph`` block."""

    rankdir: str = "BT"
    indent: str = "    "

    def lines(self, diff: GraphDiff) -> Iterator[str]:
        """Yield the output lines without trailing newlines."""

        yield "digraph G {"
        yield f"  rankdir = {quote(self.rankdir)};"
        yield ""
        for node in diff.nodes:
            yield f"{self.indent}{quote(node.name)}{_attributes(node.membership)};"
        yield ""
        for edge in diff.edges:
            yield (
                f"{self.indent}{quote(edge.source)} -> {quote(edge.target)}"
                f"{_attributes(edge.membership)};"
            )
        yield "}"

    def render(self, diff: GraphDiff) -> str:
        return "".join(f"{line}\n" for line in self.lines(diff))

    def write(self, diff: GraphDiff, stream: TextIO) -> None:
        stream.write(self.render(diff))


def render_diff(old: Graph, new: Graph, *, renderer: Optional[DotRenderer] = None) -> str:
    """Diff ``old`` against ``new`` and return the DOT text."""

    return (renderer or DotRenderer()).render(diff_graphs(old, new))


__all__ = ["DotRenderer", "quote", "render_diff"]

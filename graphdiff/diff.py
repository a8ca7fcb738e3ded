"""Annotated union of two graphs."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from graphdiff.graph.model import Edge, Graph


class Membership(Enum):
    """Where an entry of the union comes from."""

    UNCHANGED = "unchanged"
    REMOVED = "removed"
    ADDED = "added"

    @property
    def color(self) -> Optional[str]:
        return _COLORS[self]

    @classmethod
    def classify(cls, in_old: bool, in_new: bool) -> "Membership":
        if in_old and in_new:
            return cls.UNCHANGED
        if in_old:
            return cls.REMOVED
        if in_new:
            return cls.ADDED
        raise ValueError("Entry is in neither graph")


_COLORS = {
    Membership.UNCHANGED: None,
    Membership.REMOVED: "red",
    Membership.ADDED: "green",
}


@dataclass(frozen=True)
class AnnotatedNode:
    name: str
    membership: Membership


@dataclass(frozen=True)
class AnnotatedEdge:
    source: str
    target: str
    membership: Membership

    @property
    def pair(self) -> Edge:
        return (self.source, self.target)


@dataclass(frozen=True)
class GraphDiff:
    """Every node and edge of ``old | new`` in sorted order, with its membership."""

    nodes: Tuple[AnnotatedNode, ...]
    edges: Tuple[AnnotatedEdge, ...]

    @property
    def added_nodes(self) -> Tuple[str, ...]:
        return tuple(n.name for n in self.nodes if n.membership is Membership.ADDED)

    @property
    def removed_nodes(self) -> Tuple[str, ...]:
        return tuple(n.name for n in self.nodes if n.membership is Membership.REMOVED)

    @property
    def added_edges(self) -> Tuple[Edge, ...]:
        return tuple(e.pair for e in self.edges if e.membership is Membership.ADDED)

    @property
    def removed_edges(self) -> Tuple[Edge, ...]:
        return tuple(e.pair for e in self.edges if e.membership is Membership.REMOVED)

    def is_empty(self) -> bool:
        """Return ``True`` when both graphs have the same nodes and edges."""

        return not (self.added_nodes or self.removed_nodes or self.added_edges or self.removed_edges)

    def summary(self) -> str:
        return (
            f"Nodes: {len(self.added_nodes)} added, {len(self.removed_nodes)} removed; "
            f"Edges: {len(self.added_edges)} added, {len(self.removed_edges)} removed"
        )


def byte_key(name: str) -> bytes:
    """Return the bytes ``name`` was read from, for byte-wise ordering."""

    return name.encode("utf-8", "surrogateescape")


def _edge_key(edge: Edge) -> Tuple[bytes, bytes]:
    return (byte_key(edge[0]), byte_key(edge[1]))


def diff_graphs(old: Graph, new: Graph) -> GraphDiff:
    """Return the annotated union of ``old`` and ``new``.

    Names sort by their UTF-8 bytes, undecodable input bytes included. Edges
    sort by source, then target.
    """

    nodes = tuple(
        AnnotatedNode(name, Membership.classify(name in old.nodes, name in new.nodes))
        for name in sorted(old.nodes | new.nodes, key=byte_key)
    )
    edges = []
    for source, target in sorted(old.edges | new.edges, key=_edge_key):
        edge = (source, target)
        membership = Membership.classify(edge in old.edges, edge in new.edges)
        edges.append(AnnotatedEdge(source, target, membership))
    return GraphDiff(nodes=nodes, edges=tuple(edges))


__all__ = ["AnnotatedEdge", "AnnotatedNode", "GraphDiff", "Membership", "byte_key", "diff_graphs"]

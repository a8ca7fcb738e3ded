"""Mutable NetworkX backed builder for :class:`~graphdiff.graph.model.Graph`."""
from __future__ import annotations

from dataclasses import dataclass, field

import networkx as nx

from .model import Graph


@dataclass
class GraphStore:
    """Lightweight wrapper around :class:`networkx.DiGraph`.

    The loader fills a store line by line and calls :meth:`freeze` once the
    input is exhausted. Nothing else mutates graph content.
    """

    graph: nx.DiGraph = field(default_factory=nx.DiGraph)

    def add_node(self, name: str) -> None:
        """Add ``name`` to the underlying graph."""

        self.graph.add_node(name)

    def add_edge(self, source: str, target: str) -> None:
        """Record the directed edge ``source -> target``.

        Both endpoints must already be nodes; :meth:`networkx.DiGraph.add_edge`
        would otherwise create them implicitly.
        """

        for name in (source, target):
            if name not in self.graph:
                raise KeyError(f"Unknown node: {name!r}")
        self.graph.add_edge(source, target)

    def has_node(self, name: str) -> bool:
        return name in self.graph

    def freeze(self) -> Graph:
        """Return an immutable :class:`Graph` snapshot of the store."""

        return Graph(nodes=frozenset(self.graph.nodes), edges=frozenset(self.graph.edges))

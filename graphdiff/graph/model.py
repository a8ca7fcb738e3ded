"""Immutable graph value produced by the loader."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Tuple

Edge = Tuple[str, str]


@dataclass(frozen=True)
class Graph:
    """A set of node names and a set of directed ``(source, target)`` pairs."""

    nodes: FrozenSet[str] = field(default_factory=frozenset)
    edges: FrozenSet[Edge] = field(default_factory=frozenset)

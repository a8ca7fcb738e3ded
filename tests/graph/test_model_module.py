"""Tests for :mod:`graphdiff.graph.model`."""

from __future__ import annotations

import dataclasses

import pytest

from graphdiff.graph.model import Graph


def test_default_graph_has_no_content():
    graph = Graph()
    assert graph.nodes == frozenset()
    assert graph.edges == frozenset()


def test_graph_is_immutable():
    graph = Graph(nodes=frozenset({"A"}))
    with pytest.raises(dataclasses.FrozenInstanceError):
        graph.nodes = frozenset()  # type: ignore[misc]


def test_graphs_compare_by_content():
    first = Graph(nodes=frozenset({"A", "B"}), edges=frozenset({("A", "B")}))
    second = Graph(nodes=frozenset({"B", "A"}), edges=frozenset({("A", "B")}))
    assert first == second

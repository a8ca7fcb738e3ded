"""graphdiff package initialization.

Load two line-oriented graph descriptions, diff them and render the merged
graph as Graphviz DOT with additions in green and removals in red.
"""

from .diff import GraphDiff, Membership, diff_graphs
from .graph import Graph, load_graph, parse_lines
from .render import DotRenderer, render_diff

__all__ = [
    "DotRenderer",
    "Graph",
    "GraphDiff",
    "Membership",
    "diff_graphs",
    "load_graph",
    "parse_lines",
    "render_diff",
]

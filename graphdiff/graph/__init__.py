"""Graph subpackage containing the value type, its builder and the loader."""

from .loader import load_graph, parse_lines
from .model import Edge, Graph
from .store import GraphStore

__all__ = [
    "Edge",
    "Graph",
    "GraphStore",
    "load_graph",
    "parse_lines",
]

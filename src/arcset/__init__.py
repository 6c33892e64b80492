"""Feedback arc set heuristics for directed graphs."""

from .fas import get_heuristic, is_feedback_arc_set, list_heuristics
from .formats import graph_from_file, read_metis, write_metis
from .graph import DiGraph, Direction

__version__ = "0.1.0"

__all__ = [
    "DiGraph",
    "Direction",
    "get_heuristic",
    "graph_from_file",
    "is_feedback_arc_set",
    "list_heuristics",
    "read_metis",
    "write_metis",
]

from .base import FeedbackArcSetHeuristic, is_feedback_arc_set, remove_edges, verify_solution
from .divide_and_conquer import DivideAndConquerHeuristic
from .greedy import GreedyHeuristic
from .registry import describe_heuristic, get_heuristic, list_heuristics

__all__ = [
    "DivideAndConquerHeuristic",
    "FeedbackArcSetHeuristic",
    "GreedyHeuristic",
    "describe_heuristic",
    "get_heuristic",
    "is_feedback_arc_set",
    "list_heuristics",
    "remove_edges",
    "verify_solution",
]

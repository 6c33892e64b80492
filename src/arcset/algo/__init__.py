from .cycle import CycleDetection, is_cyclic
from .ordering import leftward_edges, sort_by_indegree_asc, topological_sort

__all__ = [
    "CycleDetection",
    "is_cyclic",
    "leftward_edges",
    "sort_by_indegree_asc",
    "topological_sort",
]

from .digraph import DiGraph, Direction, Edge, VertexId

__all__ = ["DiGraph", "Direction", "Edge", "VertexId"]
